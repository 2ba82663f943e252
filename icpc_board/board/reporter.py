"""Sinks for scoreboard events produced by the engine."""

from typing import List, Protocol, Union

from .models import RankChange, Snapshot


Event = Union[RankChange, Snapshot]


class ScoreChangeReporter(Protocol):
    """Receives rank changes during a scroll and full ranking snapshots."""

    def rank_changed(self, change: RankChange) -> None:
        ...

    def snapshot(self, snapshot: Snapshot) -> None:
        ...


class NullReporter:
    """Reporter that discards everything."""

    def rank_changed(self, change: RankChange) -> None:
        pass

    def snapshot(self, snapshot: Snapshot) -> None:
        pass


class RecordingReporter:
    """Reporter that keeps events in arrival order."""

    def __init__(self):
        self.events: List[Event] = []

    def rank_changed(self, change: RankChange) -> None:
        self.events.append(change)

    def snapshot(self, snapshot: Snapshot) -> None:
        self.events.append(snapshot)

    @property
    def changes(self) -> List[RankChange]:
        return [event for event in self.events if isinstance(event, RankChange)]

    @property
    def snapshots(self) -> List[Snapshot]:
        return [event for event in self.events if isinstance(event, Snapshot)]

    def drain(self) -> List[Event]:
        """Return and forget everything recorded so far."""
        events, self.events = self.events, []
        return events
