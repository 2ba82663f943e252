"""Dispatch of parsed directives onto the scoreboard engine."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from loguru import logger

from ..board.engine import ScoreboardEngine
from ..board.models import PENALTY_MINUTES
from ..board.reporter import Event, RecordingReporter
from ..board.results import Reason, Result
from .directives import (
    AddTeam,
    Directive,
    DirectiveError,
    End,
    Flush,
    Freeze,
    QueryRank,
    QuerySubmission,
    Scroll,
    Start,
    Submit,
    parse_directive,
)


@dataclass
class Step:
    """One processed directive together with the events it produced."""

    directive: Optional[Directive]
    result: Result
    events: List[Event] = field(default_factory=list)
    line: str = ""
    line_number: int = 0


class ContestSession:
    """
    Applies directives to an engine strictly in arrival order.

    The engine reports into a RecordingReporter that is drained after each
    directive, so every Step carries exactly the events it caused.
    """

    def __init__(
        self,
        engine: Optional[ScoreboardEngine] = None,
        penalty_minutes: int = PENALTY_MINUTES,
    ):
        self.reporter = RecordingReporter()
        if engine is None:
            engine = ScoreboardEngine(penalty_minutes=penalty_minutes)
        engine.reporter = self.reporter
        self.engine = engine

    @property
    def finished(self) -> bool:
        return self.engine.ended

    def dispatch(self, directive: Directive) -> Step:
        """Apply a single directive."""
        result = self._apply(directive)
        if not result.ok:
            logger.warning(f"{type(directive).__name__} rejected: {result.reason.value}")
        return Step(directive, result, self.reporter.drain())

    def _apply(self, directive: Directive) -> Result:
        engine = self.engine
        if isinstance(directive, AddTeam):
            return engine.add_team(directive.name)
        if isinstance(directive, Start):
            return engine.start(directive.duration, directive.problem_count)
        if isinstance(directive, Submit):
            return engine.submit(
                directive.problem, directive.team, directive.outcome, directive.timestamp
            )
        if isinstance(directive, Flush):
            return engine.flush()
        if isinstance(directive, Freeze):
            return engine.freeze()
        if isinstance(directive, Scroll):
            return engine.scroll()
        if isinstance(directive, QueryRank):
            return engine.rank_of(directive.team)
        if isinstance(directive, QuerySubmission):
            return engine.last_submission(directive.team, directive.problem, directive.outcome)
        if isinstance(directive, End):
            return engine.end()
        raise TypeError(f"Unsupported directive: {directive!r}")

    def feed(self, line: str, line_number: int = 0) -> Optional[Step]:
        """Parse and apply one line. Blank lines return None."""
        try:
            directive = parse_directive(line)
        except DirectiveError as e:
            logger.warning(f"Line {line_number}: {e}")
            return Step(
                None,
                Result.failure(Reason.INVALID_DIRECTIVE, str(e)),
                line=line.rstrip("\n"),
                line_number=line_number,
            )
        if directive is None:
            return None

        step = self.dispatch(directive)
        step.line = line.rstrip("\n")
        step.line_number = line_number
        return step

    def run(self, lines: Iterable[str]) -> Iterator[Step]:
        """Process lines until the input or the contest ends."""
        for number, line in enumerate(lines, 1):
            if self.finished:
                logger.debug(f"Contest ended; ignoring input from line {number}")
                break
            step = self.feed(line, number)
            if step is not None:
                yield step
