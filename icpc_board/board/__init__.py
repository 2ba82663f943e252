"""Scoreboard engine and its data models."""

from .engine import ScoreboardEngine
from .models import Outcome, ProblemRecord, RankChange, Snapshot, StandingRow, Submission
from .reporter import NullReporter, RecordingReporter, ScoreChangeReporter
from .results import Reason, Result

__all__ = [
    "ScoreboardEngine",
    "Outcome",
    "ProblemRecord",
    "RankChange",
    "Snapshot",
    "StandingRow",
    "Submission",
    "NullReporter",
    "RecordingReporter",
    "ScoreChangeReporter",
    "Reason",
    "Result",
]
