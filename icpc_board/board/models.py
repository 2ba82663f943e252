"""Data models for contest scoreboard entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


PENALTY_MINUTES = 20
PROBLEM_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Outcome(str, Enum):
    """Judge verdict attached to a submission."""

    ACCEPTED = "Accepted"
    WRONG_ANSWER = "Wrong_Answer"
    RUNTIME_ERROR = "Runtime_Error"
    TIME_LIMIT_EXCEED = "Time_Limit_Exceed"

    @classmethod
    def parse(cls, text: str) -> "Outcome":
        """Look up an outcome by its textual value."""
        for outcome in cls:
            if outcome.value == text:
                return outcome
        raise ValueError(f"Unknown submission outcome: {text!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Submission:
    """Represents a single judged submission."""

    problem: str
    team: str
    outcome: Outcome
    timestamp: int

    @property
    def accepted(self) -> bool:
        return self.outcome is Outcome.ACCEPTED


@dataclass
class ProblemRecord:
    """
    Solve state of one problem for one team.

    `submissions` is the audit trail and receives everything filed against
    the problem. `pending` only holds submissions that arrived while the
    scoreboard was frozen and the problem was still unsolved.
    """

    problem: str
    solved: bool = False
    solve_time: int = 0
    wrong_attempts: int = 0
    submissions: List[Submission] = field(default_factory=list)
    pending: List[Submission] = field(default_factory=list)

    def apply(self, submission: Submission) -> bool:
        """
        Apply a visible submission. Returns True if it solved the problem.

        Once solved, solve_time and wrong_attempts never change again.
        """
        if self.solved:
            return False
        if submission.accepted:
            self.solved = True
            self.solve_time = submission.timestamp
            return True
        self.wrong_attempts += 1
        return False

    def reveal(self) -> bool:
        """Apply and clear the pending queue. Returns True if newly solved."""
        was_solved = self.solved
        for submission in self.pending:
            self.apply(submission)
        self.pending.clear()
        return self.solved and not was_solved


@dataclass(frozen=True)
class TeamAggregate:
    """Derived ranking figures for a team."""

    solved: int = 0
    penalty: int = 0
    solve_times: Tuple[int, ...] = ()


class TeamState:
    """A team with its per-problem records and a cached aggregate."""

    def __init__(self, name: str, penalty_minutes: int = PENALTY_MINUTES):
        self.name = name
        self.penalty_minutes = penalty_minutes
        self.problems: Dict[str, ProblemRecord] = {}
        self.history: List[Submission] = []
        self._aggregate: Optional[TeamAggregate] = None

    def __repr__(self) -> str:
        return f"TeamState({self.name!r})"

    def open_problems(self, letters: str) -> None:
        """Create an unsolved record for every problem letter."""
        self.problems = {letter: ProblemRecord(letter) for letter in letters}
        self.invalidate()

    def invalidate(self) -> None:
        self._aggregate = None

    @property
    def aggregate(self) -> TeamAggregate:
        if self._aggregate is None:
            self._aggregate = self._compute_aggregate()
        return self._aggregate

    def _compute_aggregate(self) -> TeamAggregate:
        solved = [record for record in self.problems.values() if record.solved]
        penalty = sum(
            record.solve_time + self.penalty_minutes * record.wrong_attempts
            for record in solved
        )
        times = sorted((record.solve_time for record in solved), reverse=True)
        return TeamAggregate(solved=len(solved), penalty=penalty, solve_times=tuple(times))

    def pending_problems(self) -> List[str]:
        """Problem letters with unrevealed submissions, smallest first."""
        return sorted(letter for letter, record in self.problems.items() if record.pending)


class CellState(str, Enum):
    """Display state of a single scoreboard cell."""

    UNATTEMPTED = "unattempted"
    SOLVED = "solved"
    UNSOLVED = "unsolved"
    HIDDEN = "hidden"


@dataclass(frozen=True)
class ProblemView:
    """Read-only view of a ProblemRecord for the formatting layer."""

    problem: str
    solved: bool
    wrong_attempts: int
    pending: int
    frozen: bool

    @classmethod
    def of(cls, record: ProblemRecord, frozen: bool) -> "ProblemView":
        return cls(
            problem=record.problem,
            solved=record.solved,
            wrong_attempts=record.wrong_attempts,
            pending=len(record.pending),
            frozen=frozen,
        )

    @property
    def state(self) -> CellState:
        if self.frozen and not self.solved and self.pending > 0:
            return CellState.HIDDEN
        if self.solved:
            return CellState.SOLVED
        if self.wrong_attempts > 0:
            return CellState.UNSOLVED
        return CellState.UNATTEMPTED


@dataclass(frozen=True)
class StandingRow:
    """One line of a ranking snapshot."""

    team: str
    rank: int
    solved: int
    penalty: int
    problems: Tuple[ProblemView, ...] = ()


@dataclass(frozen=True)
class Snapshot:
    """Full ranking emitted on flush and around a scroll."""

    trigger: str
    rows: Tuple[StandingRow, ...]
    frozen: bool = False


@dataclass(frozen=True)
class RankChange:
    """A team overtaking others while the scoreboard is scrolled."""

    team: str
    overtaken: str
    solved: int
    penalty: int
    old_rank: int
    new_rank: int


@dataclass(frozen=True)
class RankQuery:
    """Answer to a ranking query."""

    team: str
    rank: int
    frozen: bool
