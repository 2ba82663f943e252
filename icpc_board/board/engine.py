"""Scoreboard engine: submissions, ranking, freeze and scroll."""

from bisect import insort
from typing import Dict, List, Optional

from loguru import logger

from .models import (
    PENALTY_MINUTES,
    PROBLEM_LETTERS,
    Outcome,
    ProblemView,
    RankChange,
    RankQuery,
    Snapshot,
    StandingRow,
    Submission,
    TeamState,
)
from .ranking import ranks_above, sort_teams
from .reporter import NullReporter, ScoreChangeReporter
from .results import Reason, Result


class ScoreboardEngine:
    """
    Owns every team and the current ranking.

    Operations never raise for expected conditions: each one returns a
    Result carrying a Reason code and leaves state untouched on failure.
    The ranking is only recomputed on flush and during scroll.
    """

    def __init__(
        self,
        reporter: Optional[ScoreChangeReporter] = None,
        penalty_minutes: int = PENALTY_MINUTES,
    ):
        self.reporter = reporter or NullReporter()
        self.penalty_minutes = penalty_minutes
        self.teams: Dict[str, TeamState] = {}
        self.ranking: List[str] = []
        self.problems = ""
        self.started = False
        self.frozen = False
        self.ended = False

    # Lifecycle

    def add_team(self, name: str) -> Result:
        """Register a team before the contest starts."""
        if self.ended:
            return Result.failure(Reason.ALREADY_ENDED)
        if self.started:
            return Result.failure(Reason.ALREADY_STARTED)
        if name in self.teams:
            return Result.failure(Reason.DUPLICATE_TEAM)

        self.teams[name] = TeamState(name, self.penalty_minutes)
        insort(self.ranking, name)
        logger.debug(f"Added team {name}")
        return Result.success()

    def start(self, duration: int, problem_count: int) -> Result:
        """Start the contest and open every (team, problem) record."""
        if self.ended:
            return Result.failure(Reason.ALREADY_ENDED)
        if self.started:
            return Result.failure(Reason.ALREADY_STARTED)
        if not 1 <= problem_count <= len(PROBLEM_LETTERS):
            return Result.failure(
                Reason.INVALID_ARGUMENT,
                f"problem count must be between 1 and {len(PROBLEM_LETTERS)}",
            )
        if duration < 0:
            return Result.failure(Reason.INVALID_ARGUMENT, "duration must be non-negative")

        self.started = True
        self.problems = PROBLEM_LETTERS[:problem_count]
        for team in self.teams.values():
            team.open_problems(self.problems)

        logger.debug(
            f"Contest started with {len(self.teams)} teams, "
            f"{problem_count} problems, {duration} minutes"
        )
        return Result.success()

    def end(self) -> Result:
        if self.ended:
            return Result.failure(Reason.ALREADY_ENDED)
        self.ended = True
        logger.debug("Contest ended")
        return Result.success()

    def _check_running(self) -> Optional[Result]:
        if self.ended:
            return Result.failure(Reason.ALREADY_ENDED)
        if not self.started:
            return Result.failure(Reason.NOT_STARTED)
        return None

    # Submissions

    def submit(self, problem: str, team: str, outcome: Outcome, timestamp: int) -> Result:
        """
        File a submission.

        Submissions to a solved problem are kept for the audit trail only.
        While frozen, submissions to unsolved problems are queued until the
        next scroll.
        """
        failure = self._check_running()
        if failure:
            return failure
        state = self.teams.get(team)
        if state is None:
            return Result.failure(Reason.TEAM_NOT_FOUND)
        record = state.problems.get(problem)
        if record is None:
            return Result.failure(Reason.PROBLEM_NOT_FOUND)

        submission = Submission(problem, team, outcome, timestamp)
        state.history.append(submission)
        record.submissions.append(submission)

        if record.solved:
            logger.debug(f"{team} resubmitted solved problem {problem}; audit only")
        elif self.frozen:
            record.pending.append(submission)
            logger.debug(f"{team} {problem} queued while frozen ({len(record.pending)} pending)")
        else:
            record.apply(submission)
            state.invalidate()
        return Result.success(submission)

    # Ranking

    def flush(self) -> Result:
        """Re-sort every team from scratch and emit a snapshot."""
        failure = self._check_running()
        if failure:
            return failure
        self._resort()
        self.reporter.snapshot(self.snapshot("flush"))
        return Result.success()

    def _resort(self) -> None:
        self.ranking = [team.name for team in sort_teams(list(self.teams.values()))]

    def standings(self) -> List[StandingRow]:
        """Current ranking as read-only rows."""
        rows = []
        for index, name in enumerate(self.ranking):
            team = self.teams[name]
            aggregate = team.aggregate
            rows.append(
                StandingRow(
                    team=name,
                    rank=index + 1,
                    solved=aggregate.solved,
                    penalty=aggregate.penalty,
                    problems=tuple(
                        ProblemView.of(team.problems[letter], self.frozen)
                        for letter in self.problems
                    ),
                )
            )
        return rows

    def snapshot(self, trigger: str) -> Snapshot:
        return Snapshot(trigger=trigger, rows=tuple(self.standings()), frozen=self.frozen)

    # Freeze and scroll

    def freeze(self) -> Result:
        failure = self._check_running()
        if failure:
            return failure
        if self.frozen:
            return Result.failure(Reason.ALREADY_FROZEN)
        self.frozen = True
        logger.debug("Scoreboard frozen")
        return Result.success()

    def scroll(self) -> Result:
        """
        Reveal every frozen result, lowest ranked team first.

        Each round reveals the smallest pending problem of the lowest ranked
        team that has one. Only a newly solved problem can move a team; it
        then climbs while it outranks the team directly above it, and every
        actual move is reported. Returns the list of rank changes.
        """
        failure = self._check_running()
        if failure:
            return failure
        if not self.frozen:
            return Result.failure(Reason.NOT_FROZEN)

        self._resort()
        self.reporter.snapshot(self.snapshot("scroll_start"))

        changes = []
        while True:
            target = self._lowest_pending()
            if target is None:
                break
            index, letter = target
            team = self.teams[self.ranking[index]]

            newly_solved = team.problems[letter].reveal()
            team.invalidate()
            logger.debug(
                f"Revealed {team.name} problem {letter} at rank {index + 1}"
                f"{' (solved)' if newly_solved else ''}"
            )
            if not newly_solved:
                continue

            change = self._climb(index)
            if change is not None:
                changes.append(change)
                self.reporter.rank_changed(change)

        self.frozen = False
        logger.debug(f"Scroll finished with {len(changes)} rank changes")
        self.reporter.snapshot(self.snapshot("scroll_end"))
        return Result.success(changes)

    def _lowest_pending(self):
        """Ranking index and problem letter of the next reveal, or None."""
        for index in range(len(self.ranking) - 1, -1, -1):
            pending = self.teams[self.ranking[index]].pending_problems()
            if pending:
                return index, pending[0]
        return None

    def _climb(self, index: int) -> Optional[RankChange]:
        """Move the team at `index` up to its new place and describe the move."""
        team = self.teams[self.ranking[index]]
        position = index
        while position > 0 and ranks_above(team, self.teams[self.ranking[position - 1]]):
            position -= 1
        if position == index:
            return None

        self.ranking.pop(index)
        self.ranking.insert(position, team.name)
        aggregate = team.aggregate
        logger.debug(f"{team.name} moved from rank {index + 1} to {position + 1}")
        return RankChange(
            team=team.name,
            overtaken=self.ranking[position + 1],
            solved=aggregate.solved,
            penalty=aggregate.penalty,
            old_rank=index + 1,
            new_rank=position + 1,
        )

    # Queries

    def rank_of(self, team: str) -> Result:
        """1-based position of a team; flags whether the board is frozen."""
        if team not in self.teams:
            return Result.failure(Reason.TEAM_NOT_FOUND)
        return Result.success(RankQuery(team, self.ranking.index(team) + 1, self.frozen))

    def last_submission(
        self,
        team: str,
        problem: Optional[str] = None,
        outcome: Optional[Outcome] = None,
    ) -> Result:
        """
        Latest submission of a team matching the optional filters.

        Frozen submissions are included. Problems are scanned in letter
        order and arrivals in order within each problem; only a strictly
        greater timestamp replaces the match, so ties go to the smallest
        letter, then to the earliest arrival. A successful result with no
        value means nothing matched.
        """
        state = self.teams.get(team)
        if state is None:
            return Result.failure(Reason.TEAM_NOT_FOUND)

        latest = None
        for letter in sorted(state.problems):
            if problem is not None and letter != problem:
                continue
            for submission in state.problems[letter].submissions:
                if outcome is not None and submission.outcome is not outcome:
                    continue
                if latest is None or submission.timestamp > latest.timestamp:
                    latest = submission
        return Result.success(latest)
