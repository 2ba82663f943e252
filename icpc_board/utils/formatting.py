"""Plain-text rendering of directive results and scoreboards."""

from typing import List, Optional

from ..board.models import CellState, ProblemView, RankChange, RankQuery, StandingRow, Submission
from ..board.results import Reason, Result
from ..feed.directives import (
    AddTeam,
    Directive,
    End,
    Flush,
    Freeze,
    QueryRank,
    QuerySubmission,
    Scroll,
    Start,
    Submit,
)

FROZEN_WARNING = (
    "[Warning]Scoreboard is frozen. The ranking may be inaccurate until it were scrolled."
)

SUCCESS = {
    AddTeam: "[Info]Add successfully.",
    Start: "[Info]Competition starts.",
    Flush: "[Info]Flush scoreboard.",
    Freeze: "[Info]Freeze scoreboard.",
    Scroll: "[Info]Scroll scoreboard.",
    QueryRank: "[Info]Complete query ranking.",
    QuerySubmission: "[Info]Complete query submission.",
    End: "[Info]Competition ends.",
}

VERB = {
    AddTeam: "Add",
    Start: "Start",
    Submit: "Submit",
    Flush: "Flush",
    Freeze: "Freeze",
    Scroll: "Scroll",
    QueryRank: "Query ranking",
    QuerySubmission: "Query submission",
    End: "End",
}

REASON_TEXT = {
    Reason.DUPLICATE_TEAM: "duplicated team name.",
    Reason.ALREADY_STARTED: "competition has started.",
    Reason.NOT_STARTED: "competition has not started.",
    Reason.ALREADY_FROZEN: "scoreboard has been frozen.",
    Reason.NOT_FROZEN: "scoreboard has not been frozen.",
    Reason.TEAM_NOT_FOUND: "cannot find the team.",
    Reason.PROBLEM_NOT_FOUND: "cannot find the problem.",
    Reason.ALREADY_ENDED: "competition has ended.",
}


def format_cell(view: ProblemView) -> str:
    """
    Scoreboard cell for one problem.

    `+`/`+N` solved, `.`/`-N` unsolved, `0/P` or `-N/P` hidden with P
    unrevealed submissions.
    """
    state = view.state
    if state is CellState.HIDDEN:
        prefix = "0" if view.wrong_attempts == 0 else f"-{view.wrong_attempts}"
        return f"{prefix}/{view.pending}"
    if state is CellState.SOLVED:
        return "+" if view.wrong_attempts == 0 else f"+{view.wrong_attempts}"
    if state is CellState.UNSOLVED:
        return f"-{view.wrong_attempts}"
    return "."


def format_row(row: StandingRow) -> str:
    cells = " ".join(format_cell(view) for view in row.problems)
    line = f"{row.team} {row.rank} {row.solved} {row.penalty}"
    return f"{line} {cells}" if cells else line


def format_change(change: RankChange) -> str:
    return f"{change.team} {change.overtaken} {change.solved} {change.penalty}"


def format_submission(submission: Optional[Submission]) -> str:
    if submission is None:
        return "Cannot find any submission."
    return (
        f"{submission.team} {submission.problem} "
        f"{submission.outcome.value} {submission.timestamp}"
    )


def format_failure(directive: Optional[Directive], result: Result) -> str:
    if directive is None:
        return f"[Error]Invalid directive: {result.detail}"
    verb = VERB.get(type(directive), type(directive).__name__)
    reason = REASON_TEXT.get(result.reason) or (result.detail or result.reason.value) + "."
    return f"[Error]{verb} failed: {reason}"


def status_lines(directive: Optional[Directive], result: Result) -> List[str]:
    """
    Lines announcing the outcome of a directive.

    Submissions are silent on success. Snapshot and rank-change lines are
    rendered separately from the events of the step.
    """
    if not result.ok:
        return [format_failure(directive, result)]

    message = SUCCESS.get(type(directive))
    lines = [message] if message else []

    if isinstance(directive, QueryRank):
        query: RankQuery = result.value
        if query.frozen:
            lines.append(FROZEN_WARNING)
        lines.append(f"{query.team} NOW AT RANKING {query.rank}")
    elif isinstance(directive, QuerySubmission):
        lines.append(format_submission(result.value))
    return lines
