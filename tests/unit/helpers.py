"""Builders shared by the unit tests."""

from icpc_board.board import Outcome
from icpc_board.board.models import Submission, TeamState

AC = Outcome.ACCEPTED
WA = Outcome.WRONG_ANSWER
RE = Outcome.RUNTIME_ERROR
TLE = Outcome.TIME_LIMIT_EXCEED


def make_team(name, *submissions, problems="ABC"):
    """Build a team and apply (problem, outcome, time) tuples directly."""
    team = TeamState(name)
    team.open_problems(problems)
    for problem, outcome, time in submissions:
        team.problems[problem].apply(Submission(problem, name, outcome, time))
    team.invalidate()
    return team
