"""Total order over teams used by the scoreboard."""

from functools import cmp_to_key
from typing import List, Sequence

from .models import TeamState


def compare_teams(first: TeamState, second: TeamState) -> int:
    """
    Compare two teams. Negative means `first` ranks higher.

    Keys in priority order:
    1. solved count, more is better
    2. penalty time, less is better
    3. solve times sorted latest first, compared position by position;
       the smaller time at the first differing position wins
    4. team name, ascending
    """
    a = first.aggregate
    b = second.aggregate

    if a.solved != b.solved:
        return -1 if a.solved > b.solved else 1

    if a.penalty != b.penalty:
        return -1 if a.penalty < b.penalty else 1

    for time_a, time_b in zip(a.solve_times, b.solve_times):
        if time_a != time_b:
            return -1 if time_a < time_b else 1

    if first.name != second.name:
        return -1 if first.name < second.name else 1
    return 0


def ranks_above(first: TeamState, second: TeamState) -> bool:
    """True if `first` strictly outranks `second`."""
    return compare_teams(first, second) < 0


rank_key = cmp_to_key(compare_teams)


def sort_teams(teams: Sequence[TeamState]) -> List[TeamState]:
    """Return teams ordered best first."""
    return sorted(teams, key=rank_key)


def is_ranked(teams: Sequence[TeamState]) -> bool:
    """Check that every adjacent pair is in ranking order."""
    return all(ranks_above(teams[i], teams[i + 1]) for i in range(len(teams) - 1))
