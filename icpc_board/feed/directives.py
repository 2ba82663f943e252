"""Typed directives and the parser for the textual command feed."""

import re
from dataclasses import dataclass
from typing import Optional, Union

from ..board.models import Outcome


class DirectiveError(ValueError):
    """Raised when a line cannot be parsed into a directive."""


@dataclass(frozen=True)
class AddTeam:
    name: str


@dataclass(frozen=True)
class Start:
    duration: int
    problem_count: int


@dataclass(frozen=True)
class Submit:
    problem: str
    team: str
    outcome: Outcome
    timestamp: int


@dataclass(frozen=True)
class Flush:
    pass


@dataclass(frozen=True)
class Freeze:
    pass


@dataclass(frozen=True)
class Scroll:
    pass


@dataclass(frozen=True)
class QueryRank:
    team: str


@dataclass(frozen=True)
class QuerySubmission:
    """Latest submission lookup. None filters mean ALL."""

    team: str
    problem: Optional[str] = None
    outcome: Optional[Outcome] = None


@dataclass(frozen=True)
class End:
    pass


Directive = Union[
    AddTeam, Start, Submit, Flush, Freeze, Scroll, QueryRank, QuerySubmission, End
]

ALL = "ALL"

START_RE = re.compile(r"^DURATION\s+(\d+)\s+PROBLEM\s+(\d+)$")
SUBMIT_RE = re.compile(r"^(\S+)\s+BY\s+(\S+)\s+WITH\s+(\S+)\s+AT\s+(\d+)$")
QUERY_SUBMISSION_RE = re.compile(r"^(\S+)\s+WHERE\s+PROBLEM=(\S+)\s+AND\s+STATUS=(\S+)$")

SIMPLE = {"FLUSH": Flush, "FREEZE": Freeze, "SCROLL": Scroll, "END": End}


def _outcome(text: str) -> Outcome:
    try:
        return Outcome.parse(text)
    except ValueError as e:
        raise DirectiveError(str(e)) from e


def parse_directive(line: str) -> Optional[Directive]:
    """
    Parse one feed line.

    Returns None for blank lines and raises DirectiveError for anything
    that does not follow the command grammar.
    """
    text = line.strip()
    if not text:
        return None

    command, _, rest = text.partition(" ")
    rest = rest.strip()

    if command in SIMPLE:
        if rest:
            raise DirectiveError(f"{command} takes no arguments")
        return SIMPLE[command]()

    if command == "ADDTEAM":
        if not rest or len(rest.split()) != 1:
            raise DirectiveError("ADDTEAM expects a single team name")
        return AddTeam(rest)

    if command == "START":
        match = START_RE.match(rest)
        if not match:
            raise DirectiveError("expected: START DURATION <minutes> PROBLEM <count>")
        return Start(int(match.group(1)), int(match.group(2)))

    if command == "SUBMIT":
        match = SUBMIT_RE.match(rest)
        if not match:
            raise DirectiveError("expected: SUBMIT <problem> BY <team> WITH <status> AT <time>")
        problem, team, status, timestamp = match.groups()
        return Submit(problem, team, _outcome(status), int(timestamp))

    if command == "QUERY_RANKING":
        if not rest or len(rest.split()) != 1:
            raise DirectiveError("QUERY_RANKING expects a single team name")
        return QueryRank(rest)

    if command == "QUERY_SUBMISSION":
        match = QUERY_SUBMISSION_RE.match(rest)
        if not match:
            raise DirectiveError(
                "expected: QUERY_SUBMISSION <team> WHERE PROBLEM=<p> AND STATUS=<status>"
            )
        team, problem, status = match.groups()
        return QuerySubmission(
            team,
            None if problem == ALL else problem,
            None if status == ALL else _outcome(status),
        )

    raise DirectiveError(f"Unknown command: {command}")

