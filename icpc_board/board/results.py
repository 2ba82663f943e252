"""Status values returned by scoreboard operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Reason(str, Enum):
    """Stable reason code for the outcome of a directive."""

    OK = "ok"
    DUPLICATE_TEAM = "duplicate_team"
    ALREADY_STARTED = "already_started"
    NOT_STARTED = "not_started"
    ALREADY_FROZEN = "already_frozen"
    NOT_FROZEN = "not_frozen"
    TEAM_NOT_FOUND = "team_not_found"
    PROBLEM_NOT_FOUND = "problem_not_found"
    INVALID_ARGUMENT = "invalid_argument"
    ALREADY_ENDED = "already_ended"
    INVALID_DIRECTIVE = "invalid_directive"


@dataclass(frozen=True)
class Result:
    """Outcome of one operation plus its optional payload."""

    reason: Reason = Reason.OK
    value: Optional[Any] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.reason is Reason.OK

    @classmethod
    def success(cls, value: Optional[Any] = None) -> "Result":
        return cls(Reason.OK, value)

    @classmethod
    def failure(cls, reason: Reason, detail: str = "") -> "Result":
        return cls(reason, None, detail)
