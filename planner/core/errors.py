"""Typed failures raised by the moveframe core.

Every failure carries a stable `code` so callers can branch on it without
matching message text. None of them are fatal: each one is local to a single
request and can be retried with corrected input.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from planner.models import AllocationDecision


class PlannerError(Exception):
    """Base class for every failure the core reports."""

    code = "planner_error"


class InvalidSequence(PlannerError):
    """A sequence specification (or the request around it) is malformed."""

    code = "invalid_sequence"

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors if errors is not None else [message]


class ParseError(InvalidSequence):
    """A duration token could not be parsed."""

    code = "parse_error"


class DisciplineNotAllowed(PlannerError):
    """The discipline cap for the day or the session would be exceeded."""

    code = "discipline_not_allowed"

    def __init__(self, decision: AllocationDecision):
        super().__init__(decision.reason or "Discipline not allowed")
        self.decision = decision

    @property
    def reason(self) -> str | None:
        return self.decision.reason


class NoIdentifierAvailable(PlannerError):
    """All 26 moveframe letters of a workout are already taken."""

    code = "no_identifier_available"


class NoSessionAvailable(PlannerError):
    """A day already holds its three workout sessions."""

    code = "no_session_available"
