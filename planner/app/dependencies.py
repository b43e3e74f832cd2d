import logging

from fastapi import HTTPException

from planner.core import (
    DisciplineNotAllowed,
    InvalidSequence,
    NoIdentifierAvailable,
    NoSessionAvailable,
    PlannerError,
)
from .env_loader import get_suppress_final_rest

logger = logging.getLogger(__name__)


def final_rest_policy() -> bool:
    """Trailing-rest policy for expansion, from the environment."""
    return get_suppress_final_rest()


def http_error(error: PlannerError) -> HTTPException:
    """Translate a core failure into the HTTP error returned to the client.

    The detail always carries the error's `code` so clients can branch on it.
    """
    if isinstance(error, DisciplineNotAllowed):
        logger.info("Discipline denied: %s", error.reason)
        return HTTPException(
            status_code=409,
            detail={
                "code": error.code,
                "reason": error.reason,
                "cap": error.decision.code,
            },
        )
    if isinstance(error, (NoIdentifierAvailable, NoSessionAvailable)):
        return HTTPException(
            status_code=409, detail={"code": error.code, "reason": str(error)}
        )
    if isinstance(error, InvalidSequence):
        return HTTPException(
            status_code=422, detail={"code": error.code, "errors": error.errors}
        )
    return HTTPException(status_code=400, detail={"code": error.code, "reason": str(error)})
