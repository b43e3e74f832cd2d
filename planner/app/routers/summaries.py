"""Stateless helpers for forms: summaries and expansion totals."""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from planner.app.dependencies import http_error
from planner.core import (
    PlannerError,
    summarize,
    total_repetitions,
    validate_sequences,
)
from planner.models import Sequence
from planner.models.base import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/summaries", tags=["summaries"])


class SummaryRequest(CamelModel):
    sequences: list[Sequence]


class SummaryResponse(BaseModel):
    summary: str
    total_repetitions: int


@router.post("", response_model=SummaryResponse)
async def create_summary(request: SummaryRequest) -> SummaryResponse:
    """Describe sequences in one line, as a moveframe summary would."""
    try:
        validate_sequences(request.sequences)
    except PlannerError as e:
        raise http_error(e)
    return SummaryResponse(
        summary=summarize(request.sequences),
        total_repetitions=total_repetitions(request.sequences),
    )
