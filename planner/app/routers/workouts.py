"""Read-only allocation queries for a workout session."""

import logging

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from planner.app.dependencies import http_error
from planner.core import NoIdentifierAvailable, can_assign, next_letter
from planner.db.moveframes import get_allocation_snapshot
from planner.models import AllocationDecision, AllocationSnapshot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])


class NextLetterResponse(BaseModel):
    letter: str


def _snapshot_or_404(workout_id: str) -> AllocationSnapshot:
    snapshot = get_allocation_snapshot(workout_id)
    if snapshot is None:
        raise HTTPException(status_code=404, detail=f"Workout {workout_id} not found")
    return snapshot


@router.get("/{workout_id}/next-letter", response_model=NextLetterResponse)
async def read_next_letter(workout_id: str) -> NextLetterResponse:
    """The letter a new moveframe in this workout would receive."""
    snapshot = _snapshot_or_404(workout_id)
    try:
        return NextLetterResponse(letter=next_letter(snapshot.existing_letters))
    except NoIdentifierAvailable as e:
        raise http_error(e)


@router.get("/{workout_id}/disciplines/check", response_model=AllocationDecision)
async def check_discipline(
    workout_id: str,
    discipline: str = Query(..., min_length=1, description="Candidate discipline"),
) -> AllocationDecision:
    """Whether a moveframe of `discipline` may be added to this workout."""
    snapshot = _snapshot_or_404(workout_id)
    return can_assign(discipline, snapshot.day_set, snapshot.workout_set)
