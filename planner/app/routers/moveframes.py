"""Routes for creating, previewing, editing and deleting moveframes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import Field

from planner.app.dependencies import final_rest_policy, http_error
from planner.core import PlannerError, assemble, regenerate_movelaps
from planner.db.moveframes import (
    create_moveframe,
    delete_moveframe,
    get_allocation_snapshot,
    get_moveframe,
    replace_movelaps,
)
from planner.models import (
    AllocationSnapshot,
    AnnotationStyle,
    AssemblyRequest,
    GlobalAnnotations,
    Moveframe,
    MoveframeKind,
    Sequence,
)
from planner.models.base import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/moveframes", tags=["moveframes"])


# --- Request Models ---


class CreateMoveframeRequest(CamelModel):
    workout_id: str
    discipline: str = Field(min_length=1)
    kind: MoveframeKind = "STANDARD"
    sequences: list[Sequence] = []
    annotations: GlobalAnnotations = Field(default_factory=GlobalAnnotations)
    summary: Optional[str] = None
    content: Optional[str] = None
    annotation: Optional[AnnotationStyle] = None
    manual_repetitions: Optional[int] = None
    manual_distance: Optional[int] = None
    section_id: Optional[str] = None
    notes: Optional[str] = None

    def to_assembly(self, snapshot: AllocationSnapshot) -> AssemblyRequest:
        return AssemblyRequest(
            snapshot=snapshot, **self.model_dump(exclude={"workout_id"})
        )


class ReplaceMovelapsRequest(CamelModel):
    sequences: list[Sequence]
    annotations: GlobalAnnotations = Field(default_factory=GlobalAnnotations)


# --- Endpoints ---


@router.post("", status_code=201, response_model=Moveframe)
async def create(
    request: CreateMoveframeRequest,
    idempotency_key: Optional[str] = Header(None),
    suppress_final_rest: bool = Depends(final_rest_policy),
) -> Moveframe:
    """Assemble a moveframe and persist it with all of its movelaps.

    Send an `Idempotency-Key` header to make retries safe: a repeated key
    returns the moveframe created the first time.
    """

    def build(snapshot: AllocationSnapshot) -> Moveframe:
        return assemble(
            request.to_assembly(snapshot), suppress_final_rest=suppress_final_rest
        )

    try:
        return create_moveframe(
            request.workout_id, build, idempotency_key=idempotency_key
        )
    except PlannerError as e:
        raise http_error(e)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/preview", response_model=Moveframe)
async def preview(
    request: CreateMoveframeRequest,
    suppress_final_rest: bool = Depends(final_rest_policy),
) -> Moveframe:
    """Assemble a moveframe against the workout's current state without saving it."""
    snapshot = get_allocation_snapshot(request.workout_id)
    if snapshot is None:
        raise HTTPException(
            status_code=404, detail=f"Workout {request.workout_id} not found"
        )
    try:
        return assemble(
            request.to_assembly(snapshot), suppress_final_rest=suppress_final_rest
        )
    except PlannerError as e:
        raise http_error(e)


@router.get("/{moveframe_id}", response_model=Moveframe)
async def read(moveframe_id: str) -> Moveframe:
    """Get a moveframe with its movelaps in order."""
    moveframe = get_moveframe(moveframe_id)
    if moveframe is None:
        raise HTTPException(status_code=404, detail=f"Moveframe {moveframe_id} not found")
    return moveframe


@router.put("/{moveframe_id}/movelaps", response_model=Moveframe)
async def replace(
    moveframe_id: str,
    request: ReplaceMovelapsRequest,
    suppress_final_rest: bool = Depends(final_rest_policy),
) -> Moveframe:
    """Regenerate the whole movelap batch of a moveframe from new sequences."""

    def rebuild(existing: Moveframe) -> Moveframe:
        return regenerate_movelaps(
            existing,
            request.sequences,
            request.annotations,
            suppress_final_rest=suppress_final_rest,
        )

    try:
        updated = replace_movelaps(moveframe_id, rebuild)
    except PlannerError as e:
        raise http_error(e)
    if updated is None:
        raise HTTPException(status_code=404, detail=f"Moveframe {moveframe_id} not found")
    return updated


@router.delete("/{moveframe_id}", status_code=200)
async def remove(moveframe_id: str) -> dict[str, str]:
    """Delete a moveframe together with its movelaps."""
    deleted = delete_moveframe(moveframe_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Moveframe {moveframe_id} not found")
    return {"message": f"Moveframe {moveframe_id} deleted"}
