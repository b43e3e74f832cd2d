"""Inputs and outputs of moveframe assembly."""

from typing import Literal

from pydantic import Field

from .base import CamelModel
from .moveframe import AnnotationStyle, MoveframeKind
from .sequence import GlobalAnnotations, Sequence


DenialCode = Literal["day_cap", "session_cap"]


class AllocationSnapshot(CamelModel):
    """State of a workout and its day, gathered by the caller in one read.

    The discipline validator and the letter allocator both assume this
    snapshot is consistent and that nobody else writes to the workout while
    the assembled moveframe is persisted.
    """

    workout_id: str
    day_set: frozenset[str] = frozenset()
    workout_set: frozenset[str] = frozenset()
    existing_letters: frozenset[str] = frozenset()


class AllocationDecision(CamelModel):
    """Result of asking whether a discipline may be added to a workout."""

    allowed: bool
    reason: str | None = None
    code: DenialCode | None = None


class AssemblyRequest(CamelModel):
    """Everything needed to build one moveframe."""

    snapshot: AllocationSnapshot
    discipline: str = Field(min_length=1)
    kind: MoveframeKind = "STANDARD"
    sequences: list[Sequence] = []
    annotations: GlobalAnnotations = Field(default_factory=GlobalAnnotations)
    # Supplied directly by the caller for kinds that skip expansion.
    summary: str | None = None
    content: str | None = None
    annotation: AnnotationStyle | None = None
    manual_repetitions: int | None = None
    manual_distance: int | None = None
    section_id: str | None = None
    notes: str | None = None
