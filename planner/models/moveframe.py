"""Moveframe and movelap models."""

from typing import Literal

from pydantic import Field

from .base import CamelModel
from .sequence import GlobalAnnotations


MoveframeKind = Literal["STANDARD", "BATTERY", "ANNOTATION", "MANUAL"]
MovelapStatus = Literal["PENDING", "COMPLETED", "SKIPPED", "DISABLED"]

# Kinds whose movelaps are produced by expanding sequences.
EXPANDING_KINDS: frozenset[MoveframeKind] = frozenset({"STANDARD", "BATTERY"})


class Movelap(CamelModel):
    """One atomic repeat unit produced by expanding a sequence."""

    owner_moveframe_id: str | None = None  # set once the moveframe is persisted
    sequence_position: int  # 0-based, global across the moveframe
    distance: float
    pace_label: str
    style: str = ""
    rest_after: str
    annotations: GlobalAnnotations = Field(default_factory=GlobalAnnotations)
    notes: str | None = None
    status: MovelapStatus = "PENDING"


class AnnotationStyle(CamelModel):
    """Display fields for an ANNOTATION moveframe."""

    text: str | None = None
    bg_color: str | None = None
    text_color: str | None = None
    bold: bool = False


class Moveframe(CamelModel):
    """A lettered block of work within a workout session."""

    id: str | None = None  # assigned by the persistence layer
    owner_workout_id: str
    letter: str = Field(pattern=r"^[A-Z]$")
    discipline: str
    kind: MoveframeKind = "STANDARD"
    summary: str
    movelaps: list[Movelap] = []
    section_id: str | None = None
    notes: str | None = None
    # ANNOTATION only
    annotation: AnnotationStyle | None = None
    # MANUAL only
    content: str | None = None
    manual_repetitions: int | None = None
    manual_distance: int | None = None

    @property
    def is_expanded(self) -> bool:
        """Whether this kind of moveframe carries expanded movelaps."""
        return self.kind in EXPANDING_KINDS

    def total_distance(self) -> float:
        """Sum of the distance of every movelap."""
        return sum(lap.distance for lap in self.movelaps)

    def total_repetitions(self) -> int:
        return len(self.movelaps)
