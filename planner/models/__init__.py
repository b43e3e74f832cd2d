from .sequence import Sequence, GlobalAnnotations, AlarmSound
from .moveframe import (
    Movelap,
    MovelapStatus,
    Moveframe,
    MoveframeKind,
    AnnotationStyle,
    EXPANDING_KINDS,
)
from .assembly import (
    AllocationSnapshot,
    AllocationDecision,
    AssemblyRequest,
    DenialCode,
)
from .workout import Workout, Day, SessionIndex

__all__ = [
    "Sequence",
    "GlobalAnnotations",
    "AlarmSound",
    "Movelap",
    "MovelapStatus",
    "Moveframe",
    "MoveframeKind",
    "AnnotationStyle",
    "EXPANDING_KINDS",
    "AllocationSnapshot",
    "AllocationDecision",
    "AssemblyRequest",
    "DenialCode",
    "Workout",
    "Day",
    "SessionIndex",
]
