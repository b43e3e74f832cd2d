from .sequence import SequenceFactory, AnnotationsFactory
from .moveframe import MoveframeFactory, WorkoutFactory, DayFactory

__all__ = [
    "SequenceFactory",
    "AnnotationsFactory",
    "MoveframeFactory",
    "WorkoutFactory",
    "DayFactory",
]
