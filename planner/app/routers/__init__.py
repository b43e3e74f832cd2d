from .moveframes import router as moveframes_router
from .workouts import router as workouts_router
from .days import router as days_router
from .summaries import router as summaries_router

__all__ = [
    "moveframes_router",
    "workouts_router",
    "days_router",
    "summaries_router",
]
