"""The per-session and per-day discipline caps."""

import logging
from typing import AbstractSet, Iterable

from planner.config.disciplines import (
    MAX_DISCIPLINES_PER_DAY,
    MAX_DISCIPLINES_PER_SESSION,
    is_stretching,
)
from planner.models import AllocationDecision

logger = logging.getLogger(__name__)


def effective_size(day_set: AbstractSet[str]) -> int:
    """Count the day's disciplines toward the cap.

    Stretching stops counting only once the day holds exactly as many
    disciplines as the cap and stretching is one of them. Below that it
    counts like any other discipline.
    """
    size = len(day_set)
    if size == MAX_DISCIPLINES_PER_DAY and any(is_stretching(d) for d in day_set):
        return size - 1
    return size


def can_assign(
    discipline: str,
    day_set: AbstractSet[str],
    workout_set: AbstractSet[str],
) -> AllocationDecision:
    """Decide whether a moveframe of `discipline` may be added to a workout.

    Rules, in order:
      1. A discipline already used on the day is always allowed.
      2. A day whose effective size has reached the cap rejects new ones.
      3. A workout already holding the cap rejects disciplines it lacks.
      4. Anything else is allowed.

    Args:
        discipline: Discipline of the new moveframe.
        day_set: Distinct disciplines across all workouts of the day.
        workout_set: Distinct disciplines of the target workout.
    """
    if discipline in day_set:
        return AllocationDecision(allowed=True)

    if effective_size(day_set) >= MAX_DISCIPLINES_PER_DAY:
        decision = AllocationDecision(
            allowed=False,
            reason=(
                f"day already has {MAX_DISCIPLINES_PER_DAY} disciplines: "
                f"{_render(day_set)}"
            ),
            code="day_cap",
        )
    elif discipline not in workout_set and len(workout_set) >= MAX_DISCIPLINES_PER_SESSION:
        decision = AllocationDecision(
            allowed=False,
            reason=(
                f"session already has {MAX_DISCIPLINES_PER_SESSION} disciplines: "
                f"{_render(workout_set)}"
            ),
            code="session_cap",
        )
    else:
        return AllocationDecision(allowed=True)

    logger.debug("Denied %s: %s", discipline, decision.reason)
    return decision


def should_auto_exclude_stretching(disciplines: Iterable[str]) -> bool:
    """Whether stretching is dropped from totals without being asked to.

    True when there are at least four disciplines and stretching is among them.
    """
    disciplines = list(disciplines)
    return len(disciplines) >= MAX_DISCIPLINES_PER_DAY and any(
        is_stretching(d) for d in disciplines
    )


def disciplines_for_totals(
    disciplines: Iterable[str], manual_exclude: bool = False
) -> list[str]:
    """Disciplines shown in day/week totals, with stretching possibly removed.

    Args:
        disciplines: Disciplines in display order.
        manual_exclude: Whether the user asked to exclude stretching.
    """
    disciplines = list(disciplines)
    if manual_exclude or should_auto_exclude_stretching(disciplines):
        return [d for d in disciplines if not is_stretching(d)]
    return disciplines


def _render(disciplines: AbstractSet[str]) -> str:
    return ", ".join(sorted(disciplines))
