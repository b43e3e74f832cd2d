"""Workout sessions and days, with the discipline sets derived from them."""

from datetime import date
from typing import Literal

from pydantic import Field

from .assembly import AllocationSnapshot
from .base import CamelModel
from .moveframe import Moveframe


SessionIndex = Literal[1, 2, 3]


class Workout(CamelModel):
    """One of up to three planned sessions on a day."""

    id: str
    owner_day_id: str
    session_index: SessionIndex
    moveframes: list[Moveframe] = []

    @property
    def discipline_set(self) -> frozenset[str]:
        return frozenset(mf.discipline for mf in self.moveframes)

    @property
    def letters(self) -> frozenset[str]:
        return frozenset(mf.letter for mf in self.moveframes)


class Day(CamelModel):
    """The top-level scheduling unit."""

    id: str
    date: date
    workouts: list[Workout] = Field(default=[], max_length=3)

    @property
    def discipline_set(self) -> frozenset[str]:
        """Union of the discipline sets of every workout on this day."""
        disciplines: set[str] = set()
        for workout in self.workouts:
            disciplines |= workout.discipline_set
        return frozenset(disciplines)

    @property
    def session_indexes(self) -> frozenset[int]:
        return frozenset(w.session_index for w in self.workouts)

    def snapshot_for(self, workout_id: str) -> AllocationSnapshot:
        """Build the allocation snapshot for one of this day's workouts.

        Raises:
            ValueError: If the workout does not belong to this day.
        """
        for workout in self.workouts:
            if workout.id == workout_id:
                return AllocationSnapshot(
                    workout_id=workout.id,
                    day_set=self.discipline_set,
                    workout_set=workout.discipline_set,
                    existing_letters=workout.letters,
                )
        raise ValueError(f"Workout {workout_id} not found on day {self.id}")
