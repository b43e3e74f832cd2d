"""Routes for days and the workout sessions within them."""

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from planner.app.dependencies import http_error
from planner.core import (
    NoSessionAvailable,
    disciplines_for_totals,
    should_auto_exclude_stretching,
)
from planner.db.days import create_day, create_workout, get_day
from planner.models import Day, Workout

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/days", tags=["days"])


class CreateDayRequest(BaseModel):
    date: date


class DayDisciplinesResponse(BaseModel):
    """Disciplines used on a day and those counted in its totals."""

    disciplines: list[str]
    totals_disciplines: list[str]
    stretching_auto_excluded: bool


@router.post("", status_code=201, response_model=Day)
async def create(request: CreateDayRequest) -> Day:
    """Create an empty day."""
    return create_day(request.date)


@router.get("/{day_id}", response_model=Day)
async def read(day_id: str) -> Day:
    """Get a day with its workouts and moveframe headers."""
    day = get_day(day_id)
    if day is None:
        raise HTTPException(status_code=404, detail=f"Day {day_id} not found")
    return day


@router.post("/{day_id}/workouts", status_code=201, response_model=Workout)
async def add_workout(day_id: str) -> Workout:
    """Add a workout session using the first free session index (1-3)."""
    try:
        return create_workout(day_id)
    except NoSessionAvailable as e:
        raise http_error(e)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{day_id}/disciplines", response_model=DayDisciplinesResponse)
async def read_disciplines(
    day_id: str,
    exclude_stretching: bool = Query(
        False, description="Drop stretching from the totals even below 4 disciplines"
    ),
) -> DayDisciplinesResponse:
    """List the day's disciplines, applying the stretching rule for totals."""
    day = get_day(day_id)
    if day is None:
        raise HTTPException(status_code=404, detail=f"Day {day_id} not found")

    disciplines = sorted(day.discipline_set)
    return DayDisciplinesResponse(
        disciplines=disciplines,
        totals_disciplines=disciplines_for_totals(disciplines, exclude_stretching),
        stretching_auto_excluded=should_auto_exclude_stretching(disciplines),
    )
