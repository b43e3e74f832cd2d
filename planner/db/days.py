"""Database operations for days and their workout sessions."""

import logging
import uuid
from datetime import date

import psycopg

from .connection import get_db_cursor, transaction_cursor
from .rows import MOVEFRAME_COLUMNS, row_to_moveframe
from planner.core.letters import next_session_index
from planner.models import Day, Moveframe, Workout

logger = logging.getLogger(__name__)


def create_day(day_date: date) -> Day:
    """Create an empty day."""
    day_id = f"day_{uuid.uuid4()}"
    with get_db_cursor() as cursor:
        cursor.execute(
            "INSERT INTO days (id, date) VALUES (%s, %s) RETURNING id, date",
            (day_id, day_date),
        )
        row = cursor.fetchone()
        return Day(id=row[0], date=row[1])


def get_day(day_id: str) -> Day | None:
    """Get a day with its workouts and their moveframes (without movelaps)."""
    with get_db_cursor() as cursor:
        return load_day(cursor, day_id)


def load_day(cursor: psycopg.Cursor, day_id: str) -> Day | None:
    """Load a day using an existing cursor, so callers can share a transaction."""
    cursor.execute("SELECT id, date FROM days WHERE id = %s", (day_id,))
    day_row = cursor.fetchone()
    if day_row is None:
        return None

    cursor.execute(
        """
        SELECT id, day_id, session_index
        FROM workouts
        WHERE day_id = %s
        ORDER BY session_index
        """,
        (day_id,),
    )
    workout_rows = cursor.fetchall()

    cursor.execute(
        f"""
        SELECT {MOVEFRAME_COLUMNS}
        FROM moveframes m
        JOIN workouts w ON w.id = m.workout_id
        WHERE w.day_id = %s
        ORDER BY m.letter
        """,
        (day_id,),
    )
    moveframes_by_workout: dict[str, list[Moveframe]] = {}
    for row in cursor.fetchall():
        moveframe = row_to_moveframe(row)
        moveframes_by_workout.setdefault(moveframe.owner_workout_id, []).append(
            moveframe
        )

    workouts = [
        Workout(
            id=workout_id,
            owner_day_id=owner_day_id,
            session_index=session_index,
            moveframes=moveframes_by_workout.get(workout_id, []),
        )
        for workout_id, owner_day_id, session_index in workout_rows
    ]
    return Day(id=day_row[0], date=day_row[1], workouts=workouts)


def create_workout(day_id: str) -> Workout:
    """Add a workout session to a day, using the first free session index.

    Raises:
        ValueError: If the day does not exist.
        NoSessionAvailable: If the day already has three sessions.
    """
    workout_id = f"wo_{uuid.uuid4()}"

    with transaction_cursor() as cursor:
        cursor.execute("SELECT id FROM days WHERE id = %s FOR UPDATE", (day_id,))
        if cursor.fetchone() is None:
            raise ValueError(f"Day {day_id} not found")

        cursor.execute(
            "SELECT session_index FROM workouts WHERE day_id = %s", (day_id,)
        )
        session_index = next_session_index(row[0] for row in cursor.fetchall())

        cursor.execute(
            """
            INSERT INTO workouts (id, day_id, session_index)
            VALUES (%s, %s, %s)
            """,
            (workout_id, day_id, session_index),
        )
        logger.info(
            "Created workout %s as session %d of day %s",
            workout_id,
            session_index,
            day_id,
        )
        return Workout(id=workout_id, owner_day_id=day_id, session_index=session_index)
