"""Database operations for moveframes and their movelaps.

A moveframe is always written together with its whole movelap batch in one
transaction, and edits replace the batch wholesale.
"""

import logging
import uuid
from typing import Callable, Optional

import psycopg

from .connection import get_db_cursor, transaction_cursor
from .days import load_day
from .rows import (
    MOVEFRAME_COLUMNS,
    MOVELAP_COLUMNS,
    movelap_params,
    row_to_moveframe,
    row_to_movelap,
)
from planner.models import AllocationSnapshot, Moveframe

logger = logging.getLogger(__name__)


def get_allocation_snapshot(workout_id: str) -> Optional[AllocationSnapshot]:
    """Get the discipline sets and letters for a workout. None if not found."""
    with get_db_cursor() as cursor:
        return _load_snapshot(cursor, workout_id)


def get_moveframe(moveframe_id: str) -> Optional[Moveframe]:
    """Get a single moveframe with its movelaps."""
    with get_db_cursor() as cursor:
        return _load_moveframe(cursor, moveframe_id)


def create_moveframe(
    workout_id: str,
    build: Callable[[AllocationSnapshot], Moveframe],
    idempotency_key: Optional[str] = None,
) -> Moveframe:
    """Build a moveframe from a fresh snapshot and persist it with its movelaps.

    The workout row and its day row are locked while the snapshot is read and
    the moveframe is inserted, so the snapshot `build` sees stays current until
    commit, even with other sessions of the same day being written.

    Args:
        workout_id: The owning workout.
        build: Turns the snapshot into a moveframe, e.g. by calling `assemble`.
            Anything it raises aborts the transaction and propagates.
        idempotency_key: If a moveframe was already created in this workout
            with this key, it is returned instead of creating a duplicate.

    Raises:
        ValueError: If the workout does not exist.
    """
    with transaction_cursor() as cursor:
        snapshot = _load_snapshot(cursor, workout_id, for_update=True)
        if snapshot is None:
            raise ValueError(f"Workout {workout_id} not found")

        if idempotency_key is not None:
            existing = _find_by_idempotency_key(cursor, workout_id, idempotency_key)
            if existing is not None:
                logger.info(
                    "Replaying moveframe %s for idempotency key %s",
                    existing.id,
                    idempotency_key,
                )
                return existing

        moveframe = build(snapshot)
        moveframe_id = f"mf_{uuid.uuid4()}"
        cursor.execute(
            """
            INSERT INTO moveframes (
                id, workout_id, letter, discipline, kind, summary,
                section_id, notes, annotation, content,
                manual_repetitions, manual_distance, idempotency_key
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            """,
            (
                moveframe_id,
                workout_id,
                moveframe.letter,
                moveframe.discipline,
                moveframe.kind,
                moveframe.summary,
                moveframe.section_id,
                moveframe.notes,
                (
                    moveframe.annotation.model_dump_json()
                    if moveframe.annotation is not None
                    else None
                ),
                moveframe.content,
                moveframe.manual_repetitions,
                moveframe.manual_distance,
                idempotency_key,
            ),
        )
        _insert_movelaps(cursor, moveframe_id, moveframe)

        logger.info(
            "Created moveframe %s (%s) in workout %s with %d movelaps",
            moveframe_id,
            moveframe.letter,
            workout_id,
            len(moveframe.movelaps),
        )
        return _with_id(moveframe, moveframe_id)


def replace_movelaps(
    moveframe_id: str, rebuild: Callable[[Moveframe], Moveframe]
) -> Optional[Moveframe]:
    """Replace the whole movelap batch of a moveframe.

    Args:
        moveframe_id: The moveframe to edit.
        rebuild: Produces the replacement moveframe from the stored one, e.g.
            by calling `regenerate_movelaps`.

    Returns:
        The updated moveframe, or None if it does not exist.
    """
    with transaction_cursor() as cursor:
        existing = _load_moveframe(cursor, moveframe_id, for_update=True)
        if existing is None:
            return None

        updated = rebuild(existing)
        cursor.execute("DELETE FROM movelaps WHERE moveframe_id = %s", (moveframe_id,))
        _insert_movelaps(cursor, moveframe_id, updated)
        cursor.execute(
            """
            UPDATE moveframes
            SET summary = %s, updated_at = CURRENT_TIMESTAMP
            WHERE id = %s
            """,
            (updated.summary, moveframe_id),
        )
        logger.info(
            "Replaced movelaps of moveframe %s (%d -> %d)",
            moveframe_id,
            len(existing.movelaps),
            len(updated.movelaps),
        )
        return _with_id(updated, moveframe_id)


def delete_moveframe(moveframe_id: str) -> bool:
    """Delete a moveframe and, by cascade, its movelaps. Returns True if found."""
    with get_db_cursor() as cursor:
        cursor.execute(
            "DELETE FROM moveframes WHERE id = %s RETURNING id", (moveframe_id,)
        )
        return cursor.fetchone() is not None


# --- Helpers ---


def _load_snapshot(
    cursor: psycopg.Cursor, workout_id: str, for_update: bool = False
) -> Optional[AllocationSnapshot]:
    if for_update:
        cursor.execute(
            "SELECT day_id FROM workouts WHERE id = %s FOR UPDATE", (workout_id,)
        )
    else:
        cursor.execute("SELECT day_id FROM workouts WHERE id = %s", (workout_id,))
    row = cursor.fetchone()
    if row is None:
        return None
    day_id = row[0]

    if for_update:
        # The day cap spans every session of the day, so concurrent writers
        # to sibling workouts must serialize on the day row.
        cursor.execute("SELECT id FROM days WHERE id = %s FOR UPDATE", (day_id,))

    day = load_day(cursor, day_id)
    if day is None:
        return None
    return day.snapshot_for(workout_id)


def _load_moveframe(
    cursor: psycopg.Cursor, moveframe_id: str, for_update: bool = False
) -> Optional[Moveframe]:
    query = f"SELECT {MOVEFRAME_COLUMNS} FROM moveframes m WHERE m.id = %s"
    if for_update:
        query += " FOR UPDATE"
    cursor.execute(query, (moveframe_id,))
    row = cursor.fetchone()
    if row is None:
        return None

    cursor.execute(
        f"""
        SELECT {MOVELAP_COLUMNS}
        FROM movelaps
        WHERE moveframe_id = %s
        ORDER BY sequence_position
        """,
        (moveframe_id,),
    )
    movelaps = [row_to_movelap(r) for r in cursor.fetchall()]
    return row_to_moveframe(row, movelaps)


def _find_by_idempotency_key(
    cursor: psycopg.Cursor, workout_id: str, idempotency_key: str
) -> Optional[Moveframe]:
    # Keys are scoped to the workout they were first used with.
    cursor.execute(
        """
        SELECT id FROM moveframes
        WHERE workout_id = %s AND idempotency_key = %s
        """,
        (workout_id, idempotency_key),
    )
    row = cursor.fetchone()
    if row is None:
        return None
    return _load_moveframe(cursor, row[0])


def _insert_movelaps(
    cursor: psycopg.Cursor, moveframe_id: str, moveframe: Moveframe
) -> None:
    if not moveframe.movelaps:
        return
    cursor.executemany(
        f"""
        INSERT INTO movelaps ({MOVELAP_COLUMNS})
        VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
        """,
        [movelap_params(moveframe_id, lap) for lap in moveframe.movelaps],
    )


def _with_id(moveframe: Moveframe, moveframe_id: str) -> Moveframe:
    return moveframe.model_copy(
        update={
            "id": moveframe_id,
            "movelaps": [
                lap.model_copy(update={"owner_moveframe_id": moveframe_id})
                for lap in moveframe.movelaps
            ],
        }
    )
