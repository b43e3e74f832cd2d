"""Row <-> model conversion shared by the moveframe and day modules."""

import json
from typing import Any

from planner.models import AnnotationStyle, GlobalAnnotations, Moveframe, Movelap


MOVEFRAME_COLUMNS = """
    m.id, m.workout_id, m.letter, m.discipline, m.kind, m.summary,
    m.section_id, m.notes, m.annotation, m.content,
    m.manual_repetitions, m.manual_distance
"""

MOVELAP_COLUMNS = """
    moveframe_id, sequence_position, distance, pace_label, style,
    rest_after, annotations, notes, status
"""


def _load_json(value: Any) -> Any:
    # psycopg decodes JSONB already; plain JSON text needs decoding here.
    if value is None or isinstance(value, (dict, list)):
        return value
    return json.loads(value)


def row_to_moveframe(row: tuple, movelaps: list[Movelap] | None = None) -> Moveframe:
    """Convert a database row to a Moveframe."""
    (
        id_,
        workout_id,
        letter,
        discipline,
        kind,
        summary,
        section_id,
        notes,
        annotation_json,
        content,
        manual_repetitions,
        manual_distance,
    ) = row

    annotation_data = _load_json(annotation_json)
    return Moveframe(
        id=id_,
        owner_workout_id=workout_id,
        letter=letter,
        discipline=discipline,
        kind=kind,
        summary=summary,
        movelaps=movelaps or [],
        section_id=section_id,
        notes=notes,
        annotation=(
            AnnotationStyle.model_validate(annotation_data)
            if annotation_data is not None
            else None
        ),
        content=content,
        manual_repetitions=manual_repetitions,
        manual_distance=manual_distance,
    )


def row_to_movelap(row: tuple) -> Movelap:
    """Convert a database row to a Movelap."""
    (
        moveframe_id,
        sequence_position,
        distance,
        pace_label,
        style,
        rest_after,
        annotations_json,
        notes,
        status,
    ) = row

    return Movelap(
        owner_moveframe_id=moveframe_id,
        sequence_position=sequence_position,
        distance=distance,
        pace_label=pace_label,
        style=style or "",
        rest_after=rest_after,
        annotations=GlobalAnnotations.model_validate(
            _load_json(annotations_json) or {}
        ),
        notes=notes,
        status=status,
    )


def movelap_params(moveframe_id: str, movelap: Movelap) -> tuple:
    """Parameters for inserting a movelap, in `MOVELAP_COLUMNS` order."""
    return (
        moveframe_id,
        movelap.sequence_position,
        movelap.distance,
        movelap.pace_label,
        movelap.style,
        movelap.rest_after,
        json.dumps(movelap.annotations.model_dump()),
        movelap.notes,
        movelap.status,
    )
