"""Expansion of sequence specifications into movelaps."""

import logging
from typing import Sequence as SequenceOf

from planner.models import GlobalAnnotations, Movelap, Sequence
from .duration import Duration, format_duration, normalize_duration
from .validation import validate_sequences

logger = logging.getLogger(__name__)

NO_REST = format_duration(Duration(0))


def expand(
    sequences: SequenceOf[Sequence],
    annotations: GlobalAnnotations | None = None,
    *,
    suppress_final_rest: bool = False,
    moveframe_id: str | None = None,
) -> list[Movelap]:
    """Expand sequences into an ordered list of movelaps.

    Each sequence yields `repetition_count` movelaps in submission order. Every
    repeat rests for the intra-sequence interval except the last one of its
    sequence, which rests for the terminal interval (or the intra interval
    when no terminal interval is given). Positions run 0..N-1 across the whole
    expansion.

    Args:
        sequences: Sequence specifications, in submission order.
        annotations: Fields copied onto every movelap.
        suppress_final_rest: If True, the very last movelap rests for 0"
            since nothing follows it. By default its rest is kept.
        moveframe_id: Owner ID to stamp on the movelaps, if already known.

    Raises:
        InvalidSequence: If any sequence is malformed (e.g. zero repetitions).
    """
    validate_sequences(sequences)
    if annotations is None:
        annotations = GlobalAnnotations()
    note = annotations.movelap_note()

    movelaps: list[Movelap] = []
    for sequence in sequences:
        intra_rest = normalize_duration(sequence.intra_rest_interval)
        last_rest = normalize_duration(sequence.rest_for_last_repeat())
        for repeat in range(sequence.repetition_count):
            is_last_repeat = repeat == sequence.repetition_count - 1
            movelaps.append(
                Movelap(
                    owner_moveframe_id=moveframe_id,
                    sequence_position=len(movelaps),
                    distance=sequence.distance,
                    pace_label=sequence.pace_label,
                    style=sequence.style,
                    rest_after=last_rest if is_last_repeat else intra_rest,
                    annotations=annotations.model_copy(),
                    notes=note,
                )
            )

    if suppress_final_rest and movelaps:
        movelaps[-1] = movelaps[-1].model_copy(update={"rest_after": NO_REST})

    logger.debug("Expanded %d sequences into %d movelaps", len(sequences), len(movelaps))
    return movelaps
