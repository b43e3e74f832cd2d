"""Assembly of a complete moveframe from a creation request.

This is the single seam between the pure core and whatever persists its
output. It performs no I/O: the caller supplies a consistent snapshot of the
workout and its day, and receives either a moveframe ready to store (with
`id=None`) or one of the typed failures in `planner.core.errors`.
"""

import logging
from typing import Sequence as SequenceOf

from planner.models import (
    EXPANDING_KINDS,
    AssemblyRequest,
    GlobalAnnotations,
    Moveframe,
    Movelap,
    Sequence,
)
from .disciplines import can_assign
from .errors import DisciplineNotAllowed, InvalidSequence
from .expand import expand
from .letters import next_letter
from .summary import summarize

logger = logging.getLogger(__name__)


def assemble(request: AssemblyRequest, *, suppress_final_rest: bool = False) -> Moveframe:
    """Validate, allocate a letter, expand and summarize.

    Raises:
        DisciplineNotAllowed: If the day or session discipline cap is hit.
        NoIdentifierAvailable: If the workout has no free letter left.
        InvalidSequence: If sequences are malformed, or a STANDARD request has
            none, or an ANNOTATION/MANUAL request has nothing to display.
    """
    snapshot = request.snapshot
    decision = can_assign(request.discipline, snapshot.day_set, snapshot.workout_set)
    if not decision.allowed:
        raise DisciplineNotAllowed(decision)

    letter = next_letter(snapshot.existing_letters)

    if request.kind in EXPANDING_KINDS:
        movelaps, summary = _expand_request(request, suppress_final_rest)
    else:
        movelaps, summary = [], _caller_summary(request)

    moveframe = Moveframe(
        owner_workout_id=snapshot.workout_id,
        letter=letter,
        discipline=request.discipline,
        kind=request.kind,
        summary=summary,
        movelaps=movelaps,
        section_id=request.section_id,
        notes=request.notes,
        annotation=request.annotation if request.kind == "ANNOTATION" else None,
        content=request.content if request.kind == "MANUAL" else None,
        manual_repetitions=(
            request.manual_repetitions if request.kind == "MANUAL" else None
        ),
        manual_distance=request.manual_distance if request.kind == "MANUAL" else None,
    )
    logger.debug(
        "Assembled %s moveframe %s (%s) with %d movelaps",
        moveframe.kind,
        moveframe.letter,
        moveframe.discipline,
        len(moveframe.movelaps),
    )
    return moveframe


def regenerate_movelaps(
    moveframe: Moveframe,
    sequences: SequenceOf[Sequence],
    annotations: GlobalAnnotations | None = None,
    *,
    suppress_final_rest: bool = False,
) -> Moveframe:
    """Build a full replacement batch of movelaps for an existing moveframe.

    Letter, discipline and kind are kept; the movelaps and the summary are
    regenerated from scratch. A BATTERY emptied of sequences keeps its summary. Movelaps are never patched individually.

    Raises:
        InvalidSequence: If the moveframe kind does not carry movelaps, or the
            sequences are malformed.
    """
    if not moveframe.is_expanded:
        raise InvalidSequence(f"{moveframe.kind} moveframes have no movelaps")
    if moveframe.kind == "STANDARD" and not sequences:
        raise InvalidSequence("A STANDARD moveframe needs at least one sequence")

    movelaps = expand(
        sequences,
        annotations,
        suppress_final_rest=suppress_final_rest,
        moveframe_id=moveframe.id,
    )
    # An emptied battery keeps its caller label.
    summary = summarize(sequences) if sequences else moveframe.summary
    return moveframe.model_copy(update={"movelaps": movelaps, "summary": summary})


def _expand_request(
    request: AssemblyRequest, suppress_final_rest: bool
) -> tuple[list[Movelap], str]:
    if request.kind == "STANDARD" and not request.sequences:
        raise InvalidSequence("A STANDARD moveframe needs at least one sequence")

    movelaps = expand(
        request.sequences,
        request.annotations,
        suppress_final_rest=suppress_final_rest,
    )
    if request.sequences:
        return movelaps, summarize(request.sequences)
    # An empty BATTERY keeps whatever label the caller gave it.
    return movelaps, request.summary or summarize([])


def _caller_summary(request: AssemblyRequest) -> str:
    candidates = [request.summary, request.content]
    if request.annotation is not None:
        candidates.append(request.annotation.text)
    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate
    raise InvalidSequence(f"A {request.kind} moveframe needs a summary or content")
