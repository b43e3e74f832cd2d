"""Validation of sequence specifications before expansion."""

import logging
import math
from typing import Iterable

from planner.models import Sequence
from .duration import parse_duration
from .errors import InvalidSequence, ParseError

logger = logging.getLogger(__name__)

MIN_REPETITIONS = 1
MAX_REPETITIONS = 50


def sequence_errors(sequence: Sequence) -> tuple[list[str], list[str]]:
    """Check a single sequence.

    Returns:
        A pair `(errors, duration_errors)` of human-readable messages. Rest
        tokens that fail to parse are reported in the second list.
    """
    errors: list[str] = []
    duration_errors: list[str] = []

    if sequence.repetition_count < MIN_REPETITIONS:
        errors.append(f"Repetitions must be at least {MIN_REPETITIONS}")
    elif sequence.repetition_count > MAX_REPETITIONS:
        errors.append(f"Repetitions must be at most {MAX_REPETITIONS}")

    if not math.isfinite(sequence.distance) or sequence.distance <= 0:
        errors.append("Distance must be positive")

    if not sequence.pace_label.strip():
        errors.append("Pace is required")

    rests = [("Pause", sequence.intra_rest_interval)]
    if sequence.terminal_rest_interval is not None:
        rests.append(("End pause", sequence.terminal_rest_interval))
    for label, token in rests:
        try:
            parse_duration(token)
        except ParseError as e:
            duration_errors.append(f"{label}: {e}")

    return errors, duration_errors


def validate_sequences(sequences: Iterable[Sequence]) -> None:
    """Validate every sequence, reporting all problems at once.

    Raises:
        ParseError: If the only problems are unparsable rest tokens.
        InvalidSequence: For any other problem.
    """
    all_errors: list[str] = []
    only_durations = True
    for index, sequence in enumerate(sequences):
        errors, duration_errors = sequence_errors(sequence)
        if errors:
            only_durations = False
        problems = errors + duration_errors
        if problems:
            all_errors.append(f"Sequence {index + 1}: {', '.join(problems)}")

    if not all_errors:
        return

    logger.debug("Rejected sequences: %s", all_errors)
    message = "; ".join(all_errors)
    if only_durations:
        raise ParseError(message, errors=all_errors)
    raise InvalidSequence(message, errors=all_errors)


def total_repetitions(sequences: Iterable[Sequence]) -> int:
    """Total number of movelaps the sequences expand to."""
    return sum(seq.repetition_count for seq in sequences)
