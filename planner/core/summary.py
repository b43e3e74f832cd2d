"""One-line descriptions of moveframes, built from their sequences."""

from typing import Sequence as SequenceOf

from planner.models import Sequence
from .duration import normalize_duration
from .errors import ParseError

EMPTY_SUMMARY = "Empty moveframe"
SEPARATOR = ", "


def summarize(sequences: SequenceOf[Sequence]) -> str:
    """Describe sequences as `4×100 A2 Freestyle 1'20", 2×50 A3 Backstroke 30"`.

    Only the sequences are read, never expanded movelaps, so the summary does
    not depend on the expansion policy. Terminal rest is ignored: two lists
    that differ only in terminal rest give the same summary. The result is
    for display and cannot be parsed back into sequences.
    """
    if not sequences:
        return EMPTY_SUMMARY
    return SEPARATOR.join(_describe(seq) for seq in sequences)


def _describe(sequence: Sequence) -> str:
    parts = [
        f"{sequence.repetition_count}×{_format_distance(sequence.distance)}",
        sequence.pace_label,
        sequence.style,
        _format_rest(sequence.intra_rest_interval),
    ]
    return " ".join(part for part in parts if part)


def _format_distance(distance: float) -> str:
    if float(distance).is_integer():
        return str(int(distance))
    return str(distance)


def _format_rest(token: str) -> str:
    # Summaries are display-only; show an unparsable token as typed.
    try:
        return normalize_duration(token)
    except ParseError:
        return token.strip()
