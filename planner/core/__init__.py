from .errors import (
    PlannerError,
    InvalidSequence,
    ParseError,
    DisciplineNotAllowed,
    NoIdentifierAvailable,
    NoSessionAvailable,
)
from .duration import Duration, parse_duration, format_duration, normalize_duration
from .validation import validate_sequences, total_repetitions
from .expand import expand
from .summary import summarize
from .letters import next_letter, next_session_index
from .disciplines import (
    can_assign,
    effective_size,
    disciplines_for_totals,
    should_auto_exclude_stretching,
)
from .assemble import assemble, regenerate_movelaps

__all__ = [
    "PlannerError",
    "InvalidSequence",
    "ParseError",
    "DisciplineNotAllowed",
    "NoIdentifierAvailable",
    "NoSessionAvailable",
    "Duration",
    "parse_duration",
    "format_duration",
    "normalize_duration",
    "validate_sequences",
    "total_repetitions",
    "expand",
    "summarize",
    "next_letter",
    "next_session_index",
    "can_assign",
    "effective_size",
    "disciplines_for_totals",
    "should_auto_exclude_stretching",
    "assemble",
    "regenerate_movelaps",
]
