"""Shared discipline configuration for the allocation rules."""

# At most this many distinct disciplines per workout session and per day.
MAX_DISCIPLINES_PER_SESSION = 4
MAX_DISCIPLINES_PER_DAY = 4

# Names under which stretching shows up in the discipline catalog.
# Compared case-insensitively.
STRETCHING_NAMES: frozenset[str] = frozenset({"stretching", "stretch"})


def is_stretching(discipline: str) -> bool:
    """Check whether a discipline identifier denotes stretching.

    Args:
        discipline: Discipline identifier, e.g. "STRETCHING" or "swim"

    Returns:
        True if the identifier matches one of the stretching names.
    """
    return discipline.strip().lower() in STRETCHING_NAMES
