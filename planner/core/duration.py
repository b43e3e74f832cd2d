"""Parsing and formatting of short duration tokens such as 1'20" or 30"."""

import re
from dataclasses import dataclass

from .errors import ParseError


# Optional minutes followed by ', then optional seconds optionally followed by ".
# Bare digits are seconds.
_DURATION_RE = re.compile(r"""^(?:(?P<minutes>\d+)')?(?:(?P<seconds>\d+)"?)?$""")
_ALLOWED_CHARS = frozenset("0123456789'\"")


@dataclass(frozen=True, order=True)
class Duration:
    """A duration in whole seconds."""

    seconds: int

    def __post_init__(self):
        if self.seconds < 0:
            raise ParseError(f"Duration cannot be negative: {self.seconds}")

    @property
    def minutes_and_seconds(self) -> tuple[int, int]:
        return divmod(self.seconds, 60)

    def __str__(self) -> str:
        return format_duration(self)


def parse_duration(text: str) -> Duration:
    """Parse a duration token into a `Duration`.

    Accepts `1'20"`, `1'20`, `1'`, `30"` and `30`. Seconds after a minutes
    mark may exceed 59 and are folded into minutes.

    Raises:
        ParseError: If the token is empty, contains anything but digits and the
            two separators, or is otherwise malformed.
    """
    cleaned = text.strip()
    if not cleaned:
        raise ParseError("Duration is empty")

    bad_chars = sorted(set(cleaned) - _ALLOWED_CHARS)
    if bad_chars:
        raise ParseError(
            f"Invalid duration {text!r}: unexpected characters {''.join(bad_chars)!r}"
        )

    match = _DURATION_RE.match(cleaned)
    if match is None or (match["minutes"] is None and match["seconds"] is None):
        raise ParseError(f"Invalid duration {text!r}")

    minutes = int(match["minutes"] or 0)
    seconds = int(match["seconds"] or 0)
    return Duration(minutes * 60 + seconds)


def format_duration(duration: Duration) -> str:
    """Render a duration as its canonical token.

    Examples: `0"`, `30"`, `1'`, `1'05"`, `1'20"`.
    """
    minutes, seconds = duration.minutes_and_seconds
    if minutes == 0:
        return f'{seconds}"'
    if seconds == 0:
        return f"{minutes}'"
    return f"{minutes}'{seconds:02d}\""


def normalize_duration(text: str) -> str:
    """Parse a token and return it in canonical form."""
    return format_duration(parse_duration(text))
