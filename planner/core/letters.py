"""First-gap allocation of moveframe letters and session indexes."""

import logging
import string
from typing import Iterable

from .errors import NoIdentifierAvailable, NoSessionAvailable

logger = logging.getLogger(__name__)

LETTERS = string.ascii_uppercase
SESSION_INDEXES = (1, 2, 3)


def next_letter(existing_letters: Iterable[str]) -> str:
    """Return the first letter A..Z not already used in the workout.

    This fills gaps: after deleting B from {A, B, C} the next letter is B
    again, not D.

    Raises:
        NoIdentifierAvailable: If all 26 letters are taken.
    """
    taken = set(existing_letters)
    for letter in LETTERS:
        if letter not in taken:
            logger.debug("Allocated moveframe letter %s", letter)
            return letter
    raise NoIdentifierAvailable("All 26 moveframe letters are in use")


def next_session_index(existing_indexes: Iterable[int]) -> int:
    """Return the first free session index (1, 2 or 3) on a day.

    Raises:
        NoSessionAvailable: If the day already has three sessions.
    """
    taken = set(existing_indexes)
    for index in SESSION_INDEXES:
        if index not in taken:
            return index
    raise NoSessionAvailable("A day holds at most 3 workout sessions")
