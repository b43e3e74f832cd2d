"""Sequence specifications and the annotations shared by a whole moveframe."""

from typing import Literal

from pydantic import field_validator

from .base import CamelModel


AlarmSound = Literal["Beep", "Bell"]


class Sequence(CamelModel):
    """A compact declaration of N identical repeats.

    Only types are enforced here. Range checks (repetition count, distance,
    rest tokens) happen in `planner.core.validation` so that a malformed
    sequence is reported as `InvalidSequence` rather than a schema error.
    """

    distance: float  # meters, or the discipline's own unit
    pace_label: str  # effort zone, e.g. "A2"
    style: str = ""  # e.g. stroke type; empty for disciplines without one
    repetition_count: int
    intra_rest_interval: str  # rest between repeats, e.g. 1'20"
    terminal_rest_interval: str | None = None  # rest after the last repeat

    @field_validator("terminal_rest_interval", mode="before")
    @classmethod
    def blank_terminal_rest_is_absent(cls, v: str | None) -> str | None:
        # Forms submit an empty string when no end pause was chosen.
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def rest_for_last_repeat(self) -> str:
        """The rest token applied after the final repeat of this sequence."""
        if self.terminal_rest_interval is None:
            return self.intra_rest_interval
        return self.terminal_rest_interval


class GlobalAnnotations(CamelModel):
    """Fields applied uniformly to every movelap of a moveframe."""

    pace_target: str | None = None  # e.g. pace per 100m
    total_time_target: str | None = None
    alarm_offset: int | None = None  # signed, typically -1..-10
    alarm_sound: AlarmSound = "Beep"
    note: str | None = None
    applied_technique: str | None = None

    def movelap_note(self) -> str | None:
        """The note written on each movelap, with the technique appended."""
        if not self.applied_technique:
            return self.note or None
        technique = f"Technique: {self.applied_technique}"
        if self.note:
            return f"{self.note}\n\n{technique}"
        return technique
