"""Tests for the discipline caps and the stretching exclusion."""

import pytest

from planner.core import (
    can_assign,
    disciplines_for_totals,
    effective_size,
    should_auto_exclude_stretching,
)


class TestEffectiveSize:
    """Test effective_size."""

    def test_counts_plain_disciplines(self):
        assert effective_size({"swim", "run", "bike"}) == 3

    def test_stretching_counts_below_the_cap(self):
        assert effective_size({"swim", "run", "stretching"}) == 3

    def test_stretching_is_free_at_exactly_four(self):
        assert effective_size({"swim", "run", "bike", "stretching"}) == 3

    def test_stretching_aliases_and_case(self):
        assert effective_size({"SWIM", "RUN", "BIKE", "STRETCHING"}) == 3
        assert effective_size({"swim", "run", "bike", "Stretch"}) == 3

    def test_four_without_stretching(self):
        assert effective_size({"swim", "run", "bike", "gym"}) == 4


class TestCanAssign:
    """Test can_assign."""

    def test_discipline_already_on_day_is_allowed(self):
        decision = can_assign(
            "swim", {"swim", "run", "bike", "gym"}, {"run", "bike", "gym", "yoga"}
        )
        assert decision.allowed
        assert decision.reason is None

    def test_fourth_discipline_is_allowed(self):
        decision = can_assign("gym", {"swim", "run", "bike"}, {"swim"})
        assert decision.allowed

    def test_fifth_discipline_is_denied_by_day_cap(self):
        decision = can_assign("yoga", {"swim", "run", "bike", "gym"}, {"swim"})
        assert not decision.allowed
        assert decision.code == "day_cap"
        assert decision.reason == "day already has 4 disciplines: bike, gym, run, swim"

    def test_stretching_frees_a_slot_at_four(self):
        decision = can_assign("gym", {"swim", "run", "bike", "stretching"}, {"swim"})
        assert decision.allowed

    def test_stretching_counts_normally_at_three(self):
        day_set = {"swim", "run", "stretching"}
        assert can_assign("gym", day_set, {"swim"}).allowed
        assert can_assign("bike", day_set, {"swim"}).allowed

    def test_requery_after_reaching_four_with_stretching(self):
        day_set = {"swim", "run", "stretching", "bike"}
        assert can_assign("gym", day_set, {"swim"}).allowed

    def test_five_with_stretching_is_denied(self):
        # The exclusion only applies at exactly four.
        day_set = {"swim", "run", "bike", "gym", "stretching"}
        decision = can_assign("yoga", day_set, {"swim"})
        assert not decision.allowed
        assert decision.code == "day_cap"

    def test_session_cap(self):
        # Day holds 4 with stretching (effective 3) and the session already has 4.
        day_set = {"swim", "run", "bike", "stretching"}
        workout_set = {"swim", "run", "bike", "stretching"}
        decision = can_assign("gym", day_set, workout_set)
        assert not decision.allowed
        assert decision.code == "session_cap"
        assert decision.reason == (
            "session already has 4 disciplines: bike, run, stretching, swim"
        )

    def test_is_deterministic(self):
        args = ("yoga", {"swim", "run", "bike", "gym"}, {"swim"})
        assert can_assign(*args) == can_assign(*args)


class TestStretchingForTotals:
    """Test disciplines_for_totals and should_auto_exclude_stretching."""

    def test_auto_exclusion_at_four(self):
        disciplines = ["SWIM", "RUN", "BIKE", "STRETCHING"]
        assert should_auto_exclude_stretching(disciplines)
        assert disciplines_for_totals(disciplines) == ["SWIM", "RUN", "BIKE"]

    def test_no_auto_exclusion_below_four(self):
        disciplines = ["SWIM", "RUN", "STRETCHING"]
        assert not should_auto_exclude_stretching(disciplines)
        assert disciplines_for_totals(disciplines) == disciplines

    @pytest.mark.parametrize("name", ["stretching", "stretch", "Stretching"])
    def test_manual_exclusion(self, name: str):
        assert disciplines_for_totals(["swim", name], manual_exclude=True) == ["swim"]

    def test_manual_exclusion_without_stretching(self):
        assert disciplines_for_totals(["swim", "run"], manual_exclude=True) == [
            "swim",
            "run",
        ]
