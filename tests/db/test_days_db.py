"""Tests for day and workout database operations."""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from planner.core import NoSessionAvailable
from planner.db.days import create_day, create_workout, get_day


def _mock_transaction(mock_transaction_cursor: MagicMock) -> MagicMock:
    mock_cursor = MagicMock()
    mock_transaction_cursor.return_value.__enter__.return_value = mock_cursor
    return mock_cursor


class TestCreateDay:
    """Test create_day function."""

    @patch("planner.db.days.get_db_cursor")
    def test_inserts_day(self, mock_get_cursor):
        mock_cursor = MagicMock()
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchone.return_value = ("day_abc", date(2026, 3, 2))

        day = create_day(date(2026, 3, 2))

        assert day.id == "day_abc"
        assert day.workouts == []
        call_args = mock_cursor.execute.call_args[0]
        assert "INSERT INTO days" in call_args[0]
        assert call_args[1][0].startswith("day_")
        assert call_args[1][1] == date(2026, 3, 2)


class TestGetDay:
    """Test get_day function."""

    @patch("planner.db.days.get_db_cursor")
    def test_groups_moveframes_by_workout(self, mock_get_cursor):
        mock_cursor = MagicMock()
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchone.return_value = ("day_1", date(2026, 3, 2))
        mock_cursor.fetchall.side_effect = [
            [("wo_1", "day_1", 1), ("wo_3", "day_1", 3)],
            [
                ("mf_1", "wo_1", "A", "swim", "STANDARD", "s", None, None, None, None, None, None),
                ("mf_2", "wo_3", "A", "run", "STANDARD", "s", None, None, None, None, None, None),
                ("mf_3", "wo_3", "B", "stretching", "MANUAL", "Mobility", None, None, None, "Mobility", None, None),
            ],
        ]

        day = get_day("day_1")

        assert day is not None
        assert [w.session_index for w in day.workouts] == [1, 3]
        assert [mf.letter for mf in day.workouts[1].moveframes] == ["A", "B"]
        assert day.discipline_set == {"swim", "run", "stretching"}

    @patch("planner.db.days.get_db_cursor")
    def test_returns_none_when_missing(self, mock_get_cursor):
        mock_cursor = MagicMock()
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchone.return_value = None

        assert get_day("day_missing") is None
        mock_cursor.execute.assert_called_once()


class TestCreateWorkout:
    """Test create_workout function."""

    @patch("planner.db.days.transaction_cursor")
    def test_uses_first_free_session(self, mock_transaction_cursor):
        mock_cursor = _mock_transaction(mock_transaction_cursor)
        mock_cursor.fetchone.return_value = ("day_1",)
        mock_cursor.fetchall.return_value = [(1,), (3,)]

        workout = create_workout("day_1")

        assert workout.session_index == 2
        assert workout.owner_day_id == "day_1"
        assert workout.id.startswith("wo_")
        insert_args = mock_cursor.execute.call_args[0]
        assert "INSERT INTO workouts" in insert_args[0]
        assert insert_args[1] == (workout.id, "day_1", 2)

    @patch("planner.db.days.transaction_cursor")
    def test_full_day_raises(self, mock_transaction_cursor):
        mock_cursor = _mock_transaction(mock_transaction_cursor)
        mock_cursor.fetchone.return_value = ("day_1",)
        mock_cursor.fetchall.return_value = [(1,), (2,), (3,)]

        with pytest.raises(NoSessionAvailable):
            create_workout("day_1")

    @patch("planner.db.days.transaction_cursor")
    def test_missing_day_raises(self, mock_transaction_cursor):
        mock_cursor = _mock_transaction(mock_transaction_cursor)
        mock_cursor.fetchone.return_value = None

        with pytest.raises(ValueError):
            create_workout("day_missing")
