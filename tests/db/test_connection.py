"""Tests for the connection and cursor context managers."""

from unittest.mock import MagicMock, patch

import pytest

from planner.db.connection import get_db_cursor, transaction_cursor


class TestGetDbCursor:
    """Test get_db_cursor."""

    @patch("planner.db.connection.psycopg.connect")
    def test_commits_and_closes(self, mock_connect):
        mock_conn = MagicMock()
        mock_connect.return_value = mock_conn

        with get_db_cursor() as cursor:
            cursor.execute("SELECT 1")

        mock_conn.commit.assert_called_once()
        mock_conn.rollback.assert_not_called()
        mock_conn.close.assert_called_once()

    @patch("planner.db.connection.psycopg.connect")
    def test_rolls_back_on_error(self, mock_connect):
        mock_conn = MagicMock()
        mock_connect.return_value = mock_conn

        with pytest.raises(RuntimeError):
            with get_db_cursor():
                raise RuntimeError("boom")

        mock_conn.rollback.assert_called_once()
        mock_conn.commit.assert_not_called()
        mock_conn.close.assert_called_once()


class TestTransactionCursor:
    """Test transaction_cursor."""

    @patch("planner.db.connection.psycopg.connect")
    def test_runs_inside_transaction_block(self, mock_connect):
        mock_conn = MagicMock()
        mock_cursor = MagicMock()
        mock_connect.return_value = mock_conn
        mock_conn.cursor.return_value.__enter__.return_value = mock_cursor

        with transaction_cursor() as cursor:
            assert cursor is mock_cursor

        mock_conn.transaction.assert_called_once()
        mock_conn.close.assert_called_once()

    @patch("planner.db.connection.psycopg.connect")
    def test_error_propagates_through_transaction(self, mock_connect):
        mock_conn = MagicMock()
        mock_connect.return_value = mock_conn

        with pytest.raises(ValueError):
            with transaction_cursor():
                raise ValueError("Workout wo_1 not found")

        # The transaction block saw the exception, so psycopg rolls it back.
        exit_args = mock_conn.transaction.return_value.__exit__.call_args[0]
        assert exit_args[0] is ValueError
        mock_conn.close.assert_called_once()
