import os
from contextlib import contextmanager
from typing import Iterator

import psycopg


def get_database_url() -> str:
    """Get the database URL from environment variables."""
    return os.environ["DATABASE_URL"]


@contextmanager
def get_db_connection() -> Iterator[psycopg.Connection]:
    """Get a database connection that is closed on exit, even on error."""
    conn = psycopg.connect(get_database_url())
    try:
        yield conn
    finally:
        conn.close()


@contextmanager
def get_db_cursor() -> Iterator[psycopg.Cursor]:
    """Get a cursor for a single statement or a few independent reads.

    Commits on successful completion and rolls back on exception.
    """
    with get_db_connection() as conn:
        with conn.cursor() as cursor:
            try:
                yield cursor
                conn.commit()
            except Exception:
                conn.rollback()
                raise


@contextmanager
def transaction_cursor() -> Iterator[psycopg.Cursor]:
    """Get a cursor inside an explicit transaction block.

    Used for read-then-write paths (allocating a letter or a session index)
    where rows are locked with `SELECT ... FOR UPDATE` and must stay locked
    until the writes commit. Anything raised inside the block, including
    core failures such as a discipline denial, rolls the whole block back.
    """
    with get_db_connection() as conn:
        with conn.transaction():
            with conn.cursor() as cursor:
                yield cursor
