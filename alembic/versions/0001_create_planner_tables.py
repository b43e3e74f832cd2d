"""Create days, workouts, moveframes and movelaps tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        CREATE TABLE days (
            id VARCHAR(255) PRIMARY KEY,
            date DATE NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    op.execute("""
        CREATE TABLE workouts (
            id VARCHAR(255) PRIMARY KEY,
            day_id VARCHAR(255) NOT NULL REFERENCES days(id) ON DELETE CASCADE,
            session_index SMALLINT NOT NULL CHECK (session_index BETWEEN 1 AND 3),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            UNIQUE (day_id, session_index)
        )
    """)

    # Letters are unique per workout; an idempotency key guards against
    # duplicate creates from retried requests to the same workout.
    op.execute("""
        CREATE TABLE moveframes (
            id VARCHAR(255) PRIMARY KEY,
            workout_id VARCHAR(255) NOT NULL REFERENCES workouts(id) ON DELETE CASCADE,
            letter CHAR(1) NOT NULL CHECK (letter BETWEEN 'A' AND 'Z'),
            discipline VARCHAR(100) NOT NULL,
            kind VARCHAR(20) NOT NULL
                CHECK (kind IN ('STANDARD', 'BATTERY', 'ANNOTATION', 'MANUAL')),
            summary TEXT NOT NULL,
            section_id VARCHAR(255),
            notes TEXT,
            annotation JSONB,
            content TEXT,
            manual_repetitions INT,
            manual_distance INT,
            idempotency_key VARCHAR(255),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            UNIQUE (workout_id, letter),
            UNIQUE (workout_id, idempotency_key)
        )
    """)

    op.execute("""
        CREATE TABLE movelaps (
            moveframe_id VARCHAR(255) NOT NULL REFERENCES moveframes(id) ON DELETE CASCADE,
            sequence_position INT NOT NULL CHECK (sequence_position >= 0),
            distance FLOAT NOT NULL,
            pace_label VARCHAR(50) NOT NULL,
            style VARCHAR(100),
            rest_after VARCHAR(20) NOT NULL,
            annotations JSONB NOT NULL DEFAULT '{}',
            notes TEXT,
            status VARCHAR(20) NOT NULL DEFAULT 'PENDING'
                CHECK (status IN ('PENDING', 'COMPLETED', 'SKIPPED', 'DISABLED')),
            PRIMARY KEY (moveframe_id, sequence_position)
        )
    """)

    op.execute("CREATE INDEX idx_days_date ON days (date)")
    op.execute("CREATE INDEX idx_workouts_day_id ON workouts (day_id)")


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TABLE IF EXISTS movelaps")
    op.execute("DROP TABLE IF EXISTS moveframes")
    op.execute("DROP TABLE IF EXISTS workouts")
    op.execute("DROP TABLE IF EXISTS days")
