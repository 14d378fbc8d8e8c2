"""Database connection management and schema initialization."""

import os
import sqlite3
from pathlib import Path

DEFAULT_DB_PATH = Path(
    os.getenv("TUTOR_DB_PATH", Path(__file__).parent.parent / "data" / "tutor.db")
)

SCHEMA_SQL = """
-- Exercise definitions, stored as JSON documents keyed by id
CREATE TABLE IF NOT EXISTS exercises (
    id TEXT PRIMARY KEY,
    type TEXT NOT NULL,
    lesson_id TEXT,
    document TEXT NOT NULL,  -- JSON object with camelCase keys
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_exercises_lesson ON exercises(lesson_id);

-- Student submissions with their evaluation result
CREATE TABLE IF NOT EXISTS exercise_submissions (
    id TEXT PRIMARY KEY,
    exercise_id TEXT NOT NULL,
    student_id TEXT NOT NULL,
    status TEXT NOT NULL CHECK (status IN ('graded', 'pending', 'reviewed')),
    score REAL NOT NULL DEFAULT 0,
    document TEXT NOT NULL,  -- JSON object with camelCase keys
    submitted_at TEXT NOT NULL,
    reviewed_at TEXT,
    FOREIGN KEY (exercise_id) REFERENCES exercises(id)
);

CREATE INDEX IF NOT EXISTS idx_submissions_student ON exercise_submissions(student_id);
CREATE INDEX IF NOT EXISTS idx_submissions_status ON exercise_submissions(status);
"""


def get_connection(db_path: Path = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Open a connection that returns rows as sqlite3.Row and enforces foreign keys."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_schema(db_path: Path = DEFAULT_DB_PATH) -> None:
    """Create the exercise and submission tables (and the database directory) if missing."""
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection(db_path)
    try:
        conn.executescript(SCHEMA_SQL)
        conn.commit()
    finally:
        conn.close()
