"""Storage layer for the language tutor.

Provides repository interfaces and SQLite implementations for persisting
exercise definitions and student submissions as JSON documents.
"""

from pathlib import Path

from .base import ExerciseRepository, SubmissionRepository
from .sqlite import SQLiteExerciseRepository, SQLiteSubmissionRepository
from .connection import get_connection, init_schema, DEFAULT_DB_PATH

__all__ = [
    # Abstract interfaces
    "ExerciseRepository",
    "SubmissionRepository",
    # SQLite implementations
    "SQLiteExerciseRepository",
    "SQLiteSubmissionRepository",
    # Connection utilities
    "get_connection",
    "init_schema",
    "DEFAULT_DB_PATH",
    # Factory functions
    "get_exercise_repo",
    "get_submission_repo",
]


def get_exercise_repo(db_path: Path = DEFAULT_DB_PATH) -> ExerciseRepository:
    """Get an ExerciseRepository instance."""
    return SQLiteExerciseRepository(db_path)


def get_submission_repo(db_path: Path = DEFAULT_DB_PATH) -> SubmissionRepository:
    """Get a SubmissionRepository instance."""
    return SQLiteSubmissionRepository(db_path)
