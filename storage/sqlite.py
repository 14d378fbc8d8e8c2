"""SQLite implementations of repository interfaces."""

import json
from pathlib import Path

from .base import ExerciseRepository, SubmissionRepository
from .connection import get_connection, DEFAULT_DB_PATH
from models import (
    Exercise,
    Submission,
    SubmissionStatus,
    parse_exercise,
    utcnow,
)


class SQLiteExerciseRepository(ExerciseRepository):
    """SQLite implementation of ExerciseRepository."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = db_path

    def get_by_id(self, exercise_id: str) -> Exercise | None:
        """Load a single exercise by ID."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                "SELECT document FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = cursor.fetchone()
            return self._row_to_model(row) if row else None
        finally:
            conn.close()

    def get_by_lesson(self, lesson_id: str) -> list[Exercise]:
        """Load the exercises of a lesson in creation order."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                """SELECT document FROM exercises WHERE lesson_id = ?
                ORDER BY created_at, rowid""",
                (lesson_id,),
            )
            return [self._row_to_model(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_all(self) -> list[Exercise]:
        """Load all exercises."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                "SELECT document FROM exercises ORDER BY created_at, rowid"
            )
            return [self._row_to_model(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def save(self, exercise: Exercise) -> None:
        """Create or replace an exercise, keeping its original creation time."""
        is_valid, errors = exercise.validate_definition()
        if not is_valid:
            raise ValueError(f"Exercise {exercise.id} validation failed: {errors}")

        now = utcnow().isoformat()
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                """INSERT INTO exercises (id, type, lesson_id, document, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    type = excluded.type,
                    lesson_id = excluded.lesson_id,
                    document = excluded.document,
                    updated_at = excluded.updated_at""",
                (
                    exercise.id,
                    exercise.type,
                    exercise.lesson_id,
                    exercise.model_dump_json(by_alias=True),
                    now,
                    now,
                ),
            )
            conn.commit()
        finally:
            conn.close()

    def _row_to_model(self, row) -> Exercise:
        """Convert a database row to an exercise model."""
        return parse_exercise(json.loads(row["document"]))


class SQLiteSubmissionRepository(SubmissionRepository):
    """SQLite implementation of SubmissionRepository."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = db_path

    def get_by_id(self, submission_id: str) -> Submission | None:
        """Load a single submission by ID."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                "SELECT document FROM exercise_submissions WHERE id = ?",
                (submission_id,),
            )
            row = cursor.fetchone()
            return self._row_to_model(row) if row else None
        finally:
            conn.close()

    def get_by_student(self, student_id: str) -> list[Submission]:
        """Load a student's submissions, newest first."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                """SELECT document FROM exercise_submissions WHERE student_id = ?
                ORDER BY submitted_at DESC, rowid DESC""",
                (student_id,),
            )
            return [self._row_to_model(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_by_status(self, status: SubmissionStatus) -> list[Submission]:
        """Load submissions with the given status, newest first."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                """SELECT document FROM exercise_submissions WHERE status = ?
                ORDER BY submitted_at DESC, rowid DESC""",
                (SubmissionStatus(status).value,),
            )
            return [self._row_to_model(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def save(self, submission: Submission) -> None:
        """Create or replace a submission."""
        conn = get_connection(self.db_path)
        try:
            # Use INSERT OR REPLACE for upsert behavior
            conn.execute(
                """INSERT OR REPLACE INTO exercise_submissions
                (id, exercise_id, student_id, status, score, document, submitted_at, reviewed_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    submission.id,
                    submission.exercise_id,
                    submission.student_id,
                    submission.status.value,
                    submission.score,
                    submission.model_dump_json(by_alias=True),
                    submission.submitted_at.isoformat(),
                    submission.reviewed_at.isoformat()
                    if submission.reviewed_at
                    else None,
                ),
            )
            conn.commit()
        finally:
            conn.close()

    def _row_to_model(self, row) -> Submission:
        """Convert a database row to a Submission model."""
        return Submission.model_validate_json(row["document"])
