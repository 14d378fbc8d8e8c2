"""Tests for the storage layer repository implementations."""

import pytest

from models import (
    ExerciseOption,
    FillInBlanksExercise,
    MultipleChoiceExercise,
    OrderingExercise,
    Submission,
    SubmissionStatus,
)
from storage import (
    SQLiteExerciseRepository,
    SQLiteSubmissionRepository,
    get_connection,
)


class TestExerciseRepository:
    """Tests for SQLiteExerciseRepository."""

    def test_get_all_returns_empty_for_empty_db(self, test_db_path):
        """Should return empty list when database has no exercises."""
        repo = SQLiteExerciseRepository(test_db_path)
        assert repo.get_all() == []

    def test_get_all_returns_all_exercises(self, populated_test_db, all_exercises):
        """Should return every exercise in creation order."""
        repo = SQLiteExerciseRepository(populated_test_db)
        result = repo.get_all()
        assert [e.id for e in result] == [e.id for e in all_exercises]

    def test_get_by_id_returns_typed_variant(self, populated_test_db):
        """Should rebuild the exercise variant from the stored document."""
        repo = SQLiteExerciseRepository(populated_test_db)
        result = repo.get_by_id("or001")
        assert isinstance(result, OrderingExercise)
        assert result.correct_order == [1, 0, 3, 2]

    def test_get_by_id_returns_none_for_unknown_id(self, populated_test_db):
        repo = SQLiteExerciseRepository(populated_test_db)
        assert repo.get_by_id("nonexistent") is None

    def test_round_trip_preserves_exercise(self, populated_test_db, multiple_choice_exercise):
        repo = SQLiteExerciseRepository(populated_test_db)
        assert repo.get_by_id("mc001") == multiple_choice_exercise

    def test_documents_are_stored_camel_case(self, populated_test_db):
        conn = get_connection(populated_test_db)
        try:
            row = conn.execute(
                "SELECT type, document FROM exercises WHERE id = ?", ("mc001",)
            ).fetchone()
        finally:
            conn.close()
        assert row["type"] == "multiple-choice"
        assert '"isCorrect"' in row["document"]
        assert '"allowMultiple"' in row["document"]

    def test_get_by_lesson(self, test_db_path):
        repo = SQLiteExerciseRepository(test_db_path)
        for i, lesson in enumerate(["L1", "L2", "L1"]):
            repo.save(
                FillInBlanksExercise.model_validate(
                    {
                        "id": f"fb{i}",
                        "points": 2,
                        "lessonId": lesson,
                        "text": "___",
                        "blanks": [{"id": "b", "answer": "x"}],
                    }
                )
            )
        assert [e.id for e in repo.get_by_lesson("L1")] == ["fb0", "fb2"]
        assert [e.id for e in repo.get_by_lesson("L2")] == ["fb1"]
        assert repo.get_by_lesson("L3") == []

    def test_save_replaces_existing_exercise(self, populated_test_db, single_choice_exercise):
        repo = SQLiteExerciseRepository(populated_test_db)
        updated = single_choice_exercise.model_copy(update={"id": "mc001", "points": 3})
        repo.save(updated)
        stored = repo.get_by_id("mc001")
        assert stored.points == 3
        assert len(repo.get_all()) == 6

    def test_save_keeps_creation_time(self, populated_test_db, translation_exercise):
        repo = SQLiteExerciseRepository(populated_test_db)
        query = "SELECT created_at, updated_at FROM exercises WHERE id = ?"
        conn = get_connection(populated_test_db)
        try:
            before = conn.execute(query, ("tr001",)).fetchone()
            repo.save(translation_exercise.model_copy(update={"title": "Cats"}))
            after = conn.execute(query, ("tr001",)).fetchone()
        finally:
            conn.close()
        assert after["created_at"] == before["created_at"]
        assert after["updated_at"] >= before["updated_at"]
        assert repo.get_by_id("tr001").title == "Cats"

    def test_save_rejects_invalid_definition(self, test_db_path):
        repo = SQLiteExerciseRepository(test_db_path)
        exercise = MultipleChoiceExercise(
            id="mc-bad", points=1, options=[ExerciseOption(id="a", text="a")]
        )
        with pytest.raises(ValueError, match="no correct option"):
            repo.save(exercise)
        assert repo.get_by_id("mc-bad") is None

    def test_save_rejects_punctuation_only_keyword(self, test_db_path, translation_exercise):
        repo = SQLiteExerciseRepository(test_db_path)
        exercise = translation_exercise.model_copy(update={"keywords": ["cat", "!!"]})
        with pytest.raises(ValueError, match="Keyword is empty"):
            repo.save(exercise)
        assert repo.get_by_id("tr001") is None


class TestSubmissionRepository:
    """Tests for SQLiteSubmissionRepository."""

    def _submission(self, sid: str, student: str, status=SubmissionStatus.GRADED):
        return Submission(
            id=sid,
            exercise_id="mc001",
            student_id=student,
            answer=["a"],
            score=5.0,
            status=status,
        )

    def test_get_by_id_returns_none_for_unknown_id(self, populated_test_db):
        repo = SQLiteSubmissionRepository(populated_test_db)
        assert repo.get_by_id("missing") is None

    def test_save_and_load(self, populated_test_db):
        repo = SQLiteSubmissionRepository(populated_test_db)
        submission = self._submission("s1", "alice")
        repo.save(submission)
        loaded = repo.get_by_id("s1")
        assert loaded == submission

    def test_get_by_student(self, populated_test_db):
        repo = SQLiteSubmissionRepository(populated_test_db)
        repo.save(self._submission("s1", "alice"))
        repo.save(self._submission("s2", "bob"))
        repo.save(self._submission("s3", "alice"))
        assert {s.id for s in repo.get_by_student("alice")} == {"s1", "s3"}
        assert repo.get_by_student("carol") == []

    def test_get_by_status(self, populated_test_db):
        repo = SQLiteSubmissionRepository(populated_test_db)
        repo.save(self._submission("s1", "alice", SubmissionStatus.PENDING))
        repo.save(self._submission("s2", "alice"))
        pending = repo.get_by_status(SubmissionStatus.PENDING)
        assert [s.id for s in pending] == ["s1"]

    def test_save_replaces_existing(self, populated_test_db):
        repo = SQLiteSubmissionRepository(populated_test_db)
        repo.save(self._submission("s1", "alice", SubmissionStatus.PENDING))
        repo.save(self._submission("s1", "alice", SubmissionStatus.REVIEWED))
        assert repo.get_by_status(SubmissionStatus.PENDING) == []
        assert repo.get_by_id("s1").status == SubmissionStatus.REVIEWED
