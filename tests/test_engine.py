"""Tests for type dispatch in the evaluation engine."""

import pytest

from exercises import (
    EVALUATORS,
    FreeWritingEvaluator,
    MultipleChoiceEvaluator,
    UnsupportedExerciseType,
    evaluate,
    evaluate_record,
    get_evaluator,
)
from models import ExerciseType


class TestDispatch:
    """Tests for evaluate() and get_evaluator()."""

    def test_every_type_has_an_evaluator(self):
        assert set(EVALUATORS) == set(ExerciseType)

    def test_get_evaluator_accepts_plain_tags(self):
        assert get_evaluator("multiple-choice") is MultipleChoiceEvaluator
        assert get_evaluator(ExerciseType.FREE_WRITING) is FreeWritingEvaluator

    @pytest.mark.parametrize("tag", ["essay", "", None, "Multiple-Choice"])
    def test_unknown_tag_raises(self, tag):
        with pytest.raises(UnsupportedExerciseType) as exc_info:
            get_evaluator(tag)
        assert exc_info.value.exercise_type == tag

    def test_evaluate_routes_each_type(self, all_exercises):
        answers = {
            "multiple-choice": ["a", "c"],
            "fill-in-blanks": {"b1": "soy", "b2": "vive", "b3": "bebemos", "b4": "llegan"},
            "matching": {"p1": "perro", "p2": "gato", "p3": "pájaro"},
            "ordering": [1, 0, 3, 2],
            "translation": "the cat sat",
            "free-writing": "Fui a la playa.",
        }
        for exercise in all_exercises:
            result = evaluate(exercise, answers[exercise.type])
            if exercise.type == "free-writing":
                assert result.is_pending
                assert result.score == 0.0
            else:
                assert result.correct is True, exercise.type
                assert result.score == exercise.points

    def test_evaluate_rejects_objects_without_known_type(self):
        class Quiz:
            id = "q1"
            type = "quiz"
            points = 1

        with pytest.raises(UnsupportedExerciseType):
            evaluate(Quiz(), [])


class TestEvaluateRecord:
    """Tests for grading raw exercise documents."""

    def test_camel_case_document(self):
        record = {
            "id": "mc-doc",
            "type": "multiple-choice",
            "points": 10,
            "difficulty": "beginner",
            "question": "Pick the vowels",
            "allowMultiple": True,
            "options": [
                {"id": "a", "text": "a", "isCorrect": True},
                {"id": "b", "text": "b", "isCorrect": False},
                {"id": "c", "text": "e", "isCorrect": True},
            ],
        }
        result = evaluate_record(record, ["a"])
        assert result.score == 5.0
        assert result.correct is False
        assert result.feedback == "Keep practicing! Review the topics and try again."

    def test_translation_document(self):
        record = {
            "id": "tr-doc",
            "type": "translation",
            "points": 4,
            "sourceText": "El gato se sentó",
            "targetLanguage": "en",
            "acceptableTranslations": ["the cat sat"],
        }
        result = evaluate_record(record, "The Cat Sat.")
        assert result.correct is True
        assert result.score == 4.0

    def test_unknown_type_raises_unsupported(self):
        record = {"id": "x", "type": "crossword", "points": 5}
        with pytest.raises(UnsupportedExerciseType):
            evaluate_record(record, {})

    def test_missing_type_raises_unsupported(self):
        with pytest.raises(UnsupportedExerciseType):
            evaluate_record({"id": "x", "points": 5}, {})
