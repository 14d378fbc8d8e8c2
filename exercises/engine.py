"""Entry point of the evaluation engine: dispatch on the exercise type tag."""

import logging
from typing import Any

from exercises.base import ExerciseEvaluator
from exercises.config import DEFAULT_CONFIG, EvaluationConfig
from exercises.evaluators import (
    FillInBlanksEvaluator,
    FreeWritingEvaluator,
    MatchingEvaluator,
    MultipleChoiceEvaluator,
    OrderingEvaluator,
    TranslationEvaluator,
)
from models import BaseExercise, ExerciseResult, ExerciseType, parse_exercise

logger = logging.getLogger(__name__)


class UnsupportedExerciseType(Exception):
    """The exercise's type tag has no evaluator.

    This is a caller or data error (for instance a new exercise type stored
    before the engine supports it), not an evaluation outcome.
    """

    def __init__(self, exercise_type: Any):
        self.exercise_type = exercise_type
        super().__init__(f"Unsupported exercise type: {exercise_type!r}")


# Registry of evaluator classes
EVALUATORS: dict[ExerciseType, type[ExerciseEvaluator]] = {
    ExerciseType.MULTIPLE_CHOICE: MultipleChoiceEvaluator,
    ExerciseType.FILL_IN_BLANKS: FillInBlanksEvaluator,
    ExerciseType.MATCHING: MatchingEvaluator,
    ExerciseType.ORDERING: OrderingEvaluator,
    ExerciseType.TRANSLATION: TranslationEvaluator,
    ExerciseType.FREE_WRITING: FreeWritingEvaluator,
}


def get_evaluator(exercise_type: Any) -> type[ExerciseEvaluator]:
    """Get the evaluator class for the given type tag."""
    try:
        return EVALUATORS[ExerciseType(exercise_type)]
    except (ValueError, KeyError):
        raise UnsupportedExerciseType(exercise_type) from None


def evaluate(
    exercise: BaseExercise,
    answer: Any,
    config: EvaluationConfig = DEFAULT_CONFIG,
) -> ExerciseResult:
    """Grade an answer to an exercise.

    The answer must already have the shape implied by the exercise type:
    selected option ids, blank id -> text, pair id -> right value, a list of
    item indices, or free text.

    Raises:
        UnsupportedExerciseType: If the exercise type has no evaluator.
    """
    exercise_type = getattr(exercise, "type", None)
    evaluator_class = get_evaluator(exercise_type)
    result = evaluator_class(exercise, config).evaluate(answer)
    logger.debug(
        "evaluated type=%s id=%s score=%s correct=%s",
        exercise_type,
        exercise.id,
        result.score,
        result.correct,
    )
    return result


def evaluate_record(
    record: dict[str, Any],
    answer: Any,
    config: EvaluationConfig = DEFAULT_CONFIG,
) -> ExerciseResult:
    """Grade an answer against a raw exercise document.

    An unknown ``type`` tag raises UnsupportedExerciseType rather than a
    validation error, so callers can tell the two apart.
    """
    get_evaluator(record.get("type"))
    return evaluate(parse_exercise(record), answer, config)
