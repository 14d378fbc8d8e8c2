"""Abstract base class and shared utilities for exercise evaluators."""

import logging
from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Generic, TypeVar

from exercises.config import DEFAULT_CONFIG, EvaluationConfig
from exercises.feedback import generate_feedback
from models import BaseExercise, ExerciseResult, ResultDetails

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseExercise)


class ExerciseEvaluator(ABC, Generic[E]):
    """Abstract base class for exercise evaluators.

    Each exercise type implements this interface to turn a student's answer
    into an ``ExerciseResult``. Evaluators are pure: they read the exercise
    and the answer, never mutate either, and keep no state between calls.

    To support a new exercise type:
    1. Create a Pydantic model in models.py extending BaseExercise
    2. Create an evaluator extending ExerciseEvaluator[YourExerciseModel]
    3. Implement ``evaluate``
    4. Register it in EVALUATORS in exercises/engine.py
    """

    def __init__(self, exercise: E, config: EvaluationConfig = DEFAULT_CONFIG):
        self.exercise = exercise
        self.config = config

    @abstractmethod
    def evaluate(self, answer: Any) -> ExerciseResult:
        """Grade an answer.

        Args:
            answer: The student's answer in the shape implied by the exercise type.

        Returns:
            A fresh ExerciseResult.
        """
        ...

    def format_feedback(self, is_correct: bool, score: float) -> str:
        """Return the feedback string. Override for type-specific wording."""
        return generate_feedback(
            is_correct, score, self.exercise.points, self.config.feedback
        )

    def round_score(self, score: float) -> float:
        return round_score(score, self.config.score_decimals)

    def graded_units(
        self,
        hits: int,
        total: int,
        incorrect_items: list[str] | None = None,
    ) -> ExerciseResult:
        """Build the result for exercises scored as hits out of a unit count.

        The exercise is correct only when every unit is a hit. An exercise
        with no units scores zero instead of dividing by zero.
        """
        if total == 0:
            self.warn_malformed("no answerable units")
            return self.zero_result(incorrect_items)

        is_correct = hits == total
        score = hits / total * self.exercise.points
        return ExerciseResult(
            correct=is_correct,
            score=self.round_score(score),
            details=ResultDetails(
                correct_answers=hits,
                total_questions=total,
                incorrect_items=incorrect_items,
            ),
            feedback=self.format_feedback(is_correct, score),
        )

    def zero_result(self, incorrect_items: list[str] | None = None) -> ExerciseResult:
        return ExerciseResult(
            correct=False,
            score=0.0,
            details=ResultDetails(
                correct_answers=0,
                total_questions=0,
                incorrect_items=incorrect_items,
            ),
            feedback=self.format_feedback(False, 0.0),
        )

    def warn_malformed(self, reason: str) -> None:
        logger.warning(
            "malformed_exercise type=%s id=%s reason=%s",
            self.exercise.type,
            self.exercise.id,
            reason,
        )


def round_score(score: float, decimals: int = 1) -> float:
    """Round half away from zero to a fixed number of decimals.

    Uses the shortest decimal representation of the float so that, for
    example, 2.45 rounds to 2.5 rather than to 2.4.
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(score)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)
