"""Grading strategies, one evaluator per exercise type.

Each evaluator defines its own unit of correctness (an option, a blank, a
pair, a position, a whole translation) and its own partial-credit rule.
"""

from collections.abc import Iterable, Mapping

from exercises.base import ExerciseEvaluator
from exercises.feedback import generate_translation_feedback
from exercises.normalize import answers_match, normalize
from models import (
    ExerciseResult,
    FillInBlanksExercise,
    FreeWritingExercise,
    MatchingExercise,
    MultipleChoiceExercise,
    OrderingExercise,
    ResultDetails,
    TranslationExercise,
)


class MultipleChoiceEvaluator(ExerciseEvaluator[MultipleChoiceExercise]):
    """Set comparison of selected option ids against the correct ones."""

    def evaluate(self, answer: Iterable[str] | str | None) -> ExerciseResult:
        selected = _as_selection(answer)
        correct = self.exercise.correct_option_ids
        if not correct:
            self.warn_malformed("no correct option")
            return self.zero_result()

        overlap = len(selected & correct)
        is_correct = selected == correct
        if is_correct:
            score = float(self.exercise.points)
        else:
            score = overlap / len(correct) * self.exercise.points

        return ExerciseResult(
            correct=is_correct,
            score=self.round_score(score),
            details=ResultDetails(
                correct_answers=overlap,
                total_questions=len(correct),
            ),
            feedback=self.format_feedback(is_correct, score),
        )


class FillInBlanksEvaluator(ExerciseEvaluator[FillInBlanksExercise]):
    """Normalized comparison of each blank; a missing blank counts as empty."""

    def evaluate(self, answer: Mapping[str, str] | None) -> ExerciseResult:
        answers = answer or {}
        blanks = self.exercise.blanks
        incorrect = [
            blank.id
            for blank in blanks
            if not answers_match(answers.get(blank.id), blank.answer)
        ]
        return self.graded_units(len(blanks) - len(incorrect), len(blanks), incorrect)


class MatchingEvaluator(ExerciseEvaluator[MatchingExercise]):
    """Answers are keyed by pair id and compared with the stored right side.

    Pair ids are used rather than the left-hand text, which is authored free
    text and may repeat.
    """

    def evaluate(self, answer: Mapping[str, str] | None) -> ExerciseResult:
        matches = answer or {}
        pairs = self.exercise.pairs
        incorrect = [pair.id for pair in pairs if matches.get(pair.id) != pair.right]
        return self.graded_units(len(pairs) - len(incorrect), len(pairs), incorrect)


class OrderingEvaluator(ExerciseEvaluator[OrderingExercise]):
    """Position-wise comparison with the canonical order.

    ``incorrect_items`` holds the mismatched positions, not item ids. Positions
    past the end of a short answer count as misses; extra entries are ignored.
    """

    def evaluate(self, answer: Iterable[int] | None) -> ExerciseResult:
        submitted = list(answer or [])
        expected = self.exercise.correct_order
        incorrect = [
            str(position)
            for position, item in enumerate(expected)
            if position >= len(submitted) or submitted[position] != item
        ]
        return self.graded_units(
            len(expected) - len(incorrect), len(expected), incorrect
        )


class TranslationEvaluator(ExerciseEvaluator[TranslationExercise]):
    """Exact match against any reference, else capped keyword credit.

    Only an exact (normalized) match is ``correct``; keyword hits earn
    partial score up to ``keyword_credit_cap`` of the points.
    """

    def evaluate(self, answer: str | None) -> ExerciseResult:
        translation = normalize(answer)
        references = {normalize(t) for t in self.exercise.acceptable_translations}
        is_exact_match = translation in references

        if is_exact_match:
            score = float(self.exercise.points)
        else:
            score = self._keyword_score(translation)

        return ExerciseResult(
            correct=is_exact_match,
            score=self.round_score(score),
            details=ResultDetails(
                correct_answers=1 if is_exact_match else 0,
                total_questions=1,
                suggestions=None
                if is_exact_match
                else list(self.exercise.acceptable_translations),
            ),
            feedback=self.format_feedback(is_exact_match, score),
        )

    def _keyword_score(self, translation: str) -> float:
        keywords = [normalize(k) for k in self.exercise.keywords or []]
        if not keywords:
            return 0.0
        found = sum(1 for keyword in keywords if keyword in translation)
        return (
            found / len(keywords) * self.exercise.points * self.config.keyword_credit_cap
        )

    def format_feedback(self, is_correct: bool, score: float) -> str:
        return generate_translation_feedback(
            is_correct, score, self.exercise.points, self.config.translation_feedback
        )


class FreeWritingEvaluator(ExerciseEvaluator[FreeWritingExercise]):
    """Never auto-graded; the result waits for a teacher review."""

    def evaluate(self, answer: str | None) -> ExerciseResult:
        return ExerciseResult(
            correct=False,
            score=0.0,
            details=ResultDetails(
                correct_answers=0,
                total_questions=1,
                pending=True,
            ),
            feedback=self.config.pending_feedback,
        )


def _as_selection(answer: Iterable[str] | str | None) -> set[str]:
    """Turn a selection (single id or iterable of ids) into a set of ids."""
    if answer is None:
        return set()
    if isinstance(answer, str):
        return {answer}
    return set(answer)
