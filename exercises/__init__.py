"""Exercise evaluation engine for the language tutor.

This package grades student answers. It performs no I/O: persistence and
review workflows live in the storage layer and in submissions.py.

Architecture:
- Exercise definitions are Pydantic models in models.py (tagged by ``type``)
- Evaluators implement one grading strategy per exercise type
- The engine dispatches on the type tag and returns an ExerciseResult

Evaluators:
- MultipleChoiceEvaluator: Set comparison with partial credit
- FillInBlanksEvaluator: Normalized per-blank comparison
- MatchingEvaluator: Per-pair comparison keyed by pair id
- OrderingEvaluator: Position-wise comparison
- TranslationEvaluator: Exact match or capped keyword credit
- FreeWritingEvaluator: Always pending teacher review

Configuration:
- EvaluationConfig: Scoring constants and feedback wording
"""

from exercises.base import ExerciseEvaluator, round_score
from exercises.config import (
    DEFAULT_CONFIG,
    EvaluationConfig,
    FeedbackConfig,
    FeedbackTier,
    TranslationFeedbackConfig,
)
from exercises.engine import (
    EVALUATORS,
    UnsupportedExerciseType,
    evaluate,
    evaluate_record,
    get_evaluator,
)
from exercises.evaluators import (
    FillInBlanksEvaluator,
    FreeWritingEvaluator,
    MatchingEvaluator,
    MultipleChoiceEvaluator,
    OrderingEvaluator,
    TranslationEvaluator,
)
from exercises.feedback import generate_feedback, generate_translation_feedback
from exercises.normalize import answers_match, count_words, normalize

__all__ = [
    # Entry points
    "evaluate",
    "evaluate_record",
    "get_evaluator",
    "EVALUATORS",
    "UnsupportedExerciseType",
    # Evaluators
    "ExerciseEvaluator",
    "MultipleChoiceEvaluator",
    "FillInBlanksEvaluator",
    "MatchingEvaluator",
    "OrderingEvaluator",
    "TranslationEvaluator",
    "FreeWritingEvaluator",
    # Configuration
    "EvaluationConfig",
    "FeedbackConfig",
    "FeedbackTier",
    "TranslationFeedbackConfig",
    "DEFAULT_CONFIG",
    # Helpers
    "normalize",
    "answers_match",
    "count_words",
    "round_score",
    "generate_feedback",
    "generate_translation_feedback",
]
