from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ExerciseType(str, Enum):
    MULTIPLE_CHOICE = "multiple-choice"
    FILL_IN_BLANKS = "fill-in-blanks"
    MATCHING = "matching"
    ORDERING = "ordering"
    TRANSLATION = "translation"
    FREE_WRITING = "free-writing"


class DocumentModel(BaseModel):
    """Base for models stored as documents with camelCase keys.

    Attributes are snake_case in Python; both spellings are accepted on input
    and ``model_dump(by_alias=True)`` produces the document form.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Exercise Definitions
# ============================================================================


class ExerciseOption(DocumentModel):
    id: str
    text: str
    is_correct: bool = False


class ExerciseBlank(DocumentModel):
    id: str
    answer: str
    position: int = 0
    hint: str | None = None


class MatchingPair(DocumentModel):
    id: str
    left: str
    right: str


class BaseExercise(DocumentModel):
    """Fields shared by every exercise type."""

    id: str
    title: str = ""
    instructions: str = ""
    points: int = Field(gt=0)  # Maximum achievable score
    difficulty: Difficulty = Difficulty.BEGINNER
    time_limit: int | None = None  # Seconds
    tags: list[str] = Field(default_factory=list)
    lesson_id: str | None = None

    def validate_definition(self) -> tuple[bool, list[str]]:
        """Check authoring-time invariants of the exercise.

        Evaluation never calls this; malformed exercises are still graded
        (with a zero score) so a bad document cannot crash a submission.

        Returns:
            Tuple of (is_valid, list of error messages).
        """
        errors = self._definition_errors()
        return len(errors) == 0, errors

    def _definition_errors(self) -> list[str]:
        return []


class MultipleChoiceExercise(BaseExercise):
    type: Literal["multiple-choice"] = "multiple-choice"
    question: str = ""
    options: list[ExerciseOption]
    allow_multiple: bool = False

    @property
    def correct_option_ids(self) -> set[str]:
        return {opt.id for opt in self.options if opt.is_correct}

    def _definition_errors(self) -> list[str]:
        errors = []
        if not self.options:
            errors.append("Multiple choice exercise has no options")
        correct = self.correct_option_ids
        if not correct:
            errors.append("Multiple choice exercise has no correct option")
        elif len(correct) > 1 and not self.allow_multiple:
            errors.append(
                "Single answer exercise marks more than one option as correct"
            )
        return errors


class FillInBlanksExercise(BaseExercise):
    type: Literal["fill-in-blanks"] = "fill-in-blanks"
    text: str  # Template with blank markers
    blanks: list[ExerciseBlank]

    def _definition_errors(self) -> list[str]:
        if not self.blanks:
            return ["Fill-in-blanks exercise has no blanks"]
        return []


class MatchingExercise(BaseExercise):
    type: Literal["matching"] = "matching"
    pairs: list[MatchingPair]

    def _definition_errors(self) -> list[str]:
        errors = []
        if not self.pairs:
            errors.append("Matching exercise has no pairs")
        ids = [pair.id for pair in self.pairs]
        if len(ids) != len(set(ids)):
            errors.append("Matching exercise has duplicate pair ids")
        return errors


class OrderingExercise(BaseExercise):
    type: Literal["ordering"] = "ordering"
    items: list[str]
    correct_order: list[int]  # Indices into items, in canonical order

    def _definition_errors(self) -> list[str]:
        errors = []
        if not self.items:
            errors.append("Ordering exercise has no items")
        if sorted(self.correct_order) != list(range(len(self.items))):
            errors.append(
                f"correctOrder must be a permutation of 0..{len(self.items) - 1}"
            )
        return errors


class TranslationExercise(BaseExercise):
    type: Literal["translation"] = "translation"
    source_text: str
    target_language: str
    acceptable_translations: list[str]
    keywords: list[str] | None = None  # Partial credit when no exact match

    def _definition_errors(self) -> list[str]:
        # exercises imports this module
        from exercises.normalize import normalize

        errors = []
        if not self.acceptable_translations:
            errors.append("Translation exercise has no acceptable translations")
        if any(not normalize(t) for t in self.acceptable_translations):
            errors.append("Acceptable translation is empty after normalization")
        if any(not normalize(k) for k in self.keywords or []):
            errors.append("Keyword is empty after normalization")
        return errors


class FreeWritingExercise(BaseExercise):
    type: Literal["free-writing"] = "free-writing"
    prompt: str
    min_words: int | None = None
    max_words: int | None = None
    required_elements: list[str] | None = None

    def _definition_errors(self) -> list[str]:
        if (
            self.min_words is not None
            and self.max_words is not None
            and self.min_words > self.max_words
        ):
            return ["minWords is greater than maxWords"]
        return []


Exercise = Annotated[
    Union[
        MultipleChoiceExercise,
        FillInBlanksExercise,
        MatchingExercise,
        OrderingExercise,
        TranslationExercise,
        FreeWritingExercise,
    ],
    Field(discriminator="type"),
]

_exercise_adapter: TypeAdapter[Exercise] = TypeAdapter(Exercise)


def parse_exercise(record: dict[str, Any]) -> Exercise:
    """Build the exercise variant named by the record's ``type`` field."""
    return _exercise_adapter.validate_python(record)


# Answer shapes, one per exercise type
MultipleChoiceAnswer = Union[list[str], str]  # Selected option ids, or one id
FillInBlanksAnswer = dict[str, str]  # Blank id -> text
MatchingAnswer = dict[str, str]  # Pair id -> chosen right-hand value
OrderingAnswer = list[int]  # Item indices in the submitted order
TextAnswer = str  # Translation and free writing

ANSWER_ADAPTERS: dict[ExerciseType, TypeAdapter] = {
    ExerciseType.MULTIPLE_CHOICE: TypeAdapter(MultipleChoiceAnswer),
    ExerciseType.FILL_IN_BLANKS: TypeAdapter(FillInBlanksAnswer),
    ExerciseType.MATCHING: TypeAdapter(MatchingAnswer),
    ExerciseType.ORDERING: TypeAdapter(OrderingAnswer),
    ExerciseType.TRANSLATION: TypeAdapter(TextAnswer),
    ExerciseType.FREE_WRITING: TypeAdapter(TextAnswer),
}


def validate_answer(exercise_type: str, answer: Any) -> Any:
    """Check that an answer has the shape its exercise type expects.

    Unknown type tags pass the answer through unchanged; the engine reports
    them when the exercise is evaluated.

    Raises:
        pydantic.ValidationError: If the answer has the wrong shape.
    """
    try:
        adapter = ANSWER_ADAPTERS[ExerciseType(exercise_type)]
    except ValueError:
        return answer
    return adapter.validate_python(answer)


# ============================================================================
# Evaluation Results
# ============================================================================


class ResultDetails(DocumentModel):
    model_config = ConfigDict(frozen=True)

    correct_answers: int
    total_questions: int
    incorrect_items: list[str] | None = None
    suggestions: list[str] | None = None
    pending: bool | None = None


class ExerciseResult(DocumentModel):
    """Outcome of one evaluation. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    correct: bool
    score: float
    details: ResultDetails
    feedback: str | None = None

    @property
    def is_pending(self) -> bool:
        return bool(self.details.pending)


# ============================================================================
# Submissions and Reviews
# ============================================================================


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubmissionStatus(str, Enum):
    GRADED = "graded"  # Scored automatically
    PENDING = "pending"  # Waiting for teacher review
    REVIEWED = "reviewed"  # Score set by a teacher


class AnnotationType(str, Enum):
    CORRECTION = "correction"
    SUGGESTION = "suggestion"
    PRAISE = "praise"


class Annotation(DocumentModel):
    text: str
    type: AnnotationType


class ReviewData(DocumentModel):
    """A teacher's grading of a submission."""

    score: float = Field(ge=0.0)
    feedback: str
    rubric_scores: dict[str, float] | None = None
    annotations: list[Annotation] = Field(default_factory=list)


class Submission(DocumentModel):
    id: str
    exercise_id: str
    student_id: str
    answer: Any = None
    score: float = 0.0
    feedback: str | None = None
    status: SubmissionStatus = SubmissionStatus.GRADED
    result: ExerciseResult | None = None
    started_at: datetime | None = None
    submitted_at: datetime = Field(default_factory=utcnow)
    review: ReviewData | None = None
    reviewed_at: datetime | None = None
    reviewed_by: str | None = None


class PendingReview(BaseModel):
    submission: Submission
    exercise: Exercise
