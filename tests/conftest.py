"""Shared pytest fixtures for the Language Tutor test suite."""

import pytest

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import (
    Difficulty,
    ExerciseBlank,
    ExerciseOption,
    FillInBlanksExercise,
    FreeWritingExercise,
    MatchingExercise,
    MatchingPair,
    MultipleChoiceExercise,
    OrderingExercise,
    TranslationExercise,
)
from storage import (
    SQLiteExerciseRepository,
    SQLiteSubmissionRepository,
    init_schema,
)
from submissions import SubmissionService


@pytest.fixture
def multiple_choice_exercise() -> MultipleChoiceExercise:
    """Create a multiple-answer exercise with correct options a and c."""
    return MultipleChoiceExercise(
        id="mc001",
        title="Greetings",
        points=10,
        difficulty=Difficulty.BEGINNER,
        question="Which of these are greetings?",
        options=[
            ExerciseOption(id="a", text="Hola", is_correct=True),
            ExerciseOption(id="b", text="Adiós", is_correct=False),
            ExerciseOption(id="c", text="Buenos días", is_correct=True),
            ExerciseOption(id="d", text="Gracias", is_correct=False),
        ],
        allow_multiple=True,
    )


@pytest.fixture
def single_choice_exercise() -> MultipleChoiceExercise:
    """Create a single-answer exercise with correct option b."""
    return MultipleChoiceExercise(
        id="mc002",
        points=5,
        question="How do you say 'cat'?",
        options=[
            ExerciseOption(id="a", text="perro"),
            ExerciseOption(id="b", text="gato", is_correct=True),
            ExerciseOption(id="c", text="pájaro"),
        ],
    )


@pytest.fixture
def fill_in_blanks_exercise() -> FillInBlanksExercise:
    """Create a fill-in-blanks exercise with four blanks."""
    return FillInBlanksExercise(
        id="fb001",
        points=20,
        difficulty=Difficulty.INTERMEDIATE,
        text="Yo ___ estudiante. Ella ___ en Madrid. Nosotros ___ café. Ellos ___ tarde.",
        blanks=[
            ExerciseBlank(id="b1", answer="soy", position=0),
            ExerciseBlank(id="b2", answer="vive", position=1),
            ExerciseBlank(id="b3", answer="bebemos", position=2),
            ExerciseBlank(id="b4", answer="llegan", position=3),
        ],
    )


@pytest.fixture
def matching_exercise() -> MatchingExercise:
    """Create a matching exercise with three pairs."""
    return MatchingExercise(
        id="mt001",
        points=9,
        pairs=[
            MatchingPair(id="p1", left="dog", right="perro"),
            MatchingPair(id="p2", left="cat", right="gato"),
            MatchingPair(id="p3", left="bird", right="pájaro"),
        ],
    )


@pytest.fixture
def ordering_exercise() -> OrderingExercise:
    """Create an ordering exercise whose canonical order is not the identity."""
    return OrderingExercise(
        id="or001",
        points=8,
        items=["gato", "El", "duerme", "negro"],
        correct_order=[1, 0, 3, 2],
    )


@pytest.fixture
def translation_exercise() -> TranslationExercise:
    """Create a translation exercise with keywords."""
    return TranslationExercise(
        id="tr001",
        points=10,
        source_text="El gato se sentó",
        target_language="en",
        acceptable_translations=["The cat sat", "The cat sat down"],
        keywords=["cat", "sat"],
    )


@pytest.fixture
def free_writing_exercise() -> FreeWritingExercise:
    """Create a free-writing exercise with word limits."""
    return FreeWritingExercise(
        id="fw001",
        points=15,
        difficulty=Difficulty.ADVANCED,
        prompt="Describe your last holiday.",
        min_words=5,
        max_words=200,
        required_elements=["past tense"],
    )


@pytest.fixture
def all_exercises(
    multiple_choice_exercise,
    fill_in_blanks_exercise,
    matching_exercise,
    ordering_exercise,
    translation_exercise,
    free_writing_exercise,
) -> list:
    """One exercise of every type."""
    return [
        multiple_choice_exercise,
        fill_in_blanks_exercise,
        matching_exercise,
        ordering_exercise,
        translation_exercise,
        free_writing_exercise,
    ]


@pytest.fixture
def test_db_path(tmp_path) -> Path:
    """Create a temporary database path for testing."""
    db_path = tmp_path / "test_tutor.db"
    init_schema(db_path)
    return db_path


@pytest.fixture
def populated_test_db(test_db_path, all_exercises) -> Path:
    """Create a test database holding one exercise of every type."""
    repo = SQLiteExerciseRepository(test_db_path)
    for exercise in all_exercises:
        repo.save(exercise)
    return test_db_path


@pytest.fixture
def submission_service(populated_test_db) -> SubmissionService:
    """Create a submission service over the populated test database."""
    return SubmissionService(
        SQLiteExerciseRepository(populated_test_db),
        SQLiteSubmissionRepository(populated_test_db),
    )
