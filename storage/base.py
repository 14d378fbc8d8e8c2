"""Abstract repository interfaces for the storage layer."""

from abc import ABC, abstractmethod

from models import Exercise, Submission, SubmissionStatus


class ExerciseRepository(ABC):
    """Abstract interface for exercise definition storage."""

    @abstractmethod
    def get_by_id(self, exercise_id: str) -> Exercise | None:
        """Load a single exercise by ID.

        Args:
            exercise_id: The exercise ID.

        Returns:
            The exercise, or None if not found.
        """
        pass

    @abstractmethod
    def get_by_lesson(self, lesson_id: str) -> list[Exercise]:
        """Load the exercises of a lesson in creation order.

        Args:
            lesson_id: The lesson ID.

        Returns:
            List of exercises attached to the lesson.
        """
        pass

    @abstractmethod
    def get_all(self) -> list[Exercise]:
        """Load all exercises."""
        pass

    @abstractmethod
    def save(self, exercise: Exercise) -> None:
        """Create or replace an exercise.

        Args:
            exercise: The exercise to save.

        Raises:
            ValueError: If the exercise definition is invalid.
        """
        pass


class SubmissionRepository(ABC):
    """Abstract interface for submission storage."""

    @abstractmethod
    def get_by_id(self, submission_id: str) -> Submission | None:
        """Load a single submission by ID."""
        pass

    @abstractmethod
    def get_by_student(self, student_id: str) -> list[Submission]:
        """Load a student's submissions, newest first."""
        pass

    @abstractmethod
    def get_by_status(self, status: SubmissionStatus) -> list[Submission]:
        """Load submissions with the given status, newest first."""
        pass

    @abstractmethod
    def save(self, submission: Submission) -> None:
        """Create or replace a submission."""
        pass
