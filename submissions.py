"""Submission and teacher review workflow around the evaluation engine.

The engine only grades. This module loads the exercise, stores the graded
submission and lets a teacher overwrite the score of a submission later,
which is how free-writing answers get their final grade.
"""

import logging
import uuid
from datetime import datetime
from typing import Any

from exercises import DEFAULT_CONFIG, EvaluationConfig, evaluate
from models import (
    PendingReview,
    ReviewData,
    Submission,
    SubmissionStatus,
    utcnow,
)
from storage import ExerciseRepository, SubmissionRepository

logger = logging.getLogger(__name__)


class ExerciseNotFound(LookupError):
    def __init__(self, exercise_id: str):
        self.exercise_id = exercise_id
        super().__init__(f"Exercise {exercise_id} not found")


class SubmissionNotFound(LookupError):
    def __init__(self, submission_id: str):
        self.submission_id = submission_id
        super().__init__(f"Submission {submission_id} not found")


class SubmissionService:
    """Grades and records student submissions and teacher reviews."""

    def __init__(
        self,
        exercise_repo: ExerciseRepository,
        submission_repo: SubmissionRepository,
        config: EvaluationConfig = DEFAULT_CONFIG,
    ):
        self.exercise_repo = exercise_repo
        self.submission_repo = submission_repo
        self.config = config

    def submit(
        self,
        exercise_id: str,
        student_id: str,
        answer: Any,
        started_at: datetime | None = None,
    ) -> Submission:
        """Evaluate an answer and store it as a new submission.

        Args:
            exercise_id: ID of the exercise being answered.
            student_id: ID of the submitting student.
            answer: The answer, shaped for the exercise type.
            started_at: When the student opened the exercise, if known.

        Returns:
            The stored submission, including its evaluation result.

        Raises:
            ExerciseNotFound: If no exercise has the given ID.
            UnsupportedExerciseType: If the exercise type has no evaluator.
        """
        exercise = self.exercise_repo.get_by_id(exercise_id)
        if exercise is None:
            raise ExerciseNotFound(exercise_id)

        result = evaluate(exercise, answer, self.config)
        submission = Submission(
            id=str(uuid.uuid4()),
            exercise_id=exercise.id,
            student_id=student_id,
            answer=answer,
            score=result.score,
            feedback=result.feedback,
            status=SubmissionStatus.PENDING
            if result.is_pending
            else SubmissionStatus.GRADED,
            result=result,
            started_at=started_at,
        )
        self.submission_repo.save(submission)
        logger.info(
            "submission_saved id=%s exercise=%s student=%s status=%s score=%s",
            submission.id,
            exercise.id,
            student_id,
            submission.status.value,
            submission.score,
        )
        return submission

    def pending_reviews(self) -> list[PendingReview]:
        """List submissions waiting for a teacher, newest first."""
        pending = []
        for submission in self.submission_repo.get_by_status(SubmissionStatus.PENDING):
            exercise = self.exercise_repo.get_by_id(submission.exercise_id)
            if exercise is None:
                logger.warning(
                    "pending_submission_orphaned id=%s exercise=%s",
                    submission.id,
                    submission.exercise_id,
                )
                continue
            pending.append(PendingReview(submission=submission, exercise=exercise))
        return pending

    def submit_review(
        self, submission_id: str, review: ReviewData, reviewer_id: str
    ) -> Submission:
        """Record a teacher's grade, replacing the automatic score and feedback.

        Raises:
            SubmissionNotFound: If no submission has the given ID.
            ExerciseNotFound: If the submission's exercise no longer exists.
            ValueError: If the score exceeds the exercise's points.
        """
        submission = self.submission_repo.get_by_id(submission_id)
        if submission is None:
            raise SubmissionNotFound(submission_id)

        exercise = self.exercise_repo.get_by_id(submission.exercise_id)
        if exercise is None:
            raise ExerciseNotFound(submission.exercise_id)
        if review.score > exercise.points:
            raise ValueError(
                f"Review score {review.score} exceeds the exercise's "
                f"{exercise.points} points"
            )

        reviewed = submission.model_copy(
            update={
                "status": SubmissionStatus.REVIEWED,
                "score": review.score,
                "feedback": review.feedback,
                "review": review,
                "reviewed_at": utcnow(),
                "reviewed_by": reviewer_id,
            }
        )
        self.submission_repo.save(reviewed)
        logger.info(
            "submission_reviewed id=%s reviewer=%s score=%s",
            submission_id,
            reviewer_id,
            review.score,
        )
        return reviewed

    def student_submissions(self, student_id: str) -> list[Submission]:
        """A student's submissions, newest first."""
        return self.submission_repo.get_by_student(student_id)

    def student_reviews(self, student_id: str) -> list[Submission]:
        """A student's teacher-reviewed submissions, most recently reviewed first."""
        reviewed = [
            s
            for s in self.submission_repo.get_by_student(student_id)
            if s.status == SubmissionStatus.REVIEWED
        ]
        return sorted(reviewed, key=lambda s: s.reviewed_at, reverse=True)
