from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from ui.components import (
    ResultPanel,
    ExerciseTable,
    PendingReviewTable,
    SubmissionHistoryTable,
)
from ui.styles import (
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
)
from typing import Optional, List

from models import BaseExercise, ExerciseResult, PendingReview, Submission


class TutorUI:
    """Terminal output for the language tutor commands."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show_result(
        self,
        result: ExerciseResult,
        points: int,
        note: Optional[str] = None,
    ) -> None:
        """Display an evaluation result."""
        self.console.print(ResultPanel(result=result, points=points, note=note))
        self.console.print()

    def show_exercises(
        self, exercises: List[BaseExercise], title: str = "Exercises"
    ) -> None:
        """Display a list of exercises."""
        if not exercises:
            self.show_info("No exercises found.")
            return
        self.console.print(ExerciseTable(exercises, title=title))
        self.console.print()

    def show_pending_reviews(self, pending: List[PendingReview]) -> None:
        """Display the teacher's review queue."""
        if not pending:
            self.show_success("No submissions are waiting for review.")
            return
        self.console.print(PendingReviewTable(pending))
        self.console.print()

    def show_history(self, submissions: List[Submission], student_id: str) -> None:
        """Display a student's submissions."""
        if not submissions:
            self.show_info(f"No submissions found for {student_id}.")
            return
        self.console.print(SubmissionHistoryTable(submissions, student_id))
        self.console.print()

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(
            Panel(
                Text(f"Error: {message}", style=ERROR_RED),
                title="Error",
                border_style=ERROR_RED,
            )
        )

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(Text(message, style=INFO_BLUE))

    def show_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(Text(message, style=SUCCESS_GREEN))
