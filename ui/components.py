from rich.text import Text
from rich.panel import Panel
from rich.table import Table
from rich.style import Style
from rich.align import Align
from rich import box
from typing import List, Optional

from exercises.feedback import score_ratio
from models import BaseExercise, ExerciseResult, PendingReview, Submission
from ui.styles import (
    ACCENT_BLUE,
    ACCENT_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    MUTED_GRAY,
    TEXT_WHITE,
    create_error_header,
    create_pending_header,
    create_success_header,
    get_score_style,
    get_status_style,
)


class ResultPanel:
    """A styled panel for displaying an evaluation result."""

    def __init__(
        self,
        result: ExerciseResult,
        points: int,
        note: Optional[str] = None,
    ):
        self.result = result
        self.points = points
        self.note = note

    def render(self) -> Panel:
        details = self.result.details
        content = Text()

        if self.result.is_pending:
            content.append(create_pending_header())
        elif self.result.correct:
            content.append(create_success_header())
        else:
            content.append(create_error_header())
        content.append("\n\n")

        ratio = score_ratio(self.result.score, self.points)
        content.append("Score: ", Style(color=MUTED_GRAY))
        content.append(f"{self.result.score:g} / {self.points}", get_score_style(ratio))
        content.append("\n")
        content.append(
            f"Correct: {details.correct_answers}/{details.total_questions}\n",
            Style(color=MUTED_GRAY),
        )

        if details.incorrect_items:
            content.append("Incorrect: ", Style(color=MUTED_GRAY))
            content.append(", ".join(details.incorrect_items), Style(color=ERROR_RED))
            content.append("\n")

        if details.suggestions:
            content.append("\n")
            content.append("Suggested answers:\n", Style(color=ACCENT_GOLD, bold=True))
            for suggestion in details.suggestions:
                content.append(f"  • {suggestion}\n", Style(color=TEXT_WHITE))

        if self.result.feedback:
            content.append("\n")
            content.append(self.result.feedback, Style(color=TEXT_WHITE, italic=True))

        if self.note:
            content.append("\n")
            content.append(self.note, Style(color=MUTED_GRAY))

        if self.result.is_pending:
            border = ACCENT_GOLD
        else:
            border = SUCCESS_GREEN if self.result.correct else ERROR_RED

        return Panel(
            Align.left(content),
            title="Result",
            border_style=border,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class ExerciseTable:
    """A styled table listing exercise definitions."""

    def __init__(self, exercises: List[BaseExercise], title: str = "Exercises"):
        self.exercises = exercises
        self.title = title

    def render(self) -> Panel:
        table = Table(
            show_header=True,
            header_style=Style(color=ACCENT_BLUE, bold=True),
            border_style=MUTED_GRAY,
            row_styles=[Style(), Style(dim=True)],
            box=box.HEAVY,
        )

        table.add_column("ID", style=Style(color=ACCENT_BLUE, bold=True))
        table.add_column("Type", style=Style(color=TEXT_WHITE))
        table.add_column("Title", style=Style(color=TEXT_WHITE))
        table.add_column("Points", justify="center")
        table.add_column("Difficulty", style=Style(color=MUTED_GRAY))

        for exercise in self.exercises:
            table.add_row(
                exercise.id,
                exercise.type,
                exercise.title,
                str(exercise.points),
                exercise.difficulty.value,
            )

        return Panel(
            Align.center(table),
            title=self.title,
            border_style=ACCENT_GOLD,
            box=box.HEAVY,
            padding=(1, 1),
        )

    def __rich__(self) -> Panel:
        return self.render()


class PendingReviewTable:
    """A styled table of submissions waiting for teacher review."""

    def __init__(self, pending: List[PendingReview]):
        self.pending = pending

    def render(self) -> Panel:
        table = Table(
            show_header=True,
            header_style=Style(color=ACCENT_BLUE, bold=True),
            border_style=MUTED_GRAY,
            row_styles=[Style(), Style(dim=True)],
            box=box.HEAVY,
        )

        table.add_column("Submission", style=Style(color=ACCENT_BLUE, bold=True))
        table.add_column("Student", style=Style(color=TEXT_WHITE))
        table.add_column("Exercise", style=Style(color=TEXT_WHITE))
        table.add_column("Points", justify="center")
        table.add_column("Submitted", style=Style(color=MUTED_GRAY))

        for item in self.pending:
            submission = item.submission
            table.add_row(
                submission.id,
                submission.student_id,
                item.exercise.title or item.exercise.id,
                str(item.exercise.points),
                submission.submitted_at.strftime("%Y-%m-%d %H:%M"),
            )

        return Panel(
            Align.center(table),
            title="Pending Reviews",
            border_style=ACCENT_GOLD,
            box=box.HEAVY,
            padding=(1, 1),
        )

    def __rich__(self) -> Panel:
        return self.render()


class SubmissionHistoryTable:
    """A styled table of a student's submissions."""

    def __init__(self, submissions: List[Submission], student_id: str):
        self.submissions = submissions
        self.student_id = student_id

    def render(self) -> Panel:
        table = Table(
            show_header=True,
            header_style=Style(color=ACCENT_BLUE, bold=True),
            border_style=MUTED_GRAY,
            row_styles=[Style(), Style(dim=True)],
            box=box.HEAVY,
        )

        table.add_column("Exercise", style=Style(color=ACCENT_BLUE, bold=True))
        table.add_column("Score", justify="center")
        table.add_column("Status", justify="center")
        table.add_column("Feedback", style=Style(color=TEXT_WHITE))
        table.add_column("Submitted", style=Style(color=MUTED_GRAY))

        for submission in self.submissions:
            table.add_row(
                submission.exercise_id,
                f"{submission.score:g}",
                Text(submission.status.value, style=get_status_style(submission.status)),
                submission.feedback or "",
                submission.submitted_at.strftime("%Y-%m-%d %H:%M"),
            )

        return Panel(
            Align.center(table),
            title=f"Submissions of {self.student_id}",
            border_style=ACCENT_GOLD,
            box=box.HEAVY,
            padding=(1, 1),
        )

    def __rich__(self) -> Panel:
        return self.render()
