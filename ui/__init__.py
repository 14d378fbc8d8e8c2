"""Language Tutor UI Module - Terminal output for grading and reviews."""

from ui.app import TutorUI
from ui.components import (
    ResultPanel,
    ExerciseTable,
    PendingReviewTable,
    SubmissionHistoryTable,
)
from ui.styles import (
    ACCENT_BLUE,
    ACCENT_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
)

__all__ = [
    "TutorUI",
    "ResultPanel",
    "ExerciseTable",
    "PendingReviewTable",
    "SubmissionHistoryTable",
    "ACCENT_BLUE",
    "ACCENT_GOLD",
    "SUCCESS_GREEN",
    "ERROR_RED",
    "INFO_BLUE",
    "MUTED_GRAY",
]
