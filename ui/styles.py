from rich.style import Style
from rich.text import Text

from models import SubmissionStatus

ACCENT_BLUE = "#2E86C1"
ACCENT_GOLD = "#F1C40F"
SUCCESS_GREEN = "#27AE60"
ERROR_RED = "#C0392B"
INFO_BLUE = "#3498DB"
MUTED_GRAY = "#7F8C8D"
TEXT_WHITE = "#FFFFFF"


def get_score_style(ratio: float) -> Style:
    """Get color style based on the share of points earned."""
    if ratio >= 0.8:
        return Style(color=SUCCESS_GREEN, bold=True)
    elif ratio >= 0.4:
        return Style(color=ACCENT_GOLD)
    else:
        return Style(color=ERROR_RED)


def get_status_style(status: SubmissionStatus) -> Style:
    """Get style for a submission status."""
    styles = {
        SubmissionStatus.GRADED: Style(color=SUCCESS_GREEN),
        SubmissionStatus.PENDING: Style(color=ACCENT_GOLD, bold=True),
        SubmissionStatus.REVIEWED: Style(color=INFO_BLUE),
    }
    return styles.get(status, Style())


def create_success_header() -> Text:
    """Create a success/correct answer header."""
    header = Text()
    header.append("✓ ", Style(color=SUCCESS_GREEN, bold=True))
    header.append("Correct!", Style(color=SUCCESS_GREEN, bold=True))
    return header


def create_error_header() -> Text:
    """Create an error/incorrect answer header."""
    header = Text()
    header.append("✗ ", Style(color=ERROR_RED, bold=True))
    header.append("Not quite!", Style(color=ERROR_RED, bold=True))
    return header


def create_pending_header() -> Text:
    """Create the header for answers waiting for teacher review."""
    header = Text()
    header.append("⏳ ", Style(color=ACCENT_GOLD))
    header.append("Pending review", Style(color=ACCENT_GOLD, bold=True))
    return header
