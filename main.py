import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

from exercises import UnsupportedExerciseType, count_words, evaluate_record
from models import (
    ExerciseType,
    FreeWritingExercise,
    ReviewData,
    parse_exercise,
    validate_answer,
)
from storage import get_exercise_repo, get_submission_repo, init_schema, DEFAULT_DB_PATH
from submissions import SubmissionService
from ui import TutorUI

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(description="Language Tutor")
    parser.add_argument(
        "--db",
        type=Path,
        default=DEFAULT_DB_PATH,
        help=f"SQLite database path (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    eval_parser = subparsers.add_parser(
        "evaluate", help="Grade an answer against an exercise file"
    )
    eval_parser.add_argument("exercise", type=Path, help="Exercise JSON file")
    eval_parser.add_argument(
        "answer", help="Answer as JSON (plain text is used as-is)"
    )

    import_parser = subparsers.add_parser(
        "import", help="Load exercise JSON documents into the database"
    )
    import_parser.add_argument(
        "file", type=Path, help="JSON file with one exercise or a list of them"
    )

    list_parser = subparsers.add_parser("list", help="List stored exercises")
    list_parser.add_argument("--lesson", help="Only exercises of this lesson")

    submit_parser = subparsers.add_parser(
        "submit", help="Grade and store a student's answer"
    )
    submit_parser.add_argument("exercise_id", help="Exercise ID")
    submit_parser.add_argument("student_id", help="Student ID")
    submit_parser.add_argument(
        "answer", help="Answer as JSON (plain text is used as-is)"
    )

    subparsers.add_parser("pending", help="List submissions awaiting review")

    review_parser = subparsers.add_parser(
        "review", help="Record a teacher's grade for a submission"
    )
    review_parser.add_argument("submission_id", help="Submission ID")
    review_parser.add_argument(
        "--score", "-s", type=float, required=True, help="Points awarded"
    )
    review_parser.add_argument(
        "--feedback", "-f", required=True, help="Feedback for the student"
    )
    review_parser.add_argument(
        "--reviewer", "-r", required=True, help="ID of the reviewing teacher"
    )

    history_parser = subparsers.add_parser(
        "history", help="Show a student's submissions"
    )
    history_parser.add_argument("student_id", help="Student ID")
    history_parser.add_argument(
        "--reviewed", action="store_true", help="Only teacher-reviewed submissions"
    )

    return parser


TEXT_ANSWER_TYPES = {ExerciseType.TRANSLATION, ExerciseType.FREE_WRITING}


def parse_answer(raw: str, exercise_type: str | None = None) -> Any:
    """Decode a command-line answer and check its shape for the exercise type.

    Text that is not JSON is used as a plain string, and so is any non-string
    JSON value (such as ``42``) given to an exercise that expects free text.

    Raises:
        pydantic.ValidationError: If the answer does not fit the exercise type.
    """
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError:
        decoded = raw
    if exercise_type in TEXT_ANSWER_TYPES and not isinstance(decoded, str):
        decoded = raw
    return validate_answer(exercise_type, decoded)


def load_documents(path: Path) -> list[dict]:
    """Read one exercise document or a list of them from a JSON file."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        return [data]
    return list(data)


def word_count_note(exercise, answer: Any) -> str | None:
    """Describe the length of a free-writing answer against its limits."""
    if not isinstance(exercise, FreeWritingExercise):
        return None
    note = f"Word count: {count_words(str(answer or ''))}"
    if exercise.min_words is not None:
        note += f" (min {exercise.min_words})"
    if exercise.max_words is not None:
        note += f" (max {exercise.max_words})"
    return note


def create_service(db_path: Path) -> SubmissionService:
    init_schema(db_path)
    return SubmissionService(get_exercise_repo(db_path), get_submission_repo(db_path))


def run_evaluate(args, ui: TutorUI) -> None:
    """Grade an answer without touching the database."""
    documents = load_documents(args.exercise)
    if len(documents) != 1:
        raise ValueError(f"{args.exercise} must hold exactly one exercise")
    record = documents[0]
    answer = parse_answer(args.answer, record.get("type"))
    result = evaluate_record(record, answer)
    exercise = parse_exercise(record)
    ui.show_result(result, exercise.points, note=word_count_note(exercise, answer))


def run_import(args, ui: TutorUI) -> None:
    """Validate and store exercise documents."""
    init_schema(args.db)
    repo = get_exercise_repo(args.db)
    documents = load_documents(args.file)
    for record in documents:
        repo.save(parse_exercise(record))
    ui.show_success(f"Imported {len(documents)} exercise(s) into {args.db}")


def run_list(args, ui: TutorUI) -> None:
    init_schema(args.db)
    repo = get_exercise_repo(args.db)
    if args.lesson:
        ui.show_exercises(repo.get_by_lesson(args.lesson), title=f"Lesson {args.lesson}")
    else:
        ui.show_exercises(repo.get_all())


def run_submit(args, ui: TutorUI) -> None:
    service = create_service(args.db)
    exercise = service.exercise_repo.get_by_id(args.exercise_id)
    answer = parse_answer(args.answer, exercise.type if exercise else None)
    submission = service.submit(args.exercise_id, args.student_id, answer)
    ui.show_result(
        submission.result,
        exercise.points,
        note=word_count_note(exercise, answer),
    )
    ui.show_info(f"Submission {submission.id} saved ({submission.status.value}).")


def run_pending(args, ui: TutorUI) -> None:
    service = create_service(args.db)
    ui.show_pending_reviews(service.pending_reviews())


def run_review(args, ui: TutorUI) -> None:
    service = create_service(args.db)
    review = ReviewData(score=args.score, feedback=args.feedback)
    submission = service.submit_review(args.submission_id, review, args.reviewer)
    ui.show_success(
        f"Submission {submission.id} reviewed: {submission.score:g} points."
    )


def run_history(args, ui: TutorUI) -> None:
    service = create_service(args.db)
    if args.reviewed:
        submissions = service.student_reviews(args.student_id)
    else:
        submissions = service.student_submissions(args.student_id)
    ui.show_history(submissions, args.student_id)


COMMANDS = {
    "evaluate": run_evaluate,
    "import": run_import,
    "list": run_list,
    "submit": run_submit,
    "pending": run_pending,
    "review": run_review,
    "history": run_history,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point with CLI routing."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    ui = TutorUI(Console())
    try:
        COMMANDS[args.command](args, ui)
    except (UnsupportedExerciseType, LookupError, ValueError, OSError) as e:
        logger.debug("command_failed command=%s", args.command, exc_info=True)
        ui.show_error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
