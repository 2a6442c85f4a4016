import argparse
import logging
import signal
import sys
from pathlib import Path

from rich.logging import RichHandler

from exercises import (
    COMPOSITIONS,
    ContentParseError,
    InvalidTotalError,
    MegaTestConfig,
    calculate_score,
    get_handler,
    validate_mega_test,
)
from exercises.generic_models import MegaTest
from provider import JsonFileProvider
from session import ChallengeSession
from ui import ChallengeUI

# Sections whose questions are about a passage, and the passage they need.
PASSAGE_SECTIONS = {
    "reading": ("passage", "📖 Reading"),
    "true_false": ("true_false_passage", "📖 True / False"),
}


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(description="Mega Challenge test checker")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (
        ("validate", "Validate a generated test JSON file"),
        ("play", "Validate a test, then take it interactively"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("file", type=Path, help="Path to the model response (JSON)")
        sub.add_argument(
            "--composition",
            "-c",
            choices=sorted(COMPOSITIONS),
            default="mega",
            help="Test composition to validate against (default: mega)",
        )
        sub.add_argument(
            "--locale",
            "-l",
            choices=["vi", "en"],
            default="vi",
            help="Language of diagnostics and score format (default: vi)",
        )

    score_parser = subparsers.add_parser("score", help="Convert a correct count to a score")
    score_parser.add_argument("correct", type=int, help="Number of correct answers")
    score_parser.add_argument(
        "total",
        type=int,
        nargs="?",
        default=50,
        help="Number of questions (default: 50)",
    )
    score_parser.add_argument("--locale", "-l", choices=["vi", "en"], default="vi")

    return parser


def build_config(args) -> MegaTestConfig:
    return COMPOSITIONS[args.composition].with_locale(args.locale)


def load_and_validate(args, ui: ChallengeUI) -> MegaTest | None:
    """Load the file, validate it, and report problems. Returns the filtered test."""
    try:
        raw = JsonFileProvider(args.file).generate()
    except (OSError, ContentParseError) as e:
        ui.show_error(str(e))
        return None

    result = validate_mega_test(raw, build_config(args))
    if not result.valid:
        ui.show_validation_errors(result)
        return None
    return result.filtered_test


def run_validate(args) -> int:
    ui = ChallengeUI(locale=args.locale)
    test = load_and_validate(args, ui)
    if test is None:
        return 1

    ui.show_success(f"Valid {test.level.value} test with {test.question_count} questions.")
    for section in test.non_empty_sections():
        ui.show_info(f"  {section}: {len(test.section(section))}")
    return 0


def create_sigint_handler(ui: ChallengeUI, session: ChallengeSession):
    """Create a SIGINT handler that shows the score so far before exiting."""

    def sigint_handler(signum, frame):
        ui.show_quit_message()
        ui.show_score(session.score(), session.section_scores())
        sys.exit(0)

    return sigint_handler


def run_play(args) -> int:
    """Run an interactive session over a validated test."""
    ui = ChallengeUI(locale=args.locale)
    test = load_and_validate(args, ui)
    if test is None:
        return 1

    session = ChallengeSession(test=test, locale=args.locale)
    signal.signal(signal.SIGINT, create_sigint_handler(ui, session))

    for section in test.non_empty_sections():
        if section in PASSAGE_SECTIONS:
            passage_key, title = PASSAGE_SECTIONS[section]
            passage = getattr(test, passage_key)
            if passage is not None:
                ui.show_passage(title, passage.text, passage.translation)

        questions = test.section(section)
        for number, question in enumerate(questions, start=1):
            handler = get_handler(section, question)
            user_input = ui.show_question(
                prompt_text=handler.get_prompt_text(),
                options=handler.get_options(),
                section=section,
                question_number=number,
                total_questions=len(questions),
                input_prompt=handler.get_input_prompt(),
                input_mode=handler.input_mode,
                accepts=handler.accepts,
            )

            if user_input == "quit":
                ui.show_quit_message()
                ui.show_score(session.score(), session.section_scores())
                return 0

            session.answer(section, question.id, handler.parse_answer(user_input))
            is_correct = session.submit(section, question.id)
            ui.show_feedback(
                is_correct,
                handler.correct_answer_display(),
                user_input,
                handler.explanation(),
            )

    ui.show_score(session.score(), session.section_scores())
    return 0


def run_score(args) -> int:
    ui = ChallengeUI(locale=args.locale)
    try:
        report = calculate_score(args.correct, args.total, args.locale)
    except InvalidTotalError as e:
        ui.show_error(str(e))
        return 1
    ui.show_score(report)
    return 0


def main():
    """Main entry point with CLI routing."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)

    if args.command == "validate":
        sys.exit(run_validate(args))
    elif args.command == "play":
        sys.exit(run_play(args))
    elif args.command == "score":
        sys.exit(run_score(args))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
