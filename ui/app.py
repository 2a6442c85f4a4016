from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from ui.components import (
    QuestionPanel,
    FeedbackPanel,
    ValidationErrorPanel,
    ScoreBoard,
    PassagePanel,
)
from ui.styles import (
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    CONSOLE,
)
from typing import Callable, Optional, List, Literal

from exercises.mega_test import ValidationResult
from exercises.scoring import ScoreReport
from session import SectionScore


class ChallengeUI:
    """Main UI orchestrator for the terminal Mega Challenge."""

    def __init__(self, console: Optional[Console] = None, locale: str = "vi"):
        self.console = console or CONSOLE
        self.locale = locale

    def show_validation_errors(self, result: ValidationResult) -> None:
        """Show why a test was rejected. Nothing of the test itself is shown."""
        self.console.print(ValidationErrorPanel(result, self.locale))

    def show_passage(self, title: str, text: str, translation: str = "") -> None:
        self.console.print(PassagePanel(title, text, translation))
        self.console.print()

    def show_question(
        self,
        prompt_text: str,
        options: List[str],
        section: str,
        question_number: int,
        total_questions: int,
        input_prompt: str,
        input_mode: Literal["choice", "ordering", "text"] = "choice",
        accepts: Optional[Callable[[str], bool]] = None,
    ) -> str:
        """Display a question and get user input.

        Args:
            prompt_text: The question text to display.
            options: Options to display (may be empty for typed answers).
            section: Section key, used for the progress label.
            question_number: Current question number in its section (1-indexed).
            total_questions: Number of questions in the section.
            input_prompt: Prompt shown next to the input cursor.
            input_mode: "choice" for letters, "ordering" for numbers, "text" for free text.
            accepts: Decides whether an answer is usable, usually a handler's
                accepts(). Without it, choice mode takes option letters only.

        Returns:
            "quit" if user quits, otherwise the user's answer.
        """
        panel = QuestionPanel(
            prompt_text=prompt_text,
            options=options,
            section=section,
            question_number=question_number,
            total_questions=total_questions,
            input_mode=input_mode,
        )

        self.console.print(panel)
        self.console.print()

        if input_mode == "choice":
            return self._get_choice_input(len(options), input_prompt, accepts)
        return self._get_text_input(input_prompt, accepts)

    def _get_choice_input(
        self,
        num_options: int,
        input_prompt: str,
        accepts: Optional[Callable[[str], bool]] = None,
    ) -> str:
        """Get a choice from the user."""
        labels = [chr(65 + i) for i in range(num_options)]
        while True:
            user_input = self.console.input(
                Text(input_prompt, style=f"bold {MUTED_GRAY}")
            ).strip()

            if user_input.lower() == "q":
                return "quit"

            if accepts is not None:
                if accepts(user_input):
                    return user_input
            elif user_input.upper() in labels:
                return user_input.upper()

            if accepts is not None:
                message = "Please enter a valid answer (or 'q' to quit)\n"
            else:
                message = f"Please enter {', '.join(labels)} (or 'q' to quit)\n"
            self.console.print(Text(message, style=ERROR_RED))

    def _get_text_input(
        self, input_prompt: str, accepts: Optional[Callable[[str], bool]] = None
    ) -> str:
        """Get a non-empty typed answer from the user."""
        while True:
            user_input = self.console.input(
                Text(input_prompt, style=f"bold {MUTED_GRAY}")
            ).strip()

            if user_input.lower() == "q":
                return "quit"

            if user_input and (accepts is None or accepts(user_input)):
                return user_input

            self.console.print(
                Text("Please type an answer (or 'q' to quit)\n", style=ERROR_RED)
            )

    def show_feedback(
        self,
        is_correct: bool,
        correct_answer: str,
        user_answer: str = "",
        explanation: Optional[str] = None,
    ) -> None:
        """Display feedback for the user's answer."""
        feedback = FeedbackPanel(
            is_correct=is_correct,
            correct_answer=correct_answer,
            user_answer=user_answer,
            explanation=explanation,
        )
        self.console.print(feedback)
        self.console.print()

    def show_score(
        self, report: ScoreReport, sections: Optional[List[SectionScore]] = None
    ) -> None:
        self.console.print(ScoreBoard(report, self.locale, sections))

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

    def show_quit_message(self) -> None:
        self.console.print()
        self.console.print(Text("👋 Goodbye!", style=MUTED_GRAY))

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        self.console.clear()
