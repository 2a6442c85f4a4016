from rich.text import Text
from rich.panel import Panel
from rich.table import Table
from rich.style import Style
from rich.align import Align
from rich.columns import Columns
from rich import box
from typing import Optional, List, Literal

from exercises.messages import get_message, section_label
from exercises.mega_test import DISPLAY_LIMIT, ValidationResult
from exercises.scoring import ScoreReport, format_max_score
from session import SectionScore
from ui.styles import (
    BRAND_BLUE,
    HIGHLIGHT_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    MUTED_GRAY,
    TEXT_WHITE,
    create_error_header,
    create_success_header,
    get_score_style,
)


class QuestionPanel:
    """A styled panel for displaying one question."""

    def __init__(
        self,
        prompt_text: str,
        options: List[str],
        section: str,
        question_number: int = 0,
        total_questions: int = 0,
        input_mode: Literal["choice", "ordering", "text"] = "choice",
    ):
        self.prompt_text = prompt_text
        self.options = options
        self.section = section
        self.question_number = question_number
        self.total_questions = total_questions
        self.input_mode = input_mode

    def render(self) -> Panel:
        content = Text()

        if self.total_questions > 0:
            content.append(
                f"{section_label(self.section)} {self.question_number}/{self.total_questions}\n",
                Style(color=MUTED_GRAY),
            )

        content.append(self.prompt_text, Style(color=BRAND_BLUE, bold=True))
        content.append("\n\n")

        for i, option in enumerate(self.options):
            if self.input_mode == "choice":
                label = chr(65 + i)
            else:
                label = str(i + 1)
            content.append(f"{label}. ", Style(color=HIGHLIGHT_GOLD, bold=True))
            content.append(option, Style(color=TEXT_WHITE))
            content.append("\n")

        if self.input_mode == "ordering":
            subtitle = "Enter numbers in order (e.g., 2 1 3) or 'q' to quit"
        elif self.input_mode == "text":
            subtitle = "Type your answer (or 'q' to quit)"
        else:
            subtitle = "Type a letter (or 'q' to quit)"

        return Panel(
            Align.left(content),
            title="Mega Challenge",
            subtitle=subtitle,
            border_style=BRAND_BLUE,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class FeedbackPanel:
    """A styled panel for displaying answer feedback."""

    def __init__(
        self,
        is_correct: bool,
        correct_answer: str,
        user_answer: str = "",
        explanation: Optional[str] = None,
    ):
        self.is_correct = is_correct
        self.correct_answer = correct_answer
        self.user_answer = user_answer
        self.explanation = explanation

    def render(self) -> Panel:
        content = Text()

        if self.is_correct:
            content.append(create_success_header())
            content.append("\n")
        else:
            content.append(create_error_header())
            content.append("\n")
            if self.user_answer:
                content.append(
                    f"You answered: {self.user_answer}\n", Style(color=MUTED_GRAY)
                )

        content.append("\n")
        content.append("Correct answer: ", Style(color=MUTED_GRAY))
        content.append(self.correct_answer, Style(color=SUCCESS_GREEN, bold=True))

        if self.explanation:
            content.append("\n\n")
            content.append("Explanation:\n", Style(color=HIGHLIGHT_GOLD, bold=True))
            content.append(self.explanation, Style(color=TEXT_WHITE))

        return Panel(
            Align.left(content),
            title="Result",
            border_style=SUCCESS_GREEN if self.is_correct else ERROR_RED,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class ValidationErrorPanel:
    """Lists the first errors of a rejected test plus a count of the rest."""

    def __init__(
        self,
        result: ValidationResult,
        locale: str,
        limit: int = DISPLAY_LIMIT,
    ):
        self.result = result
        self.locale = locale
        self.limit = limit

    def lines(self) -> List[str]:
        shown, remaining = self.result.summary(self.limit)
        lines = [f"• {error}" for error in shown]
        if remaining > 0:
            lines.append(get_message(self.locale, "more_errors", count=remaining))
        return lines

    def render(self) -> Panel:
        content = Text()
        content.append(
            get_message(self.locale, "invalid_intro") + "\n\n", Style(color=ERROR_RED)
        )
        for line in self.lines():
            content.append(line + "\n", Style(color=TEXT_WHITE))

        return Panel(
            Align.left(content),
            title=f"⚠️ {get_message(self.locale, 'invalid_title')}",
            border_style=ERROR_RED,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class ScoreBoard:
    """Score out of 10 and correct count, with a per-section breakdown."""

    def __init__(
        self,
        report: ScoreReport,
        locale: str,
        sections: Optional[List[SectionScore]] = None,
    ):
        self.report = report
        self.locale = locale
        self.sections = sections or []

    def render(self) -> Panel:
        stats = Table(
            show_header=False,
            border_style=MUTED_GRAY,
            box=box.ROUNDED,
        )
        stats.add_column("Label", justify="center")
        stats.add_column("Value", justify="center")
        stats.add_row(
            Text(get_message(self.locale, "score_label"), style=Style(color=MUTED_GRAY)),
            Text(
                f"{self.report.score}/{format_max_score(self.locale)}",
                style=Style(color=HIGHLIGHT_GOLD, bold=True),
            ),
        )
        stats.add_row(
            Text(get_message(self.locale, "correct_label"), style=Style(color=MUTED_GRAY)),
            Text(self.report.correct_text, style=Style(color=SUCCESS_GREEN, bold=True)),
        )

        renderables = [Align.center(stats)]
        if self.sections:
            renderables.append(Align.center(self._section_table()))

        return Panel(
            Columns(renderables, align="center", padding=(0, 3)),
            title="Mega Challenge",
            border_style=HIGHLIGHT_GOLD,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def _section_table(self) -> Table:
        table = Table(
            show_header=True,
            header_style=Style(color=BRAND_BLUE, bold=True),
            border_style=MUTED_GRAY,
            row_styles=[Style(), Style(dim=True)],
            box=box.HEAVY,
        )
        table.add_column("Section", style=Style(color=TEXT_WHITE))
        table.add_column("Correct", justify="center")

        for item in self.sections:
            table.add_row(
                section_label(item.section),
                Text(
                    f"{item.correct}/{item.total}",
                    style=get_score_style(item.correct, item.total),
                ),
            )
        return table

    def __rich__(self) -> Panel:
        return self.render()


class PassagePanel:
    """Reading passage shown before the questions that depend on it."""

    def __init__(self, title: str, text: str, translation: str = ""):
        self.title = title
        self.text = text
        self.translation = translation

    def render(self) -> Panel:
        content = Text()
        content.append(self.text, Style(color=TEXT_WHITE))
        if self.translation:
            content.append("\n\n")
            content.append(self.translation, Style(color=MUTED_GRAY, italic=True))
        return Panel(
            Align.left(content),
            title=self.title,
            border_style=BRAND_BLUE,
            box=box.ROUNDED,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()
