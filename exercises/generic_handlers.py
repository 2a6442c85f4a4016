"""Question handlers: presentation text, input parsing and answer checking.

Handlers wrap one validated question. They turn raw terminal input into a
typed answer (label, index, bool, word map, sentence) and delegate the
correctness decision to exercises.scoring, so the terminal session and any
other front end grade identically.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from exercises.base import CHOICE_LABELS, index_to_label, parse_letter_input
from exercises.errors import UnknownSectionError
from exercises.generic_models import (
    FillBlankQuestion,
    FillBoxQuestion,
    MultipleChoiceQuestion,
    PronunciationQuestion,
    Question,
    ReadingQuestion,
    RewriteQuestion,
    ScrambleQuestion,
    TrueFalseQuestion,
)
from exercises.scoring import (
    is_choice_correct,
    is_fill_blank_correct,
    is_fill_box_correct,
    is_multiple_choice_correct,
    is_rewrite_correct,
    is_scramble_correct,
    is_true_false_correct,
)

Q = TypeVar("Q", bound=Question)

TRUE_INPUTS = {"t", "true", "đ", "đúng", "dung", "y", "yes"}
FALSE_INPUTS = {"f", "false", "s", "sai", "n", "no"}


class GenericExerciseHandler(ABC, Generic[Q]):
    """Abstract base class for question handlers."""

    input_mode = "choice"

    def __init__(self, question: Q):
        self.question = question

    @abstractmethod
    def get_prompt_text(self) -> str:
        """Return the main prompt text."""
        ...

    def get_options(self) -> list[str]:
        """Return options for display. Typed-answer kinds have none."""
        return []

    @abstractmethod
    def get_input_prompt(self) -> str:
        """Return input prompt string."""
        ...

    @abstractmethod
    def parse_answer(self, user_input: str) -> Any:
        """Convert raw input to the typed answer, or None if unusable."""
        ...

    @abstractmethod
    def is_correct(self, answer: Any) -> bool:
        """Check a typed answer."""
        ...

    @abstractmethod
    def correct_answer_display(self) -> str:
        ...

    def explanation(self) -> str | None:
        return getattr(self.question, "explanation", None) or None

    def accepts(self, user_input: str) -> bool:
        """Whether input can be graded at all; the UI asks again if not."""
        return self.parse_answer(user_input) is not None

    def check_answer(self, user_input: str) -> tuple[bool, str]:
        """Check raw input. Returns (is_correct, correct_answer_display)."""
        answer = self.parse_answer(user_input)
        return self.is_correct(answer), self.correct_answer_display()

    def format_feedback(self, is_correct: bool, correct_answer: str) -> str:
        """Format feedback string. Override for custom feedback."""
        if is_correct:
            return f"\n✓ Correct! The answer is: {correct_answer}"
        else:
            return f"\n✗ Incorrect. The correct answer is: {correct_answer}"


class MultipleChoiceHandler(GenericExerciseHandler[MultipleChoiceQuestion]):
    def get_prompt_text(self) -> str:
        return self.question.question

    def get_options(self) -> list[str]:
        return self.question.options

    def get_input_prompt(self) -> str:
        return "Enter your choice (A/B/C/D or 1/2/3/4): "

    def parse_answer(self, user_input: str) -> int | None:
        return parse_letter_input(user_input, len(self.question.options))

    def is_correct(self, answer: int | None) -> bool:
        return is_multiple_choice_correct(answer, self.question.correct_answer)

    def correct_answer_display(self) -> str:
        index = self.question.correct_answer
        return f"{index_to_label(index)}. {self.question.options[index]}"


class _LabelChoiceHandler(GenericExerciseHandler[Q]):
    """Shared A/B/C handling for reading and pronunciation questions."""

    def get_input_prompt(self) -> str:
        return "Enter your choice (A/B/C): "

    def parse_answer(self, user_input: str) -> str | None:
        index = parse_letter_input(user_input, len(CHOICE_LABELS))
        return None if index is None else CHOICE_LABELS[index]

    def is_correct(self, answer: str | None) -> bool:
        return is_choice_correct(answer, self.question.correct_choice)

    def correct_answer_display(self) -> str:
        label = self.question.correct_choice
        return f"{label}. {self.get_options()[CHOICE_LABELS.index(label)]}"


class ReadingHandler(_LabelChoiceHandler[ReadingQuestion]):
    def get_prompt_text(self) -> str:
        return self.question.question_text

    def get_options(self) -> list[str]:
        return self.question.choices


class PronunciationHandler(_LabelChoiceHandler[PronunciationQuestion]):
    def get_prompt_text(self) -> str:
        return self.question.instruction

    def get_options(self) -> list[str]:
        return [highlight_underlined(c.word, c.underlined) for c in self.question.choices]


class TrueFalseHandler(GenericExerciseHandler[TrueFalseQuestion]):
    def get_prompt_text(self) -> str:
        return self.question.statement

    def get_options(self) -> list[str]:
        return ["True", "False"]

    def get_input_prompt(self) -> str:
        return "True or false? (T/F): "

    def parse_answer(self, user_input: str) -> bool | None:
        text = user_input.strip().lower()
        if text in TRUE_INPUTS or text == "a":
            return True
        if text in FALSE_INPUTS or text == "b":
            return False
        return None

    def is_correct(self, answer: bool | None) -> bool:
        return is_true_false_correct(answer, self.question.correct_answer)

    def correct_answer_display(self) -> str:
        return "True" if self.question.correct_answer else "False"


class FillBlankHandler(GenericExerciseHandler[FillBlankQuestion]):
    input_mode = "text"

    def get_prompt_text(self) -> str:
        text = f"Complete the sentence:\n  {self.question.question}"
        if self.question.clue_emoji:
            text += f"\n  ({self.question.clue_emoji})"
        return text

    def get_input_prompt(self) -> str:
        return "Type the missing word: "

    def parse_answer(self, user_input: str) -> str:
        return user_input

    def is_correct(self, answer: str | None) -> bool:
        return is_fill_blank_correct(answer, self.question.correct_answer)

    def correct_answer_display(self) -> str:
        return self.question.correct_answer


class ScrambleHandler(GenericExerciseHandler[ScrambleQuestion]):
    input_mode = "ordering"

    def get_prompt_text(self) -> str:
        text = "Put the words in the correct order:"
        if self.question.translation:
            text += f"\n  ({self.question.translation})"
        return text

    def get_options(self) -> list[str]:
        return self.question.scrambled

    def get_input_prompt(self) -> str:
        return "Enter the numbers in correct order (e.g., 2 1 3) or type the sentence: "

    def parse_answer(self, user_input: str) -> str | None:
        """Accept either an index sequence over the shown tokens or the sentence itself."""
        parts = user_input.split()
        if parts and all(p.isdigit() for p in parts):
            tokens = self.question.scrambled
            indices = [int(p) for p in parts]
            if any(i < 1 or i > len(tokens) for i in indices):
                return None
            return " ".join(tokens[i - 1] for i in indices)
        return user_input

    def is_correct(self, answer: str | None) -> bool:
        return is_scramble_correct(answer, self.question.correct_sentence)

    def correct_answer_display(self) -> str:
        return self.question.correct_sentence


class RewriteHandler(GenericExerciseHandler[RewriteQuestion]):
    input_mode = "text"

    def get_prompt_text(self) -> str:
        text = f"{self.question.instruction}\n  \"{self.question.original_sentence}\""
        if self.question.hint_sample:
            text += f"\n  💡 {self.question.hint_sample}"
        return text

    def get_input_prompt(self) -> str:
        return "Rewrite the sentence: "

    def parse_answer(self, user_input: str) -> str:
        return user_input

    def is_correct(self, answer: str | None) -> bool:
        return is_rewrite_correct(
            answer, self.question.rewritten_correct, self.question.allowed_variants
        )

    def correct_answer_display(self) -> str:
        return self.question.rewritten_correct


class FillBoxHandler(GenericExerciseHandler[FillBoxQuestion]):
    input_mode = "text"

    def get_prompt_text(self) -> str:
        return f"Fill the blanks with words from the box:\n  {self.question.paragraph}"

    def get_options(self) -> list[str]:
        return self.question.word_box

    def get_input_prompt(self) -> str:
        return "Enter one word per blank, separated by commas: "

    def blank_numbers(self) -> list[int]:
        return [blank.number for blank in self.question.blanks]

    def parse_answer(self, user_input: str) -> dict[int, str]:
        """Map comma-separated words onto the blanks in order.

        Typed words are matched to the box ignoring case, so "lives" picks
        the box entry "Lives". Words not in the box are kept as typed.
        """
        box = {word.lower(): word for word in self.question.word_box}
        words = [w.strip() for w in user_input.split(",")]
        return {
            number: box.get(word.lower(), word)
            for number, word in zip(self.blank_numbers(), words)
            if word
        }

    def is_correct(self, answer: dict[int, str] | None) -> bool:
        return is_fill_box_correct(answer, self.question.answer_key())

    def correct_answer_display(self) -> str:
        return ", ".join(
            f"({number}) {word}" for number, word in self.question.answer_key().items()
        )


def highlight_underlined(word: str, underlined: str) -> str:
    """Mark the underlined part of a word with brackets, e.g. h[ea]d."""
    start = word.lower().find(underlined.lower())
    if start < 0:
        return word
    end = start + len(underlined)
    return f"{word[:start]}[{word[start:end]}]{word[end:]}"


HANDLERS: dict[str, type[GenericExerciseHandler]] = {
    "multiple_choice": MultipleChoiceHandler,
    "fill_blank": FillBlankHandler,
    "scramble": ScrambleHandler,
    "rewrite": RewriteHandler,
    "reading": ReadingHandler,
    "pronunciation": PronunciationHandler,
    "true_false": TrueFalseHandler,
    "fill_box": FillBoxHandler,
}


def get_handler(section: str, question: Question) -> GenericExerciseHandler:
    """Return a handler instance for a question of the given section."""
    try:
        handler_class = HANDLERS[section]
    except KeyError:
        raise UnknownSectionError(section) from None
    return handler_class(question)
