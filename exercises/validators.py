"""Per-section validators for generated question items.

Each validator checks one raw item (parsed JSON, untrusted) and reports the
first problem it finds as a localized message. Validators never raise, never
mutate their input, and hold no state beyond their locale, so the same item
always yields the same result.

To support a new question kind:
1. Add a typed model in exercises/generic_models.py
2. Subclass QuestionValidator and implement check()
3. Register it in VALIDATORS
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from exercises.base import (
    CHOICE_LABELS,
    count_blanks,
    index_to_label,
    is_blank,
    token_difference,
    tokenize_sentence,
)
from exercises.errors import UnknownSectionError
from exercises.messages import DEFAULT_LOCALE, item_error
from models import Level


class ItemCheck(BaseModel):
    """Outcome of validating a single item."""

    valid: bool
    error: str | None = None


class QuestionValidator(ABC):
    """Abstract base class for section validators.

    Subclasses declare the fields that must be present (required_fields),
    which of them must be strings (text_fields) and which optional fields
    must be strings when given (optional_text_fields), then implement
    check() for kind-specific rules.
    """

    section: str = ""
    required_fields: tuple[str, ...] = ()
    text_fields: tuple[str, ...] = ()
    optional_text_fields: tuple[str, ...] = ()
    level_required: bool = True

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale

    def validate(self, candidate: Any, index: int) -> ItemCheck:
        """Validate one raw item.

        Args:
            candidate: The raw item as parsed from JSON.
            index: 0-based position of the item in its section.

        Returns:
            ItemCheck with valid=False and a message naming the 1-based
            item number on the first problem found.
        """
        if not isinstance(candidate, dict):
            return self._fail(index, "not_object")
        candidate = _resolve_aliases(candidate)

        required = self.required_fields
        if self.level_required:
            required = required + ("level",)
        for field in required:
            if is_blank(candidate.get(field)):
                return self._fail(index, "missing_field", field=field)

        question_id = candidate["id"]
        if isinstance(question_id, bool) or not isinstance(question_id, (str, int)):
            return self._fail(index, "wrong_type", field="id")

        for field in self.text_fields:
            if not isinstance(candidate[field], str):
                return self._fail(index, "wrong_type", field=field)

        for field in self.optional_text_fields:
            value = candidate.get(field)
            if value is not None and not isinstance(value, str):
                return self._fail(index, "wrong_type", field=field)

        level = candidate.get("level")
        if level is not None and not Level.is_valid(level):
            return self._fail(index, "invalid_level", value=level)

        error = self.check(candidate, index)
        if error is not None:
            return ItemCheck(valid=False, error=error)
        return ItemCheck(valid=True)

    @abstractmethod
    def check(self, q: dict, index: int) -> str | None:
        """Run kind-specific checks on an item whose required fields exist.

        Returns:
            An error message, or None when the item is valid.
        """
        ...

    def error(self, index: int, key: str, **kwargs) -> str:
        return item_error(self.locale, self.section, index, key, **kwargs)

    def _fail(self, index: int, key: str, **kwargs) -> ItemCheck:
        return ItemCheck(valid=False, error=self.error(index, key, **kwargs))

    def _check_choice_label(self, q: dict, index: int) -> str | None:
        if q["correct_choice"] not in CHOICE_LABELS:
            return self.error(index, "choice_label")
        return None


class RewriteValidator(QuestionValidator):
    section = "rewrite"
    required_fields = (
        "id",
        "original_sentence",
        "instruction",
        "rewritten_correct",
        "explanation",
    )
    text_fields = ("original_sentence", "instruction", "rewritten_correct", "explanation")
    optional_text_fields = ("hint_sample",)

    def check(self, q: dict, index: int) -> str | None:
        hint = q.get("hint_sample")
        if hint and hint.strip().lower() == q["rewritten_correct"].strip().lower():
            return self.error(index, "hint_is_answer")

        variants = q.get("allowed_variants")
        if variants is not None and (
            not isinstance(variants, list)
            or not all(isinstance(v, str) for v in variants)
        ):
            return self.error(index, "wrong_type", field="allowed_variants")
        return None


class ReadingValidator(QuestionValidator):
    section = "reading"
    required_fields = ("id", "question_text", "choices", "correct_choice", "explanation")
    text_fields = ("question_text", "explanation")

    def check(self, q: dict, index: int) -> str | None:
        choices = q["choices"]
        if not isinstance(choices, list) or len(choices) != len(CHOICE_LABELS):
            return self.error(index, "choice_count", count=len(CHOICE_LABELS))

        for i, choice in enumerate(choices):
            if not isinstance(choice, str) or is_blank(choice):
                return self.error(index, "choice_empty", choice=index_to_label(i))

        return self._check_choice_label(q, index)


class PronunciationValidator(QuestionValidator):
    section = "pronunciation"
    required_fields = ("id", "instruction", "choices", "correct_choice", "explanation")
    text_fields = ("instruction", "explanation")

    def check(self, q: dict, index: int) -> str | None:
        choices = q["choices"]
        if not isinstance(choices, list) or len(choices) != len(CHOICE_LABELS):
            return self.error(index, "choice_count", count=len(CHOICE_LABELS))

        for i, choice in enumerate(choices):
            word = choice.get("word") if isinstance(choice, dict) else None
            underlined = choice.get("underlined") if isinstance(choice, dict) else None
            if not isinstance(word, str) or not isinstance(underlined, str):
                return self.error(index, "pronunciation_choice_missing", choice=i + 1)
            if is_blank(word) or is_blank(underlined):
                return self.error(index, "pronunciation_choice_missing", choice=i + 1)
            if underlined.lower() not in word.lower():
                return self.error(
                    index,
                    "pronunciation_not_substring",
                    underlined=underlined,
                    word=word,
                )

        return self._check_choice_label(q, index)


class MultipleChoiceValidator(QuestionValidator):
    section = "multiple_choice"
    required_fields = ("id", "question", "options", "correct_answer", "explanation")
    text_fields = ("question", "explanation")
    level_required = False

    OPTION_COUNT = 4

    def check(self, q: dict, index: int) -> str | None:
        options = q["options"]
        if not isinstance(options, list) or len(options) != self.OPTION_COUNT:
            return self.error(index, "option_count", count=self.OPTION_COUNT)

        for i, option in enumerate(options):
            if not isinstance(option, str) or is_blank(option):
                return self.error(index, "choice_empty", choice=index_to_label(i))

        answer = q["correct_answer"]
        if (
            isinstance(answer, bool)
            or not isinstance(answer, int)
            or not 0 <= answer < self.OPTION_COUNT
        ):
            return self.error(index, "option_index", maximum=self.OPTION_COUNT - 1)
        return None


class FillBlankValidator(QuestionValidator):
    section = "fill_blank"
    required_fields = ("id", "question", "correct_answer")
    text_fields = ("question", "correct_answer")
    optional_text_fields = ("clue_emoji",)
    level_required = False

    def check(self, q: dict, index: int) -> str | None:
        blanks = count_blanks(q["question"])
        if blanks != 1:
            return self.error(index, "blank_count", count=blanks)

        if len(q["correct_answer"].split()) != 1:
            return self.error(index, "single_word")
        return None


class ScrambleValidator(QuestionValidator):
    section = "scramble"
    required_fields = ("id", "scrambled", "correct_sentence")
    text_fields = ("correct_sentence",)
    optional_text_fields = ("translation",)
    level_required = False

    def check(self, q: dict, index: int) -> str | None:
        scrambled = q["scrambled"]
        if (
            not isinstance(scrambled, list)
            or not scrambled
            or not all(isinstance(t, str) and not is_blank(t) for t in scrambled)
        ):
            return self.error(index, "wrong_type", field="scrambled")

        # Entries may be multi-word chunks; compare at token level.
        shuffled_tokens = [tok for chunk in scrambled for tok in tokenize_sentence(chunk)]
        missing, extra = token_difference(
            tokenize_sentence(q["correct_sentence"]), shuffled_tokens
        )
        if missing or extra:
            return self.error(
                index,
                "scramble_mismatch",
                missing=", ".join(missing) or "-",
                extra=", ".join(extra) or "-",
            )
        return None


class TrueFalseValidator(QuestionValidator):
    section = "true_false"
    required_fields = ("id", "statement", "correct_answer", "explanation")
    text_fields = ("statement", "explanation")

    def check(self, q: dict, index: int) -> str | None:
        # "true"/"false" strings are rejected, not coerced.
        if not isinstance(q["correct_answer"], bool):
            return self.error(index, "true_false_not_bool")
        return None


class FillBoxValidator(QuestionValidator):
    section = "fill_box"
    required_fields = ("id", "paragraph", "word_box", "blanks")
    text_fields = ("paragraph",)
    optional_text_fields = ("explanation",)

    MIN_WORDS = 5
    MIN_BLANKS = 4

    def check(self, q: dict, index: int) -> str | None:
        word_box = q["word_box"]
        if not isinstance(word_box, list) or not all(
            isinstance(w, str) and not is_blank(w) for w in word_box
        ):
            return self.error(index, "wrong_type", field="word_box")
        if len(word_box) < self.MIN_WORDS:
            return self.error(index, "word_box_size", minimum=self.MIN_WORDS)

        blanks = q["blanks"]
        if not isinstance(blanks, list):
            return self.error(index, "wrong_type", field="blanks")
        if len(blanks) < self.MIN_BLANKS:
            return self.error(index, "blanks_size", minimum=self.MIN_BLANKS)
        if len(word_box) <= len(blanks):
            return self.error(index, "word_box_no_distractors")

        seen_numbers = set()
        for i, blank in enumerate(blanks):
            if not isinstance(blank, dict) or not _is_blank_number(blank.get("number")):
                return self.error(index, "blank_number", blank=i + 1)
            number = int(blank["number"])
            if number in seen_numbers:
                return self.error(index, "blank_duplicate", blank=number)
            seen_numbers.add(number)
            answer = blank.get("correct_answer")
            if not isinstance(answer, str) or is_blank(answer):
                return self.error(index, "blank_answer", blank=blank["number"])
            # Grading is exact, so the key must be spelled as the box shows it.
            if answer not in word_box:
                return self.error(
                    index, "blank_not_in_box", answer=answer, blank=blank["number"]
                )
        return None


def _resolve_aliases(candidate: dict) -> dict:
    """Accept explanation_vi, the field name older prompts used, for explanation."""
    if "explanation" not in candidate and "explanation_vi" in candidate:
        return {**candidate, "explanation": candidate["explanation_vi"]}
    return candidate


def _is_blank_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    # str.isdigit also accepts superscripts and other non-ASCII digits.
    text = value.strip() if isinstance(value, str) else ""
    return text.isascii() and text.isdigit()


VALIDATORS: dict[str, type[QuestionValidator]] = {
    "multiple_choice": MultipleChoiceValidator,
    "fill_blank": FillBlankValidator,
    "scramble": ScrambleValidator,
    "rewrite": RewriteValidator,
    "reading": ReadingValidator,
    "pronunciation": PronunciationValidator,
    "true_false": TrueFalseValidator,
    "fill_box": FillBoxValidator,
}


def get_validator(section: str, locale: str = DEFAULT_LOCALE) -> QuestionValidator:
    """Return a validator instance for the given section key."""
    try:
        validator_class = VALIDATORS[section]
    except KeyError:
        raise UnknownSectionError(section) from None
    return validator_class(locale)


def validate_question(
    section: str, candidate: Any, index: int, locale: str = DEFAULT_LOCALE
) -> ItemCheck:
    """Validate one raw item of the given section."""
    return get_validator(section, locale).validate(candidate, index)
