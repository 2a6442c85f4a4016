"""Score calculation and per-kind answer checking.

Choice-style answers (labels, indices, booleans, word-box words) are compared
exactly. Typed answers (single words, scrambled sentences, rewrites) are
compared after normalize_answer, and rewrites also match any accepted variant.
An unanswered question (None) is never correct.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from exercises.base import normalize_answer
from exercises.errors import InvalidTotalError
from exercises.messages import DEFAULT_LOCALE

DEFAULT_TOTAL_QUESTIONS = 50
MAX_SCORE = 10

DECIMAL_SEPARATORS = {"vi": ",", "en": "."}


class ScoreReport(BaseModel):
    """A 0-10 score formatted for display, plus "correct/total"."""

    score: str
    correct_text: str


def calculate_score(
    correct_count: int,
    total_questions: int = DEFAULT_TOTAL_QUESTIONS,
    locale: str = DEFAULT_LOCALE,
) -> ScoreReport:
    """Convert a correct count to a 0-10 score with one decimal.

    Rounds half up, so 0.25 of a point shows as 0,3 rather than 0,2.

    Raises:
        InvalidTotalError: If total_questions is not positive or
            correct_count is outside 0..total_questions.
    """
    if total_questions <= 0 or not 0 <= correct_count <= total_questions:
        raise InvalidTotalError(correct_count, total_questions)

    raw = Decimal(correct_count) * MAX_SCORE / Decimal(total_questions)
    rounded = raw.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    separator = DECIMAL_SEPARATORS.get(locale, DECIMAL_SEPARATORS[DEFAULT_LOCALE])

    return ScoreReport(
        score=f"{rounded:.1f}".replace(".", separator),
        correct_text=f"{correct_count}/{total_questions}",
    )


def format_max_score(locale: str = DEFAULT_LOCALE) -> str:
    separator = DECIMAL_SEPARATORS.get(locale, DECIMAL_SEPARATORS[DEFAULT_LOCALE])
    return f"{MAX_SCORE}{separator}0"


def _same_type_equal(answer: Any, correct: Any) -> bool:
    # 1 == True in Python; a boolean answer must never match an index.
    return type(answer) is type(correct) and answer == correct


def is_choice_correct(answer: str | None, correct_choice: str) -> bool:
    """Reading / pronunciation: exact A/B/C label match."""
    return _same_type_equal(answer, correct_choice)


def is_multiple_choice_correct(answer: int | None, correct_index: int) -> bool:
    return _same_type_equal(answer, correct_index)


def is_true_false_correct(answer: bool | None, correct_answer: bool) -> bool:
    return _same_type_equal(answer, correct_answer)


def is_fill_box_blank_correct(answer: str | None, correct_word: str) -> bool:
    """Word-box blanks are picked from the box, so they match exactly."""
    return _same_type_equal(answer, correct_word)


def is_fill_box_correct(answers: Mapping[int, str] | None, answer_key: Mapping[int, str]) -> bool:
    """A fill-box question is correct only when every blank is."""
    if not answers:
        return False
    return all(
        is_fill_box_blank_correct(answers.get(number), word)
        for number, word in answer_key.items()
    )


def _normalized_equal(answer: str | None, correct: str) -> bool:
    if not isinstance(answer, str):
        return False
    return normalize_answer(answer) == normalize_answer(correct)


def is_fill_blank_correct(answer: str | None, correct_answer: str) -> bool:
    return _normalized_equal(answer, correct_answer)


def is_scramble_correct(answer: str | None, correct_sentence: str) -> bool:
    return _normalized_equal(answer, correct_sentence)


def is_rewrite_correct(
    user_answer: str | None,
    correct_answer: str,
    variants: Iterable[str] | None = None,
) -> bool:
    """True if the answer matches the canonical rewrite or any accepted variant.

    Examples:
        is_rewrite_correct("I AM fine.", "I am fine", ["I'm fine"]) -> True
        is_rewrite_correct("I am not fine", "I am fine", []) -> False
    """
    if not isinstance(user_answer, str):
        return False

    normalized = normalize_answer(user_answer)
    if normalized == normalize_answer(correct_answer):
        return True

    for variant in variants or ():
        if normalized == normalize_answer(variant):
            return True
    return False
