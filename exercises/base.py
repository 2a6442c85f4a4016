"""Shared text utilities for validating and grading answers."""

import re
from collections import Counter

CHOICE_LABELS = ("A", "B", "C")

# Union of the punctuation stripped by every grading path, plus typographic
# quotes that generated content tends to contain.
PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()?'\"‘’“”"

_PUNCTUATION_TABLE = str.maketrans("", "", PUNCTUATION)
_WHITESPACE_RE = re.compile(r"\s+")
_TOKEN_RE = re.compile(r"\w+(?:['’]\w+)*|[^\w\s]")
BLANK_RE = re.compile(r"_{2,}")


def normalize_answer(text: str) -> str:
    """Canonicalize free text for tolerant comparison.

    Lowercases, removes PUNCTUATION, collapses whitespace runs to a single
    space and trims. normalize_answer(normalize_answer(x)) == normalize_answer(x).
    """
    text = text.lower().translate(_PUNCTUATION_TABLE)
    return _WHITESPACE_RE.sub(" ", text).strip()


def tokenize_sentence(text: str) -> list[str]:
    """Split a sentence into word tokens and single punctuation tokens.

    Examples:
        "He has a bat." -> ["He", "has", "a", "bat", "."]
        "I don't know!" -> ["I", "don't", "know", "!"]
    """
    return _TOKEN_RE.findall(text)


def token_difference(expected: list[str], actual: list[str]) -> tuple[list[str], list[str]]:
    """Compare two token multisets.

    Returns:
        Tuple of (missing, extra): tokens of expected absent from actual, and
        tokens of actual not accounted for by expected.
    """
    expected_counts = Counter(expected)
    actual_counts = Counter(actual)
    missing = sorted((expected_counts - actual_counts).elements())
    extra = sorted((actual_counts - expected_counts).elements())
    return missing, extra


def count_blanks(text: str) -> int:
    """Count blank markers (runs of two or more underscores) in text."""
    return len(BLANK_RE.findall(text))


def is_blank(value) -> bool:
    """True when a raw field value counts as missing.

    None and whitespace-only strings are missing; 0, False and empty
    containers are present (their shape is checked separately).
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def parse_letter_input(user_input: str, max_options: int = 4) -> int | None:
    """Parse letter (A-F) or number (1-6) input to 0-based index.

    Args:
        user_input: Raw user input string.
        max_options: Maximum number of valid options.

    Returns:
        0-based index or None if input is invalid or out of bounds.
    """
    user_input = user_input.strip().upper()
    letter_map = {"A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5}

    if user_input in letter_map:
        index = letter_map[user_input]
    elif user_input.isdigit():
        index = int(user_input) - 1
    else:
        return None

    if index < 0 or index >= max_options:
        return None

    return index


def index_to_label(index: int) -> str:
    return chr(65 + index)
