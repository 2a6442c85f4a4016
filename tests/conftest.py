"""Shared pytest fixtures for the Mega Challenge test suite."""

import copy
import pytest

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exercises.config import MEGA_TEST_50, REWRITE_TEST_50


def _multiple_choice(i: int) -> dict:
    return {
        "id": f"mc{i}",
        "question": f"Which word is a fruit? ({i})",
        "options": ["apple", "chair", "river", "pencil"],
        "correct_answer": 0,
        "explanation": "An apple is a fruit.",
    }


def _fill_blank(i: int) -> dict:
    return {
        "id": f"fb{i}",
        "question": "I have a ___ cat.",
        "correct_answer": "black",
        "clue_emoji": "🐈‍⬛",
    }


def _scramble(i: int) -> dict:
    return {
        "id": f"sc{i}",
        "scrambled": ["bat", "a", "He", "has", "."],
        "correct_sentence": "He has a bat.",
        "translation": "Cậu ấy có một cây gậy.",
    }


def _rewrite(i: int) -> dict:
    return {
        "id": f"rw{i}",
        "type": "rewrite",
        "original_sentence": "I am not tall enough to reach the shelf.",
        "instruction": "Rewrite using 'too'.",
        "hint_sample": "I am too ...",
        "rewritten_correct": "I am too short to reach the shelf.",
        "allowed_variants": ["I'm too short to reach the shelf."],
        "explanation": "not + adj + enough = too + opposite adj.",
        "level": "A2",
    }


def _reading(i: int) -> dict:
    return {
        "id": f"rd{i}",
        "type": "reading_mcq",
        "question_text": "Where does Tom live?",
        "choices": ["In a city", "On a farm", "By the sea"],
        "correct_choice": "B",
        "explanation": "The passage says Tom lives on a farm.",
        "level": "A2",
    }


def _pronunciation(i: int) -> dict:
    return {
        "id": f"pr{i}",
        "type": "pronunciation_mcq",
        "instruction": "Choose the word whose underlined part is pronounced differently.",
        "choices": [
            {"word": "head", "underlined": "ea"},
            {"word": "bread", "underlined": "ea"},
            {"word": "meat", "underlined": "ea"},
        ],
        "correct_choice": "C",
        "explanation": "'meat' has /iː/, the others have /e/.",
        "level": "A2",
    }


def _true_false(i: int) -> dict:
    return {
        "id": f"tf{i}",
        "statement": "Tom has two dogs.",
        "correct_answer": i % 2 == 0,
        "explanation": "The passage mentions his dogs.",
        "level": "A2",
    }


def _fill_box(i: int) -> dict:
    return {
        "id": f"bx{i}",
        "paragraph": "Tom (1) ___ on a farm. He (2) ___ cows. He (3) ___ up early. He (4) ___ milk.",
        "word_box": ["lives", "feeds", "gets", "drinks", "swims", "flies"],
        "blanks": [
            {"number": 1, "correct_answer": "lives"},
            {"number": 2, "correct_answer": "feeds"},
            {"number": 3, "correct_answer": "gets"},
            {"number": 4, "correct_answer": "drinks"},
        ],
        "explanation": "Present simple, third person singular.",
        "level": "A2",
    }


ITEM_BUILDERS = {
    "multiple_choice": _multiple_choice,
    "fill_blank": _fill_blank,
    "scramble": _scramble,
    "rewrite": _rewrite,
    "reading": _reading,
    "pronunciation": _pronunciation,
    "true_false": _true_false,
    "fill_box": _fill_box,
}


@pytest.fixture
def make_item():
    """Factory: make_item(section, i=0) returns a fresh well-formed raw item."""

    def _make(section: str, i: int = 0) -> dict:
        return copy.deepcopy(ITEM_BUILDERS[section](i))

    return _make


@pytest.fixture
def make_raw_test(make_item):
    """Factory: a well-formed raw test for a composition.

    Each section gets exactly its minimum number of items unless overridden
    via counts={section: n}.
    """

    def _make(config=MEGA_TEST_50, counts=None) -> dict:
        counts = counts or {}
        raw = {
            "level": "A2",
            "passage": "Tom lives on a farm. He has two dogs and many cows.",
            "passage_translation": "Tom sống ở nông trại.",
            "true_false_passage": "Tom gets up at five every morning.",
            "true_false_passage_translation": "Tom dậy lúc năm giờ mỗi sáng.",
        }
        for req in config.sections:
            n = counts.get(req.section, req.minimum)
            raw[req.section] = [make_item(req.section, i) for i in range(n)]
        return raw

    return _make


@pytest.fixture
def mega_raw_test(make_raw_test) -> dict:
    """A well-formed raw 7-section test (10/10/10/5/5/5/5)."""
    return make_raw_test(MEGA_TEST_50)


@pytest.fixture
def rewrite_raw_test(make_raw_test) -> dict:
    """A well-formed raw rewrite-heavy test (40/5/5)."""
    return make_raw_test(REWRITE_TEST_50)


@pytest.fixture
def mega_test(mega_raw_test):
    """A validated 7-section MegaTest."""
    from exercises.mega_test import validate_mega_test

    return validate_mega_test(mega_raw_test).filtered_test
