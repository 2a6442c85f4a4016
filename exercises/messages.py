"""Localized diagnostic messages.

Validation errors are shown to teachers and learners, not just written to
logs, so every message exists in each supported locale. Vietnamese is the
default audience.
"""

from typing import Literal

Locale = Literal["vi", "en"]

DEFAULT_LOCALE: Locale = "vi"

SECTION_LABELS = {
    "multiple_choice": "Multiple choice",
    "fill_blank": "Fill blank",
    "scramble": "Scramble",
    "rewrite": "Rewrite",
    "reading": "Reading",
    "pronunciation": "Pronunciation",
    "true_false": "True/False",
    "fill_box": "Fill box",
}

MESSAGES: dict[str, dict[str, str]] = {
    "vi": {
        # Item-level
        "not_object": "không phải object hợp lệ",
        "missing_field": 'thiếu field "{field}"',
        "wrong_type": 'field "{field}" sai kiểu dữ liệu',
        "invalid_level": 'level "{value}" không hợp lệ',
        "hint_is_answer": "hint không được là đáp án đầy đủ",
        "choice_count": "choices phải có đúng {count} lựa chọn A/B/C",
        "choice_label": "correct_choice phải là A, B, hoặc C",
        "choice_empty": "lựa chọn {choice} bị trống",
        "pronunciation_choice_missing": "choice {choice} thiếu word hoặc underlined",
        "pronunciation_not_substring": 'underlined "{underlined}" không có trong word "{word}"',
        "option_count": "options phải có đúng {count} lựa chọn",
        "option_index": "correct_answer phải là số từ 0 đến {maximum}",
        "blank_count": "câu hỏi phải có đúng 1 chỗ trống (___), tìm thấy {count}",
        "single_word": "correct_answer phải là một từ duy nhất",
        "scramble_mismatch": "scrambled không khớp với correct_sentence (thiếu: {missing}; thừa: {extra})",
        "true_false_not_bool": "correct_answer phải là true hoặc false",
        "word_box_size": "word_box phải có ít nhất {minimum} từ",
        "blanks_size": "blanks phải có ít nhất {minimum} chỗ trống",
        "word_box_no_distractors": "word_box phải có nhiều từ hơn số chỗ trống",
        "blank_number": "chỗ trống {blank} thiếu số thứ tự",
        "blank_answer": "chỗ trống {blank} thiếu đáp án",
        "blank_not_in_box": 'đáp án "{answer}" của chỗ trống {blank} không có trong word_box',
        "blank_duplicate": "số thứ tự chỗ trống {blank} bị lặp",
        "duplicate_id": 'id "{value}" bị trùng trong phần này',
        # Test-level
        "test_not_object": "MegaTest không phải object hợp lệ",
        "test_level": 'Level "{value}" không hợp lệ - phải là A1, A2, hoặc B1',
        "missing_passage": 'Thiếu "{passage}" cho phần {label}',
        "missing_section": "Thiếu mảng {label} questions",
        "section_quota": "Chỉ có {valid}/{required} {label} questions hợp lệ",
        "build_failed": "Không thể tạo bài kiểm tra từ dữ liệu: {detail}",
        # Display
        "more_errors": "...và {count} lỗi khác",
        "invalid_title": "Lỗi Dữ Liệu Bài Kiểm Tra",
        "invalid_intro": "Bài kiểm tra không hợp lệ và không thể hiển thị:",
        "score_label": "Điểm",
        "correct_label": "Đúng",
    },
    "en": {
        "not_object": "not a valid object",
        "missing_field": 'missing field "{field}"',
        "wrong_type": 'field "{field}" has the wrong type',
        "invalid_level": 'level "{value}" is not valid',
        "hint_is_answer": "hint must not be the full answer",
        "choice_count": "choices must have exactly {count} options A/B/C",
        "choice_label": "correct_choice must be A, B, or C",
        "choice_empty": "choice {choice} is empty",
        "pronunciation_choice_missing": "choice {choice} is missing word or underlined",
        "pronunciation_not_substring": 'underlined "{underlined}" does not occur in word "{word}"',
        "option_count": "options must have exactly {count} entries",
        "option_index": "correct_answer must be an index from 0 to {maximum}",
        "blank_count": "question must contain exactly 1 blank (___), found {count}",
        "single_word": "correct_answer must be a single word",
        "scramble_mismatch": "scrambled does not match correct_sentence (missing: {missing}; extra: {extra})",
        "true_false_not_bool": "correct_answer must be true or false",
        "word_box_size": "word_box must have at least {minimum} words",
        "blanks_size": "blanks must have at least {minimum} entries",
        "word_box_no_distractors": "word_box must have more words than there are blanks",
        "blank_number": "blank {blank} has no number",
        "blank_answer": "blank {blank} has no answer",
        "blank_not_in_box": 'answer "{answer}" for blank {blank} is not in word_box',
        "blank_duplicate": "blank number {blank} is used more than once",
        "duplicate_id": 'id "{value}" is already used in this section',
        "test_not_object": "MegaTest is not a valid object",
        "test_level": 'Level "{value}" is not valid - must be A1, A2, or B1',
        "missing_passage": 'Missing "{passage}" for the {label} section',
        "missing_section": "Missing {label} questions array",
        "section_quota": "Only {valid}/{required} valid {label} questions",
        "build_failed": "Test content could not be loaded: {detail}",
        "more_errors": "...and {count} more errors",
        "invalid_title": "Invalid Test Data",
        "invalid_intro": "This test is invalid and cannot be shown:",
        "score_label": "Score",
        "correct_label": "Correct",
    },
}


def get_message(locale: str, key: str, **kwargs) -> str:
    """Return the message for key in locale, falling back to the default locale."""
    catalog = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    return catalog[key].format(**kwargs)


def section_label(section: str) -> str:
    return SECTION_LABELS.get(section, section)


def item_error(locale: str, section: str, index: int, key: str, **kwargs) -> str:
    """Format an item-level error, prefixed with the section label and 1-based number."""
    return f"{section_label(section)} Q{index + 1}: {get_message(locale, key, **kwargs)}"
