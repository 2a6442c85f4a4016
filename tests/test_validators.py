"""Unit tests for the per-section item validators."""

import copy

import pytest

from exercises.errors import UnknownSectionError
from exercises.validators import (
    VALIDATORS,
    FillBoxValidator,
    PronunciationValidator,
    RewriteValidator,
    get_validator,
    validate_question,
)


class TestCommonChecks:
    """Checks shared by every validator."""

    @pytest.mark.parametrize("section", sorted(VALIDATORS))
    def test_well_formed_item_is_valid(self, section, make_item):
        result = validate_question(section, make_item(section), 0)
        assert result.valid
        assert result.error is None

    @pytest.mark.parametrize("section", sorted(VALIDATORS))
    @pytest.mark.parametrize("candidate", [None, "text", 42, ["a"]])
    def test_non_object_is_rejected(self, section, candidate):
        result = validate_question(section, candidate, 2)
        assert not result.valid
        assert "Q3" in result.error

    @pytest.mark.parametrize("section", sorted(VALIDATORS))
    def test_validation_is_deterministic(self, section, make_item):
        """Two runs over the same input give identical results."""
        item = make_item(section)
        item["id"] = ""
        validator = get_validator(section, "en")
        assert validator.validate(item, 0) == validator.validate(item, 0)

    @pytest.mark.parametrize("section", sorted(VALIDATORS))
    def test_input_not_mutated(self, section, make_item):
        item = make_item(section)
        snapshot = copy.deepcopy(item)
        validate_question(section, item, 0)
        assert item == snapshot

    def test_error_names_section_and_one_based_index(self, make_item):
        item = make_item("rewrite")
        del item["instruction"]
        result = validate_question("rewrite", item, 4, locale="en")
        assert result.error == 'Rewrite Q5: missing field "instruction"'

    def test_vietnamese_is_default_locale(self, make_item):
        item = make_item("rewrite")
        del item["instruction"]
        result = validate_question("rewrite", item, 0)
        assert result.error == 'Rewrite Q1: thiếu field "instruction"'

    def test_whitespace_field_counts_as_missing(self, make_item):
        item = make_item("reading")
        item["question_text"] = "   "
        assert not validate_question("reading", item, 0).valid

    def test_invalid_level(self, make_item):
        item = make_item("rewrite")
        item["level"] = "C2"
        result = validate_question("rewrite", item, 0, locale="en")
        assert result.error == 'Rewrite Q1: level "C2" is not valid'

    def test_level_required_for_rewrite(self, make_item):
        item = make_item("rewrite")
        del item["level"]
        assert not validate_question("rewrite", item, 0).valid

    def test_level_optional_for_multiple_choice(self, make_item):
        item = make_item("multiple_choice")
        assert "level" not in item
        assert validate_question("multiple_choice", item, 0).valid

        item["level"] = "Z9"
        assert not validate_question("multiple_choice", item, 0).valid

    def test_integer_id_accepted(self, make_item):
        item = make_item("reading")
        item["id"] = 7
        assert validate_question("reading", item, 0).valid

    def test_boolean_id_rejected(self, make_item):
        item = make_item("reading")
        item["id"] = True
        assert not validate_question("reading", item, 0).valid

    def test_text_field_wrong_type(self, make_item):
        item = make_item("rewrite")
        item["rewritten_correct"] = ["I am too short."]
        result = validate_question("rewrite", item, 0, locale="en")
        assert 'field "rewritten_correct"' in result.error

    def test_unknown_section(self):
        with pytest.raises(UnknownSectionError):
            get_validator("matching")


class TestRewriteValidator:
    """Tests for RewriteValidator."""

    def test_hint_equal_to_answer_rejected(self, make_item):
        item = make_item("rewrite")
        item["hint_sample"] = "  i am TOO short to reach the shelf. "
        result = RewriteValidator("en").validate(item, 0)
        assert not result.valid
        assert "hint must not be the full answer" in result.error

    def test_hint_is_optional(self, make_item):
        item = make_item("rewrite")
        del item["hint_sample"]
        assert RewriteValidator().validate(item, 0).valid

        item["hint_sample"] = None
        assert RewriteValidator().validate(item, 0).valid

    def test_variants_must_be_strings(self, make_item):
        item = make_item("rewrite")
        item["allowed_variants"] = "I'm too short"
        assert not RewriteValidator().validate(item, 0).valid

        item["allowed_variants"] = ["ok", 3]
        assert not RewriteValidator().validate(item, 0).valid

    def test_variants_may_be_empty(self, make_item):
        item = make_item("rewrite")
        item["allowed_variants"] = []
        assert RewriteValidator().validate(item, 0).valid


class TestChoiceValidators:
    """Tests for reading and pronunciation validators."""

    @pytest.mark.parametrize("section", ["reading", "pronunciation"])
    def test_choice_count_must_be_three(self, section, make_item):
        item = make_item(section)
        item["choices"] = item["choices"][:2]
        assert not validate_question(section, item, 0).valid

        item["choices"] = item["choices"] * 2
        assert not validate_question(section, item, 0).valid

    @pytest.mark.parametrize("section", ["reading", "pronunciation"])
    @pytest.mark.parametrize("label", ["D", "a", "", 1])
    def test_label_out_of_range(self, section, label, make_item):
        item = make_item(section)
        item["correct_choice"] = label
        assert not validate_question(section, item, 0).valid

    def test_reading_choice_must_be_text(self, make_item):
        item = make_item("reading")
        item["choices"] = ["In a city", "", "By the sea"]
        result = validate_question("reading", item, 0, locale="en")
        assert result.error == "Reading Q1: choice B is empty"

    def test_underlined_must_occur_in_word(self, make_item):
        item = make_item("pronunciation")
        item["choices"][0] = {"word": "head", "underlined": "zzz"}
        result = PronunciationValidator("en").validate(item, 0)
        assert not result.valid
        assert 'underlined "zzz" does not occur in word "head"' in result.error

    def test_underlined_match_ignores_case(self, make_item):
        item = make_item("pronunciation")
        item["choices"][0] = {"word": "Head", "underlined": "EA"}
        assert PronunciationValidator().validate(item, 0).valid

    def test_pronunciation_choice_missing_parts(self, make_item):
        item = make_item("pronunciation")
        item["choices"][1] = {"word": "bread"}
        result = PronunciationValidator("en").validate(item, 0)
        assert "choice 2 is missing word or underlined" in result.error

        item["choices"][1] = "bread"
        assert not PronunciationValidator().validate(item, 0).valid


class TestMultipleChoiceValidator:
    """Tests for MultipleChoiceValidator."""

    def test_requires_four_options(self, make_item):
        item = make_item("multiple_choice")
        item["options"] = ["a", "b", "c"]
        assert not validate_question("multiple_choice", item, 0).valid

    @pytest.mark.parametrize("answer", [-1, 4, "0", 1.0, True])
    def test_answer_index_out_of_range_or_wrong_type(self, answer, make_item):
        item = make_item("multiple_choice")
        item["correct_answer"] = answer
        assert not validate_question("multiple_choice", item, 0).valid

    def test_index_zero_is_present(self, make_item):
        item = make_item("multiple_choice")
        item["correct_answer"] = 0
        assert validate_question("multiple_choice", item, 0).valid


class TestFillBlankValidator:
    """Tests for FillBlankValidator."""

    @pytest.mark.parametrize("question", ["I have a cat.", "I ___ a ___ cat."])
    def test_exactly_one_blank(self, question, make_item):
        item = make_item("fill_blank")
        item["question"] = question
        assert not validate_question("fill_blank", item, 0).valid

    def test_answer_must_be_one_word(self, make_item):
        item = make_item("fill_blank")
        item["correct_answer"] = "very black"
        result = validate_question("fill_blank", item, 0, locale="en")
        assert "single word" in result.error

    def test_clue_emoji_optional(self, make_item):
        item = make_item("fill_blank")
        del item["clue_emoji"]
        assert validate_question("fill_blank", item, 0).valid


class TestScrambleValidator:
    """Tests for ScrambleValidator token multiset equality."""

    def test_extra_word_rejected(self, make_item):
        item = make_item("scramble")
        item["correct_sentence"] = "I like pizza."
        item["scrambled"] = ["to", "I", "pizza", "like", "."]
        result = validate_question("scramble", item, 0, locale="en")
        assert not result.valid
        assert "extra: to" in result.error

    def test_missing_word_rejected(self, make_item):
        item = make_item("scramble")
        item["correct_sentence"] = "This is a green apple."
        item["scrambled"] = ["green", "apple", "This", "is", "."]
        result = validate_question("scramble", item, 0, locale="en")
        assert "missing: a" in result.error

    def test_substituted_word_rejected(self, make_item):
        item = make_item("scramble")
        item["correct_sentence"] = "This is a green apple."
        item["scrambled"] = ["green", "an", "apple", "This", "is", "."]
        assert not validate_question("scramble", item, 0).valid

    def test_missing_punctuation_rejected(self, make_item):
        item = make_item("scramble")
        item["scrambled"] = ["bat", "a", "He", "has"]
        assert not validate_question("scramble", item, 0).valid

    def test_multi_word_chunks_accepted(self, make_item):
        item = make_item("scramble")
        item["scrambled"] = ["a bat.", "He has"]
        assert validate_question("scramble", item, 0).valid

    def test_sorted_tokens_match(self, make_item):
        item = make_item("scramble")
        assert validate_question("scramble", item, 0).valid
        assert sorted(item["scrambled"]) == sorted(["He", "has", "a", "bat", "."])

    def test_empty_list_rejected(self, make_item):
        item = make_item("scramble")
        item["scrambled"] = []
        assert not validate_question("scramble", item, 0).valid


class TestTrueFalseValidator:
    """Tests for TrueFalseValidator."""

    @pytest.mark.parametrize("answer", [True, False])
    def test_boolean_accepted(self, answer, make_item):
        item = make_item("true_false")
        item["correct_answer"] = answer
        assert validate_question("true_false", item, 0).valid

    @pytest.mark.parametrize("answer", ["true", "false", 1, 0])
    def test_truthy_non_boolean_rejected(self, answer, make_item):
        item = make_item("true_false")
        item["correct_answer"] = answer
        assert not validate_question("true_false", item, 0).valid


class TestFillBoxValidator:
    """Tests for FillBoxValidator."""

    def test_word_box_too_small(self, make_item):
        item = make_item("fill_box")
        item["word_box"] = item["word_box"][:4]
        result = FillBoxValidator("en").validate(item, 0)
        assert "at least 5 words" in result.error

    def test_too_few_blanks(self, make_item):
        item = make_item("fill_box")
        item["blanks"] = item["blanks"][:3]
        result = FillBoxValidator("en").validate(item, 0)
        assert "at least 4 entries" in result.error

    def test_word_box_needs_distractors(self, make_item):
        item = make_item("fill_box")
        item["word_box"] = ["lives", "feeds", "gets", "drinks", "swims"]
        item["blanks"].append({"number": 5, "correct_answer": "swims"})
        result = FillBoxValidator("en").validate(item, 0)
        assert "more words than there are blanks" in result.error

    def test_blank_needs_number(self, make_item):
        item = make_item("fill_box")
        item["blanks"][2] = {"correct_answer": "gets"}
        result = FillBoxValidator("en").validate(item, 0)
        assert "blank 3 has no number" in result.error

    def test_blank_needs_answer(self, make_item):
        item = make_item("fill_box")
        item["blanks"][0]["correct_answer"] = ""
        assert not FillBoxValidator().validate(item, 0).valid

    def test_answer_must_be_in_box(self, make_item):
        item = make_item("fill_box")
        item["blanks"][3]["correct_answer"] = "eats"
        result = FillBoxValidator("en").validate(item, 0)
        assert 'answer "eats" for blank 4 is not in word_box' in result.error

    def test_box_match_is_exact(self, make_item):
        """Blanks are graded exactly, so the key must match the box spelling."""
        item = make_item("fill_box")
        item["blanks"][0]["correct_answer"] = "Lives"
        result = FillBoxValidator("en").validate(item, 0)
        assert not result.valid
        assert 'answer "Lives" for blank 1 is not in word_box' in result.error

    def test_numeric_text_blank_number_accepted(self, make_item):
        item = make_item("fill_box")
        item["blanks"][0]["number"] = " 1 "
        assert FillBoxValidator().validate(item, 0).valid

    @pytest.mark.parametrize("number", ["²", "١", "one", "", True, 1.0])
    def test_non_ascii_or_non_integer_number_rejected(self, number, make_item):
        item = make_item("fill_box")
        item["blanks"][0]["number"] = number
        result = FillBoxValidator("en").validate(item, 0)
        assert "blank 1 has no number" in result.error

    def test_duplicate_blank_number_rejected(self, make_item):
        item = make_item("fill_box")
        item["blanks"][3]["number"] = "2"
        result = FillBoxValidator("en").validate(item, 0)
        assert not result.valid
        assert "blank number 2 is used more than once" in result.error


class TestExplanationAlias:
    """Items written with explanation_vi are accepted."""

    @pytest.mark.parametrize(
        "section", ["multiple_choice", "rewrite", "reading", "pronunciation", "true_false"]
    )
    def test_explanation_vi_accepted(self, section, make_item):
        item = make_item(section)
        item["explanation_vi"] = item.pop("explanation")
        assert validate_question(section, item, 0).valid

    def test_neither_name_is_missing(self, make_item):
        item = make_item("reading")
        del item["explanation"]
        result = validate_question("reading", item, 0, locale="en")
        assert result.error == 'Reading Q1: missing field "explanation"'

    def test_alias_does_not_mutate_input(self, make_item):
        item = make_item("reading")
        item["explanation_vi"] = item.pop("explanation")
        validate_question("reading", item, 0)
        assert "explanation" not in item
