"""Validation and grading engine for generated Mega Test content.

Generated test JSON is untrusted. This package checks it before a learner
sees it and grades answers once they do.

Architecture:
- Validators check one raw item per section kind (exercises.validators)
- validate_mega_test runs every section, collects all errors, and returns
  either a filtered typed test or the full error list (exercises.mega_test)
- Scoring turns correct counts into a 0-10 score and decides correctness
  per question kind (exercises.scoring)
- Handlers parse learner input and delegate to scoring (exercises.generic_handlers)

Configuration:
- MegaTestConfig: sections, quotas and locale
- MEGA_TEST_50: canonical 7-section composition
- REWRITE_TEST_50: earlier rewrite/reading/pronunciation composition
"""

from exercises.base import (
    normalize_answer,
    parse_letter_input,
    tokenize_sentence,
)
from exercises.config import (
    COMPOSITIONS,
    MEGA_TEST_50,
    REWRITE_TEST_50,
    MegaTestConfig,
    SectionRequirement,
)
from exercises.errors import (
    ContentParseError,
    InvalidTotalError,
    MegaTestError,
    ScoringError,
    UnknownQuestionError,
    UnknownSectionError,
)
from exercises.generic_handlers import (
    HANDLERS,
    FillBlankHandler,
    FillBoxHandler,
    GenericExerciseHandler,
    MultipleChoiceHandler,
    PronunciationHandler,
    ReadingHandler,
    RewriteHandler,
    ScrambleHandler,
    TrueFalseHandler,
    get_handler,
)
from exercises.generic_models import (
    FillBlankQuestion,
    FillBoxBlank,
    FillBoxQuestion,
    MegaTest,
    MultipleChoiceQuestion,
    PronunciationChoice,
    PronunciationQuestion,
    Question,
    ReadingQuestion,
    RewriteQuestion,
    ScrambleQuestion,
    TrueFalseQuestion,
)
from exercises.mega_test import ValidationResult, validate_mega_test
from exercises.scoring import (
    ScoreReport,
    calculate_score,
    is_choice_correct,
    is_fill_blank_correct,
    is_fill_box_blank_correct,
    is_fill_box_correct,
    is_multiple_choice_correct,
    is_rewrite_correct,
    is_scramble_correct,
    is_true_false_correct,
)
from exercises.validators import (
    VALIDATORS,
    ItemCheck,
    QuestionValidator,
    get_validator,
    validate_question,
)

__all__ = [
    # Utilities
    "normalize_answer",
    "parse_letter_input",
    "tokenize_sentence",
    # Configuration
    "COMPOSITIONS",
    "MEGA_TEST_50",
    "REWRITE_TEST_50",
    "MegaTestConfig",
    "SectionRequirement",
    # Errors
    "ContentParseError",
    "InvalidTotalError",
    "MegaTestError",
    "ScoringError",
    "UnknownQuestionError",
    "UnknownSectionError",
    # Models
    "Question",
    "MultipleChoiceQuestion",
    "FillBlankQuestion",
    "ScrambleQuestion",
    "RewriteQuestion",
    "ReadingQuestion",
    "PronunciationChoice",
    "PronunciationQuestion",
    "TrueFalseQuestion",
    "FillBoxBlank",
    "FillBoxQuestion",
    "MegaTest",
    # Validation
    "ItemCheck",
    "QuestionValidator",
    "VALIDATORS",
    "get_validator",
    "validate_question",
    "ValidationResult",
    "validate_mega_test",
    # Scoring
    "ScoreReport",
    "calculate_score",
    "is_choice_correct",
    "is_multiple_choice_correct",
    "is_true_false_correct",
    "is_fill_box_blank_correct",
    "is_fill_box_correct",
    "is_fill_blank_correct",
    "is_scramble_correct",
    "is_rewrite_correct",
    # Handlers
    "GenericExerciseHandler",
    "MultipleChoiceHandler",
    "FillBlankHandler",
    "ScrambleHandler",
    "RewriteHandler",
    "ReadingHandler",
    "PronunciationHandler",
    "TrueFalseHandler",
    "FillBoxHandler",
    "HANDLERS",
    "get_handler",
]
