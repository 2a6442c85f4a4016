"""Typed question models for a validated Mega Test.

Generated JSON is untrusted; these models are only ever built from items
that already passed their section validator (see exercises.validators), so
constructing them should not fail for admitted content.
"""

from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator

from exercises.errors import UnknownSectionError
from models import Level, Passage

ChoiceLabel = Literal["A", "B", "C"]

# Older prompts name the field explanation_vi.
EXPLANATION_ALIAS = AliasChoices("explanation", "explanation_vi")


class Question(BaseModel):
    """Base class for all question kinds."""

    id: str
    level: Level

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        # Generated ids are sometimes plain integers.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class MultipleChoiceQuestion(Question):
    """Four-way multiple choice, answered by option index."""

    question: str
    options: list[str]  # exactly 4
    correct_answer: int  # 0-3
    explanation: str = Field(validation_alias=EXPLANATION_ALIAS)


class FillBlankQuestion(Question):
    """Single-word gap fill (e.g. "I have a ___ cat.")."""

    question: str  # contains exactly one blank marker
    correct_answer: str
    clue_emoji: str = ""


class ScrambleQuestion(Question):
    """Word reordering: rebuild correct_sentence from the shuffled tokens."""

    scrambled: list[str]
    correct_sentence: str
    translation: str = ""


class RewriteQuestion(Question):
    """Paraphrase: rewrite a sentence keeping its meaning."""

    original_sentence: str
    instruction: str
    hint_sample: str = ""
    rewritten_correct: str
    allowed_variants: list[str] = Field(default_factory=list)
    explanation: str = Field(validation_alias=EXPLANATION_ALIAS)


class ReadingQuestion(Question):
    """Three-way (A/B/C) comprehension question about the reading passage."""

    question_text: str
    choices: list[str]  # A, B, C
    correct_choice: ChoiceLabel
    explanation: str = Field(validation_alias=EXPLANATION_ALIAS)


class PronunciationChoice(BaseModel):
    word: str
    underlined: str  # occurs inside word


class PronunciationQuestion(Question):
    """Odd-one-out pronunciation of the underlined part of each word."""

    instruction: str
    choices: list[PronunciationChoice]  # A, B, C
    correct_choice: ChoiceLabel
    explanation: str = Field(validation_alias=EXPLANATION_ALIAS)


class TrueFalseQuestion(Question):
    """A statement about the true/false passage."""

    statement: str
    correct_answer: bool
    explanation: str = Field(validation_alias=EXPLANATION_ALIAS)


class FillBoxBlank(BaseModel):
    number: int
    correct_answer: str

    @field_validator("number", mode="before")
    @classmethod
    def _number_from_text(cls, value):
        if isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
            return int(value)
        return value


class FillBoxQuestion(Question):
    """A paragraph with numbered blanks filled from a shared word box."""

    paragraph: str
    word_box: list[str]  # answers plus distractors
    blanks: list[FillBoxBlank]
    explanation: str = Field(default="", validation_alias=EXPLANATION_ALIAS)

    def answer_key(self) -> dict[int, str]:
        return {blank.number: blank.correct_answer for blank in self.blanks}


QUESTION_MODELS: dict[str, type[Question]] = {
    "multiple_choice": MultipleChoiceQuestion,
    "fill_blank": FillBlankQuestion,
    "scramble": ScrambleQuestion,
    "rewrite": RewriteQuestion,
    "reading": ReadingQuestion,
    "pronunciation": PronunciationQuestion,
    "true_false": TrueFalseQuestion,
    "fill_box": FillBoxQuestion,
}


class MegaTest(BaseModel):
    """A validated test: only admitted items, truncated to each section's quota.

    Sections outside the active composition are empty lists.
    """

    level: Level
    passage: Passage | None = None
    true_false_passage: Passage | None = None
    multiple_choice: list[MultipleChoiceQuestion] = Field(default_factory=list)
    fill_blank: list[FillBlankQuestion] = Field(default_factory=list)
    scramble: list[ScrambleQuestion] = Field(default_factory=list)
    rewrite: list[RewriteQuestion] = Field(default_factory=list)
    reading: list[ReadingQuestion] = Field(default_factory=list)
    pronunciation: list[PronunciationQuestion] = Field(default_factory=list)
    true_false: list[TrueFalseQuestion] = Field(default_factory=list)
    fill_box: list[FillBoxQuestion] = Field(default_factory=list)

    def section(self, name: str) -> list[Question]:
        if name not in QUESTION_MODELS:
            raise UnknownSectionError(name)
        return getattr(self, name)

    def non_empty_sections(self) -> list[str]:
        return [name for name in QUESTION_MODELS if getattr(self, name)]

    @property
    def question_count(self) -> int:
        return sum(len(getattr(self, name)) for name in QUESTION_MODELS)
