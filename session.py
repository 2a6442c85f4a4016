"""Learner session state for one validated test.

The test is read-only reference data; answers and submission flags belong
to the session and are discarded with it when a new lesson starts.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from exercises.errors import UnknownQuestionError
from exercises.generic_handlers import GenericExerciseHandler, get_handler
from exercises.generic_models import MegaTest, Question
from exercises.messages import DEFAULT_LOCALE, Locale
from exercises.scoring import ScoreReport, calculate_score

logger = logging.getLogger(__name__)


def answer_key(section: str, question_id: str) -> str:
    # Generated ids repeat across sections ("q1" in every section).
    return f"{section}:{question_id}"


class SectionScore(BaseModel):
    section: str
    correct: int
    total: int


class ChallengeSession(BaseModel):
    """Tracks a learner's answers and submissions for one Mega Test."""

    test: MegaTest
    locale: Locale = DEFAULT_LOCALE
    answers: dict[str, Any] = Field(default_factory=dict)
    submitted: dict[str, bool] = Field(default_factory=dict)

    def _find(self, section: str, question_id: str) -> Question:
        for question in self.test.section(section):
            if question.id == question_id:
                return question
        raise UnknownQuestionError(answer_key(section, question_id))

    def handler_for(self, section: str, question_id: str) -> GenericExerciseHandler:
        return get_handler(section, self._find(section, question_id))

    def answer(self, section: str, question_id: str, value: Any) -> bool:
        """Record an answer. Returns False if the question was already submitted."""
        key = answer_key(section, question_id)
        self._find(section, question_id)
        if self.submitted.get(key):
            return False
        self.answers[key] = value
        return True

    def submit(self, section: str, question_id: str) -> bool:
        """Lock in the current answer and return whether it is correct."""
        key = answer_key(section, question_id)
        handler = self.handler_for(section, question_id)
        self.submitted[key] = True
        is_correct = handler.is_correct(self.answers.get(key))
        logger.debug("Submitted %s: %s", key, "correct" if is_correct else "incorrect")
        return is_correct

    def is_submitted(self, section: str, question_id: str) -> bool:
        return self.submitted.get(answer_key(section, question_id), False)

    def section_correct(self, section: str) -> int:
        """Count correct answers in a section; unsubmitted questions count as zero."""
        correct = 0
        for question in self.test.section(section):
            key = answer_key(section, question.id)
            if not self.submitted.get(key):
                continue
            if get_handler(section, question).is_correct(self.answers.get(key)):
                correct += 1
        return correct

    def section_scores(self) -> list[SectionScore]:
        return [
            SectionScore(
                section=section,
                correct=self.section_correct(section),
                total=len(self.test.section(section)),
            )
            for section in self.test.non_empty_sections()
        ]

    def total_correct(self) -> int:
        return sum(self.section_correct(s) for s in self.test.non_empty_sections())

    def submitted_count(self) -> int:
        return sum(1 for flag in self.submitted.values() if flag)

    def is_complete(self) -> bool:
        return self.submitted_count() >= self.test.question_count

    def score(self) -> ScoreReport:
        return calculate_score(self.total_correct(), self.test.question_count, self.locale)
