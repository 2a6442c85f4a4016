"""Mega Challenge UI Module - terminal rendering of validated tests and scores."""

from ui.app import ChallengeUI
from ui.components import (
    QuestionPanel,
    FeedbackPanel,
    ValidationErrorPanel,
    ScoreBoard,
    PassagePanel,
)
from ui.styles import (
    BRAND_BLUE,
    HIGHLIGHT_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
)

__all__ = [
    "ChallengeUI",
    "QuestionPanel",
    "FeedbackPanel",
    "ValidationErrorPanel",
    "ScoreBoard",
    "PassagePanel",
    "BRAND_BLUE",
    "HIGHLIGHT_GOLD",
    "SUCCESS_GREEN",
    "ERROR_RED",
    "INFO_BLUE",
    "MUTED_GRAY",
]
