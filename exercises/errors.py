"""Exception types for the Mega Test engine.

Validation defects in generated content are never raised; they are returned
as data in a ValidationResult. These exceptions cover caller mistakes and
input that cannot be a test at all.
"""


class MegaTestError(ValueError):
    """Base class for all Mega Test engine errors."""


class ScoringError(MegaTestError):
    """Raised when a score cannot be computed from the given counts."""


class InvalidTotalError(ScoringError):
    """Raised when the question total is zero/negative or the count is out of range."""

    def __init__(self, correct_count: int, total_questions: int):
        self.correct_count = correct_count
        self.total_questions = total_questions
        super().__init__(
            f"Cannot score {correct_count}/{total_questions}: "
            "total must be positive and 0 <= correct <= total"
        )


class ContentParseError(MegaTestError):
    """Raised when provider output is not parseable JSON."""


class UnknownSectionError(MegaTestError):
    """Raised when a section key has no registered validator or handler."""

    def __str__(self) -> str:
        return f"Unknown section: {self.args[0]!r}"


class UnknownQuestionError(MegaTestError):
    """Raised when a session is asked about a question the test does not contain."""
