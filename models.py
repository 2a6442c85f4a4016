from enum import Enum

from pydantic import BaseModel


class Level(str, Enum):
    """Difficulty tier attached to a test and to each of its questions."""

    A1 = "A1"  # beginner
    A2 = "A2"  # elementary
    B1 = "B1"  # intermediate

    @classmethod
    def values(cls) -> list[str]:
        return [level.value for level in cls]

    @classmethod
    def is_valid(cls, value) -> bool:
        return isinstance(value, str) and value in cls.values()


class Passage(BaseModel):
    """A reading passage and its translation."""

    text: str
    translation: str = ""
