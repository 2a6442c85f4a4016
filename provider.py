"""Content providers: where raw test JSON comes from.

The model call itself is out of scope here. A provider only has to return
parsed JSON; validate_mega_test decides whether it can be shown.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from exercises.errors import ContentParseError
from models import Level

logger = logging.getLogger(__name__)

_FENCE_START_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_END_RE = re.compile(r"\s*```$")


def parse_raw_test(text: str) -> Any:
    """Parse model output into JSON.

    Models often wrap JSON in Markdown code fences or add prose around it,
    so fences are stripped and the outermost {...} or [...] is kept.

    Raises:
        ContentParseError: If no JSON value can be parsed.
    """
    clean = _FENCE_END_RE.sub("", _FENCE_START_RE.sub("", text.strip()))

    starts = [i for i in (clean.find("{"), clean.find("[")) if i != -1]
    end = max(clean.rfind("}"), clean.rfind("]"))
    if starts and end != -1:
        clean = clean[min(starts) : end + 1]

    try:
        return json.loads(clean)
    except json.JSONDecodeError as e:
        raise ContentParseError(f"Model output is not valid JSON: {e}") from e


class ContentProvider(ABC):
    """Source of raw (unvalidated) test content."""

    @abstractmethod
    def generate(self, topic: str, level: Level) -> Any:
        """Return parsed JSON for a test on topic at level."""
        ...


class JsonFileProvider(ContentProvider):
    """Serves a previously saved model response from disk.

    The file may hold bare JSON or the raw model text (with code fences).
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def generate(self, topic: str = "", level: Level = Level.A1) -> Any:
        logger.info("Loading test content from %s", self.path)
        with open(self.path, encoding="utf-8") as f:
            return parse_raw_test(f.read())
