from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from PIL import Image


class RecognitionLevel(StrEnum):
    ACCURATE = "accurate"
    FAST = "fast"


@dataclass(frozen=True)
class RecognizedText:
    text: str
    confidence: float  # 0.0 - 1.0


@dataclass(frozen=True)
class TextRegion:
    """One detected block of text and its candidate readings."""

    candidates: tuple[RecognizedText, ...]

    def top_candidate(self) -> RecognizedText | None:
        if not self.candidates:
            return None
        # max() keeps the first of equally ranked candidates.
        return max(self.candidates, key=lambda c: c.confidence)


class OcrEngine(Protocol):
    def recognize(self, image: Image.Image, *, level: RecognitionLevel) -> list[TextRegion]:
        """Return detected regions in the engine's own reading order."""
        ...
