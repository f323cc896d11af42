from __future__ import annotations

import io
from collections.abc import Callable

import fitz
import pytest
from PIL import Image

from attachment_ingest_core.ocr.engine import RecognitionLevel, RecognizedText, TextRegion


class FakeOcrEngine:
    def __init__(self, regions: list[TextRegion] | None = None, *, error: Exception | None = None):
        self.regions = regions or []
        self.error = error
        self.levels: list[RecognitionLevel] = []

    def recognize(self, image: Image.Image, *, level: RecognitionLevel) -> list[TextRegion]:
        self.levels.append(level)
        if self.error is not None:
            raise self.error
        return self.regions


def region(*candidates: tuple[str, float]) -> TextRegion:
    return TextRegion(candidates=tuple(RecognizedText(text=t, confidence=c) for t, c in candidates))


@pytest.fixture()
def make_pdf() -> Callable[[list[str]], bytes]:
    def _make(pages: list[str]) -> bytes:
        doc = fitz.open()
        try:
            for text in pages:
                page = doc.new_page()
                if text:
                    page.insert_text((72, 72), text)
            return doc.tobytes()
        finally:
            doc.close()

    return _make


@pytest.fixture()
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (32, 16), "white").save(buf, format="PNG")
    return buf.getvalue()
