from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytesseract
from PIL import Image

from attachment_ingest_core.ocr.engine import RecognitionLevel, RecognizedText, TextRegion

# --psm 3: full automatic page segmentation; --psm 6: assume one uniform block of text.
_TESSERACT_CONFIG = {
    RecognitionLevel.ACCURATE: "--oem 1 --psm 3",
    RecognitionLevel.FAST: "--oem 1 --psm 6",
}


def regions_from_tesseract_data(data: dict[str, list[Any]]) -> list[TextRegion]:
    """
    Group `image_to_data` word rows into one region per text line.

    Lines keep the order in which tesseract reported their first word.
    """
    lines: dict[tuple[int, int, int], list[tuple[str, float]]] = {}
    for i, raw_word in enumerate(data.get("text") or []):
        word = str(raw_word or "").strip()
        conf = float(data["conf"][i])
        if not word or conf < 0:
            continue
        key = (int(data["block_num"][i]), int(data["par_num"][i]), int(data["line_num"][i]))
        lines.setdefault(key, []).append((word, conf))

    regions: list[TextRegion] = []
    for words in lines.values():
        text = " ".join(w for w, _ in words)
        confidence = sum(c for _, c in words) / len(words) / 100.0
        regions.append(TextRegion(candidates=(RecognizedText(text=text, confidence=confidence),)))
    return regions


@dataclass(frozen=True)
class TesseractOcrEngine:
    languages: str = "eng"

    def recognize(self, image: Image.Image, *, level: RecognitionLevel) -> list[TextRegion]:
        data = pytesseract.image_to_data(
            image,
            lang=self.languages,
            config=_TESSERACT_CONFIG[level],
            output_type=pytesseract.Output.DICT,
        )
        return regions_from_tesseract_data(data)
