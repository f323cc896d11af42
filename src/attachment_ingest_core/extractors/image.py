from __future__ import annotations

import io
from dataclasses import dataclass, field

import structlog
from PIL import Image, UnidentifiedImageError

from attachment_ingest_core.errors import ExtractionError
from attachment_ingest_core.ocr.engine import OcrEngine, RecognitionLevel
from attachment_ingest_core.ocr.tesseract import TesseractOcrEngine

logger = structlog.get_logger(__name__)


def load_image(data: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ExtractionError("cannot load image") from e
    return image


@dataclass(frozen=True)
class ImageTextExtractor:
    """
    OCR an image into newline-separated text.

    Only the best candidate of each detected region is kept, and regions stay in the
    order the engine reported them.
    """

    engine: OcrEngine = field(default_factory=TesseractOcrEngine)
    level: RecognitionLevel = RecognitionLevel.ACCURATE

    def extract(self, data: bytes) -> str:
        image = load_image(data)
        try:
            regions = self.engine.recognize(image, level=self.level)
        except ExtractionError:
            raise
        except Exception as e:  # noqa: BLE001
            raise ExtractionError(f"text recognition failed: {e}") from e

        lines: list[str] = []
        for region in regions:
            best = region.top_candidate()
            if best is not None:
                lines.append(best.text)

        logger.debug("image_text_recognized", regions=len(regions), lines=len(lines))
        return "\n".join(lines)
