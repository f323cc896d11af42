from __future__ import annotations

from attachment_ingest_core.ocr.client import LlmServiceClient, LlmServiceOcrEngine, OcrEngineSpec
from attachment_ingest_core.ocr.engine import OcrEngine, RecognitionLevel, RecognizedText, TextRegion
from attachment_ingest_core.ocr.tesseract import TesseractOcrEngine

__all__ = [
    "LlmServiceClient",
    "LlmServiceOcrEngine",
    "OcrEngine",
    "OcrEngineSpec",
    "RecognitionLevel",
    "RecognizedText",
    "TesseractOcrEngine",
    "TextRegion",
]
