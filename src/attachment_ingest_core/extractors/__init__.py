from __future__ import annotations

from attachment_ingest_core.extractors.content import UNKNOWN_CONTENT_FALLBACK, ContentExtractor
from attachment_ingest_core.extractors.image import ImageTextExtractor, load_image
from attachment_ingest_core.extractors.pdf import extract_pdf_text
from attachment_ingest_core.extractors.text import DEFAULT_ENCODINGS, decode_text, read_source_bytes

__all__ = [
    "DEFAULT_ENCODINGS",
    "UNKNOWN_CONTENT_FALLBACK",
    "ContentExtractor",
    "ImageTextExtractor",
    "decode_text",
    "extract_pdf_text",
    "load_image",
    "read_source_bytes",
]
