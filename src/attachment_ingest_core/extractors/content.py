from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import structlog

from attachment_ingest_core.errors import DecodeError
from attachment_ingest_core.extractors.image import ImageTextExtractor
from attachment_ingest_core.extractors.pdf import extract_pdf_text
from attachment_ingest_core.extractors.text import decode_text, read_source_bytes
from attachment_ingest_core.models import DocumentType

logger = structlog.get_logger(__name__)

UNKNOWN_CONTENT_FALLBACK = "Could not extract content from this file type."


@dataclass(frozen=True)
class ContentExtractor:
    image_extractor: ImageTextExtractor = field(default_factory=ImageTextExtractor)

    def extract(self, path: Path, doc_type: DocumentType) -> str:
        data = read_source_bytes(path)

        if doc_type is DocumentType.PDF:
            return extract_pdf_text(data)
        if doc_type is DocumentType.IMAGE:
            return self.image_extractor.extract(data)
        if doc_type in {DocumentType.CODE, DocumentType.CSV, DocumentType.TEXT}:
            return decode_text(data)

        # Unknown types must never block the attachment.
        try:
            return decode_text(data)
        except DecodeError as e:
            logger.info("unknown_type_not_decodable", filename=path.name, error=str(e))
            return UNKNOWN_CONTENT_FALLBACK
