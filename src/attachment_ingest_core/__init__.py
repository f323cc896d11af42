from attachment_ingest_core.chunking import chunk_paragraphs
from attachment_ingest_core.classify import classify_document_type
from attachment_ingest_core.config import Settings, load_settings
from attachment_ingest_core.context import build_context_preamble, render_document_context
from attachment_ingest_core.errors import (
    AccessDeniedError,
    DecodeError,
    ExtractionError,
    IngestionError,
    NotFoundError,
)
from attachment_ingest_core.extractors import (
    UNKNOWN_CONTENT_FALLBACK,
    ContentExtractor,
    ImageTextExtractor,
    decode_text,
    extract_pdf_text,
)
from attachment_ingest_core.logging_config import configure_logging
from attachment_ingest_core.models import Document, DocumentChunk, DocumentType
from attachment_ingest_core.pipeline import DocumentIngestionPipeline, IngestionOutcome

__all__ = [
    "__version__",
    "AccessDeniedError",
    "ContentExtractor",
    "DecodeError",
    "Document",
    "DocumentChunk",
    "DocumentIngestionPipeline",
    "DocumentType",
    "ExtractionError",
    "ImageTextExtractor",
    "IngestionError",
    "IngestionOutcome",
    "NotFoundError",
    "Settings",
    "UNKNOWN_CONTENT_FALLBACK",
    "build_context_preamble",
    "chunk_paragraphs",
    "classify_document_type",
    "configure_logging",
    "decode_text",
    "extract_pdf_text",
    "load_settings",
    "render_document_context",
]

__version__ = "0.1.0"
