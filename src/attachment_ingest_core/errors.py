from __future__ import annotations


class IngestionError(Exception):
    """Base class for failures that abort ingestion of a single file."""


class NotFoundError(IngestionError, FileNotFoundError):
    pass


class AccessDeniedError(IngestionError, PermissionError):
    """The source exists but cannot be read."""


class DecodeError(IngestionError, ValueError):
    pass


class ExtractionError(IngestionError):
    """PDF could not be opened, image could not be decoded, or OCR failed."""
