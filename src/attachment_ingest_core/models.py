from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from pathlib import Path
from uuid import UUID


class DocumentType(StrEnum):
    PDF = "pdf"
    IMAGE = "image"
    CODE = "code"
    CSV = "csv"
    TEXT = "text"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DocumentChunk:
    id: UUID
    content: str
    index: int  # 0-based


@dataclass(frozen=True)
class Document:
    id: UUID
    filename: str
    type: DocumentType
    file_size_bytes: int
    created_at: datetime
    source_path: Path | None = None
    content: str | None = None
    # Present only when the content was longer than the chunk size.
    chunks: tuple[DocumentChunk, ...] | None = None

    @property
    def is_chunked(self) -> bool:
        return bool(self.chunks)
