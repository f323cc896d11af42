from __future__ import annotations

import asyncio
import os
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from uuid import uuid4

import structlog

from attachment_ingest_core.chunking import chunk_paragraphs
from attachment_ingest_core.classify import classify_document_type
from attachment_ingest_core.config import Settings
from attachment_ingest_core.errors import NotFoundError
from attachment_ingest_core.extractors.content import ContentExtractor
from attachment_ingest_core.extractors.image import ImageTextExtractor
from attachment_ingest_core.models import Document, DocumentChunk
from attachment_ingest_core.ocr.client import LlmServiceClient, LlmServiceOcrEngine, OcrEngineSpec
from attachment_ingest_core.ocr.engine import OcrEngine
from attachment_ingest_core.ocr.tesseract import TesseractOcrEngine

DEFAULT_CHUNK_SIZE = 4000
DEFAULT_CHUNK_OVERLAP = 200


@dataclass(frozen=True)
class IngestionOutcome:
    path: Path
    document: Document | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _ocr_engine_from_settings(settings: Settings) -> OcrEngine:
    if settings.ocr_backend == "llm_service":
        api_key = settings.ocr_llm_api_key.get_secret_value() if settings.ocr_llm_api_key else None
        client = LlmServiceClient(
            base_url=settings.ocr_llm_base_url or "",
            api_key=api_key,
            timeout_s=settings.ocr_llm_timeout_s,
        )
        return LlmServiceOcrEngine(client=client, engine=OcrEngineSpec(settings.ocr_llm_engine))
    return TesseractOcrEngine(languages=settings.ocr_languages)


def _file_size(path: Path, log: Any) -> int:
    try:
        return path.stat().st_size
    except (FileNotFoundError, NotADirectoryError) as e:
        raise NotFoundError(f"File not found: {path}") from e
    except OSError as e:
        log.warning("file_size_unavailable", error=str(e))
        return 0


class DocumentIngestionPipeline:
    """
    Turns an attached file into an immutable `Document`.

    Stages: classify by name -> extract text -> chunk when longer than `chunk_size`.
    Any stage failure aborts the whole file; no partial document is returned.
    The pipeline holds no per-ingestion state, so one instance can serve many
    concurrent ingestions.
    """

    def __init__(
        self,
        content_extractor: ContentExtractor | None = None,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        overlap: int = DEFAULT_CHUNK_OVERLAP,
        logger: Any | None = None,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        if overlap < 0 or overlap >= chunk_size:
            raise ValueError("overlap must be within [0, chunk_size)")
        self._extractor = content_extractor or ContentExtractor()
        self._chunk_size = chunk_size
        self._overlap = overlap
        self._logger = logger or structlog.get_logger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings, *, logger: Any | None = None) -> DocumentIngestionPipeline:
        image_extractor = ImageTextExtractor(
            engine=_ocr_engine_from_settings(settings),
            level=settings.ocr_recognition_level,
        )
        return cls(
            ContentExtractor(image_extractor=image_extractor),
            chunk_size=settings.chunk_size,
            overlap=settings.chunk_overlap,
            logger=logger,
        )

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def overlap(self) -> int:
        return self._overlap

    def _chunk(self, content: str) -> tuple[DocumentChunk, ...] | None:
        if len(content) <= self._chunk_size:
            return None
        pieces = chunk_paragraphs(content, chunk_size=self._chunk_size, overlap=self._overlap)
        return tuple(DocumentChunk(id=uuid4(), content=piece, index=i) for i, piece in enumerate(pieces))

    def process_file(self, path: str | os.PathLike[str]) -> Document:
        source = Path(path)
        log = self._logger.bind(filename=source.name)

        file_size = _file_size(source, log)
        doc_type = classify_document_type(source.name)
        log.debug("document_classified", document_type=str(doc_type), file_size_bytes=file_size)

        content = self._extractor.extract(source, doc_type)
        chunks = self._chunk(content)

        document = Document(
            id=uuid4(),
            filename=source.name,
            type=doc_type,
            file_size_bytes=file_size,
            created_at=datetime.now(UTC),
            source_path=source,
            content=content,
            chunks=chunks,
        )
        log.info(
            "document_ingested",
            document_id=str(document.id),
            document_type=str(doc_type),
            chars=len(content),
            chunks=len(chunks) if chunks else 0,
        )
        return document

    async def ingest(self, path: str | os.PathLike[str]) -> Document:
        return await asyncio.to_thread(self.process_file, path)

    async def ingest_many(self, paths: Iterable[str | os.PathLike[str]]) -> list[IngestionOutcome]:
        """
        Ingest several files concurrently.

        Outcomes come back in input order; a failing file is reported in its own outcome
        and does not cancel the others.
        """
        sources = [Path(p) for p in paths]
        results = await asyncio.gather(*(self.ingest(p) for p in sources), return_exceptions=True)

        outcomes: list[IngestionOutcome] = []
        for source, result in zip(sources, results, strict=True):
            if isinstance(result, Exception):
                self._logger.warning(
                    "document_ingest_failed",
                    filename=source.name,
                    error_type=type(result).__name__,
                    error=str(result),
                )
                outcomes.append(IngestionOutcome(path=source, error=result))
            elif isinstance(result, BaseException):
                raise result
            else:
                outcomes.append(IngestionOutcome(path=source, document=result))
        return outcomes
