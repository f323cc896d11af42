from __future__ import annotations

import io

import structlog
from pypdf import PdfReader

from attachment_ingest_core.errors import ExtractionError

logger = structlog.get_logger(__name__)


def _open_reader(data: bytes) -> PdfReader:
    try:
        reader = PdfReader(io.BytesIO(data))
        if reader.is_encrypted and not reader.decrypt(""):
            raise ExtractionError("cannot open PDF")
        # Forces the page tree to be parsed so structural damage surfaces here.
        len(reader.pages)
    except ExtractionError:
        raise
    except Exception as e:  # noqa: BLE001
        raise ExtractionError("cannot open PDF") from e
    return reader


def extract_pdf_text(data: bytes) -> str:
    """
    Concatenate the text layer of every page.

    Pages without text are skipped. A newline separates a page's text from the next
    page unless the text already ends with one. PDFs without a text layer (scans)
    yield "" rather than an error.
    """
    reader = _open_reader(data)
    page_count = len(reader.pages)

    parts: list[str] = []
    for idx, page in enumerate(reader.pages):
        try:
            page_text = page.extract_text() or ""
        except Exception as e:  # noqa: BLE001
            logger.warning("pdf_page_extract_failed", page_index=idx, error=str(e))
            continue
        if not page_text:
            continue
        parts.append(page_text)
        if not page_text.endswith("\n") and idx < page_count - 1:
            parts.append("\n")

    text = "".join(parts)
    if text:
        logger.debug("pdf_text_extracted", pages=page_count, chars=len(text))
    else:
        logger.warning("pdf_text_empty", pages=page_count)
    return text
