from datetime import UTC, datetime
from uuid import uuid4

from attachment_ingest_core.context import build_context_preamble, render_document_context
from attachment_ingest_core.models import Document, DocumentType


def _doc(filename: str, content: str | None) -> Document:
    return Document(
        id=uuid4(),
        filename=filename,
        type=DocumentType.TEXT,
        file_size_bytes=0,
        created_at=datetime.now(UTC),
        content=content,
    )


def test_render_document_context_skips_documents_without_content() -> None:
    docs = [_doc("a.txt", "alpha"), _doc("b.pdf", None), _doc("c.md", "")]
    assert render_document_context(docs) == "Document: a.txt\nalpha\n\nDocument: c.md\n"


def test_build_context_preamble() -> None:
    text = build_context_preamble([_doc("a.txt", "alpha")])
    assert text == "The user has provided the following documents for context:\n\nDocument: a.txt\nalpha"


def test_build_context_preamble_empty() -> None:
    assert build_context_preamble([]) == ""
    assert build_context_preamble([_doc("x.bin", None)]) == ""
