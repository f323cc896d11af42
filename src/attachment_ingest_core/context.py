from __future__ import annotations

from collections.abc import Iterable

from attachment_ingest_core.models import Document

CONTEXT_PREAMBLE = "The user has provided the following documents for context:"


def render_document_context(documents: Iterable[Document]) -> str:
    """`Document: <filename>` followed by the content, one block per document."""
    blocks = [f"Document: {doc.filename}\n{doc.content}" for doc in documents if doc.content is not None]
    return "\n\n".join(blocks)


def build_context_preamble(documents: Iterable[Document]) -> str:
    rendered = render_document_context(documents)
    if not rendered:
        return ""
    return f"{CONTEXT_PREAMBLE}\n\n{rendered}"
