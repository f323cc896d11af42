from __future__ import annotations

import mimetypes
from pathlib import PurePath

from attachment_ingest_core.models import DocumentType

_PDF_EXTENSIONS = frozenset({"pdf"})

_IMAGE_EXTENSIONS = frozenset(
    {"png", "jpg", "jpeg", "gif", "bmp", "tif", "tiff", "webp", "heic", "heif", "ico"}
)

_CODE_EXTENSIONS = frozenset(
    {
        "py",
        "ipynb",
        "js",
        "jsx",
        "ts",
        "tsx",
        "swift",
        "java",
        "kt",
        "scala",
        "c",
        "h",
        "cc",
        "cpp",
        "cxx",
        "hpp",
        "m",
        "mm",
        "cs",
        "go",
        "rs",
        "rb",
        "php",
        "pl",
        "sh",
        "bash",
        "zsh",
        "sql",
        "r",
        "lua",
    }
)

_CSV_EXTENSIONS = frozenset({"csv"})

_TEXT_EXTENSIONS = frozenset(
    {
        "txt",
        "text",
        "md",
        "markdown",
        "rst",
        "log",
        "json",
        "xml",
        "yaml",
        "yml",
        "toml",
        "ini",
        "cfg",
        "html",
        "htm",
        "tsv",
        "rtf",
    }
)

# Checked in this order; the first table containing the extension wins.
EXTENSION_TABLE: tuple[tuple[DocumentType, frozenset[str]], ...] = (
    (DocumentType.PDF, _PDF_EXTENSIONS),
    (DocumentType.IMAGE, _IMAGE_EXTENSIONS),
    (DocumentType.CODE, _CODE_EXTENSIONS),
    (DocumentType.CSV, _CSV_EXTENSIONS),
    (DocumentType.TEXT, _TEXT_EXTENSIONS),
)

_CODE_CONTENT_TYPES = frozenset(
    {
        "application/javascript",
        "application/x-javascript",
        "application/typescript",
        "application/x-python-code",
        "application/x-sh",
        "application/x-httpd-php",
        "text/javascript",
        "text/x-python",
        "text/x-script.python",
        "text/x-c",
        "text/x-csrc",
        "text/x-chdr",
        "text/x-c++src",
        "text/x-c++hdr",
        "text/x-java",
        "text/x-java-source",
        "text/x-swift",
        "text/x-go",
        "text/x-rust",
        "text/x-ruby",
        "text/x-sh",
    }
)

_TEXTUAL_APPLICATION_TYPES = frozenset(
    {"application/json", "application/xml", "application/rtf", "application/x-yaml", "application/toml"}
)


def _extension(filename: str) -> str:
    return PurePath(filename).suffix.lower().lstrip(".")


def _classify_content_type(content_type: str) -> DocumentType:
    ct = content_type.split(";", 1)[0].strip().lower()
    if not ct:
        return DocumentType.UNKNOWN
    if ct == "application/pdf":
        return DocumentType.PDF
    if ct.startswith("image/"):
        return DocumentType.IMAGE
    if ct in _CODE_CONTENT_TYPES:
        return DocumentType.CODE
    if ct == "text/csv":
        return DocumentType.CSV
    if ct.startswith("text/") or ct in _TEXTUAL_APPLICATION_TYPES:
        return DocumentType.TEXT
    return DocumentType.UNKNOWN


def classify_document_type(filename: str, content_type: str | None = None) -> DocumentType:
    """
    Map a file name (and optionally a content type) to a `DocumentType`.

    The extension table is authoritative. Only when the extension is not listed is the
    content type consulted; if none is given it is guessed from the name.
    """
    ext = _extension(filename)
    for doc_type, extensions in EXTENSION_TABLE:
        if ext in extensions:
            return doc_type

    ct = content_type
    if not ct:
        ct, _ = mimetypes.guess_type(PurePath(filename).name, strict=False)
    return _classify_content_type(ct or "")
