from __future__ import annotations

from pathlib import Path

import structlog

from attachment_ingest_core.errors import AccessDeniedError, DecodeError, NotFoundError

logger = structlog.get_logger(__name__)

# UTF-8 first, then the fallbacks in fixed order. "utf-16" honours a BOM and otherwise
# uses the platform's native byte order.
DEFAULT_ENCODINGS: tuple[str, ...] = (
    "utf-8",
    "ascii",
    "latin-1",
    "utf-16",
    "utf-16-le",
    "utf-16-be",
)


def decode_text(data: bytes, *, encodings: tuple[str, ...] = DEFAULT_ENCODINGS) -> str:
    for encoding in encodings:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError:
            continue
        if encoding != encodings[0]:
            logger.debug("text_decoded_with_fallback", encoding=encoding, bytes=len(data))
        return text
    raise DecodeError(f"Could not decode {len(data)} bytes with any of: {', '.join(encodings)}")


def read_source_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except (FileNotFoundError, NotADirectoryError) as e:
        raise NotFoundError(f"File not found: {path}") from e
    except IsADirectoryError as e:
        raise NotFoundError(f"Not a regular file: {path}") from e
    except PermissionError as e:
        raise AccessDeniedError(f"File is not readable: {path}") from e
