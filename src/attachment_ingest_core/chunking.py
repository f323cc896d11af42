from __future__ import annotations

PARAGRAPH_SEPARATOR = "\n\n"


def chunk_paragraphs(
    content: str,
    *,
    chunk_size: int = 4000,
    overlap: int = 200,
) -> list[str]:
    """
    Paragraph-aligned chunking with a character overlap.

    Paragraphs are accumulated until the next one would push the chunk past `chunk_size`.
    The closed chunk's last `overlap` characters (or all of it, if it is not longer than
    `overlap`) are carried into the next chunk as a prefix, directly followed by the
    paragraph that did not fit.

    A paragraph is never split: one longer than `chunk_size` becomes its own oversized
    chunk. Because the overlap is taken from the closed chunk as a whole, a chunk that
    itself started with an overlap prefix passes part of that prefix on again.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")
    if overlap < 0:
        raise ValueError("overlap must be >= 0")
    if overlap >= chunk_size:
        raise ValueError("overlap must be < chunk_size")

    chunks: list[str] = []
    current = ""
    for paragraph in content.split(PARAGRAPH_SEPARATOR):
        if current and len(current) + len(paragraph) > chunk_size:
            chunks.append(current)
            if len(current) > overlap:
                prefix = current[len(current) - overlap :]
            else:
                prefix = current
            current = prefix + paragraph
        else:
            if current:
                current += PARAGRAPH_SEPARATOR
            current += paragraph

    if current:
        chunks.append(current)

    # Content made only of separators has no paragraph text to accumulate.
    if not chunks and content:
        chunks.append(content)
    return chunks
