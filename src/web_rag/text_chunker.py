"""Text chunker — splits page text into overlapping chunks with smart boundaries."""

from collections.abc import Mapping, Sequence

from web_rag.config import ChunkConfig
from web_rag.errors import ConfigError
from web_rag.models import Document

# Break points, ordered by preference.
_PARAGRAPH_BREAK = "\n\n"
_SENTENCE_BREAKS = (". ", "! ", "? ", "\n")
_WORD_BREAK = " "


def validate_chunk_config(config: ChunkConfig) -> None:
    """Check that the chunking parameters can produce progressing chunks.

    Raises:
        ConfigError: If a length is negative, ``max_length`` is zero,
            ``min_length > max_length``, ``overlap > min_length`` or
            ``overlap >= max_length``.
    """
    if config.min_length < 0 or config.max_length <= 0 or config.overlap < 0:
        raise ConfigError(
            f"chunk lengths must be positive (min={config.min_length}, "
            f"max={config.max_length}, overlap={config.overlap})"
        )
    if config.min_length > config.max_length:
        raise ConfigError(
            f"min_length ({config.min_length}) must not exceed "
            f"max_length ({config.max_length})"
        )
    if config.overlap > config.min_length:
        raise ConfigError(
            f"overlap ({config.overlap}) must not exceed "
            f"min_length ({config.min_length})"
        )
    if config.overlap >= config.max_length:
        raise ConfigError(
            f"overlap ({config.overlap}) must be less than "
            f"max_length ({config.max_length})"
        )


def _find_break(text: str, start: int, lower: int, upper: int) -> int:
    """Return the end offset of the best break point in ``text[lower:upper]``.

    The returned offset always lies in ``(lower, upper]``. A paragraph break
    only counts in the second half of the chunk starting at *start*. Falls
    back to a hard cut at *upper* when no break point is found.
    """
    pos = text.rfind(_PARAGRAPH_BREAK, max(lower, start + (upper - start) // 2), upper)
    if pos != -1:
        return pos + len(_PARAGRAPH_BREAK)

    for sep in _SENTENCE_BREAKS:
        pos = text.rfind(sep, lower, upper)
        if pos != -1:
            return pos + len(sep)

    pos = text.rfind(_WORD_BREAK, lower, upper)
    if pos != -1:
        return pos + len(_WORD_BREAK)

    return upper


def chunk_text(text: str, config: ChunkConfig | None = None) -> list[str]:
    """Split text into overlapping chunks of bounded length.

    Every chunk except the last is between ``min_length`` and
    ``max_length`` characters long, and each chunk after the first
    starts ``overlap`` characters before the end of its predecessor.
    Chunks are exact substrings of *text*, so dropping the first
    ``overlap`` characters of every chunk but the first and joining
    the rest reconstructs the input.

    Breaks are placed at the last paragraph break in the second half
    of the window, then the last sentence break, then the last space,
    or at ``max_length`` when the window has none.

    Args:
        text: The source text to split.
        config: Chunking parameters. Uses defaults if not provided.

    Returns:
        Ordered list of text chunks. Empty for empty input.

    Raises:
        ConfigError: If *config* is inconsistent.
    """
    cfg = config or ChunkConfig()
    validate_chunk_config(cfg)

    if not text:
        return []

    # A chunk must be longer than the overlap or the next one would not advance.
    shortest = max(cfg.min_length, cfg.overlap + 1)

    chunks: list[str] = []
    start = 0

    while len(text) - start > cfg.max_length:
        end = _find_break(text, start, start + shortest, start + cfg.max_length)
        chunks.append(text[start:end])
        start = end - cfg.overlap

    chunks.append(text[start:])
    return chunks


def tag_chunks(
    chunks: Sequence[str],
    metadata: Mapping[str, str],
) -> list[Document]:
    """Wrap each chunk in a Document carrying a copy of *metadata*.

    Args:
        chunks: Chunk texts, in order.
        metadata: Metadata attached to every resulting document
            (at least the source ``url`` for web pages).

    Returns:
        One Document per chunk, preserving order.
    """
    return [Document(content=chunk, metadata=dict(metadata)) for chunk in chunks]
