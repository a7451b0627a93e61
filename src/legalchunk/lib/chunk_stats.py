"""Chunk list statistics for ingestion reporting."""

from collections.abc import Sequence

from legalchunk.config.defaults import DEFAULT_CHARS_PER_TOKEN, DEFAULT_MAX_CHARS
from legalchunk.lib.legal_chunker import DocumentChunk, estimate_token_count
from legalchunk.models.stats import ChunkingStats


def summarize_chunks(
    chunks: Sequence[DocumentChunk],
    max_chars: int = DEFAULT_MAX_CHARS,
    chars_per_token: int = DEFAULT_CHARS_PER_TOKEN,
) -> ChunkingStats:
    """Summarize a document's chunks.

    Args:
        chunks: Chunks from chunk_legal_document().
        max_chars: Budget the chunks were produced with; longer chunks are
            counted as oversized.
        chars_per_token: Divisor for the token estimate.

    Returns:
        ChunkingStats for the list. An empty list gives all-zero stats.
    """
    if not chunks:
        return ChunkingStats()

    lengths = [len(chunk.text) for chunk in chunks]
    h1_headers = {c.metadata.h1_header for c in chunks if c.metadata.h1_header}
    h2_headers = {c.metadata.h2_header for c in chunks if c.metadata.h2_header}

    return ChunkingStats(
        document_id=chunks[0].metadata.document_id,
        total_chunks=len(chunks),
        total_chars=sum(lengths),
        min_chars=min(lengths),
        max_chars=max(lengths),
        avg_chars=round(sum(lengths) / len(lengths), 2),
        estimated_tokens=sum(
            estimate_token_count(chunk.text, chars_per_token) for chunk in chunks
        ),
        oversized_chunks=sum(1 for length in lengths if length > max_chars),
        h1_sections=len(h1_headers),
        h2_sections=len(h2_headers),
    )
