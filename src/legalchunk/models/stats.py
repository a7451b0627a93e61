"""Chunking statistics model."""

from pydantic import BaseModel, Field


class ChunkingStats(BaseModel):
    """Summary of one document's chunk list.

    Attributes:
        document_id: Document the chunks belong to, None for an empty list.
        total_chunks: Number of chunks.
        total_chars: Sum of chunk text lengths.
        min_chars: Shortest chunk length.
        max_chars: Longest chunk length.
        avg_chars: Mean chunk length, rounded to two decimals.
        estimated_tokens: Sum of per-chunk token estimates.
        oversized_chunks: Chunks longer than the character budget.
        h1_sections: Distinct H1 headers seen.
        h2_sections: Distinct H2 headers seen.
    """

    document_id: str | None = None
    total_chunks: int = Field(default=0, ge=0)
    total_chars: int = Field(default=0, ge=0)
    min_chars: int = Field(default=0, ge=0)
    max_chars: int = Field(default=0, ge=0)
    avg_chars: float = Field(default=0.0, ge=0.0)
    estimated_tokens: int = Field(default=0, ge=0)
    oversized_chunks: int = Field(default=0, ge=0)
    h1_sections: int = Field(default=0, ge=0)
    h2_sections: int = Field(default=0, ge=0)
