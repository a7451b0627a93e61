"""Chunker configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from legalchunk.config.defaults import DEFAULT_CHARS_PER_TOKEN, DEFAULT_MAX_CHARS


class ChunkerConfig(BaseModel):
    """Settings for LegalDocumentChunker.

    Attributes:
        max_chars: Character budget per chunk.
        split_oversized_units: Cut text that cannot be split by paragraph or
            sentence into max_chars windows instead of emitting it as one
            oversized chunk.
        chars_per_token: Divisor for the character-based token estimate.
    """

    model_config = ConfigDict(extra="forbid")

    max_chars: int = Field(
        default=DEFAULT_MAX_CHARS, gt=0, description="Maximum characters per chunk"
    )
    split_oversized_units: bool = Field(
        default=True,
        description="Window-split units that have no paragraph or sentence breaks",
    )
    chars_per_token: int = Field(
        default=DEFAULT_CHARS_PER_TOKEN,
        gt=0,
        description="Characters per token for estimate_token_count",
    )
