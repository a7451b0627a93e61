"""Tests for the pydantic configuration and statistics models."""

import pytest
from pydantic import ValidationError

from legalchunk.models.config import ChunkerConfig
from legalchunk.models.stats import ChunkingStats


class TestChunkerConfig:
    """Tests for ChunkerConfig."""

    def test_defaults(self) -> None:
        """Test default settings."""
        config = ChunkerConfig()
        assert config.max_chars == 3200
        assert config.split_oversized_units is True
        assert config.chars_per_token == 4

    @pytest.mark.parametrize("value", [0, -1])
    def test_max_chars_must_be_positive(self, value: int) -> None:
        """Test non-positive budgets are rejected."""
        with pytest.raises(ValidationError):
            ChunkerConfig(max_chars=value)

    def test_chars_per_token_must_be_positive(self) -> None:
        """Test a zero divisor is rejected."""
        with pytest.raises(ValidationError):
            ChunkerConfig(chars_per_token=0)

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown settings are rejected."""
        with pytest.raises(ValidationError):
            ChunkerConfig(overlap=200)

    def test_numeric_string_coerced(self) -> None:
        """Test YAML-style numeric strings are accepted."""
        assert ChunkerConfig(max_chars="1000").max_chars == 1000


class TestChunkingStats:
    """Tests for ChunkingStats."""

    def test_defaults_are_zero(self) -> None:
        """Test an empty summary is all zeros."""
        stats = ChunkingStats()
        assert stats.document_id is None
        assert stats.total_chunks == 0
        assert stats.avg_chars == 0.0

    def test_negative_counts_rejected(self) -> None:
        """Test counts cannot be negative."""
        with pytest.raises(ValidationError):
            ChunkingStats(total_chunks=-1)

    def test_model_dump_keys(self) -> None:
        """Test the JSON shape used by the stats command."""
        assert list(ChunkingStats().model_dump()) == [
            "document_id",
            "total_chunks",
            "total_chars",
            "min_chars",
            "max_chars",
            "avg_chars",
            "estimated_tokens",
            "oversized_chunks",
            "h1_sections",
            "h2_sections",
        ]
