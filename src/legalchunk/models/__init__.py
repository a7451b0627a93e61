"""Pydantic models for legalchunk configuration and reporting."""

from legalchunk.models.config import ChunkerConfig
from legalchunk.models.stats import ChunkingStats

__all__ = ["ChunkerConfig", "ChunkingStats"]
