"""Configuration loading and defaults for legalchunk.

Main components:
- ConfigLoader: Resolve ChunkerConfig from CLI options, YAML, environment
- Default values (3200 characters per chunk, 4 characters per token)
- Validation helpers for configuration values
"""

from legalchunk.config.loader import ConfigLoader

__all__ = ["ConfigLoader"]
