"""Default configuration values for legalchunk."""

# Character budget per chunk. Roughly 800 tokens at 4 chars/token.
DEFAULT_MAX_CHARS = 3200

# Divisor used by the character-based token estimator.
DEFAULT_CHARS_PER_TOKEN = 4

# tiktoken encoding used for exact token counts (OpenAI embedding models).
DEFAULT_TOKEN_ENCODING = "cl100k_base"

# Chunker configuration defaults
DEFAULT_CHUNKER_CONFIG: dict[str, int | bool] = {
    "max_chars": DEFAULT_MAX_CHARS,
    "split_oversized_units": True,
    "chars_per_token": DEFAULT_CHARS_PER_TOKEN,
}

# Environment variable to field name mapping
ENV_VAR_MAP: dict[str, str] = {
    "max_chars": "LEGALCHUNK_MAX_CHARS",
    "split_oversized_units": "LEGALCHUNK_SPLIT_OVERSIZED_UNITS",
    "chars_per_token": "LEGALCHUNK_CHARS_PER_TOKEN",
}

# File suffixes accepted as already-extracted document text
SUPPORTED_DOCUMENT_SUFFIXES: frozenset[str] = frozenset({".md", ".markdown", ".txt"})
