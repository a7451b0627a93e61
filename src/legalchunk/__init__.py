"""legalchunk - Semantic chunking for legal documents.

Splits extracted legal markdown into ordered chunks by H1 and H2 headers,
then by paragraph and sentence, keeping each chunk's header lineage for
embedding and citation.

Main features:
- Header-aware chunking with a character budget per chunk
- Flat chunk records ready for a (document_id, chunk_index) keyed table
- Token estimation for embedding budgets
- YAML / environment configuration and a click CLI
"""

from legalchunk.lib.errors import ConfigError, LegalChunkError, ValidationError
from legalchunk.lib.legal_chunker import (
    ChunkMetadata,
    DocumentChunk,
    DocumentMetadata,
    LegalDocumentChunker,
    chunk_legal_document,
    estimate_token_count,
)
from legalchunk.models.config import ChunkerConfig

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChunkerConfig",
    "ChunkMetadata",
    "ConfigError",
    "DocumentChunk",
    "DocumentMetadata",
    "LegalChunkError",
    "LegalDocumentChunker",
    "ValidationError",
    "chunk_legal_document",
    "estimate_token_count",
]
