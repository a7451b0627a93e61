"""Semantic chunking for legal markdown documents.

Splits extracted legal documents into ordered chunks that keep their place
in the document hierarchy, for downstream embedding and citation.

Pipeline:
- Header splitting: H1 sections, then H2 sub-sections within each H1
- Size-bounded splitting: paragraph accumulation, falling back to sentences
- Chunk assembly: one running chunk index shared across the whole document

The pipeline is pure and total. Any string is valid input and nothing is
raised; degenerate input yields an empty list or a single chunk.
"""

import math
import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

import tiktoken

from legalchunk.config.defaults import (
    DEFAULT_CHARS_PER_TOKEN,
    DEFAULT_MAX_CHARS,
    DEFAULT_TOKEN_ENCODING,
)
from legalchunk.lib.logging_config import get_logger
from legalchunk.models.config import ChunkerConfig

logger = get_logger(__name__)

# Leading header markers stripped when a header title has to be derived
HEADER_MARKER_PREFIX = re.compile(r"^#+\s*")
# Markdown header line of any level, used to tell body text from headings
ANY_HEADER_LINE = re.compile(r"^#+(?:\s|$)")
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
# NOTE: also splits abbreviations and citations such as "M.G.L. c. 90".
SENTENCE_BREAK = re.compile(r"\.\s+")
TERMINAL_PUNCTUATION = re.compile(r"[.!?]$")


@dataclass(frozen=True)
class HeaderPattern:
    """Recognizes header lines of exactly one level.

    The pattern is matched against single lines. Group 1, when present,
    captures the header title.

    Attributes:
        level: Header level this pattern recognizes (1 for H1, 2 for H2).
        pattern: Compiled line pattern.

    Example:
        >>> H1_PATTERN.match("# Criminal Law")
        'Criminal Law'
        >>> H1_PATTERN.match("## Defenses") is None
        True
    """

    level: int
    pattern: re.Pattern[str]

    def match(self, line: str) -> str | None:
        """Return the header title if line is a header of this level.

        Args:
            line: A single line of text without its newline.

        Returns:
            The trimmed title, or None when the line is not a header of
            this level. Falls back to stripping the leading markers when
            the pattern captures nothing.
        """
        found = self.pattern.match(line)
        if found is None:
            return None
        title = ""
        if self.pattern.groups >= 1 and found.group(1):
            title = found.group(1).strip()
        return title or HEADER_MARKER_PREFIX.sub("", line).strip()


# A marker run must be followed by whitespace, so the two levels never overlap
H1_PATTERN = HeaderPattern(level=1, pattern=re.compile(r"^#\s+(.*)$"))
H2_PATTERN = HeaderPattern(level=2, pattern=re.compile(r"^##\s+(.*)$"))


@dataclass
class DocumentMetadata:
    """Descriptor of the source document.

    Attributes:
        document_id: Opaque identifier copied into every chunk.
        title: Document title (not used by the chunker).
        category: Document category (not used by the chunker).
    """

    document_id: str
    title: str | None = None
    category: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DocumentMetadata":
        """Build metadata from a mapping, ignoring unknown keys."""
        return cls(
            document_id=data["document_id"],
            title=data.get("title"),
            category=data.get("category"),
        )


@dataclass
class ChunkMetadata:
    """Header lineage and position of a chunk.

    Attributes:
        h1_header: Nearest enclosing H1 title, None before any H1.
        h2_header: Nearest enclosing H2 title within the H1, None if absent.
        chunk_index: Zero-based position in the document's chunk list.
        document_id: Copied from DocumentMetadata.document_id.
    """

    h1_header: str | None
    h2_header: str | None
    chunk_index: int
    document_id: str


@dataclass
class DocumentChunk:
    """A bounded span of document text tagged with its header lineage.

    Attributes:
        text: Trimmed chunk body, never empty.
        metadata: Lineage, index and document id.
    """

    text: str
    metadata: ChunkMetadata

    def to_dict(self) -> dict[str, Any]:
        """Convert to the nested {"text", "metadata"} mapping."""
        return asdict(self)

    def to_record_dict(self) -> dict[str, Any]:
        """Convert to a flat chunk-table row keyed by (document_id, chunk_index).

        Returns:
            Dictionary with content, h1_header, h2_header, chunk_index
            and document_id columns.

        Example:
            >>> chunk = DocumentChunk(
            ...     text="Operating under the influence...",
            ...     metadata=ChunkMetadata("Chapter 90", "Section 24", 3, "doc-1"),
            ... )
            >>> chunk.to_record_dict()["content"]
            'Operating under the influence...'
        """
        return {
            "content": self.text,
            "h1_header": self.metadata.h1_header,
            "h2_header": self.metadata.h2_header,
            "chunk_index": self.metadata.chunk_index,
            "document_id": self.metadata.document_id,
        }


@dataclass
class HeaderSection:
    """Internal result of one header splitting pass.

    Attributes:
        header: Header title, None for content before the first header.
        content: Trimmed text between this header and the next one.
    """

    header: str | None
    content: str


def estimate_token_count(
    text: str, chars_per_token: int = DEFAULT_CHARS_PER_TOKEN
) -> int:
    """Estimate tokens as ceil(len(text) / chars_per_token).

    Used by callers to budget embedding requests; the chunker itself
    works in characters.
    """
    return math.ceil(len(text) / chars_per_token)


def count_tokens(text: str, encoding_name: str = DEFAULT_TOKEN_ENCODING) -> int:
    """Count tokens exactly with a tiktoken encoding.

    Args:
        text: Text to count tokens for.
        encoding_name: tiktoken encoding name. Defaults to cl100k_base.

    Returns:
        Token count.
    """
    if not text:
        return 0
    return len(tiktoken.get_encoding(encoding_name).encode(text))


def _has_body(content: str) -> bool:
    """Return True if content has a line that is neither blank nor a header."""
    lines = (line for line in content.split("\n") if line.strip())
    return any(not ANY_HEADER_LINE.match(line) for line in lines)


def split_by_headers(text: str, header_pattern: HeaderPattern) -> list[HeaderSection]:
    """Split text into sections at header lines of one level.

    A header line closes the current section and opens a new one. Content
    before the first header forms a section with header None. Sections
    without body text are dropped, so header-only input yields nothing.
    Deeper headers (### and below) stay in the content but do not count
    as body text.

    Args:
        text: Text to split.
        header_pattern: Recognizer for the header level to split on.

    Returns:
        Sections in document order, each with non-empty content.
    """
    sections: list[HeaderSection] = []
    current_header: str | None = None
    current_lines: list[str] = []

    for line in text.split("\n"):
        title = header_pattern.match(line)
        if title is None:
            current_lines.append(line)
            continue

        if current_lines or current_header:
            sections.append(
                HeaderSection(
                    header=current_header,
                    content="\n".join(current_lines).strip(),
                )
            )
        current_header = title
        current_lines = []

    if current_lines or current_header:
        sections.append(
            HeaderSection(
                header=current_header,
                content="\n".join(current_lines).strip(),
            )
        )

    return [section for section in sections if _has_body(section.content)]


def split_by_paragraphs(text: str) -> list[str]:
    """Split text on blank lines into trimmed, non-empty paragraphs."""
    paragraphs = (paragraph.strip() for paragraph in PARAGRAPH_BREAK.split(text))
    return [paragraph for paragraph in paragraphs if paragraph]


def split_by_sentences(text: str) -> list[str]:
    """Split text on ". " boundaries and restore the consumed periods.

    Every sentence except the last gets its period back. The last one only
    gets a period when it does not already end in terminal punctuation.
    """
    sentences = [s.strip() for s in SENTENCE_BREAK.split(text)]
    sentences = [s for s in sentences if s]
    last = len(sentences) - 1
    return [
        sentence + "."
        if index < last or not TERMINAL_PUNCTUATION.search(sentence)
        else sentence
        for index, sentence in enumerate(sentences)
    ]


def _accumulate(units: list[str], separator: str, max_chars: int) -> list[str]:
    """Greedily pack units into buffers of at most max_chars.

    A unit that does not fit starts a new buffer. A unit longer than
    max_chars still becomes a buffer of its own.
    """
    buffers: list[str] = []
    current = ""
    for unit in units:
        candidate = f"{current}{separator}{unit}" if current else unit
        if len(candidate) > max_chars and current:
            buffers.append(current)
            current = unit
        else:
            current = candidate
    if current:
        buffers.append(current)
    return buffers


def _split_into_windows(text: str, max_chars: int) -> list[str]:
    """Cut text into pieces of at most max_chars, preferring spaces."""
    windows: list[str] = []
    remaining = text
    while len(remaining) > max_chars:
        cut = remaining.rfind(" ", 0, max_chars + 1)
        if cut <= 0:
            cut = max_chars
        windows.append(remaining[:cut].strip())
        remaining = remaining[cut:].lstrip()
    windows.append(remaining.strip())
    return [window for window in windows if window]


def _create_chunk(
    text: str,
    h1_header: str | None,
    h2_header: str | None,
    chunk_index: int,
    document_id: str,
) -> DocumentChunk:
    return DocumentChunk(
        text=text.strip(),
        metadata=ChunkMetadata(
            h1_header=h1_header,
            h2_header=h2_header,
            chunk_index=chunk_index,
            document_id=document_id,
        ),
    )


def split_large_text(
    text: str,
    h1_header: str | None,
    h2_header: str | None,
    start_index: int,
    document_id: str,
    max_chars: int = DEFAULT_MAX_CHARS,
    split_oversized_units: bool = True,
) -> list[DocumentChunk]:
    """Split one section body into chunks that respect max_chars.

    Attempts, in order:
    1. The whole text, if it fits.
    2. Blank-line paragraphs packed greedily (joined by a blank line).
       A single paragraph longer than max_chars is kept whole.
    3. Sentences packed greedily (joined by a space), only when the text
       has a single paragraph.
    4. The indivisible text itself. When split_oversized_units is set it
       is cut into max_chars windows, otherwise it is returned as one
       oversized chunk.

    Args:
        text: Section body.
        h1_header: H1 title shared by every returned chunk.
        h2_header: H2 title shared by every returned chunk.
        start_index: Index of the first returned chunk.
        document_id: Copied into every chunk.
        max_chars: Character budget per chunk.
        split_oversized_units: Window-split text that step 2 and 3 cannot
            break up.

    Returns:
        Chunks with contiguous indices starting at start_index.
    """
    if len(text) <= max_chars:
        return [_create_chunk(text, h1_header, h2_header, start_index, document_id)]

    pieces: list[str]
    paragraphs = split_by_paragraphs(text)
    if len(paragraphs) > 1:
        pieces = _accumulate(paragraphs, "\n\n", max_chars)
    else:
        sentences = split_by_sentences(text)
        if len(sentences) > 1:
            pieces = _accumulate(sentences, " ", max_chars)
        elif split_oversized_units and max_chars > 0:
            logger.debug(
                f"Window-splitting unbreakable text of {len(text)} chars "
                f"(max_chars={max_chars})"
            )
            pieces = _split_into_windows(text.strip(), max_chars)
        else:
            logger.debug(
                f"Emitting oversized chunk of {len(text)} chars "
                f"(max_chars={max_chars})"
            )
            pieces = [text]

    return [
        _create_chunk(piece, h1_header, h2_header, start_index + offset, document_id)
        for offset, piece in enumerate(pieces)
    ]


def _coerce_metadata(
    metadata: DocumentMetadata | Mapping[str, Any],
) -> DocumentMetadata:
    if isinstance(metadata, DocumentMetadata):
        return metadata
    return DocumentMetadata.from_dict(metadata)


def chunk_legal_document(
    markdown_text: str,
    metadata: DocumentMetadata | Mapping[str, Any],
    max_chars: int = DEFAULT_MAX_CHARS,
    split_oversized_units: bool = True,
) -> list[DocumentChunk]:
    """Chunk a legal markdown document by H1, H2, paragraph and sentence.

    Main entry point. Chunk indices run from 0 to N-1 across the whole
    document in emission order.

    Args:
        markdown_text: Extracted document text.
        metadata: DocumentMetadata, or a mapping with at least document_id.
        max_chars: Character budget per chunk. Defaults to 3200.
        split_oversized_units: See split_large_text().

    Returns:
        Ordered chunks. Empty or header-only input gives an empty list.

    Example:
        >>> chunks = chunk_legal_document(
        ...     "# Chapter 90\\n## Section 24\\nOperating under the influence.",
        ...     DocumentMetadata(document_id="mgl-90"),
        ... )
        >>> chunks[0].metadata.h2_header
        'Section 24'
    """
    document = _coerce_metadata(metadata)
    chunks: list[DocumentChunk] = []
    chunk_index = 0

    for h1_section in split_by_headers(markdown_text, H1_PATTERN):
        for h2_section in split_by_headers(h1_section.content, H2_PATTERN):
            if not h2_section.content.strip():
                continue

            section_chunks = split_large_text(
                h2_section.content,
                h1_section.header,
                h2_section.header,
                chunk_index,
                document.document_id,
                max_chars,
                split_oversized_units,
            )
            chunks.extend(section_chunks)
            chunk_index += len(section_chunks)

    logger.debug(
        f"Chunked document {document.document_id!r}: "
        f"{len(markdown_text)} chars -> {len(chunks)} chunks"
    )
    return chunks


class LegalDocumentChunker:
    """Configured front end for chunk_legal_document().

    Attributes:
        config: Active ChunkerConfig.

    Example:
        >>> chunker = LegalDocumentChunker(ChunkerConfig(max_chars=1000))
        >>> chunks = chunker.chunk(text, DocumentMetadata(document_id="doc-1"))
    """

    def __init__(self, config: ChunkerConfig | None = None) -> None:
        """Initialize the chunker.

        Args:
            config: Chunker settings. Defaults to ChunkerConfig().
        """
        self.config = config or ChunkerConfig()

    @property
    def max_chars(self) -> int:
        """Get the character budget per chunk."""
        return self.config.max_chars

    def chunk(
        self, markdown_text: str, metadata: DocumentMetadata | Mapping[str, Any]
    ) -> list[DocumentChunk]:
        """Chunk a document with the configured settings."""
        return chunk_legal_document(
            markdown_text,
            metadata,
            max_chars=self.config.max_chars,
            split_oversized_units=self.config.split_oversized_units,
        )

    def estimate_tokens(self, text: str) -> int:
        """Estimate tokens with the configured chars_per_token."""
        return estimate_token_count(text, self.config.chars_per_token)
