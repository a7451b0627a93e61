"""Reading extracted document text from disk.

Documents arrive already converted to markdown or plain text (PDF and DOCX
parsing happens upstream). This module reads them, normalizes line endings
and computes the SHA-256 content hash used for duplicate detection.
"""

import hashlib
from pathlib import Path

from legalchunk.config.defaults import SUPPORTED_DOCUMENT_SUFFIXES
from legalchunk.lib.errors import DocumentReadError, FileNotFoundError
from legalchunk.lib.logging_config import get_logger

logger = get_logger(__name__)


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def compute_content_hash(data: bytes | str) -> str:
    """Compute the lowercase hex SHA-256 digest of document content.

    Args:
        data: Raw file bytes, or text which is hashed as UTF-8.

    Returns:
        64-character hex digest.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def read_document_bytes(path: str | Path) -> bytes:
    """Read a supported document file as raw bytes.

    Args:
        path: Path to a .md, .markdown or .txt file.

    Returns:
        File contents.

    Raises:
        FileNotFoundError: If the file does not exist.
        DocumentReadError: If the suffix is unsupported or the file cannot
            be read.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(
            str(file_path), "Provide the path to an extracted .md or .txt document."
        )

    suffix = file_path.suffix.lower()
    if suffix not in SUPPORTED_DOCUMENT_SUFFIXES:
        supported = ", ".join(sorted(SUPPORTED_DOCUMENT_SUFFIXES))
        found = suffix or "(none)"
        raise DocumentReadError(
            str(file_path),
            f"unsupported file type '{found}'; expected one of {supported}",
        )

    try:
        return file_path.read_bytes()
    except OSError as e:
        raise DocumentReadError(str(file_path), str(e)) from e


def decode_document(data: bytes, path: str | Path = "<memory>") -> str:
    """Decode document bytes as UTF-8 and normalize line endings.

    A leading byte order mark is dropped.

    Raises:
        DocumentReadError: If the bytes are not valid UTF-8.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentReadError(str(path), f"not valid UTF-8 text ({e.reason})") from e
    return normalize_line_endings(text)


def read_document(path: str | Path) -> str:
    """Read an extracted document as normalized text.

    Args:
        path: Path to a .md, .markdown or .txt file.

    Returns:
        Document text with LF line endings.

    Raises:
        FileNotFoundError: If the file does not exist.
        DocumentReadError: If the file is unsupported or not UTF-8.
    """
    data = read_document_bytes(path)
    text = decode_document(data, path)
    logger.debug(f"Read {len(text)} chars from {path}")
    return text


def default_document_id(path: str | Path, content_hash: str) -> str:
    """Derive a document id from the file stem and content hash.

    Used by the CLI when no explicit id is given.

    Example:
        >>> default_document_id("docs/ch90.md", "ab12cd34ef56aa77")
        'ch90-ab12cd34ef56'
    """
    return f"{Path(path).stem}-{content_hash[:12]}"
