"""Tests for reading extracted documents from disk."""

import hashlib
from pathlib import Path

import pytest

from legalchunk.lib.errors import DocumentReadError, FileNotFoundError
from legalchunk.lib.file_processor import (
    compute_content_hash,
    decode_document,
    default_document_id,
    normalize_line_endings,
    read_document,
    read_document_bytes,
)


class TestNormalizeLineEndings:
    """Tests for normalize_line_endings()."""

    def test_crlf_and_cr_converted(self) -> None:
        """Test Windows and old Mac endings become LF."""
        assert normalize_line_endings("a\r\nb\rc\n") == "a\nb\nc\n"


class TestComputeContentHash:
    """Tests for compute_content_hash()."""

    def test_bytes_digest(self) -> None:
        """Test the digest matches hashlib SHA-256."""
        data = b"# Chapter 90\nSection 24."
        assert compute_content_hash(data) == hashlib.sha256(data).hexdigest()

    def test_text_hashed_as_utf8(self) -> None:
        """Test text and its UTF-8 bytes hash the same."""
        text = "§ 24 applies."
        assert compute_content_hash(text) == compute_content_hash(text.encode())

    def test_digest_is_lowercase_hex(self) -> None:
        """Test the digest is 64 lowercase hex characters."""
        digest = compute_content_hash(b"")
        assert len(digest) == 64
        assert digest == digest.lower()


class TestReadDocument:
    """Tests for read_document() and read_document_bytes()."""

    def test_reads_markdown(self, fixture_dir: Path) -> None:
        """Test a markdown fixture is read as text."""
        text = read_document(fixture_dir / "oui_guide.md")
        assert text.startswith("# Massachusetts Criminal Law")

    def test_reads_text_file(self, fixture_dir: Path) -> None:
        """Test .txt documents are accepted."""
        text = read_document(fixture_dir / "patrol_notice.txt")
        assert "cruisers must be inspected" in text

    def test_crlf_normalized(self, temp_dir: Path) -> None:
        """Test CRLF line endings are normalized on read."""
        path = temp_dir / "notice.md"
        path.write_bytes(b"# Title\r\nBody\r\n")
        assert read_document(path) == "# Title\nBody\n"

    def test_byte_order_mark_dropped(self, temp_dir: Path) -> None:
        """Test a UTF-8 BOM does not end up in the text."""
        path = temp_dir / "bom.md"
        path.write_bytes(b"\xef\xbb\xbf# Title\nBody")
        assert read_document(path) == "# Title\nBody"

    def test_missing_file(self, temp_dir: Path) -> None:
        """Test a missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError) as exc_info:
            read_document(temp_dir / "missing.md")
        assert "missing.md" in str(exc_info.value)

    def test_directory_rejected(self, temp_dir: Path) -> None:
        """Test a directory is not accepted as a document."""
        with pytest.raises(FileNotFoundError):
            read_document_bytes(temp_dir)

    def test_unsupported_suffix(self, temp_dir: Path) -> None:
        """Test binary formats are rejected with the supported list."""
        path = temp_dir / "statute.pdf"
        path.write_bytes(b"%PDF-1.7")
        with pytest.raises(DocumentReadError) as exc_info:
            read_document(path)
        assert ".pdf" in str(exc_info.value)
        assert ".md" in str(exc_info.value)

    def test_suffix_check_is_case_insensitive(self, temp_dir: Path) -> None:
        """Test upper-case suffixes are accepted."""
        path = temp_dir / "NOTICE.MD"
        path.write_text("Body.", encoding="utf-8")
        assert read_document(path) == "Body."

    def test_invalid_utf8(self, temp_dir: Path) -> None:
        """Test non-UTF-8 content raises DocumentReadError."""
        path = temp_dir / "latin1.txt"
        path.write_bytes("Café".encode("latin-1"))
        with pytest.raises(DocumentReadError) as exc_info:
            read_document(path)
        assert "UTF-8" in str(exc_info.value)


class TestDecodeDocument:
    """Tests for decode_document()."""

    def test_decodes_and_normalizes(self) -> None:
        """Test bytes are decoded and line endings normalized."""
        assert decode_document(b"a\r\nb") == "a\nb"

    def test_error_names_path(self) -> None:
        """Test the error message names the given path."""
        with pytest.raises(DocumentReadError) as exc_info:
            decode_document(b"\xff\xfe\xfa", "upload.txt")
        assert exc_info.value.path == "upload.txt"


class TestDefaultDocumentId:
    """Tests for default_document_id()."""

    def test_stem_and_hash_prefix(self) -> None:
        """Test the id combines file stem and 12 hash characters."""
        document_id = default_document_id("docs/ch90.md", "ab12cd34ef56aa77")
        assert document_id == "ch90-ab12cd34ef56"

    def test_same_content_same_id(self, fixture_dir: Path) -> None:
        """Test the id is stable for identical content."""
        data = read_document_bytes(fixture_dir / "oui_guide.md")
        digest = compute_content_hash(data)
        assert default_document_id("oui_guide.md", digest) == default_document_id(
            fixture_dir / "oui_guide.md", digest
        )
