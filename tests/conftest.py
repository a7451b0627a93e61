"""Pytest configuration and shared fixtures for legalchunk tests."""

import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from legalchunk.config.defaults import ENV_VAR_MAP
from legalchunk.lib.legal_chunker import DocumentMetadata


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def isolated_env(
    monkeypatch: pytest.MonkeyPatch, temp_dir: Path
) -> Generator[dict[str, str], None, None]:
    """Provide an environment without LEGALCHUNK_* variables or a .env file.

    Runs the test from an empty temporary directory so no stray .env file
    is picked up, and restores the environment afterwards.

    Yields:
        Dictionary of original environment variables
    """
    original_env = os.environ.copy()
    for env_var in ENV_VAR_MAP.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.chdir(temp_dir)
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def fixture_dir() -> Path:
    """Get path to the legal document fixtures directory."""
    return Path(__file__).parent / "fixtures" / "legal_documents"


@pytest.fixture
def metadata() -> DocumentMetadata:
    """Document metadata used across chunker tests."""
    return DocumentMetadata(
        document_id="test-doc-123",
        title="Test Legal Document",
        category="Criminal Law",
    )
