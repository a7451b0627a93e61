"""Shared option handling for legalchunk CLI commands."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import click

from legalchunk.config.loader import ConfigLoader
from legalchunk.lib.file_processor import (
    compute_content_hash,
    decode_document,
    default_document_id,
    read_document_bytes,
)
from legalchunk.lib.legal_chunker import DocumentMetadata
from legalchunk.lib.logging_config import get_logger
from legalchunk.models.config import ChunkerConfig

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Exit codes
EXIT_CONFIG_ERROR = 2
EXIT_DOCUMENT_ERROR = 3


@dataclass
class PreparedDocument:
    """A document read from disk with its resolved settings."""

    text: str
    metadata: DocumentMetadata
    content_hash: str
    config: ChunkerConfig


def document_options(func: F) -> F:
    """Attach the document and configuration options shared by commands."""
    options = [
        click.argument("document", type=click.Path(dir_okay=False)),
        click.option(
            "--document-id",
            default=None,
            help="Document identifier copied into every chunk "
            "(default: file stem plus content hash prefix)",
        ),
        click.option("--title", default=None, help="Document title"),
        click.option("--category", default=None, help="Document category"),
        click.option(
            "--max-chars",
            type=click.IntRange(min=1),
            default=None,
            help="Maximum characters per chunk (default: 3200)",
        ),
        click.option(
            "--config",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help="Path to a YAML chunker configuration file",
        ),
        click.option(
            "--verbose", "-v", is_flag=True, help="Enable verbose debug logging"
        ),
        click.option("--quiet", "-q", is_flag=True, help="Only log errors"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def prepare_document(
    document: str,
    document_id: str | None,
    title: str | None,
    category: str | None,
    max_chars: int | None,
    config_path: str | None,
) -> PreparedDocument:
    """Read the document and resolve configuration for a command.

    Raises:
        ConfigError: If the configuration is invalid
        FileNotFoundError: If the document or config file is missing
        DocumentReadError: If the document cannot be read as text
    """
    config = ConfigLoader().load_config(
        config_path=config_path, cli_overrides={"max_chars": max_chars}
    )

    data = read_document_bytes(document)
    content_hash = compute_content_hash(data)
    text = decode_document(data, document)

    metadata = DocumentMetadata(
        document_id=document_id or default_document_id(document, content_hash),
        title=title,
        category=category,
    )
    logger.info(
        f"Prepared document {metadata.document_id!r} "
        f"({len(text)} chars, sha256={content_hash[:12]})"
    )
    return PreparedDocument(
        text=text, metadata=metadata, content_hash=content_hash, config=config
    )
