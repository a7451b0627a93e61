"""CLI command for reporting chunking statistics."""

import json
import sys

import click

from legalchunk.cli.common import (
    EXIT_CONFIG_ERROR,
    EXIT_DOCUMENT_ERROR,
    document_options,
    prepare_document,
)
from legalchunk.lib.chunk_stats import summarize_chunks
from legalchunk.lib.errors import (
    ConfigError,
    DocumentReadError,
    FileNotFoundError,
    ValidationError,
)
from legalchunk.lib.legal_chunker import LegalDocumentChunker
from legalchunk.lib.logging_config import get_logger, setup_logging
from legalchunk.models.stats import ChunkingStats

logger = get_logger(__name__)


def format_stats(stats: ChunkingStats, content_hash: str) -> str:
    """Format statistics as aligned key/value lines."""
    rows = [
        ("Document", stats.document_id or "-"),
        ("SHA-256", content_hash),
        ("Chunks", stats.total_chunks),
        ("Characters", stats.total_chars),
        (
            "Chunk size (min/avg/max)",
            f"{stats.min_chars}/{stats.avg_chars}/{stats.max_chars}",
        ),
        ("Estimated tokens", stats.estimated_tokens),
        ("Oversized chunks", stats.oversized_chunks),
        ("H1 sections", stats.h1_sections),
        ("H2 sections", stats.h2_sections),
    ]
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label:<{width}}  {value}" for label, value in rows)


@click.command()
@document_options
@click.option("--json", "as_json", is_flag=True, help="Output statistics as JSON")
def stats(
    document: str,
    document_id: str | None,
    title: str | None,
    category: str | None,
    max_chars: int | None,
    config_path: str | None,
    verbose: bool,
    quiet: bool,
    as_json: bool,
) -> None:
    """Report chunk counts and sizes for a legal document.

    DOCUMENT is the path to an extracted .md, .markdown or .txt file.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        prepared = prepare_document(
            document, document_id, title, category, max_chars, config_path
        )
        chunks = LegalDocumentChunker(prepared.config).chunk(
            prepared.text, prepared.metadata
        )
        summary = summarize_chunks(
            chunks,
            max_chars=prepared.config.max_chars,
            chars_per_token=prepared.config.chars_per_token,
        )
        if summary.document_id is None:
            summary = summary.model_copy(
                update={"document_id": prepared.metadata.document_id}
            )

        if as_json:
            payload = summary.model_dump()
            payload["content_hash"] = prepared.content_hash
            click.echo(json.dumps(payload, indent=2))
        else:
            click.echo(format_stats(summary, prepared.content_hash))

    except (ConfigError, ValidationError) as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except (FileNotFoundError, DocumentReadError) as e:
        logger.error(f"Document error: {e}", exc_info=True)
        click.echo(f"Document Error: {e}", err=True)
        sys.exit(EXIT_DOCUMENT_ERROR)
