"""CLI command for chunking an extracted legal document.

Implements 'legalchunk chunk', which reads a markdown or text file, chunks
it and writes the chunks as JSON, JSON Lines, storage records or text.
"""

import json
import sys
from pathlib import Path

import click

from legalchunk.cli.common import (
    EXIT_CONFIG_ERROR,
    EXIT_DOCUMENT_ERROR,
    document_options,
    prepare_document,
)
from legalchunk.lib.errors import (
    ConfigError,
    DocumentReadError,
    FileNotFoundError,
    ValidationError,
)
from legalchunk.lib.legal_chunker import DocumentChunk, LegalDocumentChunker
from legalchunk.lib.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

OUTPUT_FORMATS = ("json", "jsonl", "records", "text")


def render_chunks(chunks: list[DocumentChunk], output_format: str) -> str:
    """Render chunks in one of OUTPUT_FORMATS.

    json and jsonl use the nested {"text", "metadata"} shape; records uses
    flat chunk-table rows.
    """
    if output_format == "json":
        return json.dumps([c.to_dict() for c in chunks], ensure_ascii=False, indent=2)
    if output_format == "jsonl":
        return "\n".join(json.dumps(c.to_dict(), ensure_ascii=False) for c in chunks)
    if output_format == "records":
        return json.dumps(
            [c.to_record_dict() for c in chunks], ensure_ascii=False, indent=2
        )

    blocks = []
    for chunk in chunks:
        lineage = " > ".join(
            h for h in (chunk.metadata.h1_header, chunk.metadata.h2_header) if h
        )
        header = f"--- chunk {chunk.metadata.chunk_index}"
        if lineage:
            header += f" [{lineage}]"
        blocks.append(f"{header} ({len(chunk.text)} chars)\n{chunk.text}")
    return "\n\n".join(blocks)


@click.command()
@document_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="json",
    help="Output format (default: json)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write output to this file instead of stdout",
)
def chunk(
    document: str,
    document_id: str | None,
    title: str | None,
    category: str | None,
    max_chars: int | None,
    config_path: str | None,
    verbose: bool,
    quiet: bool,
    output_format: str,
    output: str | None,
) -> None:
    """Split a legal document into header-aware chunks.

    DOCUMENT is the path to an extracted .md, .markdown or .txt file.

    \b
    EXAMPLES:

        Chunk a statute and print JSON:
            legalchunk chunk chapter90.md --document-id mgl-c90

        Write storage rows with a smaller budget:
            legalchunk chunk chapter90.md --max-chars 1000 --format records -o rows.json
    """
    setup_logging(verbose=verbose, quiet=quiet)
    logger.info(f"Chunk command invoked: document={document}, format={output_format}")

    try:
        prepared = prepare_document(
            document, document_id, title, category, max_chars, config_path
        )
        chunker = LegalDocumentChunker(prepared.config)
        chunks = chunker.chunk(prepared.text, prepared.metadata)

        if not chunks:
            logger.warning(
                f"Document {prepared.metadata.document_id!r} produced no chunks"
            )

        rendered = render_chunks(chunks, output_format)
        if output:
            Path(output).write_text(rendered + "\n", encoding="utf-8")
            logger.info(f"Wrote {len(chunks)} chunks to {output}")
        else:
            click.echo(rendered)

    except (ConfigError, ValidationError) as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except (FileNotFoundError, DocumentReadError) as e:
        logger.error(f"Document error: {e}", exc_info=True)
        click.echo(f"Document Error: {e}", err=True)
        sys.exit(EXIT_DOCUMENT_ERROR)
    except OSError as e:
        logger.error(f"Failed to write output: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_DOCUMENT_ERROR)
