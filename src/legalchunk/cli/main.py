"""Entry point for the legalchunk command-line interface."""

import click

from legalchunk import __version__
from legalchunk.cli.commands.chunk import chunk
from legalchunk.cli.commands.stats import stats


@click.group()
@click.version_option(version=__version__, prog_name="legalchunk")
def main() -> None:
    """Chunk extracted legal documents for embedding and citation.

    Documents are split by H1 and H2 headers, then by paragraph and
    sentence, into chunks that carry their header lineage.
    """
    pass


main.add_command(chunk)
main.add_command(stats)


if __name__ == "__main__":  # pragma: no cover
    main()
