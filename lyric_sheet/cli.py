"""
Command-line interface for lyric-sheet.

This module implements the CLI using Click; rich-click is used for the
help colors. It runs one ingestion and reports what came out, which is the
quickest way to check a sheet edit before the site picks it up.

Commands:
    lyric-sheet                          Fetch and print a summary
    lyric-sheet --json                   Print the catalog as JSON on stdout
    lyric-sheet --dropped                List rows that were rejected
    lyric-sheet --config other.yaml      Use another config file
    lyric-sheet --log-dir ./logs         Also write log files

Exit Codes:
    0 - Catalog fetched with at least one song
    1 - Configuration error, or the catalog came back empty
"""

import json
from pathlib import Path
from typing import Optional

import rich_click as click

# Configure rich-click for better help formatting
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.MAX_WIDTH = 100
click.rich_click.OPTION_GROUPS = {
    "cli": [
        {
            "name": "Output",
            "options": ["--json", "--dropped"],
        },
        {
            "name": "Configuration",
            "options": ["--config", "--log-dir", "--verbose"],
        },
        {
            "name": "Info",
            "options": ["--version", "--help"],
        },
    ],
}

from lyric_sheet import __version__
from lyric_sheet.catalog import DroppedRowCollector, SheetClient, fetch_catalog
from lyric_sheet.core import (
    ConfigError,
    get_logger,
    load_config,
    setup_logging,
    shutdown_logging,
)
from lyric_sheet.core.logger import format_summary_message

logger = get_logger(__name__)


@click.command()
@click.option(
    "--config", "config_path",
    type=click.Path(path_type=Path),
    default=None,
    metavar="<config.yaml>",
    help="Configuration file (default: ./config.yaml if present)"
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the catalog as JSON on stdout"
)
@click.option(
    "--dropped",
    is_flag=True,
    help="List spreadsheet rows that were dropped"
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    metavar="<directory>",
    help="Write log files to this directory"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show debug messages on the console"
)
@click.version_option(__version__, "--version", prog_name="lyric-sheet")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    as_json: bool,
    dropped: bool,
    log_dir: Optional[Path],
    verbose: bool
) -> None:
    """
    lyric-sheet: Fetch the lyrics catalog from the published spreadsheet.

    \b
    EXAMPLES:
        lyric-sheet                     # Summary of songs and artists
        lyric-sheet --json > out.json   # Dump the catalog
        lyric-sheet --dropped -v        # Show rejected rows and debug logs
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e.message}", err=True)
        ctx.exit(1)

    setup_logging(log_dir or config.logging.directory, verbose=verbose)

    try:
        collector = DroppedRowCollector()
        with SheetClient(config.sheet, config.network) as client:
            catalog = fetch_catalog(client=client, config=config, collector=collector)

        if as_json:
            click.echo(json.dumps(catalog.to_dict(), ensure_ascii=False, indent=2))

        if dropped:
            for row in collector.rows:
                click.echo(f"{row.feed} row {row.index}: {row.reason}  {list(row.cells)!r}", err=True)

        logger.info(format_summary_message(len(catalog.songs), len(catalog.artist_meta), len(collector)))

        if catalog.is_empty:
            logger.error("No songs were loaded")
            ctx.exit(1)
    finally:
        shutdown_logging()


def main() -> None:
    """Entry point for the console script."""
    cli()


if __name__ == "__main__":
    main()
