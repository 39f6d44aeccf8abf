"""Command-line interface for tabletext."""

import csv
import logging
from typing import TextIO

import click

from .exceptions import TableTextError
from .models import RenderOptions
from .samples import sample_book_collection, sample_department
from .sources import RowSource
from .table import TableRenderer

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(package_name="tabletext")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging (overrides --log-level)",
)
@click.option(
    "--log-level",
    envvar="TABLETEXT_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (env: TABLETEXT_LOG_LEVEL)",
)
def cli(verbose: bool, log_level: str) -> None:
    """tabletext ASCII table rendering CLI."""
    level = logging.DEBUG if verbose else getattr(logging, log_level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--title",
    "-t",
    default="",
    help="Caption printed above the table",
)
@click.option(
    "--no-title",
    is_flag=True,
    help="Omit the caption line",
)
@click.option(
    "--align",
    default="",
    help="Comma-separated per-column alignment: l, r or c (e.g., l,r,r)",
)
def render(file: TextIO, title: str, no_title: bool, align: str) -> None:
    """Render CSV from FILE (or stdin) as a table.

    The first CSV row holds the column headers.
    """
    try:
        options = RenderOptions.from_spec(align, show_title=not no_title)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--align") from e

    records = list(csv.reader(file))
    if not records:
        raise click.ClickException("No CSV header row found")

    headers, rows = records[0], records[1:]
    logger.debug(
        "Read %d header(s) and %d row(s) from %s",
        len(headers),
        len(rows),
        getattr(file, "name", "<stdin>"),
    )

    try:
        source = RowSource(headers, rows, description=title)
        output = TableRenderer(options).render(source)
    except (TableTextError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(output)


@cli.command()
def demo() -> None:
    """Render the sample department and book collection."""
    renderer = TableRenderer()
    sources = [sample_department(), sample_book_collection()]
    for i, source in enumerate(sources):
        if i:
            click.echo()
        click.echo(renderer.render(source, f"Table: {source.description}"))


if __name__ == "__main__":
    cli()
