"""Command-line interface for blocktable."""

import logging
import sys
from typing import TextIO

import click

from .config import TableOptions
from .exceptions import BlockTableError
from .formatter import format_records
from .loaders import FORMATS, detect_format, load_records


@click.command()
@click.version_option(package_name="blocktable")
@click.argument(
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
)
@click.option(
    "--format",
    "-f",
    "input_format",
    type=click.Choice(["auto", *FORMATS]),
    default="auto",
    help="Input format (default: guessed from the file suffix, else json)",
)
@click.option(
    "--repeat",
    "-r",
    "repeat_columns",
    multiple=True,
    help=(
        "Column repeated at the start of every wrapped block. "
        "May be given more than once (default: the first column)"
    ),
)
@click.option(
    "--width",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Output width in characters (default: BLOCKTABLE_WIDTH, else terminal width)",
)
@click.option(
    "--padding",
    type=click.IntRange(min=0),
    default=None,
    help="Spaces on each side of cell content (default: 1)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log layout decisions to stderr",
)
def cli(
    source: TextIO,
    input_format: str,
    repeat_columns: tuple[str, ...],
    width: int | None,
    padding: int | None,
    verbose: bool,
) -> None:
    """Render records from SOURCE (a file, or - for stdin) as a width-fitted table.

    Tables wider than the output are wrapped into several blocks, each
    starting with the repeat columns.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    fmt = input_format
    if fmt == "auto":
        name = getattr(source, "name", None)
        fmt = detect_format(name if isinstance(name, str) else None)

    try:
        options = TableOptions.from_environment(
            repeat_columns=repeat_columns or None,
            width=width,
            padding=padding,
        )
        records = load_records(source, fmt)
        output = format_records(records, options=options)
    except BlockTableError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if output:
        click.echo(output)


if __name__ == "__main__":
    cli()
