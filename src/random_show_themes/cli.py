"""random-show-themes CLI using Typer.

Picks COUNT random theme songs from a show catalog and prints them as plain
text, an aligned table, or CSV.
"""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from . import __version__
from .config import OutputMode, RunConfig
from .errors import OutputError, RandomShowThemesError, UsageError
from .logging import configure_logging, get_logger, level_from_verbosity
from .pipeline import Pipeline

app = typer.Typer(
    name="random-show-themes",
    help="Pick random theme songs from a catalog of shows.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"random-show-themes {__version__}")
        raise typer.Exit()


def _usage_message(error: ValidationError) -> str:
    first = error.errors()[0]
    return str(first.get("msg", error)).removeprefix("Value error, ")


def _usage_error(message: str) -> None:
    """Report a usage error the way Typer does and exit with code 2."""
    typer.echo(f"Error: {message}", err=True)
    typer.echo("Try 'random-show-themes --help' for help.", err=True)
    raise typer.Exit(2)


def write_output(text: str) -> None:
    """Write rendered output to stdout.

    Raises:
        OutputError: If stdout cannot be written
    """
    if not text:
        return
    try:
        typer.echo(text, nl=False, file=sys.stdout)
    except OSError as e:
        raise OutputError(f"failed to write output ({e.strerror or e})", source="stdout") from e


@app.command()
def pick(
    count: Annotated[
        int,
        typer.Argument(
            min=1,
            help=(
                "The number of themes to output. Fewer are printed when the "
                "inputs do not hold enough themes."
            ),
            show_default=False,
        ),
    ],
    dictionary: Annotated[
        Path, typer.Option("--dict", "-d", help="Catalog JSON with every known show")
    ],
    allow_list: Annotated[
        Optional[Path],
        typer.Option("--list", "-l", help="JSON array of show IDs to choose from"),
    ] = None,
    table: Annotated[bool, typer.Option("--table", "-t", help="Output a formatted table")] = False,
    csv_output: Annotated[bool, typer.Option("--csv", help="Output CSV")] = False,
    readable: Annotated[
        bool, typer.Option("--readable", help="Output human readable text (default)")
    ] = False,
    table_width: Annotated[
        Optional[int],
        typer.Option("--table-width", min=1, help="Maximum width of a table column"),
    ] = None,
    per_show: Annotated[
        bool, typer.Option("--per-show", help="Pick at most one theme from each show")
    ] = False,
    hard_fail: Annotated[
        bool,
        typer.Option("--hard-fail", help="Exit with code 1 if fewer than COUNT themes are found"),
    ] = False,
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase log verbosity")
    ] = 0,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log errors")] = False,
    log_format: Annotated[
        str, typer.Option("--log-format", help="Log format (console, json)")
    ] = "console",
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = None,
) -> None:
    """Pick COUNT random theme songs from the shows in the catalog.

    Example:
        random-show-themes 5 -d shows.json -l watched.json --table
    """
    try:
        config = RunConfig(
            catalog_path=dictionary,
            allow_list_path=allow_list,
            count=count,
            output_mode=OutputMode.from_flags(table=table, csv=csv_output, readable=readable),
            table_width=table_width,
            strategy="per-show" if per_show else "uniform",
            hard_fail=hard_fail,
            log_level=level_from_verbosity(verbose, quiet),
            log_format=log_format,
        )
    except UsageError as e:
        _usage_error(str(e))
    except ValidationError as e:
        _usage_error(_usage_message(e))

    configure_logging(level=config.log_level, format=config.log_format)
    logger = get_logger(__name__)
    logger.debug(
        "run_configured",
        count=config.count,
        output_mode=config.output_mode.value,
        strategy=config.strategy,
    )

    try:
        output = Pipeline(config).run()
        write_output(output)
    except RandomShowThemesError as e:
        logger.debug("run_failed", error_type=type(e).__name__, error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def main() -> None:
    """CLI entry point."""
    app()
