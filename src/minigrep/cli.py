"""Command-line entry point: ``minigrep <query> <file_path>``."""

import importlib.metadata
import logging
import os
from collections.abc import Callable
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import Config
from .loader import load
from .report import Reporter
from .search import search_spans

PACKAGE_NAME = "minigrep"

app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


def create_version_callback(package_name: str) -> Callable[[bool], None]:
    """Create a --version flag callback printing ``{package_name}: {version}``."""

    def version_callback(value: bool) -> None:
        if value:
            typer.echo(f"{package_name}: {importlib.metadata.version(package_name)}")
            raise typer.Exit

    return version_callback


def setup_logging(*, debug: bool) -> None:
    """Send DEBUG logs to stderr through Rich when ``debug`` is set."""
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def run(config: Config, reporter: Reporter) -> None:
    """Load the configured file, search it and report the matches."""
    result = load(config.file_path)
    if result.is_err():
        message = result.context["message"] if result.context else str(result.error)
        reporter.print_error_and_exit("read error", str(result.error), message)
    document = result.unwrap()
    spans = search_spans(config.query, document.text, ignore_case=config.ignore_case)
    reporter.report(document.lines_for(spans))


@app.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
def main(
    args: Annotated[list[str] | None, typer.Argument(metavar="QUERY FILE_PATH", show_default=False)] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log debug output to stderr.")] = False,
    _version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=create_version_callback(PACKAGE_NAME), is_eager=True, help="Show version and exit."),
    ] = None,
) -> None:
    """Print the lines of FILE_PATH that contain QUERY.

    Set IGNORE_CASE=1 for case-insensitive search. Options go before QUERY;
    everything from QUERY on is taken as positional.
    """
    setup_logging(debug=debug)
    reporter = Reporter(json_mode=as_json)
    config = Config.build_or_exit([PACKAGE_NAME, *(args or [])], env=os.environ, reporter=reporter)
    run(config, reporter)
