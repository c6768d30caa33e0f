"""Library usage: load a file once and run several searches over it without copying lines."""

from pathlib import Path
from typing import Annotated

import typer

from minigrep import load, search_spans

app = typer.Typer()


@app.command()
def main(
    path: Annotated[Path, typer.Argument(help="File to search.")],
    queries: Annotated[list[str], typer.Argument(help="Substrings to look for.")],
    ignore_case: Annotated[bool, typer.Option("--ignore-case", "-i", help="Case-insensitive matching.")] = False,
) -> None:
    """Count the lines of a file matching each query."""
    result = load(path)
    if result.is_err():
        typer.echo(result.context["message"] if result.context else result.error, err=True)
        raise typer.Exit(1)

    document = result.unwrap()
    for query in queries:
        spans = search_spans(query, document.text, ignore_case=ignore_case)
        typer.echo(f"{query!r}: {len(spans)} lines")
        for span in spans[:3]:
            typer.echo(f"  [{span.start}:{span.end}] {span.slice(document.text)}")


if __name__ == "__main__":
    app()
