"""Search result and error output, in display or JSON mode."""

# ruff: noqa: T201 -- output layer

import json
import sys
from collections.abc import Sequence
from typing import NoReturn

import typer


class Reporter:
    """Prints search results and run errors.

    Display mode prints the matching lines verbatim, framed by a header and a
    count. JSON mode prints a single envelope (``{"ok": true, "data": ...}``).
    Errors always go to stderr.
    """

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize reporter.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable lines.

        """
        self.json_mode = json_mode

    def report(self, results: Sequence[str]) -> None:
        """Print matching lines and their count, or a not-found notice."""
        if self.json_mode:
            print(json.dumps({"ok": True, "data": {"matches": list(results), "count": len(results)}}, ensure_ascii=False))
            return

        if not results:
            print("not found")
            return
        print("found lines:")
        for line in results:
            print(line)
        print(f"{len(results)} {'match' if len(results) == 1 else 'matches'}")

    def print_error_and_exit(self, category: str, code: str, message: str) -> NoReturn:
        """Print an error to stderr in JSON or display format and exit with code 1."""
        if self.json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}, ensure_ascii=False), file=sys.stderr)
        else:
            print(f"{category}: {message}", file=sys.stderr)
        raise typer.Exit(1)
