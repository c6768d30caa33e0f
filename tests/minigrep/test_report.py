"""Tests for Reporter."""

import json

import click
import pytest

from minigrep.report import Reporter


class TestJsonMode:
    """Tests for json_mode attribute."""

    @pytest.mark.parametrize("mode", [True, False])
    def test_reflects_constructor_arg(self, mode: bool) -> None:
        """Attribute matches the value passed to constructor."""
        assert Reporter(json_mode=mode).json_mode is mode


class TestReport:
    """Tests for report method."""

    def test_display_matches(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints header, lines in order and the count."""
        Reporter(json_mode=False).report(["Rust", "rUst"])
        assert capsys.readouterr().out == "found lines:\nRust\nrUst\n2 matches\n"

    def test_display_single_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Singular count for one match."""
        Reporter(json_mode=False).report(["北国风光，千里冰封，万里雪飘。"])
        assert capsys.readouterr().out == "found lines:\n北国风光，千里冰封，万里雪飘。\n1 match\n"

    def test_display_not_found(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Empty results print a single not-found notice."""
        Reporter(json_mode=False).report([])
        assert capsys.readouterr().out == "not found\n"

    def test_display_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Lines are printed without markup or tab expansion."""
        Reporter(json_mode=False).report(["[bold]x[/bold]\tend :smile:"])
        assert "[bold]x[/bold]\tend :smile:\n" in capsys.readouterr().out

    def test_json_mode(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Outputs JSON envelope with matches and count."""
        Reporter(json_mode=True).report(["a", "万"])
        result = json.loads(capsys.readouterr().out)
        assert result == {"ok": True, "data": {"matches": ["a", "万"], "count": 2}}

    def test_json_mode_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Not found is still ok=true in JSON mode."""
        Reporter(json_mode=True).report([])
        result = json.loads(capsys.readouterr().out)
        assert result == {"ok": True, "data": {"matches": [], "count": 0}}


class TestPrintErrorAndExit:
    """Tests for print_error_and_exit method."""

    def test_display_mode(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Outputs prefixed error to stderr and exits with code 1."""
        with pytest.raises(click.exceptions.Exit, match="1"):
            Reporter(json_mode=False).print_error_and_exit("read error", "io_error", "x.txt: No such file or directory")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "read error: x.txt: No such file or directory\n"

    def test_json_mode(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Outputs JSON error envelope to stderr and exits with code 1."""
        with pytest.raises(click.exceptions.Exit, match="1"):
            Reporter(json_mode=True).print_error_and_exit("argument error", "too_many_arguments", "too many arguments")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert json.loads(captured.err) == {"ok": False, "error": "too_many_arguments", "message": "too many arguments"}
