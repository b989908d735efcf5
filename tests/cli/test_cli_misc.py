# topmark:header:start
#
#   project      : LineMark
#   file         : test_cli_misc.py
#   file_relpath : tests/cli/test_cli_misc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: help, version, pipeline listing and configuration files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.constants import LINEMARK_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
@parametrize("flag", ["-h", "--help"])
def test_help(flag: str) -> None:
    """Help lists the command syntax."""
    result: Result = run_cli([flag])

    assert_SUCCESS(result)
    assert "Usage:" in result.output
    assert "s:/REGEX/REPLACEMENT/" in result.output
    assert "--time-range-scope" in result.output


@mark_cli
def test_version() -> None:
    """``--version`` prints the package version."""
    result: Result = run_cli(["--version"])

    assert_SUCCESS(result)
    assert LINEMARK_VERSION in result.output


@mark_cli
def test_show_pipeline_lists_stages() -> None:
    """``--show-pipeline`` describes each stage and does not read input."""
    result: Result = run_cli(
        ["--no-color", "--show-pipeline", "fc:err", "n:dbg", "s:/a/b/", "ft:-", "th:1"],
        input_text="should not be echoed\n",
    )

    assert_SUCCESS(result)
    lines: list[str] = result.stdout.splitlines()
    assert lines == [
        "#0  fc:err  filter+highlight /err/  [red]",
        "#1  n:dbg  exclude /dbg/",
        "#2  s:/a/b/  substitute /a/ -> 'b'",
        "#3  ft:-  time range [-inf .. +inf]",
        "#4  th:1  thread highlight (not implemented)",
        "time-range scope: contiguous",
    ]


@mark_cli
def test_show_pipeline_empty() -> None:
    """An empty pipeline says so and still reports the time-range scope."""
    result: Result = run_cli(["--show-pipeline"])

    assert_SUCCESS(result)
    assert "empty pipeline" in result.stdout
    assert "time-range scope: contiguous" in result.stdout


@mark_cli
def test_config_palette_and_scope(tmp_path: Path) -> None:
    """Colors and the union scope can come from a config file."""
    path: Path = tmp_path / "linemark.toml"
    path.write_text(
        '[highlight]\npalette = ["cyan"]\n\n[time_range]\nscope = "pipeline"\n',
        encoding="utf-8",
    )

    result: Result = run_cli(["--no-color", "--config", str(path), "--show-pipeline", "a", "b"])

    assert_SUCCESS(result)
    assert "#0  a  filter+highlight /a/  [cyan]" in result.stdout
    assert "#1  b  filter+highlight /b/  [cyan]" in result.stdout
    assert "time-range scope: pipeline" in result.stdout


@mark_cli
def test_cli_scope_overrides_config(tmp_path: Path) -> None:
    """``--time-range-scope`` beats the config file."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[tool.linemark.time_range]\nscope = "pipeline"\n', encoding="utf-8")

    result: Result = run_cli(
        ["--config", str(path), "--time-range-scope", "contiguous", "--show-pipeline"]
    )

    assert_SUCCESS(result)
    assert "time-range scope: contiguous" in result.stdout


@mark_cli
def test_verbose_logging_goes_to_stderr() -> None:
    """Log records never mix into the filtered output."""
    result: Result = run_cli(["-vv", "fn:keep"], input_text="keep\ndrop\n")

    assert_SUCCESS(result)
    assert "keep\n" in result.output
    assert "Processed 2 line(s), emitted 1" in result.output
