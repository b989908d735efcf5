# topmark:header:start
#
#   project      : LineMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running LineMark through Click's test runner.

Standard input is supplied as text; ``result.stdout`` holds the filtered line
stream, while ``result.output`` also includes diagnostics written to stderr.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from linemark.cli.main import cli
from linemark.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``argv`` and optional standard input.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["--color=never", "fc:error"]``.
        input_text (str | bytes | IO[Any] | None): Text fed to standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["n:debug"], input_text="debug\\ninfo\\n")
        assert result.stdout == "info\\n"
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), input=input_text)


def write_log(tmp_path: Path, lines: Sequence[str], name: str = "app.log") -> Path:
    """Write ``lines`` (newline-terminated) to a file under ``tmp_path``."""
    path: Path = tmp_path / name
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
