# topmark:header:start
#
#   project      : LineMark
#   file         : errors.py
#   file_relpath : src/linemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LineMark CLI.

Usage:
    Raise these exceptions in the CLI layer to abort with a standardized message
    and exit code. Core errors (`linemark.core.errors`) are translated into
    `LinemarkCommandError` before the first input line is read.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from linemark.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from linemark.core.errors import LinemarkError


class LinemarkCliError(click.ClickException):
    """Base class for all LineMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = ctx.obj.get("console") if ctx and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class LinemarkCommandError(LinemarkCliError):
    """A command token could not be turned into a pipeline stage."""

    exit_code = ExitCode.USAGE_ERROR

    @classmethod
    def from_core(cls, error: LinemarkError) -> LinemarkCommandError:
        """Wrap a core construction error, naming the failing token."""
        if error.token is None:
            return cls(str(error))
        return cls(f"cannot use command {error.token!r}: {error}")


class LinemarkUsageError(LinemarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LinemarkConfigError(LinemarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class LinemarkFileNotFoundError(LinemarkCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LinemarkIOError(LinemarkCliError):
    """Error for I/O errors reading input."""

    exit_code = ExitCode.IO_ERROR
