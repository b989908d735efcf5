# topmark:header:start
#
#   project      : LineMark
#   file         : errors.py
#   file_relpath : src/linemark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Construction-time errors raised while building a LineMark pipeline.

All errors in this module are raised *before* the first input line is read:
command tokens are parsed once, and a pipeline with a bad stage is never run.
Per-line evaluation never raises.

These exceptions are Click-free; the CLI maps them onto its own exception
types and exit codes (see `linemark.cli.errors`).
"""

from __future__ import annotations


class LinemarkError(ValueError):
    """Base class for all pipeline construction errors.

    Attributes:
        token (str | None): The command token that failed to parse, when known.
            Lower layers (pattern/timestamp compilers) leave it unset; the command
            parser attaches it before re-raising.
    """

    token: str | None

    def __init__(self, message: str, *, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token

    def with_token(self, token: str) -> LinemarkError:
        """Attach the failing command token (first one wins) and return ``self``."""
        if self.token is None:
            self.token = token
        return self


class InvalidPatternError(LinemarkError):
    """A regular expression could not be compiled.

    Attributes:
        raw (str): The original pattern string.
        reason (str): The underlying regex syntax error message.
    """

    def __init__(self, raw: str, reason: str, *, token: str | None = None) -> None:
        super().__init__(f"invalid pattern {raw!r}: {reason}", token=token)
        self.raw = raw
        self.reason = reason


class InvalidTimestampError(LinemarkError):
    """A time literal does not follow the ``H:MM:SS.fraction`` format.

    Attributes:
        raw (str): The original time literal.
        reason (str): Why the literal was rejected.
    """

    def __init__(self, raw: str, reason: str, *, token: str | None = None) -> None:
        super().__init__(f"invalid timestamp {raw!r}: {reason}", token=token)
        self.raw = raw
        self.reason = reason


class UnknownCommandSyntaxError(LinemarkError):
    """A command prefix was recognized but its body is structurally invalid."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"invalid command {token!r}: {reason}", token=token)
        self.reason = reason
