# topmark:header:start
#
#   project      : LineMark
#   file         : io.py
#   file_relpath : src/linemark/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling for the LineMark CLI.

Lines are read as UTF-8 (undecodable bytes replaced) and split on ``\\n``
only. Terminators are returned untranslated, so ``\\r\\n`` survives the
round trip and a bare ``\\r`` stays part of the line text.
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from typing import TYPE_CHECKING, Final

import click

if TYPE_CHECKING:
    from collections.abc import Iterator

STDIN_PATH: Final[str] = "-"

INPUT_ENCODING: Final[str] = "utf-8"
INPUT_ERRORS: Final[str] = "replace"
INPUT_NEWLINE: Final[str] = "\n"


@contextmanager
def open_input(input_path: str) -> Iterator[io.TextIOWrapper]:
    """Open the line source named by ``input_path`` (``-`` for standard input).

    Standard input is wrapped without taking ownership: the underlying binary
    stream is detached again, not closed, when the block exits.

    Args:
        input_path (str): File path, or ``-`` for standard input.

    Yields:
        io.TextIOWrapper: A text stream yielding ``\\n``-terminated lines.

    Raises:
        OSError: If the file cannot be opened (e.g. `FileNotFoundError`).
    """
    if input_path != STDIN_PATH:
        with open(
            input_path,
            encoding=INPUT_ENCODING,
            errors=INPUT_ERRORS,
            newline=INPUT_NEWLINE,
        ) as stream:
            yield stream
        return

    wrapper = io.TextIOWrapper(
        click.get_binary_stream("stdin"),
        encoding=INPUT_ENCODING,
        errors=INPUT_ERRORS,
        newline=INPUT_NEWLINE,
    )
    try:
        yield wrapper
    finally:
        wrapper.detach()
