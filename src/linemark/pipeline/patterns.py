# topmark:header:start
#
#   project      : LineMark
#   file         : patterns.py
#   file_relpath : src/linemark/pipeline/patterns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pattern compiler shared by every stage that needs matching.

Patterns use Python `re` syntax and are always compiled case-insensitively.
Compilation is pure: it either returns a `CompiledPattern` or raises
`InvalidPatternError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from linemark.core.errors import InvalidPatternError

if TYPE_CHECKING:
    from collections.abc import Iterator

PATTERN_FLAGS: int = re.IGNORECASE


@dataclass(frozen=True)
class CompiledPattern:
    """A case-insensitive regular expression together with its source text.

    Attributes:
        raw (str): The pattern string as given by the user.
        regex (re.Pattern[str]): The compiled expression.
    """

    raw: str
    regex: re.Pattern[str]

    def matches(self, text: str) -> bool:
        """Return True if the pattern matches anywhere in ``text``."""
        return self.regex.search(text) is not None

    def finditer(self, text: str) -> Iterator[re.Match[str]]:
        """Iterate over all non-overlapping matches (with capture groups)."""
        return self.regex.finditer(text)

    def spans(self, text: str) -> list[tuple[int, int]]:
        """Return the non-empty, non-overlapping match ranges in ``text``.

        Zero-width matches (e.g. from an empty pattern) carry nothing to
        highlight and are skipped.
        """
        return [m.span() for m in self.regex.finditer(text) if m.end() > m.start()]

    def substitute(self, template: str, text: str) -> str:
        r"""Replace every non-overlapping match in ``text`` using ``template``.

        ``template`` follows `re.sub` syntax: ``\1`` / ``\g<1>`` for numbered
        groups and ``\g<name>`` for named groups.
        """
        return self.regex.sub(template, text)

    def check_template(self, template: str) -> None:
        """Validate ``template`` against this pattern's groups.

        `re` parses a replacement template before scanning the subject, so
        substituting into an empty string surfaces bad group references
        without depending on any actual match.

        Raises:
            re.error: If the template is malformed or references an invalid group number.
            IndexError: If the template references an unknown group name.
        """
        self.regex.sub(template, "")


def compile_pattern(raw: str) -> CompiledPattern:
    """Compile ``raw`` into a case-insensitive `CompiledPattern`.

    Empty patterns are legal and match at every position.

    Args:
        raw (str): Regular expression source text.

    Returns:
        CompiledPattern: The compiled pattern.

    Raises:
        InvalidPatternError: If ``raw`` is not a valid regular expression.
    """
    try:
        regex: re.Pattern[str] = re.compile(raw, PATTERN_FLAGS)
    except re.error as e:
        raise InvalidPatternError(raw, str(e)) from e
    return CompiledPattern(raw=raw, regex=regex)
