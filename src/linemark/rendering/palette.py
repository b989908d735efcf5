# topmark:header:start
#
#   project      : LineMark
#   file         : palette.py
#   file_relpath : src/linemark/rendering/palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Highlight colors available to highlighting stages.

Each member's value is both the name used in configuration files
(``palette = [...]``) and the Click foreground color it paints with. Styling
always emits ANSI codes; stripping them for non-color output is left to the
writer (``click.echo(..., color=False)``), so rendered text does not depend on
terminal detection at import time.
"""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class HighlightColor(str, Enum):
    """Display color assigned to the matches of one highlighting stage.

    Example:
        ```python
        HighlightColor.GREEN.value          # 'green'
        HighlightColor.GREEN.color("true")  # '\\x1b[32m\\x1b[1mtrue\\x1b[0m'
        ```
    """

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"

    @property
    def color(self) -> Callable[[str], str]:
        """Return a function that paints its argument bold in this color."""
        return partial(click.style, fg=self.value, bold=True)


DEFAULT_PALETTE: tuple[HighlightColor, ...] = tuple(HighlightColor)


def palette_from_names(names: Iterable[str]) -> tuple[HighlightColor, ...]:
    """Resolve configuration color names into a palette.

    Names are matched case-insensitively against the enum values; ``-`` and
    ``_`` are interchangeable (``bright-red`` == ``bright_red``).

    Args:
        names (Iterable[str]): Color names in palette order.

    Returns:
        tuple[HighlightColor, ...]: The resolved palette, in the given order.

    Raises:
        ValueError: If a name is unknown or the resulting palette is empty.
    """
    by_value: dict[str, HighlightColor] = {c.value: c for c in HighlightColor}
    palette: list[HighlightColor] = []
    for name in names:
        key: str = name.strip().lower().replace("-", "_")
        color: HighlightColor | None = by_value.get(key)
        if color is None:
            allowed: str = ", ".join(by_value)
            raise ValueError(f"unknown highlight color {name!r} (expected one of: {allowed})")
        palette.append(color)
    if not palette:
        raise ValueError("highlight palette must not be empty")
    return tuple(palette)
