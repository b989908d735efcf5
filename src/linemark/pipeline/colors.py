# topmark:header:start
#
#   project      : LineMark
#   file         : colors.py
#   file_relpath : src/linemark/pipeline/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deterministic color assignment for highlighting stages.

One `ColorAllocator` is owned by a pipeline while it is being built. Colors
are handed out in stage order from a finite palette, wrapping around once the
palette is exhausted. After construction the resulting stage-to-color mapping
is read-only, so the same stage order always yields the same colors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.config.logging import get_logger
from linemark.rendering.palette import DEFAULT_PALETTE

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from linemark.config.logging import LinemarkLogger
    from linemark.rendering.palette import HighlightColor

logger: LinemarkLogger = get_logger(__name__)


class ColorAllocator:
    """Assign the next palette color to each highlighting stage.

    Args:
        palette (Sequence[HighlightColor]): Colors in allocation order. Must not be empty.

    Raises:
        ValueError: If ``palette`` is empty.
    """

    def __init__(self, palette: Sequence[HighlightColor] = DEFAULT_PALETTE) -> None:
        if not palette:
            raise ValueError("palette must contain at least one color")
        self._palette: tuple[HighlightColor, ...] = tuple(palette)
        self._assigned: dict[int, HighlightColor] = {}

    @property
    def palette(self) -> tuple[HighlightColor, ...]:
        """The palette colors are drawn from."""
        return self._palette

    def allocate(self, stage_index: int) -> HighlightColor:
        """Return the color for the stage at ``stage_index``.

        The first call for a given index takes the next palette color (cycling);
        repeated calls for the same index return the same color.
        """
        color: HighlightColor | None = self._assigned.get(stage_index)
        if color is None:
            color = self._palette[len(self._assigned) % len(self._palette)]
            self._assigned[stage_index] = color
            logger.debug("Stage #%d gets highlight color %s", stage_index, color.value)
        return color

    @property
    def assignments(self) -> Mapping[int, HighlightColor]:
        """A snapshot of the stage-index to color mapping."""
        return dict(self._assigned)
