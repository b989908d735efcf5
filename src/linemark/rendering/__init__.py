# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : src/linemark/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal rendering of annotated lines."""

from __future__ import annotations

from linemark.rendering.api import render_line, segment_line
from linemark.rendering.palette import DEFAULT_PALETTE, HighlightColor

__all__ = [
    "DEFAULT_PALETTE",
    "HighlightColor",
    "render_line",
    "segment_line",
]
