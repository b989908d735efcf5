# topmark:header:start
#
#   project      : LineMark
#   file         : api.py
#   file_relpath : src/linemark/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render `AnnotatedLine` records as (optionally) colorized text.

Layering rule:
    Spans are painted onto a per-character color map in the order they were
    recorded, i.e. in pipeline stage order. Where spans overlap, the span
    applied last wins. Runs of equally colored characters are emitted as one
    colorized segment.

The helpers here are Click-free and Console-free: they operate on plain strings
and return plain strings. Whether styling is enabled is decided by the CLI and
passed down as a boolean.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linemark.pipeline.context import AnnotatedLine, MatchSpan
    from linemark.rendering.palette import HighlightColor


def segment_line(
    text: str,
    spans: Sequence[MatchSpan],
) -> list[tuple[str, HighlightColor | None]]:
    """Split ``text`` into runs of uniform highlight color.

    Args:
        text (str): The line text.
        spans (Sequence[MatchSpan]): Spans in application order; offsets outside
            ``text`` are clipped.

    Returns:
        list[tuple[str, HighlightColor | None]]: Consecutive ``(segment, color)``
            pairs covering ``text`` exactly; ``None`` marks unhighlighted text.
    """
    if not text:
        return []
    painted: list[HighlightColor | None] = [None] * len(text)
    for span in spans:
        start: int = max(span.start, 0)
        end: int = min(span.end, len(text))
        for i in range(start, end):
            painted[i] = span.color

    segments: list[tuple[str, HighlightColor | None]] = []
    run_start = 0
    for i in range(1, len(text) + 1):
        if i == len(text) or painted[i] is not painted[run_start]:
            segments.append((text[run_start:i], painted[run_start]))
            run_start = i
    return segments


def render_text(text: str, spans: Sequence[MatchSpan], *, enabled: bool) -> str:
    """Return ``text`` with its spans colorized (or unchanged if not ``enabled``)."""
    if not enabled or not spans:
        return text
    return "".join(
        color.color(segment) if color is not None else segment
        for segment, color in segment_line(text, spans)
    )


def render_line(annotated: AnnotatedLine, *, enabled: bool, newline: bool = True) -> str:
    """Render an annotated line for terminal output.

    Args:
        annotated (AnnotatedLine): The evaluator's output record.
        enabled (bool): Whether to emit ANSI styling.
        newline (bool): Append the record's original line terminator.

    Returns:
        str: The rendered line.
    """
    rendered: str = render_text(annotated.text, annotated.spans, enabled=enabled)
    return rendered + annotated.newline if newline else rendered
