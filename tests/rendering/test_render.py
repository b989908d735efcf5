# topmark:header:start
#
#   project      : LineMark
#   file         : test_render.py
#   file_relpath : tests/rendering/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for line rendering and the span layering rule."""

from __future__ import annotations

import click

from linemark.pipeline.context import AnnotatedLine, MatchSpan
from linemark.pipeline.engine import Pipeline
from linemark.rendering.api import render_line, render_text, segment_line
from linemark.rendering.palette import HighlightColor
from tests.conftest import parametrize

RED = HighlightColor.RED
BLUE = HighlightColor.BLUE


def test_segment_line_without_spans_is_one_plain_run() -> None:
    """Unhighlighted text comes back as a single uncolored segment."""
    assert segment_line("plain text", []) == [("plain text", None)]
    assert segment_line("", []) == []


def test_segment_line_splits_runs() -> None:
    """Highlighted and plain runs alternate and cover the text exactly."""
    spans: list[MatchSpan] = [MatchSpan(0, 3, RED), MatchSpan(9, 12, RED)]

    assert segment_line("err ok - err", spans) == [
        ("err", RED),
        (" ok - ", None),
        ("err", RED),
    ]


@parametrize(
    "spans, expected",
    [
        # Later span wins where they overlap.
        (
            [MatchSpan(0, 3, RED), MatchSpan(1, 4, BLUE)],
            [("a", RED), ("bcd", BLUE), ("e", None)],
        ),
        # Same spans in the opposite order.
        (
            [MatchSpan(1, 4, BLUE), MatchSpan(0, 3, RED)],
            [("abc", RED), ("d", BLUE), ("e", None)],
        ),
        # A later inner span splits an earlier outer one.
        (
            [MatchSpan(0, 5, RED), MatchSpan(2, 3, BLUE)],
            [("ab", RED), ("c", BLUE), ("de", RED)],
        ),
    ],
)
def test_last_applied_span_wins(
    spans: list[MatchSpan], expected: list[tuple[str, HighlightColor | None]]
) -> None:
    """Overlaps are resolved in favor of the span applied last."""
    assert segment_line("abcde", spans) == expected


def test_segment_line_clips_out_of_range_spans() -> None:
    """Offsets beyond the text are ignored."""
    assert segment_line("abc", [MatchSpan(2, 10, RED)]) == [("ab", None), ("c", RED)]


def test_render_text_disabled_returns_plain_text() -> None:
    """With styling off the text is returned untouched."""
    assert render_text("abc", [MatchSpan(0, 1, RED)], enabled=False) == "abc"


def test_render_text_enabled_wraps_highlighted_segments() -> None:
    """Highlighted segments get ANSI styling; the plain text is preserved."""
    rendered: str = render_text("abc", [MatchSpan(1, 2, RED)], enabled=True)

    assert rendered == "a" + RED.color("b") + "c"
    assert "\x1b[" in rendered
    assert click.unstyle(rendered) == "abc"


def test_render_line_appends_original_terminator() -> None:
    """The line terminator read from input is reproduced."""
    annotated = AnnotatedLine("text", (), "\r\n")

    assert render_line(annotated, enabled=False) == "text\r\n"
    assert render_line(annotated, enabled=False, newline=False) == "text"


def test_render_pipeline_output_uses_stage_colors() -> None:
    """Each stage's matches are painted in that stage's color."""
    pipeline: Pipeline = Pipeline.build(["sourcebuffer", "h:true"])
    annotated: AnnotatedLine | None = pipeline.evaluate("0:00:05.0 sourcebuffer true")
    assert annotated is not None

    rendered: str = render_line(annotated, enabled=True, newline=False)

    assert pipeline.colors[0].color("sourcebuffer") in rendered
    assert pipeline.colors[1].color("true") in rendered
    assert click.unstyle(rendered) == "0:00:05.0 sourcebuffer true"
