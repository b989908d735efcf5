# topmark:header:start
#
#   project      : LineMark
#   file         : test_time_ranges.py
#   file_relpath : tests/pipeline/test_time_ranges.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for time-range stages and how they are unioned."""

from __future__ import annotations

from linemark.core.scope import TimeRangeScope
from linemark.pipeline.engine import Pipeline, TimeRangeGroup
from tests.conftest import kept_texts, mark_pipeline, parametrize

LINES: list[str] = [
    "0:00:05.0 start",
    "0:00:15.0 inside first",
    "0:00:25.0 between",
    "0:00:35.0 inside second",
    "0:00:45.0 after",
    "no timestamp",
]


@mark_pipeline
def test_single_range_is_inclusive() -> None:
    """Lines at the exact bounds are kept."""
    lines: list[str] = ["0:00:09.9 a", "0:00:10.0 b", "0:00:20.0 c", "0:00:20.1 d"]

    assert kept_texts(["ft:0:00:10.0-0:00:20.0"], lines) == ["0:00:10.0 b", "0:00:20.0 c"]


@mark_pipeline
def test_adjacent_ranges_form_a_union() -> None:
    """Two adjacent time ranges keep lines in either range, not only their intersection."""
    commands: list[str] = ["ft:0:00:10.0-0:00:20.0", "ft:0:00:30.0-0:00:40.0"]

    assert kept_texts(commands, LINES) == ["0:00:15.0 inside first", "0:00:35.0 inside second"]


@mark_pipeline
def test_open_ended_ranges() -> None:
    """A missing bound is unbounded on that side."""
    assert kept_texts(["ft:-0:00:15.0"], LINES) == ["0:00:05.0 start", "0:00:15.0 inside first"]
    assert kept_texts(["ft:0:00:35.0-"], LINES) == ["0:00:35.0 inside second", "0:00:45.0 after"]


@mark_pipeline
def test_fully_open_range_only_requires_a_timestamp() -> None:
    """``ft:-`` keeps every timestamped line and drops the rest."""
    assert kept_texts(["ft:-"], LINES) == LINES[:-1]


@mark_pipeline
def test_reversed_range_keeps_nothing() -> None:
    """An empty range discards every line."""
    assert kept_texts(["ft:0:00:20.0-0:00:10.0"], LINES) == []


@mark_pipeline
def test_time_range_sees_substituted_text() -> None:
    """The leading timestamp is read from the current (rewritten) text."""
    commands: list[str] = ["s:/^T=//", "ft:0:00:10.0-0:00:20.0"]

    assert kept_texts(commands, ["T=0:00:15.0 x", "T=0:00:25.0 y"]) == ["0:00:15.0 x"]


@mark_pipeline
@parametrize(
    "scope, expected",
    [
        # Contiguous: two separate groups, a line must satisfy both.
        (TimeRangeScope.CONTIGUOUS, []),
        # Pipeline: one group, a line may satisfy either.
        (
            TimeRangeScope.PIPELINE,
            ["0:00:15.0 inside first", "0:00:35.0 inside second"],
        ),
    ],
)
def test_union_scope_across_other_stages(scope: TimeRangeScope, expected: list[str]) -> None:
    """Ranges separated by another stage are unioned only with pipeline scope."""
    commands: list[str] = ["ft:0:00:10.0-0:00:20.0", "fn:inside", "ft:0:00:30.0-0:00:40.0"]

    assert kept_texts(commands, LINES, time_range_scope=scope) == expected


def test_plan_grouping_contiguous() -> None:
    """Each run of adjacent time ranges becomes one group at the run's position."""
    pipeline: Pipeline = Pipeline.build(["ft:-", "ft:-", "a", "ft:-"])

    groups: list[TimeRangeGroup] = [
        item for _, item in pipeline._plan if isinstance(item, TimeRangeGroup)
    ]
    assert [g.indices for g in groups] == [(0, 1), (3,)]


def test_plan_grouping_pipeline() -> None:
    """With pipeline scope all ranges join one group placed at the first range."""
    pipeline: Pipeline = Pipeline.build(
        ["a", "ft:-", "b", "ft:-"], time_range_scope=TimeRangeScope.PIPELINE
    )

    positions: list[int] = [index for index, _ in pipeline._plan]
    assert positions == [0, 1, 2]
    group = pipeline._plan[1][1]
    assert isinstance(group, TimeRangeGroup)
    assert group.indices == (1, 3)
    assert not group.admits(None)
