# topmark:header:start
#
#   project      : LineMark
#   file         : engine.py
#   file_relpath : src/linemark/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline construction and per-line evaluation (engine layer).

A `Pipeline` is built once from command tokens (or already-parsed stages):
stages are parsed, highlighting stages receive their colors, and time-range
stages are grouped into union groups. After that the pipeline is immutable and
evaluates one line at a time:

    pipeline = Pipeline.build(["fc:error", "n:debug"])
    for annotated in run_stream(pipeline, sys.stdin):
        ...

Evaluation runs the stages strictly left to right on a fresh `LineRecord` and
stops at the first stage that discards the line. Later stages always see the
text as rewritten by earlier substitution stages.

Design goals:
  - No CLI dependencies: this module never prints and never imports Click.
  - No evaluation errors: every failure happens in `Pipeline.build`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from linemark.config.logging import get_logger
from linemark.core.scope import TimeRangeScope
from linemark.pipeline.colors import ColorAllocator
from linemark.pipeline.commands import (
    Filter,
    NegativeFilter,
    Substitute,
    Stage,
    ThreadHighlight,
    TimeRange,
    is_highlighting,
    parse_command,
)
from linemark.pipeline.context import LineRecord
from linemark.pipeline.timestamps import extract_leading
from linemark.rendering.palette import DEFAULT_PALETTE

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, Sequence

    from linemark.config.logging import LinemarkLogger
    from linemark.pipeline.context import AnnotatedLine
    from linemark.pipeline.timestamps import Timestamp
    from linemark.rendering.palette import HighlightColor

logger: LinemarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class TimeRangeGroup:
    """A union of time ranges: a line passes if it falls into any of them.

    Attributes:
        ranges (tuple[TimeRange, ...]): The grouped stages, in pipeline order.
        indices (tuple[int, ...]): Their positions in the pipeline.
    """

    ranges: tuple[TimeRange, ...]
    indices: tuple[int, ...]

    def admits(self, ts: Timestamp | None) -> bool:
        """Return True if ``ts`` lies in at least one range (never for ``None``)."""
        if ts is None:
            return False
        return any(r.contains(ts) for r in self.ranges)


_PlanItem = Union[Stage, TimeRangeGroup]


def _group_time_ranges(
    stages: Sequence[Stage],
    scope: TimeRangeScope,
) -> tuple[tuple[int, _PlanItem], ...]:
    """Fold `TimeRange` stages into `TimeRangeGroup`s according to ``scope``."""
    plan: list[tuple[int, _PlanItem]] = []
    pending: list[tuple[int, TimeRange]] = []

    def flush() -> None:
        if pending:
            group = TimeRangeGroup(
                ranges=tuple(r for _, r in pending),
                indices=tuple(i for i, _ in pending),
            )
            plan.append((pending[0][0], group))
            pending.clear()

    if scope is TimeRangeScope.PIPELINE:
        ranges: list[tuple[int, TimeRange]] = [
            (i, s) for i, s in enumerate(stages) if isinstance(s, TimeRange)
        ]
        first: int | None = ranges[0][0] if ranges else None
        for i, stage in enumerate(stages):
            if i == first:
                pending.extend(ranges)
                flush()
            elif not isinstance(stage, TimeRange):
                plan.append((i, stage))
        return tuple(plan)

    for i, stage in enumerate(stages):
        if isinstance(stage, TimeRange):
            pending.append((i, stage))
            continue
        flush()
        plan.append((i, stage))
    flush()
    return tuple(plan)


@dataclass(frozen=True)
class Pipeline:
    """An immutable, ordered list of stages ready to evaluate lines.

    `Pipeline.build` parses command tokens; the constructor takes parsed stages.

    Attributes:
        stages (tuple[Stage, ...]): The stages in user-specified order.
        palette (tuple[HighlightColor, ...]): Colors for highlighting stages.
        time_range_scope (TimeRangeScope): How time-range stages are unioned.
        colors (Mapping[int, HighlightColor]): Stage index to color, for
            highlighting stages only; allocated once at construction.
    """

    stages: tuple[Stage, ...]
    palette: tuple[HighlightColor, ...] = DEFAULT_PALETTE
    time_range_scope: TimeRangeScope = TimeRangeScope.CONTIGUOUS
    colors: Mapping[int, HighlightColor] = field(init=False)
    _plan: tuple[tuple[int, _PlanItem], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        allocator = ColorAllocator(self.palette)
        colors: dict[int, HighlightColor] = {
            i: allocator.allocate(i) for i, s in enumerate(self.stages) if is_highlighting(s)
        }
        object.__setattr__(self, "colors", colors)
        object.__setattr__(self, "_plan", _group_time_ranges(self.stages, self.time_range_scope))

    @classmethod
    def build(
        cls,
        commands: Iterable[str | Stage],
        *,
        palette: Sequence[HighlightColor] = DEFAULT_PALETTE,
        time_range_scope: TimeRangeScope = TimeRangeScope.CONTIGUOUS,
    ) -> Pipeline:
        """Parse commands, allocate colors and group time ranges.

        Args:
            commands (Iterable[str | Stage]): Command tokens and/or pre-parsed stages,
                in evaluation order.
            palette (Sequence[HighlightColor]): Colors for highlighting stages.
            time_range_scope (TimeRangeScope): Union scope for time-range stages.

        Returns:
            Pipeline: The ready-to-run pipeline.

        Raises:
            LinemarkError: If a command token is invalid (pattern, timestamp
                or command syntax). Nothing is evaluated in that case.
        """
        stages: tuple[Stage, ...] = tuple(
            parse_command(c) if isinstance(c, str) else c for c in commands
        )
        pipeline = cls(stages=stages, palette=tuple(palette), time_range_scope=time_range_scope)
        logger.debug(
            "Built pipeline: %d stage(s), %d color(s), scope=%s",
            len(stages),
            len(pipeline.colors),
            time_range_scope.value,
        )
        return pipeline

    def evaluate(self, line: str, *, newline: str = "") -> AnnotatedLine | None:
        """Run ``line`` through the stages.

        Args:
            line (str): The line text without its terminator.
            newline (str): Terminator to carry over to the output record.

        Returns:
            AnnotatedLine | None: The (possibly rewritten) line with its spans,
                or ``None`` if a stage discarded it.
        """
        record: LineRecord = LineRecord.bootstrap(line)
        for index, item in self._plan:
            self._apply(index, item, record)
            if not record.kept:
                logger.trace(
                    "Line dropped by stage #%d: %r", record.discarded_by, record.original
                )
                return None
        return record.to_annotated(newline)

    def _apply(self, index: int, item: _PlanItem, record: LineRecord) -> None:
        match item:
            case Filter(pattern=pattern, highlight=highlight):
                if not pattern.matches(record.text):
                    record.discard(index)
                elif highlight:
                    record.add_spans(pattern.spans(record.text), self.colors[index], index)
            case NegativeFilter(pattern=pattern):
                if pattern.matches(record.text):
                    record.discard(index)
            case Substitute(pattern=pattern, template=template):
                record.rewrite(pattern.substitute(template, record.text))
            case TimeRangeGroup():
                if not item.admits(extract_leading(record.text)):
                    record.discard(index)
            case ThreadHighlight():
                pass

    def __len__(self) -> int:
        return len(self.stages)


def evaluate(line: str, stages: Sequence[Stage]) -> AnnotatedLine | None:
    """Evaluate a single line against ``stages`` with default settings.

    Convenience wrapper around `Pipeline.build` + `Pipeline.evaluate`; build the
    pipeline once when processing many lines.
    """
    return Pipeline.build(stages).evaluate(line)


def split_newline(raw: str) -> tuple[str, str]:
    """Split ``raw`` into ``(text, terminator)``; handles LF and CRLF.

    A lone ``\\r`` is not a terminator and stays part of ``text``.
    """
    if raw.endswith("\r\n"):
        return raw[:-2], "\r\n"
    if raw.endswith("\n"):
        return raw[:-1], "\n"
    return raw, ""


def run_stream(pipeline: Pipeline, lines: Iterable[str]) -> Iterator[AnnotatedLine]:
    """Evaluate every line of ``lines`` in order, yielding the survivors.

    Lines are consumed one at a time; each surviving line is yielded before the
    next one is read. Line terminators are stripped before evaluation and kept
    on the resulting `AnnotatedLine`.
    """
    seen = 0
    emitted = 0
    for raw in lines:
        seen += 1
        text, newline = split_newline(raw)
        result: AnnotatedLine | None = pipeline.evaluate(text, newline=newline)
        if result is not None:
            emitted += 1
            yield result
    logger.info("Processed %d line(s), emitted %d", seen, emitted)
