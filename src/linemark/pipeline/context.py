# topmark:header:start
#
#   project      : LineMark
#   file         : context.py
#   file_relpath : src/linemark/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-line working state and the evaluator's output record.

A `LineRecord` is created fresh for every input line, threaded through the
stages in order, and turned into an immutable `AnnotatedLine` if the line
survives. Nothing in here outlives a single line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linemark.rendering.palette import HighlightColor


@dataclass(frozen=True, order=True)
class MatchSpan:
    """A highlighted, half-open character range ``[start, end)`` of a line.

    Attributes:
        start (int): Offset of the first highlighted character.
        end (int): Offset one past the last highlighted character.
        color (HighlightColor): Color of the stage that produced the span.
        stage_index (int): Position of that stage in the pipeline.
    """

    start: int
    end: int
    color: HighlightColor = field(compare=False)
    stage_index: int = field(default=0, compare=False)

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class AnnotatedLine:
    """A surviving output line and its highlight annotations.

    Attributes:
        text (str): The (possibly rewritten) line text, without line terminator.
        spans (tuple[MatchSpan, ...]): Spans in the order they were recorded. Spans of one
            stage never overlap each other; spans of different stages may.
        newline (str): The line terminator read from the input (``""`` for a
            final line without one).
    """

    text: str
    spans: tuple[MatchSpan, ...] = ()
    newline: str = ""

    def highlighted(self) -> list[str]:
        """Return the highlighted substrings, in recorded order."""
        return [self.text[s.start : s.end] for s in self.spans]


@dataclass
class LineRecord:
    """Mutable evaluator state for one line.

    Attributes:
        original (str): The line text as read.
        text (str): The current text; rewritten by substitution stages.
        spans (list[MatchSpan]): Spans recorded since the last substitution.
        kept (bool): False once any stage discarded the line.
        discarded_by (int | None): Index of the discarding stage, for tracing.
    """

    original: str
    text: str = ""
    spans: list[MatchSpan] = field(default_factory=lambda: [])
    kept: bool = True
    discarded_by: int | None = None

    @classmethod
    def bootstrap(cls, line: str) -> LineRecord:
        """Create the initial record for ``line``: kept, no spans."""
        return cls(original=line, text=line)

    def discard(self, stage_index: int) -> None:
        """Mark the line as dropped by the stage at ``stage_index``."""
        self.kept = False
        self.discarded_by = stage_index

    def add_spans(
        self,
        ranges: list[tuple[int, int]],
        color: HighlightColor,
        stage_index: int,
    ) -> None:
        """Record one stage's match ranges with that stage's color."""
        self.spans.extend(MatchSpan(s, e, color, stage_index) for s, e in ranges)

    def rewrite(self, new_text: str) -> None:
        """Replace the current text and drop spans whose offsets no longer apply."""
        self.text = new_text
        self.spans.clear()

    def to_annotated(self, newline: str = "") -> AnnotatedLine:
        """Freeze the record into an `AnnotatedLine`."""
        return AnnotatedLine(text=self.text, spans=tuple(self.spans), newline=newline)
