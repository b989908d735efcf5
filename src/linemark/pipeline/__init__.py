# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : src/linemark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The LineMark command pipeline: stages, parsing and per-line evaluation."""

from __future__ import annotations

from linemark.pipeline.commands import (
    Filter,
    NegativeFilter,
    Stage,
    Substitute,
    ThreadHighlight,
    TimeRange,
    parse_command,
    parse_commands,
)
from linemark.pipeline.context import AnnotatedLine, MatchSpan
from linemark.pipeline.engine import Pipeline, TimeRangeScope, evaluate, run_stream

__all__ = [
    "AnnotatedLine",
    "Filter",
    "MatchSpan",
    "NegativeFilter",
    "Pipeline",
    "Stage",
    "Substitute",
    "ThreadHighlight",
    "TimeRange",
    "TimeRangeScope",
    "evaluate",
    "parse_command",
    "parse_commands",
    "run_stream",
]
