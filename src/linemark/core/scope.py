# topmark:header:start
#
#   project      : LineMark
#   file         : scope.py
#   file_relpath : src/linemark/core/scope.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Union scope for time-range stages (shared by config and pipeline)."""

from __future__ import annotations

from enum import Enum


class TimeRangeScope(str, Enum):
    """Which `TimeRange` stages are unioned with each other.

    Attributes:
        CONTIGUOUS: Each run of adjacent time-range stages forms one group,
            evaluated where the run sits in the pipeline.
        PIPELINE: All time-range stages form a single group, evaluated at the
            position of the first one.
    """

    CONTIGUOUS = "contiguous"
    PIPELINE = "pipeline"
