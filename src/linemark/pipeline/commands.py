# topmark:header:start
#
#   project      : LineMark
#   file         : commands.py
#   file_relpath : src/linemark/pipeline/commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command model: the closed set of pipeline stages and their token syntax.

Each command-line token becomes exactly one stage. Dispatch is by prefix, the
most specific prefix first:

| Token                | Stage                                          |
|----------------------|------------------------------------------------|
| ``fc:REGEX``         | `Filter` with highlighting                     |
| ``fn:REGEX``         | `Filter` without highlighting                  |
| ``ft:BEGIN-END``     | `TimeRange` (either bound may be empty)        |
| ``th:...``           | `ThreadHighlight` (placeholder, no-op)         |
| ``h:REGEX``          | `Filter` with highlighting (short alias)       |
| ``n:REGEX``          | `NegativeFilter`                               |
| ``s:/REGEX/REPL/``   | `Substitute`; any character may be the delimiter |
| ``REGEX``            | `Filter` with highlighting                     |

Stages are immutable; the pipeline keeps them in the user-specified order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from linemark.config.logging import get_logger
from linemark.core.errors import InvalidPatternError, LinemarkError, UnknownCommandSyntaxError
from linemark.pipeline.patterns import compile_pattern
from linemark.pipeline.timestamps import parse_timestamp

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linemark.config.logging import LinemarkLogger
    from linemark.pipeline.patterns import CompiledPattern
    from linemark.pipeline.timestamps import Timestamp

logger: LinemarkLogger = get_logger(__name__)


PREFIX_FILTER_COLOR: Final[str] = "fc:"
PREFIX_FILTER_NO_COLOR: Final[str] = "fn:"
PREFIX_TIME_RANGE: Final[str] = "ft:"
PREFIX_THREAD_HIGHLIGHT: Final[str] = "th:"
PREFIX_HIGHLIGHT: Final[str] = "h:"
PREFIX_NEGATIVE: Final[str] = "n:"
PREFIX_SUBSTITUTE: Final[str] = "s:"

TIME_RANGE_SEPARATOR: Final[str] = "-"

# `word:` at the start of a token that is not one of the prefixes above
_PREFIX_SHAPE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z]+:")


@dataclass(frozen=True)
class Filter:
    """Keep the line iff ``pattern`` matches; optionally highlight the matches."""

    token: str
    pattern: CompiledPattern
    highlight: bool = True


@dataclass(frozen=True)
class NegativeFilter:
    """Keep the line iff ``pattern`` does not match."""

    token: str
    pattern: CompiledPattern


@dataclass(frozen=True)
class Substitute:
    """Rewrite every match of ``pattern`` using the `re.sub` ``template``."""

    token: str
    pattern: CompiledPattern
    template: str


@dataclass(frozen=True)
class TimeRange:
    """Keep the line iff its leading timestamp lies in ``[begin, end]``.

    A missing bound is unbounded on that side.
    """

    token: str
    begin: Timestamp | None = None
    end: Timestamp | None = None

    def contains(self, ts: Timestamp) -> bool:
        """Return True if ``ts`` lies within the (inclusive) range."""
        if self.begin is not None and ts < self.begin:
            return False
        return not (self.end is not None and ts > self.end)


@dataclass(frozen=True)
class ThreadHighlight:
    """Placeholder for per-thread highlighting; evaluates as a no-op."""

    token: str
    argument: str = ""


Stage = Union[Filter, NegativeFilter, Substitute, TimeRange, ThreadHighlight]


def is_highlighting(stage: Stage) -> bool:
    """Return True if ``stage`` records highlight spans (and so needs a color)."""
    return isinstance(stage, Filter) and stage.highlight


def describe_stage(stage: Stage) -> str:
    """Return a short human-readable description of ``stage``."""
    match stage:
        case Filter(pattern=p, highlight=True):
            return f"filter+highlight /{p.raw}/"
        case Filter(pattern=p):
            return f"filter /{p.raw}/"
        case NegativeFilter(pattern=p):
            return f"exclude /{p.raw}/"
        case Substitute(pattern=p, template=t):
            return f"substitute /{p.raw}/ -> {t!r}"
        case TimeRange(begin=b, end=e):
            return f"time range [{b or '-inf'} .. {e or '+inf'}]"
        case ThreadHighlight():
            return "thread highlight (not implemented)"


def _parse_substitute(token: str, body: str) -> Substitute:
    if not body:
        raise UnknownCommandSyntaxError(token, "missing delimiter after 's:'")
    delimiter: str = body[0]
    parts: list[str] = body[1:].split(delimiter, 2)
    if len(parts) < 3:
        raise UnknownCommandSyntaxError(
            token, f"expected s:{delimiter}PATTERN{delimiter}REPLACEMENT{delimiter}"
        )
    # Anything after the closing delimiter is ignored.
    raw_pattern, template, _rest = parts
    pattern: CompiledPattern = compile_pattern(raw_pattern)
    try:
        pattern.check_template(template)
    except (re.error, IndexError) as e:
        raise UnknownCommandSyntaxError(token, f"invalid replacement {template!r}: {e}") from e
    return Substitute(token=token, pattern=pattern, template=template)


def _parse_time_range(token: str, body: str) -> TimeRange:
    begin_s, sep, end_s = body.partition(TIME_RANGE_SEPARATOR)
    if not sep:
        raise UnknownCommandSyntaxError(token, "expected ft:BEGIN-END (either bound may be empty)")
    begin: Timestamp | None = parse_timestamp(begin_s) if begin_s.strip() else None
    end: Timestamp | None = parse_timestamp(end_s) if end_s.strip() else None
    if begin is not None and end is not None and begin > end:
        logger.warning("Time range %r is empty: begin %s is after end %s", token, begin, end)
    return TimeRange(token=token, begin=begin, end=end)


def _parse_bare(token: str) -> Filter:
    try:
        return Filter(token, compile_pattern(token), highlight=True)
    except InvalidPatternError as e:
        if _PREFIX_SHAPE.match(token) is None:
            raise
        raise UnknownCommandSyntaxError(
            token, f"unknown prefix and not a valid pattern: {e.reason}"
        ) from e


def _parse(token: str) -> Stage:
    if token.startswith(PREFIX_FILTER_COLOR):
        return Filter(token, compile_pattern(token[len(PREFIX_FILTER_COLOR) :]), highlight=True)
    if token.startswith(PREFIX_FILTER_NO_COLOR):
        return Filter(token, compile_pattern(token[len(PREFIX_FILTER_NO_COLOR) :]), highlight=False)
    if token.startswith(PREFIX_TIME_RANGE):
        return _parse_time_range(token, token[len(PREFIX_TIME_RANGE) :])
    if token.startswith(PREFIX_THREAD_HIGHLIGHT):
        return ThreadHighlight(token, token[len(PREFIX_THREAD_HIGHLIGHT) :])
    if token.startswith(PREFIX_HIGHLIGHT):
        return Filter(token, compile_pattern(token[len(PREFIX_HIGHLIGHT) :]), highlight=True)
    if token.startswith(PREFIX_NEGATIVE):
        return NegativeFilter(token, compile_pattern(token[len(PREFIX_NEGATIVE) :]))
    if token.startswith(PREFIX_SUBSTITUTE):
        return _parse_substitute(token, token[len(PREFIX_SUBSTITUTE) :])
    return _parse_bare(token)


def parse_command(token: str) -> Stage:
    """Parse a single command token into a `Stage`.

    Args:
        token (str): One command as given on the command line.

    Returns:
        Stage: The parsed, compiled stage.

    Raises:
        LinemarkError: One of `InvalidPatternError`, `InvalidTimestampError` or
            `UnknownCommandSyntaxError`; ``token`` is always attached to the error.
    """
    try:
        stage: Stage = _parse(token)
    except LinemarkError as e:
        raise e.with_token(token)
    logger.debug("Parsed command %r as %s", token, describe_stage(stage))
    return stage


def parse_commands(tokens: Iterable[str]) -> list[Stage]:
    """Parse command tokens in order; the first invalid token aborts parsing."""
    return [parse_command(token) for token in tokens]
