# topmark:header:start
#
#   project      : LineMark
#   file         : timestamps.py
#   file_relpath : src/linemark/pipeline/timestamps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Timestamp parsing for time-range stages.

Log lines handled by LineMark typically start with an elapsed-time prefix such as
``0:00:05.123456789``: hours (one or more digits), two-digit minutes and
seconds, and a variable-length decimal fraction.

Timestamps are totally ordered by ``(hours, minutes, seconds, fraction)``. The
fraction is compared as a decimal value, so ``0:00:01.5`` and ``0:00:01.50``
are equal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from linemark.core.errors import InvalidTimestampError

_TIMESTAMP_BODY: Final[str] = r"(\d+):(\d{2}):(\d{2})(?:\.(\d+))?"

_FULL_RE: Final[re.Pattern[str]] = re.compile(rf"{_TIMESTAMP_BODY}")
# A leading timestamp must not run into further digits or another ':'-group.
_LEADING_RE: Final[re.Pattern[str]] = re.compile(rf"\s*{_TIMESTAMP_BODY}(?![\d:.])")

_ZERO: Final[Decimal] = Decimal(0)


@dataclass(frozen=True, order=True)
class Timestamp:
    """An elapsed time of day, comparable with the usual operators.

    Attributes:
        hours (int): Hours, unbounded.
        minutes (int): Minutes, 0-59.
        seconds (int): Seconds, 0-59.
        fraction (Decimal): Fractional seconds in ``[0, 1)``.
    """

    hours: int
    minutes: int
    seconds: int
    fraction: Decimal = _ZERO

    def __str__(self) -> str:
        text: str = f"{self.hours}:{self.minutes:02d}:{self.seconds:02d}"
        if self.fraction:
            # Decimal("0.250") -> ".250"; "f" avoids exponent notation
            text += format(self.fraction, "f")[1:]
        return text


def _from_groups(raw: str, groups: tuple[str | None, ...]) -> Timestamp:
    hours_s, minutes_s, seconds_s, fraction_s = groups
    minutes = int(minutes_s or "0")
    seconds = int(seconds_s or "0")
    if minutes > 59:
        raise InvalidTimestampError(raw, f"minutes out of range: {minutes_s}")
    if seconds > 59:
        raise InvalidTimestampError(raw, f"seconds out of range: {seconds_s}")
    fraction: Decimal = Decimal(f"0.{fraction_s}") if fraction_s else _ZERO
    return Timestamp(int(hours_s or "0"), minutes, seconds, fraction)


def parse_timestamp(raw: str) -> Timestamp:
    """Parse a ``H:MM:SS[.fraction]`` literal.

    Surrounding whitespace is ignored.

    Args:
        raw (str): The time literal, e.g. ``"0:00:10.0"``.

    Returns:
        Timestamp: The parsed value.

    Raises:
        InvalidTimestampError: If ``raw`` does not follow the format, or minutes/seconds
            are out of range.
    """
    m: re.Match[str] | None = _FULL_RE.fullmatch(raw.strip())
    if m is None:
        raise InvalidTimestampError(raw, "expected H:MM:SS.fraction")
    return _from_groups(raw, m.groups())


def extract_leading(line: str) -> Timestamp | None:
    """Return the timestamp at the start of ``line``, or None if there is none.

    Leading whitespace is skipped. A prefix that looks like a timestamp but is
    out of range (e.g. ``0:75:00.0``) counts as no timestamp.
    """
    m: re.Match[str] | None = _LEADING_RE.match(line)
    if m is None:
        return None
    try:
        return _from_groups(line, m.groups())
    except InvalidTimestampError:
        return None
