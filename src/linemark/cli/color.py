# topmark:header:start
#
#   project      : LineMark
#   file         : color.py
#   file_relpath : src/linemark/cli/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide whether highlighted matches are written with ANSI styling.

Three inputs take part, strongest first: the ``--color``/``--no-color`` flags,
the ``FORCE_COLOR``/``NO_COLOR`` environment conventions, and whether the
output stream is a terminal. Nothing here imports Click, so the decision can be
tested without invoking the command.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import TextIO


class ColorMode(str, Enum):
    """Value of the ``--color`` option."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def from_flags(cls, color_mode: ColorMode | None, no_color: bool) -> ColorMode:
        """Fold ``--no-color`` and an optional ``--color`` into one mode.

        ``--no-color`` wins over any ``--color`` value; no flag at all means `AUTO`.
        """
        if no_color:
            return cls.NEVER
        return color_mode or cls.AUTO


def color_from_environment(environ: Mapping[str, str] | None = None) -> bool | None:
    """Read the color preference from ``FORCE_COLOR`` and ``NO_COLOR``.

    Args:
        environ (Mapping[str, str] | None): Environment to consult; defaults to `os.environ`.

    Returns:
        bool | None: True when ``FORCE_COLOR`` is set to anything but ``"0"``,
            False when ``NO_COLOR`` is present, None when neither decides.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    force: str | None = env.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in env:
        return False
    return None


def is_terminal(stream: TextIO | None = None) -> bool:
    """Return True if ``stream`` (default: stdout) is attached to a terminal."""
    target: TextIO = stream if stream is not None else sys.stdout
    try:
        return target.isatty()
    except (AttributeError, OSError, ValueError):
        # Closed or replaced streams (pytest capture, pipes torn down early).
        return False


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Return True if output lines should carry ANSI styling.

    Args:
        color_mode_override (ColorMode | None): Mode from the command line;
            `None` behaves like `ColorMode.AUTO`.
        stdout_isatty (bool | None): Known terminal status of stdout; checked
            with `is_terminal` when `None`.
        environ (Mapping[str, str] | None): Environment for `color_from_environment`.

    Returns:
        bool: Whether to colorize.
    """
    mode: ColorMode = color_mode_override or ColorMode.AUTO
    if mode is not ColorMode.AUTO:
        return mode is ColorMode.ALWAYS

    from_env: bool | None = color_from_environment(environ)
    if from_env is not None:
        return from_env
    return is_terminal() if stdout_isatty is None else stdout_isatty
