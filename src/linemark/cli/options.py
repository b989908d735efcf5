# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/linemark/cli/options.py
#   project      : LineMark
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the LineMark command.

This module centralizes reusable options (verbosity, color) and their
resolution logic, so the command body can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from linemark.cli.color import ColorMode
from linemark.cli.errors import LinemarkUsageError
from linemark.config.logging import TRACE_LEVEL
from linemark.core.scope import TimeRangeScope

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the internal logging level from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int | None: The logging level, or None when neither flag was given.

    Raises:
        LinemarkUsageError: If both verbose and quiet flags are used.

    Behavior:
        ``-vvv`` → TRACE, ``-vv`` → DEBUG, ``-v`` → INFO, ``-q`` → CRITICAL.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LinemarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.CRITICAL
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity on stderr. Repeat for more detail (-vvv for TRACE).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log critical problems.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode], case_sensitive=False),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value.lower()) if value else None,
        help="Highlight matches: auto (default, only on a terminal), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        is_flag=True,
        help="Disable highlighting (same as --color=never).",
    )(f)
    return f


def pipeline_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options that shape pipeline construction and I/O."""
    f = click.option(
        "-i",
        "--input",
        "input_path",
        type=click.Path(dir_okay=False, allow_dash=True),
        default="-",
        show_default=True,
        help="Read lines from this file instead of standard input.",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="TOML config file (linemark.toml, or pyproject.toml with [tool.linemark]).",
    )(f)
    f = click.option(
        "--time-range-scope",
        type=click.Choice([s.value for s in TimeRangeScope], case_sensitive=False),
        default=None,
        help=(
            "Which ft: commands are unioned: adjacent ones only (contiguous, default) "
            "or all of them (pipeline)."
        ),
    )(f)
    f = click.option(
        "--show-pipeline",
        is_flag=True,
        help="Print the parsed stages with their highlight colors and exit.",
    )(f)
    return f
