# topmark:header:start
#
#   project      : LineMark
#   file         : main.py
#   file_relpath : src/linemark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``linemark`` command.

Key ideas:
- Every positional argument is one pipeline command, evaluated left to right.
- The pipeline is built (and every command validated) before the first input
  line is read; a bad command aborts with ``USAGE_ERROR`` and names the token.
- Lines stream through one at a time: each surviving line is written and
  flushed before the next one is read.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from linemark.cli.color import ColorMode, resolve_color_mode
from linemark.cli.console import ClickConsole
from linemark.cli.errors import (
    LinemarkCommandError,
    LinemarkConfigError,
    LinemarkFileNotFoundError,
    LinemarkIOError,
)
from linemark.cli.io import open_input
from linemark.cli.options import (
    common_color_options,
    common_verbose_options,
    pipeline_options,
    resolve_verbosity,
)
from linemark.config.loaders import ConfigLoadError
from linemark.config.logging import get_logger, resolve_env_log_level, setup_logging
from linemark.config.model import ConfigValueError, load_config
from linemark.constants import LINEMARK_VERSION
from linemark.core.errors import LinemarkError
from linemark.core.exit_codes import ExitCode
from linemark.pipeline.commands import describe_stage
from linemark.pipeline.engine import Pipeline, run_stream
from linemark.rendering.api import render_line

if TYPE_CHECKING:
    from linemark.config.model import Config

logger = get_logger(__name__)

EPILOG = """\b
Commands (one per argument, applied in order):
  REGEX | fc:REGEX | h:REGEX   keep matching lines, highlight matches
  fn:REGEX                     keep matching lines, no highlight
  n:REGEX                      drop matching lines
  s:/REGEX/REPLACEMENT/        rewrite matches (any delimiter; \\1, \\g<name>)
  ft:BEGIN-END                 keep lines whose leading H:MM:SS.f time is in range
Patterns are case-insensitive Python regular expressions.
Use '--' before commands that start with '-'.
"""


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize logging, color and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Explicit -v/-q win over LINEMARK_LOG_LEVEL; warnings are shown by default.
    level: int = resolve_verbosity(verbose, quiet) or resolve_env_log_level() or logging.WARNING
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    enable_color: bool = resolve_color_mode(
        color_mode_override=ColorMode.from_flags(color_mode, no_color)
    )
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def build_pipeline(commands: tuple[str, ...], config: Config) -> Pipeline:
    """Build the pipeline, translating core construction errors for the CLI.

    Raises:
        LinemarkCommandError: If any command token is invalid.
    """
    try:
        return Pipeline.build(
            commands,
            palette=config.palette,
            time_range_scope=config.time_range_scope,
        )
    except LinemarkError as e:
        logger.debug("Pipeline construction failed: %s", e)
        raise LinemarkCommandError.from_core(e) from e


def print_pipeline(console: ClickConsole, pipeline: Pipeline) -> None:
    """Print one line per stage: index, token, meaning and highlight color."""
    if not pipeline.stages:
        console.print("(empty pipeline: every line passes through unchanged)")
    for index, stage in enumerate(pipeline.stages):
        line: str = f"#{index}  {stage.token}  {describe_stage(stage)}"
        color = pipeline.colors.get(index)
        if color is not None:
            line += f"  [{color.color(color.value)}]"
        console.print(line)
    console.print(f"time-range scope: {pipeline.time_range_scope.value}")


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.argument("commands", nargs=-1)
@pipeline_options
@common_color_options
@common_verbose_options
@click.version_option(LINEMARK_VERSION, "--version", prog_name="linemark")
@click.pass_context
def cli(
    ctx: click.Context,
    commands: tuple[str, ...],
    input_path: str,
    config_path: str | None,
    time_range_scope: str | None,
    show_pipeline: bool,
    color_mode: ColorMode | None,
    no_color: bool,
    verbose: int,
    quiet: int,
) -> None:
    """Filter, rewrite and highlight lines of text, one command at a time.

    Reads lines from standard input (or --input), runs each line through
    COMMANDS in order and writes the surviving lines to standard output.
    """
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    try:
        config: Config = load_config(
            Path(config_path) if config_path else None,
            time_range_scope=time_range_scope,
        )
    except (ConfigLoadError, ConfigValueError) as e:
        raise LinemarkConfigError(str(e)) from e

    pipeline: Pipeline = build_pipeline(commands, config)

    if show_pipeline:
        print_pipeline(console, pipeline)
        return

    enable_color: bool = ctx.obj["color_enabled"]
    try:
        with open_input(input_path) as stream:
            for annotated in run_stream(pipeline, stream):
                console.write_line(render_line(annotated, enabled=enable_color))
    except FileNotFoundError as e:
        raise LinemarkFileNotFoundError(f"{input_path}: no such file") from e
    except BrokenPipeError:
        # Downstream closed the pipe (e.g. `| head`); silence the interpreter's final flush.
        devnull: int = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        ctx.exit(ExitCode.SUCCESS)
    except OSError as e:
        raise LinemarkIOError(f"{input_path}: {e.strerror or e}") from e


if __name__ == "__main__":
    cli()
