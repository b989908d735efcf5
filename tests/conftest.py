# topmark:header:start
#
#   project      : LineMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LineMark test suite.

This file sets up typed wrappers around pytest decorators, a few shared
fixtures, and verbose (TRACE) logging for test runs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from linemark.config import logging
from linemark.pipeline.engine import Pipeline

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from linemark.pipeline.context import AnnotatedLine

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_linemark_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the developer's shell environment from leaking into test runs.

    Clears the log-level and color environment variables so CLI tests see the
    same defaults everywhere. The CLI reconfigures the root logger on every
    invocation, so TRACE logging is restored after each test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.

    Yields:
        None: Control to the test.
    """
    for var in ("LINEMARK_LOG_LEVEL", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(var, raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_lines(commands: Sequence[str], lines: Sequence[str], **kwargs: Any) -> list[AnnotatedLine]:
    """Build a pipeline from ``commands`` and return the surviving lines.

    Args:
        commands (Sequence[str]): Command tokens.
        lines (Sequence[str]): Input lines, without terminators.
        **kwargs (Any): Forwarded to `Pipeline.build`.

    Returns:
        list[AnnotatedLine]: One record per surviving line, in input order.
    """
    pipeline: Pipeline = Pipeline.build(commands, **kwargs)
    results: list[AnnotatedLine] = []
    for line in lines:
        annotated: AnnotatedLine | None = pipeline.evaluate(line)
        if annotated is not None:
            results.append(annotated)
    return results


def kept_texts(commands: Sequence[str], lines: Sequence[str], **kwargs: Any) -> list[str]:
    """Return only the texts of the lines that survive ``commands``."""
    return [a.text for a in run_lines(commands, lines, **kwargs)]
