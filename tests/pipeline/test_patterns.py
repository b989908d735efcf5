# topmark:header:start
#
#   project      : LineMark
#   file         : test_patterns.py
#   file_relpath : tests/pipeline/test_patterns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the pattern compiler (`linemark.pipeline.patterns`)."""

from __future__ import annotations

import re

import pytest

from linemark.core.errors import InvalidPatternError
from linemark.pipeline.patterns import CompiledPattern, compile_pattern
from tests.conftest import parametrize


def test_matching_is_case_insensitive() -> None:
    """It should match regardless of letter case."""
    pattern: CompiledPattern = compile_pattern("SourceBuffer")

    assert pattern.matches("0:00:05.0 sourcebuffer true")
    assert pattern.matches("SOURCEBUFFER")
    assert not pattern.matches("source buffer")


def test_spans_are_non_overlapping_and_ordered() -> None:
    """It should report every non-overlapping match, left to right."""
    pattern: CompiledPattern = compile_pattern("aa")

    assert pattern.spans("aaaaa AA") == [(0, 2), (2, 4), (6, 8)]


def test_empty_pattern_matches_but_yields_no_spans() -> None:
    """An empty pattern matches every line; its zero-width matches carry no highlight."""
    pattern: CompiledPattern = compile_pattern("")

    assert pattern.matches("")
    assert pattern.matches("anything")
    assert pattern.spans("anything") == []


@parametrize(
    "template, expected",
    [
        (r"<\1>", "<error> 42"),
        (r"<\g<1>>", "<error> 42"),
        (r"\g<word>!", "error! 42"),
        ("X", "X 42"),
    ],
)
def test_substitute_supports_group_references(template: str, expected: str) -> None:
    """It should expand numbered and named group references."""
    pattern: CompiledPattern = compile_pattern(r"(?P<word>[a-z]+)")

    assert pattern.substitute(template, "ERROR 42".lower()) == expected


def test_check_template_rejects_unknown_groups() -> None:
    """Bad group references are detected without needing a matching line."""
    pattern: CompiledPattern = compile_pattern(r"(a)")

    with pytest.raises(re.error):
        pattern.check_template(r"\2")
    with pytest.raises(IndexError):
        pattern.check_template(r"\g<missing>")


@parametrize("raw", ["(", "[a-", "*x", "a{2,1}"])
def test_invalid_pattern_raises(raw: str) -> None:
    """It should raise InvalidPatternError carrying the source and the regex error."""
    with pytest.raises(InvalidPatternError) as excinfo:
        compile_pattern(raw)

    assert excinfo.value.raw == raw
    assert excinfo.value.reason
    assert raw in str(excinfo.value)
