"""Tests for placeholder processors."""

from __future__ import annotations

import pytest

from dmlkit.sql.processors import (
    BuilderProcessor,
    DefaultProcessor,
    FormatProcessor,
    NumericProcessor,
    get_processor,
)


def test_default_processor_always_question_mark():
    """DefaultProcessor ignores field names and begin_params."""
    proc = DefaultProcessor()
    assert proc.next_param("id") == "?"
    proc.begin_params()
    assert proc.next_param("") == "?"
    assert proc.next_param("name") == "?"


def test_numeric_processor_counts_from_one():
    proc = NumericProcessor()
    proc.begin_params()
    assert [proc.next_param("f") for _ in range(3)] == ["$1", "$2", "$3"]


def test_numeric_processor_begin_params_resets():
    """begin_params restarts numbering for the next statement."""
    proc = NumericProcessor()
    proc.begin_params()
    proc.next_param("a")
    proc.next_param("b")
    proc.begin_params()
    assert proc.next_param("a") == "$1"


def test_numeric_processor_without_reset_carries_over():
    """A second statement without begin_params continues the first's counter."""
    proc = NumericProcessor()
    proc.begin_params()
    assert proc.next_param("a") == "$1"
    assert proc.next_param("b") == "$2"

    assert proc.next_param("c") == "$3"
    assert proc.next_param("d") == "$4"


def test_format_processor():
    proc = FormatProcessor()
    proc.begin_params()
    assert proc.next_param("x") == "%s"


def test_processors_satisfy_protocol():
    for proc in (DefaultProcessor(), NumericProcessor(), FormatProcessor()):
        assert isinstance(proc, BuilderProcessor)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("qmark", DefaultProcessor),
        ("default", DefaultProcessor),
        ("numeric", NumericProcessor),
        ("NUMERIC", NumericProcessor),
        ("format", FormatProcessor),
    ],
)
def test_get_processor(name, expected):
    assert isinstance(get_processor(name), expected)


def test_get_processor_returns_fresh_instances():
    """Numeric counters must not be shared between lookups."""
    assert get_processor("numeric") is not get_processor("numeric")


def test_get_processor_unknown():
    with pytest.raises(ValueError, match="Unknown paramstyle 'named'"):
        get_processor("named")
