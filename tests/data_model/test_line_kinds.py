# tests/data_model/test_line_kinds.py
from __future__ import annotations

import pytest

from config_helper.data_model.line_kinds import (
    LineKind,
    classify_line,
    is_comment,
    is_section,
    is_value,
)


@pytest.mark.parametrize(
    "line,kind",
    [
        (None, LineKind.HOLLOW),
        ("", LineKind.HOLLOW),
        ("   \t", LineKind.HOLLOW),
        ("# comment", LineKind.COMMENT),
        ("   ; comment", LineKind.COMMENT),
        ("#label=value", LineKind.COMMENT),
        ("[section]", LineKind.SECTION),
        ("  [section] # c", LineKind.SECTION),
        ("[section]=x", LineKind.SECTION),
        ("[unclosed", LineKind.OTHER),
        ("label=value", LineKind.VALUE),
        ("label:value", LineKind.VALUE),
        ("=value", LineKind.VALUE),
        ('"label"=value', LineKind.OTHER),
        ("label#=value", LineKind.OTHER),
        ("plain text", LineKind.OTHER),
    ],
)
def test_classify_line(line, kind):
    # Act / Assert
    assert classify_line(line) is kind


def test_predicates_reject_blank():
    # Act / Assert
    assert not is_comment("  ")
    assert not is_section(None)
    assert not is_value("")


def test_value_predicate_stops_at_first_marker():
    """Positive: quotes and comment markers after the separator do not matter."""
    # Act / Assert
    assert is_value('label="a # b"')
    assert is_value("label=x;y")
