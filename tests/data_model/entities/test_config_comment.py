# tests/data_model/entities/test_config_comment.py
"""
Unit tests for ConfigComment.

Coverage: parsing of both comment markers, blank input, malformed input,
trimming, validity and the canonical output form.
"""

from __future__ import annotations

import pytest

from config_helper.data_model.config_settings import WINDOWS_SETTINGS
from config_helper.data_model.entities import ConfigComment
from config_helper.exceptions import ConfigFormatError


@pytest.mark.parametrize(
    "line,marker,text,output",
    [
        ("# comment", "#", "comment", "# comment"),
        ("#comment", "#", "comment", "# comment"),
        ("; comment", ";", "comment", "; comment"),
        ("   #   padded text   ", "#", "padded text", "# padded text"),
        ("# a # b", "#", "a # b", "# a # b"),
    ],
)
def test_parse_recognizes_marker_and_text(line, marker, text, output):
    """Positive: marker is the first character, text is the trimmed remainder."""
    # Act
    comment = ConfigComment.parse(line)

    # Assert
    assert comment is not None
    assert comment.marker == marker
    assert comment.text == text
    assert comment.to_output() == output


@pytest.mark.parametrize("line", [None, "", "   "])
def test_parse_blank_returns_none(line):
    """Edge: blank input means 'no comment', not an error."""
    # Act / Assert
    assert ConfigComment.parse(line) is None


def test_parse_without_marker_raises_format_error():
    """Negative: text that does not start with a comment marker is malformed."""
    # Act / Assert
    with pytest.raises(ConfigFormatError):
        ConfigComment.parse("not a comment")


def test_parse_marker_only_gives_invalid_comment():
    """Edge: a lone marker parses to a comment whose text is empty."""
    # Act
    comment = ConfigComment.parse("#")

    # Assert
    assert comment is not None
    assert comment.text == ""
    assert comment.is_valid is False


def test_try_parse_reports_failure_instead_of_raising():
    # Act
    ok_bad, bad = ConfigComment.try_parse("oops")
    ok_good, good = ConfigComment.try_parse("; fine")

    # Assert
    assert (ok_bad, bad) == (False, None)
    assert ok_good is True and good == ConfigComment("fine", ";")


def test_text_setter_trims_and_accepts_none():
    # Arrange
    comment = ConfigComment("  x  ")

    # Act
    before = comment.text
    comment.text = None  # type: ignore[assignment]

    # Assert
    assert before == "x"
    assert comment.text == ""
    assert comment.is_valid is False


def test_default_marker_comes_from_settings():
    # Act
    default = ConfigComment("a")
    windows = ConfigComment("a", settings=WINDOWS_SETTINGS)

    # Assert
    assert default.marker == "#"
    assert windows.marker == ";"


def test_invalid_marker_is_rejected():
    # Act / Assert
    with pytest.raises(ValueError):
        ConfigComment("a", marker="!")
