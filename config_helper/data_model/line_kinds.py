# config_helper/data_model/line_kinds.py
"""
Classification of raw configuration lines.

The reader asks these predicates which tokenizer (comment, section or value)
a line belongs to before handing it over; they never raise.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..utilities.core_util import is_null_or_whitespace
from .config_defines import (
    COMMENT_MARKERS,
    SECTION_PREFIX,
    SECTION_SUFFIX,
    STRING_MARKER,
    VALUE_MARKERS,
)


class LineKind(Enum):
    HOLLOW = "hollow"
    COMMENT = "comment"
    SECTION = "section"
    VALUE = "value"
    OTHER = "other"


def is_hollow(line: Optional[str]) -> bool:
    return is_null_or_whitespace(line)


def is_comment(line: Optional[str]) -> bool:
    if is_hollow(line):
        return False
    return line.lstrip()[0] in COMMENT_MARKERS  # type: ignore[union-attr]


def is_section(line: Optional[str]) -> bool:
    if is_hollow(line):
        return False
    text = line.strip()  # type: ignore[union-attr]
    return text.startswith(SECTION_PREFIX) and SECTION_SUFFIX in text


def is_value(line: Optional[str]) -> bool:
    """A label followed by a separator; quotes or comments may not precede it."""
    if is_hollow(line):
        return False
    for ch in line.strip():  # type: ignore[union-attr]
        if ch == STRING_MARKER or ch in COMMENT_MARKERS:
            return False
        if ch in VALUE_MARKERS:
            return True
    return False


def classify_line(line: Optional[str]) -> LineKind:
    if is_hollow(line):
        return LineKind.HOLLOW
    if is_comment(line):
        return LineKind.COMMENT
    if is_section(line):
        return LineKind.SECTION
    if is_value(line):
        return LineKind.VALUE
    return LineKind.OTHER
