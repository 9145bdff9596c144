# config_helper/data_model/entities/config_header.py
from __future__ import annotations

from typing import Iterable, List, Optional, Union

from ...utilities.core_util import is_null_or_whitespace
from ..config_defines import (
    COMMENT_MARKERS,
    FILE_DATE_PLACEHOLDER,
    FILE_NAME_PLACEHOLDER,
    SECTION_PREFIX,
    SECTION_SUFFIX,
    STRING_MARKER,
    VALUE_MARKERS,
)
from ..config_settings import ConfigSettings, resolve_settings
from .config_array import ConfigArray
from .config_comment import ConfigComment

_RULER = "~" * 77


def _framed_lines(title: Optional[str], placeholders: bool) -> List[str]:
    lines = [_RULER]
    if not is_null_or_whitespace(title):
        lines.append(title.strip())  # type: ignore[union-attr]
    if placeholders:
        lines.append(f"File name: {FILE_NAME_PLACEHOLDER}")
        lines.append(f"File date: {FILE_DATE_PLACEHOLDER}")
    if len(lines) > 1:
        lines.append(_RULER)
    return lines


def _rule_lines() -> List[str]:
    c1, c2 = COMMENT_MARKERS
    s1, s2 = SECTION_PREFIX, SECTION_SUFFIX
    v1, v2 = VALUE_MARKERS
    return [
        "Header rules:",
        "- Each header line must start with a comment marker.",
        "- Each of the header lines must be a pure comment line.",
        "- Each header comment line must be in front on any other content.",
        "Comment Rules:",
        f"- Comments can be tagged by character '{c1}' or by character '{c2}'.",
        "- Comments can be placed in a single line but only as header type.",
        "- Comments can be placed at the end of line of each section.",
        "- Comments can be placed at the end of line of each value-data-pair.",
        "Section Rules:",
        f"- Sections are enclosed in '{s1}' and '{s2}'.",
        "- Section names should not include white spaces.",
        "Value Rules:",
        "- Values can have an empty data part.",
        "- Value names should not include white spaces.",
        "- Values without a section are treated as 'others'.",
        f"- Values are built as pair of 'name{v1}data' or of 'name{v2}data'.",
        f"- Value data that use '{c1}', '{c2}', '{s1}', '{s2}', '{v1}' or '{v2}' "
        f"must be enclosed by '{STRING_MARKER}'.",
        _RULER,
    ]


class ConfigHeader(ConfigArray[ConfigComment]):
    """The contiguous block of comment lines in front of all other content."""

    def __init__(
        self,
        comments: Optional[Iterable[Union[ConfigComment, str]]] = None,
        settings: Optional[ConfigSettings] = None,
    ) -> None:
        self._settings = resolve_settings(settings)
        super().__init__(comments)

    def _key_of(self, item: ConfigComment) -> str:
        return item.text

    def _assign_key(self, item: ConfigComment, key: str) -> None:
        item.text = key

    def _create(self, text: str) -> ConfigComment:
        return ConfigComment(text, settings=self._settings)

    @classmethod
    def create_default(
        cls,
        title: Optional[str] = None,
        placeholders: bool = False,
        settings: Optional[ConfigSettings] = None,
    ) -> ConfigHeader:
        """Framed title and placeholder lines followed by the format rules."""
        return cls(_framed_lines(title, placeholders) + _rule_lines(), settings)

    @classmethod
    def create_standard(
        cls,
        title: Optional[str] = None,
        placeholders: bool = False,
        settings: Optional[ConfigSettings] = None,
    ) -> ConfigHeader:
        """Framed title and placeholder lines only."""
        lines = _framed_lines(title, placeholders)
        if len(lines) == 1:
            lines.append(_RULER)
        return cls(lines, settings)
