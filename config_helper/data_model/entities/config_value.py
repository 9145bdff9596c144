# config_helper/data_model/entities/config_value.py
"""
Label/value pair of a section: ``label<marker>value [<comment>]``.

Parsing rules
-------------
- The label ends at the first value marker (``:`` or ``=``). A quote or a
  comment marker in front of it is a format error; labels are never quoted.
- After the marker, ``"`` toggles quoting and is dropped from the value.
  A comment marker outside quoting starts the trailing comment.
- Label and value are trimmed; an empty label is a format error.

Rendering
---------
``label: value`` for ``:`` and ``label = value`` for ``=``. The value is wrapped
in quotes when it contains a comment or value marker so that it reads back
unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Union

from ...exceptions import ConfigFormatError
from ...utilities.core_util import equals_ignore_case, is_null_or_whitespace
from ..config_defines import COMMENT_MARKERS, STRING_MARKER, VALUE_MARKERS
from ..config_settings import ConfigSettings, resolve_settings
from .config_comment import ConfigComment

_QUOTE_TRIGGERS = frozenset(COMMENT_MARKERS + VALUE_MARKERS)


class ConfigValue:
    def __init__(
        self,
        label: str,
        value: Optional[str] = None,
        marker: Optional[str] = None,
        comment: Union[ConfigComment, str, None] = None,
        settings: Optional[ConfigSettings] = None,
    ) -> None:
        profile = resolve_settings(settings)
        self.label = label
        self.value = value  # type: ignore[assignment]
        self.marker = marker if marker is not None else profile.value_marker
        if isinstance(comment, str):
            comment = ConfigComment(comment, settings=profile)
        self.comment = comment

    # region Properties

    @property
    def label(self) -> str:
        return self._label

    @label.setter
    def label(self, value: Optional[str]) -> None:
        if value is None or is_null_or_whitespace(value):
            raise ValueError("Label must not be None, empty or consist only of white spaces.")
        self._label = value.strip()

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: Optional[str]) -> None:
        self._value = "" if value is None else value.strip()

    @property
    def marker(self) -> str:
        return self._marker

    @marker.setter
    def marker(self, value: str) -> None:
        if value not in VALUE_MARKERS:
            raise ValueError(
                f"Value marker must be one of these characters: {', '.join(VALUE_MARKERS)}."
            )
        self._marker = value

    @property
    def is_valid(self) -> bool:
        return not is_null_or_whitespace(self._label)

    # endregion Properties

    # region Output

    def _fixup_marker(self) -> str:
        return ": " if self._marker == ":" else f" {self._marker} "

    def _fixup_value(self) -> str:
        if any(ch in _QUOTE_TRIGGERS for ch in self._value):
            return f"{STRING_MARKER}{self._value}{STRING_MARKER}"
        return self._value

    def to_output(self) -> str:
        result = self._label + self._fixup_marker() + self._fixup_value()
        if self.comment is not None and self.comment.is_valid:
            if self._value:
                result += " "
            result += self.comment.to_output()
        return result

    # endregion Output

    # region Parsing

    @classmethod
    def parse(cls, line: Optional[str]) -> ConfigValue:
        if line is None or is_null_or_whitespace(line):
            raise ValueError("Line must not be None, empty or consist only of white spaces.")

        text = line.strip()
        label: List[str] = []
        value: List[str] = []
        marker: Optional[str] = None
        remainder: Optional[str] = None
        quoting = False

        for index, ch in enumerate(text):
            if marker is None:
                if ch in COMMENT_MARKERS:
                    raise ConfigFormatError(f"Comment marker in front of the label: {line!r}")
                if ch == STRING_MARKER:
                    raise ConfigFormatError(f"Labels must not be quoted: {line!r}")
                if ch in VALUE_MARKERS:
                    marker = ch
                else:
                    label.append(ch)
                continue
            if ch == STRING_MARKER:
                quoting = not quoting
                continue
            if not quoting and ch in COMMENT_MARKERS:
                remainder = text[index:]
                break
            value.append(ch)

        if marker is None:
            raise ConfigFormatError(f"Value marker is missing: {line!r}")
        name = "".join(label).strip()
        if not name:
            raise ConfigFormatError(f"Label is missing: {line!r}")

        return cls(name, "".join(value), marker, ConfigComment.parse(remainder))

    @classmethod
    def try_parse(cls, line: Optional[str]) -> tuple[bool, Optional[ConfigValue]]:
        try:
            return True, cls.parse(line)
        except ValueError:
            return False, None

    # endregion Parsing

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigValue):
            return NotImplemented
        return equals_ignore_case(self._label, other._label)

    def __hash__(self) -> int:
        return hash(self._label.casefold())

    def __repr__(self) -> str:
        return (
            f"ConfigValue(label={self._label!r}, value={self._value!r}, "
            f"marker={self._marker!r}, comment={self.comment!r})"
        )


if TYPE_CHECKING:
    from ..interfaces import IConfigEntity

    _is_i_config_entity: type[IConfigEntity] = ConfigValue
