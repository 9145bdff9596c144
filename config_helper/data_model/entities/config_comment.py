# config_helper/data_model/entities/config_comment.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ...exceptions import ConfigFormatError
from ...utilities.core_util import is_null_or_whitespace
from ..config_defines import COMMENT_MARKERS
from ..config_settings import ConfigSettings, resolve_settings


class ConfigComment:
    """
    A comment: one of the comment markers followed by free text.

    Used on its own as a header line and as the trailing part of section and
    value lines. The text is always stored trimmed; a comment with blank text
    is allowed but not valid.
    """

    def __init__(
        self,
        text: Optional[str] = None,
        marker: Optional[str] = None,
        settings: Optional[ConfigSettings] = None,
    ) -> None:
        self.marker = marker if marker is not None else resolve_settings(settings).comment_marker
        self.text = text  # type: ignore[assignment]

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: Optional[str]) -> None:
        self._text = "" if value is None else value.strip()

    @property
    def marker(self) -> str:
        return self._marker

    @marker.setter
    def marker(self, value: str) -> None:
        if value not in COMMENT_MARKERS:
            raise ValueError(
                f"Comment marker must be one of these characters: {', '.join(COMMENT_MARKERS)}."
            )
        self._marker = value

    @property
    def is_valid(self) -> bool:
        return not is_null_or_whitespace(self._text)

    def to_output(self) -> str:
        return f"{self._marker} {self._text}"

    @classmethod
    def parse(cls, line: Optional[str]) -> Optional[ConfigComment]:
        """
        Parse ``<marker><text>``.

        Returns ``None`` for blank input and raises ``ConfigFormatError`` when
        the first non-blank character is not a comment marker.
        """
        if is_null_or_whitespace(line):
            return None
        text = line.strip()  # type: ignore[union-attr]
        if text[0] not in COMMENT_MARKERS:
            raise ConfigFormatError(f"Comment must start with a comment marker: {line!r}")
        return cls(text[1:], text[0])

    @classmethod
    def try_parse(cls, line: Optional[str]) -> tuple[bool, Optional[ConfigComment]]:
        try:
            return True, cls.parse(line)
        except ValueError:
            return False, None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigComment):
            return NotImplemented
        return self._marker == other._marker and self._text == other._text

    def __hash__(self) -> int:
        return hash((self._marker, self._text))

    def __repr__(self) -> str:
        return f"ConfigComment(text={self._text!r}, marker={self._marker!r})"


if TYPE_CHECKING:
    from ..interfaces import IConfigEntity

    _is_i_config_entity: type[IConfigEntity] = ConfigComment
