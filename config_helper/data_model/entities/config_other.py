# config_helper/data_model/entities/config_other.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ...utilities.core_util import is_null_or_whitespace


class ConfigOther:
    """A non-blank line that is neither a comment, a section nor a value."""

    def __init__(self, text: Optional[str] = None) -> None:
        self.text = text  # type: ignore[assignment]

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: Optional[str]) -> None:
        self._text = "" if value is None else value.strip()

    @property
    def is_valid(self) -> bool:
        return not is_null_or_whitespace(self._text)

    def to_output(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigOther):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"ConfigOther({self._text!r})"


if TYPE_CHECKING:
    from ..interfaces import IConfigEntity

    _is_i_config_entity: type[IConfigEntity] = ConfigOther
