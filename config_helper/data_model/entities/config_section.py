# config_helper/data_model/entities/config_section.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Union

from ...exceptions import ConfigFormatError
from ...utilities.core_util import equals_ignore_case, is_null_or_whitespace
from ..config_defines import SECTION_PREFIX, SECTION_SUFFIX
from ..config_settings import ConfigSettings, resolve_settings
from .config_array import ConfigArray
from .config_comment import ConfigComment
from .config_value import ConfigValue


class ConfigSection(ConfigArray[ConfigValue]):
    """
    ``[title] [<comment>]`` followed by its values.

    The section itself is the ordered collection of its values; lookup by
    label ignores case.
    """

    def __init__(
        self,
        title: str,
        comment: Union[ConfigComment, str, None] = None,
        values: Optional[Iterable[Union[ConfigValue, str]]] = None,
        settings: Optional[ConfigSettings] = None,
    ) -> None:
        self._settings = resolve_settings(settings)
        self.title = title
        if isinstance(comment, str):
            comment = ConfigComment(comment, settings=self._settings)
        self.comment: Optional[ConfigComment] = comment
        super().__init__(values)

    def _key_of(self, item: ConfigValue) -> str:
        return item.label

    def _assign_key(self, item: ConfigValue, key: str) -> None:
        item.label = key

    def _create(self, text: str) -> ConfigValue:
        return ConfigValue(text, settings=self._settings)

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: Optional[str]) -> None:
        if value is None or is_null_or_whitespace(value):
            raise ValueError("Title must not be None, empty or consist only of white spaces.")
        self._title = value.strip()

    @property
    def values(self) -> List[ConfigValue]:
        return list(self._items)

    @property
    def is_valid(self) -> bool:
        return not is_null_or_whitespace(self._title)

    def header_line(self) -> str:
        title = self._title.replace(SECTION_PREFIX, "").replace(SECTION_SUFFIX, "")
        result = f"{SECTION_PREFIX}{title}{SECTION_SUFFIX}"
        if self.comment is not None and self.comment.is_valid:
            result += " " + self.comment.to_output()
        return result

    def to_output(self) -> Iterator[str]:
        yield self.header_line()
        for value in self._items:
            yield value.to_output()
        yield ""

    @classmethod
    def parse(cls, line: Optional[str]) -> ConfigSection:
        if line is None or is_null_or_whitespace(line):
            raise ValueError("Line must not be None, empty or consist only of white spaces.")
        text = line.strip()
        if not text.startswith(SECTION_PREFIX):
            raise ConfigFormatError(f"Section must start with {SECTION_PREFIX!r}: {line!r}")
        end = text.find(SECTION_SUFFIX)
        if end < 0:
            raise ConfigFormatError(f"Section is not closed by {SECTION_SUFFIX!r}: {line!r}")
        title = text[1:end].strip()
        if not title:
            raise ConfigFormatError(f"Section title is missing: {line!r}")
        return cls(title, ConfigComment.parse(text[end + 1 :]))

    @classmethod
    def try_parse(cls, line: Optional[str]) -> tuple[bool, Optional[ConfigSection]]:
        try:
            return True, cls.parse(line)
        except ValueError:
            return False, None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigSection):
            return NotImplemented
        return equals_ignore_case(self._title, other._title)

    def __hash__(self) -> int:
        return hash(self._title.casefold())

    def __repr__(self) -> str:
        return f"ConfigSection(title={self._title!r}, values={self._items!r})"


if TYPE_CHECKING:
    from ..interfaces import IConfigArray

    _is_i_config_array: type[IConfigArray[ConfigValue]] = ConfigSection
