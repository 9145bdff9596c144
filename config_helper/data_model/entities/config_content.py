# config_helper/data_model/entities/config_content.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Union

from ..config_settings import ConfigSettings, resolve_settings
from .config_array import ConfigArray
from .config_header import ConfigHeader
from .config_others import ConfigOthers
from .config_section import ConfigSection


class ConfigContent(ConfigArray[ConfigSection]):
    """
    A whole configuration document: header, others and the ordered sections.

    ``file_name`` is the source (or target) name substituted for the file name
    placeholder when the content is written.
    """

    def __init__(
        self,
        sections: Optional[Iterable[Union[ConfigSection, str]]] = None,
        header: Optional[ConfigHeader] = None,
        others: Optional[ConfigOthers] = None,
        file_name: Optional[str] = None,
        settings: Optional[ConfigSettings] = None,
    ) -> None:
        self._settings = resolve_settings(settings)
        self.header = header  # type: ignore[assignment]
        self.others = others if others is not None else ConfigOthers()
        self.file_name = file_name
        super().__init__(sections)

    def _key_of(self, item: ConfigSection) -> str:
        return item.title

    def _assign_key(self, item: ConfigSection, key: str) -> None:
        item.title = key

    def _create(self, text: str) -> ConfigSection:
        return ConfigSection(text, settings=self._settings)

    @property
    def settings(self) -> ConfigSettings:
        return self._settings

    @property
    def header(self) -> ConfigHeader:
        return self._header

    @header.setter
    def header(self, value: Optional[ConfigHeader]) -> None:
        self._header = value if value is not None else ConfigHeader(settings=self._settings)

    @property
    def sections(self) -> list[ConfigSection]:
        return list(self._items)

    def to_output(self) -> Iterator[str]:
        yield from self._header.to_output()
        if self.others.is_valid:
            yield from self.others.to_output()
        for section in self._items:
            yield from section.to_output()

    def __repr__(self) -> str:
        return (
            f"ConfigContent(file_name={self.file_name!r}, header={len(self._header)}, "
            f"others={len(self.others)}, sections={self._items!r})"
        )


if TYPE_CHECKING:
    from ..interfaces import IConfigArray

    _is_i_config_array: type[IConfigArray[ConfigSection]] = ConfigContent
