# config_helper/data_model/entities/config_others.py
from __future__ import annotations

from .config_array import ConfigArray
from .config_other import ConfigOther


class ConfigOthers(ConfigArray[ConfigOther]):
    """Unclassified lines found in front of the first section."""

    def _key_of(self, item: ConfigOther) -> str:
        return item.text

    def _assign_key(self, item: ConfigOther, key: str) -> None:
        item.text = key

    def _create(self, text: str) -> ConfigOther:
        return ConfigOther(text)
