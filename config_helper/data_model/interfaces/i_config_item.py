# config_helper/data_model/interfaces/i_config_item.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class IConfigItem(Protocol):
    @property
    def is_valid(self) -> bool: ...
