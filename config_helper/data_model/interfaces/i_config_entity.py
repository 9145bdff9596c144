# config_helper/data_model/interfaces/i_config_entity.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .i_config_item import IConfigItem


@runtime_checkable
class IConfigEntity(IConfigItem, Protocol):
    """A single line-level entity (comment, other, value) that renders to one line."""

    def to_output(self) -> str: ...
