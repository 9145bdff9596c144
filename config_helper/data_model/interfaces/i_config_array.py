# config_helper/data_model/interfaces/i_config_array.py
"""
Collection contract shared by headers, others, sections (their values) and
content (its sections).

Positional access
    ``array[i]`` returns ``None`` when ``i`` is out of range (negative indices
    are out of range). ``array[i] = item`` replaces in range; otherwise the
    item is inserted at the clamped index (``< 0`` prepends, ``>= count``
    appends).

Keyed access
    ``array["key"]`` finds the first item whose identifying field matches the
    key case-insensitively. ``array["key"] = item`` replaces that item, or
    appends when nothing matches; a blank identifying field on ``item`` is
    filled in from the key.

``None`` is never a valid item.
"""

from __future__ import annotations

from typing import Iterator, Optional, TypeVar, Union

from typing_extensions import Protocol, runtime_checkable

from .i_config_item import IConfigItem

T = TypeVar("T")


@runtime_checkable
class IConfigArray(IConfigItem, Protocol[T]):
    @property
    def count(self) -> int: ...

    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[T]: ...
    def __getitem__(self, key: Union[int, str]) -> Optional[T]: ...
    def __setitem__(self, key: Union[int, str], item: T) -> None: ...

    def find(self, key: str) -> Optional[T]: ...
    def insert(self, index: int, item: Union[T, str]) -> T: ...
    def append(self, item: Union[T, str]) -> T: ...
    def prepend(self, item: Union[T, str]) -> T: ...
    def remove(self, key: Union[int, str]) -> Optional[T]: ...
    def clear(self) -> None: ...

    def to_output(self) -> Iterator[str]: ...
