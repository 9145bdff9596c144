# config_helper/data_model/entities/config_array.py
"""
Ordered, case-insensitively keyed collection shared by every container of the
document model.

Subclasses define how an item is identified (``_key_of``), how a blank
identifier is filled in from a key (``_assign_key``) and how a plain string is
turned into an item (``_create``). Everything else (clamped positional
access, keyed replace-or-append, insert/append/prepend/remove) lives here.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
    Union,
)

from ...utilities.core_util import equals_ignore_case, is_null_or_whitespace

T = TypeVar("T")


def _require_key(key: Optional[str]) -> str:
    if key is None or is_null_or_whitespace(key):
        raise ValueError("Key must not be None, empty or consist only of white spaces.")
    return key.strip()


class ConfigArray(Generic[T]):
    def __init__(self, items: Optional[Iterable[Union[T, str]]] = None) -> None:
        self._items: List[T] = []
        for item in items or ():
            self.append(item)

    # region Item hooks

    def _key_of(self, item: T) -> str:
        raise NotImplementedError

    def _assign_key(self, item: T, key: str) -> None:
        raise NotImplementedError

    def _create(self, text: str) -> T:
        raise NotImplementedError

    def _coerce(self, item: Union[T, str, None]) -> T:
        if item is None:
            raise TypeError("Item must not be None.")
        if isinstance(item, str):
            return self._create(item)
        return item

    # endregion Item hooks

    @property
    def is_valid(self) -> bool:
        return len(self._items) > 0

    @property
    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, key: Union[int, str]) -> Optional[T]:
        if isinstance(key, int):
            if 0 <= key < len(self._items):
                return self._items[key]
            return None
        return self.find(key)

    def __setitem__(self, key: Union[int, str], item: Union[T, str]) -> None:
        if isinstance(key, int):
            if 0 <= key < len(self._items):
                self._items[key] = self._coerce(item)
            else:
                self.insert(key, item)
            return

        name = _require_key(key)
        entity = self._coerce(item)
        if is_null_or_whitespace(self._key_of(entity)):
            self._assign_key(entity, name)
        index = self._index_of(name)
        if index < 0:
            self._items.append(entity)
        else:
            self._items[index] = entity

    def _index_of(self, key: str) -> int:
        for index, item in enumerate(self._items):
            if equals_ignore_case(self._key_of(item), key):
                return index
        return -1

    def find(self, key: Optional[str]) -> Optional[T]:
        """Return the first item whose identifier matches ``key`` ignoring case."""
        index = self._index_of(_require_key(key))
        return self._items[index] if index >= 0 else None

    def insert(self, index: int, item: Union[T, str]) -> T:
        """Insert at ``index`` clamped to ``[0, count]`` and return the stored item."""
        entity = self._coerce(item)
        index = max(0, min(index, len(self._items)))
        self._items.insert(index, entity)
        return entity

    def append(self, item: Union[T, str]) -> T:
        return self.insert(len(self._items), item)

    def prepend(self, item: Union[T, str]) -> T:
        return self.insert(0, item)

    def remove(self, key: Union[int, str]) -> Optional[T]:
        """Remove by position or by identifier; returns the removed item or ``None``."""
        if isinstance(key, int):
            if 0 <= key < len(self._items):
                return self._items.pop(key)
            return None
        index = self._index_of(_require_key(key))
        return self._items.pop(index) if index >= 0 else None

    def clear(self) -> None:
        self._items.clear()

    def to_output(self) -> Iterator[str]:
        if not self.is_valid:
            return
        for item in self._items:
            yield item.to_output()  # type: ignore[attr-defined]
        yield ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


if TYPE_CHECKING:
    from ..interfaces import IConfigArray

    _is_i_config_array: type[IConfigArray[object]] = ConfigArray
