#!/usr/bin/env python3
"""
Core Utilities

Features:
- String utilities
- File I/O helpers
- Type-hint unwrapping (Optional / Annotated) for the converter registry and binder
"""

from __future__ import annotations

import types
from os import PathLike
from pathlib import Path
from typing import (
    IO,
    Annotated,
    Any,
    Literal,
    Optional,
    Union,
    get_args,
    get_origin,
    overload,
)

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def is_null_or_empty(s: Optional[str]) -> bool:
    """Check if a string is None or empty (whitespace counts as content)."""
    return s is None or s == ""


def equals_ignore_case(a: Optional[str], b: Optional[str]) -> bool:
    """Culture-invariant, case-insensitive string comparison (None == None)."""
    if a is None or b is None:
        return a is b
    return a.casefold() == b.casefold()


def require_path(path: str | PathLike[str] | None) -> Path:
    """Validate a file path argument and return it as a ``Path``."""
    if path is None or is_null_or_whitespace(str(path)):
        raise ValueError(
            "File name must not be None or empty or consist only of white spaces."
        )
    return Path(path)


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


@overload
def open_for_write(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_write(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_write(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "wb" if binary else "w"
    return open(path, mode, **kwargs)


# endregion Common functions

# region Type hints

_UNION_TYPES = (Union, types.UnionType)


def unwrap_optional(target_type: object) -> tuple[object, bool]:
    """
    Split ``Optional[X]`` / ``X | None`` into ``(X, True)``.

    Any other hint is returned unchanged with ``False``. Unions of more than one
    non-None member are returned unchanged (they are not nullable scalars).
    """
    if get_origin(target_type) in _UNION_TYPES:
        args = get_args(target_type)
        if type(None) in args:
            rest = tuple(a for a in args if a is not type(None))
            if len(rest) == 1:
                return rest[0], True
    return target_type, False


def unwrap_annotated(target_type: object) -> tuple[object, tuple[Any, ...]]:
    """Split ``Annotated[X, m1, m2]`` into ``(X, (m1, m2))``."""
    if get_origin(target_type) is Annotated:
        base, *metadata = get_args(target_type)
        return base, tuple(metadata)
    return target_type, ()


# endregion Type hints
