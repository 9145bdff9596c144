# config_helper/data_model/interfaces/i_custom_parser.py
"""
Protocol for user supplied value converters.

A custom parser is named on a value declaration (``config_value(parser=...)``)
and replaces the built-in scalar conversion for that one field. The binder
constructs it once per field with a no-argument call.

Declare the handled type by subclassing the parametrized protocol, e.g.
``class PointParser(ICustomParser[Point])``; the binder only uses a parser
whose declared type matches the field's type. Purely structural
implementations (no explicit base) are accepted for any field.

Implementations report bad input by raising ``CustomParserError``; any other
exception is wrapped into ``ConfigBindingError`` by the binder.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from typing_extensions import Protocol, runtime_checkable

from ...utilities.culture import CultureInfo

T = TypeVar("T")


@runtime_checkable
class ICustomParser(Protocol[T]):
    def parse_from_text(
        self, label: str, value: Optional[str], fallback: object, culture: CultureInfo
    ) -> T:
        """Convert the raw text of ``label`` into a field value."""
        ...

    def parse_into_text(
        self, label: str, value: Optional[T], fallback: object, culture: CultureInfo
    ) -> str:
        """Convert a field value into the text written for ``label``."""
        ...
