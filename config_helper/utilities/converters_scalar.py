# config_helper/utilities/converters_scalar.py
"""
Conversion registry: text ⇄ scalar values, locale-aware.

The registry is a closed table keyed by ``ScalarKind``. Python types are mapped
onto kinds as follows:

  • ``str`` → STRING, ``bool`` → BOOLEAN, ``int`` → INT64, ``Decimal`` → DECIMAL,
    ``float`` → DOUBLE, ``datetime`` → DATETIME, ``uuid.UUID`` → GUID,
    any ``Enum`` subclass → ENUM
  • width-specific kinds use the ``Annotated`` aliases exported here
    (``Char``, ``SByte``, ``Byte``, ``Int16`` … ``UInt64``, ``Single``, ``Double``)
  • ``Optional[...]`` of any of the above is the nullable variant

Non-nullable converters raise ``ValueError`` for None/empty/whitespace input,
except STRING (None → "") and CHAR (only None/"" are rejected; whitespace is a
character). Nullable variants return ``None`` for None/empty/whitespace input
and otherwise delegate to the non-nullable converter.
"""

from __future__ import annotations

import re
import struct
import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from functools import partial
from typing import (
    Annotated,
    Any,
    Callable,
    Dict,
    Final,
    NamedTuple,
    Optional,
    Union,
    get_origin,
)

from .core_util import (
    is_null_or_empty,
    is_null_or_whitespace,
    unwrap_annotated,
    unwrap_optional,
)
from .culture import CultureInfo, get_culture
from ..exceptions import UnsupportedTypeError, UnsupportedValueError


class ScalarKind(Enum):
    STRING = "string"
    CHAR = "char"
    BOOLEAN = "boolean"
    SBYTE = "sbyte"
    BYTE = "byte"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    DECIMAL = "decimal"
    DOUBLE = "double"
    SINGLE = "single"
    DATETIME = "datetime"
    GUID = "guid"
    ENUM = "enum"


# region Type aliases

Char = Annotated[str, ScalarKind.CHAR]
SByte = Annotated[int, ScalarKind.SBYTE]
Byte = Annotated[int, ScalarKind.BYTE]
Int16 = Annotated[int, ScalarKind.INT16]
UInt16 = Annotated[int, ScalarKind.UINT16]
Int32 = Annotated[int, ScalarKind.INT32]
UInt32 = Annotated[int, ScalarKind.UINT32]
Int64 = Annotated[int, ScalarKind.INT64]
UInt64 = Annotated[int, ScalarKind.UINT64]
Single = Annotated[float, ScalarKind.SINGLE]
Double = Annotated[float, ScalarKind.DOUBLE]

# endregion Type aliases

CultureLike = Union[CultureInfo, str, None]


class ConversionResult(NamedTuple):
    success: bool
    value: Any
    error: Optional[Exception]


@dataclass(frozen=True)
class ScalarTarget:
    """A resolved conversion target: kind, nullability and (for ENUM) the enum class."""

    kind: ScalarKind
    nullable: bool
    enum_type: Optional[type[Enum]] = None


# region Helpers


def _require_text(value: Optional[str]) -> str:
    if is_null_or_whitespace(value):
        raise ValueError("Value must not be None, empty or whitespace.")
    return value  # type: ignore[return-value]


def clean_number_like_string(value: str, culture: CultureInfo) -> str:
    """
    Normalize a culture-formatted number into a ``Decimal``/``float`` literal.

    Accepted decorations (any combination):
      - surrounding whitespace, leading or trailing sign, unicode minus
      - parentheses for negatives: "(1,234.56)"
      - the culture's currency symbol: "$1,234.56", "1.234,56 €"
      - the culture's digit-group separators anywhere in the integral part
      - an exponent: "1.5e3"

    Examples (en-US):
        "-32,768"      -> "-32768"
        " 65,535 "     -> "65535"
        "(1,234.56)"   -> "-1234.56"
    Examples (de-DE):
        "1.234,56"     -> "1234.56"

    Raises:
        ValueError: if the text is empty or not a number after cleaning.
    """
    s = value.strip()
    if not s:
        raise ValueError("Empty string cannot be converted to a number")

    s = s.replace(_UNICODE_MINUS, "-")
    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg = True
        s = s[1:-1].strip()
    if culture.currency_symbol:
        s = s.replace(culture.currency_symbol, "").strip()
    if s.endswith("-"):
        neg = not neg
        s = s[:-1].strip()
    elif s.endswith("+"):
        s = s[:-1].strip()
    if s.startswith("-"):
        neg = not neg
        s = s[1:].strip()
    elif s.startswith("+"):
        s = s[1:].strip()

    for sep in culture.group_separators:
        s = s.replace(sep, "")
    if culture.decimal_separator != ".":
        if "." in s:
            raise ValueError(f"Could not parse number from {value!r}")
        s = s.replace(culture.decimal_separator, ".")

    if not _NUMBER_RE.fullmatch(s):
        raise ValueError(f"Could not parse number from {value!r} (normalized to {s!r})")
    return "-" + s if neg else s


# endregion Helpers

# region Standard converters


def _to_string(value: Optional[str], culture: CultureInfo) -> str:
    return "" if value is None else value


def _to_char(value: Optional[str], culture: CultureInfo) -> str:
    if is_null_or_empty(value):
        raise ValueError("Value must not be None or empty.")
    return value[0]  # type: ignore[index]


def _to_boolean(value: Optional[str], culture: CultureInfo) -> bool:
    text = _require_text(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise UnsupportedValueError(
        f'Value of "{text}" is not supported for boolean data types.'
    )


def _to_integer(value: Optional[str], culture: CultureInfo, *, kind: ScalarKind) -> int:
    text = _require_text(value)
    cleaned = clean_number_like_string(text, culture)
    try:
        number = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse integer from {text!r}") from e
    if number != number.to_integral_value():
        raise ValueError(f"Value {text!r} is not an integral number.")
    low, high = _INTEGER_RANGES[kind]
    # exponent forms such as "1e1000000" must not reach int()
    if number and number.adjusted() >= len(str(high)):
        raise OverflowError(
            f"Value {text!r} is outside the range of {kind.value} [{low}, {high}]."
        )
    result = int(number)
    if not low <= result <= high:
        raise OverflowError(
            f"Value {text!r} is outside the range of {kind.value} [{low}, {high}]."
        )
    return result


def _to_decimal(value: Optional[str], culture: CultureInfo) -> Decimal:
    text = _require_text(value)
    cleaned = clean_number_like_string(text, culture)
    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(
            f"Could not parse Decimal from {text!r} (normalized to {cleaned!r})"
        ) from e


def _to_double(value: Optional[str], culture: CultureInfo) -> float:
    text = _require_text(value)
    return float(clean_number_like_string(text, culture))


def _to_single(value: Optional[str], culture: CultureInfo) -> float:
    # round through IEEE-754 binary32
    return struct.unpack("f", struct.pack("f", _to_double(value, culture)))[0]


def _to_datetime(value: Optional[str], culture: CultureInfo) -> datetime:
    text = " ".join(_require_text(value).split())
    for fmt in culture.datetime_formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    iso = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(iso)
    except ValueError as e:
        raise ValueError(f"Unrecognized date/time format: {value!r}") from e


def _to_guid(value: Optional[str], culture: CultureInfo) -> uuid.UUID:
    text = _require_text(value).strip()
    if text.startswith("(") and text.endswith(")"):
        text = text[1:-1]
    return uuid.UUID(text)


def _to_enum_value(value: str, enum_type: type[Enum]) -> Optional[Enum]:
    text = value.strip().casefold()
    for name, member in enum_type.__members__.items():
        if name.casefold() == text:
            return member
    return None


def _to_enum(value: Optional[str], enum_type: type[Enum]) -> Enum:
    text = _require_text(value)
    result = _to_enum_value(text, enum_type)
    if result is None:
        raise ValueError(f"The value {text} could not be resolved.")
    return result


# endregion Standard converters

# region Public API


def resolve_scalar(target_type: object) -> Optional[ScalarTarget]:
    """
    Resolve a type hint to a ``ScalarTarget`` or ``None`` when unsupported.

    ``Optional`` may wrap ``Annotated`` or be wrapped by it.
    """
    base, nullable = unwrap_optional(target_type)
    base, metadata = unwrap_annotated(base)
    if not nullable:
        base, nullable = unwrap_optional(base)

    if not isinstance(base, type) or get_origin(base) is not None:
        return None
    if issubclass(base, Enum):
        return ScalarTarget(ScalarKind.ENUM, nullable, base)

    declared = next((m for m in metadata if isinstance(m, ScalarKind)), None)
    if declared is not None:
        if declared is ScalarKind.ENUM or _KIND_BASE_TYPES[declared] is not base:
            return None
        return ScalarTarget(declared, nullable)

    kind = _PLAIN_KINDS.get(base)
    if kind is None:
        return None
    return ScalarTarget(kind, nullable)


def is_supported_type(target_type: object) -> bool:
    return target_type is not None and resolve_scalar(target_type) is not None


def convert(value: Optional[str], target_type: object, culture: CultureLike = None) -> Any:
    """
    Convert ``value`` to ``target_type`` using ``culture`` (default: invariant).

    Raises
    ------
    TypeError
        If ``target_type`` is None or ``value`` is neither a string nor None.
    UnsupportedTypeError
        If no converter exists for ``target_type``.
    ValueError / OverflowError / UnsupportedValueError
        If the value cannot be converted; the real cause is raised directly.
    """
    if target_type is None:
        raise TypeError("Target type must not be None.")
    if value is not None and not isinstance(value, str):
        raise TypeError(f"Expected str or None, got {type(value).__name__}")
    profile = get_culture(culture)
    target = resolve_scalar(target_type)
    if target is None:
        raise UnsupportedTypeError(f"Type {target_type!r} is not supported.")

    if target.nullable:
        if is_null_or_whitespace(value):
            return None
        if target.enum_type is not None:
            return _to_enum_value(value, target.enum_type)  # type: ignore[arg-type]

    if target.enum_type is not None:
        return _to_enum(value, target.enum_type)
    return SCALAR_CONVERTERS[target.kind](value, profile)


def try_convert(
    value: Optional[str], target_type: object, culture: CultureLike = None
) -> ConversionResult:
    """Like ``convert`` but reports failure in the result instead of raising."""
    try:
        return ConversionResult(True, convert(value, target_type, culture), None)
    except (ValueError, TypeError, ArithmeticError) as e:
        return ConversionResult(False, None, e)


def to_text(value: Any, culture: CultureLike = None) -> str:
    """Render a scalar value as configuration text for ``culture``."""
    profile = get_culture(culture)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, datetime):
        return value.strftime(profile.datetime_output_format)
    if isinstance(value, (float, Decimal)):
        return str(value).replace(".", profile.decimal_separator)
    return str(value)


# endregion Public API

_NUMBER_RE: Final[re.Pattern[str]] = re.compile(r"(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_UNICODE_MINUS: Final[str] = "\u2212"
_TRUE_STRINGS: Final[frozenset[str]] = frozenset({"true", "1", "yes", "on", "yea"})
_FALSE_STRINGS: Final[frozenset[str]] = frozenset({"false", "0", "no", "off", "nay"})
_INTEGER_RANGES: Final[Dict[ScalarKind, tuple[int, int]]] = {
    ScalarKind.SBYTE: (-(2**7), 2**7 - 1),
    ScalarKind.BYTE: (0, 2**8 - 1),
    ScalarKind.INT16: (-(2**15), 2**15 - 1),
    ScalarKind.UINT16: (0, 2**16 - 1),
    ScalarKind.INT32: (-(2**31), 2**31 - 1),
    ScalarKind.UINT32: (0, 2**32 - 1),
    ScalarKind.INT64: (-(2**63), 2**63 - 1),
    ScalarKind.UINT64: (0, 2**64 - 1),
}
_PLAIN_KINDS: Final[Dict[type, ScalarKind]] = {
    str: ScalarKind.STRING,
    bool: ScalarKind.BOOLEAN,
    int: ScalarKind.INT64,
    Decimal: ScalarKind.DECIMAL,
    float: ScalarKind.DOUBLE,
    datetime: ScalarKind.DATETIME,
    uuid.UUID: ScalarKind.GUID,
}
_KIND_BASE_TYPES: Final[Dict[ScalarKind, type]] = {
    ScalarKind.STRING: str,
    ScalarKind.CHAR: str,
    ScalarKind.BOOLEAN: bool,
    **{k: int for k in _INTEGER_RANGES},
    ScalarKind.DECIMAL: Decimal,
    ScalarKind.DOUBLE: float,
    ScalarKind.SINGLE: float,
    ScalarKind.DATETIME: datetime,
    ScalarKind.GUID: uuid.UUID,
}
SCALAR_CONVERTERS: Dict[ScalarKind, Callable[[Optional[str], CultureInfo], Any]] = {
    ScalarKind.STRING: _to_string,
    ScalarKind.CHAR: _to_char,
    ScalarKind.BOOLEAN: _to_boolean,
    **{k: partial(_to_integer, kind=k) for k in _INTEGER_RANGES},
    ScalarKind.DECIMAL: _to_decimal,
    ScalarKind.DOUBLE: _to_double,
    ScalarKind.SINGLE: _to_single,
    ScalarKind.DATETIME: _to_datetime,
    ScalarKind.GUID: _to_guid,
}
