from .config_logging import LOGGING, configure_logging
from .converters_scalar import (
    SCALAR_CONVERTERS,
    Byte,
    Char,
    ConversionResult,
    Double,
    Int16,
    Int32,
    Int64,
    SByte,
    ScalarKind,
    Single,
    UInt16,
    UInt32,
    UInt64,
    convert,
    is_supported_type,
    to_text,
    try_convert,
)
from .core_util import (
    equals_ignore_case,
    is_null_or_empty,
    is_null_or_whitespace,
    open_for_read,
    open_for_write,
)
from .culture import INVARIANT_CULTURE, CultureInfo, available_cultures, get_culture

__all__ = [
    "LOGGING",
    "configure_logging",
    "SCALAR_CONVERTERS",
    "ScalarKind",
    "ConversionResult",
    "Char",
    "SByte",
    "Byte",
    "Int16",
    "UInt16",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    "Single",
    "Double",
    "convert",
    "try_convert",
    "is_supported_type",
    "to_text",
    "equals_ignore_case",
    "is_null_or_empty",
    "is_null_or_whitespace",
    "open_for_read",
    "open_for_write",
    "CultureInfo",
    "INVARIANT_CULTURE",
    "available_cultures",
    "get_culture",
]
