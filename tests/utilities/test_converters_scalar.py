# tests/utilities/test_converters_scalar.py
"""
Unit tests for the scalar conversion registry.

Coverage: every scalar kind, culture-specific number and date formats, the
nullable variants, unsupported types, try_convert and to_text.
"""

from __future__ import annotations

import struct
import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional

import pytest

from config_helper.exceptions import UnsupportedTypeError, UnsupportedValueError
from config_helper.utilities.converters_scalar import (
    SCALAR_CONVERTERS,
    Byte,
    Char,
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
    clean_number_like_string,
    convert,
    is_supported_type,
    resolve_scalar,
    to_text,
    try_convert,
)
from config_helper.utilities.culture import get_culture


class Color(Enum):
    RED = 1
    GREEN = 2
    DARK_BLUE = 3


# region Registry


def test_registry_covers_every_kind_but_enum():
    # Act
    missing = set(ScalarKind) - set(SCALAR_CONVERTERS)

    # Assert
    assert missing == {ScalarKind.ENUM}


@pytest.mark.parametrize(
    "hint,kind,nullable",
    [
        (str, ScalarKind.STRING, False),
        (bool, ScalarKind.BOOLEAN, False),
        (int, ScalarKind.INT64, False),
        (float, ScalarKind.DOUBLE, False),
        (Decimal, ScalarKind.DECIMAL, False),
        (datetime, ScalarKind.DATETIME, False),
        (uuid.UUID, ScalarKind.GUID, False),
        (Color, ScalarKind.ENUM, False),
        (Char, ScalarKind.CHAR, False),
        (UInt32, ScalarKind.UINT32, False),
        (Single, ScalarKind.SINGLE, False),
        (Optional[Int16], ScalarKind.INT16, True),
        (Annotated[Optional[int], ScalarKind.BYTE], ScalarKind.BYTE, True),
        (int | None, ScalarKind.INT64, True),
        (Optional[Color], ScalarKind.ENUM, True),
    ],
)
def test_resolve_scalar(hint, kind, nullable):
    # Act
    target = resolve_scalar(hint)

    # Assert
    assert target is not None
    assert (target.kind, target.nullable) == (kind, nullable)


@pytest.mark.parametrize(
    "hint",
    [object, list, dict[str, int], Annotated[str, ScalarKind.INT32], Optional[object], None],
)
def test_unsupported_types(hint):
    # Act / Assert
    assert is_supported_type(hint) is False


def test_convert_unsupported_type_raises():
    # Act / Assert
    with pytest.raises(UnsupportedTypeError):
        convert("x", object)
    with pytest.raises(TypeError):
        convert("x", None)


def test_convert_rejects_non_string_input():
    # Act / Assert
    with pytest.raises(TypeError):
        convert(5, int)  # type: ignore[arg-type]


# endregion Registry

# region String, char, boolean


def test_string_conversion():
    # Act / Assert
    assert convert(None, str) == ""
    assert convert("", str) == ""
    assert convert("  keep spaces ", str) == "  keep spaces "


def test_char_conversion_accepts_whitespace_but_not_empty():
    # Act / Assert
    assert convert("abc", Char) == "a"
    assert convert(" ", Char) == " "
    with pytest.raises(ValueError):
        convert("", Char)
    with pytest.raises(ValueError):
        convert(None, Char)


@pytest.mark.parametrize("text", ["true", "TRUE", " 1 ", "yes", "On", "yea"])
def test_boolean_true_synonyms(text):
    # Act / Assert
    assert convert(text, bool) is True


@pytest.mark.parametrize("text", ["false", "False", "0", "no", "OFF", " nay "])
def test_boolean_false_synonyms(text):
    # Act / Assert
    assert convert(text, bool) is False


def test_boolean_unknown_text_is_unsupported_value():
    # Act / Assert
    with pytest.raises(UnsupportedValueError):
        convert("maybe", bool)


# endregion String, char, boolean

# region Numbers


@pytest.mark.parametrize(
    "text,hint,culture,expected",
    [
        ("-32,768", Int16, "en-US", -32768),
        ("65,535", UInt16, "en-US", 65535),
        ("-128", SByte, None, -128),
        ("255", Byte, None, 255),
        ("-2,147,483,648", Int32, "en-US", -2147483648),
        ("4294967295", UInt32, None, 4294967295),
        ("-9223372036854775808", Int64, None, -9223372036854775808),
        ("18,446,744,073,709,551,615", UInt64, "en-US", 18446744073709551615),
        ("1.234.567", int, "de-DE", 1234567),
        ("1 234", int, "fr-FR", 1234),
        ("(42)", int, "en-US", -42),
        ("+7", int, None, 7),
        ("12.0", int, None, 12),
    ],
)
def test_integer_conversion(text, hint, culture, expected):
    # Act / Assert
    assert convert(text, hint, culture) == expected


@pytest.mark.parametrize(
    "text,hint",
    [("128", SByte), ("-1", Byte), ("65536", UInt16), ("18446744073709551616", UInt64)],
)
def test_integer_out_of_range_overflows(text, hint):
    # Act / Assert
    with pytest.raises(OverflowError):
        convert(text, hint)


@pytest.mark.parametrize("text", ["1e1000000", "-1e20000000", "1e10"])
def test_integer_huge_exponent_overflows_without_expanding(text):
    """Exponent forms are range-checked before being turned into an int."""
    # Act
    result = try_convert(text, Int32, "en-US")

    # Assert
    assert not result.success
    assert isinstance(result.error, OverflowError)


@pytest.mark.parametrize("text,expected", [("0e1000000", 0), ("2.5e2", 250), ("-2.147483648e9", -(2**31))])
def test_integer_exponent_forms_within_range(text, expected):
    # Act / Assert
    assert convert(text, Int32, "en-US") == expected


@pytest.mark.parametrize("text", ["", "  ", "1.5", "abc", "1,5,x"])
def test_integer_invalid_text_raises_value_error(text):
    # Act / Assert
    with pytest.raises(ValueError):
        convert(text, Int32)


@pytest.mark.parametrize(
    "text,culture,expected",
    [
        ("-79228162514264337593543950335", None, Decimal("-79228162514264337593543950335")),
        ("1,234.56", "en-US", Decimal("1234.56")),
        ("$1,234.56", "en-US", Decimal("1234.56")),
        ("1.234,56", "de-DE", Decimal("1234.56")),
        ("1.234,56 €", "de-DE", Decimal("1234.56")),
        ("(12.5)", None, Decimal("-12.5")),
        ("12.5-", None, Decimal("-12.5")),
    ],
)
def test_decimal_conversion(text, culture, expected):
    # Act / Assert
    assert convert(text, Decimal, culture) == expected


def test_decimal_in_culture_with_comma_rejects_dot():
    # Act / Assert
    with pytest.raises(ValueError):
        convert("1.5", Decimal, "fr-FR")


@pytest.mark.parametrize(
    "text,hint,culture,expected",
    [
        ("1.5e3", float, None, 1500.0),
        ("-0.25", Double, None, -0.25),
        ("2,5", float, "de-DE", 2.5),
        ("1 234,5", float, "fr-FR", 1234.5),
    ],
)
def test_double_conversion(text, hint, culture, expected):
    # Act / Assert
    assert convert(text, hint, culture) == expected


def test_single_rounds_to_binary32():
    # Arrange
    expected = struct.unpack("f", struct.pack("f", 0.1))[0]

    # Act
    result = convert("0.1", Single)

    # Assert
    assert result == expected
    assert result != 0.1


@pytest.mark.parametrize(
    "value,culture,expected",
    [
        ("-32,768", "en-US", "-32768"),
        (" 65,535 ", "en-US", "65535"),
        ("(1,234.56)", "en-US", "-1234.56"),
        ("1.234,56", "de-DE", "1234.56"),
        ("−5", None, "-5"),
        ("1.5E-3", None, "1.5E-3"),
    ],
)
def test_clean_number_like_string(value, culture, expected):
    # Act / Assert
    assert clean_number_like_string(value, get_culture(culture)) == expected


# endregion Numbers

# region Date/time, GUID, enum


@pytest.mark.parametrize(
    "text,culture",
    [
        ("29.10.1967     23:05:42", "de-DE"),
        ("10/29/1967 11:05:42 PM", "en-US"),
        ("10/29/1967 23:05:42", "en-US"),
        ("29/10/1967 23:05:42", "en-GB"),
        ("1967-10-29 23:05:42", None),
        ("1967-10-29T23:05:42", "fr-FR"),
    ],
)
def test_datetime_conversion(text, culture):
    # Act / Assert
    assert convert(text, datetime, culture) == datetime(1967, 10, 29, 23, 5, 42)


def test_datetime_invalid_text_raises():
    # Act / Assert
    with pytest.raises(ValueError):
        convert("not a date", datetime, "de-DE")


@pytest.mark.parametrize(
    "text",
    [
        "0f8fad5bd9cb469fa16570867728950e",
        "0f8fad5b-d9cb-469f-a165-70867728950e",
        "{0f8fad5b-d9cb-469f-a165-70867728950e}",
        "(0f8fad5b-d9cb-469f-a165-70867728950e)",
        "  0F8FAD5B-D9CB-469F-A165-70867728950E  ",
    ],
)
def test_guid_forms(text):
    # Act / Assert
    assert convert(text, uuid.UUID) == uuid.UUID("0f8fad5b-d9cb-469f-a165-70867728950e")


def test_guid_invalid_text_raises():
    # Act / Assert
    with pytest.raises(ValueError):
        convert("not-a-guid", uuid.UUID)


def test_enum_matches_name_ignoring_case():
    # Act / Assert
    assert convert("green", Color) is Color.GREEN
    assert convert(" DARK_blue ", Color) is Color.DARK_BLUE


def test_enum_unknown_name():
    """Non-nullable raises; nullable resolves to None."""
    # Act / Assert
    with pytest.raises(ValueError):
        convert("purple", Color)
    assert convert("purple", Optional[Color]) is None


# endregion Date/time, GUID, enum

# region Nullable variants


@pytest.mark.parametrize(
    "hint",
    [
        Optional[str],
        Optional[Char],
        Optional[bool],
        Optional[SByte],
        Optional[UInt64],
        Optional[int],
        Optional[Decimal],
        Optional[float],
        Optional[Single],
        Optional[datetime],
        Optional[uuid.UUID],
        Optional[Color],
    ],
)
@pytest.mark.parametrize("text", [None, "", "   "])
def test_nullable_blank_input_is_none(hint, text):
    # Act / Assert
    assert convert(text, hint) is None


@pytest.mark.parametrize(
    "text,hint,plain",
    [
        ("yes", Optional[bool], bool),
        ("65,535", Optional[UInt16], UInt16),
        ("x", Optional[Char], Char),
        ("1.25", Optional[Decimal], Decimal),
    ],
)
def test_nullable_delegates_to_plain(text, hint, plain):
    # Act / Assert
    assert convert(text, hint, "en-US") == convert(text, plain, "en-US")


@pytest.mark.parametrize("hint", [bool, Int32, Decimal, float, datetime, uuid.UUID, Color])
@pytest.mark.parametrize("text", [None, "", "  "])
def test_plain_blank_input_raises(hint, text):
    # Act / Assert
    with pytest.raises(ValueError):
        convert(text, hint)


# endregion Nullable variants

# region try_convert / to_text


def test_try_convert_reports_success_and_failure():
    # Act
    good = try_convert("5", int)
    bad = try_convert("abc", int)
    unsupported = try_convert("x", object)

    # Assert
    assert good == (True, 5, None)
    assert bad.success is False and isinstance(bad.error, ValueError)
    assert unsupported.success is False and isinstance(unsupported.error, UnsupportedTypeError)


@pytest.mark.parametrize(
    "value,culture,expected",
    [
        (None, None, ""),
        (True, None, "true"),
        (False, "de-DE", "false"),
        (42, "en-US", "42"),
        (2.5, None, "2.5"),
        (2.5, "de-DE", "2,5"),
        (Decimal("1.50"), "fr-FR", "1,50"),
        (Color.GREEN, None, "GREEN"),
        (datetime(1967, 10, 29, 23, 5, 42), None, "10/29/1967 23:05:42"),
        (datetime(1967, 10, 29, 23, 5, 42), "de-DE", "29.10.1967 23:05:42"),
        (uuid.UUID("0f8fad5b-d9cb-469f-a165-70867728950e"), None, "0f8fad5b-d9cb-469f-a165-70867728950e"),
        ("text", None, "text"),
    ],
)
def test_to_text(value, culture, expected):
    # Act / Assert
    assert to_text(value, culture) == expected


@pytest.mark.parametrize(
    "value,hint,culture",
    [
        (datetime(2001, 2, 3, 4, 5, 6), datetime, "en-US"),
        (1234.5, float, "fr-FR"),
        (Decimal("-0.001"), Decimal, "de-DE"),
        (Color.RED, Color, None),
        (True, bool, None),
    ],
)
def test_to_text_reads_back(value, hint, culture):
    # Act / Assert
    assert convert(to_text(value, culture), hint, culture) == value


# endregion try_convert / to_text
