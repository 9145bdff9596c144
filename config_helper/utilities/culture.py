# config_helper/utilities/culture.py
"""
Locale profiles used by the scalar converters.

A profile only carries what the converters need: the decimal separator, the
accepted digit-group separators, the currency symbol and an ordered list of
``strptime`` patterns for date/time values (the first one is also used when
rendering a ``datetime`` back to text).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Final, Optional, Union

_ISO_FORMATS: Final[tuple[str, ...]] = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
)


@dataclass(frozen=True)
class CultureInfo:
    name: str
    decimal_separator: str = "."
    group_separators: tuple[str, ...] = (",",)
    currency_symbol: str = "¤"
    datetime_formats: tuple[str, ...] = _ISO_FORMATS

    @property
    def datetime_output_format(self) -> str:
        return self.datetime_formats[0]

    def __str__(self) -> str:
        return self.name or "invariant"


INVARIANT_CULTURE: Final[CultureInfo] = CultureInfo(
    name="",
    datetime_formats=(
        "%m/%d/%Y %H:%M:%S",
        "%m/%d/%Y %H:%M",
        "%m/%d/%Y",
        *_ISO_FORMATS,
    ),
)

_CULTURES: Dict[str, CultureInfo] = {
    "en-us": CultureInfo(
        name="en-US",
        currency_symbol="$",
        datetime_formats=(
            "%m/%d/%Y %I:%M:%S %p",
            "%m/%d/%Y %H:%M:%S",
            "%m/%d/%Y %I:%M %p",
            "%m/%d/%Y %H:%M",
            "%m/%d/%Y",
            *_ISO_FORMATS,
        ),
    ),
    "en-gb": CultureInfo(
        name="en-GB",
        currency_symbol="£",
        datetime_formats=(
            "%d/%m/%Y %H:%M:%S",
            "%d/%m/%Y %H:%M",
            "%d/%m/%Y",
            *_ISO_FORMATS,
        ),
    ),
    "de-de": CultureInfo(
        name="de-DE",
        decimal_separator=",",
        group_separators=(".",),
        currency_symbol="€",
        datetime_formats=(
            "%d.%m.%Y %H:%M:%S",
            "%d.%m.%Y %H:%M",
            "%d.%m.%Y",
            *_ISO_FORMATS,
        ),
    ),
    "fr-fr": CultureInfo(
        name="fr-FR",
        decimal_separator=",",
        group_separators=(" ", "\xa0", " "),
        currency_symbol="€",
        datetime_formats=(
            "%d/%m/%Y %H:%M:%S",
            "%d/%m/%Y %H:%M",
            "%d/%m/%Y",
            *_ISO_FORMATS,
        ),
    ),
}


def get_culture(culture: Union[CultureInfo, str, None] = None) -> CultureInfo:
    """
    Resolve a culture argument.

    Accepts a ``CultureInfo`` (returned as-is), a culture name such as
    ``"de-DE"`` (case-insensitive, ``_`` accepted for ``-``), or ``None`` /
    ``""`` / ``"invariant"`` for the invariant profile.

    Raises
    ------
    ValueError
        If the name is not a known culture.
    """
    if isinstance(culture, CultureInfo):
        return culture
    if culture is None:
        return INVARIANT_CULTURE
    key = culture.strip().replace("_", "-").lower()
    if key in ("", "invariant"):
        return INVARIANT_CULTURE
    found: Optional[CultureInfo] = _CULTURES.get(key)
    if found is None:
        raise ValueError(f"Unknown culture: {culture!r}")
    return found


def available_cultures() -> list[str]:
    return ["invariant", *(c.name for c in _CULTURES.values())]
