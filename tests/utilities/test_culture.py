# tests/utilities/test_culture.py
from __future__ import annotations

import pytest

from config_helper.utilities.culture import (
    INVARIANT_CULTURE,
    CultureInfo,
    available_cultures,
    get_culture,
)


@pytest.mark.parametrize("name", [None, "", "  ", "invariant", "INVARIANT"])
def test_invariant_aliases(name):
    # Act / Assert
    assert get_culture(name) is INVARIANT_CULTURE


@pytest.mark.parametrize("name,expected", [("de-DE", "de-DE"), ("de_de", "de-DE"), ("EN-us", "en-US")])
def test_lookup_by_name(name, expected):
    # Act / Assert
    assert get_culture(name).name == expected


def test_culture_instance_passes_through():
    # Arrange
    custom = CultureInfo("x-custom", decimal_separator=",", group_separators=("'",))

    # Act / Assert
    assert get_culture(custom) is custom
    assert str(custom) == "x-custom"
    assert str(INVARIANT_CULTURE) == "invariant"


def test_unknown_culture_raises():
    # Act / Assert
    with pytest.raises(ValueError):
        get_culture("xx-XX")


def test_available_cultures():
    # Act
    names = available_cultures()

    # Assert
    assert names[0] == "invariant"
    assert {"en-US", "en-GB", "de-DE", "fr-FR"} <= set(names)


def test_separators():
    # Act
    de = get_culture("de-DE")
    us = get_culture("en-US")

    # Assert
    assert (de.decimal_separator, de.group_separators) == (",", (".",))
    assert (us.decimal_separator, us.group_separators) == (".", (",",))
