# tests/data_model/entities/test_config_content.py
from __future__ import annotations

from config_helper.data_model.entities import (
    ConfigContent,
    ConfigHeader,
    ConfigSection,
    ConfigValue,
)


def test_content_is_valid_only_with_sections():
    # Arrange
    content = ConfigContent()

    # Act
    before = content.is_valid
    content.append("Section")

    # Assert
    assert before is False
    assert content.is_valid is True


def test_header_setter_replaces_none_with_empty_header():
    # Arrange
    content = ConfigContent(header=ConfigHeader(["x"]))

    # Act
    content.header = None  # type: ignore[assignment]

    # Assert
    assert isinstance(content.header, ConfigHeader)
    assert len(content.header) == 0


def test_to_output_orders_header_others_sections():
    # Arrange
    content = ConfigContent()
    content.header.append("head")
    content.others.append("other")
    section = content.append("S")
    section.append(ConfigValue("a", "1"))
    content.append(ConfigSection("Empty"))

    # Act
    lines = list(content.to_output())

    # Assert
    assert lines == ["# head", "", "other", "", "[S]", "a = 1", "", "[Empty]", ""]


def test_to_output_skips_empty_header_and_others():
    # Arrange
    content = ConfigContent(["Only"])

    # Act / Assert
    assert list(content.to_output()) == ["[Only]", ""]


def test_sections_lookup_by_title_ignores_case():
    # Arrange
    content = ConfigContent(["Alpha", "Beta"])

    # Act / Assert
    assert content["beta"] is content.sections[1]
    assert content.find("ALPHA") is content[0]
