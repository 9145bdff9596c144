# tests/data_model/parsers_emitters/test_config_file_parser_emitter.py
from __future__ import annotations

from datetime import datetime

from config_helper.data_model.interfaces import IParserEmitter
from config_helper.data_model.parsers_emitters import ConfigFileParserEmitter

SAMPLE = """\

# {file-name-placeholder} written {file-date-placeholder}

stray=1
[Main] # main section
name = demo
path="C:\\temp"
# late comment
"""


def _emitter() -> ConfigFileParserEmitter:
    return ConfigFileParserEmitter(clock=lambda: datetime(2024, 5, 6, 7, 8, 9))


def test_parser_emitter_satisfies_protocol():
    # Act / Assert
    assert isinstance(_emitter(), IParserEmitter)


def test_parse_collects_warnings():
    # Arrange
    emitter = _emitter()

    # Act
    content = emitter.parse(SAMPLE)

    # Assert
    assert len(content.header) == 1
    assert [s.title for s in content] == ["Main"]
    assert content["Main"]["path"].value == "C:\\temp"
    assert [(w.line, w.message) for w in emitter.warnings] == [
        (4, "Misplaced value"),
        (8, "Misplaced comment"),
    ]


def test_emit_renders_canonical_text_with_placeholders():
    # Arrange
    emitter = _emitter()
    content = emitter.parse(SAMPLE)

    # Act
    text = emitter.emit(content)

    # Assert
    assert text == (
        "# unused written 2024-05-06 07:08\n"
        "\n"
        "[Main] # main section\n"
        "name = demo\n"
        'path = "C:\\temp"\n'
        "\n"
    )


def test_warnings_are_reset_per_parse():
    # Arrange
    emitter = _emitter()
    emitter.parse(SAMPLE)

    # Act
    emitter.parse("[S]\na=1\n")

    # Assert
    assert emitter.warnings == []
