# config_helper/controllers/config_reader.py
"""
Assembly of configuration text into a ``ConfigContent``.

Reading happens in two passes over the fully buffered lines:

1. Header: leading blank lines are skipped; the run of comment lines that
   follows becomes the header. A blank line ends the header once at least one
   comment was taken; any other line ends it immediately.
2. Body: blank lines are skipped, sections start a new current section, values
   go into the current section, and everything else goes into ``others``.
   Comments outside the header and values in front of the first section
   cannot be placed; they are dropped and reported as ``ConfigWarning`` when
   the caller passes a ``warnings`` list.

Malformed section or value lines raise ``ConfigFormatError``.
"""

from __future__ import annotations

import io
import logging
from os import PathLike
from typing import IO, BinaryIO, Iterable, List, Optional, Sequence, TextIO, Union

from ..data_model.entities import (
    ConfigComment,
    ConfigContent,
    ConfigHeader,
    ConfigOther,
    ConfigSection,
    ConfigValue,
    ConfigWarning,
)
from ..data_model.line_kinds import LineKind, classify_line, is_comment, is_hollow
from ..utilities.core_util import open_for_read, require_path

log = logging.getLogger(__name__)

MISPLACED_COMMENT = "Misplaced comment"
MISPLACED_VALUE = "Misplaced value"

DEFAULT_ENCODING = "utf-8-sig"


def _warn(
    warnings: Optional[List[ConfigWarning]], index: int, line: str, message: str
) -> None:
    if warnings is None:
        return
    log.debug("line %d: %s: %r", index + 1, message, line)
    warnings.append(ConfigWarning(index + 1, line, message))


def _extract_header(lines: Sequence[str], header: ConfigHeader) -> int:
    """Fill ``header`` and return the index of the first line after it."""
    started = False
    for index, line in enumerate(lines):
        if is_hollow(line):
            if started:
                return index + 1
            continue
        if is_comment(line):
            started = True
            header.append(ConfigComment.parse(line))  # type: ignore[arg-type]
            continue
        return index
    return len(lines)


def read_lines(
    lines: Iterable[str], warnings: Optional[List[ConfigWarning]] = None
) -> ConfigContent:
    """Assemble already split lines into a ``ConfigContent``."""
    if lines is None:
        raise TypeError("Lines must not be None.")

    buffer = list(lines)
    content = ConfigContent()
    start = _extract_header(buffer, content.header)
    current: Optional[ConfigSection] = None

    for index in range(start, len(buffer)):
        line = buffer[index]
        kind = classify_line(line)
        if kind is LineKind.HOLLOW:
            continue
        if kind is LineKind.COMMENT:
            _warn(warnings, index, line, MISPLACED_COMMENT)
        elif kind is LineKind.SECTION:
            current = ConfigSection.parse(line)
            content.append(current)
        elif kind is LineKind.VALUE:
            if current is None:
                _warn(warnings, index, line, MISPLACED_VALUE)
            else:
                current.append(ConfigValue.parse(line))
        else:
            content.others.append(ConfigOther(line))

    log.debug(
        "Read %d line(s): %d header, %d other, %d section(s)",
        len(buffer),
        len(content.header),
        len(content.others),
        len(content),
    )
    return content


def _split_lines(text: str) -> List[str]:
    """Split on CR, LF and CRLF only; other Unicode line breaks are value data."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_text(
    text: str, warnings: Optional[List[ConfigWarning]] = None
) -> ConfigContent:
    if text is None:
        raise TypeError("Text must not be None.")
    return read_lines(_split_lines(text), warnings)


def read_reader(
    reader: TextIO, warnings: Optional[List[ConfigWarning]] = None
) -> ConfigContent:
    """Read from an open text reader; the reader is left open."""
    if reader is None:
        raise TypeError("Reader must not be None.")
    return read_text(reader.read(), warnings)


def read_stream(
    stream: BinaryIO,
    warnings: Optional[List[ConfigWarning]] = None,
    encoding: str = DEFAULT_ENCODING,
) -> ConfigContent:
    """Read from an open byte stream; the stream is left open."""
    if stream is None:
        raise TypeError("Stream must not be None.")
    wrapper = io.TextIOWrapper(stream, encoding=encoding)
    try:
        content = read_reader(wrapper, warnings)
    finally:
        wrapper.detach()
    name = getattr(stream, "name", None)
    if isinstance(name, str):
        content.file_name = name
    return content


def read_file(
    path: Union[str, PathLike[str]],
    warnings: Optional[List[ConfigWarning]] = None,
    encoding: str = DEFAULT_ENCODING,
) -> ConfigContent:
    """
    Read the configuration file at ``path``.

    Raises
    ------
    ValueError
        If ``path`` is None, empty or whitespace.
    FileNotFoundError
        If the file does not exist.
    ConfigFormatError
        If a section or value line is malformed.
    """
    source = require_path(path)
    if not source.is_file():
        raise FileNotFoundError(f"File {str(source)!r} does not exist.")
    log.debug("Reading %s", source)
    with open_for_read(source, binary=False, encoding=encoding) as f:
        content = read_reader(f, warnings)
    content.file_name = str(source)
    return content


def read(
    source: Union[str, PathLike[str], IO[str], IO[bytes]],
    warnings: Optional[List[ConfigWarning]] = None,
    encoding: str = DEFAULT_ENCODING,
) -> ConfigContent:
    """Read from a path, a text reader or a byte stream."""
    if source is None:
        raise TypeError("Source must not be None.")
    if isinstance(source, (str, PathLike)):
        return read_file(source, warnings, encoding)
    if isinstance(source, io.TextIOBase):
        return read_reader(source, warnings)  # type: ignore[arg-type]
    return read_stream(source, warnings, encoding)  # type: ignore[arg-type]
