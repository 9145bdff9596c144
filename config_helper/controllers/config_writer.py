# config_helper/controllers/config_writer.py
from __future__ import annotations

import io
import logging
from datetime import datetime
from os import PathLike
from pathlib import Path
from typing import IO, BinaryIO, List, Optional, TextIO, Union

from ..data_model.config_defines import (
    FILE_DATE_FORMAT,
    FILE_DATE_PLACEHOLDER,
    FILE_NAME_PLACEHOLDER,
    UNUSED_FILE_NAME,
)
from ..data_model.entities import ConfigContent
from ..utilities.core_util import is_null_or_whitespace, open_for_write, require_path

log = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def _require_content(content: Optional[ConfigContent]) -> ConfigContent:
    if content is None:
        raise TypeError("Content must not be None.")
    return content


def render(content: ConfigContent, now: Optional[datetime] = None) -> List[str]:
    """
    Render ``content`` to its output lines with both placeholders substituted.

    The file name placeholder becomes the base name of ``content.file_name``
    (``"unused"`` when unset), the date placeholder ``now`` (default: the
    current local time) at minute precision.
    """
    _require_content(content)
    if is_null_or_whitespace(content.file_name):
        name = UNUSED_FILE_NAME
    else:
        name = Path(content.file_name).name  # type: ignore[arg-type]
    stamp = (now or datetime.now()).strftime(FILE_DATE_FORMAT)
    return [
        line.replace(FILE_NAME_PLACEHOLDER, name).replace(FILE_DATE_PLACEHOLDER, stamp)
        for line in content.to_output()
    ]


def write_text(content: ConfigContent, now: Optional[datetime] = None) -> str:
    return "".join(f"{line}\n" for line in render(content, now))


def write_writer(
    content: ConfigContent, writer: TextIO, now: Optional[datetime] = None
) -> None:
    """Write to an open text writer; the writer is left open."""
    _require_content(content)
    if writer is None:
        raise TypeError("Writer must not be None.")
    writer.write(write_text(content, now))
    writer.flush()


def write_stream(
    content: ConfigContent,
    stream: BinaryIO,
    encoding: str = DEFAULT_ENCODING,
    now: Optional[datetime] = None,
) -> None:
    """Write to an open byte stream; the stream is left open."""
    _require_content(content)
    if stream is None:
        raise TypeError("Stream must not be None.")
    wrapper = io.TextIOWrapper(stream, encoding=encoding, newline="")
    try:
        write_writer(content, wrapper, now)
    finally:
        wrapper.detach()


def write_file(
    content: ConfigContent,
    path: Union[str, PathLike[str]],
    overwrite: bool = False,
    encoding: str = DEFAULT_ENCODING,
    now: Optional[datetime] = None,
) -> None:
    """
    Write ``content`` to the file at ``path``.

    ``content.file_name`` is set to ``path`` before rendering.

    Raises
    ------
    ValueError
        If ``path`` is None, empty or whitespace.
    FileExistsError
        If the file exists and ``overwrite`` is False.
    """
    target = require_path(path)
    _require_content(content)
    if target.exists() and not overwrite:
        raise FileExistsError(f"File {str(target)!r} already exists.")
    content.file_name = str(target)
    log.debug("Writing %s (overwrite=%s)", target, overwrite)
    with open_for_write(target, binary=False, encoding=encoding, newline="") as f:
        write_writer(content, f, now)


def write(
    content: ConfigContent,
    target: Union[str, PathLike[str], IO[str], IO[bytes]],
    overwrite: bool = False,
    encoding: str = DEFAULT_ENCODING,
    now: Optional[datetime] = None,
) -> None:
    """Write to a path, a text writer or a byte stream."""
    if target is None:
        raise TypeError("Target must not be None.")
    if isinstance(target, (str, PathLike)):
        write_file(content, target, overwrite, encoding, now)
    elif isinstance(target, io.TextIOBase):
        write_writer(content, target, now)  # type: ignore[arg-type]
    else:
        write_stream(content, target, encoding, now)  # type: ignore[arg-type]
