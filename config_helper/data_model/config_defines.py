# config_helper/data_model/config_defines.py
"""Punctuation and placeholder constants of the configuration text format."""

from __future__ import annotations

from typing import Final

SECTION_PREFIX: Final[str] = "["
SECTION_SUFFIX: Final[str] = "]"
VALUE_MARKERS: Final[tuple[str, ...]] = (":", "=")
COMMENT_MARKERS: Final[tuple[str, ...]] = ("#", ";")
STRING_MARKER: Final[str] = '"'

FILE_NAME_PLACEHOLDER: Final[str] = "{file-name-placeholder}"
FILE_DATE_PLACEHOLDER: Final[str] = "{file-date-placeholder}"

# Substituted for the file name placeholder when the content has no source.
UNUSED_FILE_NAME: Final[str] = "unused"
FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M"
