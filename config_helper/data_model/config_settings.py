# config_helper/data_model/config_settings.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .config_defines import COMMENT_MARKERS, VALUE_MARKERS


@dataclass(frozen=True)
class ConfigSettings:
    """
    Default punctuation used when entities are created without an explicit
    marker (programmatically or by the binder).

    Instances are immutable; pass the one you want to the call that creates
    content instead of mutating shared state.
    """

    value_marker: str = "="
    comment_marker: str = "#"

    def __post_init__(self) -> None:
        if self.value_marker not in VALUE_MARKERS:
            raise ValueError(
                f"Value marker must be one of these characters: {', '.join(VALUE_MARKERS)}."
            )
        if self.comment_marker not in COMMENT_MARKERS:
            raise ValueError(
                f"Comment marker must be one of these characters: {', '.join(COMMENT_MARKERS)}."
            )


UNIX_SETTINGS: Final[ConfigSettings] = ConfigSettings(":", "#")
WINDOWS_SETTINGS: Final[ConfigSettings] = ConfigSettings("=", ";")
MIXED_SETTINGS: Final[ConfigSettings] = ConfigSettings("=", "#")
DEFAULT_SETTINGS: Final[ConfigSettings] = MIXED_SETTINGS


def resolve_settings(settings: ConfigSettings | None) -> ConfigSettings:
    """Return ``settings`` or the documented default when ``None``."""
    return DEFAULT_SETTINGS if settings is None else settings
