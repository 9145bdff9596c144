# config_helper/data_model/__init__.py
from .config_defines import (
    COMMENT_MARKERS,
    FILE_DATE_PLACEHOLDER,
    FILE_NAME_PLACEHOLDER,
    SECTION_PREFIX,
    SECTION_SUFFIX,
    STRING_MARKER,
    VALUE_MARKERS,
)
from .config_settings import (
    DEFAULT_SETTINGS,
    MIXED_SETTINGS,
    UNIX_SETTINGS,
    WINDOWS_SETTINGS,
    ConfigSettings,
)
from .entities import (
    ConfigArray,
    ConfigComment,
    ConfigContent,
    ConfigHeader,
    ConfigOther,
    ConfigOthers,
    ConfigSection,
    ConfigValue,
    ConfigWarning,
)
from .interfaces import (
    IConfigArray,
    IConfigEntity,
    IConfigItem,
    ICustomParser,
    IParserEmitter,
)
from .line_kinds import LineKind, classify_line

__all__ = [
    "COMMENT_MARKERS", "FILE_DATE_PLACEHOLDER", "FILE_NAME_PLACEHOLDER",
    "SECTION_PREFIX", "SECTION_SUFFIX", "STRING_MARKER", "VALUE_MARKERS",
    "ConfigSettings", "DEFAULT_SETTINGS", "MIXED_SETTINGS", "UNIX_SETTINGS",
    "WINDOWS_SETTINGS", "ConfigArray", "ConfigComment", "ConfigContent",
    "ConfigHeader", "ConfigOther", "ConfigOthers", "ConfigSection", "ConfigValue",
    "ConfigWarning", "IConfigArray", "IConfigEntity", "IConfigItem",
    "ICustomParser", "IParserEmitter", "LineKind", "classify_line"]
