# config_helper/__init__.py
"""
Reading, writing and binding of INI-like configuration files.

Typical use::

    content = read_file("service.cfg", warnings)
    settings = to_instance(ServiceSettings, content, culture="en-US")
    write_file(to_content(settings), "service.cfg", overwrite=True)
"""

from .controllers import (
    ConfigBinder,
    config_header,
    config_section,
    config_value,
    read,
    read_file,
    read_lines,
    read_reader,
    read_stream,
    read_text,
    render,
    to_content,
    to_instance,
    write,
    write_file,
    write_stream,
    write_text,
    write_writer,
)
from .data_model import (
    DEFAULT_SETTINGS,
    MIXED_SETTINGS,
    UNIX_SETTINGS,
    WINDOWS_SETTINGS,
    ConfigComment,
    ConfigContent,
    ConfigHeader,
    ConfigOther,
    ConfigOthers,
    ConfigSection,
    ConfigSettings,
    ConfigValue,
    ConfigWarning,
    ICustomParser,
)
from .data_model.parsers_emitters import ConfigFileParserEmitter
from .exceptions import (
    ConfigBindingError,
    ConfigFormatError,
    ConfigHelperError,
    CustomParserError,
    UnsupportedTypeError,
    UnsupportedValueError,
)

__all__ = [
    "ConfigBinder", "config_header", "config_section", "config_value",
    "read", "read_file", "read_lines", "read_reader", "read_stream", "read_text",
    "render", "to_content", "to_instance", "write", "write_file", "write_stream",
    "write_text", "write_writer", "DEFAULT_SETTINGS", "MIXED_SETTINGS",
    "UNIX_SETTINGS", "WINDOWS_SETTINGS", "ConfigComment", "ConfigContent",
    "ConfigHeader", "ConfigOther", "ConfigOthers", "ConfigSection",
    "ConfigSettings", "ConfigValue", "ConfigWarning", "ICustomParser",
    "ConfigFileParserEmitter", "ConfigBindingError", "ConfigFormatError",
    "ConfigHelperError", "CustomParserError", "UnsupportedTypeError",
    "UnsupportedValueError"]
