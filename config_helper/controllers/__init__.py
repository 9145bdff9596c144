from .config_binder import ConfigBinder, to_content, to_instance
from .config_reader import (
    MISPLACED_COMMENT,
    MISPLACED_VALUE,
    read,
    read_file,
    read_lines,
    read_reader,
    read_stream,
    read_text,
)
from .config_writer import (
    render,
    write,
    write_file,
    write_stream,
    write_text,
    write_writer,
)
from .descriptors import (
    SectionDescriptor,
    ValueDescriptor,
    config_header,
    config_section,
    config_value,
    parse_sections,
)

__all__ = [
    "ConfigBinder",
    "to_content",
    "to_instance",
    "MISPLACED_COMMENT",
    "MISPLACED_VALUE",
    "read",
    "read_file",
    "read_lines",
    "read_reader",
    "read_stream",
    "read_text",
    "render",
    "write",
    "write_file",
    "write_stream",
    "write_text",
    "write_writer",
    "SectionDescriptor",
    "ValueDescriptor",
    "config_header",
    "config_section",
    "config_value",
    "parse_sections",
]
