# config_helper/data_model/interfaces/__init__.py
"""
Interfaces for the configuration document model.
"""

from .i_config_array import IConfigArray
from .i_config_entity import IConfigEntity
from .i_config_item import IConfigItem
from .i_custom_parser import ICustomParser
from .i_parser_emitter import IParserEmitter

__all__ = [
    "IConfigItem",
    "IConfigEntity",
    "IConfigArray",
    "ICustomParser",
    "IParserEmitter",
]
