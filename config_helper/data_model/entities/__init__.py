# config_helper/data_model/entities/__init__.py
from .config_array import ConfigArray
from .config_comment import ConfigComment
from .config_content import ConfigContent
from .config_header import ConfigHeader
from .config_other import ConfigOther
from .config_others import ConfigOthers
from .config_section import ConfigSection
from .config_value import ConfigValue
from .config_warning import ConfigWarning

__all__ = [
    "ConfigArray",
    "ConfigComment",
    "ConfigContent",
    "ConfigHeader",
    "ConfigOther",
    "ConfigOthers",
    "ConfigSection",
    "ConfigValue",
    "ConfigWarning",
]
