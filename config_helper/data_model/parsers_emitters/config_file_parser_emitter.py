# config_helper/data_model/parsers_emitters/config_file_parser_emitter.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Callable, List, Optional

from ...controllers.config_reader import read_text
from ...controllers.config_writer import write_text
from ..entities import ConfigContent, ConfigWarning

log = logging.getLogger(__name__)


class ConfigFileParserEmitter:
    """
    Parse configuration text into a ``ConfigContent`` and emit it back to text.

    Warnings of the most recent ``parse`` are kept in ``warnings``.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or datetime.now
        self.warnings: List[ConfigWarning] = []

    def parse(self, unparsed_string: str) -> ConfigContent:
        self.warnings = []
        content = read_text(unparsed_string, self.warnings)
        if self.warnings:
            log.info("Parsed with %d warning(s)", len(self.warnings))
        return content

    def emit(self, item: ConfigContent) -> str:
        return write_text(item, self._clock())


if TYPE_CHECKING:
    from ..interfaces import IParserEmitter

    _is_i_parser_emitter: type[IParserEmitter[ConfigContent]] = ConfigFileParserEmitter
