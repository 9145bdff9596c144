# tests/utilities/test_config_logging.py
from __future__ import annotations

import logging
import logging.handlers

from config_helper.utilities.config_logging import LOGGING, configure_logging


def test_logging_dict_shape():
    # Act / Assert
    assert LOGGING["version"] == 1
    assert {"simple", "verbose"} <= set(LOGGING["formatters"])
    assert LOGGING["handlers"]["file"]["class"] == "logging.handlers.RotatingFileHandler"


def test_configure_logging_console_only_does_not_touch_template():
    # Act
    configure_logging("debug")

    # Assert
    root = logging.getLogger()
    assert not any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
    assert "file" in LOGGING["handlers"], "Template must not be mutated"


def test_configure_logging_with_file_creates_directory(tmp_path):
    # Arrange
    log_file = tmp_path / "logs" / "app.log"

    # Act
    configure_logging("INFO", log_file)
    logging.getLogger("config_helper.test").info("hello")

    # Assert
    root = logging.getLogger()
    file_handlers = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert log_file.parent.is_dir()
    assert len(file_handlers) == 1
    for h in file_handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    # Cleanup
    configure_logging("WARNING")
