# config_helper/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": "logs/config_helper.log",
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
        },
    },
}


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """
    Apply ``LOGGING`` via ``dictConfig``.

    The console handler runs at ``level``. The rotating file handler is only
    installed when ``log_file`` is given; its directory is created on demand.
    Library modules never call this; applications (and the CLI) do.
    """
    config = copy.deepcopy(LOGGING)
    config["handlers"]["console"]["level"] = level.upper()
    if log_file is None:
        del config["handlers"]["file"]
        config["loggers"][""]["handlers"] = ["console"]
    else:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        config["handlers"]["file"]["filename"] = str(path)
    logging.config.dictConfig(config)
