from __future__ import annotations

import logging
import logging.config
from pathlib import Path

from todomvc.settings import Settings

LOG_FILE_NAME = "todomvc.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def build_logging_config(settings: Settings) -> dict:
    level = "DEBUG" if settings.debug else "INFO"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": _FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "default",
                "level": level,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": str(Path(settings.log_dir) / LOG_FILE_NAME),
                "maxBytes": _MAX_LOG_BYTES,
                "backupCount": _BACKUP_COUNT,
                "encoding": "utf-8",
                "formatter": "default",
                "level": level,
            },
        },
        "root": {"level": level, "handlers": ["console", "file"]},
    }


def setup_logging(settings: Settings) -> None:
    """Route all loggers to stdout and a rotating file under ``settings.log_dir``.

    Calling it again replaces the handlers, so a changed level takes effect.
    """
    Path(settings.log_dir).mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(settings))
    logging.getLogger(__name__).debug("Logging to %s", Path(settings.log_dir) / LOG_FILE_NAME)
