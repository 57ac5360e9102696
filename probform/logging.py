from __future__ import annotations

import logging
import logging.config
from logging import LogRecord
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


class AppFilter(logging.Filter):
    """Expose the source file stem as ``%(filenameStem)s``."""

    def filter(self, record: LogRecord) -> bool:
        record.filenameStem = Path(record.filename).stem
        return True


def rich_handler_factory() -> RichHandler:
    return RichHandler(
        console=Console(stderr=True, width=160),
        rich_tracebacks=True,
        markup=True,
    )


LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "appfilter": {
            "()": AppFilter,
        }
    },
    "formatters": {
        "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        "pretty": {"format": "[[yellow]%(filenameStem)s[/]] %(message)s"},
    },
    "handlers": {
        "default": {
            "formatter": "standard",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
        "rich": {
            "()": rich_handler_factory,
            "formatter": "pretty",
            "filters": ["appfilter"],
        },
    },
    "loggers": {
        "": {
            "handlers": ["default", "rich"],
            "level": "WARNING",
        },
        "probform": {
            "handlers": [],
            "level": "INFO",
            "propagate": True,
        },
    },
}


def setup(level: int | str | None = None) -> None:
    """
    Initialize logging based on the configuration dictionary in this file.

    Args:
        level: Optional level for the ``probform`` logger, e.g. ``"DEBUG"``
            to see every rejected argument.
    """
    logging.config.dictConfig(LOGGING_CONFIG)
    if level is not None:
        logging.getLogger("probform").setLevel(level)


__all__ = ("setup",)
