from __future__ import annotations

import logging
import logging.config
from logging import LogRecord
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class ModuleStemFilter(logging.Filter):
    """
    Attach the module file stem to every record for the pretty formatter.
    """

    def filter(self, record: LogRecord) -> bool:
        record.filenameStem = Path(record.filename).stem
        return True


def rich_handler_factory() -> RichHandler:
    return RichHandler(
        console=Console(stderr=True, width=120),
        rich_tracebacks=True,
        markup=True,
        show_path=False,
    )


LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "stem": {
            "()": ModuleStemFilter,
        }
    },
    "formatters": {
        "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        "pretty": {"format": "[[cyan]%(filenameStem)s[/]] %(message)s"},
    },
    "handlers": {
        "plain": {
            "formatter": "standard",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
        "rich": {
            "()": rich_handler_factory,
            "formatter": "pretty",
            "filters": ["stem"],
        },
    },
    "loggers": {
        "pynec": {
            "handlers": ["rich"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}


def logging_config(
    level: str | int = "WARNING", *, rich: bool = True
) -> dict[str, Any]:
    """
    Build a ``dictConfig`` dictionary for the pynec loggers.

    Args:
        level: Level applied to the ``pynec`` logger (``"DEBUG"`` shows index renumbering).
        rich: Use the rich handler if True, a plain stderr stream handler otherwise.

    Returns:
        A copy of :data:`LOGGING_CONFIG` with the level and handler applied.
    """
    if isinstance(level, int):
        level = logging.getLevelName(level)
    config = {
        **LOGGING_CONFIG,
        "loggers": {
            "pynec": {
                "handlers": ["rich" if rich else "plain"],
                "level": level,
                "propagate": False,
            },
        },
    }
    return config


def setup(level: str | int = "WARNING", *, rich: bool = True) -> None:
    """
    Initialize logging for pynec. The library never calls this on import.
    """
    logging.config.dictConfig(logging_config(level, rich=rich))


__all__ = ("LOGGING_CONFIG", "logging_config", "setup")
