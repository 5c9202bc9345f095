"""
Debug logging for binding passes, built on loguru.

`LOG` writes one record per notable engine event: a pass starting, a
parameter bound, a default applied, a pass failing. Records are tagged with
`app="tokenbind"` and go to stderr unless `TKB_BEQUIET` is set. Call
`log_configure` to send them to another sink or raise the level.

Example:
    from tokenbind.lib.log import LOG
    LOG("binding 3 parameters")
"""

import sys
from typing import Any
from loguru import logger

APP_TAG: str = "tokenbind"

app_logger = logger.bind(app=APP_TAG)

logger_format: str = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<magenta>{extra[app]}</magenta> "
    "<level>{level: <5}</level> "
    "<cyan>{module}.{function}:{line}</cyan> | "
    "<level>{message}</level>"
)


def record_isEngine(record: dict[str, Any]) -> bool:
    return record["extra"].get("app") == APP_TAG


def log_configure(sink: Any = sys.stderr, level: str = "DEBUG") -> int:
    """
    Route engine records to `sink`, replacing any handlers added before.

    :param sink: Anything loguru accepts as a sink (stream, path, callable).
    :param level: Minimum level written.
    :return: The loguru handler id.
    """
    logger.remove()
    return logger.add(sink, format=logger_format, level=level, filter=record_isEngine)


log_configure()


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Log an engine event at DEBUG level unless `appsettings.beQuiet` is set.

    The record is attributed to the caller's function and line.
    """
    from tokenbind.config.settings import appsettings  # read at call time

    if not appsettings.beQuiet:
        app_logger.opt(depth=1).debug(*args, **kwargs)
