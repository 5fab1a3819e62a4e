"""
Logging Configuration
Routes the configurator's module loggers and uvicorn's server loggers
through one set of handlers, so session activity and request logs share a
format and an optional log file.
"""
from __future__ import annotations

import logging
import sys


PACKAGE_LOGGER = "configurator"
# uvicorn.error propagates into "uvicorn"; access logs do not.
SERVER_LOGGERS = ("uvicorn", "uvicorn.access")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: int | str) -> int:
    """Turn "debug", "INFO" or 20 into a logging level number."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def build_handlers(level: int, log_file: str | None = None) -> list[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def _install(logger: logging.Logger, level: int, handlers: list[logging.Handler]) -> None:
    # Reloads call setup_logging again
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.setLevel(level)
    for handler in handlers:
        logger.addHandler(handler)


def setup_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
    include_server: bool = True,
) -> None:
    """
    Configures the 'configurator' logger and, optionally, uvicorn's loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG or "info")
        log_file: Optional path to append logs to.
        include_server: Also route uvicorn's loggers through the same handlers.
    """
    level = resolve_level(level)
    handlers = build_handlers(level, log_file)

    _install(logging.getLogger(PACKAGE_LOGGER), level, handlers)
    if include_server:
        for name in SERVER_LOGGERS:
            server = logging.getLogger(name)
            _install(server, level, handlers)
            server.propagate = False

    logging.getLogger(PACKAGE_LOGGER).info("Logging initialized at %s.", logging.getLevelName(level))
