"""Mini README: Application-wide logging helpers for Agrodesk.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared stream handler once.
    * apply_environment_level - DEBUG in development, INFO elsewhere.

Usage:
    Feature modules declare ``LOGGER = get_logger(__name__)``. The handler
    is installed only once so reloads never stack handlers; the application
    factory then adjusts the root level from the configured environment.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False


def configure_root_logger(level: int = logging.INFO) -> None:
    """Configure the root logger with a readable single-line formatter."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def level_for_environment(environment: str) -> int:
    """Map the configured environment label to a logging level."""

    return logging.DEBUG if environment.strip().lower() == "development" else logging.INFO


def apply_environment_level(environment: str) -> None:
    """Set the root level from the environment label.

    Runs inside the server process itself, so reload workers spawned by
    uvicorn pick up the level too.
    """

    configure_root_logger()
    logging.getLogger().setLevel(level_for_environment(environment))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
