"""Logging setup for the temporal engine.

Modules log through ``logging.getLogger(__name__)``. The package only attaches
a ``NullHandler`` on import; applications either configure logging themselves
or opt in to :func:`configure_logging`.
"""

import logging

from .config import get_settings

PACKAGE_LOGGER = "temporal_engine"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    The configured logger stops propagating to the root logger so records are
    not emitted twice when the application also has handlers.

    Args:
        level: Explicit level name; defaults to the configured settings level.

    Returns:
        The ``temporal_engine`` logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel((level or get_settings().effective_log_level).upper())

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    logger.propagate = False
    return logger
