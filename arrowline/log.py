"""Logging setup for command-line use."""

from __future__ import annotations

import logging

_LOGGER_CONFIGURED = False


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure a console handler on the root logger.

    Library code only creates module loggers; this is called once by the
    command line. Repeated calls are no-ops.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(fmt)
    logger.addHandler(handler)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
