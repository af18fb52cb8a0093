"""
Structured logging for dmx-address.

Loggers are structlog wrappers around the stdlib ``dmx_address`` logger
hierarchy. The root of that hierarchy carries a NullHandler, so nothing is
written anywhere until the host application configures logging.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

LOGGER_NAME = "dmx_address"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to a stdlib logger under ``dmx_address``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str = "INFO", stream: Optional[object] = None) -> None:
    """
    Send dmx-address log lines to ``stream`` (stderr by default).

    Intended for applications and scripts; the library never calls this
    itself. Calling it again replaces the handler installed by the previous
    call; handlers added by the host are left alone.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
    logger.addHandler(_handler)
