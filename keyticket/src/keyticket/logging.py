"""Logging setup for keyticket.

Library modules log through stdlib ``logging`` under the ``keyticket`` logger
with event fields passed as ``extra``. Importing the package only attaches a
``NullHandler``, so ticket creation and verification stay silent until a host
calls :func:`configure_logging`, which renders those records as JSON lines
through structlog.
"""
from __future__ import annotations

import logging
import sys
from typing import Dict, TextIO

import structlog

LIBRARY_LOGGER = "keyticket"
_DEFAULT_LEVEL = "info"


def install_null_handler() -> None:
    logger = logging.getLogger(LIBRARY_LOGGER)
    if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        logger.addHandler(logging.NullHandler())


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Emit ``keyticket`` records as JSON with ``ts``, ``level``, ``logger`` and ``event``.

    Fields given through ``extra`` (``name_length``, ``valid``, ``reason`` ...)
    are copied into the JSON object. Output defaults to stderr so that command
    output on stdout stays machine readable. Calling it again replaces the
    previously installed handler.
    """

    numeric_level = _level_from_str((level or _DEFAULT_LEVEL).lower())

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.processors.TimeStamper(fmt="iso", key="ts"),
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.ExtraAdder(),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
    )

    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.handlers = [h for h in logger.handlers if isinstance(h, logging.NullHandler)]
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False


def _level_from_str(level: str) -> int:
    mapping: Dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }
    return mapping.get(level, logging.INFO)


__all__ = ["LIBRARY_LOGGER", "configure_logging", "install_null_handler"]
