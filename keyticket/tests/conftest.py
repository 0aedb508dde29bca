from __future__ import annotations

import logging
from typing import Iterator

import pytest

from keyticket.logging import LIBRARY_LOGGER
from keyticket.services.ticket_builder import create_identity_ticket


@pytest.fixture(scope="session")
def alice_ticket() -> bytes:
    return create_identity_ticket("alice", "correct horse battery staple", bytes(32))


@pytest.fixture(autouse=True)
def _restore_library_logger() -> Iterator[None]:
    logger = logging.getLogger(LIBRARY_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
