from __future__ import annotations

import io
import json
import logging

import pytest

from keyticket.logging import LIBRARY_LOGGER, configure_logging, install_null_handler
from keyticket.services.ticket_builder import create_identity_ticket
from keyticket.services.ticket_verifier import verify_identity_ticket

PASSWORD = "correct horse battery staple"


def _reset_library_logger() -> None:
    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    install_null_handler()


def test_library_is_silent_without_configuration(capsys: pytest.CaptureFixture[str]) -> None:
    _reset_library_logger()
    ticket = create_identity_ticket("alice", PASSWORD, bytes(32))
    assert verify_identity_ticket(ticket, bytes(32))
    assert not verify_identity_ticket(b"", bytes(32))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_install_null_handler_is_idempotent() -> None:
    _reset_library_logger()
    install_null_handler()
    handlers = logging.getLogger(LIBRARY_LOGGER).handlers
    assert sum(isinstance(handler, logging.NullHandler) for handler in handlers) == 1


def test_configured_logging_emits_json_events() -> None:
    stream = io.StringIO()
    configure_logging("debug", stream=stream)
    ticket = create_identity_ticket("alice", PASSWORD, bytes(32))
    verify_identity_ticket(ticket, b"other")
    verify_identity_ticket(ticket[:10], bytes(32))

    output = stream.getvalue()
    assert PASSWORD not in output
    events = [json.loads(line) for line in output.splitlines()]
    created, wrong_challenge, malformed = events
    assert created["event"] == "ticket.created"
    assert created["level"] == "debug"
    assert created["logger"] == "keyticket.services.ticket_builder"
    assert created["name_length"] == 5
    assert created["ticket_length"] == 167
    assert "ts" in created
    assert wrong_challenge["event"] == "ticket.verify"
    assert wrong_challenge["valid"] is False
    assert wrong_challenge["reason"] == "bad_challenge"
    assert malformed["reason"] == "malformed"


def test_configured_level_filters_debug() -> None:
    stream = io.StringIO()
    configure_logging("info", stream=stream)
    create_identity_ticket("alice", PASSWORD, bytes(32))
    assert stream.getvalue() == ""


def test_reconfiguring_replaces_handler() -> None:
    first, second = io.StringIO(), io.StringIO()
    configure_logging("debug", stream=first)
    configure_logging("debug", stream=second)
    verify_identity_ticket(b"", b"c")
    assert first.getvalue() == ""
    assert json.loads(second.getvalue())["reason"] == "malformed"
