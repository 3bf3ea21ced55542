"""
Tests for mangologs_logging: import without circular imports, record shape,
and reconfiguration.
"""

from __future__ import annotations

import io
import json

import pytest

from conftest import VALID_WALLET
from mangologs.mangologs_logging import bind_address, configure_logging, get_logger


def test_logging_import():
    """Import get_logger from mangologs_logging and use the logger."""
    from mangologs.mangologs_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    # Smoke test: call info (should not raise)
    logger.info("test_message", key="value")


def test_bind_address_logger():
    from mangologs.mangologs_logging import bind_address

    log = bind_address("9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka")
    log.info("bound_message", step="fetch")


@pytest.fixture
def restore_logging():
    yield
    configure_logging()


def test_json_records_carry_event_type_and_context(restore_logging):
    stream = io.StringIO()
    configure_logging(level="debug", fmt="json", stream=stream)

    get_logger("mangologs.test").debug("owner_classified", owner_class="system_owned")

    doc = json.loads(stream.getvalue().splitlines()[-1])
    assert doc["event_type"] == "owner_classified"
    assert "event" not in doc
    assert doc["owner_class"] == "system_owned"
    assert doc["logger"] == "mangologs.test"
    assert doc["level"] == "debug"
    assert doc["timestamp"]


def test_bind_address_attaches_address(restore_logging):
    stream = io.StringIO()
    configure_logging(level="info", fmt="json", stream=stream)

    bind_address(VALID_WALLET).info("resolve_done", account_count=2)

    doc = json.loads(stream.getvalue().splitlines()[-1])
    assert doc["address"] == VALID_WALLET
    assert doc["account_count"] == 2


def test_module_level_logger_follows_reconfiguration(restore_logging):
    """Loggers created at import time pick up a later configure_logging()."""
    from mangologs.solana_accounts import fetcher

    stream = io.StringIO()
    configure_logging(level="warning", fmt="json", stream=stream)

    fetcher.logger.info("account_fetched")
    assert stream.getvalue() == ""
    fetcher.logger.warning("account_fetch_failed", error="timed out")
    assert json.loads(stream.getvalue())["event_type"] == "account_fetch_failed"


def test_records_go_to_stderr_not_stdout(restore_logging, capsys):
    configure_logging(level="info", fmt="json")

    get_logger("mangologs.test").info("cli_resolve_failed")

    out = capsys.readouterr()
    assert out.out == ""
    assert json.loads(out.err)["event_type"] == "cli_resolve_failed"


def test_unknown_level_or_format_rejected(restore_logging):
    with pytest.raises(ValueError, match="log level"):
        configure_logging(level="loud")
    with pytest.raises(ValueError, match="log format"):
        configure_logging(fmt="xml")


def test_bad_env_level_falls_back(restore_logging, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    stream = io.StringIO()
    configure_logging(fmt="json", stream=stream)

    get_logger("mangologs.test").debug("hidden")
    get_logger("mangologs.test").info("shown")

    assert [json.loads(line)["event_type"] for line in stream.getvalue().splitlines()] == ["shown"]
