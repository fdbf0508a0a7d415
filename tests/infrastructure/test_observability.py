"""JSON log formatter: base fields and extras.

Tests cover:
    - Base fields always present
    - Known extras surfaced, unknown extras dropped, None extras skipped
    - UUID extras rendered as strings
    - Every error log extra survives formatting
"""

import json
import logging
from uuid import uuid4

from domain_offers.core.errors import ErrorContext, StorageError
from domain_offers.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord("domain_offers.test", logging.INFO, __file__, 1, "hello", None, None)
    record.__dict__.update(extra)
    return record


def test_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "domain_offers.test"
    assert log["message"] == "hello"
    assert "timestamp" in log


def test_known_extras_surface():
    ledger_id = uuid4()
    log = json.loads(JSONFormatter().format(
        _record(domain="example.com", total_offers=3, ledger_id=ledger_id, secret="x"),
    ))
    assert log["domain"] == "example.com"
    assert log["total_offers"] == 3
    assert log["ledger_id"] == str(ledger_id)
    assert "secret" not in log


def test_none_extras_skipped():
    log = json.loads(JSONFormatter().format(_record(domain=None)))
    assert "domain" not in log


def test_error_extras_surface():
    err = StorageError("disk full", "commit", ErrorContext(domain="example.com"))
    log = json.loads(JSONFormatter().format(_record(**err.to_log_extra())))
    assert log["error_code"] == "STORAGE_ERROR"
    assert log["domain"] == "example.com"
    assert log["operation"] == "commit"
