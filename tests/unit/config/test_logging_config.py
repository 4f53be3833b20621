"""JsonFormatter and configure_logging: structured output, correlation id, idempotent setup."""

import json
import logging
import sys

import pytest

from passport_office.config.logging import JsonFormatter, configure_logging
from passport_office.core.context import correlation_id_ctx, correlation_scope


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg: str = "passport_issued", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="passport_office.issuance",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=None,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_format_is_json_with_core_fields():
    out = json.loads(JsonFormatter().format(_record()))
    assert out["message"] == "passport_issued"
    assert out["level"] == "INFO"
    assert out["logger"] == "passport_office.issuance"
    assert out["correlation_id"] is None
    assert "timestamp" in out


def test_format_includes_extra_fields():
    out = json.loads(JsonFormatter().format(_record(passport_id="abc-123", reason="bad name")))
    assert out["passport_id"] == "abc-123"
    assert out["reason"] == "bad name"
    assert "pathname" not in out
    assert "lineno" not in out


def test_format_includes_correlation_id():
    with correlation_scope("corr-42") as cid:
        assert cid == "corr-42"
        out = json.loads(JsonFormatter().format(_record()))
    assert out["correlation_id"] == "corr-42"
    assert correlation_id_ctx.get() is None


def test_correlation_scope_generates_id():
    with correlation_scope() as cid:
        assert cid
        assert correlation_id_ctx.get() == cid


def test_format_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    out = json.loads(JsonFormatter().format(record))
    assert "ValueError: boom" in out["exc_info"]


def test_configure_logging_idempotent(root_logger):
    configure_logging("DEBUG")
    configure_logging("WARNING")
    json_handlers = [h for h in root_logger.handlers if isinstance(h.formatter, JsonFormatter)]
    assert len(json_handlers) == 1
    assert root_logger.level == logging.WARNING
