from __future__ import annotations

import logging

from infra.logging_config import setup_logging
from infra.operational_support import (
    TraceIdLogFilter,
    bind_trace_id,
    create_trace_id,
    current_trace_id,
)


def _managed_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_isl_managed", False)]


def _remove_managed_handlers() -> None:
    root = logging.getLogger()
    for handler in _managed_handlers():
        root.removeHandler(handler)
        handler.close()


def test_bind_trace_id_scopes_the_value():
    assert current_trace_id() is None

    with bind_trace_id("inc-test-123") as trace_id:
        assert trace_id == "inc-test-123"
        assert current_trace_id() == "inc-test-123"
        with bind_trace_id() as nested:
            assert nested.startswith("trc-")
            assert current_trace_id() == nested
        assert current_trace_id() == "inc-test-123"

    assert current_trace_id() is None


def test_create_trace_id_is_unique():
    assert create_trace_id() != create_trace_id()


def test_trace_filter_tags_records():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    TraceIdLogFilter().filter(record)
    assert record.trace_id == "-"

    with bind_trace_id("inc-9"):
        TraceIdLogFilter().filter(record)
    assert record.trace_id == "inc-9"


def test_setup_logging_writes_traced_lines(tmp_path, monkeypatch):
    monkeypatch.setenv("ISL_LOG_LEVEL", "debug")
    root = logging.getLogger()
    previous_level = root.level
    try:
        log_file = setup_logging(tmp_path)
        # a second call replaces the handlers instead of stacking them
        log_file = setup_logging(tmp_path)
        assert len(_managed_handlers()) == 2
        assert root.level == logging.DEBUG

        with bind_trace_id("inc-log-1"):
            logging.getLogger("tests.logging").debug("schedule analyzed")
        for handler in _managed_handlers():
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert log_file == tmp_path / "app.log"
        assert "trace=inc-log-1 tests.logging - schedule analyzed" in text
        assert "Logging initialized" in text
    finally:
        _remove_managed_handlers()
        root.setLevel(previous_level)


def test_unknown_log_level_falls_back_to_info(tmp_path, monkeypatch):
    monkeypatch.setenv("ISL_LOG_LEVEL", "chatty")
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging(tmp_path)
        assert root.level == logging.INFO
    finally:
        _remove_managed_handlers()
        root.setLevel(previous_level)
