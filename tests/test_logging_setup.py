from __future__ import annotations

import logging

from utils.logging_setup import SafeExtraFormatter


def _record(**extra):
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_fills_missing_extras(monkeypatch):
    monkeypatch.setenv("RUN_ID", "run-42")
    fmt = SafeExtraFormatter(fmt="%(message)s step=%(step)s row=%(row)s run_id=%(run_id)s")
    assert fmt.format(_record()) == "hello step=- row=- run_id=run-42"


def test_formatter_keeps_given_extras(monkeypatch):
    monkeypatch.delenv("RUN_ID", raising=False)
    fmt = SafeExtraFormatter(fmt="%(message)s step=%(step)s row=%(row)s run_id=%(run_id)s")
    out = fmt.format(_record(step="assemble_applicants", row=4))
    assert out == "hello step=assemble_applicants row=4 run_id=-"
