"""Unit tests for structured logging setup."""

from __future__ import annotations

import json

from core.logging_config import configure_logging, get_logger


def test_logger_writes_json_events_to_stderr(capsys) -> None:
    """Events at or above the configured level should render as JSON on stderr."""
    configure_logging("INFO")
    get_logger("tests.logging").info("probe_event", record_count=3)
    captured = capsys.readouterr()
    configure_logging()

    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "probe_event"
    assert event["record_count"] == 3
    assert event["level"] == "info"
    assert captured.out == ""


def test_logger_filters_events_below_level(capsys) -> None:
    """Events below the configured level should be dropped."""
    configure_logging("WARNING")
    get_logger("tests.logging").info("hidden_event")

    assert "hidden_event" not in capsys.readouterr().err
