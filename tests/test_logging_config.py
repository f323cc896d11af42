from __future__ import annotations

import logging

import pytest
import structlog

from attachment_ingest_core.logging_config import configure_logging


@pytest.fixture()
def configure_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    calls: list[dict] = []
    monkeypatch.setattr(structlog, "configure", lambda **kwargs: calls.append(kwargs))
    return calls


def test_json_logs_end_with_json_renderer(configure_calls: list[dict]) -> None:
    configure_logging("debug", json_logs=True)
    processors = configure_calls[0]["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_console_logs_use_console_renderer(configure_calls: list[dict]) -> None:
    configure_logging("INFO", json_logs=False)
    processors = configure_calls[0]["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_unknown_level_falls_back_to_info(configure_calls: list[dict]) -> None:
    configure_logging("chatty")
    wrapper = configure_calls[0]["wrapper_class"]
    assert wrapper is structlog.make_filtering_bound_logger(logging.INFO)
