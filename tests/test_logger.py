"""Tests for logging configuration."""

from __future__ import annotations

import pytest
import structlog
from structlog.testing import capture_logs

from cp_docs.logger import run_context, setup_logging


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        yield
        setup_logging()

    def _events(self, *levels: str) -> list[str]:
        log = structlog.get_logger("test")
        with capture_logs() as logs:
            for level in levels:
                getattr(log, level)(f"{level}-event")
        return [entry["event"] for entry in logs]

    def test_debug_is_hidden_at_info(self):
        setup_logging("INFO")
        assert self._events("debug", "info", "error") == ["info-event", "error-event"]

    def test_debug_is_shown_when_requested(self):
        setup_logging("DEBUG")
        assert self._events("debug", "info") == ["debug-event", "info-event"]

    def test_level_comes_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        setup_logging()
        assert self._events("info", "warning") == ["warning-event"]

    def test_explicit_level_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        setup_logging("DEBUG")
        assert self._events("debug") == ["debug-event"]

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert self._events("debug", "info") == ["info-event"]


class TestRunContext:
    def test_binds_paths_only_inside_block(self, tmp_path):
        with run_context(tmp_path / "src", tmp_path / "out"):
            bound = structlog.contextvars.get_contextvars()
            assert bound["root"] == str(tmp_path / "src")
            assert bound["destination_root"] == str(tmp_path / "out")

        assert "root" not in structlog.contextvars.get_contextvars()
