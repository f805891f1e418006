"""Tests for environment-driven configuration."""

import logging

import pytest

from src.flight_router.config import Config, _split_origins


class TestConfig:
    def test_log_level(self, monkeypatch) -> None:
        monkeypatch.setattr(Config, "LOG_LEVEL", "DEBUG")
        assert Config.log_level() == logging.DEBUG

    def test_unknown_log_level(self, monkeypatch) -> None:
        monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="FLIGHT_ROUTER_LOG_LEVEL"):
            Config.log_level()

    def test_split_origins(self) -> None:
        assert _split_origins(" http://a.com, ,http://b.com ") == [
            "http://a.com",
            "http://b.com",
        ]
