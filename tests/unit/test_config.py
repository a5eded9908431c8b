"""Unit tests for settings and logging setup."""

import importlib

import pytest
import structlog
from pydantic import ValidationError

from notion_exporter import Settings
from notion_exporter.logging import get_logger, setup_logging


class TestSettings:
    """Test environment driven configuration."""

    def test_defaults(self, monkeypatch):
        for name in ("BASE_URL", "TIME_ZONE", "LOCALE", "POLL_INTERVAL", "POLL_TIMEOUT"):
            monkeypatch.delenv(f"NOTION_EXPORT_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert str(settings.base_url) == "https://www.notion.so/api/v3/"
        assert settings.time_zone == "Europe/Zurich"
        assert settings.locale == "en"
        assert settings.poll_interval == 0.05
        assert settings.poll_timeout is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NOTION_EXPORT_LOCALE", "fr")
        monkeypatch.setenv("NOTION_EXPORT_POLL_INTERVAL", "0.5")
        monkeypatch.setenv("NOTION_EXPORT_POLL_TIMEOUT", "30")

        settings = Settings(_env_file=None)

        assert settings.locale == "fr"
        assert settings.poll_interval == 0.5
        assert settings.poll_timeout == 30

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, poll_interval=0)


@pytest.fixture
def restore_structlog():
    yield
    structlog.reset_defaults()


class TestLogging:
    """Test that the package leaves logging configuration to the application."""

    def test_import_keeps_application_configuration(self, restore_structlog):
        renderer = structlog.processors.KeyValueRenderer()
        structlog.configure(processors=[renderer])

        importlib.reload(importlib.import_module("notion_exporter.logging"))
        importlib.reload(importlib.import_module("notion_exporter.exporter"))

        assert structlog.get_config()["processors"] == [renderer]

    def test_get_logger_does_not_configure(self, restore_structlog):
        renderer = structlog.processors.KeyValueRenderer()
        structlog.configure(processors=[renderer])

        get_logger().info("Test event", component="tests")

        assert structlog.get_config()["processors"] == [renderer]

    def test_setup_logging_renders_json(self, restore_structlog):
        setup_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
