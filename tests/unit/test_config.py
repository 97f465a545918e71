"""Tests for settings loading and logging configuration."""

import json
import sys

import pytest
from loguru import logger
from pydantic import ValidationError

from tracklist.config import Settings, get_logger, settings, setup_loguru_logger


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run settings tests away from any local .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("TRACKLIST__DEFAULT_CAPACITY", "LOGGING__CONSOLE_LEVEL", "LOGGING__LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_logger():
    """Restore a default stderr handler after a test reconfigures loguru."""
    yield
    logger.remove()
    logger.configure(extra={})
    logger.add(sys.stderr)


class TestSettings:
    """Test pydantic settings defaults and environment overrides."""

    def test_defaults(self, clean_env):
        """Test default values without any environment."""
        config = Settings()

        assert config.tracklist.default_capacity == 10
        assert config.logging.console_level == "INFO"
        assert config.logging.log_file is None

    def test_nested_environment_override(self, clean_env, monkeypatch):
        """Test nested values are read with the double underscore delimiter."""
        monkeypatch.setenv("TRACKLIST__DEFAULT_CAPACITY", "25")
        monkeypatch.setenv("LOGGING__CONSOLE_LEVEL", "DEBUG")

        config = Settings()

        assert config.tracklist.default_capacity == 25
        assert config.logging.console_level == "DEBUG"

    def test_dotenv_file(self, clean_env, tmp_path):
        """Test values are loaded from a .env file in the working directory."""
        (tmp_path / ".env").write_text("TRACKLIST__DEFAULT_CAPACITY=3\n")

        assert Settings().tracklist.default_capacity == 3

    def test_negative_default_capacity_rejected(self, clean_env, monkeypatch):
        """Test validation of the default capacity."""
        monkeypatch.setenv("TRACKLIST__DEFAULT_CAPACITY", "-1")

        with pytest.raises(ValidationError):
            Settings()


class TestLogging:
    """Test loguru setup and logger factory."""

    def test_get_logger_binds_context(self):
        """Test module loggers carry module and service context."""
        records = []
        handler_id = logger.add(lambda message: records.append(message.record))
        try:
            get_logger("tests.module").info("hello")
        finally:
            logger.remove(handler_id)

        assert records[0]["extra"]["module"] == "tests.module"
        assert records[0]["extra"]["service"] == "tracklist"

    def test_setup_without_log_file(self, monkeypatch, capsys, restore_logger):
        """Test console-only setup honours the verbose flag."""
        monkeypatch.setattr(settings.logging, "log_file", None)

        setup_loguru_logger(verbose=True)
        get_logger(__name__).debug("console debug message")

        assert "console debug message" in capsys.readouterr().out

    def test_setup_with_log_file(self, monkeypatch, tmp_path, restore_logger):
        """Test a serialized file sink is added when a log file is configured."""
        log_file = tmp_path / "logs" / "tracklist.log"
        monkeypatch.setattr(settings.logging, "log_file", log_file)
        monkeypatch.setattr(settings.logging, "real_time_debug", True)

        setup_loguru_logger()
        get_logger("tests.file").info("written to file")
        logger.remove()

        lines = log_file.read_text().splitlines()
        entry = json.loads(lines[-1])
        assert entry["record"]["message"] == "written to file"
        assert entry["record"]["extra"]["module"] == "tests.file"
