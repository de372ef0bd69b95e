"""Tests for logging configuration loading."""

from pathlib import Path

import pytest

from logfacade.api_error import ConfigurationError
from logfacade.config import (
    EnvLogBackends,
    EnvLogLevel,
    LoggingConfig,
    Severity,
    load_logging_config,
)
from logfacade.logger import ConsoleBackend, FileBackend, create_logger
from logfacade.logger.logger_middleware import render_request_info


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_BACKENDS", "LOG_STORAGE_ROOT", "LOG_FILE_PATH"):
        monkeypatch.delenv(name, raising=False)


class TestLoadLoggingConfig:
    """Test load_logging_config."""

    def test_minimal(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "info")

        config = load_logging_config()

        assert config.log_level == EnvLogLevel.INFO
        assert config.log_backends == (EnvLogBackends.CONSOLE,)
        assert config.storage_root is None
        assert config.log_file_path is None

    def test_full(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LOG_BACKENDS", "console, FILE")
        monkeypatch.setenv("LOG_STORAGE_ROOT", str(tmp_path))
        monkeypatch.setenv("LOG_FILE_PATH", str(tmp_path / "app.log"))

        config = load_logging_config()

        assert config.log_backends == (EnvLogBackends.CONSOLE, EnvLogBackends.FILE)
        assert config.storage_root == tmp_path
        assert config.log_file_path == tmp_path / "app.log"
        assert config.level_int == 30

    def test_missing_level(self):
        with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
            load_logging_config()

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError, match="Invalid logging configuration"):
            load_logging_config()

    def test_invalid_backend(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        monkeypatch.setenv("LOG_BACKENDS", "console,syslog")

        with pytest.raises(ConfigurationError, match="LOG_BACKENDS"):
            load_logging_config()


class TestSeverity:
    """Test the Severity enum."""

    def test_syslog_values(self):
        assert Severity.EMERGENCY == 0
        assert Severity.DEBUG == 7
        assert Severity.CRITICAL < Severity.INFO

    def test_env_level_severity(self):
        assert EnvLogLevel.WARNING.severity == Severity.WARNING
        assert str(Severity.NOTICE) == "NOTICE"
        assert Severity.NOTICE.logging_level == EnvLogLevel.INFO.level


class TestCreateLogger:
    """Test create_logger."""

    def test_backends_from_config(self, tmp_path):
        config = LoggingConfig(
            log_level=EnvLogLevel.WARNING,
            log_backends=(EnvLogBackends.CONSOLE, EnvLogBackends.FILE),
            storage_root=tmp_path,
            log_file_path=tmp_path / "app.log",
        )

        logger = create_logger(config)
        logger.log("dropped", Severity.INFO)
        logger.log("kept", Severity.ERROR)
        backends = logger.backends
        logger.shutdown()

        assert [type(backend) for backend in backends] == [ConsoleBackend, FileBackend]
        assert logger.persistence.storage_root == tmp_path
        content = (tmp_path / "app.log").read_text(encoding="utf-8")
        assert "dropped" not in content
        assert "kept" in content

    def test_request_info_callback_installed(self):
        logger = create_logger(LoggingConfig(log_level=EnvLogLevel.INFO, log_backends=()))

        assert logger._renderer.request_info_callback is render_request_info
        assert logger.backends == ()

    def test_root_default_file_path_is_project_logs(self):
        backend = FileBackend()

        assert backend.log_file_path == Path(__file__).resolve().parents[2] / "logs" / "application.log"
