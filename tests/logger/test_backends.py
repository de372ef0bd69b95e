"""Tests for the built-in backends."""

import json
from unittest.mock import MagicMock, patch

import pytest

from logfacade.config import Severity
from logfacade.logger.log_backends import ConsoleBackend, FileBackend


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / "logs" / "application.log"


class TestFileBackend:
    """Test FileBackend."""

    def test_open_creates_directory(self, log_file):
        backend = FileBackend(log_file_path=log_file)

        backend.open()
        backend.close()

        assert log_file.parent.is_dir()
        assert log_file.exists()

    def test_append_writes_one_line_per_entry(self, log_file):
        backend = FileBackend(log_file_path=log_file)
        backend.open()

        backend.append("first", Severity.INFO, None, "shop", "shop.Cart", "add")
        backend.append("second", Severity.ERROR, {"order_id": 7})
        backend.close()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert "shop" in lines[0]
        assert "INFO" in lines[0]
        assert "shop.Cart::add" in lines[0]
        assert lines[0].endswith(" first")
        assert "ERROR" in lines[1]
        assert lines[1].endswith('second {"order_id": 7}')

    def test_append_without_open_opens_lazily(self, log_file):
        backend = FileBackend(log_file_path=log_file)

        backend.append("declarative")
        backend.close()

        assert "declarative" in log_file.read_text(encoding="utf-8")

    def test_severity_threshold(self, log_file):
        backend = FileBackend(log_file_path=log_file, severity_threshold=Severity.WARNING)

        backend.append("noise", Severity.DEBUG)
        backend.append("kept", Severity.WARNING)
        backend.append("urgent", Severity.EMERGENCY)
        backend.close()

        content = log_file.read_text(encoding="utf-8")
        assert "noise" not in content
        assert "kept" in content
        assert "urgent" in content

    def test_reopen_appends(self, log_file):
        backend = FileBackend(log_file_path=log_file)
        backend.append("before")
        backend.close()
        backend.append("after")
        backend.close()

        assert len(log_file.read_text(encoding="utf-8").splitlines()) == 2

    def test_extra_data_is_json(self, log_file):
        line = FileBackend.format_line("msg", Severity.INFO, {"when": "now", "n": 1})

        assert json.loads(line[line.index("{"):]) == {"when": "now", "n": 1}

    def test_metrics(self, log_file):
        backend = FileBackend(log_file_path=log_file)
        backend.append("one")

        metrics = backend.get_metrics()
        backend.close()

        assert metrics == {
            "backend": "file",
            "total_appends": 1,
            "log_file_path": str(log_file),
            "is_open": True,
        }


class TestConsoleBackend:
    """Test ConsoleBackend."""

    @pytest.fixture
    def structlog_logger(self):
        mock_logger = MagicMock()
        with patch(
            "logfacade.logger.log_backends.console_backend.get_logger",
            return_value=mock_logger,
        ):
            yield mock_logger

    def test_severity_maps_to_structlog_method(self, structlog_logger):
        backend = ConsoleBackend()
        backend.open()

        backend.append("down", Severity.ALERT, {"host": "db1"}, "shop", "shop.Cart", "add")

        structlog_logger.critical.assert_called_once_with(
            "down",
            severity="ALERT",
            package_key="shop",
            origin="shop.Cart::add",
            extra={"host": "db1"},
        )

    def test_notice_is_info(self, structlog_logger):
        backend = ConsoleBackend()

        backend.append("note", Severity.NOTICE)

        structlog_logger.info.assert_called_once_with("note", severity="NOTICE")

    def test_severity_threshold(self, structlog_logger):
        backend = ConsoleBackend(severity_threshold=Severity.INFO)

        backend.append("noise", Severity.DEBUG)

        structlog_logger.debug.assert_not_called()

    def test_close_drops_logger(self, structlog_logger):
        backend = ConsoleBackend()
        backend.open()
        backend.close()

        backend.append("reopened", Severity.WARNING)

        structlog_logger.warning.assert_called_once()
        assert backend.get_metrics() == {"backend": "console", "total_appends": 1}
