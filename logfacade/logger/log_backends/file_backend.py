# logfacade/logger/log_backends/file_backend.py
"""Append-only text file backend."""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO

from logfacade.config.config_types import Severity
from logfacade.scripts import get_project_root
from .base import LogBackend


class FileBackend(LogBackend):
    """
    Writes one line per entry to a single log file.

    Line layout: timestamp, package key, severity, origin, message and the
    extra data as JSON. The file is opened in append mode and never rotated.
    """

    def __init__(self, **config: Any):
        """
        Initialize file backend.

        Args:
            **config: Optional configuration
                - log_file_path: Target file (default: <project_root>/logs/application.log)
                - severity_threshold: least urgent Severity to write (default: DEBUG)
        """
        super().__init__(**config)

        log_file_path = config.get("log_file_path") or get_project_root() / "logs" / "application.log"
        self._log_file_path = Path(log_file_path)
        self._severity_threshold = Severity(config.get("severity_threshold", Severity.DEBUG))
        self._file: Optional[TextIO] = None

    @property
    def name(self) -> str:
        """Backend name."""
        return "file"

    @property
    def log_file_path(self) -> Path:
        return self._log_file_path

    def open(self) -> None:
        """Create the parent directory and open the file for appending."""
        self._open_file()

    def _open_file(self) -> TextIO:
        if self._file is None:
            self._log_file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self._log_file_path.open(mode="a", encoding="utf-8")
        return self._file

    def append(
        self,
        message: str,
        severity: Severity = Severity.INFO,
        extra_data: Optional[Mapping[str, Any]] = None,
        package_key: Optional[str] = None,
        class_name: Optional[str] = None,
        method_name: Optional[str] = None,
    ) -> None:
        severity = Severity(severity)
        if severity > self._severity_threshold:
            return

        # A backend installed with set_backend() is never opened explicitly
        log_file = self._open_file()
        log_file.write(
            self.format_line(message, severity, extra_data, package_key, class_name, method_name)
        )
        log_file.write("\n")
        log_file.flush()
        self._total_appends += 1

    @staticmethod
    def format_line(
        message: str,
        severity: Severity,
        extra_data: Optional[Mapping[str, Any]] = None,
        package_key: Optional[str] = None,
        class_name: Optional[str] = None,
        method_name: Optional[str] = None,
    ) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        origin = f"{class_name}::{method_name}" if class_name else ""
        line = f"{timestamp} {package_key or '':<20} {str(severity):<9} {origin:<35} {message}"
        if extra_data:
            line += " " + json.dumps(dict(extra_data), ensure_ascii=False, default=str)
        return line

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def get_metrics(self) -> Dict[str, Any]:
        """Get file backend metrics."""
        return {
            **super().get_metrics(),
            "log_file_path": str(self._log_file_path),
            "is_open": self._file is not None,
        }


__all__ = ["FileBackend"]
