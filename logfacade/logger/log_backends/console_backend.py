# logfacade/logger/log_backends/console_backend.py
"""Console backend forwarding entries to structlog."""

from typing import Any, Dict, Mapping, Optional

import structlog

from logfacade.config.config_types import Severity
from logfacade.config.structlog_config import get_logger
from .base import LogBackend

_SEVERITY_METHODS = {
    Severity.EMERGENCY: "critical",
    Severity.ALERT: "critical",
    Severity.CRITICAL: "critical",
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
    Severity.NOTICE: "info",
    Severity.INFO: "info",
    Severity.DEBUG: "debug",
}


class ConsoleBackend(LogBackend):
    """
    Writes entries through a structlog logger (stderr by default).

    Entries less urgent than ``severity_threshold`` are dropped here, on top
    of structlog's own level filtering.
    """

    def __init__(self, **config: Any):
        """
        Initialize console backend.

        Args:
            **config: Optional configuration
                - logger_name: structlog logger name (default: "logfacade.console")
                - severity_threshold: least urgent Severity to emit (default: DEBUG)
        """
        super().__init__(**config)
        self._logger_name: str = config.get("logger_name", "logfacade.console")
        self._severity_threshold = Severity(config.get("severity_threshold", Severity.DEBUG))
        self._logger: Optional[structlog.BoundLogger] = None

    @property
    def name(self) -> str:
        """Backend name."""
        return "console"

    def open(self) -> None:
        self._bound_logger()

    def _bound_logger(self) -> structlog.BoundLogger:
        if self._logger is None:
            self._logger = get_logger(self._logger_name)
        return self._logger

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

        context: Dict[str, Any] = {"severity": str(severity)}
        if package_key:
            context["package_key"] = package_key
        if class_name or method_name:
            context["origin"] = f"{class_name or '?'}::{method_name or '?'}"
        if extra_data:
            context["extra"] = dict(extra_data)

        log_method = getattr(self._bound_logger(), _SEVERITY_METHODS[severity])
        log_method(message, **context)
        self._total_appends += 1

    def close(self) -> None:
        self._logger = None


__all__ = ["ConsoleBackend"]
