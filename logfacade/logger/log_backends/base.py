# logfacade/logger/log_backends/base.py
"""Base class for log backends."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from logfacade.config.config_types import Severity


class LogBackend(ABC):
    """
    Abstract base class for log backends.

    A backend is opened when it is added to a logger, receives every entry
    through append() and is closed when removed or when the logger shuts down.
    """

    def __init__(self, **config: Any):
        """
        Initialize backend with configuration.

        Args:
            **config: Backend-specific configuration options
        """
        self.config = config
        self._total_appends = 0

    def open(self) -> None:
        """Acquire whatever the backend writes to."""
        pass

    @abstractmethod
    def append(
        self,
        message: str,
        severity: Severity = Severity.INFO,
        extra_data: Optional[Mapping[str, Any]] = None,
        package_key: Optional[str] = None,
        class_name: Optional[str] = None,
        method_name: Optional[str] = None,
    ) -> None:
        """
        Write one log entry.

        Args:
            message: The message to log
            severity: Syslog-style severity
            extra_data: Additional structured information
            package_key: Package the entry originates from
            class_name: Class (or module) the entry originates from
            method_name: Function the entry originates from
        """
        pass

    def close(self) -> None:
        """Release whatever open() acquired."""
        pass

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get health metrics for this backend.

        Returns:
            Dictionary with backend-specific metrics
        """
        return {"backend": self.name, "total_appends": self._total_appends}

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name for identification."""
        pass


__all__ = ["LogBackend"]
