# logfacade/config/structlog_config.py
"""
Structlog configuration for the facade's own diagnostics and the console backend.
Configure once per process via configure_structlog().
"""
import sys
import os
import threading
from typing import Optional
import structlog
from rich.traceback import install as install_rich_traceback


class _StructlogState:
    """
    Process-aware singleton holding the structlog configuration state.

    A forked worker (e.g. uvicorn reload) counts as unconfigured until it
    configures structlog itself.
    """

    _instance: Optional["_StructlogState"] = None
    _lock = threading.Lock()

    _initialized: bool
    _log_level: Optional[int]
    _process_id: Optional[int]

    def __new__(cls) -> "_StructlogState":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:  # Double-check locking
                    instance = super().__new__(cls)
                    instance._initialized = False
                    instance._log_level = None
                    instance._process_id = None
                    cls._instance = instance
        return cls._instance

    @property
    def is_configured(self) -> bool:
        """Check if configured in the CURRENT process."""
        return self._initialized and self._process_id == os.getpid()

    @property
    def log_level(self) -> Optional[int]:
        return self._log_level

    def mark_configured(self, log_level: int) -> None:
        """Mark structlog as configured with given level in this process."""
        with self._lock:
            self._log_level = log_level
            self._process_id = os.getpid()
            self._initialized = True

    def reset(self) -> None:
        """Reset state. FOR TESTING ONLY."""
        with self._lock:
            self._initialized = False
            self._log_level = None
            self._process_id = None


_state = _StructlogState()


def configure_structlog(log_level: int) -> None:
    """
    Configure structlog with the specified log level.

    Args:
        log_level: Numeric logging level (e.g., logging.INFO)

    Raises:
        RuntimeError: If already configured in this process with a different level
    """
    if _state.is_configured:
        if _state.log_level == log_level:
            return
        raise RuntimeError(
            f"structlog already configured in this process. "
            f"Current level: {_state.log_level}, attempted: {log_level}"
        )

    install_rich_traceback(show_locals=True, width=None, extra_lines=3)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,  # type: ignore[list-item]
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(
                    show_locals=False,
                    width=None,
                    suppress=["starlette", "uvicorn", "fastapi"],
                ),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    _state.mark_configured(log_level)


def get_logger(name: str = "logfacade") -> structlog.BoundLogger:
    """
    Get a structlog logger instance.

    Unlike the application loggers, internal diagnostics must never fail,
    so an unconfigured process falls back to structlog's defaults.
    """
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Check if structlog has been configured in this process."""
    return _state.is_configured


def reset_structlog() -> None:
    """Forget the configuration of this process. FOR TESTING ONLY."""
    structlog.reset_defaults()
    _state.reset()


__all__ = [
    "configure_structlog",
    "get_logger",
    "is_configured",
    "reset_structlog",
]
