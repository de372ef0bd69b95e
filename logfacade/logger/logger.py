# logfacade/logger/logger.py
"""
The logging facade: one front door, many backends.

Usage:
    from logfacade.logger import DefaultLogger, FileBackend
    from logfacade.config import Severity

    logger = DefaultLogger(storage_root=Path("/var/lib/myapp"))
    logger.add_backend(FileBackend(log_file_path="/var/log/myapp.log"))
    logger.log("Application started")

    try:
        charge(order)
    except PaymentError as exc:
        # Writes Logs/Exceptions/<reference code>.txt and logs a CRITICAL line
        logger.log_throwable(exc, {"order_id": order.id})

    logger.shutdown()
"""

import inspect
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from logfacade.config.config_types import Severity
from logfacade.config.logging_config import LoggingConfig
from logfacade.config.structlog_config import get_logger
from .backtrace import BacktraceRenderer, render_backtrace_plain
from .error_renderer import ErrorRenderer, RequestInfoCallback
from .log_backends import BackendRegistry, LogBackend, create_backend
from .logger_middleware import render_request_info
from .persistence import ErrorPersistence
from .throwable import as_throwable, describe_frame, package_key_from

_INTERNAL_PACKAGE_KEY = "logfacade"
_INTERNAL_CLASS_NAME = f"{ErrorPersistence.__module__}.{ErrorPersistence.__qualname__}"
_INTERNAL_METHOD_NAME = "persist"

_logger = get_logger(__name__)


class DefaultLogger:
    """
    Synchronous logging facade.

    Every entry is handed to all backends registered at the time of the
    call. Errors are additionally rendered with their previous errors and
    persisted below ``storage_root`` when one is configured.

    Registry mutation is thread-safe; concurrent log() calls are as safe as
    the backends they reach.
    """

    def __init__(
        self,
        storage_root: Optional[Path] = None,
        render_backtrace_callback: BacktraceRenderer = render_backtrace_plain,
        request_info_callback: Optional[RequestInfoCallback] = None,
        isolate_backend_failures: bool = True,
    ) -> None:
        """
        Initialize the logger with no backends.

        Args:
            storage_root: Root below which Logs/Exceptions receives error reports
            render_backtrace_callback: Formats stack frames for error reports
            request_info_callback: Describes the current request for error reports
            isolate_backend_failures: If True, a failing backend is reported
                and skipped instead of raising into the caller
        """
        self._backends = BackendRegistry()
        self._renderer = ErrorRenderer(
            render_backtrace_callback=render_backtrace_callback,
            request_info_callback=request_info_callback,
        )
        self._persistence = ErrorPersistence(storage_root)
        self.isolate_backend_failures = isolate_backend_failures

    def set_request_info_callback(self, callback: Optional[RequestInfoCallback]) -> None:
        self._renderer.request_info_callback = callback

    def set_render_backtrace_callback(self, callback: BacktraceRenderer) -> None:
        self._renderer.render_backtrace_callback = callback

    @property
    def persistence(self) -> ErrorPersistence:
        return self._persistence

    @property
    def backends(self) -> Tuple[LogBackend, ...]:
        return self._backends.backends()

    def set_backend(self, backend: LogBackend) -> None:
        """
        Make ``backend`` the only backend of this logger.

        Neither open() nor close() is called on any backend.
        """
        self._backends.set_backend(backend)

    def add_backend(self, backend: LogBackend) -> None:
        """Add ``backend`` and open it."""
        self._backends.add_backend(backend)

    def remove_backend(self, backend: LogBackend) -> None:
        """
        Close ``backend`` and remove it.

        Raises:
            UnknownBackendError: If ``backend`` is unknown to this logger
        """
        self._backends.remove_backend(backend)

    def log(
        self,
        message: str,
        severity: Severity = Severity.INFO,
        extra_data: Optional[Mapping[str, Any]] = None,
        package_key: Optional[str] = None,
        class_name: Optional[str] = None,
        method_name: Optional[str] = None,
    ) -> None:
        """
        Write a message to every backend.

        Args:
            message: The message to log
            severity: Syslog-style severity
            extra_data: Additional information about the event
            package_key: Package triggering the log (determined automatically if not specified)
            class_name: Class triggering the log (determined automatically if not specified)
            method_name: Function triggering the log (determined automatically if not specified)
        """
        if package_key is None:
            detected_class_name, detected_method_name = self._detect_caller()
            class_name = class_name or detected_class_name
            method_name = method_name or detected_method_name
            package_key = package_key_from(class_name) or ""

        self._dispatch(message, severity, extra_data, package_key, class_name, method_name)

    def log_error(self, error: Any, extra_data: Optional[Mapping[str, Any]] = None) -> None:
        """
        Log an error at CRITICAL severity and persist its full report.

        The logged line gets " - See also: <reference code>.txt" appended when
        the report was written; otherwise a WARNING entry explains why not.

        Args:
            error: A Python exception or any object with message, code,
                trace, previous and reference_code
            extra_data: Additional data to log
        """
        throwable = as_throwable(error)
        trace = throwable.trace
        class_name = (trace[0].class_name if trace else None) or "?"
        method_name = (trace[0].function if trace else None) or "?"
        message = self._renderer.get_error_log_message(throwable)

        extra: Dict[str, Any] = dict(extra_data or {})
        if throwable.previous is not None:
            extra["previousException"] = self._renderer.get_error_log_message(throwable.previous)

        package_key = package_key_from(class_name)

        file_name = None
        if self._persistence.ensure_directory():
            file_name = self._persistence.persist(
                self._renderer.render_error_info(throwable),
                throwable.reference_code,
            )

        if file_name is not None:
            message += f" - See also: {file_name}"
        else:
            self._dispatch(
                self._persistence.failure_message(),
                Severity.WARNING,
                {},
                _INTERNAL_PACKAGE_KEY,
                _INTERNAL_CLASS_NAME,
                _INTERNAL_METHOD_NAME,
            )

        self._dispatch(message, Severity.CRITICAL, extra, package_key, class_name, method_name)

    def log_exception(self, exception: BaseException, extra_data: Optional[Mapping[str, Any]] = None) -> None:
        self.log_error(exception, extra_data)

    def log_throwable(self, throwable: Any, extra_data: Optional[Mapping[str, Any]] = None) -> None:
        self.log_error(throwable, extra_data)

    def render_error_info(self, error: Any) -> str:
        return self._renderer.render_error_info(error)

    def get_error_log_message(self, error: Any) -> str:
        return self._renderer.get_error_log_message(error)

    def get_backend_metrics(self) -> Dict[str, Any]:
        """Metrics of every backend, keyed by backend name."""
        return {
            getattr(backend, "name", type(backend).__name__): backend.get_metrics()
            for backend in self._backends
            if hasattr(backend, "get_metrics")
        }

    def shutdown(self) -> None:
        """Close every backend; safe to call more than once."""
        self._backends.shutdown()

    def __enter__(self) -> "DefaultLogger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()

    def _dispatch(
        self,
        message: str,
        severity: Severity,
        extra_data: Optional[Mapping[str, Any]],
        package_key: Optional[str],
        class_name: Optional[str],
        method_name: Optional[str],
    ) -> None:
        for backend in self._backends.backends():
            try:
                backend.append(message, severity, extra_data, package_key, class_name, method_name)
            except Exception as e:
                if not self.isolate_backend_failures:
                    raise
                _logger.error(
                    "Log backend failed",
                    backend=getattr(backend, "name", type(backend).__name__),
                    error=str(e),
                    exc_info=True,
                )

    @staticmethod
    def _detect_caller() -> Tuple[Optional[str], Optional[str]]:
        """(class_name, method_name) of whoever called log()."""
        frame = inspect.currentframe()
        # _detect_caller -> log -> caller
        caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
        try:
            if caller is None:
                return None, None
            return describe_frame(caller)
        finally:
            del frame, caller


def create_logger(logging_config: LoggingConfig, **backend_config: Any) -> DefaultLogger:
    """
    Build a logger with the configured backends added.

    Args:
        logging_config: Loaded logging configuration
        **backend_config: Extra keyword arguments for every backend

    Returns:
        DefaultLogger instance

    Raises:
        ConfigurationError: If a configured backend name is unknown
    """
    logger = DefaultLogger(
        storage_root=logging_config.storage_root,
        request_info_callback=render_request_info,
    )
    for backend_name in logging_config.log_backends:
        config: Dict[str, Any] = {
            "severity_threshold": logging_config.log_level.severity,
            **backend_config,
        }
        if logging_config.log_file_path is not None:
            config.setdefault("log_file_path", logging_config.log_file_path)
        backend = create_backend(str(backend_name), **config)
        logger.add_backend(backend)
        _logger.debug("Initialized log backend", backend=backend.name)
    return logger


__all__ = ["DefaultLogger", "create_logger"]
