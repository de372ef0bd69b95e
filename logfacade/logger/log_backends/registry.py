# logfacade/logger/log_backends/registry.py
"""
Backend registry.

BackendRegistry holds the backend instances a logger delivers to. The
module-level table maps configuration names to backend classes:
    LOG_BACKENDS=console           # Console only (default)
    LOG_BACKENDS=console,file      # Multiple backends
"""

import threading
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type

from logfacade.api_error import ConfigurationError, UnknownBackendError
from logfacade.config.structlog_config import get_logger
from .base import LogBackend
from .console_backend import ConsoleBackend
from .file_backend import FileBackend

_logger = get_logger(__name__)

# Registry of available backend classes
_BACKEND_REGISTRY: Dict[str, Type[LogBackend]] = {
    "console": ConsoleBackend,
    "file": FileBackend,
}


def register_backend(name: str, backend_class: Type[LogBackend]) -> None:
    """
    Register a custom backend class.

    Args:
        name: Backend identifier (e.g., 'syslog')
        backend_class: Backend class that extends LogBackend

    Example:
        >>> register_backend('syslog', SyslogBackend)
    """
    _BACKEND_REGISTRY[name] = backend_class


def create_backend(name: str, /, **config: Any) -> LogBackend:
    """
    Instantiate a registered backend class.

    Raises:
        ConfigurationError: If no backend is registered under ``name``
    """
    try:
        backend_class = _BACKEND_REGISTRY[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown backend '{name}'. "
            f"Available: {', '.join(available_backends())}"
        ) from None
    return backend_class(**config)


def available_backends() -> List[str]:
    return sorted(_BACKEND_REGISTRY)


class BackendRegistry:
    """
    Set of backend instances, keyed by identity.

    Two distinct backends that compare equal are both kept. Mutations are
    serialized with a lock; readers get a snapshot via backends().
    """

    def __init__(self) -> None:
        self._backends: Dict[int, LogBackend] = {}
        self._lock = threading.RLock()

    def set_backend(self, backend: LogBackend) -> None:
        """Make ``backend`` the only entry. Neither open() nor close() is called."""
        with self._lock:
            self._backends = {id(backend): backend}

    def add_backend(self, backend: LogBackend) -> None:
        """Register and open ``backend``; re-adding a registered instance does nothing."""
        with self._lock:
            if id(backend) in self._backends:
                return
            self._backends[id(backend)] = backend
            backend.open()

    def remove_backend(self, backend: LogBackend) -> None:
        """
        Close and unregister ``backend``.

        Raises:
            UnknownBackendError: If ``backend`` is not registered
        """
        with self._lock:
            if id(backend) not in self._backends:
                raise UnknownBackendError()
            backend.close()
            del self._backends[id(backend)]

    def shutdown(self) -> None:
        """
        Close every backend once and empty the registry.

        A backend failing to close does not keep the others open; the first
        failure is re-raised once all backends have been closed.
        """
        with self._lock:
            backends, self._backends = list(self._backends.values()), {}

        first_error: Optional[Exception] = None
        for backend in backends:
            try:
                backend.close()
            except Exception as e:
                _logger.error(
                    "Log backend close failed",
                    backend=getattr(backend, "name", type(backend).__name__),
                    error=str(e),
                    exc_info=True,
                )
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error

    def backends(self) -> Tuple[LogBackend, ...]:
        """Snapshot of the registered backends in insertion order."""
        with self._lock:
            return tuple(self._backends.values())

    def __contains__(self, backend: object) -> bool:
        with self._lock:
            return id(backend) in self._backends

    def __len__(self) -> int:
        return len(self._backends)

    def __iter__(self) -> Iterator[LogBackend]:
        return iter(self.backends())


__all__ = [
    "BackendRegistry",
    "register_backend",
    "create_backend",
    "available_backends",
]
