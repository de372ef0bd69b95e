# logfacade/logger/log_backends/__init__.py
"""
Log backends.

Built in: console (structlog) and file. Select them via the LOG_BACKENDS
environment variable (comma-separated) or add instances to a logger directly.

Example:
    LOG_BACKENDS=console,file
"""

from .base import LogBackend
from .console_backend import ConsoleBackend
from .file_backend import FileBackend
from .registry import (
    BackendRegistry,
    available_backends,
    create_backend,
    register_backend,
)

__all__ = [
    "LogBackend",
    "ConsoleBackend",
    "FileBackend",
    "BackendRegistry",
    "available_backends",
    "create_backend",
    "register_backend",
]
