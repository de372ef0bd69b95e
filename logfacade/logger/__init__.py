# logfacade/logger/__init__.py
"""
Logging facade, error rendering and backends.

Usage:
    from logfacade.logger import create_logger
    from logfacade.config import initialize_config

    config = initialize_config()
    logger = create_logger(config.logging)
    logger.log("Application started")
"""

from .backtrace import render_backtrace_plain
from .error_renderer import ErrorRenderer
from .log_backends import ConsoleBackend, FileBackend, LogBackend, register_backend
from .logger import DefaultLogger, create_logger
from .persistence import ErrorPersistence
from .throwable import ExceptionAdapter, StackFrame, Throwable, as_throwable

__all__ = [
    "DefaultLogger",
    "create_logger",
    "ErrorRenderer",
    "ErrorPersistence",
    "LogBackend",
    "ConsoleBackend",
    "FileBackend",
    "register_backend",
    "StackFrame",
    "Throwable",
    "ExceptionAdapter",
    "as_throwable",
    "render_backtrace_plain",
]
