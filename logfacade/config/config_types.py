# logfacade/config/config_types.py
"""Configuration type definitions."""

from enum import Enum
import logging


class Severity(int, Enum):
    """
    Syslog-style severity levels.

    Lower numbers are more urgent; EMERGENCY is 0 and DEBUG is 7.

    Examples:
        >>> Severity.INFO
        <Severity.INFO: 6>
        >>> str(Severity.CRITICAL)
        'CRITICAL'
        >>> Severity.WARNING.logging_level == logging.WARNING
        True
    """

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def logging_level(self) -> int:
        """Get the closest numeric level of the stdlib logging module."""
        return _SEVERITY_TO_LOGGING_LEVEL[self]

    def __str__(self) -> str:
        """Return the level name for easy printing."""
        return self.name


_SEVERITY_TO_LOGGING_LEVEL = {
    Severity.EMERGENCY: logging.CRITICAL,
    Severity.ALERT: logging.CRITICAL,
    Severity.CRITICAL: logging.CRITICAL,
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.NOTICE: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
}


class EnvLogLevel(str, Enum):
    """
    Supported log levels.

    Inherits from str so enum values serialize naturally to JSON/strings
    without custom serialization logic.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        """Get numeric logging level for stdlib logging module."""
        return getattr(logging, self.value)

    @property
    def severity(self) -> Severity:
        """Get the least urgent Severity passing this level."""
        return Severity[self.value]

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


class EnvLogBackends(str, Enum):
    CONSOLE = "console"
    FILE = "file"

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

    @property
    def is_production(self) -> bool:
        """Check if production environment."""
        return self == Environment.PRODUCTION

    def __str__(self) -> str:
        return self.value


__all__ = [
    "Severity",
    "EnvLogLevel",
    "EnvLogBackends",
    "Environment",
]
