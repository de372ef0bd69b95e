# logfacade/config/logging_config.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
from .env_config import require_env, get_env, get_env_path
from .config_types import EnvLogLevel, EnvLogBackends
from logfacade.api_error import ConfigurationError

_default_log_level_env_key = "LOG_LEVEL"
_default_log_backends_env_key = "LOG_BACKENDS"
_default_storage_root_env_key = "LOG_STORAGE_ROOT"
_default_log_file_path_env_key = "LOG_FILE_PATH"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    log_level: EnvLogLevel
    log_backends: Tuple[EnvLogBackends, ...] = (EnvLogBackends.CONSOLE,)
    # Root below which Logs/Exceptions is created; None disables error dumps
    storage_root: Optional[Path] = None
    log_file_path: Optional[Path] = None

    @property
    def level_value(self) -> str:
        """Get string value of log level."""
        return self.log_level.value

    @property
    def level_int(self) -> int:
        """Get numeric log level."""
        return self.log_level.level


def load_logging_config(
    log_level_env_key: str = _default_log_level_env_key,
    log_backends_env_key: str = _default_log_backends_env_key,
    storage_root_env_key: str = _default_storage_root_env_key,
    log_file_path_env_key: str = _default_log_file_path_env_key,
) -> LoggingConfig:
    """
    Load logging configuration from environment.

    Args:
        log_level_env_key: Environment variable name (required)
        log_backends_env_key: Environment variable name, comma-separated
            backend names (defaults to "console")
        storage_root_env_key: Environment variable name (optional)
        log_file_path_env_key: Environment variable name (optional)

    Returns:
        LoggingConfig instance

    Raises:
        ConfigurationError: If LOG_LEVEL is missing or a value is invalid
    """
    try:
        log_level_val = require_env(log_level_env_key).upper()
        backends_val = get_env(log_backends_env_key) or EnvLogBackends.CONSOLE.value
        log_backends = tuple(
            EnvLogBackends(name.strip().lower())
            for name in backends_val.split(",")
            if name.strip()
        )

        return LoggingConfig(
            log_level=EnvLogLevel(log_level_val),
            log_backends=log_backends,
            storage_root=get_env_path(storage_root_env_key),
            log_file_path=get_env_path(log_file_path_env_key),
        )

    except ValueError as exc:
        valid_levels = ", ".join(level.value for level in EnvLogLevel)
        valid_backends = ", ".join(backend.value for backend in EnvLogBackends)

        raise ConfigurationError(
            f"Invalid logging configuration. "
            f"{log_level_env_key} must be one of [{valid_levels}], "
            f"{log_backends_env_key} must be a comma-separated list of [{valid_backends}]"
        ) from exc


__all__ = [
    "LoggingConfig",
    "load_logging_config",
]
