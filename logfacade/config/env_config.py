# logfacade/config/env_config.py
import os
from pathlib import Path
from typing import Optional
from logfacade.api_error import ConfigurationError


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get Env variable with optional default
    """
    return os.getenv(name, default=default)


def get_env_path(name: str) -> Optional[Path]:
    """
    Get Env variable as a Path, None when unset or empty.

    A leading ``~`` is expanded.
    """
    value = os.getenv(name)
    if not value:
        return None
    return Path(value).expanduser()


def require_env(name: str) -> str:
    """
    Get required environment variable or raise immediately.
    """
    value = os.getenv(name)
    if not value:
        raise ConfigurationError(f"Missing required env variables: {name}")
    return value


__all__ = ["require_env", "get_env", "get_env_path"]
