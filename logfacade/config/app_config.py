# logfacade/config/app_config.py
"""
Complete application configuration with validation.
"""

from pydantic import BaseModel, Field, model_validator
from .config_types import EnvLogLevel, Environment
from .env_config import require_env
from .logging_config import LoggingConfig


class AppConfig(BaseModel):
    """
    Complete application configuration.

    All configuration is loaded from environment variables and validated
    at startup. Invalid configuration will fail fast with clear error messages.
    """

    app_title: str = Field(..., min_length=1)
    app_version: str = Field(..., pattern=r"^\d+\.\d+\.\d+$")  # Semantic versioning
    environment: Environment

    logging: LoggingConfig

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_production_settings(self) -> "AppConfig":
        """
        Validate production-specific requirements.
        """
        if self.environment.is_production:
            if self.logging.log_level == EnvLogLevel.DEBUG:
                raise ValueError("DEBUG log level not allowed in production")
            if self.logging.storage_root is None:
                raise ValueError("LOG_STORAGE_ROOT required in production")
        return self


def load_app_config() -> AppConfig:
    """
    Load complete application configuration.

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If configuration is invalid
        ConfigurationError: If required env vars are missing
    """
    from .logging_config import load_logging_config

    return AppConfig(
        app_title=require_env("APP_TITLE"),
        app_version=require_env("APP_VERSION"),
        environment=require_env("ENVIRONMENT"),
        logging=load_logging_config(),
    )


__all__ = [
    "AppConfig",
    "load_app_config",
]
