"""
Configuration settings for ardcoord.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ardcoord.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        grid_level: Quadkey length written for the finest grid cell
        geographic_precision: Decimal places printed for longitude/latitude
        log_level: Log level name
        log_file: Optional path of a rotating log file
        json_logs: Whether file logs are written as JSON
        environment: Deployment environment, controls console log colors
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ARDCOORD_",
        extra="ignore",
    )

    # Grid settings
    grid_level: int = Field(default=12, ge=1, le=12)

    # Output settings
    geographic_precision: int = Field(default=5, ge=0, le=12)

    # Logging settings
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    json_logs: bool = False

    # Environment
    environment: Literal["development", "production"] = "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings once per process.

    Returns:
        The shared Settings instance

    Raises:
        ConfigurationError: If an ARDCOORD_* variable has an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        keys = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid configuration: {e.error_count()} bad setting(s)",
            config_key=", ".join(keys) or None,
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e
