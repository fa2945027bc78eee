"""Pydantic settings with environment variable support."""

from typing import Optional

from pydantic import Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from runtimeinfo.config.validators import (
    validate_log_level,
    validate_non_empty_string,
    validate_port,
    validate_positive_integer,
)
from runtimeinfo.utils.constants import (
    CGROUP_PATH,
    DEFAULT_READ_BUFFER_SIZE,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
    DOCKERENV_PATH,
)
from runtimeinfo.utils.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Container probe settings
    dockerenv_path: str = Field(
        default=DOCKERENV_PATH,
        alias="RUNTIMEINFO_DOCKERENV_PATH",
        description="Marker file whose presence indicates a Docker container",
    )
    cgroup_path: str = Field(
        default=CGROUP_PATH,
        alias="RUNTIMEINFO_CGROUP_PATH",
        description="Control group file scanned for container runtime names",
    )
    read_buffer_size: int = Field(
        default=DEFAULT_READ_BUFFER_SIZE,
        alias="RUNTIMEINFO_READ_BUFFER_SIZE",
        description="Chunk size in bytes used when streaming the cgroup file",
    )

    # Server settings
    server_host: str = Field(default=DEFAULT_SERVER_HOST, alias="SERVER_HOST")
    server_port: int = Field(default=DEFAULT_SERVER_PORT, alias="SERVER_PORT")
    server_debug: bool = Field(default=False, alias="SERVER_DEBUG")

    # Logging settings
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_use_colors: bool = Field(default=True, alias="LOG_USE_COLORS")
    log_json_format: bool = Field(default=False, alias="LOG_JSON_FORMAT")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")

    @field_validator("dockerenv_path", "cgroup_path")
    @classmethod
    def validate_probe_path(cls, v: str, info: ValidationInfo) -> str:
        """Validate probe paths are not blank."""
        return validate_non_empty_string(v, field_name=info.field_name)

    @field_validator("read_buffer_size")
    @classmethod
    def validate_read_buffer_size(cls, v: int) -> int:
        """Validate line reader buffer size."""
        return validate_positive_integer(v, field_name="RUNTIMEINFO_READ_BUFFER_SIZE")

    @field_validator("server_port")
    @classmethod
    def validate_server_port(cls, v: int) -> int:
        """Validate server port."""
        return validate_port(v, field_name="SERVER_PORT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        return validate_log_level(v)


# Global settings instance
_settings: Optional[Settings] = None


def _load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def get_settings() -> Settings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        _settings = _load_settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global _settings
    _settings = _load_settings()
    return _settings
