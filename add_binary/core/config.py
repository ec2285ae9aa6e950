"""Application configuration management."""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


SUPPORTED_WIDTHS = (8, 16, 32, 64)


class Config(BaseSettings):
    """Converter configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="ADD_BINARY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Arithmetic
    int_width: int = Field(default=32)
    overflow_policy: Literal["wrap", "error"] = Field(default="wrap")
    negative_policy: Literal["reinterpret", "error"] = Field(default="reinterpret")

    # Conversion
    default_strategy: str = Field(default="builtin")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_json: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @field_validator("int_width")
    @classmethod
    def _check_width(cls, value: int) -> int:
        if value not in SUPPORTED_WIDTHS:
            raise ValueError(f"int_width must be one of {SUPPORTED_WIDTHS}, got {value}")
        return value

    @property
    def min_value(self) -> int:
        return -(1 << (self.int_width - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.int_width - 1)) - 1


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next access re-reads the environment."""
    global _config
    _config = None
