"""
Configuration module for Extension Config Builder.

Uses Pydantic Settings for environment variable support and validation.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List, Optional, Literal
from pathlib import Path


class Settings(BaseSettings):
    """
    Application configuration with environment variable support.

    All settings can be overridden via EXTENSION_* environment variables or .env file.
    """

    # Project layout
    config_file_name: str = Field(
        default="extension.config.yml",
        description="Declarative extension config file, relative to the project root"
    )
    script_path: str = Field(
        default="build/main.js",
        description="Compiled extension script, relative to the project root"
    )
    l10n_ignored_dirs: List[str] = Field(
        default_factory=lambda: ["node_modules", "src"],
        description="Top-level project directories not scanned for locale files "
                    "(the script's build directory is always skipped)"
    )

    # Admin API (product lookup for resource URLs)
    admin_api_version: str = Field(
        default="2023-01",
        description="Admin GraphQL API version"
    )
    admin_access_token: Optional[str] = Field(
        default=None,
        description="Admin API access token used for product lookups"
    )
    http_timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds"
    )

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )
    json_logs: bool = Field(
        default=False,
        description="Output logs as JSON (for CI)"
    )

    model_config = {
        "env_prefix": "EXTENSION_",
        "env_file": [
            ".env",
            Path(__file__).parent / ".env",
        ],
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    @field_validator("admin_access_token", mode="before")
    @classmethod
    def validate_access_token(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty or placeholder tokens as unset."""
        if v is None or v == "" or v.startswith("your-"):
            return None
        return v

    @field_validator("script_path", "config_file_name")
    @classmethod
    def ensure_relative(cls, v: str) -> str:
        """Project files must live inside the project root."""
        if Path(v).is_absolute():
            raise ValueError(f"Path must be relative to the project root: {v}")
        return v


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
