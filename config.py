"""
Configuration management using Pydantic Settings for validation and environment handling.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings
from pathlib import Path


class KitchenConfig(BaseSettings):
    """Station manager behaviour settings."""

    eager_replenishment: bool = Field(
        default=True,
        description=(
            "Attempt backup replenishment for every required ingredient even "
            "after one has failed. When disabled, nothing is moved unless the "
            "whole requirement can be covered."
        )
    )
    default_layout: Optional[Path] = Field(
        default=None,
        description="Kitchen layout YAML used by the CLI when none is given"
    )

    class Config:
        env_prefix = "KITCHEN_"


class Settings(BaseSettings):
    """Main application settings."""

    # Environment
    environment: str = Field(
        default="development",
        description="Application environment"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    kitchen: KitchenConfig = Field(default_factory=KitchenConfig)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() in ("development", "dev")

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() in ("production", "prod")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Load settings from a YAML file or the environment."""
    global _settings

    if config_file and config_file.exists():
        import yaml
        with open(config_file) as f:
            config_data = yaml.safe_load(f) or {}

        transformed_data = {}
        for key in ['environment', 'log_level', 'debug', 'kitchen']:
            if key in config_data:
                transformed_data[key] = config_data[key]

        _settings = Settings(**transformed_data)
    else:
        _settings = Settings()

    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""
    global _settings
    _settings = None


# Backwards compatibility alias
Config = Settings
