"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Supports multiple sources (YAML, env vars, defaults)
- Easy to test with different configurations
"""

import os
from pathlib import Path
from typing import Optional, Tuple, Type

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# Workspace config folder, used when no explicit file is given
DEFAULT_CONFIG_FILE = Path("config/settings.yaml")


class LatencySettings(BaseModel):
    """
    Simulated round-trip delay per operation, in seconds.

    Set everything to 0 to make the services answer immediately.
    """
    login: float = Field(default=0.5, ge=0)
    logout: float = Field(default=0.2, ge=0)
    read: float = Field(default=0.3, ge=0)
    create: float = Field(default=0.4, ge=0)
    update: float = Field(default=0.4, ge=0)
    delete: float = Field(default=0.3, ge=0)

    @classmethod
    def zero(cls) -> "LatencySettings":
        return cls(login=0, logout=0, read=0, create=0, update=0, delete=0)


class Settings(BaseSettings):
    """
    Application settings with multiple sources, lowest priority first:
    1. Default values (hardcoded)
    2. YAML config file
    3. .env file
    4. Environment variables
    5. Constructor arguments
    """
    model_config = SettingsConfigDict(
        env_prefix='TIMESHEET_',
        env_file='.env',
        env_file_encoding='utf-8',
        env_nested_delimiter='__',
        yaml_file_encoding='utf-8',
        extra='ignore'
    )

    app_name: str = "Timesheet"
    config_file: Optional[Path] = None

    # Seed data
    year: int = Field(default=2025, description="Calendar year the seed weeks belong to")
    weeks: int = Field(default=52, ge=1, le=52, description="Number of weeks to generate")
    seed: Optional[int] = Field(default=None, description="Fixed RNG seed for reproducible demo data")

    # Dashboard
    weeks_per_page: int = Field(default=5, ge=1)

    latency: LatencySettings = Field(default_factory=LatencySettings)
    log_level: str = "INFO"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML file below the environment; sources are merged before validation"""
        config_file = init_settings.init_kwargs.get('config_file') or os.getenv('TIMESHEET_CONFIG_FILE')
        yaml_settings = YamlConfigSettingsSource(
            settings_cls,
            yaml_file=Path(config_file) if config_file else DEFAULT_CONFIG_FILE
        )
        return init_settings, env_settings, dotenv_settings, yaml_settings, file_secret_settings


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings():
    """Reload settings from file"""
    global _settings
    _settings = Settings()
    return _settings
