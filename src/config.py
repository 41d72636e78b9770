"""
Configuration management using Pydantic for Raster Kit.
Provides type-safe configuration with validation and environment variable support.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.constants import (
    ColorConstants,
    CompressionConstants,
    ImageConstants,
    SymbolConstants,
    SystemConstants,
)
from common.enums import ColorSpace, Interpolation, SymbolWeight

logger = logging.getLogger(__name__)


class ImageConfig(BaseSettings):
    """Image drawing configuration."""

    model_config = SettingsConfigDict(env_prefix="RASTER_IMAGE_", extra="ignore")

    interpolation: Interpolation = Field(
        default=Interpolation(ImageConstants.DEFAULT_INTERPOLATION),
        description="Resampling filter used when drawing an image stretched",
    )


class CompressionConfig(BaseSettings):
    """JPEG compression configuration."""

    model_config = SettingsConfigDict(env_prefix="RASTER_COMPRESSION_", extra="ignore")

    default_quality: float = Field(
        default=CompressionConstants.DEFAULT_QUALITY,
        ge=CompressionConstants.MIN_QUALITY,
        le=CompressionConstants.MAX_QUALITY,
        description="Quality used when a caller does not pass one",
    )
    measurement_quality: float = Field(
        default=CompressionConstants.MEASUREMENT_QUALITY,
        ge=CompressionConstants.MIN_QUALITY,
        le=CompressionConstants.MAX_QUALITY,
        description="Quality used for byte size measurement",
    )


class ColorConfig(BaseSettings):
    """Color averaging configuration."""

    model_config = SettingsConfigDict(env_prefix="RASTER_COLOR_", extra="ignore")

    default_working_space: ColorSpace = Field(
        default=ColorSpace(ColorConstants.DEFAULT_WORKING_SPACE),
        description="Working space for images without a known color space",
    )


class SymbolConfig(BaseSettings):
    """Symbol image configuration."""

    model_config = SettingsConfigDict(env_prefix="RASTER_SYMBOL_", extra="ignore")

    default_point_size: float = Field(
        default=SymbolConstants.DEFAULT_POINT_SIZE,
        gt=0,
        le=1024,
        description="Symbol point size when none is given",
    )
    default_weight: SymbolWeight = Field(
        default=SymbolWeight(SymbolConstants.DEFAULT_WEIGHT),
        description="Symbol weight when none is given",
    )


class SystemConfig(BaseSettings):
    """System configuration."""

    model_config = SettingsConfigDict(env_prefix="RASTER_SYSTEM_", extra="ignore")

    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Log file path")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        v_upper = v.upper()
        if v_upper not in SystemConstants.VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {SystemConstants.VALID_LOG_LEVELS}"
            )
        return v_upper


CONFIG_GROUPS: Dict[str, type] = {
    "image": ImageConfig,
    "compression": CompressionConfig,
    "color": ColorConfig,
    "symbols": SymbolConfig,
    "system": SystemConfig,
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of base with override layered on top, recursing into dicts."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        elif value is not None or key not in merged:
            merged[key] = value
    return merged


def _group_env_values(group_cls: type) -> Dict[str, Any]:
    """Values a settings group reads from its own prefixed environment variables."""
    group = group_cls()
    return group.model_dump(include=group.model_fields_set)


def _read_config_file(config_file: str) -> Dict[str, Any]:
    try:
        with open(config_file, "r") as f:
            file_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config file {config_file}: {e}")
        return {}

    if file_config is None:
        return {}
    if not isinstance(file_config, dict):
        logger.warning(f"Ignoring config file {config_file}: top level is not a mapping")
        return {}
    return file_config


class Settings(BaseSettings):
    """Main library settings."""

    model_config = SettingsConfigDict(
        env_prefix="RASTER_",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Sub-configurations
    image: ImageConfig = Field(default_factory=ImageConfig)
    compression: CompressionConfig = Field(default_factory=CompressionConfig)
    color: ColorConfig = Field(default_factory=ColorConfig)
    symbols: SymbolConfig = Field(default_factory=SymbolConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    # Environment
    environment: str = Field(
        default="production", description="Environment (development, staging, production)"
    )

    # Config file support
    config_file: Optional[str] = Field(default=None, description="Path to YAML config file")

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values):
        """
        Load configuration from YAML file if specified.

        Precedence per group, lowest first: YAML file, the group's prefixed
        env vars (RASTER_COMPRESSION_...), then init kwargs and nested env
        vars (RASTER_COMPRESSION__...).
        """
        if not isinstance(values, dict):
            return values

        config_file = values.get("config_file") or os.getenv("RASTER_CONFIG_FILE")
        file_config: Dict[str, Any] = {}
        if config_file and Path(config_file).exists():
            file_config = _read_config_file(config_file)

        for name, group_cls in CONFIG_GROUPS.items():
            explicit = values.get(name)
            # A ready-made group instance is used as is
            if isinstance(explicit, BaseModel):
                continue

            section = file_config.get(name)
            layered = _deep_merge(
                section if isinstance(section, dict) else {}, _group_env_values(group_cls)
            )
            if isinstance(explicit, dict):
                layered = _deep_merge(layered, explicit)
            if layered:
                values[name] = layered

        for key, value in file_config.items():
            if key not in CONFIG_GROUPS and values.get(key) is None:
                values[key] = value

        return values

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        if v not in SystemConstants.VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment: {v}. Must be one of {SystemConstants.VALID_ENVIRONMENTS}"
            )
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(mode="json", exclude_none=True)

    def save_to_file(self, path: str) -> None:
        """Save current configuration to YAML file."""
        config_dict = self.to_dict()
        config_dict.pop("config_file", None)
        with open(path, "w") as f:
            yaml.dump(config_dict, f, default_flow_style=False)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with validated configuration
    """
    return Settings()


# Convenience function to reload settings (clears cache)
def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings object
    """
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to use (defaults to the cached settings)
    """
    settings = settings or get_settings()

    handlers = [logging.StreamHandler()]
    if settings.system.log_file:
        handlers.append(logging.FileHandler(settings.system.log_file))

    level = logging.DEBUG if settings.system.debug else getattr(logging, settings.system.log_level)
    logging.basicConfig(
        level=level,
        format=SystemConstants.LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    logger.debug(f"Logging configured at {logging.getLevelName(level)}")
