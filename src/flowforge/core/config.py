# src/flowforge/core/config.py
"""
Runtime settings for FlowForge.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.

Example YAML:
    preview:
      max_sample_size: 50
    serialization:
      timestamp_tolerance_seconds: 2
    logging:
      level: DEBUG
      json_output: true
"""

from collections.abc import Iterable
from datetime import timedelta
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from flowforge.contracts import DataPreview
from flowforge.core.logging import configure_logging
from flowforge.schema.inference import DEFAULT_MAX_SAMPLE_SIZE, create_data_preview


class PreviewSettings(BaseModel):
    """Data preview configuration."""

    model_config = {"frozen": True, "extra": "forbid"}

    max_sample_size: int = Field(
        default=DEFAULT_MAX_SAMPLE_SIZE,
        gt=0,
        description="Maximum number of rows kept in a node's preview sample",
    )


class SerializationSettings(BaseModel):
    """Pipeline serialization configuration."""

    model_config = {"frozen": True, "extra": "forbid"}

    timestamp_tolerance_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Allowed createdAt/updatedAt drift when comparing pipelines",
    )


class LoggingSettings(BaseModel):
    """Logging output configuration."""

    model_config = {"frozen": True, "extra": "forbid"}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )
    json_output: bool = Field(
        default=False,
        description="Render log records as JSON instead of console text",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper()
        return v


class FlowForgeSettings(BaseModel):
    """Top-level FlowForge settings.

    Every section has defaults, so an empty settings file is valid.
    """

    model_config = {"frozen": True}

    preview: PreviewSettings = Field(default_factory=PreviewSettings)
    serialization: SerializationSettings = Field(default_factory=SerializationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def timestamp_tolerance(self) -> timedelta:
        """Serialization tolerance as a timedelta, ready for pipelines_equal()."""
        return timedelta(seconds=self.serialization.timestamp_tolerance_seconds)


def _lower_keys(value: object) -> object:
    if isinstance(value, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value


def load_settings(config_path: Path) -> FlowForgeSettings:
    """Load settings from a YAML file with environment variable overrides.

    Precedence, highest first:
    1. Environment variables (FLOWFORGE_*)
    2. Config file
    3. Defaults from the Pydantic models

    Environment variable format: FLOWFORGE_PREVIEW__MAX_SAMPLE_SIZE for
    nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated FlowForgeSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="FLOWFORGE",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf uppercases keys and adds its own bookkeeping entries
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): _lower_keys(v) for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return FlowForgeSettings(**raw_config)


def configure_from_settings(settings: FlowForgeSettings) -> None:
    """Apply the logging section of the settings."""
    configure_logging(json_output=settings.logging.json_output, level=settings.logging.level)


def create_preview(
    settings: FlowForgeSettings,
    records: Iterable[Any],
    errors: list[str] | None = None,
) -> DataPreview:
    """Build a data preview sized by the preview section of the settings."""
    return create_data_preview(records, max_sample_size=settings.preview.max_sample_size, errors=errors)
