"""Core infrastructure: serialization, logging and settings."""

from flowforge.core.config import (
    FlowForgeSettings,
    LoggingSettings,
    PreviewSettings,
    SerializationSettings,
    configure_from_settings,
    create_preview,
    load_settings,
)
from flowforge.core.logging import configure_logging, get_logger
from flowforge.core.serialization import (
    DEFAULT_TIMESTAMP_TOLERANCE,
    deserialize_pipeline,
    pipelines_equal,
    serialize_pipeline,
)

__all__ = [
    "DEFAULT_TIMESTAMP_TOLERANCE",
    "FlowForgeSettings",
    "LoggingSettings",
    "PreviewSettings",
    "SerializationSettings",
    "configure_from_settings",
    "configure_logging",
    "create_preview",
    "deserialize_pipeline",
    "get_logger",
    "load_settings",
    "pipelines_equal",
    "serialize_pipeline",
]
