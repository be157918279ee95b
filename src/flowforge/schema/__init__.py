"""Schema inference, data validation and schema compatibility."""

from flowforge.schema.compatibility import ALLOWED_CONVERSIONS, merge_schemas, schemas_compatible
from flowforge.schema.inference import (
    DEFAULT_MAX_SAMPLE_SIZE,
    create_data_preview,
    detect_field_type,
    generate_schema,
    validate_data_against_schema,
)

__all__ = [
    "ALLOWED_CONVERSIONS",
    "DEFAULT_MAX_SAMPLE_SIZE",
    "create_data_preview",
    "detect_field_type",
    "generate_schema",
    "merge_schemas",
    "schemas_compatible",
    "validate_data_against_schema",
]
