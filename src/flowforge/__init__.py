"""
FlowForge: pipeline data model and schema engine.

Typed nodes and edges for visually assembled data pipelines, with
configuration validation, schema inference over untyped records,
schema compatibility checks and a lossless serialization round trip.
"""

from flowforge.contracts import (
    CompatibilityResult,
    DataPreview,
    DataSchema,
    FieldType,
    NodeCategory,
    NodeData,
    NodeStatus,
    NodeType,
    Pipeline,
    PipelineEdge,
    PipelineNode,
    Position,
    SchemaField,
    SerializationError,
    UnknownNodeTypeError,
    ValidationResult,
)
from flowforge.core.serialization import (
    deserialize_pipeline,
    pipelines_equal,
    serialize_pipeline,
)
from flowforge.nodes import (
    create_node,
    get_available_node_types,
    get_default_node_config,
    get_node_metadata,
    validate_node_config,
    validate_node_position,
)
from flowforge.schema import (
    create_data_preview,
    detect_field_type,
    generate_schema,
    merge_schemas,
    schemas_compatible,
    validate_data_against_schema,
)

__version__ = "0.1.0"

__all__ = [
    "CompatibilityResult",
    "DataPreview",
    "DataSchema",
    "FieldType",
    "NodeCategory",
    "NodeData",
    "NodeStatus",
    "NodeType",
    "Pipeline",
    "PipelineEdge",
    "PipelineNode",
    "Position",
    "SchemaField",
    "SerializationError",
    "UnknownNodeTypeError",
    "ValidationResult",
    "create_data_preview",
    "create_node",
    "deserialize_pipeline",
    "detect_field_type",
    "generate_schema",
    "get_available_node_types",
    "get_default_node_config",
    "get_node_metadata",
    "merge_schemas",
    "pipelines_equal",
    "schemas_compatible",
    "serialize_pipeline",
    "validate_data_against_schema",
    "validate_node_config",
    "validate_node_position",
]
