"""Shared contracts for cross-boundary data types.

All dataclasses, enums and exceptions that cross subsystem boundaries are
defined here. This package is a LEAF MODULE with no outbound dependencies
to flowforge.core, flowforge.nodes or flowforge.schema.

Import patterns:
    from flowforge.contracts import NodeType, PipelineNode, DataSchema
"""

from flowforge.contracts.enums import FieldType, NodeCategory, NodeStatus, NodeType
from flowforge.contracts.errors import SerializationError, UnknownNodeTypeError
from flowforge.contracts.pipeline import (
    NodeData,
    Pipeline,
    PipelineEdge,
    PipelineNode,
    Position,
)
from flowforge.contracts.results import CompatibilityResult, ValidationResult
from flowforge.contracts.schema import DataPreview, DataSchema, SchemaField
from flowforge.contracts.types import EdgeID, NodeConfig, NodeID

__all__ = [
    # enums
    "FieldType",
    "NodeCategory",
    "NodeStatus",
    "NodeType",
    # errors
    "SerializationError",
    "UnknownNodeTypeError",
    # pipeline
    "NodeData",
    "Pipeline",
    "PipelineEdge",
    "PipelineNode",
    "Position",
    # results
    "CompatibilityResult",
    "ValidationResult",
    # schema
    "DataPreview",
    "DataSchema",
    "SchemaField",
    # types
    "EdgeID",
    "NodeConfig",
    "NodeID",
]
