"""Node type registry, node creation and configuration validation."""

from flowforge.nodes.config_base import NodeConfigError, NodeConfigModel
from flowforge.nodes.factory import create_node, validate_node_position
from flowforge.nodes.registry import (
    NODE_DEFINITIONS,
    NodeDefinition,
    get_available_node_types,
    get_default_node_config,
    get_node_definition,
    get_node_metadata,
    resolve_node_type,
)
from flowforge.nodes.validation import validate_node_config

__all__ = [
    "NODE_DEFINITIONS",
    "NodeConfigError",
    "NodeConfigModel",
    "NodeDefinition",
    "create_node",
    "get_available_node_types",
    "get_default_node_config",
    "get_node_definition",
    "get_node_metadata",
    "resolve_node_type",
    "validate_node_config",
    "validate_node_position",
]
