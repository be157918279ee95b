# src/flowforge/nodes/registry.py
"""Static catalog of node types.

Every NodeType has exactly one NodeDefinition: display metadata plus the
typed configuration model that produces its default configuration. The
catalog is built once at import and only read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from flowforge.contracts import NodeCategory, NodeType, UnknownNodeTypeError
from flowforge.nodes.config_base import NodeConfigModel
from flowforge.nodes.configs import (
    AggregateConfig,
    ApiFetchConfig,
    CsvUploadConfig,
    ExportConfig,
    FilterConfig,
    GroupByConfig,
    JoinConfig,
    JsonParserConfig,
    LimitConfig,
    MapConfig,
    MathTransformConfig,
    PreviewConfig,
    ReduceConfig,
    RenameFieldsConfig,
    SortConfig,
)


@dataclass(frozen=True, slots=True)
class NodeDefinition:
    """Registry entry for a node type.

    Attributes:
        node_type: The type this entry describes
        label: Palette label
        description: One-line palette description
        icon: Palette glyph
        config_model: Typed configuration model for this type
    """

    node_type: NodeType
    label: str
    description: str
    icon: str
    config_model: type[NodeConfigModel]

    @property
    def category(self) -> NodeCategory:
        """Category is derived from the type, never stored separately."""
        return self.node_type.category

    def default_config(self) -> dict[str, Any]:
        """Fresh default configuration (a new dict on every call)."""
        return self.config_model.default_config()

    def metadata(self) -> dict[str, Any]:
        """Display data copied onto new nodes."""
        return {
            "label": self.label,
            "description": self.description,
            "category": self.category,
            "icon": self.icon,
        }


_DEFINITIONS: tuple[NodeDefinition, ...] = (
    NodeDefinition(NodeType.API_FETCH, "API Fetch", "Fetch data from REST APIs", "🌐", ApiFetchConfig),
    NodeDefinition(NodeType.CSV_UPLOAD, "CSV Upload", "Upload and parse CSV files", "📄", CsvUploadConfig),
    NodeDefinition(NodeType.JSON_PARSER, "JSON Parser", "Parse JSON data", "📋", JsonParserConfig),
    NodeDefinition(NodeType.FILTER, "Filter", "Filter rows based on conditions", "🔍", FilterConfig),
    NodeDefinition(NodeType.MAP, "Map", "Transform data fields", "🔄", MapConfig),
    NodeDefinition(NodeType.REDUCE, "Reduce", "Reduce data to single values", "📊", ReduceConfig),
    NodeDefinition(NodeType.AGGREGATE, "Aggregate", "Aggregate data with functions", "📈", AggregateConfig),
    NodeDefinition(NodeType.JOIN, "Join", "Join multiple data sources", "🔗", JoinConfig),
    NodeDefinition(NodeType.SORT, "Sort", "Sort data by fields", "📶", SortConfig),
    NodeDefinition(NodeType.LIMIT, "Limit", "Limit number of rows", "✂️", LimitConfig),
    NodeDefinition(NodeType.RENAME_FIELDS, "Rename Fields", "Rename data fields", "🏷️", RenameFieldsConfig),
    NodeDefinition(NodeType.MATH_TRANSFORM, "Math Transform", "Mathematical operations", "🧮", MathTransformConfig),
    NodeDefinition(NodeType.GROUP_BY, "Group By", "Group data by fields", "📦", GroupByConfig),
    NodeDefinition(NodeType.PREVIEW, "Preview", "Preview data output", "👁️", PreviewConfig),
    NodeDefinition(NodeType.EXPORT, "Export", "Export data to files", "💾", ExportConfig),
)

NODE_DEFINITIONS: dict[NodeType, NodeDefinition] = {d.node_type: d for d in _DEFINITIONS}

# Import-time guard: a NodeType added without a registry entry must not ship
_missing = set(NodeType) - set(NODE_DEFINITIONS)
if _missing:
    raise RuntimeError(f"Node types without registry entry: {sorted(_missing)}")


def resolve_node_type(value: NodeType | str) -> NodeType:
    """Resolve a NodeType or its wire string to a NodeType.

    Raises:
        UnknownNodeTypeError: If value is not a registered node type
    """
    if isinstance(value, NodeType):
        return value
    if isinstance(value, str):
        try:
            return NodeType(value)
        except ValueError:
            pass
    raise UnknownNodeTypeError(value)


def get_node_definition(node_type: NodeType | str) -> NodeDefinition:
    """Get the registry entry for a node type.

    Raises:
        UnknownNodeTypeError: If node_type is not registered
    """
    return NODE_DEFINITIONS[resolve_node_type(node_type)]


def get_default_node_config(node_type: NodeType | str) -> dict[str, Any]:
    """Get a fresh default configuration for a node type."""
    return get_node_definition(node_type).default_config()


def get_node_metadata(node_type: NodeType | str) -> dict[str, Any]:
    """Get label, description, category and icon for a node type."""
    return get_node_definition(node_type).metadata()


def get_available_node_types() -> dict[NodeCategory, list[NodeType]]:
    """All node types grouped by category, in palette order."""
    grouped: dict[NodeCategory, list[NodeType]] = {category: [] for category in NodeCategory}
    for definition in _DEFINITIONS:
        grouped[definition.category].append(definition.node_type)
    return grouped
