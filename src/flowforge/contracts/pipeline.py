# src/flowforge/contracts/pipeline.py
"""Pipeline graph entities: nodes, edges and the pipeline itself.

These types answer: "What does a saved pipeline consist of?"

Attribute names are Python snake_case; to_dict()/from_dict() use the
camelCase wire names written by the browser editor (sourceHandle,
createdAt, ...). Optional attributes that are None are omitted from the
wire form.

Ownership: a Pipeline exclusively owns its nodes and edges. Nothing here
checks that edges reference existing nodes - the editor does that.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from flowforge.contracts.enums import NodeCategory, NodeStatus, NodeType
from flowforge.contracts.schema import DataPreview
from flowforge.contracts.types import EdgeID, NodeConfig, NodeID


def _require_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return value


def _parse_datetime(value: Any, name: str) -> datetime:
    """Accept a datetime or an ISO-8601 string (trailing 'Z' allowed)."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise TypeError(f"{name} must be a datetime or ISO-8601 string, got {type(value).__name__}")


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class Position:
    """Canvas coordinates of a node.

    Non-finite values are not rejected here so that stored documents
    round-trip unchanged; create_node() normalizes them to 0.
    """

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Position:
        return cls(x=_require_number(data["x"], "position.x"), y=_require_number(data["y"], "position.y"))


@dataclass
class NodeData:
    """Display data of a node.

    Attributes:
        label: Human-readable node name
        category: Palette category (copied from the node type's registry entry)
        description: Optional longer description
        icon: Optional icon glyph
        color: Optional display color
    """

    label: str
    category: NodeCategory
    description: str | None = None
    icon: str | None = None
    color: str | None = None

    def __post_init__(self) -> None:
        self.category = NodeCategory(self.category)

    def to_dict(self) -> dict[str, Any]:
        return _drop_none(
            {
                "label": self.label,
                "description": self.description,
                "category": self.category.value,
                "icon": self.icon,
                "color": self.color,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NodeData:
        return cls(
            label=data["label"],
            category=NodeCategory(data["category"]),
            description=data.get("description"),
            icon=data.get("icon"),
            color=data.get("color"),
        )


@dataclass
class PipelineNode:
    """A single typed unit of work in the pipeline graph.

    Note: NOT frozen because the execution engine updates status and
    preview as data flows. The id is assigned once by create_node() and
    must never change.
    """

    id: NodeID
    type: NodeType
    position: Position
    data: NodeData
    config: NodeConfig = field(default_factory=dict)
    status: NodeStatus = NodeStatus.IDLE
    preview: DataPreview | None = None

    def __post_init__(self) -> None:
        self.type = NodeType(self.type)
        self.status = NodeStatus(self.status)

    @property
    def category(self) -> NodeCategory:
        return self.type.category

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "position": self.position.to_dict(),
            "data": self.data.to_dict(),
            "config": self.config,
            "status": self.status.value,
        }
        if self.preview is not None:
            result["preview"] = self.preview.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PipelineNode:
        config = data.get("config", {})
        if not isinstance(config, dict):
            raise TypeError(f"config must be an object, got {type(config).__name__}")
        preview = data.get("preview")
        return cls(
            id=NodeID(data["id"]),
            type=NodeType(data["type"]),
            position=Position.from_dict(data["position"]),
            data=NodeData.from_dict(data["data"]),
            config=config,
            status=NodeStatus(data.get("status", NodeStatus.IDLE)),
            preview=DataPreview.from_dict(preview) if preview is not None else None,
        )


@dataclass
class PipelineEdge:
    """Directed connection from one node's output to another node's input.

    Only id, source, target and the two handles identify an edge;
    animated and style are presentation details.
    """

    id: EdgeID
    source: NodeID
    target: NodeID
    source_handle: str | None = None
    target_handle: str | None = None
    animated: bool | None = None
    style: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none(
            {
                "id": self.id,
                "source": self.source,
                "target": self.target,
                "sourceHandle": self.source_handle,
                "targetHandle": self.target_handle,
                "animated": self.animated,
                "style": self.style,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PipelineEdge:
        return cls(
            id=EdgeID(data["id"]),
            source=NodeID(data["source"]),
            target=NodeID(data["target"]),
            source_handle=data.get("sourceHandle"),
            target_handle=data.get("targetHandle"),
            animated=data.get("animated"),
            style=data.get("style"),
        )


@dataclass
class Pipeline:
    """A complete pipeline graph with its metadata.

    Nodes and edges are kept in sequence order; the serializer preserves
    that order so round trips are deterministic.

    Attributes:
        version: Non-negative revision counter used by the persistence
            layer to migrate older documents
    """

    id: str
    name: str
    nodes: list[PipelineNode]
    edges: list[PipelineEdge]
    created_by: str
    created_at: datetime
    updated_at: datetime
    version: int = 1
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate the version counter.

        Raises:
            ValueError: If version is negative or not an integer
        """
        if isinstance(self.version, bool) or not isinstance(self.version, int) or self.version < 0:
            raise ValueError(f"version must be a non-negative integer, got {self.version!r}")

    def get_node(self, node_id: str) -> PipelineNode | None:
        """Find a node by id."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire form.

        Datetimes are left as datetime objects; encoding them is the
        serializer's job.
        """
        return _drop_none(
            {
                "id": self.id,
                "name": self.name,
                "description": self.description,
                "nodes": [n.to_dict() for n in self.nodes],
                "edges": [e.to_dict() for e in self.edges],
                "createdBy": self.created_by,
                "createdAt": self.created_at,
                "updatedAt": self.updated_at,
                "version": self.version,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pipeline:
        """Build from wire form.

        Raises:
            KeyError: If a required key is missing
            TypeError: If a value has the wrong shape
            ValueError: If an enum value or timestamp is invalid
        """
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            nodes=[PipelineNode.from_dict(n) for n in data["nodes"]],
            edges=[PipelineEdge.from_dict(e) for e in data["edges"]],
            created_by=data["createdBy"],
            created_at=_parse_datetime(data["createdAt"], "createdAt"),
            updated_at=_parse_datetime(data["updatedAt"], "updatedAt"),
            version=data["version"],
        )
