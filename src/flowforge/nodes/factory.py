# src/flowforge/nodes/factory.py
"""Node creation for the pipeline editor.

create_node() is the only way new nodes enter a pipeline: it assigns the
id, copies display data and default configuration from the registry, and
normalizes the drop position.
"""

from __future__ import annotations

import math
import numbers
import uuid
from collections.abc import Mapping
from typing import Any

import structlog

from flowforge.contracts import NodeData, NodeID, NodeStatus, NodeType, PipelineNode, Position, ValidationResult
from flowforge.nodes.registry import get_node_definition

logger = structlog.get_logger(__name__)


def _coordinates(position: Position | Mapping[str, Any]) -> tuple[Any, Any]:
    if isinstance(position, Position):
        return position.x, position.y
    if isinstance(position, Mapping):
        return position["x"], position["y"]
    raise TypeError(f"position must be a Position or a mapping with 'x' and 'y', got {type(position).__name__}")


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _normalize_coordinate(value: Any, axis: str) -> float:
    """Replace non-finite coordinates with 0, keep finite ones exactly."""
    if not _is_number(value):
        raise TypeError(f"Position {axis} must be a number, got {type(value).__name__}")
    if isinstance(value, numbers.Integral):
        return value
    if not math.isfinite(value):
        return 0
    return value


def create_node(node_type: NodeType | str, position: Position | Mapping[str, Any]) -> PipelineNode:
    """Create a new node with default configuration at a canvas position.

    Args:
        node_type: Registered node type (enum member or wire string)
        position: Drop location; NaN and +/-Infinity components become 0

    Returns:
        New PipelineNode with a fresh UUID4 id and IDLE status

    Raises:
        UnknownNodeTypeError: If node_type is not registered
        TypeError: If a position component is not a number
    """
    definition = get_node_definition(node_type)
    x, y = _coordinates(position)

    node = PipelineNode(
        id=NodeID(str(uuid.uuid4())),
        type=definition.node_type,
        position=Position(x=_normalize_coordinate(x, "x"), y=_normalize_coordinate(y, "y")),
        data=NodeData(
            label=definition.label,
            description=definition.description,
            category=definition.category,
            icon=definition.icon,
        ),
        config=definition.default_config(),
        status=NodeStatus.IDLE,
    )
    logger.debug("node_created", node_id=node.id, node_type=node.type.value)
    return node


def validate_node_position(position: Position | Mapping[str, Any]) -> ValidationResult:
    """Check that both position components are usable numbers.

    NaN and non-numeric components are errors. Infinite values pass:
    create_node() normalizes those.
    """
    errors: list[str] = []
    x, y = _coordinates(position)

    if not _is_number(x) or math.isnan(x):
        errors.append("Position x must be a valid number")
    if not _is_number(y) or math.isnan(y):
        errors.append("Position y must be a valid number")

    return ValidationResult.from_messages(errors)
