# src/flowforge/contracts/types.py
"""Semantic type aliases for compile-time type safety.

NewType creates distinct types that mypy treats as incompatible,
preventing accidental misuse of semantically different string values.
"""

from typing import Any, NewType

NodeID = NewType("NodeID", str)
"""Unique node identifier within a pipeline (a UUID4 string for new nodes)"""

EdgeID = NewType("EdgeID", str)
"""Unique edge identifier within a pipeline"""

NodeConfig = dict[str, Any]
"""Open key-value configuration of a node.

The required shape per node type is enforced only by validate_node_config(),
so partially edited configurations can be stored as-is.
"""
