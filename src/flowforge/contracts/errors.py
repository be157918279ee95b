# src/flowforge/contracts/errors.py
"""Exceptions raised across subsystem boundaries.

Validation problems are never raised - they are returned as structured
results (ValidationResult, CompatibilityResult, lists of messages) so that
a UI can display all of them at once. Only structural errors raise.
"""

from typing import Any


class UnknownNodeTypeError(ValueError):
    """Raised when a node type is not one of the registered types.

    Fatal to the single call: callers must not continue with an unknown type.

    Attributes:
        node_type: The rejected value, as given by the caller
    """

    def __init__(self, node_type: Any) -> None:
        self.node_type = node_type
        super().__init__(f"Unknown node type: {node_type}")


class SerializationError(ValueError):
    """Raised when serialized pipeline text cannot be decoded.

    A partially reconstructed graph is worse than none, so decoding fails
    loudly instead of returning what could be salvaged. The underlying
    cause is always chained.
    """

    pass
