# src/flowforge/nodes/config_base.py
"""Base class for typed node configurations.

Node configuration is stored as an open dict so half-edited settings are
never lost. Each node type also has a pydantic model describing the shape
its configuration should have. The models provide:
- Default configurations for newly created nodes
- A typed view for collaborators that consume configuration
- Shape checks that the config validator reports as warnings

Wire keys are camelCase (joinType, leftKey, ...); model attributes are
snake_case. Both are accepted on input.

Example usage:
    class SortConfig(NodeConfigModel):
        field: str = ""
        direction: Literal["asc", "desc"] = "asc"

    SortConfig.default_config()            # {"field": "", "direction": "asc"}
    cfg = SortConfig.from_config(node.config)
    cfg.direction                          # typed access, fails fast if malformed
"""

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class NodeConfigError(Exception):
    """Raised when a node configuration does not match its typed model."""

    pass


class ConfigSection(BaseModel):
    """Nested section of a node configuration (auth block, aggregation list...)."""

    model_config = ConfigDict(
        extra="allow",  # Keep keys the editor adds that we do not model
        alias_generator=to_camel,
        populate_by_name=True,
    )


class NodeConfigModel(ConfigSection):
    """Base class for per-type node configuration models."""

    @classmethod
    def default_config(cls) -> dict[str, Any]:
        """Fresh default configuration dict in wire form.

        Unset optional keys (None) are omitted.
        """
        return cls().model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Self:
        """Create a typed view of a stored configuration.

        Args:
            config: Node configuration in wire form.

        Returns:
            Validated configuration instance.

        Raises:
            NodeConfigError: If configuration is invalid.
        """
        if not isinstance(config, Mapping):
            raise NodeConfigError(f"Invalid configuration for {cls.__name__}: config must be a mapping, got {type(config).__name__}.")
        try:
            return cls.model_validate(dict(config))
        except ValidationError as e:
            raise NodeConfigError(f"Invalid configuration for {cls.__name__}: {e}") from e

    def to_config(self) -> dict[str, Any]:
        """Convert back to wire form, keeping unmodelled keys."""
        return self.model_dump(by_alias=True)
