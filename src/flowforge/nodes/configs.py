# src/flowforge/nodes/configs.py
"""Typed configuration models, one per node type.

Together these form a tagged union keyed by NodeType (see
flowforge.nodes.registry). Defaults here are the defaults of newly
created nodes, so changing one changes what the palette produces.
"""

from typing import Any, Literal

from pydantic import Field

from flowforge.nodes.config_base import ConfigSection, NodeConfigModel

# =============================================================================
# Sources
# =============================================================================


class AuthenticationConfig(ConfigSection):
    """Credentials block of an API fetch node."""

    type: Literal["none", "bearer", "basic", "api-key"] = "none"
    token: str | None = None
    username: str | None = None
    password: str | None = None
    api_key: str | None = None


class ApiFetchConfig(NodeConfigModel):
    url: str = ""
    method: Literal["GET", "POST", "PUT", "DELETE"] = "GET"
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | None = None
    authentication: AuthenticationConfig = Field(default_factory=AuthenticationConfig)


class CsvUploadConfig(NodeConfigModel):
    has_headers: bool = True
    delimiter: str = ","
    encoding: str = "utf-8"


class JsonParserConfig(NodeConfigModel):
    json_path: str = "$"
    validate_schema: bool = False


# =============================================================================
# Transforms
# =============================================================================

FilterOperator = Literal["equals", "not_equals", "greater_than", "less_than", "contains", "starts_with", "ends_with"]
AggregationOperation = Literal["count", "sum", "avg", "min", "max"]


class FieldTransformation(ConfigSection):
    """One source-to-target field expression of a map node."""

    source_field: str
    target_field: str
    expression: str


class AggregationSpec(ConfigSection):
    """One aggregate computed by an aggregate or group-by node."""

    field: str
    operation: AggregationOperation
    alias: str | None = None


class FilterConfig(NodeConfigModel):
    condition: str = ""
    field: str = ""
    operator: FilterOperator = "equals"
    value: Any = ""


class MapConfig(NodeConfigModel):
    transformations: list[FieldTransformation] = Field(default_factory=list)


class ReduceConfig(NodeConfigModel):
    operation: str = "sum"
    field: str = ""
    initial_value: Any = 0


class AggregateConfig(NodeConfigModel):
    aggregations: list[AggregationSpec] = Field(default_factory=list)


class JoinConfig(NodeConfigModel):
    join_type: Literal["inner", "left", "right", "full"] = "inner"
    left_key: str = ""
    right_key: str = ""


class SortConfig(NodeConfigModel):
    field: str = ""
    direction: Literal["asc", "desc"] = "asc"


class LimitConfig(NodeConfigModel):
    count: int | float = 100
    offset: int | float | None = 0


class RenameFieldsConfig(NodeConfigModel):
    mappings: dict[str, str] = Field(default_factory=dict)


class MathTransformConfig(NodeConfigModel):
    operation: Literal["add", "subtract", "multiply", "divide", "power", "sqrt", "abs"] = "add"
    field: str = ""
    value: int | float | None = 0
    target_field: str | None = None


class GroupByConfig(NodeConfigModel):
    group_by: list[str] = Field(default_factory=list)
    aggregations: list[AggregationSpec] = Field(default_factory=list)


# =============================================================================
# Outputs
# =============================================================================


class PreviewConfig(NodeConfigModel):
    max_rows: int = Field(default=100, gt=0)
    show_schema: bool = True


class ExportConfig(NodeConfigModel):
    format: Literal["json", "csv"] = "json"
    filename: str | None = "output"
