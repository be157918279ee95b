# src/flowforge/contracts/enums.py
"""All node kinds, categories, statuses and field types.

These values are part of the persisted pipeline format. The string values
match what the browser editor writes, so they must never be renamed.
"""

from enum import StrEnum


class NodeCategory(StrEnum):
    """Palette category of a node type.

    Derived from the node type, never set independently.
    """

    SOURCE = "source"
    TRANSFORM = "transform"
    OUTPUT = "output"


class NodeType(StrEnum):
    """Closed set of node types a pipeline can contain.

    Stored in the pipeline document (nodes[].type).
    """

    API_FETCH = "api-fetch"
    CSV_UPLOAD = "csv-upload"
    JSON_PARSER = "json-parser"
    FILTER = "filter"
    MAP = "map"
    REDUCE = "reduce"
    AGGREGATE = "aggregate"
    JOIN = "join"
    SORT = "sort"
    LIMIT = "limit"
    RENAME_FIELDS = "rename-fields"
    MATH_TRANSFORM = "math-transform"
    GROUP_BY = "group-by"
    PREVIEW = "preview"
    EXPORT = "export"

    @property
    def category(self) -> NodeCategory:
        """Category this node type belongs to."""
        return _CATEGORY_BY_TYPE[self]


_CATEGORY_BY_TYPE: dict[NodeType, NodeCategory] = {
    NodeType.API_FETCH: NodeCategory.SOURCE,
    NodeType.CSV_UPLOAD: NodeCategory.SOURCE,
    NodeType.JSON_PARSER: NodeCategory.SOURCE,
    NodeType.FILTER: NodeCategory.TRANSFORM,
    NodeType.MAP: NodeCategory.TRANSFORM,
    NodeType.REDUCE: NodeCategory.TRANSFORM,
    NodeType.AGGREGATE: NodeCategory.TRANSFORM,
    NodeType.JOIN: NodeCategory.TRANSFORM,
    NodeType.SORT: NodeCategory.TRANSFORM,
    NodeType.LIMIT: NodeCategory.TRANSFORM,
    NodeType.RENAME_FIELDS: NodeCategory.TRANSFORM,
    NodeType.MATH_TRANSFORM: NodeCategory.TRANSFORM,
    NodeType.GROUP_BY: NodeCategory.TRANSFORM,
    NodeType.PREVIEW: NodeCategory.OUTPUT,
    NodeType.EXPORT: NodeCategory.OUTPUT,
}


class NodeStatus(StrEnum):
    """Execution status of a node.

    Set by the execution engine; a freshly created node is IDLE.
    """

    IDLE = "idle"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


class FieldType(StrEnum):
    """Structural type of a field in an inferred data schema.

    Values:
        STRING: Text, and the placeholder type for null values
        NUMBER: Integers and floats (including NaN/Infinity)
        BOOLEAN: True/False
        DATE: ISO-8601 timestamps and datetime objects
        OBJECT: Nested key-value records
        ARRAY: Lists and other sequences
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    OBJECT = "object"
    ARRAY = "array"
