# src/flowforge/contracts/schema.py
"""Inferred data schema types.

A DataSchema describes the structure of a dataset flowing into or out of a
node: field names, structural types and nullability. Schemas are inferred
from live data (see flowforge.schema.inference) and compared when two nodes
are wired together (see flowforge.schema.compatibility).

All types here are frozen - "modifications" build new instances. A node's
DataPreview is replaced wholesale whenever its upstream data changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flowforge.contracts.enums import FieldType


@dataclass(frozen=True, slots=True)
class SchemaField:
    """A single field of an inferred schema.

    Attributes:
        name: Field name (key in the record)
        type: Majority structural type observed for the field
        nullable: True if at least one record held an explicit null
    """

    name: str
    type: FieldType
    nullable: bool = False

    def __post_init__(self) -> None:
        # Accept the wire string ("number") as well as the enum member
        object.__setattr__(self, "type", FieldType(self.type))

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire form."""
        return {"name": self.name, "type": self.type.value, "nullable": self.nullable}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SchemaField:
        """Build from wire form.

        Raises:
            KeyError: If name or type is missing
            ValueError: If type is not a known FieldType
        """
        return cls(name=data["name"], type=FieldType(data["type"]), nullable=bool(data.get("nullable", False)))


@dataclass(frozen=True, slots=True)
class DataSchema:
    """Structural description of a dataset.

    Field order is significant: it is the order in which fields were first
    discovered, which keeps schema diffs stable.

    Attributes:
        fields: Immutable tuple of SchemaField, unique by name
    """

    fields: tuple[SchemaField, ...] = ()

    _by_name: dict[str, SchemaField] = field(default_factory=dict, init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        """Build the name index.

        Raises:
            ValueError: If two fields share a name
        """
        fields = tuple(self.fields)
        names = [f.name for f in fields]
        if len(names) != len(set(names)):
            duplicates = sorted({n for n in names if names.count(n) > 1})
            raise ValueError(f"Duplicate field names in schema: {', '.join(duplicates)}")
        object.__setattr__(self, "fields", fields)
        object.__setattr__(self, "_by_name", {f.name: f for f in fields})

    @property
    def field_names(self) -> list[str]:
        """Field names in schema order."""
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> SchemaField | None:
        """Look up a field by name.

        Returns:
            The SchemaField if present, None otherwise
        """
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire form."""
        return {"fields": [f.to_dict() for f in self.fields]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DataSchema:
        """Build from wire form."""
        return cls(fields=tuple(SchemaField.from_dict(f) for f in data["fields"]))


@dataclass(frozen=True, slots=True)
class DataPreview:
    """Snapshot of the data reaching a node.

    Attributes:
        sample: First rows of the dataset (bounded by the preview size)
        total_rows: Number of rows in the full dataset
        schema: Schema inferred from the full dataset
        errors: Problems found while producing the data, if any
    """

    sample: list[Any]
    total_rows: int
    schema: DataSchema
    errors: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire form (errors omitted when None)."""
        result: dict[str, Any] = {
            "sample": list(self.sample),
            "totalRows": self.total_rows,
            "schema": self.schema.to_dict(),
        }
        if self.errors is not None:
            result["errors"] = list(self.errors)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DataPreview:
        """Build from wire form."""
        total_rows = data["totalRows"]
        if not isinstance(total_rows, int) or isinstance(total_rows, bool) or total_rows < 0:
            raise ValueError(f"totalRows must be a non-negative integer, got {total_rows!r}")
        errors = data.get("errors")
        return cls(
            sample=list(data["sample"]),
            total_rows=total_rows,
            schema=DataSchema.from_dict(data["schema"]),
            errors=list(errors) if errors is not None else None,
        )
