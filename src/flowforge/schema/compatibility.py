# src/flowforge/schema/compatibility.py
"""Schema compatibility for wiring nodes together.

Checked when the user draws an edge: can data conforming to the source
node's schema flow into a consumer expecting the target schema?

Compatibility means:
- Every target field the source lacks is nullable in the target
- Shared fields have the same type, or the source type widens to string
- A source field that allows null does not feed a non-nullable target field

Fields the source has but the target does not mention are ignored.
"""

from __future__ import annotations

from flowforge.contracts import CompatibilityResult, DataSchema, FieldType, SchemaField

# (source type, target type) pairs accepted despite differing.
# Direction matters: number -> string is fine, string -> number is not.
ALLOWED_CONVERSIONS: frozenset[tuple[FieldType, FieldType]] = frozenset(
    {
        (FieldType.NUMBER, FieldType.STRING),
        (FieldType.BOOLEAN, FieldType.STRING),
        (FieldType.DATE, FieldType.STRING),
    }
)


def _types_compatible(source: FieldType, target: FieldType) -> bool:
    return source == target or (source, target) in ALLOWED_CONVERSIONS


def schemas_compatible(source: DataSchema, target: DataSchema) -> CompatibilityResult:
    """Check whether data of the source schema can feed the target schema.

    Args:
        source: Schema of the upstream (producing) node
        target: Schema the downstream (consuming) node expects

    Returns:
        CompatibilityResult; compatible is True when no issue was found
    """
    issues: list[str] = []

    for target_field in target.fields:
        name = target_field.name
        source_field = source.get_field(name)

        if source_field is None:
            if not target_field.nullable:
                issues.append(f"Missing required field: {name}")
            continue

        if not _types_compatible(source_field.type, target_field.type):
            issues.append(f"Type mismatch for field {name}: source is {source_field.type}, target expects {target_field.type}")

        if source_field.nullable and not target_field.nullable:
            issues.append(f"Nullability mismatch for field {name}: source allows null, target does not")

    return CompatibilityResult(compatible=not issues, issues=issues)


def merge_schemas(first: DataSchema, second: DataSchema) -> DataSchema:
    """Union of two schemas.

    Fields keep first-schema order, then new second-schema fields. For a
    field in both, disagreeing types fall back to STRING and nullability
    is the OR of both sides.
    """
    merged: dict[str, SchemaField] = {f.name: f for f in first.fields}

    for schema_field in second.fields:
        existing = merged.get(schema_field.name)
        if existing is None:
            merged[schema_field.name] = schema_field
            continue
        merged[schema_field.name] = SchemaField(
            name=schema_field.name,
            type=existing.type if existing.type == schema_field.type else FieldType.STRING,
            nullable=existing.nullable or schema_field.nullable,
        )

    return DataSchema(fields=tuple(merged.values()))
