# tests/unit/schema/test_compatibility.py
"""Tests for schema compatibility checks and schema merging."""

from __future__ import annotations

import pytest

from flowforge.contracts import DataSchema, FieldType, SchemaField
from flowforge.schema import ALLOWED_CONVERSIONS, merge_schemas, schemas_compatible


def _schema(*fields: tuple[str, FieldType, bool]) -> DataSchema:
    return DataSchema(fields=tuple(SchemaField(name, type_, nullable) for name, type_, nullable in fields))


class TestSchemasCompatible:
    def test_identical(self) -> None:
        schema = _schema(("id", FieldType.NUMBER, False), ("name", FieldType.STRING, True))

        result = schemas_compatible(schema, schema)

        assert result.compatible is True
        assert result.issues == []

    def test_user_table_scenario(self) -> None:
        source = _schema(
            ("id", FieldType.NUMBER, False),
            ("name", FieldType.STRING, False),
            ("email", FieldType.STRING, True),
        )
        looser_target = _schema(("id", FieldType.NUMBER, False), ("name", FieldType.STRING, True))
        stricter_target = _schema(
            ("id", FieldType.STRING, False),
            ("name", FieldType.STRING, False),
            ("required_field", FieldType.STRING, False),
        )

        assert schemas_compatible(source, looser_target).compatible is True

        result = schemas_compatible(source, stricter_target)
        assert result.compatible is False
        # number -> string is an allowed widening; only the missing field is an issue
        assert result.issues == ["Missing required field: required_field"]

    def test_widening_direction_matters(self) -> None:
        source = _schema(("id", FieldType.STRING, False))
        target = _schema(("id", FieldType.NUMBER, False))

        assert schemas_compatible(source, target).issues == [
            "Type mismatch for field id: source is string, target expects number"
        ]

    @pytest.mark.parametrize("source_type", [FieldType.NUMBER, FieldType.BOOLEAN, FieldType.DATE])
    def test_allowed_conversions_to_string(self, source_type: FieldType) -> None:
        source = _schema(("v", source_type, False))
        target = _schema(("v", FieldType.STRING, False))

        assert schemas_compatible(source, target).compatible is True

    @pytest.mark.parametrize(
        ("source_type", "target_type"),
        [
            (FieldType.OBJECT, FieldType.STRING),
            (FieldType.ARRAY, FieldType.STRING),
            (FieldType.NUMBER, FieldType.BOOLEAN),
            (FieldType.DATE, FieldType.NUMBER),
        ],
    )
    def test_other_mismatches(self, source_type: FieldType, target_type: FieldType) -> None:
        result = schemas_compatible(_schema(("v", source_type, False)), _schema(("v", target_type, False)))

        assert result.compatible is False

    def test_whitelist_contents(self) -> None:
        assert ALLOWED_CONVERSIONS == {
            (FieldType.NUMBER, FieldType.STRING),
            (FieldType.BOOLEAN, FieldType.STRING),
            (FieldType.DATE, FieldType.STRING),
        }

    def test_missing_nullable_target_field_ok(self) -> None:
        result = schemas_compatible(_schema(), _schema(("note", FieldType.STRING, True)))

        assert result.compatible is True

    def test_nullability_mismatch(self) -> None:
        source = _schema(("email", FieldType.STRING, True))
        target = _schema(("email", FieldType.STRING, False))

        assert schemas_compatible(source, target).issues == [
            "Nullability mismatch for field email: source allows null, target does not"
        ]

    def test_non_nullable_source_into_nullable_target_ok(self) -> None:
        source = _schema(("email", FieldType.STRING, False))
        target = _schema(("email", FieldType.STRING, True))

        assert schemas_compatible(source, target).compatible is True

    def test_extra_source_fields_ignored(self) -> None:
        source = _schema(("id", FieldType.NUMBER, False), ("debug", FieldType.OBJECT, True))
        target = _schema(("id", FieldType.NUMBER, False))

        assert schemas_compatible(source, target).compatible is True

    def test_issues_accumulate_in_target_order(self) -> None:
        source = _schema(("b", FieldType.ARRAY, True))
        target = _schema(("a", FieldType.NUMBER, False), ("b", FieldType.OBJECT, False))

        result = schemas_compatible(source, target)

        assert result.issues == [
            "Missing required field: a",
            "Type mismatch for field b: source is array, target expects object",
            "Nullability mismatch for field b: source allows null, target does not",
        ]
        assert result.error_message == "; ".join(result.issues)


class TestMergeSchemas:
    def test_union_in_order(self) -> None:
        first = _schema(("id", FieldType.NUMBER, False), ("name", FieldType.STRING, False))
        second = _schema(("email", FieldType.STRING, True), ("id", FieldType.NUMBER, False))

        assert merge_schemas(first, second).field_names == ["id", "name", "email"]

    def test_conflicting_types_become_string(self) -> None:
        merged = merge_schemas(_schema(("v", FieldType.NUMBER, False)), _schema(("v", FieldType.BOOLEAN, False)))

        assert merged.get_field("v") == SchemaField("v", FieldType.STRING, nullable=False)

    def test_nullable_is_or(self) -> None:
        merged = merge_schemas(_schema(("v", FieldType.DATE, False)), _schema(("v", FieldType.DATE, True)))

        assert merged.get_field("v") == SchemaField("v", FieldType.DATE, nullable=True)

    def test_empty(self) -> None:
        schema = _schema(("id", FieldType.NUMBER, False))

        assert merge_schemas(schema, DataSchema()) == schema
        assert merge_schemas(DataSchema(), schema) == schema
