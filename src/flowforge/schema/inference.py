# src/flowforge/schema/inference.py
"""Schema inference over untyped record data.

Runs whenever new data reaches a node, to show a live preview. Upstream
data is live and possibly messy, so every function here is total: rows
that are not records are skipped (or reported), never raised on.

Type inference is a counting pass plus a stable-order reduction:
each appearance of a key casts one vote for the type of its value, and the
type with the most votes wins, ties going to the type seen first.

Note: null values vote for STRING. In sparse datasets this can pull a
field's type towards STRING.

numpy and pandas are imported LAZILY inside the functions that need
their value types, so importing this module stays cheap.
"""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from numbers import Real
from typing import Any

from flowforge.contracts import DataPreview, DataSchema, FieldType, SchemaField

DEFAULT_MAX_SAMPLE_SIZE = 100

# Strict ISO-8601 timestamp: 2023-06-15T12:30:45[.123][Z]
_ISO_TIMESTAMP = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?Z?", re.ASCII)
_MAX_TIMESTAMP_LENGTH = 24
# 24:00:00 is accepted as the end of the day, i.e. midnight of the next one
_END_OF_DAY = re.compile(r"(\d{4}-\d{2}-\d{2})T24:00:00(\.000)?Z?", re.ASCII)
_MIN_DATE_YEAR = 1900
_MAX_DATE_YEAR = 2100


def _is_null(value: Any) -> bool:
    """None and the pandas missing-value sentinels."""
    if value is None:
        return True
    import pandas as pd

    return value is pd.NA or value is pd.NaT


def _parse_timestamp(value: str) -> datetime:
    end_of_day = _END_OF_DAY.fullmatch(value)
    if end_of_day:
        next_day = date.fromisoformat(end_of_day.group(1)) + timedelta(days=1)
        return datetime.combine(next_day, time())
    return datetime.fromisoformat(value)


def _is_timestamp_string(value: str) -> bool:
    if len(value) > _MAX_TIMESTAMP_LENGTH or not _ISO_TIMESTAMP.fullmatch(value):
        return False
    try:
        parsed = _parse_timestamp(value)
    except (ValueError, OverflowError):
        # Matches the pattern but is not a calendar date (month 13, Feb 30...)
        return False
    return _MIN_DATE_YEAR <= parsed.year <= _MAX_DATE_YEAR


def detect_field_type(value: Any) -> FieldType:
    """Classify a single value.

    Deterministic: the same value always yields the same type.

    Args:
        value: Any value found in a record

    Returns:
        FieldType of the value; STRING for nulls and unrecognized objects
    """
    import numpy as np

    if _is_null(value):
        return FieldType.STRING

    # bool before numbers: bool is an int subclass
    if isinstance(value, bool | np.bool_):
        return FieldType.BOOLEAN

    if isinstance(value, Real | Decimal | np.number):
        return FieldType.NUMBER

    if isinstance(value, str):
        return FieldType.DATE if _is_timestamp_string(value) else FieldType.STRING

    # pd.Timestamp is a datetime subclass
    if isinstance(value, datetime | date | np.datetime64):
        return FieldType.DATE

    if isinstance(value, list | tuple | set | frozenset | np.ndarray):
        return FieldType.ARRAY

    if isinstance(value, Mapping):
        return FieldType.OBJECT

    return FieldType.STRING


def _is_frame(records: Any) -> bool:
    import pandas as pd

    return isinstance(records, pd.DataFrame)


def _frame_records(frame: Any) -> list[dict[str, Any]]:
    """Rows of a DataFrame as dicts, with missing cells as None."""
    rows: list[dict[str, Any]] = frame.to_dict(orient="records")
    return [{key: (None if _is_missing_cell(value) else value) for key, value in row.items()} for row in rows]


def _is_missing_cell(value: Any) -> bool:
    if _is_null(value):
        return True
    return isinstance(value, float) and math.isnan(value)


def _as_rows(records: Iterable[Any] | None) -> list[Any]:
    if records is None:
        return []
    if _is_frame(records):
        return _frame_records(records)
    return list(records)


def generate_schema(records: Iterable[Any]) -> DataSchema:
    """Infer a schema from a dataset.

    Only mapping rows contribute; null, primitive and list rows are
    skipped. Only string keys become fields.

    Args:
        records: Sequence of rows, or a pandas DataFrame

    Returns:
        DataSchema with fields in first-discovery order. A field is
        nullable only if some row holds an explicit null for it - rows
        that omit the key do not count.
    """
    votes: dict[str, Counter[FieldType]] = {}
    nullable: set[str] = set()

    for row in _as_rows(records):
        if not isinstance(row, Mapping):
            continue
        for key, value in row.items():
            if not isinstance(key, str):
                continue
            # Counter keeps first-seen order, most_common() breaks ties by it
            votes.setdefault(key, Counter())[detect_field_type(value)] += 1
            if _is_null(value):
                nullable.add(key)

    return DataSchema(
        fields=tuple(
            SchemaField(name=name, type=tally.most_common(1)[0][0], nullable=name in nullable)
            for name, tally in votes.items()
        )
    )


def create_data_preview(
    records: Iterable[Any],
    max_sample_size: int = DEFAULT_MAX_SAMPLE_SIZE,
    errors: list[str] | None = None,
) -> DataPreview:
    """Build a fresh preview of the data reaching a node.

    Args:
        records: Full dataset (sequence of rows or a pandas DataFrame)
        max_sample_size: Maximum number of rows kept in the sample
        errors: Problems reported while producing the data

    Returns:
        DataPreview whose schema covers the full dataset, not just the sample

    Raises:
        ValueError: If max_sample_size is negative
    """
    if max_sample_size < 0:
        raise ValueError(f"max_sample_size must be non-negative, got {max_sample_size}")

    rows = _as_rows(records)
    return DataPreview(
        sample=rows[:max_sample_size],
        total_rows=len(rows),
        schema=generate_schema(rows),
        errors=list(errors) if errors is not None else None,
    )


def _kind_name(value: Any) -> str:
    """Name a non-record row in the schema vocabulary.

    Strings stay "string" even when they look like timestamps; anything
    without a more specific kind is an "object".
    """
    if _is_null(value):
        return "null"
    if isinstance(value, str):
        return FieldType.STRING.value
    kind = detect_field_type(value)
    if kind in (FieldType.NUMBER, FieldType.BOOLEAN, FieldType.ARRAY):
        return kind.value
    return FieldType.OBJECT.value


def validate_data_against_schema(records: Iterable[Any], schema: DataSchema) -> list[str]:
    """Check every row against a schema.

    Never raises; returns every problem found.

    Args:
        records: Rows to check (sequence or pandas DataFrame)
        schema: Schema the rows should conform to

    Returns:
        Error messages, empty if all rows conform
    """
    errors: list[str] = []

    for index, row in enumerate(_as_rows(records)):
        if not isinstance(row, Mapping):
            errors.append(f"Row {index}: Expected object, got {_kind_name(row)}")
            continue

        for schema_field in schema.fields:
            value = row.get(schema_field.name)

            if _is_null(value):
                if not schema_field.nullable:
                    errors.append(f"Row {index}, Field '{schema_field.name}': Cannot be null")
                continue

            actual = detect_field_type(value)
            if actual != schema_field.type:
                errors.append(f"Row {index}, Field '{schema_field.name}': Expected {schema_field.type}, got {actual}")

    return errors
