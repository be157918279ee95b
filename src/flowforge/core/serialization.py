# src/flowforge/core/serialization.py
"""Lossless JSON serialization of pipeline documents.

The serialized text is the only durable artifact this package defines, so
decode(encode(p)) must reproduce p exactly, including values plain JSON
cannot carry.

The problem: JSON has no NaN, no Infinity and no datetime, yet node
positions and configuration values can hold all three.
The solution: a pre-encode pass replaces them with tagged envelopes and a
post-decode pass restores them. The domain types never see the envelopes.

Envelopes:
    {"__type": "NaN"}, {"__type": "Infinity"}, {"__type": "-Infinity"}
    {"__type": "Date", "value": "<ISO-8601>"}     nested datetimes
    {"__type": "Object", "value": {...}}          user dict that itself has "__type"

The NaN/Infinity envelopes are the ones the browser editor writes, so its
documents load unchanged. The top-level createdAt/updatedAt are plain
ISO-8601 strings (a trailing "Z" is accepted on load).

Escaping user dicts that contain the reserved key prevents them from being
mistaken for envelopes on load.

While a document is encoded or decoded its id is bound as pipeline_id in
the structlog context, so every event emitted meanwhile carries it.
"""

from __future__ import annotations

import json
import math
from datetime import UTC, datetime, timedelta
from typing import Any

import structlog
from structlog.contextvars import bound_contextvars

from flowforge.contracts import Pipeline, PipelineEdge, PipelineNode, SerializationError

logger = structlog.get_logger(__name__)

DEFAULT_TIMESTAMP_TOLERANCE = timedelta(seconds=1)

_TYPE_KEY = "__type"
_VALUE_KEY = "value"

_NON_FINITE: dict[str, float] = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "-Infinity": -math.inf,
}


def _encode_value(obj: Any) -> Any:
    """Recursively replace non-JSON values with envelopes.

    Args:
        obj: Data structure to process

    Returns:
        Structure containing only JSON-native values
    """
    if isinstance(obj, float):
        if math.isnan(obj):
            return {_TYPE_KEY: "NaN"}
        if math.isinf(obj):
            return {_TYPE_KEY: "Infinity" if obj > 0 else "-Infinity"}
        return obj
    if isinstance(obj, datetime):
        return {_TYPE_KEY: "Date", _VALUE_KEY: obj.isoformat()}
    if isinstance(obj, dict):
        encoded = {k: _encode_value(v) for k, v in obj.items()}
        if _TYPE_KEY in encoded:
            return {_TYPE_KEY: "Object", _VALUE_KEY: encoded}
        return encoded
    if isinstance(obj, list | tuple):
        return [_encode_value(v) for v in obj]
    return obj


def _decode_value(obj: Any) -> Any:
    """Recursively restore enveloped values.

    Raises:
        ValueError: If a Date envelope holds an unparsable timestamp
    """
    if isinstance(obj, dict):
        if _TYPE_KEY in obj:
            tag = obj[_TYPE_KEY]
            if len(obj) == 1 and tag in _NON_FINITE:
                return _NON_FINITE[tag]
            if len(obj) == 2 and _VALUE_KEY in obj:
                value = obj[_VALUE_KEY]
                if tag == "Date" and isinstance(value, str):
                    return datetime.fromisoformat(value)
                if tag == "Object" and isinstance(value, dict):
                    return {k: _decode_value(v) for k, v in value.items()}
        return {k: _decode_value(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_decode_value(v) for v in obj]
    return obj


def serialize_pipeline(pipeline: Pipeline) -> str:
    """Serialize a pipeline to JSON text.

    Node and edge order is preserved.

    Args:
        pipeline: Pipeline to serialize

    Returns:
        JSON text

    Raises:
        TypeError: If a node configuration or preview holds a value JSON
            cannot represent (sets, arbitrary objects, ...)
    """
    payload = pipeline.to_dict()
    payload["createdAt"] = pipeline.created_at.isoformat()
    payload["updatedAt"] = pipeline.updated_at.isoformat()

    with bound_contextvars(pipeline_id=pipeline.id):
        text = json.dumps(_encode_value(payload), allow_nan=False)
        logger.debug(
            "pipeline_serialized",
            node_count=len(pipeline.nodes),
            edge_count=len(pipeline.edges),
        )
    return text


def deserialize_pipeline(text: str | bytes) -> Pipeline:
    """Rebuild a pipeline from JSON text.

    Args:
        text: Output of serialize_pipeline() (or a document from the editor)

    Returns:
        The reconstructed Pipeline

    Raises:
        SerializationError: If the text is not valid JSON or does not
            describe a complete pipeline. Never returns a partial graph.
    """
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SerializationError(f"Malformed pipeline JSON: {e}") from e

    if not isinstance(raw, dict):
        raise SerializationError(f"Serialized pipeline must be a JSON object, got {type(raw).__name__}")

    with bound_contextvars(pipeline_id=raw.get("id")):
        try:
            pipeline = Pipeline.from_dict(_decode_value(raw))
        except KeyError as e:
            raise SerializationError(f"Malformed pipeline: missing key {e}") from e
        except (TypeError, ValueError, AttributeError) as e:
            raise SerializationError(f"Malformed pipeline: {e}") from e

        logger.debug(
            "pipeline_deserialized",
            node_count=len(pipeline.nodes),
            edge_count=len(pipeline.edges),
        )
    return pipeline


# =============================================================================
# Semantic equality
# =============================================================================


def _as_utc(value: datetime) -> datetime:
    """Naive timestamps are assumed UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _timestamps_close(a: datetime, b: datetime, tolerance: timedelta) -> bool:
    return abs(_as_utc(a) - _as_utc(b)) <= tolerance


def _floats_equal(a: Any, b: Any) -> bool:
    """Equality where NaN equals NaN."""
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    return bool(a == b)


def _deep_equal(a: Any, b: Any) -> bool:
    """Structural equality with NaN == NaN; list and tuple are interchangeable."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(_deep_equal(a[k], b[k]) for k in a)
    if isinstance(a, list | tuple) and isinstance(b, list | tuple):
        return len(a) == len(b) and all(_deep_equal(x, y) for x, y in zip(a, b, strict=True))
    if isinstance(a, dict | list | tuple) or isinstance(b, dict | list | tuple):
        return False
    return _floats_equal(a, b)


def _nodes_equal(a: PipelineNode, b: PipelineNode) -> bool:
    return (
        a.id == b.id
        and a.type == b.type
        and a.status == b.status
        and _floats_equal(a.position.x, b.position.x)
        and _floats_equal(a.position.y, b.position.y)
        and _deep_equal(a.data.to_dict(), b.data.to_dict())
        and _deep_equal(a.config, b.config)
    )


def _edges_equal(a: PipelineEdge, b: PipelineEdge) -> bool:
    # animated and style are presentation only
    return (
        a.id == b.id
        and a.source == b.source
        and a.target == b.target
        and a.source_handle == b.source_handle
        and a.target_handle == b.target_handle
    )


def pipelines_equal(a: Pipeline, b: Pipeline, *, tolerance: timedelta = DEFAULT_TIMESTAMP_TOLERANCE) -> bool:
    """Semantic equality of two pipelines.

    Compares:
    - id, name and version exactly
    - createdAt/updatedAt within tolerance (absorbs timestamp precision loss)
    - nodes and edges element-wise in sequence order (not as sets)

    Node positions treat NaN as equal to NaN; node data and config are
    compared deeply. Edges compare id, endpoints and handles only.

    Args:
        a: First pipeline
        b: Second pipeline
        tolerance: Maximum allowed timestamp difference

    Returns:
        True if the pipelines are equivalent
    """
    if a.id != b.id or a.name != b.name or a.version != b.version:
        return False

    if not _timestamps_close(a.created_at, b.created_at, tolerance):
        return False
    if not _timestamps_close(a.updated_at, b.updated_at, tolerance):
        return False

    if len(a.nodes) != len(b.nodes) or len(a.edges) != len(b.edges):
        return False

    return all(_nodes_equal(x, y) for x, y in zip(a.nodes, b.nodes, strict=True)) and all(
        _edges_equal(x, y) for x, y in zip(a.edges, b.edges, strict=True)
    )
