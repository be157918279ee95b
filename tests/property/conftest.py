# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

These strategies are extracted for reuse across property test modules.
They follow FlowForge's data model: pipelines as the editor stores them,
and messy record data as it arrives from upstream nodes.

Strategy Categories:
- Config values (JSON-like, including NaN/Infinity and reserved keys)
- Record data (mixed rows, including non-record junk)
- Schemas (unique field names)
- Pipelines (nodes, edges, timestamps)

Usage:
    from tests.property.conftest import pipelines, record_lists

    @given(pipeline=pipelines())
    def test_round_trip(pipeline: Pipeline) -> None:
        ...
"""

# =============================================================================
# Hypothesis Settings
# =============================================================================
#
# For standardized @settings decorators, import from tests.property.settings:
#   from tests.property.settings import STANDARD_SETTINGS, DETERMINISM_SETTINGS
#
# Tiers: DETERMINISM (500), STATE_MACHINE (200), STANDARD (100), SLOW (50), QUICK (20)
# =============================================================================

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from hypothesis import strategies as st

from flowforge.contracts import (
    DataSchema,
    EdgeID,
    FieldType,
    NodeData,
    NodeID,
    NodeStatus,
    NodeType,
    Pipeline,
    PipelineEdge,
    PipelineNode,
    Position,
    SchemaField,
)
from flowforge.nodes import get_default_node_config

# =============================================================================
# Core Value Strategies
# =============================================================================

# Every float, including NaN and both infinities
any_floats = st.floats(allow_nan=True, allow_infinity=True)

# Coordinates as the canvas produces them (ints and floats)
coordinates = st.one_of(st.integers(min_value=-(10**6), max_value=10**6), any_floats)

non_finite_floats = st.sampled_from([float("nan"), float("inf"), float("-inf")])

config_primitives = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**63), max_value=2**63),
    any_floats,
    st.text(max_size=20),
)

# Keys include the envelope's reserved names so escaping is exercised
config_keys = st.one_of(st.sampled_from(["__type", "value", "url", "field"]), st.text(max_size=10))

config_values: st.SearchStrategy[Any] = st.recursive(
    config_primitives,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(config_keys, children, max_size=4),
    ),
    max_leaves=12,
)

# Values that look like envelopes but are user data
envelope_lookalikes = st.one_of(
    st.sampled_from([{"__type": "NaN"}, {"__type": "Infinity"}, {"__type": "-Infinity"}]),
    st.builds(lambda v: {"__type": "Date", "value": v}, st.text(max_size=10)),
    st.builds(lambda v: {"__type": "Object", "value": v}, st.dictionaries(st.text(max_size=5), st.integers(), max_size=2)),
)


# =============================================================================
# Record Data Strategies
# =============================================================================

# Small key pool so fields overlap between rows
field_names = st.one_of(st.sampled_from(["id", "name", "email", "score", "tags", "meta", "at"]), st.text(min_size=1, max_size=6))

record_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    any_floats,
    st.text(max_size=12),
    st.datetimes(min_value=datetime(1900, 1, 1), max_value=datetime(2100, 12, 31)).map(
        lambda d: d.strftime("%Y-%m-%dT%H:%M:%S") + "Z"
    ),
    st.lists(st.integers(), max_size=3),
    st.dictionaries(st.text(max_size=4), st.integers(), max_size=2),
)

records = st.dictionaries(field_names, record_values, max_size=6)

# Rows that are not records at all
junk_rows = st.one_of(st.none(), st.integers(), st.text(max_size=5), st.lists(st.integers(), max_size=3))

record_lists = st.lists(st.one_of(records, records, junk_rows), max_size=25)


# =============================================================================
# Schema Strategies
# =============================================================================

schema_fields = st.builds(SchemaField, name=field_names, type=st.sampled_from(FieldType), nullable=st.booleans())

schemas = st.lists(schema_fields, max_size=8, unique_by=lambda f: f.name).map(lambda fields: DataSchema(fields=tuple(fields)))


# =============================================================================
# Pipeline Strategies
# =============================================================================

identifiers = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-", min_size=1, max_size=12)

timestamps = st.one_of(
    st.datetimes(min_value=datetime(1970, 1, 1), max_value=datetime(2100, 1, 1), timezones=st.just(UTC)),
    st.datetimes(min_value=datetime(1970, 1, 1), max_value=datetime(2100, 1, 1)),
)


@st.composite
def pipeline_nodes(draw: st.DrawFn, node_id: str) -> PipelineNode:
    node_type = draw(st.sampled_from(NodeType))
    config = get_default_node_config(node_type)
    config.update(draw(st.dictionaries(config_keys, st.one_of(config_values, envelope_lookalikes), max_size=3)))
    return PipelineNode(
        id=NodeID(node_id),
        type=node_type,
        position=Position(x=draw(coordinates), y=draw(coordinates)),
        data=NodeData(
            label=draw(st.text(max_size=15)),
            category=node_type.category,
            description=draw(st.none() | st.text(max_size=20)),
            color=draw(st.none() | st.sampled_from(["#ff0000", "blue"])),
        ),
        config=config,
        status=draw(st.sampled_from(NodeStatus)),
    )


@st.composite
def pipelines(draw: st.DrawFn, max_nodes: int = 6, min_nodes: int = 0) -> Pipeline:
    node_ids = draw(st.lists(identifiers, min_size=min_nodes, max_size=max_nodes, unique=True))
    nodes = [draw(pipeline_nodes(node_id)) for node_id in node_ids]

    edges: list[PipelineEdge] = []
    if len(node_ids) >= 2:
        pairs = draw(st.lists(st.tuples(st.sampled_from(node_ids), st.sampled_from(node_ids)), max_size=max_nodes))
        for index, (source, target) in enumerate(pairs):
            edges.append(
                PipelineEdge(
                    id=EdgeID(f"e{index}"),
                    source=NodeID(source),
                    target=NodeID(target),
                    source_handle=draw(st.none() | st.just("out")),
                    target_handle=draw(st.none() | st.just("in")),
                    animated=draw(st.none() | st.booleans()),
                )
            )

    return Pipeline(
        id=draw(identifiers),
        name=draw(st.text(max_size=30)),
        description=draw(st.none() | st.text(max_size=30)),
        nodes=nodes,
        edges=edges,
        created_by=draw(st.text(max_size=20)),
        created_at=draw(timestamps),
        updated_at=draw(timestamps),
        version=draw(st.integers(min_value=0, max_value=10_000)),
    )
