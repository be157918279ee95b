# tests/conftest.py
"""Shared test fixtures and helpers.

Pipeline builders:
- make_pipeline(): a small, fully populated pipeline (source -> filter -> export)
- pipeline fixture: the same, ready to use

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

from flowforge import NodeType, Pipeline, PipelineEdge, Position, create_node
from flowforge.contracts import EdgeID

CREATED_AT = datetime(2024, 1, 15, 9, 30, 0, tzinfo=UTC)
UPDATED_AT = datetime(2024, 1, 16, 17, 45, 12, 250000, tzinfo=UTC)


def make_pipeline(**overrides: object) -> Pipeline:
    """Build a three-node pipeline with one edge per hop."""
    source = create_node(NodeType.API_FETCH, Position(x=0, y=0))
    source.config["url"] = "https://api.example.com/users"
    flt = create_node(NodeType.FILTER, Position(x=250.5, y=40))
    flt.config.update({"field": "age", "operator": "greater_than", "value": 18})
    sink = create_node(NodeType.EXPORT, {"x": 500, "y": 0})

    fields: dict[str, object] = {
        "id": "pipeline-001",
        "name": "Adult users",
        "description": "Fetch users and keep adults",
        "nodes": [source, flt, sink],
        "edges": [
            PipelineEdge(id=EdgeID("e1"), source=source.id, target=flt.id, source_handle="out", target_handle="in"),
            PipelineEdge(id=EdgeID("e2"), source=flt.id, target=sink.id, animated=True, style={"stroke": "#888"}),
        ],
        "created_by": "analyst@example.com",
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
        "version": 3,
    }
    fields.update(overrides)
    return Pipeline(**fields)  # type: ignore[arg-type]


@pytest.fixture
def pipeline() -> Pipeline:
    return make_pipeline()


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Restore structlog and root logger state after tests that reconfigure logging."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    structlog.reset_defaults()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
