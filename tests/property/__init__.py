# tests/property/__init__.py
"""Property-based tests for FlowForge.

Property-based testing checks invariants that must hold for ALL inputs,
not just the examples we think of: node creation for every type and
position, schema inference over arbitrary record sets, compatibility
reflexivity and the serialization round trip.
"""
