# src/flowforge/contracts/results.py
"""Structured results returned (never raised) by validators and checkers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ValidationResult:
    """Outcome of a configuration or position check.

    All applicable checks run; problems accumulate rather than stopping at
    the first failure.

    Attributes:
        is_valid: True when errors is empty
        errors: Problems that make the input unusable
        warnings: Problems worth showing that do not block the input
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def from_messages(cls, errors: list[str], warnings: list[str] | None = None) -> ValidationResult:
        """Build a result whose validity follows from the error list."""
        return cls(is_valid=not errors, errors=errors, warnings=warnings if warnings is not None else [])

    def to_dict(self) -> dict[str, Any]:
        return {"isValid": self.is_valid, "errors": list(self.errors), "warnings": list(self.warnings)}


@dataclass
class CompatibilityResult:
    """Result of a schema compatibility check."""

    compatible: bool
    issues: list[str] = field(default_factory=list)

    @property
    def error_message(self) -> str | None:
        """Human-readable error message if incompatible."""
        if self.compatible:
            return None
        return "; ".join(self.issues)

    def to_dict(self) -> dict[str, Any]:
        return {"compatible": self.compatible, "issues": list(self.issues)}
