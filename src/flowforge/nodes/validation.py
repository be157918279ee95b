# src/flowforge/nodes/validation.py
"""Node configuration validation.

Validates user-edited node configuration BEFORE the editor accepts it,
returning every problem at once instead of raising.

Design:
- Errors come from per-type required-field rules; only they decide validity
- Rules look only at keys present in the config; model defaults never
  satisfy a required field
- Warnings come from checking the config against the type's typed model
  (wrong value types, unknown enum values); they never block a config
- Node types without rules always validate (no errors)
- Pure: no side effects, same input gives the same result

Usage:
    result = validate_node_config(NodeType.LIMIT, {"count": 0})
    result.is_valid   # False
    result.errors     # ["Count must be greater than 0"]
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from typing import Any

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from flowforge.contracts import NodeType, ValidationResult
from flowforge.nodes.config_base import NodeConfigModel
from flowforge.nodes.configs import (
    ApiFetchConfig,
    ExportConfig,
    FilterConfig,
    JoinConfig,
    LimitConfig,
    SortConfig,
)
from flowforge.nodes.registry import get_node_definition

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _is_blank(value: Any) -> bool:
    """Missing or empty string. 0 and False are real values, not blanks."""
    return value is None or value == ""


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and not math.isnan(value)


def _is_valid_url(value: Any) -> bool:
    """True for absolute URLs (scheme required), like a browser's URL parser."""
    if not isinstance(value, str):
        return False
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def _parse_config(model_cls: type[NodeConfigModel], config: Mapping[str, Any]) -> tuple[NodeConfigModel, list[str]]:
    """Build a typed view of the config and collect shape warnings.

    When the config does not fit the model, the view is built without
    validation so the rule checks still see the raw values.
    """
    # Wire configs only ever have string keys
    raw = {key: value for key, value in config.items() if isinstance(key, str)}
    try:
        return model_cls.model_validate(raw), []
    except PydanticValidationError as e:
        warnings = [_format_error(error) for error in e.errors()]
        return model_cls.model_construct(**_modelled_values(model_cls, raw)), warnings


def _modelled_values(model_cls: type[NodeConfigModel], raw: Mapping[str, Any]) -> dict[str, Any]:
    """Raw values of the model's own fields, keyed by attribute name."""
    names: dict[str, str] = {}
    for name, info in model_cls.model_fields.items():
        names[name] = name
        if info.alias is not None:
            names[info.alias] = name
    return {names[key]: value for key, value in raw.items() if key in names}


def _format_error(error: Any) -> str:
    field = ".".join(str(loc) for loc in error["loc"])
    return f"{field}: {error['msg']}" if field else error["msg"]


def _provided(config: NodeConfigModel, name: str) -> Any:
    """Value the user actually set; model defaults do not count."""
    if name not in config.model_fields_set:
        return None
    return getattr(config, name)


def _rule_errors(config: NodeConfigModel) -> list[str]:
    """Required-field rules per config variant.

    Raw (unvalidated) values can reach here, so every check tolerates
    arbitrary types.
    """
    errors: list[str] = []

    match config:
        case ApiFetchConfig():
            url = _provided(config, "url")
            if _is_blank(url):
                errors.append("URL is required")
            elif not _is_valid_url(url):
                errors.append("Invalid URL format")

        case FilterConfig():
            if _is_blank(_provided(config, "field")):
                errors.append("Field is required")
            if _is_blank(_provided(config, "condition")) and _is_blank(_provided(config, "value")):
                errors.append("Either condition or value is required")

        case JoinConfig():
            if _is_blank(_provided(config, "left_key")):
                errors.append("Left key is required")
            if _is_blank(_provided(config, "right_key")):
                errors.append("Right key is required")

        case SortConfig():
            if _is_blank(_provided(config, "field")):
                errors.append("Field is required")

        case LimitConfig():
            count = _provided(config, "count")
            offset = _provided(config, "offset")
            if not _is_number(count) or count <= 0:
                errors.append("Count must be greater than 0")
            if _is_number(offset) and offset < 0:
                errors.append("Offset must be non-negative")

        case ExportConfig():
            if _is_blank(_provided(config, "format")):
                errors.append("Format is required")

        case _:
            pass

    return errors


def validate_node_config(node_type: NodeType | str, config: Mapping[str, Any]) -> ValidationResult:
    """Validate a node configuration against its type's contract.

    All applicable checks run and accumulate.

    Args:
        node_type: Registered node type (enum member or wire string)
        config: Node configuration in wire form

    Returns:
        ValidationResult; is_valid is True when there are no errors

    Raises:
        UnknownNodeTypeError: If node_type is not registered
    """
    definition = get_node_definition(node_type)

    if not isinstance(config, Mapping):
        return ValidationResult.from_messages(["Configuration must be an object"])

    typed_config, warnings = _parse_config(definition.config_model, config)
    return ValidationResult.from_messages(_rule_errors(typed_config), warnings)
