"""Schema helpers for the picker options supplied by the caller."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_MAX_SELECTION, DEFAULT_REQUEST_TYPE

PICKER_OPTIONS_SCHEMA: dict[str, Any] = {
    "$id": "fastpicker/options.schema.json",
    "type": "object",
    "required": ["max_selection", "selected_asset_ids", "request_type"],
    "properties": {
        "max_selection": {"type": "integer", "minimum": 1},
        "selected_asset_ids": {
            "type": "array",
            "items": {"type": "string"},
        },
        "request_type": {
            "type": "string",
            "enum": ["image", "video", "all"],
        },
        "transition_duration_ms": {"type": "integer", "minimum": 0},
        "transition_reverse_duration_ms": {"type": "integer", "minimum": 0},
    },
    "additionalProperties": False,
}

DEFAULT_OPTIONS: dict[str, Any] = {
    "max_selection": DEFAULT_MAX_SELECTION,
    "selected_asset_ids": [],
    "request_type": DEFAULT_REQUEST_TYPE,
}

_validator = Draft202012Validator(PICKER_OPTIONS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_OPTIONS` and validate the result."""

    merged = deepcopy(DEFAULT_OPTIONS)
    if data:
        for key, value in data.items():
            if key == "selected_asset_ids" and isinstance(value, (list, tuple)):
                merged[key] = [str(entry) for entry in value]
                continue
            if key == "request_type" and hasattr(value, "value"):
                merged[key] = value.value
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_options(data: dict[str, Any]) -> None:
    """Validate *data* against the options schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_OPTIONS", "PICKER_OPTIONS_SCHEMA", "merge_with_defaults", "validate_options"]
