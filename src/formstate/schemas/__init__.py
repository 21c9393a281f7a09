"""formstate JSON Schema definitions and validation utilities.

Schemas:
    - form_state.schema.json: Serialized form state tree (control/group/array)

Usage:
    from formstate.schemas import validate_form_state

    with open("form.json") as f:
        data = json.load(f)
    validate_form_state(data)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from functools import cache
from importlib.resources import files
from typing import Any

import jsonschema


@cache
def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'form_state.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("formstate.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_form_state_schema() -> dict[str, Any]:
    """Get the form_state.json schema.

    Returns:
        JSON Schema for serialized form state trees
    """
    return _load_schema("form_state.schema.json")


def validate_form_state(data: dict[str, Any]) -> None:
    """Validate serialized form state data against the schema.

    Args:
        data: Form state dictionary

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_form_state_schema())


__all__ = [
    "get_form_state_schema",
    "validate_form_state",
]
