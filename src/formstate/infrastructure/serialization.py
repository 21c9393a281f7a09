"""
JSON-compatible serialization of form state trees.

Each node is written as a dict with a ``kind`` discriminator ("control",
"group" or "array"). Loading validates the data against
``form_state.schema.json`` before any node is built.
"""

from typing import Any

import jsonschema

from formstate.domain.exceptions import InvalidFormStateDataError
from formstate.domain.models import (
    AbstractControlState,
    FormArrayState,
    FormControlState,
    FormGroupState,
)
from formstate.schemas import validate_form_state


def form_state_to_dict(state: AbstractControlState) -> dict[str, Any]:
    """Serialize a form state tree to a JSON-compatible dict."""
    if isinstance(state, FormGroupState):
        return {
            "kind": "group",
            "id": state.id,
            "controls": {
                name: form_state_to_dict(child) for name, child in state.controls.items()
            },
            "errors": dict(state.errors),
            "pending_validations": list(state.pending_validations),
        }
    if isinstance(state, FormArrayState):
        return {
            "kind": "array",
            "id": state.id,
            "controls": [form_state_to_dict(child) for child in state.controls],
            "errors": dict(state.errors),
            "pending_validations": list(state.pending_validations),
        }
    return {
        "kind": "control",
        "id": state.id,
        "value": state.value,
        "errors": dict(state.errors),
        "pending_validations": list(state.pending_validations),
        "is_dirty": state.is_dirty,
        "is_touched": state.is_touched,
        "is_focused": state.is_focused,
    }


def _dict_to_form_state(data: dict[str, Any]) -> AbstractControlState:
    kind = data["kind"]
    errors = dict(data.get("errors", {}))
    pending = tuple(data.get("pending_validations", ()))

    if kind == "group":
        return FormGroupState(
            id=data["id"],
            controls={
                name: _dict_to_form_state(child)
                for name, child in data["controls"].items()
            },
            errors=errors,
            pending_validations=pending,
        )
    if kind == "array":
        return FormArrayState(
            id=data["id"],
            controls=tuple(_dict_to_form_state(child) for child in data["controls"]),
            errors=errors,
            pending_validations=pending,
        )
    return FormControlState(
        id=data["id"],
        value=data["value"],
        errors=errors,
        pending_validations=pending,
        is_dirty=data.get("is_dirty", False),
        is_touched=data.get("is_touched", False),
        is_focused=data.get("is_focused", False),
    )


def form_state_from_dict(data: dict[str, Any]) -> AbstractControlState:
    """
    Rebuild a form state tree from serialized data.

    Raises:
        InvalidFormStateDataError: If ``data`` does not match the schema
    """
    try:
        validate_form_state(data)
    except jsonschema.ValidationError as e:
        raise InvalidFormStateDataError(
            f"invalid form state data: {e.message}", path=list(e.absolute_path)
        ) from e
    return _dict_to_form_state(data)
