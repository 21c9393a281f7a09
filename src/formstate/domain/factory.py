"""Constructors for fresh (pristine, untouched, valid) form state trees."""

from collections.abc import Mapping, Sequence
from typing import Any

from formstate.domain.models import (
    AbstractControlState,
    FormArrayState,
    FormControlState,
    FormGroupState,
    child_id,
)


def create_form_control_state(id: str, value: Any) -> FormControlState:
    return FormControlState(id=id, value=value)


def create_form_group_state(id: str, value: Mapping[str, Any]) -> FormGroupState:
    """Build a group whose children mirror the keys of ``value``."""
    controls = {
        name: create_form_state(child_id(id, name), child_value)
        for name, child_value in value.items()
    }
    return FormGroupState(id=id, controls=controls)


def create_form_array_state(id: str, value: Sequence[Any]) -> FormArrayState:
    controls = tuple(
        create_form_state(child_id(id, index), item) for index, item in enumerate(value)
    )
    return FormArrayState(id=id, controls=controls)


def form_state_type_for(value: Any) -> type[AbstractControlState]:
    """Node class ``create_form_state`` builds for ``value``."""
    if isinstance(value, Mapping):
        return FormGroupState
    if isinstance(value, (list, tuple)):
        return FormArrayState
    return FormControlState


def create_form_state(id: str, value: Any) -> AbstractControlState:
    """
    Build the node matching the shape of ``value``.

    Mappings become groups, lists and tuples become arrays, and everything
    else (strings included) becomes a control.
    """
    node_type = form_state_type_for(value)
    if node_type is FormGroupState:
        return create_form_group_state(id, value)
    if node_type is FormArrayState:
        return create_form_array_state(id, value)
    return create_form_control_state(id, value)
