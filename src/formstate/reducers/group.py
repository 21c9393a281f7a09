"""Reducer for group states (named children)."""

from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from formstate.domain.actions import (
    Action,
    FocusAction,
    FormAction,
    SetValueAction,
    UnfocusAction,
)
from formstate.domain.factory import create_form_state, form_state_type_for
from formstate.domain.models import (
    AbstractControlState,
    FormGroupState,
    child_id,
    is_descendant_id,
)
from formstate.reducers.control import CASCADING_ACTIONS
from formstate.reducers.errors import reduce_errors

ChildReducer = Callable[[AbstractControlState, Action], AbstractControlState]


def set_child_value(
    existing: AbstractControlState, value: Any, reduce_child: ChildReducer
) -> AbstractControlState:
    """
    Set ``value`` on an existing child of a group or array.

    A child whose variant no longer matches the shape of ``value`` is
    replaced by a fresh node, exactly as ``create_form_state`` would build
    it; otherwise the child reduces a ``SetValueAction`` of its own.
    """
    if type(existing) is not form_state_type_for(value):
        return create_form_state(existing.id, value)
    return reduce_child(existing, SetValueAction(existing.id, value))


def with_group_controls(
    state: FormGroupState, controls: dict[str, AbstractControlState]
) -> FormGroupState:
    """Return ``state`` itself unless ``controls`` differs in keys or identity."""
    if controls.keys() == state.controls.keys() and all(
        controls[name] is state.controls[name] for name in controls
    ):
        return state
    return replace(state, controls=controls)


def _set_group_value(
    state: FormGroupState, value: Any, reduce_child: ChildReducer
) -> FormGroupState:
    if not isinstance(value, Mapping):
        raise TypeError(
            f"value of group '{state.id}' must be a mapping, got {type(value).__name__}"
        )
    controls: dict[str, AbstractControlState] = {}
    for name, child_value in value.items():
        existing = state.controls.get(name)
        if existing is None:
            controls[name] = create_form_state(child_id(state.id, name), child_value)
        else:
            controls[name] = set_child_value(existing, child_value, reduce_child)
    return with_group_controls(state, controls)


def reduce_group(
    state: FormGroupState, action: Action, reduce_child: ChildReducer
) -> FormGroupState:
    """
    Advance a group by one action.

    Actions addressed to a descendant are forwarded to every child; the
    group is rebuilt only if some child came back as a new object.
    Actions addressed to the group itself either cascade (dirty/touched
    flags), rebuild the children (set value), or update its own errors.
    """
    if not isinstance(action, FormAction):
        return state

    if is_descendant_id(state.id, action.control_id):
        controls = {
            name: reduce_child(child, action) for name, child in state.controls.items()
        }
        return with_group_controls(state, controls)

    if action.control_id != state.id:
        return state

    if isinstance(action, SetValueAction):
        return _set_group_value(state, action.value, reduce_child)

    if isinstance(action, CASCADING_ACTIONS):
        controls = {
            name: reduce_child(child, replace(action, control_id=child.id))
            for name, child in state.controls.items()
        }
        return with_group_controls(state, controls)

    if isinstance(action, (FocusAction, UnfocusAction)):
        return state

    return reduce_errors(state, action)
