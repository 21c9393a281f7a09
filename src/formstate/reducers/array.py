"""Reducer for array states (indexed children)."""

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from formstate.domain.actions import (
    Action,
    FocusAction,
    FormAction,
    SetValueAction,
    UnfocusAction,
)
from formstate.domain.factory import create_form_state
from formstate.domain.models import (
    AbstractControlState,
    FormArrayState,
    child_id,
    is_descendant_id,
)
from formstate.reducers.control import CASCADING_ACTIONS
from formstate.reducers.errors import reduce_errors
from formstate.reducers.group import ChildReducer, set_child_value


def with_array_controls(
    state: FormArrayState, controls: Sequence[AbstractControlState]
) -> FormArrayState:
    """Return ``state`` itself unless ``controls`` differs in length or identity."""
    if len(controls) == len(state.controls) and all(
        new is old for new, old in zip(controls, state.controls)
    ):
        return state
    return replace(state, controls=tuple(controls))


def _set_array_value(
    state: FormArrayState, value: Any, reduce_child: ChildReducer
) -> FormArrayState:
    if not isinstance(value, (list, tuple)):
        raise TypeError(
            f"value of array '{state.id}' must be a list or tuple, "
            f"got {type(value).__name__}"
        )
    controls = []
    for index, item in enumerate(value):
        if index < len(state.controls):
            controls.append(set_child_value(state.controls[index], item, reduce_child))
        else:
            controls.append(create_form_state(child_id(state.id, index), item))
    return with_array_controls(state, controls)


def reduce_array(
    state: FormArrayState, action: Action, reduce_child: ChildReducer
) -> FormArrayState:
    """Advance an array by one action. Routing mirrors ``reduce_group``."""
    if not isinstance(action, FormAction):
        return state

    if is_descendant_id(state.id, action.control_id):
        return with_array_controls(
            state, [reduce_child(child, action) for child in state.controls]
        )

    if action.control_id != state.id:
        return state

    if isinstance(action, SetValueAction):
        return _set_array_value(state, action.value, reduce_child)

    if isinstance(action, CASCADING_ACTIONS):
        return with_array_controls(
            state,
            [
                reduce_child(child, replace(action, control_id=child.id))
                for child in state.controls
            ],
        )

    if isinstance(action, (FocusAction, UnfocusAction)):
        return state

    return reduce_errors(state, action)
