"""
Update functions: pure ``state -> state`` transforms for the update pipeline.

Most builders dispatch a form action addressed to the node they receive, so
they follow the reducers' identity rules: a function that changes nothing
returns the state it was given.
"""

from collections.abc import Callable, Mapping
from typing import Any

from formstate.application.reducer import form_state_reducer
from formstate.domain.actions import (
    FormAction,
    MarkAsDirtyAction,
    MarkAsPristineAction,
    MarkAsTouchedAction,
    MarkAsUntouchedAction,
    SetErrorsAction,
    SetValueAction,
)
from formstate.domain.models import (
    AbstractControlState,
    FormArrayState,
    FormGroupState,
    UpdateFn,
)
from formstate.reducers.array import with_array_controls
from formstate.reducers.group import with_group_controls

Validator = Callable[[Any], Mapping[str, Any]]
ChildUpdateFn = Callable[[AbstractControlState, Any], AbstractControlState]


def _dispatch(action_factory: Callable[[str], FormAction]) -> UpdateFn:
    def update(state: AbstractControlState) -> AbstractControlState:
        return form_state_reducer(state, action_factory(state.id))

    return update


def set_value(value: Any) -> UpdateFn:
    return _dispatch(lambda control_id: SetValueAction(control_id, value))


def set_errors(errors: Mapping[str, Any]) -> UpdateFn:
    return _dispatch(lambda control_id: SetErrorsAction(control_id, errors))


def mark_as_dirty() -> UpdateFn:
    return _dispatch(MarkAsDirtyAction)


def mark_as_pristine() -> UpdateFn:
    return _dispatch(MarkAsPristineAction)


def mark_as_touched() -> UpdateFn:
    return _dispatch(MarkAsTouchedAction)


def mark_as_untouched() -> UpdateFn:
    return _dispatch(MarkAsUntouchedAction)


def validate(*validators: Validator) -> UpdateFn:
    """
    Run validators against the node value and store their merged errors.

    Each validator returns a mapping of error name to error details (empty
    when valid). Later validators win on key clashes. Async errors already
    on the node are kept.
    """

    def update(state: AbstractControlState) -> AbstractControlState:
        errors: dict[str, Any] = {}
        for validator in validators:
            errors.update(validator(state.value))
        return set_errors(errors)(state)

    return update


def update_group(
    *updates: Mapping[str, ChildUpdateFn],
) -> Callable[[FormGroupState], FormGroupState]:
    """
    Update named children of a group.

    Each mapping maps a child name to ``fn(child, parent) -> child``. The
    mappings are applied one after another, so functions in a later mapping
    see the parent as already updated by the earlier ones. Unknown names
    raise KeyError.
    """

    def update(state: FormGroupState) -> FormGroupState:
        for child_updates in updates:
            controls = dict(state.controls)
            for name, child_update in child_updates.items():
                controls[name] = child_update(state.controls[name], state)
            state = with_group_controls(state, controls)
        return state

    return update


def update_array(
    child_update: ChildUpdateFn,
) -> Callable[[FormArrayState], FormArrayState]:
    """Apply ``fn(child, parent) -> child`` to every element of an array."""

    def update(state: FormArrayState) -> FormArrayState:
        return with_array_controls(
            state, [child_update(child, state) for child in state.controls]
        )

    return update

