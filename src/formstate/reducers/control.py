"""Reducer for leaf (control) states."""

from dataclasses import replace

from formstate.domain.actions import (
    Action,
    FocusAction,
    FormAction,
    MarkAsDirtyAction,
    MarkAsPristineAction,
    MarkAsTouchedAction,
    MarkAsUntouchedAction,
    SetValueAction,
    UnfocusAction,
)
from formstate.domain.models import FormControlState
from formstate.reducers.errors import reduce_errors, same_value

# action class -> (flag name, flag value)
_FLAG_ACTIONS: dict[type[FormAction], tuple[str, bool]] = {
    MarkAsDirtyAction: ("is_dirty", True),
    MarkAsPristineAction: ("is_dirty", False),
    MarkAsTouchedAction: ("is_touched", True),
    MarkAsUntouchedAction: ("is_touched", False),
    FocusAction: ("is_focused", True),
    UnfocusAction: ("is_focused", False),
}

# Flag actions that composites forward to every descendant
CASCADING_ACTIONS: tuple[type[FormAction], ...] = (
    MarkAsDirtyAction,
    MarkAsPristineAction,
    MarkAsTouchedAction,
    MarkAsUntouchedAction,
)


def reduce_control(state: FormControlState, action: Action) -> FormControlState:
    """
    Advance a control by one action.

    Only form actions whose ``control_id`` equals the control's id apply;
    everything else returns ``state`` itself.
    """
    if not isinstance(action, FormAction) or action.control_id != state.id:
        return state

    if isinstance(action, SetValueAction):
        if same_value(state.value, action.value):
            return state
        return replace(state, value=action.value)

    flag = _FLAG_ACTIONS.get(type(action))
    if flag is not None:
        name, wanted = flag
        if getattr(state, name) == wanted:
            return state
        return replace(state, **{name: wanted})

    return reduce_errors(state, action)
