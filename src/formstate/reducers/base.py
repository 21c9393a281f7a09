"""
Default implementation of the sub-reducer port.

DefaultSubReducers wires the control, group and array reducers together;
composites recurse into their children through ``_reduce_child``.
"""

from formstate.domain.actions import Action
from formstate.domain.interfaces import FormSubReducersInterface
from formstate.domain.models import (
    AbstractControlState,
    FormArrayState,
    FormControlState,
    FormGroupState,
    is_array_state,
    is_group_state,
)
from formstate.reducers.array import reduce_array
from formstate.reducers.control import reduce_control
from formstate.reducers.group import reduce_group


class DefaultSubReducers(FormSubReducersInterface):
    """Sub-reducers for the actions in ``ALL_FORM_ACTION_TYPES``."""

    def reduce_control(
        self, state: FormControlState, action: Action
    ) -> FormControlState:
        return reduce_control(state, action)

    def reduce_group(self, state: FormGroupState, action: Action) -> FormGroupState:
        return reduce_group(state, action, self._reduce_child)

    def reduce_array(self, state: FormArrayState, action: Action) -> FormArrayState:
        return reduce_array(state, action, self._reduce_child)

    def _reduce_child(
        self, child: AbstractControlState, action: Action
    ) -> AbstractControlState:
        if is_group_state(child):
            return self.reduce_group(child, action)  # type: ignore[arg-type]
        if is_array_state(child):
            return self.reduce_array(child, action)  # type: ignore[arg-type]
        return self.reduce_control(child, action)  # type: ignore[arg-type]
