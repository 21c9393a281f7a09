"""
Application layer: reduction, update composition and state integration.
"""

from formstate.application.integration import (
    FormStateReducerFragment,
    on_form_states,
    wrap_reducer_with_form_state_update,
)
from formstate.application.reducer import (
    FormStateReducer,
    FormStateUpdatePipeline,
    create_form_state_reducer_with_update,
    form_state_reducer,
)
from formstate.application.update_functions import (
    mark_as_dirty,
    mark_as_pristine,
    mark_as_touched,
    mark_as_untouched,
    set_errors,
    set_value,
    update_array,
    update_group,
    validate,
)

__all__ = [
    "FormStateReducer",
    "FormStateUpdatePipeline",
    "FormStateReducerFragment",
    "create_form_state_reducer_with_update",
    "form_state_reducer",
    "on_form_states",
    "wrap_reducer_with_form_state_update",
    # Update functions
    "mark_as_dirty",
    "mark_as_pristine",
    "mark_as_touched",
    "mark_as_untouched",
    "set_errors",
    "set_value",
    "update_array",
    "update_group",
    "validate",
]
