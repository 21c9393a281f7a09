"""
formstate: immutable reduction and update composition for form state trees.

A form state is a tree of controls (leaves), groups (named children) and
arrays (indexed children). Actions are reduced into a tree by
``form_state_reducer``; an action that does not apply returns the very same
tree object, and that identity is the signal every other part relies on.

Example:
    from formstate import (
        SetValueAction,
        create_form_group_state,
        create_form_state_reducer_with_update,
        on_form_states,
        update_group,
        validate,
    )

    def required(value):
        return {} if value else {"required": True}

    state = create_form_group_state("signup", {"name": "", "email": ""})
    reducer = create_form_state_reducer_with_update(
        update_group({"name": lambda name, group: validate(required)(name)})
    )
    state = reducer(state, SetValueAction("signup.name", "Ada"))

    # Inside a larger application state
    fragment = on_form_states()
    app_state = fragment.reducer(
        {"signup": state, "count": 0},
        SetValueAction("signup.email", "ada@example.com"),
    )
"""

# Application layer
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

# Domain actions
from formstate.domain.actions import (
    ALL_FORM_ACTION_TYPES,
    Action,
    ClearAsyncErrorAction,
    FocusAction,
    FormAction,
    MarkAsDirtyAction,
    MarkAsPristineAction,
    MarkAsTouchedAction,
    MarkAsUntouchedAction,
    SetAsyncErrorAction,
    SetErrorsAction,
    SetValueAction,
    StartAsyncValidationAction,
    TypedAction,
    UnfocusAction,
)

# Domain exceptions
from formstate.domain.exceptions import (
    FormStateError,
    FormStateLocatorError,
    InvalidFormStateDataError,
    NotAFormStateError,
    UninitializedFormStateError,
    UnsupportedApplicationStateError,
)
from formstate.domain.factory import (
    create_form_array_state,
    create_form_control_state,
    create_form_group_state,
    create_form_state,
)

# Domain interfaces (for custom sub-reducers)
from formstate.domain.interfaces import FormSubReducersInterface

# Domain models and classifier
from formstate.domain.models import (
    AbstractControlState,
    FormArrayState,
    FormControlState,
    FormGroupState,
    FormState,
    UpdateFn,
    is_array_state,
    is_control_state,
    is_form_state,
    is_group_state,
)

# Infrastructure
from formstate.infrastructure.serialization import (
    form_state_from_dict,
    form_state_to_dict,
)
from formstate.reducers import DefaultSubReducers

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "AbstractControlState",
    "FormArrayState",
    "FormControlState",
    "FormGroupState",
    "FormState",
    "UpdateFn",
    # Classifier
    "is_array_state",
    "is_control_state",
    "is_form_state",
    "is_group_state",
    # Construction
    "create_form_array_state",
    "create_form_control_state",
    "create_form_group_state",
    "create_form_state",
    # Actions
    "ALL_FORM_ACTION_TYPES",
    "Action",
    "ClearAsyncErrorAction",
    "FocusAction",
    "FormAction",
    "MarkAsDirtyAction",
    "MarkAsPristineAction",
    "MarkAsTouchedAction",
    "MarkAsUntouchedAction",
    "SetAsyncErrorAction",
    "SetErrorsAction",
    "SetValueAction",
    "StartAsyncValidationAction",
    "TypedAction",
    "UnfocusAction",
    # Domain interfaces
    "FormSubReducersInterface",
    # Domain exceptions
    "FormStateError",
    "FormStateLocatorError",
    "InvalidFormStateDataError",
    "NotAFormStateError",
    "UninitializedFormStateError",
    "UnsupportedApplicationStateError",
    # Reducers
    "DefaultSubReducers",
    "FormStateReducer",
    "FormStateUpdatePipeline",
    "create_form_state_reducer_with_update",
    "form_state_reducer",
    # Integration
    "FormStateReducerFragment",
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
    # Infrastructure - Serialization
    "form_state_from_dict",
    "form_state_to_dict",
]
