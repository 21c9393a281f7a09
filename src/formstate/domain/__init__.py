"""
Domain layer: form state models, actions, ports and exceptions.

Pure data structures and predicates with no dependency on the application
or infrastructure layers.
"""

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
    action_type,
)
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
    form_state_type_for,
)
from formstate.domain.interfaces import FormSubReducersInterface
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

__all__ = [
    # Models
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
    # Factory
    "create_form_array_state",
    "create_form_control_state",
    "create_form_group_state",
    "create_form_state",
    "form_state_type_for",
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
    "action_type",
    "UnfocusAction",
    # Ports
    "FormSubReducersInterface",
    # Exceptions
    "FormStateError",
    "FormStateLocatorError",
    "InvalidFormStateDataError",
    "NotAFormStateError",
    "UninitializedFormStateError",
    "UnsupportedApplicationStateError",
]
