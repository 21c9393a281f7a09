"""
Embedding form state trees in a larger application state.

Two strategies:

- ``on_form_states``: a reducer fragment that runs every top-level form
  state field of the application state through the form state reducer.
- ``wrap_reducer_with_form_state_update``: wraps an existing application
  reducer and passes exactly one located form state through an update
  function after each reduction.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from formstate.application.reducer import FormReducerFn, form_state_reducer
from formstate.application.state_fields import iter_fields, replace_field
from formstate.domain.actions import ALL_FORM_ACTION_TYPES, Action, action_type
from formstate.domain.exceptions import FormStateLocatorError
from formstate.domain.models import AbstractControlState, is_form_state

logger = logging.getLogger("formstate.integration")

TState = TypeVar("TState")
TFormState = TypeVar("TFormState", bound=AbstractControlState)

AppReducer = Callable[[TState, Action], TState]


@dataclass(frozen=True)
class FormStateReducerFragment:
    """
    Reducer plus the action types it reacts to.

    Hosts merge ``reducer`` into their own reducer and may use ``types`` to
    scope subscriptions or tooling to form actions.
    """

    reducer: Callable[[Any, Action], Any]
    types: tuple[str, ...]


def on_form_states(reducer: FormReducerFn | None = None) -> FormStateReducerFragment:
    """
    Build a fragment updating every top-level form state field of a state.

    Fields whose value is a form state are replaced by the reduced value;
    all other fields keep their values. Each form state field is written
    through a fresh shallow copy of the container, so whenever at least one
    form state field exists the returned container is a new object, even if
    no field changed. Compare fields, not containers, to detect no-ops.
    Form states nested below the first level are not discovered.

    Args:
        reducer: Root reducer used per field (defaults to form_state_reducer)
    """
    reduce_form_state = reducer or form_state_reducer

    def reduce_form_state_fields(state: Any, action: Action) -> Any:
        for name, value in list(iter_fields(state)):
            if not is_form_state(value):
                continue
            logger.debug(
                "reducing form state field '%s' for %s", name, action_type(action)
            )
            state = replace_field(state, name, reduce_form_state(value, action))
        return state

    return FormStateReducerFragment(
        reducer=reduce_form_state_fields, types=ALL_FORM_ACTION_TYPES
    )


def _get_field(state: Any, name: str) -> Any:
    fields = dict(iter_fields(state))
    if name not in fields:
        raise FormStateLocatorError(name, list(fields))
    return fields[name]


def _find_field_name(state: Any, form_state: object) -> str:
    names = []
    for name, value in iter_fields(state):
        if value is form_state:
            return name
        names.append(name)
    raise FormStateLocatorError(form_state, names)


def wrap_reducer_with_form_state_update(
    reducer: AppReducer[TState],
    form_state_locator: Callable[[TState], TFormState] | str,
    update_fn: Callable[[TFormState], TFormState],
) -> AppReducer[TState]:
    """
    Wrap a reducer so one form state is updated after every reduction.

    The wrapped reducer first calls ``reducer``, then locates the form state
    in the result and applies ``update_fn`` to it. If the update returns the
    same object, the inner reducer's result is returned unchanged; otherwise
    a shallow copy with the updated form state is returned.

    Args:
        reducer: The application reducer to wrap
        form_state_locator: Either a field name, or a function returning the
            form state object stored in a direct field of the state
        update_fn: Update applied to the located form state

    Raises:
        FormStateLocatorError: (from the wrapped reducer) if the locator
            returns a value that is not identical to any direct field, or
            names a field the state does not have
    """

    def reduce_and_update(state: TState, action: Action) -> TState:
        updated_state = reducer(state, action)

        if isinstance(form_state_locator, str):
            field_name = form_state_locator
            form_state = _get_field(updated_state, field_name)
        else:
            form_state = form_state_locator(updated_state)
            field_name = _find_field_name(updated_state, form_state)

        updated_form_state = update_fn(form_state)
        if updated_form_state is form_state:
            return updated_state

        logger.debug(
            "form state field '%s' updated after %s", field_name, action_type(action)
        )
        return replace_field(updated_state, field_name, updated_form_state)

    return reduce_and_update
