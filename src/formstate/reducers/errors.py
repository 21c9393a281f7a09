"""
Error and async-validation handling shared by all node variants.

Every node carries ``errors`` and ``pending_validations``, so these
transitions are written once against ``dataclasses.replace``.
"""

from dataclasses import replace
from typing import Any, TypeVar

from formstate.domain.actions import (
    Action,
    ClearAsyncErrorAction,
    SetAsyncErrorAction,
    SetErrorsAction,
    StartAsyncValidationAction,
)
from formstate.domain.models import ASYNC_ERROR_PREFIX, AbstractControlState

TState = TypeVar("TState", bound=AbstractControlState)


def same_value(a: Any, b: Any) -> bool:
    """Value equality that never treats ``1`` and ``True`` as the same value."""
    return a is b or (type(a) is type(b) and a == b)


def _async_error_key(name: str) -> str:
    return ASYNC_ERROR_PREFIX + name


def set_errors(state: TState, errors: dict[str, Any]) -> TState:
    reserved = sorted(k for k in errors if k.startswith(ASYNC_ERROR_PREFIX))
    if reserved:
        raise ValueError(
            f"error names starting with '{ASYNC_ERROR_PREFIX}' are reserved for "
            f"async validation, got {reserved} for '{state.id}'"
        )
    async_errors = {
        k: v for k, v in state.errors.items() if k.startswith(ASYNC_ERROR_PREFIX)
    }
    new_errors = {**errors, **async_errors}
    if new_errors == dict(state.errors):
        return state
    return replace(state, errors=new_errors)


def start_async_validation(state: TState, name: str) -> TState:
    if name in state.pending_validations:
        return state
    return replace(state, pending_validations=(*state.pending_validations, name))


def set_async_error(state: TState, name: str, value: Any) -> TState:
    key = _async_error_key(name)
    if (
        name not in state.pending_validations
        and key in state.errors
        and same_value(state.errors[key], value)
    ):
        return state
    pending = tuple(p for p in state.pending_validations if p != name)
    return replace(
        state, errors={**state.errors, key: value}, pending_validations=pending
    )


def clear_async_error(state: TState, name: str) -> TState:
    key = _async_error_key(name)
    if name not in state.pending_validations and key not in state.errors:
        return state
    pending = tuple(p for p in state.pending_validations if p != name)
    errors = {k: v for k, v in state.errors.items() if k != key}
    return replace(state, errors=errors, pending_validations=pending)


def reduce_errors(state: TState, action: Action) -> TState:
    """Apply an error or async-validation action addressed to ``state``."""
    if isinstance(action, SetErrorsAction):
        return set_errors(state, dict(action.errors))
    if isinstance(action, StartAsyncValidationAction):
        return start_async_validation(state, action.name)
    if isinstance(action, SetAsyncErrorAction):
        return set_async_error(state, action.name, action.value)
    if isinstance(action, ClearAsyncErrorAction):
        return clear_async_error(state, action.name)
    return state
