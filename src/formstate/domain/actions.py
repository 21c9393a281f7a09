"""
Actions understood by the form state reducers.

An action is any object with a string ``type``. Hosts usually dispatch
``TypedAction`` records for their own state; the form actions below are
frozen dataclasses that address one node through its ``control_id``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol

ACTION_TYPE_PREFIX = "formstate/"

SET_VALUE = ACTION_TYPE_PREFIX + "SET_VALUE"
SET_ERRORS = ACTION_TYPE_PREFIX + "SET_ERRORS"
START_ASYNC_VALIDATION = ACTION_TYPE_PREFIX + "START_ASYNC_VALIDATION"
SET_ASYNC_ERROR = ACTION_TYPE_PREFIX + "SET_ASYNC_ERROR"
CLEAR_ASYNC_ERROR = ACTION_TYPE_PREFIX + "CLEAR_ASYNC_ERROR"
MARK_AS_DIRTY = ACTION_TYPE_PREFIX + "MARK_AS_DIRTY"
MARK_AS_PRISTINE = ACTION_TYPE_PREFIX + "MARK_AS_PRISTINE"
MARK_AS_TOUCHED = ACTION_TYPE_PREFIX + "MARK_AS_TOUCHED"
MARK_AS_UNTOUCHED = ACTION_TYPE_PREFIX + "MARK_AS_UNTOUCHED"
FOCUS = ACTION_TYPE_PREFIX + "FOCUS"
UNFOCUS = ACTION_TYPE_PREFIX + "UNFOCUS"

ALL_FORM_ACTION_TYPES: tuple[str, ...] = (
    SET_VALUE,
    SET_ERRORS,
    START_ASYNC_VALIDATION,
    SET_ASYNC_ERROR,
    CLEAR_ASYNC_ERROR,
    MARK_AS_DIRTY,
    MARK_AS_PRISTINE,
    MARK_AS_TOUCHED,
    MARK_AS_UNTOUCHED,
    FOCUS,
    UNFOCUS,
)


class Action(Protocol):
    """Structural type of every dispatched action."""

    @property
    def type(self) -> str: ...


@dataclass(frozen=True)
class TypedAction:
    """Generic immutable action record for host-defined action types."""

    type: str
    payload: Any = None


def action_type(action: object) -> str:
    """
    Best-effort type string of a host action, for log messages.

    Reads the ``type`` attribute, falls back to a ``"type"`` key for mapping
    actions and to the class name otherwise. Reducers never route on this.
    """
    value = getattr(action, "type", None)
    if value is None and isinstance(action, Mapping):
        value = action.get("type")
    if value is None:
        return type(action).__name__
    return str(value)


# =============================================================================
# FORM ACTIONS
# =============================================================================


@dataclass(frozen=True)
class FormAction:
    """Base for actions addressed to a single form state node."""

    TYPE: ClassVar[str] = ""

    control_id: str

    @property
    def type(self) -> str:
        return self.TYPE


@dataclass(frozen=True)
class SetValueAction(FormAction):
    TYPE: ClassVar[str] = SET_VALUE

    value: Any = None


@dataclass(frozen=True)
class SetErrorsAction(FormAction):
    """
    Replace the synchronous errors of a node; async errors are kept.

    Names starting with ``$`` belong to async validation and are rejected
    with ValueError when the action is reduced.
    """

    TYPE: ClassVar[str] = SET_ERRORS

    errors: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StartAsyncValidationAction(FormAction):
    """Mark the named async validation as pending on a node."""

    TYPE: ClassVar[str] = START_ASYNC_VALIDATION

    name: str = ""


@dataclass(frozen=True)
class SetAsyncErrorAction(FormAction):
    """Deliver a failed async validation result and clear its pending flag."""

    TYPE: ClassVar[str] = SET_ASYNC_ERROR

    name: str = ""
    value: Any = True


@dataclass(frozen=True)
class ClearAsyncErrorAction(FormAction):
    """Deliver a successful async validation result."""

    TYPE: ClassVar[str] = CLEAR_ASYNC_ERROR

    name: str = ""


@dataclass(frozen=True)
class MarkAsDirtyAction(FormAction):
    TYPE: ClassVar[str] = MARK_AS_DIRTY


@dataclass(frozen=True)
class MarkAsPristineAction(FormAction):
    TYPE: ClassVar[str] = MARK_AS_PRISTINE


@dataclass(frozen=True)
class MarkAsTouchedAction(FormAction):
    TYPE: ClassVar[str] = MARK_AS_TOUCHED


@dataclass(frozen=True)
class MarkAsUntouchedAction(FormAction):
    TYPE: ClassVar[str] = MARK_AS_UNTOUCHED


@dataclass(frozen=True)
class FocusAction(FormAction):
    TYPE: ClassVar[str] = FOCUS


@dataclass(frozen=True)
class UnfocusAction(FormAction):
    TYPE: ClassVar[str] = UNFOCUS


def is_form_action(action: object) -> bool:
    """True for actions addressed to a form state node."""
    return isinstance(action, FormAction)
