"""
Domain exceptions for form state reduction.

These signal host misconfiguration. They are raised at the reduction root
or at the integration seams and are never caught inside the package.
"""

from collections.abc import Sequence


class FormStateError(Exception):
    """Base class for all formstate errors."""


class UninitializedFormStateError(FormStateError):
    """Raised when the reducer receives no state at all."""

    def __init__(self, message: str = "The form state must be defined!"):
        super().__init__(message)


class NotAFormStateError(FormStateError, TypeError):
    """
    Raised when the reduction root is not a control, group or array state.

    The offending value is kept on the exception for diagnostics.
    """

    def __init__(self, value: object):
        """
        Args:
            value: The value that failed classification
        """
        super().__init__(f"state must be a form state, got {value!r}")
        self.value = value


class FormStateLocatorError(FormStateError, LookupError):
    """
    Raised when a located form state is not a direct field of the state.

    The locator of ``wrap_reducer_with_form_state_update`` must return the
    very object stored in one of the top-level fields, not a copy or a value
    read from a nested path.
    """

    def __init__(self, located: object, keys: Sequence[str]):
        """
        Args:
            located: The value returned by the locator
            keys: Names of the fields that were scanned
        """
        super().__init__(
            f"located form state {located!r} is not a direct field of the "
            f"application state (fields: {', '.join(keys) or '(none)'})"
        )
        self.located = located
        self.keys = tuple(keys)


class UnsupportedApplicationStateError(FormStateError, TypeError):
    """Raised when an application state cannot be read or shallow-copied."""

    def __init__(self, state: object):
        super().__init__(
            "application state must be a mapping or a dataclass instance "
            f"that can be shallow-copied, got {type(state).__name__}"
        )
        self.state = state


class InvalidFormStateDataError(FormStateError, ValueError):
    """Raised when serialized form state data does not match the schema."""

    def __init__(self, message: str, path: Sequence[str | int] = ()):
        super().__init__(message)
        self.path = tuple(path)
