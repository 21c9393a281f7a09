"""Tests for domain exceptions."""

from formstate.domain.exceptions import (
    FormStateError,
    FormStateLocatorError,
    NotAFormStateError,
    UninitializedFormStateError,
)


class TestExceptions:
    def test_uninitialized_message(self):
        assert "must be defined" in str(UninitializedFormStateError())

    def test_not_a_form_state_names_value(self):
        """The message and the exception both carry the offending value."""
        value = {"not": "a form state"}
        error = NotAFormStateError(value)
        assert repr(value) in str(error)
        assert error.value is value
        assert isinstance(error, TypeError)

    def test_locator_error_lists_fields(self):
        error = FormStateLocatorError("x", ["form", "other"])
        assert "form, other" in str(error)
        assert error.keys == ("form", "other")
        assert isinstance(error, LookupError)

    def test_common_base(self):
        assert issubclass(NotAFormStateError, FormStateError)
        assert issubclass(FormStateLocatorError, FormStateError)
