"""Shared pytest fixtures for formstate tests."""

import pytest

from formstate.domain.factory import (
    create_form_array_state,
    create_form_control_state,
    create_form_group_state,
)
from formstate.domain.models import FormArrayState, FormControlState, FormGroupState


@pytest.fixture
def control_state() -> FormControlState:
    """A fresh control with a string value."""
    return create_form_control_state("name", "Ada")


@pytest.fixture
def group_state() -> FormGroupState:
    """A signup form: two controls plus a nested array of tags."""
    return create_form_group_state(
        "signup",
        {"name": "", "email": "", "tags": ["python", "forms"]},
    )


@pytest.fixture
def array_state() -> FormArrayState:
    """An array of three numeric controls."""
    return create_form_array_state("scores", [1, 2, 3])
