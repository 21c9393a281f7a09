"""Tests for embedding form states in application state."""

import logging
from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any

import pytest

from formstate.application.integration import (
    on_form_states,
    wrap_reducer_with_form_state_update,
)
from formstate.domain.actions import (
    ALL_FORM_ACTION_TYPES,
    SetValueAction,
    TypedAction,
)
from formstate.domain.exceptions import (
    FormStateLocatorError,
    UnsupportedApplicationStateError,
)
from formstate.domain.models import FormControlState


@dataclass(frozen=True)
class AppState:
    form: Any
    counter: int = 0


class PlainHostAction:
    """Host action with no `type` attribute."""


class ReadOnlyState(Mapping):
    """Read-only mapping that offers no way to build a modified copy."""

    def __init__(self, data):
        self._data = dict(data)

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)


class TestOnFormStates:
    """Exhaustive scan over top-level fields."""

    def test_exposes_all_form_action_types(self):
        assert on_form_states().types == ALL_FORM_ACTION_TYPES

    def test_updates_form_field_only(self, control_state):
        other = ["untouched"]
        state = {"a": control_state, "b": 42, "c": other}

        result = on_form_states().reducer(state, SetValueAction("name", "Grace"))

        assert result is not state
        assert result["a"].value == "Grace"
        assert result["b"] == 42
        assert result["c"] is other
        assert state["a"] is control_state

    def test_irrelevant_action_keeps_fields(self, control_state):
        """Fields are unchanged; the container itself may be a new object."""
        state = {"a": control_state, "b": 42}

        result = on_form_states().reducer(state, TypedAction("app/INCREMENT"))

        assert result == state
        assert result["a"] is control_state

    def test_no_form_fields_returns_same_container(self):
        state = {"b": 42}
        assert on_form_states().reducer(state, TypedAction("any")) is state

    def test_multiple_form_fields(self, control_state, group_state):
        state = {"profile": control_state, "signup": group_state}
        result = on_form_states().reducer(state, SetValueAction("signup.name", "Ada"))
        assert result["profile"] is control_state
        assert result["signup"].value["name"] == "Ada"

    def test_nested_form_states_not_discovered(self, control_state):
        state = {"nested": {"form": control_state}}
        result = on_form_states().reducer(state, SetValueAction("name", "Grace"))
        assert result["nested"]["form"] is control_state

    def test_dataclass_state(self, control_state):
        state = AppState(form=control_state, counter=3)
        result = on_form_states().reducer(state, SetValueAction("name", "Grace"))
        assert isinstance(result, AppState)
        assert result.form.value == "Grace"
        assert result.counter == 3

    def test_unsupported_state_raises(self):
        with pytest.raises(UnsupportedApplicationStateError):
            on_form_states().reducer(object(), TypedAction("any"))

    def test_custom_reducer(self, control_state):
        replacement = replace(control_state, value="replaced")
        fragment = on_form_states(reducer=lambda s, a: replacement)  # noqa: ARG005
        assert fragment.reducer({"a": control_state}, TypedAction("x"))["a"] is replacement


def app_reducer(state: dict, action) -> dict:
    """Application reducer that counts INCREMENT actions."""
    if action.type == "app/INCREMENT":
        return {**state, "other": state["other"] + 1}
    return state


class TestWrapReducerWithFormStateUpdate:
    """Locator mode: one located form state passes through one update."""

    def test_replaces_form_when_update_changes_it(self, control_state):
        updated = replace(control_state, value="F2")
        wrapped = wrap_reducer_with_form_state_update(
            lambda s, a: {"form": control_state, "other": 7},  # noqa: ARG005
            lambda s: s["form"],
            lambda form: updated,  # noqa: ARG005
        )

        result = wrapped({}, TypedAction("any"))

        assert result == {"form": updated, "other": 7}

    def test_returns_inner_result_when_update_is_noop(self, control_state):
        inner_result = {"form": control_state, "other": 7}
        wrapped = wrap_reducer_with_form_state_update(
            lambda s, a: inner_result,  # noqa: ARG005
            lambda s: s["form"],
            lambda form: form,
        )
        assert wrapped({}, TypedAction("any")) is inner_result

    def test_update_runs_after_inner_reducer(self, control_state):
        seen = []

        def update(form: FormControlState) -> FormControlState:
            seen.append(form)
            return form

        wrapped = wrap_reducer_with_form_state_update(
            app_reducer, lambda s: s["form"], update
        )
        result = wrapped({"form": control_state, "other": 1}, TypedAction("app/INCREMENT"))

        assert result["other"] == 2
        assert seen == [control_state]

    def test_locator_mismatch_raises(self, control_state):
        """A derived locator result is reported instead of silently misapplied."""
        wrapped = wrap_reducer_with_form_state_update(
            lambda s, a: s,  # noqa: ARG005
            lambda s: replace(s["form"]),
            lambda form: replace(form, value="new"),
        )
        with pytest.raises(FormStateLocatorError) as exc_info:
            wrapped({"form": control_state, "other": 7}, TypedAction("any"))
        assert exc_info.value.keys == ("form", "other")

    def test_locator_by_field_name(self, control_state):
        wrapped = wrap_reducer_with_form_state_update(
            app_reducer, "form", lambda form: replace(form, is_dirty=True)
        )
        result = wrapped({"form": control_state, "other": 1}, TypedAction("any"))
        assert result["form"].is_dirty is True
        assert result["other"] == 1

    def test_missing_field_name_raises(self, control_state):
        wrapped = wrap_reducer_with_form_state_update(
            app_reducer, "missing", lambda form: form
        )
        with pytest.raises(FormStateLocatorError):
            wrapped({"form": control_state, "other": 1}, TypedAction("any"))

    def test_dataclass_state(self, control_state):
        wrapped = wrap_reducer_with_form_state_update(
            lambda s, a: s,  # noqa: ARG005
            lambda s: s.form,
            lambda form: replace(form, is_touched=True),
        )
        result = wrapped(AppState(form=control_state, counter=5), TypedAction("any"))
        assert result.form.is_touched is True
        assert result.counter == 5


class TestContainerShapes:
    """Copies keep the container type of the application state."""

    def test_ordered_dict_keeps_its_type(self, control_state):
        state = OrderedDict([("a", control_state), ("b", 1)])

        result = on_form_states().reducer(state, SetValueAction("name", "Grace"))

        assert type(result) is OrderedDict
        assert result is not state
        assert list(result) == ["a", "b"]
        assert result["a"].value == "Grace"
        assert state["a"] is control_state

    def test_mapping_proxy_stays_read_only(self, control_state):
        state = MappingProxyType({"a": control_state, "b": 1})

        result = on_form_states().reducer(state, SetValueAction("name", "Grace"))

        assert isinstance(result, MappingProxyType)
        assert result["a"].value == "Grace"
        assert state["a"] is control_state

    def test_locator_mode_keeps_ordered_dict(self, control_state):
        wrapped = wrap_reducer_with_form_state_update(
            lambda s, a: s,  # noqa: ARG005
            "form",
            lambda form: replace(form, is_touched=True),
        )
        result = wrapped(OrderedDict(form=control_state, other=1), TypedAction("any"))
        assert type(result) is OrderedDict
        assert result["form"].is_touched is True

    def test_uncopyable_mapping_raises(self, control_state):
        state = ReadOnlyState({"a": control_state})
        with pytest.raises(UnsupportedApplicationStateError):
            on_form_states().reducer(state, SetValueAction("name", "Grace"))

    def test_uncopyable_mapping_without_form_fields_is_returned(self):
        state = ReadOnlyState({"b": 1})
        assert on_form_states().reducer(state, TypedAction("any")) is state


class TestHostActionsWithoutTypeAttribute:
    """Debug logging must not depend on the action having a `type` attribute."""

    def test_scan_passes_plain_action_through(self, caplog, control_state):
        caplog.set_level(logging.DEBUG, logger="formstate")
        state = {"a": control_state, "b": 1}

        result = on_form_states().reducer(state, PlainHostAction())

        assert result["a"] is control_state
        assert result["b"] == 1
        assert "PlainHostAction" in caplog.text

    def test_scan_passes_mapping_action_through(self, caplog, control_state):
        caplog.set_level(logging.DEBUG, logger="formstate")
        state = AppState(form=control_state, counter=2)

        result = on_form_states().reducer(state, {"type": "app/LOADED"})

        assert result.form is control_state
        assert result.counter == 2
        assert "app/LOADED" in caplog.text

    def test_locator_mode_logs_plain_action(self, caplog, control_state):
        caplog.set_level(logging.DEBUG, logger="formstate")
        wrapped = wrap_reducer_with_form_state_update(
            lambda s, a: s,  # noqa: ARG005
            "form",
            lambda form: replace(form, is_dirty=True),
        )

        result = wrapped({"form": control_state}, PlainHostAction())

        assert result["form"].is_dirty is True
        assert "form state field 'form' updated after PlainHostAction" in caplog.text
