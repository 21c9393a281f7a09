"""
Domain models for form state trees.

A form state tree is built from three node variants: controls (leaves),
groups (named children) and arrays (indexed children). All models are
immutable (frozen dataclasses); a changed node is always a new object, and
an unchanged node is always the very same object. Reducers and update
functions rely on object identity as the only change signal.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

# Async validation errors are stored under "$<validation name>"
ASYNC_ERROR_PREFIX = "$"


# =============================================================================
# NODE VARIANTS
# =============================================================================


@dataclass(frozen=True)
class FormControlState:
    """Leaf node holding a single value."""

    id: str
    value: Any
    errors: Mapping[str, Any] = field(default_factory=dict)
    pending_validations: tuple[str, ...] = ()
    is_dirty: bool = False
    is_touched: bool = False
    is_focused: bool = False

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid

    @property
    def is_pristine(self) -> bool:
        return not self.is_dirty

    @property
    def is_untouched(self) -> bool:
        return not self.is_touched

    @property
    def is_validation_pending(self) -> bool:
        return bool(self.pending_validations)


@dataclass(frozen=True)
class FormGroupState:
    """
    Composite node with named children.

    Flags are aggregated: a group is valid only if it has no errors of its
    own and every child is valid; it is dirty/touched if any child is.
    """

    id: str
    controls: Mapping[str, "AbstractControlState"]
    errors: Mapping[str, Any] = field(default_factory=dict)
    pending_validations: tuple[str, ...] = ()

    @property
    def value(self) -> dict[str, Any]:
        return {name: child.value for name, child in self.controls.items()}

    @property
    def is_valid(self) -> bool:
        return not self.errors and all(c.is_valid for c in self.controls.values())

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid

    @property
    def is_dirty(self) -> bool:
        return any(c.is_dirty for c in self.controls.values())

    @property
    def is_pristine(self) -> bool:
        return not self.is_dirty

    @property
    def is_touched(self) -> bool:
        return any(c.is_touched for c in self.controls.values())

    @property
    def is_untouched(self) -> bool:
        return not self.is_touched

    @property
    def is_validation_pending(self) -> bool:
        return bool(self.pending_validations) or any(
            c.is_validation_pending for c in self.controls.values()
        )


@dataclass(frozen=True)
class FormArrayState:
    """Composite node with indexed children. Flags aggregate like groups."""

    id: str
    controls: tuple["AbstractControlState", ...]
    errors: Mapping[str, Any] = field(default_factory=dict)
    pending_validations: tuple[str, ...] = ()

    @property
    def value(self) -> list[Any]:
        return [child.value for child in self.controls]

    @property
    def is_valid(self) -> bool:
        return not self.errors and all(c.is_valid for c in self.controls)

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid

    @property
    def is_dirty(self) -> bool:
        return any(c.is_dirty for c in self.controls)

    @property
    def is_pristine(self) -> bool:
        return not self.is_dirty

    @property
    def is_touched(self) -> bool:
        return any(c.is_touched for c in self.controls)

    @property
    def is_untouched(self) -> bool:
        return not self.is_touched

    @property
    def is_validation_pending(self) -> bool:
        return bool(self.pending_validations) or any(
            c.is_validation_pending for c in self.controls
        )


AbstractControlState: TypeAlias = FormControlState | FormGroupState | FormArrayState

# Any node may act as the root of a reduction
FormState: TypeAlias = AbstractControlState

UpdateFn: TypeAlias = Callable[[AbstractControlState], AbstractControlState]


# =============================================================================
# VARIANT CLASSIFIER
# =============================================================================


def is_form_state(value: object) -> bool:
    """Return True if ``value`` is any form state node. Never raises."""
    return isinstance(value, (FormControlState, FormGroupState, FormArrayState))


def is_control_state(value: object) -> bool:
    return isinstance(value, FormControlState)


def is_group_state(value: object) -> bool:
    return isinstance(value, FormGroupState)


def is_array_state(value: object) -> bool:
    return isinstance(value, FormArrayState)


def child_id(parent_id: str, key: str | int) -> str:
    """Id of the child stored under ``key`` in the node ``parent_id``."""
    return f"{parent_id}.{key}"


def is_descendant_id(ancestor_id: str, control_id: str) -> bool:
    """True if ``control_id`` addresses a node strictly below ``ancestor_id``."""
    return control_id.startswith(ancestor_id + ".")
