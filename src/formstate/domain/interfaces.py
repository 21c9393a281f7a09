"""
Domain interfaces (Ports) for form state reduction.

The root reducer only classifies and dispatches; advancing a node is the
job of an implementation of the port below.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from formstate.domain.actions import Action
    from formstate.domain.models import (
        FormArrayState,
        FormControlState,
        FormGroupState,
    )


class FormSubReducersInterface(ABC):
    """
    Port for the per-variant sub-reducers.

    Contract shared by all three methods:
        - Return a state of the same variant as the input.
        - Return the identical object when the action does not apply to the
          node or, for composites, to any descendant.
        - Return a new object whenever anything in the subtree changed.
        - Composites may recurse into their children; the root reducer never
          does.
    """

    @abstractmethod
    def reduce_control(
        self, state: "FormControlState", action: "Action"
    ) -> "FormControlState":
        """Advance a control state by one action."""

    @abstractmethod
    def reduce_group(
        self, state: "FormGroupState", action: "Action"
    ) -> "FormGroupState":
        """Advance a group state (and its subtree) by one action."""

    @abstractmethod
    def reduce_array(
        self, state: "FormArrayState", action: "Action"
    ) -> "FormArrayState":
        """Advance an array state (and its subtree) by one action."""
