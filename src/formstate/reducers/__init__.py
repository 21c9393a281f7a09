"""
Sub-reducers for form state nodes.

Each reducer advances one node variant and returns the identical object
when an action does not apply to the node or any of its descendants.

- control: leaf values and flags
- group / array: routing to children, cascading flags, rebuilding on set value
- errors: error and async-validation transitions shared by all variants
- base: DefaultSubReducers, the implementation of FormSubReducersInterface
"""

from formstate.reducers.array import reduce_array
from formstate.reducers.base import DefaultSubReducers
from formstate.reducers.control import reduce_control
from formstate.reducers.group import reduce_group

__all__ = [
    "DefaultSubReducers",
    "reduce_array",
    "reduce_control",
    "reduce_group",
]
