"""
Infrastructure adapters.

- serialization: JSON-compatible dicts for form state trees, schema-checked
"""

from formstate.infrastructure.serialization import (
    form_state_from_dict,
    form_state_to_dict,
)

__all__ = [
    "form_state_from_dict",
    "form_state_to_dict",
]
