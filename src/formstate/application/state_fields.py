"""
Field access for application states of unknown shape.

Application states are either mappings (read by key) or dataclass instances
(read by field, copied with ``dataclasses.replace``). Mutable mappings are
shallow-copied with ``copy.copy`` so the container keeps its type; read-only
``MappingProxyType`` views are rebuilt as a new view. Any other read-only
mapping cannot be copied safely and is rejected. Only direct fields are
visited.
"""

import copy
import dataclasses
from collections.abc import Iterator, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any

from formstate.domain.exceptions import UnsupportedApplicationStateError


def _is_dataclass_instance(state: object) -> bool:
    return dataclasses.is_dataclass(state) and not isinstance(state, type)


def iter_fields(state: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, value)`` for every direct field of ``state``."""
    if isinstance(state, Mapping):
        yield from state.items()
    elif _is_dataclass_instance(state):
        for f in dataclasses.fields(state):
            yield f.name, getattr(state, f.name)
    else:
        raise UnsupportedApplicationStateError(state)


def replace_field(state: Any, name: str, value: Any) -> Any:
    """Return a shallow copy of ``state`` with field ``name`` set to ``value``."""
    if isinstance(state, MutableMapping):
        new_state = copy.copy(state)
        new_state[name] = value
        return new_state
    if isinstance(state, MappingProxyType):
        return MappingProxyType({**state, name: value})
    if _is_dataclass_instance(state):
        return dataclasses.replace(state, **{name: value})
    raise UnsupportedApplicationStateError(state)
