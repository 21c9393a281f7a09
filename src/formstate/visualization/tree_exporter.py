"""
Console rendering of form state trees.

Builds a ``rich.tree.Tree`` with one branch per node, labelled with the
node kind, its id, its value (controls only) and its active flags.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from formstate.domain.models import (
    AbstractControlState,
    FormArrayState,
    FormGroupState,
)


def _flags(state: AbstractControlState) -> list[str]:
    flags = []
    if state.is_dirty:
        flags.append("dirty")
    if state.is_touched:
        flags.append("touched")
    if getattr(state, "is_focused", False):
        flags.append("focused")
    if state.is_validation_pending:
        flags.append("pending")
    return flags


def _label(state: AbstractControlState) -> Text:
    if isinstance(state, FormGroupState):
        label = Text("group ", style="bold magenta")
    elif isinstance(state, FormArrayState):
        label = Text("array ", style="bold blue")
    else:
        label = Text("control ", style="bold cyan")
    label.append(state.id)

    if not isinstance(state, (FormGroupState, FormArrayState)):
        label.append(f" = {state.value!r}", style="green")

    flags = _flags(state)
    if flags:
        label.append(f" [{', '.join(flags)}]", style="dim")
    if state.errors:
        label.append(f" errors: {', '.join(state.errors)}", style="bold red")
    return label


def _add_children(branch: Tree, state: AbstractControlState) -> None:
    if isinstance(state, FormGroupState):
        children = list(state.controls.values())
    elif isinstance(state, FormArrayState):
        children = list(state.controls)
    else:
        return
    for child in children:
        _add_children(branch.add(_label(child)), child)


def build_form_state_tree(state: AbstractControlState) -> Tree:
    """Build a rich Tree for ``state`` and its whole subtree."""
    tree = Tree(_label(state))
    _add_children(tree, state)
    return tree


def print_form_state(
    state: AbstractControlState, console: Console | None = None
) -> None:
    """Print ``state`` as a tree to ``console`` (stdout by default)."""
    (console or Console()).print(build_form_state_tree(state))
