"""
FormStateReducer: root dispatch for form state trees.

The root reducer guards its input, classifies the node and hands the action
to the matching sub-reducer. It never recurses and never filters actions;
an action that does not apply comes back as the identical state object.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from formstate.domain.actions import Action, action_type
from formstate.domain.exceptions import (
    NotAFormStateError,
    UninitializedFormStateError,
)
from formstate.domain.interfaces import FormSubReducersInterface
from formstate.domain.models import (
    AbstractControlState,
    FormState,
    UpdateFn,
    is_array_state,
    is_form_state,
    is_group_state,
)
from formstate.reducers import DefaultSubReducers

logger = logging.getLogger("formstate.reducer")

FormReducerFn = Callable[[FormState | None, Action], FormState]


class FormStateReducer:
    """
    Callable root reducer: ``reducer(state, action) -> state``.

    Raises UninitializedFormStateError for ``None`` and NotAFormStateError
    for anything that is not a control, group or array state. Both indicate
    host misconfiguration and are not meant to be caught.
    """

    def __init__(self, sub_reducers: FormSubReducersInterface | None = None):
        """
        Args:
            sub_reducers: Per-variant sub-reducers (defaults to DefaultSubReducers)
        """
        self._sub_reducers = sub_reducers or DefaultSubReducers()

    @property
    def sub_reducers(self) -> FormSubReducersInterface:
        """Access the sub-reducers (read-only)."""
        return self._sub_reducers

    def __call__(
        self, state: AbstractControlState | None, action: Action
    ) -> FormState:
        if state is None:
            raise UninitializedFormStateError()

        if not is_form_state(state):
            raise NotAFormStateError(state)

        if is_group_state(state):
            new_state: FormState = self._sub_reducers.reduce_group(state, action)  # type: ignore[arg-type]
        elif is_array_state(state):
            new_state = self._sub_reducers.reduce_array(state, action)  # type: ignore[arg-type]
        else:
            new_state = self._sub_reducers.reduce_control(state, action)  # type: ignore[arg-type]

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s on %s '%s': %s",
                action_type(action),
                type(state).__name__,
                state.id,
                "unchanged" if new_state is state else "changed",
            )
        return new_state


form_state_reducer = FormStateReducer()


class FormStateUpdatePipeline:
    """
    Reducer that runs update functions after a state-changing reduction.

    The update functions run in the given order, each on the output of the
    previous one, and only if the reducer returned a new state. When the
    action was a no-op the original state is returned and no update function
    runs. To apply updates unconditionally, call them yourself:
    ``update(form_state_reducer(state, action))``.

    Example:
        update_form = update_group({"name": validate(required)})
        reducer = create_form_state_reducer_with_update(update_form)
        state = reducer(state, SetValueAction("form.name", ""))
    """

    def __init__(
        self, update_fns: Sequence[UpdateFn], reducer: FormReducerFn | None = None
    ):
        """
        Args:
            update_fns: Update functions in application order
            reducer: Root reducer (defaults to form_state_reducer)
        """
        self.update_fns = tuple(update_fns)
        self._reducer = reducer or form_state_reducer

    def __call__(self, state: FormState | None, action: Action) -> FormState:
        new_state = self._reducer(state, action)
        if new_state is state:
            return state

        for update_fn in self.update_fns:
            new_state = update_fn(new_state)
        logger.debug(
            "applied %d update function(s) after %s",
            len(self.update_fns),
            action_type(action),
        )
        return new_state


def create_form_state_reducer_with_update(
    update_fn_or_fns: UpdateFn | Iterable[UpdateFn],
    *update_fns: UpdateFn,
    reducer: FormReducerFn | None = None,
) -> FormStateUpdatePipeline:
    """
    Create a reducer that applies update functions after each state change.

    Args:
        update_fn_or_fns: A single update function or an ordered iterable of them
        *update_fns: Further update functions, applied after the first group
        reducer: Root reducer to wrap (defaults to form_state_reducer)

    Returns:
        A FormStateUpdatePipeline applying all functions in the given order
    """
    if callable(update_fn_or_fns):
        leading: tuple[UpdateFn, ...] = (update_fn_or_fns,)
    else:
        leading = tuple(update_fn_or_fns)
    return FormStateUpdatePipeline((*leading, *update_fns), reducer=reducer)
