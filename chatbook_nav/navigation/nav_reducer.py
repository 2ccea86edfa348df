"""
Navigation reducer.

Pure transform from (previous navigation state, action) to the next
navigation state. When nothing changes, the previous state object itself
is returned so subscribers can skip work with an identity check.
"""

from typing import Any, Callable, Optional

from loguru import logger

from ..Event_Handlers.action_types import (
    INITIAL_FETCH_COMPLETE,
    LOGIN_SUCCESS,
    REHYDRATE,
    action_kind,
    action_payload,
)
from ..state.account_state import RehydratePayload
from ..state.navigation_state import (
    MAIN_ROUTE,
    NULL_NAVIGATION_STATE,
    NavigationState,
    get_state_for_route,
)
from .account_classifier import get_initial_route

# (state, action) -> new state, or None when the action isn't theirs
FallbackRouter = Callable[[NavigationState, Any], Optional[NavigationState]]


def nav_reducer(
    state: Optional[NavigationState],
    action: Any,
    fallback: Optional[FallbackRouter] = None,
) -> NavigationState:
    """
    Compute the navigation state that follows ``action``.

    Args:
        state: Previous state; None is read as the empty sentinel
        action: An action object or mapping carrying a ``kind``
        fallback: Router for actions other than the session events

    Returns:
        The next state, or ``state`` itself when nothing changed
    """
    if state is None:
        state = NULL_NAVIGATION_STATE

    kind = action_kind(action)

    if kind == LOGIN_SUCCESS:
        logger.debug("Login succeeded; replacing navigation stack with main")
        return get_state_for_route(MAIN_ROUTE)

    if kind == INITIAL_FETCH_COMPLETE:
        if state.current_route_name == MAIN_ROUTE:
            return state
        logger.debug(f"Initial fetch complete; moving from {state.current_route_name!r} to main")
        return get_state_for_route(MAIN_ROUTE)

    if kind == REHYDRATE:
        payload = RehydratePayload.parse_lenient(action_payload(action))
        logger.debug(f"Rehydrating navigation from accounts: {payload.describe()}")
        return get_state_for_route(get_initial_route(payload.accounts))

    if fallback is not None:
        next_state = fallback(state, action)
        if next_state is not None:
            return next_state
    return state
