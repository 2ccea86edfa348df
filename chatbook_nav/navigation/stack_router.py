"""
Minimal stack router used as the reducer's fallback.

Handles push and back. Anything else is not ours and yields None so the
reducer keeps the previous state.
"""

import itertools
from typing import Any, Mapping, Optional

from loguru import logger

from ..Event_Handlers.action_types import NAVIGATE_BACK, NAVIGATE_PUSH, action_kind, action_payload
from ..state.navigation_state import NavigationState, Route


class StackRouter:
    """Pushes and pops routes on a NavigationState."""

    def __init__(self):
        self._key_counter = itertools.count(1)

    def _next_key(self, route_name: str, state: NavigationState) -> str:
        taken = {route.key for route in state.routes}
        key = f"{route_name}-{next(self._key_counter)}"
        while key in taken:
            key = f"{route_name}-{next(self._key_counter)}"
        return key

    def __call__(self, state: NavigationState, action: Any) -> Optional[NavigationState]:
        kind = action_kind(action)
        if kind == NAVIGATE_PUSH:
            return self.push(state, action_payload(action))
        if kind == NAVIGATE_BACK:
            return self.back(state)
        return None

    def push(self, state: NavigationState, payload: Any) -> NavigationState:
        """Focus a new route on top of the current one."""
        if isinstance(payload, Mapping):
            route_name = payload.get("routeName", payload.get("route_name"))
            params = payload.get("params") or {}
        else:
            route_name, params = payload, {}
        if not isinstance(route_name, str) or not route_name:
            logger.warning(f"Ignoring push without a route name: {payload!r}")
            return state

        if state.is_empty:
            return NavigationState(
                index=0, routes=(Route(key=route_name, route_name=route_name, params=params),)
            )

        route = Route(key=self._next_key(route_name, state), route_name=route_name, params=params)
        # Anything above the focused route is discarded
        routes = state.routes[: state.index + 1] + (route,)
        return NavigationState(index=len(routes) - 1, routes=routes)

    def back(self, state: NavigationState) -> NavigationState:
        """Drop the focused route. At the root this is a no-op."""
        if state.index == 0:
            return state
        routes = state.routes[: state.index]
        return NavigationState(index=len(routes) - 1, routes=routes)
