"""
chatbook_nav - Navigation-state derivation for the chat client

Computes the authoritative screen stack the client should show from the
account state and the lifecycle events dispatched by the application store.
The reducer is pure; the store, screen binding and config layers around it
are thin collaborators.
"""

__version__ = "0.1.0"
__license__ = "AGPLv3+"

# Version tuple for programmatic comparison
VERSION_TUPLE = (0, 1, 0)

from .state.navigation_state import (
    NavigationState,
    Route,
    NULL_NAVIGATION_STATE,
    get_state_for_route,
)
from .navigation.nav_reducer import nav_reducer
from .state.app_state import NavigationStore, create_store

__all__ = [
    "__version__",
    "VERSION_TUPLE",
    "NavigationState",
    "Route",
    "NULL_NAVIGATION_STATE",
    "get_state_for_route",
    "nav_reducer",
    "NavigationStore",
    "create_store",
]
