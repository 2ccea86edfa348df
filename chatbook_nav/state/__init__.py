"""
State containers for chatbook_nav.
"""

from .navigation_state import (
    NavigationState,
    Route,
    NULL_NAVIGATION_STATE,
    MAIN_ROUTE,
    WELCOME_ROUTE,
    ACCOUNT_ROUTE,
    get_state_for_route,
)
from .account_state import Account, RehydratePayload
from .app_state import NavigationStore, create_store

__all__ = [
    'NavigationState',
    'Route',
    'NULL_NAVIGATION_STATE',
    'MAIN_ROUTE',
    'WELCOME_ROUTE',
    'ACCOUNT_ROUTE',
    'get_state_for_route',
    'Account',
    'RehydratePayload',
    'NavigationStore',
    'create_store',
]
