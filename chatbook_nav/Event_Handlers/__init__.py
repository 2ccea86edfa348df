"""
Action types and server-event translation.
"""

from .action_types import (
    LOGIN_SUCCESS,
    INITIAL_FETCH_COMPLETE,
    REHYDRATE,
    NAVIGATE_PUSH,
    NAVIGATE_BACK,
    Action,
    LoginSucceeded,
    InitialFetchCompleted,
    Rehydrate,
    action_kind,
    action_payload,
)
from .server_events import response_to_actions

__all__ = [
    'LOGIN_SUCCESS',
    'INITIAL_FETCH_COMPLETE',
    'REHYDRATE',
    'NAVIGATE_PUSH',
    'NAVIGATE_BACK',
    'Action',
    'LoginSucceeded',
    'InitialFetchCompleted',
    'Rehydrate',
    'action_kind',
    'action_payload',
    'response_to_actions',
]
