"""
Actions the navigation store understands.

Actions are small frozen dataclasses carrying a ``kind``. Replayed or
persisted actions arrive as plain dicts, so the accessors below read
either shape.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

# Session events that reset the stack
LOGIN_SUCCESS = "login-succeeded"
INITIAL_FETCH_COMPLETE = "initial-fetch-completed"
REHYDRATE = "rehydrate"

# Generic stack actions, handled by the fallback router
NAVIGATE_PUSH = "navigate-push"
NAVIGATE_BACK = "navigate-back"


@dataclass(frozen=True)
class Action:
    """A generic action; ``payload`` is whatever the producer attached."""
    kind: str
    payload: Any = None


@dataclass(frozen=True)
class LoginSucceeded:
    """Dispatched right after the user completes authentication."""
    kind: str = field(default=LOGIN_SUCCESS, init=False)


@dataclass(frozen=True)
class InitialFetchCompleted:
    """Dispatched when the first server fetch after startup has landed."""
    kind: str = field(default=INITIAL_FETCH_COMPLETE, init=False)


@dataclass(frozen=True)
class Rehydrate:
    """Dispatched when persisted state is loaded back at startup."""
    payload: Any = None
    kind: str = field(default=REHYDRATE, init=False)


def action_kind(action: Any) -> Optional[str]:
    """Return the action's kind, or None if it has none."""
    if isinstance(action, Mapping):
        kind = action.get("kind", action.get("type"))
    else:
        kind = getattr(action, "kind", None)
    return kind if isinstance(kind, str) else None


def action_payload(action: Any) -> Any:
    """Return the action's payload, or None if it has none."""
    if isinstance(action, Mapping):
        return action.get("payload")
    return getattr(action, "payload", None)
