"""
Server event translation.

Turns a batch of raw server events (as returned by the event queue poll)
into store actions. Unknown event types are dropped, as are heartbeats.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from loguru import logger

from .action_types import Action

# Server event type -> action kind
EVENT_ACTION_KINDS: Dict[str, str] = {
    'presence': 'event-presence',
    'message': 'event-new-message',
    'typing': 'event-typing',
    'reaction': 'event-reaction',
    'update_message_flags': 'event-update-message-flags',
    'subscription': 'event-subscription',
    'realm_user': 'event-realm-user',
}

# Known, but carry nothing the client acts on
IGNORED_EVENT_TYPES = frozenset({'heartbeat'})


def _own_email(state: Any) -> Optional[str]:
    if isinstance(state, Mapping):
        accounts = state.get('accounts') or []
    else:
        accounts = getattr(state, 'accounts', None) or []
    if not accounts:
        return None
    first = accounts[0]
    email = first.get('email') if isinstance(first, Mapping) else getattr(first, 'email', None)
    return email if isinstance(email, str) else None


def event_to_action(state: Any, event: Mapping[str, Any]) -> Optional[Action]:
    """
    Convert a single server event to an action.

    Returns:
        The action, or None if the event should be dropped
    """
    event_type = event.get('type') if isinstance(event, Mapping) else None
    if event_type in IGNORED_EVENT_TYPES:
        return None

    kind = EVENT_ACTION_KINDS.get(event_type)
    if kind is None:
        logger.debug(f"Dropping unknown server event type: {event_type!r}")
        return None

    # Our own typing notifications echo back; nothing to show for them
    if event_type == 'typing':
        sender = event.get('sender') or {}
        own_email = _own_email(state)
        if own_email is not None and isinstance(sender, Mapping) and sender.get('email') == own_email:
            return None

    return Action(kind=kind, payload=dict(event))


def response_to_actions(state: Any, events: Iterable[Mapping[str, Any]]) -> List[Action]:
    """
    Convert a poll response's events to actions, dropping the ones we ignore.

    Args:
        state: Current app state (mapping or object exposing ``accounts``)
        events: Raw server events

    Returns:
        Actions in the order the events arrived
    """
    actions = []
    for event in events or []:
        action = event_to_action(state, event)
        if action is not None:
            actions.append(action)
    if actions:
        logger.debug(f"Translated {len(actions)} server event(s) into actions")
    return actions
