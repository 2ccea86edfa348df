"""
Navigation store.

Owns the current NavigationState for the lifetime of the application and
replaces it wholesale on every dispatched action.
"""

import threading
from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional

from loguru import logger

from ..config import load_settings
from ..Utils.logging_config import configure_logging
from .navigation_state import NULL_NAVIGATION_STATE, NavigationState

# (previous, current) -> None
Subscriber = Callable[[NavigationState, NavigationState], None]

DEFAULT_MAX_HISTORY = 50


class NavigationStore:
    """
    Single source of truth for navigation state.

    Subscribers are only notified when a dispatch produced a different
    state object; a reducer returning the previous state is a no-op.
    """

    def __init__(
        self,
        reducer: Optional[Callable[..., NavigationState]] = None,
        fallback: Optional[Callable[[NavigationState, Any], Optional[NavigationState]]] = None,
        initial_state: NavigationState = NULL_NAVIGATION_STATE,
        max_history: int = DEFAULT_MAX_HISTORY,
    ):
        # Imported here to avoid a state <-> navigation import cycle
        from ..navigation.nav_reducer import nav_reducer
        from ..navigation.stack_router import StackRouter

        self._reducer = reducer or nav_reducer
        self._fallback = fallback if fallback is not None else StackRouter()
        self._initial_state = initial_state
        self._state = initial_state
        self._history: Deque[NavigationState] = deque(maxlen=max(max_history, 0))
        self._subscribers: List[Subscriber] = []
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: Dict[str, Any], **kwargs) -> "NavigationStore":
        """Create a store using the [Navigation] section of the settings."""
        nav_settings = settings.get("Navigation", {}) if settings else {}
        try:
            max_history = int(nav_settings.get("max_history", DEFAULT_MAX_HISTORY))
        except (TypeError, ValueError):
            logger.warning(f"Setting max_history={nav_settings.get('max_history')!r} is not an integer. Using default: {DEFAULT_MAX_HISTORY}")
            max_history = DEFAULT_MAX_HISTORY
        return cls(max_history=max_history, **kwargs)

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def max_history(self) -> int:
        return self._history.maxlen or 0

    @property
    def history(self) -> List[NavigationState]:
        """Previous states, oldest first."""
        with self._lock:
            return list(self._history)

    def dispatch(self, action: Any) -> NavigationState:
        """
        Run ``action`` through the reducer and store the result.

        Returns:
            The current state after the action
        """
        with self._lock:
            previous = self._state
            current = self._reducer(previous, action, self._fallback)
            if current is previous:
                return previous
            self._state = current
            if self._history.maxlen:
                self._history.append(previous)
            subscribers = list(self._subscribers)

        logger.debug(
            f"Navigation changed: {previous.current_route_name!r} -> {current.current_route_name!r} "
            f"({len(current.routes)} route(s))"
        )
        self._notify(subscribers, previous, current)
        return current

    def _notify(self, subscribers: List[Subscriber], previous: NavigationState, current: NavigationState) -> None:
        for callback in subscribers:
            try:
                callback(previous, current)
            except Exception as e:
                logger.error(f"Navigation subscriber {callback!r} failed: {e}")

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            A function that removes the listener again
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def reset(self) -> None:
        """
        Return to the initial state and forget history.

        Subscribers stay, and are notified if the state changed.
        """
        with self._lock:
            previous = self._state
            self._state = self._initial_state
            self._history.clear()
            subscribers = list(self._subscribers)
        logger.debug("Navigation store reset")
        if previous is not self._initial_state:
            self._notify(subscribers, previous, self._initial_state)


def create_store(settings: Optional[Dict[str, Any]] = None, **kwargs) -> NavigationStore:
    """
    Startup wiring: load settings, configure logging, build the store.

    Args:
        settings: Already-loaded settings; read from the config file when None
        **kwargs: Passed on to NavigationStore

    Returns:
        A store on the empty initial state
    """
    if settings is None:
        settings = load_settings()
    configure_logging(settings)
    store = NavigationStore.from_settings(settings, **kwargs)
    logger.info(f"Navigation store created (max_history={store.max_history})")
    return store
