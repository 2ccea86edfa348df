"""
Binds the navigation store to a Textual app.
"""

from typing import Any, Optional, TYPE_CHECKING

from loguru import logger

from ..Event_Handlers.action_types import Action, NAVIGATE_BACK, NAVIGATE_PUSH
from ..state.app_state import NavigationStore
from ..state.navigation_state import NavigationState, Route
from .screen_registry import ScreenRegistry

if TYPE_CHECKING:
    from textual.app import App


class NavigationManager:
    """
    Keeps the app's screen in step with the store's focused route.

    The manager subscribes to the store, so actions dispatched anywhere
    (not only through ``dispatch`` here) update the screen. Screens are
    tracked by route key, so two stacked routes with the same name are
    still told apart.
    """

    def __init__(self, app: 'App', store: NavigationStore, registry: Optional[ScreenRegistry] = None):
        self.app = app
        self.store = store
        self.registry = registry or ScreenRegistry()
        self._shown_key: Optional[str] = None
        self._unsubscribe = store.subscribe(self._on_store_changed)

    def _on_store_changed(self, previous: NavigationState, current: NavigationState) -> None:
        # Store callbacks are synchronous; the switch itself runs on the app's loop
        self.app.call_later(self.sync_screen)

    def close(self) -> None:
        """Stop following the store."""
        self._unsubscribe()

    async def sync_screen(self) -> bool:
        """
        Show the screen for the store's focused route if it isn't shown yet.

        Returns:
            True if a different screen is now shown, False otherwise
        """
        route = self.store.state.current_route
        if route is None or route.key == self._shown_key:
            logger.debug(f"Already on screen: {route.key if route else None}")
            return False
        return await self.show_route(route)

    async def dispatch(self, action: Any) -> bool:
        """
        Dispatch an action and update the visible screen.

        Returns:
            True if a different screen is now shown, False otherwise
        """
        previous = self.store.state
        if self.store.dispatch(action) is previous:
            return False
        return await self.sync_screen()

    async def show_route(self, route: Route) -> bool:
        """
        Switch the app to the screen registered for ``route``.

        The route's params are passed to the screen factory as keyword
        arguments.

        Returns:
            True if the switch happened, False otherwise
        """
        screen_class = self.registry.get_screen_class(route.route_name)
        if not screen_class:
            logger.error(f"No screen registered for route: {route.route_name}")
            return False

        try:
            await self.app.switch_screen(screen_class(**route.params))
        except Exception as e:
            logger.error(f"Failed to switch to {route.route_name}: {e}")
            return False

        self._shown_key = route.key
        logger.info(f"Showing screen for route: {route.route_name} ({route.key})")
        return True

    async def navigate_to(self, route_name: str, **params) -> bool:
        """Push ``route_name`` onto the stack."""
        return await self.dispatch(Action(kind=NAVIGATE_PUSH, payload={"routeName": route_name, "params": params}))

    async def go_back(self) -> bool:
        """Pop the focused route."""
        if not self.can_go_back():
            logger.debug("No previous screen to go back to")
            return False
        return await self.dispatch(Action(kind=NAVIGATE_BACK))

    def can_go_back(self) -> bool:
        return self.store.state.index > 0

    def get_current_route(self) -> Optional[str]:
        return self.store.state.current_route_name
