"""
Registry mapping route names to the screens that render them.
"""

from typing import Callable, Dict, Optional

from textual.screen import Screen
from loguru import logger

# Called with the route params as keyword arguments
ScreenFactory = Callable[..., Screen]


def _factory_name(factory: ScreenFactory) -> str:
    return getattr(factory, "__name__", repr(factory))


class ScreenRegistry:
    """Route name -> screen factory, with aliases."""

    def __init__(self, screens: Optional[Dict[str, ScreenFactory]] = None):
        self._screens: Dict[str, ScreenFactory] = dict(screens or {})
        self._aliases: Dict[str, str] = {}

    def get_screen_class(self, name: str) -> Optional[ScreenFactory]:
        """Get a screen factory by route name or alias."""
        if name in self._aliases:
            name = self._aliases[name]
        return self._screens.get(name)

    def register_screen(self, name: str, screen_class: ScreenFactory) -> None:
        """Register the screen shown for ``name``."""
        self._screens[name] = screen_class
        logger.debug(f"Registered screen: {name} -> {_factory_name(screen_class)}")

    def register_alias(self, alias: str, screen_name: str) -> None:
        """Register an alias for a screen."""
        if screen_name in self._screens:
            self._aliases[alias] = screen_name
            logger.debug(f"Registered alias: {alias} -> {screen_name}")
        else:
            logger.warning(f"Cannot register alias {alias}: screen {screen_name} not found")

    def list_screens(self) -> Dict[str, str]:
        return {name: _factory_name(factory) for name, factory in self._screens.items()}

    def list_aliases(self) -> Dict[str, str]:
        return self._aliases.copy()

    def is_valid_screen(self, name: str) -> bool:
        return name in self._screens or name in self._aliases
