"""
Navigation state management.

Immutable route stack values. A transition never edits a state in place;
it either hands back the very same object or builds a new one.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

# Route names the session events resolve to
MAIN_ROUTE = "main"
WELCOME_ROUTE = "welcome"
ACCOUNT_ROUTE = "account"


def _freeze_params(params: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(params, MappingProxyType):
        return params
    return MappingProxyType(dict(params or {}))


@dataclass(frozen=True)
class Route:
    """A single screen entry on the navigation stack."""

    key: str
    route_name: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "params", _freeze_params(self.params))

    # params is a mappingproxy, which is not hashable
    def __hash__(self) -> int:
        return hash((self.key, self.route_name))

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "routeName": self.route_name, "params": dict(self.params)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Route":
        route_name = data.get("routeName", data.get("route_name", data.get("key", "")))
        return cls(
            key=data.get("key", route_name),
            route_name=route_name,
            params=data.get("params") or {},
        )


@dataclass(frozen=True)
class NavigationState:
    """
    An ordered stack of routes with one focused entry.

    ``routes[index]`` is the screen currently shown. An empty stack is only
    used as the "no navigation yet" sentinel.
    """

    index: int = 0
    routes: Tuple[Route, ...] = ()

    def __post_init__(self):
        if not isinstance(self.routes, tuple):
            object.__setattr__(self, "routes", tuple(self.routes))
        if self.routes:
            if not 0 <= self.index < len(self.routes):
                raise ValueError(
                    f"index {self.index} out of range for {len(self.routes)} routes"
                )
        elif self.index != 0:
            raise ValueError("an empty navigation state must have index 0")

    @property
    def is_empty(self) -> bool:
        return not self.routes

    @property
    def current_route(self) -> Optional[Route]:
        """The focused route, or None for the empty sentinel."""
        if not self.routes:
            return None
        return self.routes[self.index]

    @property
    def current_route_name(self) -> Optional[str]:
        route = self.current_route
        return route.route_name if route is not None else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert state to the camelCase dictionary used on the wire."""
        return {
            "index": self.index,
            "routes": [route.to_dict() for route in self.routes],
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "NavigationState":
        """Create state from dictionary. Missing data gives the empty sentinel."""
        if not data or not data.get("routes"):
            return NULL_NAVIGATION_STATE
        routes = tuple(Route.from_dict(route) for route in data["routes"])
        return cls(index=data.get("index", 0), routes=routes)


# Store value before any rehydrate/login event arrives
NULL_NAVIGATION_STATE = NavigationState(index=0, routes=())


def get_state_for_route(route_name: str) -> NavigationState:
    """
    Build the canonical "go to exactly this screen" state.

    The single route uses its name as its key; uniqueness does not matter
    with only one route on the stack.

    Args:
        route_name: Name of the screen to show

    Returns:
        A one-route NavigationState focused on ``route_name``
    """
    if not isinstance(route_name, str) or not route_name:
        raise ValueError(f"route name must be a non-empty string, got {route_name!r}")
    return NavigationState(
        index=0,
        routes=(Route(key=route_name, route_name=route_name, params={}),),
    )
