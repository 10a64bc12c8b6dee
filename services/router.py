"""View-select state for the site.

The current route lives in a per-session mapping (``st.session_state`` at
runtime, a plain dict in tests). Navigation is total: any key outside the
fixed navigation set is corrected to the default route.
"""
import logging
from typing import Callable, Dict, Any, MutableMapping, Optional

from domain.constants import ROUTE_KEYS, DEFAULT_ROUTE
from domain.models import Action, ActionType

logger = logging.getLogger(__name__)

ROUTE_STATE_KEY = 'route'


def normalize_route(key: Optional[str]) -> str:
    if key in ROUTE_KEYS:
        return key
    logger.debug("Unknown route %r, falling back to %s", key, DEFAULT_ROUTE)
    return DEFAULT_ROUTE


def reduce(route: str, action: Action) -> str:
    """Pure reducer: only NAVIGATE changes the route."""
    if action.type is ActionType.NAVIGATE:
        return normalize_route(action.payload.get('key'))
    return route


def resolve_page(registry: Dict[str, Dict[str, Any]], key: Optional[str]) -> Callable[[], None]:
    """Return the page producer for ``key``; unknown keys resolve to the home producer."""
    entry = registry.get(key) if key is not None else None
    if entry is None:
        entry = registry[DEFAULT_ROUTE]
    return entry['render_func']


class Router:
    def __init__(self, state: MutableMapping[str, Any]):
        self._state = state
        if ROUTE_STATE_KEY not in self._state:
            self._state[ROUTE_STATE_KEY] = DEFAULT_ROUTE

    @property
    def current_route(self) -> str:
        return normalize_route(self._state.get(ROUTE_STATE_KEY))

    def dispatch(self, action: Action) -> str:
        self._state[ROUTE_STATE_KEY] = reduce(self.current_route, action)
        return self._state[ROUTE_STATE_KEY]

    def navigate(self, key: str) -> str:
        return self.dispatch(Action(ActionType.NAVIGATE, {'key': key}))
