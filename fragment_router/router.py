"""Dispatch path fragments to registered route handlers.

Routes are tried most recently registered first; the first match wins.

Path parameters are percent-decoded before they reach the handler, the
trailing query string is passed through undecoded.

"""

import logging
import re
import sys
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Union

from fragment_router.errors import RouteHandlerNotFound
from fragment_router.routing import RouteEntry
from fragment_router.types import FragmentSource

Listener = Callable[[str, List[Optional[str]]], Any]


class Router:
    """Router."""

    FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"

    def __init__(
        self,
        name: str = "fragment_router",
        routes: Optional[Dict[str, Union[str, Callable]]] = None,
        handlers: Any = None,
        listeners: Optional[List[Listener]] = None,
        configure_logs: bool = True,
        debug: bool = False,
    ) -> None:
        """Initialize Router object."""
        self.name: str = name
        self.routes: List[RouteEntry] = []
        self.handlers: Any = handlers
        self.listeners: List[Listener] = list(listeners or [])
        self.debug: bool = debug
        self.log = logging.getLogger(self.name)
        if configure_logs:
            self._configure_logging()
        if routes:
            self._bind_routes(routes)

    def _configure_logging(self) -> None:
        if self._already_configured(self.log):
            return

        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(self.FORMAT_STRING)
        handler.setFormatter(formatter)
        self.log.propagate = False
        if self.debug:
            level = logging.DEBUG
        else:
            level = logging.ERROR
        self.log.setLevel(level)
        self.log.addHandler(handler)

    def _already_configured(self, log) -> bool:
        if not log.handlers:
            return False

        for handler in log.handlers:
            if isinstance(handler, logging.StreamHandler):
                if handler.stream == sys.stdout:
                    return True

        return False

    def _bind_routes(self, routes: Dict[str, Union[str, Callable]]) -> None:
        # Last registered is tried first, so the first declared route wins
        for route in reversed(list(routes)):
            self.register(route, routes[route])

    def _resolve_handler(self, route: RouteEntry) -> Callable:
        if route.handler is not None:
            return route.handler

        if isinstance(self.handlers, Mapping):
            handler = self.handlers.get(route.name)
        else:
            handler = getattr(self.handlers, route.name, None)

        if not callable(handler):
            self.log.error(f"No handler found for route: {route.name!r}")
            raise RouteHandlerNotFound(route.name)
        return handler

    def register(
        self,
        route: Union[str, re.Pattern],
        name: Union[str, Callable] = "",
        handler: Optional[Callable] = None,
    ) -> RouteEntry:
        """Register a route template or compiled pattern."""
        if callable(name):
            handler = name
            name = ""

        entry = RouteEntry(route, handler, name)
        self.routes.append(entry)
        self.log.debug(f"Registered {entry!r}")
        return entry

    def route(self, route: Union[str, re.Pattern], name: str = "") -> Callable:
        """Register route."""

        def _register_handler(handler):
            self.register(route, name, handler)
            return handler

        return _register_handler

    def add_listener(self, listener: Listener) -> Listener:
        """Notify listener with (route name, params) after each dispatch."""
        self.listeners.append(listener)
        return listener

    def execute(
        self, handler: Callable, params: List[Optional[str]], name: str
    ) -> Any:
        """Call the route handler. Override to wrap every handler call."""
        return handler(*params)

    def dispatch(self, fragment: str) -> bool:
        """Run the handler of the first route matching the fragment."""
        self.log.debug(f"Dispatching fragment: {fragment!r}")

        # Routes registered by a handler are not visited by this pass
        for route in self.routes[::-1]:
            if not route.test(fragment):
                continue

            self.log.debug(f"Matched {route!r}")
            params = route.extract(fragment)
            handler = self._resolve_handler(route)
            if self.execute(handler, params, route.name) is not False:
                for listener in list(self.listeners):
                    listener(route.name, params)
            return True

        self.log.debug(f"No route matches fragment: {fragment!r}")
        return False

    def attach(self, source: FragmentSource) -> None:
        """Subscribe the router to a fragment source."""
        source.subscribe(self.dispatch)
