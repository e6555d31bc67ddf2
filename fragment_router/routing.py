"""Route compilation and parameter extraction."""

import re
from typing import Callable, List, Optional, Union
from urllib.parse import unquote

from fragment_router.patterns import (
    escape_pattern,
    named_pattern,
    optional_pattern,
    splat_pattern,
)
from fragment_router.types import CompiledRoute


def _named_param(match: re.Match) -> str:
    # already part of a non-capturing group marker
    if match.group(1):
        return match.group(0)
    return r"([^/?]+)"


def _route_to_regex(route: str) -> str:
    route = escape_pattern.sub(r"\\\g<0>", route)
    route = optional_pattern.sub(r"(?:\1)?", route)
    route = named_pattern.sub(_named_param, route)
    route = splat_pattern.sub(r"([^?]*?)", route)
    return "^" + route + r"(?:\?([\s\S]*))?\Z"


def compile_route(route: Union[str, re.Pattern]) -> CompiledRoute:
    """Compile a route template, passing pre-built patterns through."""
    if isinstance(route, re.Pattern):
        return CompiledRoute(pattern=route)
    return CompiledRoute(pattern=re.compile(_route_to_regex(route)), template=route)


def _decode(value: str) -> str:
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return value


def _extract_parameters(route: CompiledRoute, fragment: str) -> List[Optional[str]]:
    """Return positional parameters of a matching fragment.

    Path parameters are percent-decoded. The last group holds the trailing
    query string and is returned as-is.

    """
    match = route.pattern.search(fragment)
    params = list(match.groups())
    last = len(params) - 1
    return [
        param if param is None or i == last else _decode(param)
        for i, param in enumerate(params)
    ]


class RouteEntry:
    """Bind a compiled route to its handler."""

    def __init__(
        self,
        route: Union[str, re.Pattern],
        handler: Optional[Callable] = None,
        name: str = "",
    ) -> None:
        """Initialize route object."""
        if handler is not None and not callable(handler):
            raise TypeError(f"Route handler must be callable, got: {handler!r}")

        self.route = route
        self.handler = handler
        self.name = name
        self.compiled = compile_route(route)

    def __eq__(self, other) -> bool:
        """Check for equality."""
        return self.__dict__ == other.__dict__

    def __repr__(self) -> str:
        route = self.compiled.template or self.compiled.pattern.pattern
        return f"RouteEntry({route!r}, name={self.name!r})"

    def test(self, fragment: str) -> bool:
        """Return True when the route applies to the fragment."""
        return self.compiled.pattern.search(fragment) is not None

    def extract(self, fragment: str) -> List[Optional[str]]:
        """Return the fragment's parameters for this route."""
        return _extract_parameters(self.compiled, fragment)
