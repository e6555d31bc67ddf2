"""fragment_router: compile route templates and dispatch path fragments."""

from fragment_router.errors import RouteHandlerNotFound
from fragment_router.history import FragmentHistory
from fragment_router.router import Router
from fragment_router.routing import RouteEntry, compile_route
from fragment_router.types import CompiledRoute

__version__ = "1.0.0"

__all__ = [
    "CompiledRoute",
    "FragmentHistory",
    "RouteEntry",
    "RouteHandlerNotFound",
    "Router",
    "compile_route",
]
