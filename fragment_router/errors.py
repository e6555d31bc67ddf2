"""Router exceptions."""


class RouteHandlerNotFound(LookupError):
    """A matched route has no callable handler bound to its name."""

    def __init__(self, name: str) -> None:
        """Initialize with the unresolved route name."""
        self.name = name
        super().__init__(f"No handler found for route: {name!r}")
