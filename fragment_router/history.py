"""In-memory fragment history and fragment normalization."""

from typing import Callable, List, Optional

from fragment_router.patterns import path_stripper, route_stripper

Subscriber = Callable[[str], Optional[bool]]


def get_fragment(fragment: str) -> str:
    """Strip a leading hash or slash and trailing whitespace."""
    return route_stripper.sub("", fragment)


class FragmentHistory:
    """Track the current fragment and notify subscribers when it changes."""

    def __init__(self, fragment: str = ""):
        """Initialize history at the given fragment."""
        self.fragment: str = get_fragment(fragment)
        self.entries: List[str] = [self.fragment]
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> None:
        """Call callback with each loaded fragment."""
        self._subscribers.append(callback)

    def load_url(self, fragment: Optional[str] = None) -> bool:
        """Load a fragment, stopping at the first subscriber that handles it."""
        if fragment is not None:
            self.fragment = get_fragment(fragment)

        for callback in list(self._subscribers):
            if callback(self.fragment):
                return True
        return False

    def navigate(
        self, fragment: str, trigger: bool = False, replace: bool = False
    ) -> Optional[bool]:
        """Move to a new fragment, loading it when trigger is set."""
        fragment = path_stripper.sub("", get_fragment(fragment))
        if fragment == self.fragment:
            return None

        self.fragment = fragment
        if replace:
            self.entries[-1] = fragment
        else:
            self.entries.append(fragment)

        if trigger:
            return self.load_url()
        return None
