import re
from dataclasses import dataclass
from typing import Callable, Optional, Protocol


@dataclass(frozen=True)
class CompiledRoute:
    pattern: re.Pattern[str]
    template: Optional[str] = None


class FragmentSource(Protocol):
    def subscribe(self, callback: Callable[[str], Optional[bool]]) -> None:
        ...
