from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

from route_parser.converters import Culture, parse_value


@dataclass(frozen=True)
class RouteMatch:
    template: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)

    def __getitem__(self, key: str) -> str:
        return self.params[key]

    def __contains__(self, key: object) -> bool:
        return key in self.params

    def __iter__(self) -> Iterator[str]:
        return iter(self.params)

    def __len__(self) -> int:
        return len(self.params)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value bound to ``key`` or ``default``."""
        return self.params.get(key, default)

    def get_as(
        self,
        key: str,
        type_: Any,
        culture: Optional[Culture] = None,
        suppress_errors: bool = True,
    ) -> Any:
        """Return the value bound to ``key`` converted to ``type_``."""
        return parse_value(self.params.get(key), type_, culture, suppress_errors)
