"""route_parser: match route templates like "orders/{id}" and extract values."""

from route_parser.converters import (
    GERMAN,
    INVARIANT,
    ConversionError,
    Culture,
    parse_value,
)
from route_parser.patterns import placeholder_names
from route_parser.router import RouteEntry, RouteNotFound, Router
from route_parser.routing import RouteParser, match_route
from route_parser.types import RouteMatch

__version__ = "1.0.0"

__all__ = [
    "GERMAN",
    "INVARIANT",
    "ConversionError",
    "Culture",
    "RouteEntry",
    "RouteMatch",
    "RouteNotFound",
    "RouteParser",
    "Router",
    "match_route",
    "parse_value",
    "placeholder_names",
]
