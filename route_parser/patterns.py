"""Constants and expressions for route templates."""

import re
from typing import List

PLACEHOLDER_START = "{"
PLACEHOLDER_END = "}"
SEPARATOR = "/"

# Pattern matching expressions
placeholder_expr = re.compile(r"{(?P<name>[^{}]+)}")
int_expr = re.compile(r"^[+-]?\d+$")
timespan_expr = re.compile(
    r"^(?P<sign>-)?(?:(?P<days>\d+)\.)?(?P<hours>\d{1,2}):(?P<minutes>\d{1,2})"
    r"(?::(?P<seconds>\d{1,2})(?:\.(?P<fraction>\d{1,7}))?)?$"
)


def placeholder_names(template: str) -> List[str]:
    """Return the placeholder names of a template, in order and without duplicates."""
    names: List[str] = []
    for match in placeholder_expr.finditer(template):
        name = match.group("name")
        if name not in names:
            names.append(name)
    return names
