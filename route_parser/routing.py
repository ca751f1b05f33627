"""Route template matching and parameter extraction."""

import logging
from typing import Any, Dict, Optional

from route_parser.converters import Culture, parse_value
from route_parser.patterns import PLACEHOLDER_END, PLACEHOLDER_START, SEPARATOR
from route_parser.types import RouteMatch

logger = logging.getLogger(__name__)


def _find(text: str, char: Optional[str], start: int) -> int:
    if char is None:
        return len(text)
    idx = text.find(char, start)
    return idx if idx != -1 else len(text)


def match_route(template: str, path: str) -> Optional[Dict[str, str]]:
    """Match ``path`` against ``template`` like "orders/{id}/clone".

    Returns the placeholder values when the path matches, ``None`` otherwise.
    A placeholder value runs up to the character following the placeholder in
    the template or the next "/", whichever comes first.
    """
    params: Dict[str, str] = {}

    m_idx = 0
    r_idx = 0
    while r_idx < len(path):
        if m_idx >= len(template):
            break

        m = template[m_idx]
        r = path[r_idx]

        # start of variable
        if m == PLACEHOLDER_START:
            end = template.find(PLACEHOLDER_END, m_idx)
            if end == -1:
                logger.debug(f"Unterminated placeholder in {template!r}")
                return None

            name = template[m_idx + 1 : end]

            # next char after '}' or None if end of template
            next_char = template[end + 1] if end + 1 < len(template) else None
            m_idx = end + 1

            if next_char == PLACEHOLDER_START:
                logger.debug(f"Adjacent placeholders in {template!r}")
                return None

            # value ends at next_char or '/'
            r_end = min(_find(path, next_char, r_idx), _find(path, SEPARATOR, r_idx))
            params[name] = path[r_idx:r_end]
            r_idx = r_end

            if m_idx == len(template) and r_idx == len(path):
                return params

            # the stop character is skipped on both sides, not compared
            m_idx += 1
            r_idx += 1
            continue

        if m_idx + 1 == len(template) and r_idx + 1 == len(path):
            return params

        if m != r:
            logger.debug(f"{path!r} differs from {template!r} at {r_idx}")
            return None

        m_idx += 1
        r_idx += 1

    return None


class RouteParser:
    """Match routes and keep the values of the last match.

    An instance holds the state of its last match and must not be shared
    between threads; use ``match_route`` or one parser per thread instead.
    """

    def __init__(self) -> None:
        """Initialize parser object."""
        self._params: Dict[str, str] = {}

    def __getitem__(self, key: str) -> Optional[str]:
        """Return the value of a route argument or None."""
        return self._params.get(key)

    @property
    def params(self) -> Dict[str, str]:
        """Return a copy of the values of the last match."""
        return dict(self._params)

    def match(self, template: str, path: str) -> Optional[RouteMatch]:
        """Match ``path`` against ``template`` and return the result."""
        params = match_route(template, path)
        if params is None:
            self._params = {}
            return None

        self._params = params
        return RouteMatch(template, path, dict(params))

    def is_match(self, template: str, path: str) -> bool:
        """Return True if the route matches; values can be read afterwards."""
        return self.match(template, path) is not None

    def get(
        self,
        key: str,
        type_: Any,
        culture: Optional[Culture] = None,
        suppress_errors: bool = True,
    ) -> Any:
        """Return the value of a route argument converted to ``type_``."""
        return parse_value(self[key], type_, culture, suppress_errors)
