"""Dispatch paths to endpoints registered against route templates."""

import inspect
import logging
import sys
import typing
from types import UnionType
from typing import Any, Callable, Dict, List, Optional, Tuple

from route_parser.converters import Culture, parse_value
from route_parser.patterns import placeholder_names
from route_parser.routing import match_route
from route_parser.types import RouteMatch


class RouteNotFound(LookupError):
    """Raised when no registered template matches a path."""


def _target_type(annotation: Any) -> Any:
    if annotation is inspect.Parameter.empty or annotation is Any:
        return str

    # Optional[int] -> int
    if typing.get_origin(annotation) in (typing.Union, UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]

    return annotation


class RouteEntry:
    """Endpoint registered against a route template."""

    def __init__(
        self,
        endpoint: Callable,
        template: str,
        description: Optional[str] = None,
    ) -> None:
        """Initialize route object."""
        self.endpoint = endpoint
        self.template = template
        self.placeholders = placeholder_names(template)
        self.description = description or self.endpoint.__doc__
        self._check_signature()

    def __eq__(self, other) -> bool:
        """Check for equality."""
        if not isinstance(other, RouteEntry):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def _check_signature(self) -> None:
        parameters = inspect.signature(self.endpoint).parameters
        if any(p.kind == inspect.Parameter.VAR_KEYWORD for p in parameters.values()):
            return

        missing = [name for name in self.placeholders if name not in parameters]
        if missing:
            raise ValueError(
                f"Endpoint '{self.endpoint.__name__}' has no parameter for: "
                f"{', '.join(missing)}"
            )


class Router:
    """Route paths to registered endpoints."""

    FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"

    def __init__(
        self,
        name: str = "route_parser",
        configure_logs: bool = False,
        debug: bool = False,
        culture: Optional[Culture] = None,
    ) -> None:
        """Initialize router object."""
        self.name: str = name
        self.routes: List[RouteEntry] = []
        self.debug: bool = debug
        self.culture: Optional[Culture] = culture
        self.log = logging.getLogger(self.name)
        if configure_logs:
            self._configure_logging()

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

    def _add_route(self, template: str, endpoint: Callable, **kwargs) -> RouteEntry:
        description = kwargs.pop("description", None)

        if kwargs:
            raise TypeError(
                f"TypeError: route() got unexpected keyword "
                f"arguments: {', '.join(list(kwargs))}"
            )

        if self._checkroute(template):
            raise ValueError(
                f'Duplicate route detected: "{template}"\n'
                "Route templates must be unique."
            )

        route = RouteEntry(endpoint, template, description)
        self.routes.append(route)
        self.log.debug(f"Registered {template} -> {route.endpoint.__name__}")
        return route

    def _checkroute(self, template: str) -> bool:
        for route in self.routes:
            if template == route.template:
                return True
        return False

    def add_route(self, template: str, endpoint: Callable, **kwargs) -> RouteEntry:
        """Register an endpoint for a template."""
        return self._add_route(template, endpoint, **kwargs)

    def route(self, template: str, **kwargs) -> Callable:
        """Register route."""

        def _register_view(endpoint):
            self._add_route(template, endpoint, **kwargs)
            return endpoint

        return _register_view

    def resolve(self, path: str) -> Optional[Tuple[RouteEntry, RouteMatch]]:
        """Return the first registered route matching ``path``."""
        for route in self.routes:
            params = match_route(route.template, path)
            if params is not None:
                return route, RouteMatch(route.template, path, params)

        return None

    def _get_matching_args(self, route: RouteEntry, match: RouteMatch) -> Dict:
        parameters = inspect.signature(route.endpoint, eval_str=True).parameters

        args: Dict[str, Any] = {}
        for name, value in match.params.items():
            param = parameters.get(name)
            target = _target_type(param.annotation) if param else str
            args[name] = parse_value(
                value, target, self.culture, suppress_errors=False
            )

        return args

    def dispatch(self, path: str, **kwargs) -> Any:
        """Call the endpoint registered for ``path``.

        Placeholder values are converted to the endpoint's annotations; extra
        keyword arguments are passed through.
        """
        self.log.debug(f"Dispatching {path!r}")

        resolved = self.resolve(path)
        if resolved is None:
            error_message = f"No view function for: {path}"
            self.log.error(error_message)
            raise RouteNotFound(error_message)

        route, match = resolved
        function_kwargs = self._get_matching_args(route, match)
        function_kwargs.update(kwargs)

        try:
            return route.endpoint(**function_kwargs)
        except Exception as err:
            self.log.error(str(err))
            raise

    def __call__(self, path: str, **kwargs) -> Any:
        """Dispatch ``path``."""
        return self.dispatch(path, **kwargs)
