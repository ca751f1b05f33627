from unittest.mock import Mock

import pytest

from route_parser.router import Router
from route_parser.routing import RouteParser


@pytest.fixture
def parser():
    return RouteParser()


@pytest.fixture
def router():
    return Router(name="test-router")


@pytest.fixture
def funct():
    """Mock function for testing purposes."""
    return Mock(__name__="Mock", return_value="ok")
