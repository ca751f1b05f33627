"""Test types functionality."""

import dataclasses

import pytest

from route_parser.converters import GERMAN
from route_parser.types import RouteMatch


def test_route_match_mapping_access():
    """Test RouteMatch behaves like a read-only mapping."""
    match = RouteMatch("orders/{id}", "orders/123", {"id": "123"})

    assert match["id"] == "123"
    assert "id" in match
    assert "name" not in match
    assert list(match) == ["id"]
    assert len(match) == 1
    assert match.get("name") is None
    assert match.get("name", "n/a") == "n/a"

    with pytest.raises(KeyError):
        match["name"]


def test_route_match_get_as():
    """Test RouteMatch.get_as converts bound values."""
    match = RouteMatch("price/{value}", "price/1.234,5", {"value": "1.234,5"})

    assert match.get_as("value", float, GERMAN) == 1234.5
    assert match.get_as("value", int) is None
    assert match.get_as("missing", int) is None


def test_route_match_frozen():
    """Test that RouteMatch dataclass is frozen (immutable)."""
    match = RouteMatch("orders", "orders")

    assert match.params == {}
    with pytest.raises(dataclasses.FrozenInstanceError):
        match.path = "products"
