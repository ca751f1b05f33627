"""Test patterns functionality."""

from route_parser.patterns import (
    int_expr,
    placeholder_expr,
    placeholder_names,
    timespan_expr,
)


def test_patterns_regex_usage():
    """Test that all patterns are working correctly."""
    # Test placeholder_expr
    matches = list(placeholder_expr.finditer("orders/{id}/test/{a}-{b}"))
    assert [m.group("name") for m in matches] == ["id", "a", "b"]

    # Test int_expr
    assert int_expr.match("-42")
    assert not int_expr.match("4_2")

    # Test timespan_expr
    match = timespan_expr.match("1.02:03:04.5")
    assert match is not None
    groups = match.groupdict()
    assert groups["days"] == "1"
    assert groups["hours"] == "02"
    assert groups["fraction"] == "5"


def test_placeholder_names_order_and_duplicates():
    """Test placeholder_names keeps template order and drops repeats."""
    assert placeholder_names("{b}/{a}-{b}") == ["b", "a"]


def test_placeholder_names_none():
    """Test placeholder_names on a literal template."""
    assert placeholder_names("orders/all") == []
    assert placeholder_names("orders/{}") == []
