"""app: dispatch paths to endpoints."""

from enum import Enum

from route_parser import GERMAN, RouteParser, Router

app = Router(name="app", configure_logs=True, debug=True)


class Format(Enum):
    JSON = "json"
    CSV = "csv"


@app.route("orders")
def orders() -> str:
    """Return all orders."""
    return "all orders"


@app.route("orders/{id}")
def order(id: int) -> str:
    """Return one order."""
    return f"order {id}"


@app.route("orders/{id}/export.{fmt}")
def export(id: int, fmt: Format) -> str:
    """Export an order."""
    return f"order {id} as {fmt.value}"


@app.route("users/{first}-{last}")
def user(first: str, last: str, **kwargs) -> str:
    """Return a user."""
    return f"{first} {last} {kwargs}"


if __name__ == "__main__":
    print(app("orders"))
    print(app("orders/42"))
    print(app("orders/42/export.csv"))
    print(app("users/ada-lovelace", verbose=True))

    parser = RouteParser()
    if parser.is_match("price/{amount}", "price/1.234,50"):
        print(parser.get("amount", float, GERMAN))
