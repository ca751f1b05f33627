"""String to value conversion for route parameters."""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Pattern
from uuid import UUID

from route_parser.patterns import int_expr, timespan_expr

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


class ConversionError(ValueError):
    """Raised when a string cannot be converted to the requested type."""


@dataclass(frozen=True)
class Culture:
    """Locale context used when parsing numbers and dates.

    ``date_format`` is a ``strptime`` format; ``None`` means ISO 8601.
    """

    name: str
    decimal_separator: str = "."
    group_separator: str = ","
    date_format: Optional[str] = None

    @classmethod
    def invariant(cls) -> "Culture":
        """Return the culture-independent context."""
        return cls("invariant")


INVARIANT = Culture.invariant()
GERMAN = Culture(
    "de-DE", decimal_separator=",", group_separator=".", date_format="%d.%m.%Y"
)


def _number_expr(culture: Culture, fraction: bool) -> Pattern[str]:
    group = re.escape(culture.group_separator)
    digits = rf"(?:\d{{1,3}}(?:{group}\d{{3}})+|\d+)" if group else r"\d+"
    if fraction:
        decimal = re.escape(culture.decimal_separator)
        digits += rf"(?:{decimal}\d+)?(?:[eE][+-]?\d+)?"
    return re.compile(rf"^[+-]?{digits}$")


def _normalize_number(text: str, culture: Culture, fraction: bool = True) -> str:
    text = text.strip()
    if not _number_expr(culture, fraction).match(text):
        raise ValueError(f"invalid number for culture {culture.name}: {text!r}")
    if culture.group_separator:
        text = text.replace(culture.group_separator, "")
    if culture.decimal_separator != ".":
        text = text.replace(culture.decimal_separator, ".")
    return text


def _to_int(text: str, culture: Culture) -> int:
    return int(_normalize_number(text, culture, fraction=False))


def _to_bool(text: str) -> bool:
    value = text.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean literal: {text!r}")


def _to_timedelta(text: str) -> timedelta:
    text = text.strip()
    if int_expr.match(text):
        return timedelta(days=int(text))

    match = timespan_expr.match(text)
    if not match:
        raise ValueError(f"invalid time span: {text!r}")

    parts = match.groupdict()
    hours = int(parts["hours"])
    minutes = int(parts["minutes"])
    seconds = int(parts["seconds"] or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValueError(f"time span component out of range: {text!r}")

    fraction = parts["fraction"] or "0"
    microseconds = int(fraction.ljust(6, "0")[:6])
    delta = timedelta(
        days=int(parts["days"] or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=microseconds,
    )
    return -delta if parts["sign"] else delta


def _to_datetime(text: str, culture: Culture) -> datetime:
    text = text.strip()
    if culture.date_format:
        return datetime.strptime(text, culture.date_format)
    return datetime.fromisoformat(text)


def _to_date(text: str, culture: Culture) -> date:
    text = text.strip()
    if culture.date_format:
        return datetime.strptime(text, culture.date_format).date()
    return date.fromisoformat(text)


def _to_enum(text: str, enum_type: Any) -> Enum:
    text = text.strip()
    members = enum_type.__members__
    if text in members:
        return members[text]

    lowered = text.lower()
    for name, member in members.items():
        if name.lower() == lowered:
            return member

    for member in enum_type:
        if str(member.value) == text:
            return member

    raise ValueError(f"{text!r} is not a valid {enum_type.__name__}")


def _convert(text: str, type_: Any, culture: Culture) -> Any:
    if type_ is str:
        return text
    if type_ is bool:
        return _to_bool(text)
    if type_ is int:
        return _to_int(text, culture)
    if type_ is float:
        return float(_normalize_number(text, culture))
    if type_ is Decimal:
        return Decimal(_normalize_number(text, culture))
    if type_ is UUID:
        return UUID(text.strip())
    if type_ is datetime:
        return _to_datetime(text, culture)
    if type_ is date:
        return _to_date(text, culture)
    if type_ is timedelta:
        return _to_timedelta(text)
    if isinstance(type_, type) and issubclass(type_, Enum):
        return _to_enum(text, type_)

    raise ConversionError(f"Unsupported conversion target: {type_!r}")


def parse_value(
    text: Optional[str],
    type_: Any,
    culture: Optional[Culture] = None,
    suppress_errors: bool = True,
) -> Any:
    """Convert ``text`` to ``type_``.

    Returns ``None`` when ``text`` is ``None``. When the conversion fails the
    result is ``None`` if ``suppress_errors`` is set, otherwise a
    ``ConversionError`` is raised.
    """
    if text is None:
        return None

    culture = culture or INVARIANT
    try:
        return _convert(text, type_, culture)
    except ConversionError:
        if not suppress_errors:
            raise
        logger.debug(f"No converter for {type_!r}")
    except (ValueError, TypeError, ArithmeticError) as err:
        if not suppress_errors:
            name = getattr(type_, "__name__", repr(type_))
            raise ConversionError(f"Cannot convert {text!r} to {name}") from err
        logger.debug(f"Suppressed conversion error for {text!r}: {err}")

    return None
