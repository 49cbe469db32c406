"""Built-in coercion primitives.

Every coercer accepts a raw attribute value, or ``None`` when the attribute
was omitted, and returns a typed value without raising. Numeric coercers
return ``nan`` for input that does not start with a number.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Iterable

from cssrules.config import TRUTHY_TOKENS
from cssrules.model.unit import UNIT_NONE, UNIT_UNDEFINED, CssUnit

__all__ = [
    "number",
    "deg",
    "percent",
    "string",
    "selector",
    "boolean",
    "truthy",
    "css_unit",
]

# Leading numeric prefix, as accepted by JavaScript's parseFloat.
_NUMBER_RE = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)
_UNIT_VALUE_RE = re.compile(r"^[0-9.]+")
_UNIT_TOKEN_RE = re.compile(r"[a-zA-Z%]+\Z")


def number(value: Any = None) -> float:
    """Parse the leading numeric prefix of *value* as a float."""
    if value is None:
        return math.nan
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    match = _NUMBER_RE.match(str(value).lstrip())
    if match is None:
        return math.nan
    return float(match.group(0))


def deg(value: Any = None) -> float:
    """Parse an angle like ``"370deg"`` and normalize it into [0, 360)."""
    if value is None:
        return math.nan
    return number(str(value).replace("deg", "", 1)) % 360


def percent(value: Any = None) -> float:
    """Parse ``"50%"`` as ``50.0``; scaling is left to the caller."""
    if value is None:
        return math.nan
    return number(str(value).replace("%", "", 1))


def string(value: Any = None) -> str:
    return "" if value is None else str(value)


def selector(value: Any = None) -> str:
    return "*" if value is None else str(value)


def truthy(tokens: Iterable[str]) -> Callable[[Any], bool]:
    """Build a boolean coercer that accepts only *tokens* as true."""
    allowed = frozenset(token.lower() for token in tokens)

    def coerce(value: Any = None) -> bool:
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() in allowed

    return coerce


_default_truthy = truthy(TRUTHY_TOKENS)


def boolean(value: Any = None) -> bool:
    """True for ``true``, ``1``, ``yes`` or ``on`` (any case); False otherwise."""
    return _default_truthy(value)


def css_unit(value: Any = None) -> CssUnit:
    """Split a value like ``"10px"`` into its number and unit token.

    A value without a leading number is ``CssUnit(None, "undefined")``; a
    number without a trailing unit is ``CssUnit(n, "none")``.
    """
    text = string(value)
    raw = _UNIT_VALUE_RE.search(text)
    if raw is None:
        return CssUnit(value=None, unit=UNIT_UNDEFINED)
    unit = _UNIT_TOKEN_RE.search(text)
    if unit is None:
        return CssUnit(value=number(raw.group(0)), unit=UNIT_NONE)
    return CssUnit(value=number(raw.group(0)), unit=unit.group(0))
