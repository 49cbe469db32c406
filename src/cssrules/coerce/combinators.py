"""Combinators for building coercers out of other coercers."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence, TypeVar

from cssrules.coerce.primitives import css_unit, string
from cssrules.model.unit import CssUnit

__all__ = [
    "optional",
    "list_of",
    "css_unit_list",
    "extrapolate",
    "css_unit3",
    "css_unit4",
    "ARITIES",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Index patterns for expanding a short unit list, keyed by arity then count.
# Arity 4 follows the CSS box model (top, right, bottom, left).
_EXPANSIONS: dict[int, dict[int, tuple[int, ...]]] = {
    3: {
        1: (0, 0, 0),
        2: (0, 1, 1),
        3: (0, 1, 2),
    },
    4: {
        1: (0, 0, 0, 0),
        2: (0, 0, 1, 1),
        3: (0, 1, 1, 2),
        4: (0, 1, 2, 3),
    },
}


def optional(coerce: Callable[[Any], T], fallback: Any) -> Callable[[Any], T]:
    """Return a coercer that substitutes *fallback* for an omitted value."""

    def coerce_optional(value: Any = None) -> T:
        return coerce(fallback if value is None else value)

    coerce_optional.__wrapped__ = coerce  # type: ignore[attr-defined]
    return coerce_optional


def list_of(coerce: Callable[[str], T], sep: str = ",") -> Callable[[Any], list[T]]:
    """Return a coercer for *sep*-separated lists.

    Segments are trimmed and empty segments dropped, so an omitted or blank
    value yields an empty list.
    """

    def coerce_list(value: Any = None) -> list[T]:
        parts = (part.strip() for part in string(value).split(sep))
        return [coerce(part) for part in parts if part]

    return coerce_list


css_unit_list = list_of(css_unit, " ")


def extrapolate(units: Sequence[T], arity: int) -> list[T]:
    """Expand 1..*arity* values to exactly *arity* values.

    An empty input yields an empty list. Values beyond *arity* are dropped.
    """
    try:
        patterns = _EXPANSIONS[arity]
    except KeyError:
        raise ValueError(f"Unsupported arity: {arity} (expected 3 or 4)") from None
    if not units:
        return []
    if len(units) > arity:
        logger.warning(
            "Expected at most %d values, got %d; ignoring the rest", arity, len(units)
        )
        units = units[:arity]
    return [units[i] for i in patterns[len(units)]]


def css_unit3(value: Any = None) -> list[CssUnit]:
    """Extrapolate a space-separated list of 1 to 3 CSS units to 3 values."""
    return extrapolate(css_unit_list(value), 3)


def css_unit4(value: Any = None) -> list[CssUnit]:
    """Extrapolate a space-separated list of 1 to 4 CSS units to 4 values.

    Uses the same expansion as CSS shorthands like ``padding: 1px 2px``.
    """
    return extrapolate(css_unit_list(value), 4)


ARITIES: dict[Callable[[Any], list[CssUnit]], int] = {css_unit3: 3, css_unit4: 4}
