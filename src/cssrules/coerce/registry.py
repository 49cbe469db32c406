"""Name lookup for the built-in coercers."""

from __future__ import annotations

from typing import Any, Callable

from cssrules.coerce.combinators import css_unit3, css_unit4, css_unit_list
from cssrules.coerce.primitives import (
    boolean,
    css_unit,
    deg,
    number,
    percent,
    selector,
    string,
)
from cssrules.errors import UnknownCoercerError

BUILTINS: dict[str, Callable[[Any], Any]] = {
    "number": number,
    "deg": deg,
    "percent": percent,
    "string": string,
    "selector": selector,
    "boolean": boolean,
    "css_unit": css_unit,
    "css_unit_list": css_unit_list,
    "css_unit3": css_unit3,
    "css_unit4": css_unit4,
}


def get_coercer(name: str) -> Callable[[Any], Any]:
    """Return the built-in coercer registered under *name*."""
    try:
        return BUILTINS[name]
    except KeyError:
        raise UnknownCoercerError(name) from None
