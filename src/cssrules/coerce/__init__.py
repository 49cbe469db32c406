"""Coercion functions for raw attribute values."""

from cssrules.coerce.combinators import (
    ARITIES,
    css_unit3,
    css_unit4,
    css_unit_list,
    extrapolate,
    list_of,
    optional,
)
from cssrules.coerce.primitives import (
    boolean,
    css_unit,
    deg,
    number,
    percent,
    selector,
    string,
    truthy,
)
from cssrules.coerce.registry import BUILTINS, get_coercer

__all__ = [
    # primitives
    "number",
    "deg",
    "percent",
    "string",
    "selector",
    "boolean",
    "truthy",
    "css_unit",
    # combinators
    "optional",
    "list_of",
    "css_unit_list",
    "extrapolate",
    "css_unit3",
    "css_unit4",
    "ARITIES",
    # registry
    "BUILTINS",
    "get_coercer",
]
