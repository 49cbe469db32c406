"""cssrules model layer -- public type re-exports."""

from cssrules.model.diagnostic import Diagnostic, Severity
from cssrules.model.rule import Rule
from cssrules.model.unit import UNIT_NONE, UNIT_UNDEFINED, CssUnit

__all__ = [
    # rule
    "Rule",
    # unit
    "CssUnit",
    "UNIT_NONE",
    "UNIT_UNDEFINED",
    # diagnostic
    "Severity",
    "Diagnostic",
]
