"""Error types raised by cssrules.

Parsing and the built-in coercers never raise on malformed input; these
errors cover caller mistakes (a failing custom coercer, an unknown coercer
name) and explicit validation requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssrules.model.diagnostic import Diagnostic


class RulesetError(Exception):
    """Base class for all cssrules errors."""


class CoercionError(RulesetError):
    """Raised when a schema coercer fails on a raw attribute value."""

    def __init__(self, key: str, value: str | None) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Could not coerce attribute {key!r} from {value!r}")


class UnknownCoercerError(RulesetError, KeyError):
    """Raised when a built-in coercer is looked up by an unknown name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown coercer: {self.name!r}"


class ValidationError(RulesetError):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )
