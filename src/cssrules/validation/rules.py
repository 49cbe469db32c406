"""Validation rules for parsed rulesets.

Each rule is a function taking the ordered declarations and an optional
schema, and returning a list of Diagnostic objects describing any issues
found. Rules only report; they never change what the parser produces.
"""

from __future__ import annotations

import inspect
from collections import Counter
from collections.abc import Mapping

from cssrules.coerce import ARITIES, css_unit_list
from cssrules.model.diagnostic import Diagnostic, Severity
from cssrules.model.rule import Rule
from cssrules.schema import Coercer


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_declarations(
    rules: list[Rule], schema: Mapping[str, Coercer] | None = None
) -> list[Diagnostic]:
    """Every declaration needs a non-empty key and a ``:`` separator."""
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        if not rule.key:
            diagnostics.append(
                Diagnostic(
                    rule="check_declarations",
                    severity=Severity.ERROR,
                    message="Declaration has an empty attribute name.",
                    key=rule.key,
                    fix="Write the attribute name before the ':'.",
                )
            )
        elif rule.value is None:
            diagnostics.append(
                Diagnostic(
                    rule="check_declarations",
                    severity=Severity.ERROR,
                    message=f"Declaration '{rule.key}' has no ':' separator.",
                    key=rule.key,
                    fix=f"Write it as '{rule.key}: <value>'.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Ambiguity rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_duplicates(
    rules: list[Rule], schema: Mapping[str, Coercer] | None = None
) -> list[Diagnostic]:
    """Repeated keys are legal but only the last declaration is kept."""
    counts = Counter(rule.key for rule in rules if rule.key)
    return [
        Diagnostic(
            rule="check_duplicates",
            severity=Severity.WARNING,
            message=f"Attribute '{key}' is declared {count} times; the last value wins.",
            key=key,
            fix="Remove the earlier declarations.",
        )
        for key, count in counts.items()
        if count > 1
    ]


def check_unknown_keys(
    rules: list[Rule], schema: Mapping[str, Coercer] | None = None
) -> list[Diagnostic]:
    """Keys outside the schema are dropped during coercion."""
    if schema is None:
        return []
    seen: set[str] = set()
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        if not rule.key or rule.key in schema or rule.key in seen:
            continue
        seen.add(rule.key)
        diagnostics.append(
            Diagnostic(
                rule="check_unknown_keys",
                severity=Severity.WARNING,
                message=f"Attribute '{rule.key}' is not in the schema and will be ignored.",
                key=rule.key,
            )
        )
    return diagnostics


def check_arity(
    rules: list[Rule], schema: Mapping[str, Coercer] | None = None
) -> list[Diagnostic]:
    """Fixed-arity unit lists need between 1 and N values.

    Looks through coercers wrapped by ``optional``. Declarations without a
    separator are left to ``check_declarations``.
    """
    if schema is None:
        return []
    effective = {rule.key: rule.value for rule in rules}
    diagnostics: list[Diagnostic] = []
    for key, coerce in schema.items():
        base = inspect.unwrap(coerce)
        arity = next((n for fn, n in ARITIES.items() if fn is base), None)
        if arity is None or effective.get(key) is None:
            continue
        count = len(css_unit_list(effective[key]))
        if count == 0:
            message = f"Attribute '{key}' has no values; expected 1 to {arity}."
        elif count > arity:
            message = (
                f"Attribute '{key}' has {count} values; only the first {arity} are used."
            )
        else:
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_arity",
                severity=Severity.WARNING,
                message=message,
                key=key,
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Informational rules (INFO severity)
# ---------------------------------------------------------------------------


def check_omitted_keys(
    rules: list[Rule], schema: Mapping[str, Coercer] | None = None
) -> list[Diagnostic]:
    """Schema keys missing from the ruleset fall back to their defaults."""
    if schema is None:
        return []
    present = {rule.key for rule in rules}
    return [
        Diagnostic(
            rule="check_omitted_keys",
            severity=Severity.INFO,
            message=f"Attribute '{key}' is omitted; its coercer default applies.",
            key=key,
        )
        for key in schema
        if key not in present
    ]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_declarations,
    check_duplicates,
    check_unknown_keys,
    check_arity,
    check_omitted_keys,
]
