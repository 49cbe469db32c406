"""Ruleset validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable

from cssrules.config import RulesetConfig
from cssrules.errors import ValidationError
from cssrules.model.diagnostic import Diagnostic
from cssrules.model.rule import Rule
from cssrules.parser import parse_rules
from cssrules.schema import Coercer
from cssrules.validation.rules import ALL_RULES

RuleFunc = Callable[[list[Rule], "Mapping[str, Coercer] | None"], list[Diagnostic]]


def validate_ruleset(
    ruleset: str | None,
    schema: Mapping[str, Coercer] | None = None,
    extra_rules: list[RuleFunc] | None = None,
    config: RulesetConfig | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *ruleset*.

    Schema-dependent rules are skipped when *schema* is None. Returns the
    full list of diagnostics (errors, warnings, info).
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    declarations = parse_rules(ruleset, config)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(declarations, schema))
    return diagnostics


def validate_or_raise(
    ruleset: str | None,
    schema: Mapping[str, Coercer] | None = None,
    extra_rules: list[RuleFunc] | None = None,
    config: RulesetConfig | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate_ruleset(
        ruleset, schema, extra_rules=extra_rules, config=config
    )
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
