"""Hand-written parser for CSS-style attribute rulesets.

Syntax example:
    fill: red; stroke-width: 2px; transform-origin: 50% 50%;

Parsing never fails: a declaration without a ``:`` keeps its key with a
``None`` value and the remaining declarations still parse.
"""

from __future__ import annotations

import logging

from cssrules.config import DEFAULT_CONFIG, RulesetConfig
from cssrules.model.rule import Rule

__all__ = ["parse_rule", "parse_rules", "parse_ruleset"]

logger = logging.getLogger(__name__)


def parse_rule(rule: str, key_separator: str = ":") -> tuple[str, str | None]:
    """Split a single declaration into a trimmed ``(key, value)`` pair.

    Only the first separator splits, so ``"time: 12:30"`` yields
    ``("time", "12:30")``. A declaration with no separator yields
    ``(key, None)``.
    """
    key, sep, value = rule.partition(key_separator)
    if not sep:
        logger.debug("Declaration without %r separator: %r", key_separator, rule)
        return key.strip(), None
    return key.strip(), value.strip()


def parse_rules(ruleset: str | None, config: RulesetConfig | None = None) -> list[Rule]:
    """Parse a ruleset into declarations, keeping source order and duplicates."""
    config = config or DEFAULT_CONFIG
    rules: list[Rule] = []
    for segment in (ruleset or "").split(config.declaration_separator):
        if not segment.strip():
            continue
        key, value = parse_rule(segment, config.key_separator)
        rules.append(Rule(key=key, value=value))
    return rules


def parse_ruleset(
    ruleset: str | None, config: RulesetConfig | None = None
) -> dict[str, str | None]:
    """Parse a ruleset string into a mapping of attribute name to raw value.

    Later declarations of the same key overwrite earlier ones.
    """
    parsed: dict[str, str | None] = {}
    for rule in parse_rules(ruleset, config):
        if rule.key in parsed:
            logger.debug("Duplicate key %r overwritten with %r", rule.key, rule.value)
        parsed[rule.key] = rule.value
    return parsed
