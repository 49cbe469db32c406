from __future__ import annotations

from dataclasses import dataclass

TRUTHY_TOKENS = frozenset({"true", "1", "yes", "on"})


@dataclass(frozen=True)
class RulesetConfig:
    declaration_separator: str = ";"
    key_separator: str = ":"


DEFAULT_CONFIG = RulesetConfig()
