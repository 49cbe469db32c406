from cssrules.validation.rules import ALL_RULES
from cssrules.validation.validator import RuleFunc, validate_or_raise, validate_ruleset

__all__ = ["ALL_RULES", "RuleFunc", "validate_ruleset", "validate_or_raise"]
