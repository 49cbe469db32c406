from cssrules.parser.ruleset import parse_rule, parse_rules, parse_ruleset

__all__ = ["parse_rule", "parse_rules", "parse_ruleset"]
