"""cssrules -- parse CSS-style attribute rulesets into typed values."""

__version__ = "0.1.0"

from cssrules.coerce import (  # noqa: E402
    BUILTINS,
    boolean,
    css_unit,
    css_unit3,
    css_unit4,
    css_unit_list,
    deg,
    extrapolate,
    get_coercer,
    list_of,
    number,
    optional,
    percent,
    selector,
    string,
    truthy,
)
from cssrules.config import DEFAULT_CONFIG, RulesetConfig  # noqa: E402
from cssrules.errors import (  # noqa: E402
    CoercionError,
    RulesetError,
    UnknownCoercerError,
    ValidationError,
)
from cssrules.model import (  # noqa: E402
    UNIT_NONE,
    UNIT_UNDEFINED,
    CssUnit,
    Diagnostic,
    Rule,
    Severity,
)
from cssrules.parser import parse_rule, parse_rules, parse_ruleset  # noqa: E402
from cssrules.schema import Coercer, Schema, through_schema  # noqa: E402
from cssrules.validation import validate_or_raise, validate_ruleset  # noqa: E402

__all__ = [
    "__version__",
    # parser
    "parse_rule",
    "parse_rules",
    "parse_ruleset",
    # schema
    "Coercer",
    "Schema",
    "through_schema",
    # coercers
    "number",
    "deg",
    "percent",
    "string",
    "selector",
    "boolean",
    "truthy",
    "css_unit",
    "optional",
    "list_of",
    "css_unit_list",
    "extrapolate",
    "css_unit3",
    "css_unit4",
    "BUILTINS",
    "get_coercer",
    # model
    "Rule",
    "CssUnit",
    "UNIT_NONE",
    "UNIT_UNDEFINED",
    "Diagnostic",
    "Severity",
    # config
    "RulesetConfig",
    "DEFAULT_CONFIG",
    # validation
    "validate_ruleset",
    "validate_or_raise",
    # errors
    "RulesetError",
    "CoercionError",
    "UnknownCoercerError",
    "ValidationError",
]
