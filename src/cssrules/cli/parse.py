"""CLI command: cssrules parse -- parse and optionally coerce a ruleset."""

from __future__ import annotations

import json
import math
from dataclasses import asdict
from typing import Any

import click

from cssrules.cli.fields import field_option
from cssrules.model.unit import CssUnit
from cssrules.parser import parse_ruleset
from cssrules.schema import Schema


def _to_json(value: Any) -> Any:
    """Convert coerced values into JSON-safe data (non-finite floats -> None)."""
    if isinstance(value, CssUnit):
        return _to_json(asdict(value))
    if isinstance(value, dict):
        return {key: _to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


@click.command()
@click.argument("ruleset")
@field_option
def parse(ruleset: str, schema: Schema | None) -> None:
    """Parse RULESET and print it as JSON.

    Without --field the raw attribute strings are printed. With one or more
    --field options only those attributes are printed, coerced to their
    declared types.
    """
    result: dict[str, Any] = (
        parse_ruleset(ruleset) if schema is None else schema(ruleset)
    )
    click.echo(json.dumps(_to_json(result), indent=2, allow_nan=False))
