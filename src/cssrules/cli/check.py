"""CLI command: cssrules check -- validate a ruleset."""

from __future__ import annotations

import sys
from collections import Counter

import click

from cssrules.cli.fields import field_option
from cssrules.model.diagnostic import Severity
from cssrules.schema import Schema
from cssrules.validation import validate_ruleset


@click.command()
@click.argument("ruleset")
@field_option
def check(ruleset: str, schema: Schema | None) -> None:
    """Validate RULESET and print diagnostics.

    Exits with code 0 if no errors are found, or code 1 if there are errors.
    """
    diagnostics = validate_ruleset(ruleset, schema)
    if not diagnostics:
        click.echo("OK: ruleset is valid (0 diagnostics)")
        return

    for diag in diagnostics:
        click.echo(str(diag))

    counts = Counter(d.severity for d in diagnostics)
    click.echo()
    click.echo(
        f"Summary: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info"
    )
    if counts[Severity.ERROR]:
        sys.exit(1)
