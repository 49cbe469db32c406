"""Shared ``--field NAME=COERCER`` option for CLI commands."""

from __future__ import annotations

import click

from cssrules.coerce import BUILTINS, get_coercer
from cssrules.errors import UnknownCoercerError
from cssrules.schema import Schema


def _build_schema(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> Schema | None:
    if not values:
        return None
    fields = {}
    for item in values:
        name, sep, coercer_name = item.partition("=")
        name, coercer_name = name.strip(), coercer_name.strip()
        if not sep or not name or not coercer_name:
            raise click.BadParameter(f"expected NAME=COERCER, got {item!r}")
        try:
            fields[name] = get_coercer(coercer_name)
        except UnknownCoercerError as exc:
            choices = ", ".join(sorted(BUILTINS))
            raise click.BadParameter(f"{exc} (choose from {choices})") from exc
    return Schema(fields)


field_option = click.option(
    "--field",
    "-f",
    "schema",
    multiple=True,
    metavar="NAME=COERCER",
    callback=_build_schema,
    help="Declare a schema attribute and its built-in coercer. Repeatable.",
)
