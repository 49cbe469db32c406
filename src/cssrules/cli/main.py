"""cssrules CLI entry point: Click group with subcommands."""

import logging

import click

from cssrules import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssrules")
@click.option("-v", "--verbose", is_flag=True, help="Log parser decisions to stderr.")
def cli(verbose: bool) -> None:
    """cssrules - parse and coerce CSS-style attribute strings."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from cssrules.cli.parse import parse  # noqa: E402
from cssrules.cli.check import check  # noqa: E402

cli.add_command(parse)
cli.add_command(check)
