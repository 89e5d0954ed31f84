# topmark:header:start
#
#   project      : sexpr-out
#   file         : version.py
#   file_relpath : src/sexpr_out/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""sexpr-out `version` command.

Prints the current sexpr-out version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from sexpr_out.constants import SEXPR_OUT_VERSION


@click.command(
    name="version",
    help="Show the current version of sexpr-out.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of sexpr-out.

    Args:
        as_json (bool): Emit ``{"version": ...}`` instead of plain text.
    """
    if as_json:
        click.echo(json.dumps({"version": SEXPR_OUT_VERSION}))
    else:
        click.echo(SEXPR_OUT_VERSION)
