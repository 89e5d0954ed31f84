# topmark:header:start
#
#   project      : sexpr-out
#   file         : styles.py
#   file_relpath : src/sexpr_out/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""sexpr-out `styles` command.

Lists the output dialects with the names and aliases accepted by ``--style``
and by the ``style`` configuration key.
"""

from __future__ import annotations

import click

from sexpr_out.dialect import DEFAULT_STYLE, LanguageStyle, dialect_for
from sexpr_out.value import Atom, Boolean, Keyword, List, String


def _sample_line(style: LanguageStyle) -> str:
    dialect = dialect_for(style)
    sample = List((Atom("f"), Keyword("key"), String("a b"), Boolean(True)))
    inner = " ".join(dialect.token(item) for item in sample.items)
    return f"{dialect.list_open}{inner}{dialect.list_close}"


@click.command(
    name="styles",
    help="List the supported output dialects.",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show aliases and a sample rendering for each dialect.",
)
def styles_command(*, show_details: bool = False) -> None:
    """List supported output dialects.

    Args:
        show_details (bool): Show aliases and a sample rendering.
    """
    for style in LanguageStyle:
        marker = " (default)" if style is DEFAULT_STYLE else ""
        if not show_details:
            click.echo(f"{style.key}{marker}")
            continue
        click.echo(click.style(f"{style.key}{marker}", bold=True) + f"  {style.label}")
        if style.aliases:
            click.echo(f"    aliases: {', '.join(style.aliases)}")
        click.echo(f"    sample:  {_sample_line(style)}")
