# topmark:header:start
#
#   project      : sexpr-out
#   file         : main.py
#   file_relpath : src/sexpr_out/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the sexpr-out CLI.

Group-level options (verbosity) are initialized once and placed into
``ctx.obj``; subcommands read them from there.
"""

from __future__ import annotations

import click

from sexpr_out.cli.commands.render import render_command
from sexpr_out.cli.commands.styles import styles_command
from sexpr_out.cli.commands.version import version_command
from sexpr_out.cli.options import common_verbose_options, resolve_verbosity
from sexpr_out.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (verbosity and logging) on the Click context.

    ``SEXPR_OUT_LOG_LEVEL`` wins over ``-v`` / ``-q`` so a developer can force
    TRACE output without touching the command line.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int | None = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int | None = level_env if level_env is not None else level_cli
    setup_logging(level=level)

    ctx.obj["log_level"] = level
    ctx.obj["verbosity_level"] = verbose
    ctx.obj["quiet"] = quiet > 0


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render symbolic expressions in Lisp-family dialects.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the sexpr-out CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'sexpr-out render [INPUT]' to render a JSON document.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(styles_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
