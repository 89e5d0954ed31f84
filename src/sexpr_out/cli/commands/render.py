# topmark:header:start
#
#   project      : sexpr-out
#   file         : render.py
#   file_relpath : src/sexpr_out/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""sexpr-out `render` command.

Reads a JSON document (a file, or STDIN via ``-``), converts it to a value tree
and writes it as a symbolic expression.

Options are resolved in layers, last wins:

1. packaged defaults,
2. ``sexpr-out.toml`` or ``[tool.sexpr-out]`` in ``pyproject.toml`` of the working
   directory (skipped with ``--no-config``),
3. files given with ``--config``,
4. flags on the command line.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from sexpr_out.cli.cli_types import KeyedEnumParam
from sexpr_out.cli.errors import (
    SexprConfigError,
    SexprDataError,
    SexprFileNotFoundError,
    SexprIOError,
)
from sexpr_out.cli.json_input import JsonInputError, load_json_value
from sexpr_out.config.io import dump_options_toml, load_merged
from sexpr_out.config.logging import get_logger
from sexpr_out.config.options import MutableOptions
from sexpr_out.dialect import LanguageStyle
from sexpr_out.errors import ConfigError, SinkWriteError
from sexpr_out.writer import Writer

if TYPE_CHECKING:
    from sexpr_out.config.logging import SexprLogger
    from sexpr_out.config.options import Options
    from sexpr_out.value import Value

logger: SexprLogger = get_logger(__name__)

STDIN_MARKER = "-"


def resolve_options(
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
    cli_layer: MutableOptions,
    quiet: bool,
) -> Options:
    """Merge configuration layers and CLI flags into frozen `Options`.

    Configuration warnings are echoed to stderr unless ``quiet``.

    Raises:
        SexprConfigError: If an explicit ``--config`` file cannot be loaded.
    """
    try:
        draft: MutableOptions = load_merged(extra_config_files=config_files, no_config=no_config)
    except ConfigError as e:
        raise SexprConfigError(str(e)) from e
    draft = draft.merge_with(cli_layer)

    if not quiet and draft.diagnostics.has_warning():
        ctx = click.get_current_context(silent=True)
        color = bool(ctx.color) if ctx is not None else False
        for diagnostic in draft.diagnostics:
            click.echo(diagnostic.render(color=color), err=True)

    options: Options = draft.freeze()
    logger.info("Effective options: %r (sources: %s)", options, ", ".join(draft.sources))
    return options


def read_input(input_path: str, *, symbols: bool) -> Value:
    """Read and convert the JSON document at ``input_path`` (``-`` for STDIN).

    Raises:
        SexprFileNotFoundError: If the file does not exist.
        SexprIOError: If the file cannot be read.
        SexprDataError: If the document cannot be converted.
    """
    if input_path == STDIN_MARKER:
        text: str = sys.stdin.read()
    else:
        try:
            text = Path(input_path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise SexprFileNotFoundError(f"Input file not found: {input_path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise SexprIOError(f"Cannot read {input_path}: {e}") from e
    try:
        return load_json_value(text, symbols=symbols)
    except JsonInputError as e:
        raise SexprDataError(f"Cannot render {input_path}: {e}") from e


@click.command(
    name="render",
    help="Render a JSON document as a symbolic expression.",
    epilog="""
JSON arrays become lists, strings become strings (atoms with --symbols), numbers
and booleans map to their literals. Objects such as {"atom": "define"},
{"keyword": "key"} or {"char": "a"} select a value kind explicitly.
""",
)
@click.argument("input_path", metavar="INPUT", required=False, default=STDIN_MARKER)
@click.option(
    "--pretty/--compact",
    "pretty",
    default=None,
    help="Break lists that do not fit the line width (default: from config, compact).",
)
@click.option(
    "--width",
    "-w",
    "line_width",
    type=int,
    default=None,
    help="Target line width for --pretty (default: from config, 80).",
)
@click.option(
    "--style",
    "-s",
    "style",
    type=KeyedEnumParam(LanguageStyle),
    default=None,
    help=f"Output dialect ({', '.join(LanguageStyle.keys())}).",
)
@click.option(
    "--pair-keywords/--no-pair-keywords",
    "pair_keywords",
    default=None,
    help="Keep a keyword and its value on the same line when breaking lists.",
)
@click.option(
    "--symbols",
    is_flag=True,
    default=False,
    help="Read plain JSON strings as atoms instead of string literals.",
)
@click.option(
    "--config",
    "-c",
    "config_files",
    multiple=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Extra TOML config file(s), merged after the discovered one.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore sexpr-out.toml / pyproject.toml in the working directory.",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of STDOUT.",
)
@click.option(
    "--dump-options",
    is_flag=True,
    default=False,
    help="Print the effective options as TOML and exit without rendering.",
)
def render_command(
    *,
    input_path: str,
    pretty: bool | None,
    line_width: int | None,
    style: LanguageStyle | None,
    pair_keywords: bool | None,
    symbols: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
    output_path: Path | None,
    dump_options: bool,
) -> None:
    """Render a JSON document as a symbolic expression.

    Args:
        input_path (str): JSON file to read, or ``-`` for STDIN.
        pretty (bool | None): ``--pretty`` / ``--compact``; None inherits the config.
        line_width (int | None): ``--width``; None inherits the config.
        style (LanguageStyle | None): ``--style``; None inherits the config.
        pair_keywords (bool | None): ``--pair-keywords``; None inherits the config.
        symbols (bool): Read JSON strings as atoms.
        config_files (tuple[Path, ...]): Explicit config files.
        no_config (bool): Skip config discovery.
        output_path (Path | None): Output file; STDOUT if None.
        dump_options (bool): Only print the effective options.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)

    cli_layer = MutableOptions(
        pretty_printed=pretty,
        line_width=line_width,
        style=style,
        pair_keyword_arguments=pair_keywords,
        sources=["<command line>"],
    )
    options: Options = resolve_options(
        config_files=config_files,
        no_config=no_config,
        cli_layer=cli_layer,
        quiet=bool(ctx.obj.get("quiet", False)),
    )

    if dump_options:
        click.echo(dump_options_toml(options), nl=False)
        return

    value: Value = read_input(input_path, symbols=symbols)
    writer = Writer(options)

    if output_path is None:
        text: str = writer.write_to_string(value)
        # Compact output carries no newline of its own; end the terminal line.
        click.echo(text, nl=not options.pretty_printed)
        return

    try:
        with output_path.open("wb") as fh:
            writer.write(value, fh)
    except SinkWriteError as e:
        raise SexprIOError(f"Cannot write {output_path}: {e.source}") from e
    except OSError as e:
        raise SexprIOError(f"Cannot write {output_path}: {e}") from e
    logger.info("Wrote %s", output_path)
