# topmark:header:start
#
#   project      : sexpr-out
#   file         : io.py
#   file_relpath : src/sexpr_out/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load writer options from TOML configuration sources.

This module provides I/O helpers for reading options from:
- the packaged default TOML resource (``sexpr-out-default.toml``),
- ``sexpr-out.toml`` in the working directory, or
- the ``[tool.sexpr-out]`` table of ``pyproject.toml``.

Parsing is done with `tomlkit`; parsed tables are turned into `MutableOptions`
layers and merged with last-wins semantics:

    defaults -> discovered project file -> explicit ``--config`` files

CLI flags are applied on top of the result by the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from sexpr_out.config.logging import get_logger
from sexpr_out.config.options import MutableOptions, Options
from sexpr_out.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    PROJECT_CONFIG_NAME,
    PYPROJECT_CONFIG_NAME,
    PYPROJECT_TOOL_TABLE,
)
from sexpr_out.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sexpr_out.config.logging import SexprLogger

logger: SexprLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.
        source (str): Name used in error messages.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If ``text`` is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {source}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (UTF-8).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    return parse_toml_text(text, source=str(path))


def extract_options_table(data: Mapping[str, Any], path: Path) -> Mapping[str, Any] | None:
    """Return the options table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.sexpr-out]`` (None if absent); for any
    other file it is the whole document.
    """
    if path.name != PYPROJECT_CONFIG_NAME:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, Mapping) else None
    return cast("Mapping[str, Any]", table) if isinstance(table, Mapping) else None


def options_from_toml_file(path: Path) -> MutableOptions:
    """Load an options layer from a single TOML file.

    Args:
        path (Path): ``sexpr-out.toml``, ``pyproject.toml`` or any TOML file holding
            option keys at top level.

    Returns:
        MutableOptions: The parsed layer; empty when a ``pyproject.toml`` has no
            ``[tool.sexpr-out]`` table.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    logger.debug("Loading options from %s", path)
    table = extract_options_table(load_toml_dict(path), path)
    if table is None:
        layer = MutableOptions(sources=[str(path)])
        layer.diagnostics.add_warning(f"[tool.{PYPROJECT_TOOL_TABLE}] table missing in {path}")
        return layer
    return MutableOptions.from_toml_table(table, source=str(path))


def load_default_config_toml_text() -> str:
    """Return the packaged default configuration as TOML text.

    Falls back to a document generated from the built-in `Options` defaults when
    the packaged resource cannot be read.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        return resource.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config %s: %s", resource, exc)
        return dump_options_toml(Options())


def load_default_options() -> MutableOptions:
    """Return the packaged defaults as the base options layer."""
    table = parse_toml_text(load_default_config_toml_text(), source=DEFAULT_TOML_CONFIG_NAME)
    return MutableOptions.from_toml_table(table, source=DEFAULT_TOML_CONFIG_NAME)


def discover_config_file(start: Path | None = None) -> Path | None:
    """Return the project configuration file for ``start`` (default: CWD), if any.

    ``sexpr-out.toml`` wins over ``pyproject.toml``; the latter is only used when it
    contains a ``[tool.sexpr-out]`` table. Unreadable candidates are skipped.
    """
    anchor: Path = (start or Path.cwd()).resolve()
    if anchor.is_file():
        anchor = anchor.parent

    candidate: Path = anchor / PROJECT_CONFIG_NAME
    if candidate.is_file():
        logger.debug("Discovered config file: %s", candidate)
        return candidate

    pyproject: Path = anchor / PYPROJECT_CONFIG_NAME
    if pyproject.is_file():
        try:
            data: TomlTable = load_toml_dict(pyproject)
        except ConfigError as e:
            logger.debug("Ignoring unreadable %s: %s", pyproject, e)
            return None
        if extract_options_table(data, pyproject) is not None:
            logger.debug("Discovered config table in %s", pyproject)
            return pyproject
    return None


def load_merged(
    *,
    start: Path | None = None,
    extra_config_files: Iterable[Path] | None = None,
    no_config: bool = False,
) -> MutableOptions:
    """Discover and merge configuration layers into a `MutableOptions` draft.

    Merge order (lowest to highest precedence):
        1) Packaged defaults
        2) The project file found by `discover_config_file` (unless ``no_config``)
        3) Files passed explicitly (``--config``), in the given order

    A discovered file that turns out to be broken is reported as a warning and
    skipped; an explicitly requested one raises.

    Args:
        start (Path | None): Discovery anchor; the working directory if None.
        extra_config_files (Iterable[Path] | None): Explicit config files.
        no_config (bool): Skip project discovery.

    Returns:
        MutableOptions: The merged draft, ready to be frozen or further edited.

    Raises:
        ConfigError: If an explicit config file cannot be loaded.
    """
    draft: MutableOptions = load_default_options()

    if not no_config:
        discovered: Path | None = discover_config_file(start)
        if discovered is not None:
            try:
                draft = draft.merge_with(options_from_toml_file(discovered))
            except ConfigError as e:
                draft.diagnostics.add_warning(f"Ignoring {discovered}: {e}")

    for extra in extra_config_files or ():
        draft = draft.merge_with(options_from_toml_file(Path(extra)))

    logger.debug("Merged options from sources: %s", draft.sources)
    return draft


def dump_options_toml(options: Options | MutableOptions, *, for_pyproject: bool = False) -> str:
    """Render options as a TOML document.

    Args:
        options (Options | MutableOptions): Options to render. For a draft only
            explicitly set keys are written.
        for_pyproject (bool): Nest the keys under ``[tool.sexpr-out]``.

    Returns:
        str: TOML document text.
    """
    table: TomlTable = options.to_toml_table()
    if for_pyproject:
        doc: tomlkit.TOMLDocument = tomlkit.document()
        tool = tomlkit.table(is_super_table=True)
        tool.add(PYPROJECT_TOOL_TABLE, table)
        doc.add("tool", tool)
        return tomlkit.dumps(doc)
    return tomlkit.dumps(table)
