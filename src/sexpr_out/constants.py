# topmark:header:start
#
#   project      : sexpr-out
#   file         : constants.py
#   file_relpath : src/sexpr_out/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""sexpr-out constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    SEXPR_OUT_VERSION: str = get_version("sexpr-out")
except PackageNotFoundError:  # running from a source checkout
    SEXPR_OUT_VERSION = "0.0.0"

# Name of the bundled default config inside the package `sexpr_out.config`:
DEFAULT_TOML_CONFIG_PACKAGE: Final[str] = "sexpr_out.config"
DEFAULT_TOML_CONFIG_NAME: Final[str] = "sexpr-out-default.toml"

# Config discovery in the working directory
PROJECT_CONFIG_NAME: Final[str] = "sexpr-out.toml"
PYPROJECT_CONFIG_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_TABLE: Final[str] = "sexpr-out"

DEFAULT_LINE_WIDTH: Final[int] = 80

CHAR_LIST_OPEN: Final[str] = "("
CHAR_LIST_CLOSE: Final[str] = ")"
CHAR_SPACE: Final[str] = " "
CHAR_NEWLINE: Final[str] = "\n"
