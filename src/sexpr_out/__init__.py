# topmark:header:start
#
#   project      : sexpr-out
#   file         : __init__.py
#   file_relpath : src/sexpr_out/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""sexpr-out package.

sexpr-out renders symbolic-expression trees as text in several Lisp-family
dialects (Racket, Scheme, Common Lisp, Emacs Lisp and tree-sitter queries),
either on one line or pretty-printed to fit a line width. It exposes a small
typed API and a ``sexpr-out`` command line.
"""

from __future__ import annotations

from sexpr_out.config.options import MutableOptions, Options
from sexpr_out.constants import SEXPR_OUT_VERSION
from sexpr_out.dialect import LanguageStyle
from sexpr_out.errors import ConfigError, SexprOutError, SinkWriteError
from sexpr_out.layout import Rendered, render
from sexpr_out.value import (
    Atom,
    Boolean,
    Character,
    Keyword,
    List,
    Number,
    String,
    Value,
    ValueKind,
    to_value,
)
from sexpr_out.writer import Writer, to_string, to_string_for

__version__: str = SEXPR_OUT_VERSION

__all__ = [
    "Atom",
    "Boolean",
    "Character",
    "ConfigError",
    "Keyword",
    "LanguageStyle",
    "List",
    "MutableOptions",
    "Number",
    "Options",
    "Rendered",
    "SexprOutError",
    "SinkWriteError",
    "String",
    "Value",
    "ValueKind",
    "Writer",
    "__version__",
    "render",
    "to_string",
    "to_string_for",
    "to_value",
]
