# topmark:header:start
#
#   project      : sexpr-out
#   file         : test_escape_roundtrip_property.py
#   file_relpath : tests/dialect/test_escape_roundtrip_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests: escaping is reversible in every dialect.

For arbitrary text (quotes, backslashes, bars, whitespace, control and
invisible characters) ``unescape(escape(text)) == text`` for both symbols and
string literals.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings

from sexpr_out.dialect import (
    LanguageStyle,
    escape_atom,
    escape_string,
    is_nonprintable,
    unescape_atom,
    unescape_string,
)
from tests.strategies_sexpr import s_style, s_tricky_text

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(max_examples=300)
@given(text=s_tricky_text, style=s_style)
def test_string_escape_roundtrip(text: str, style: LanguageStyle) -> None:
    """String literals decode back to their contents."""
    token = escape_string(text, style)
    assert token.startswith('"') and token.endswith('"')
    assert unescape_string(token, style) == text


@settings(max_examples=300)
@given(text=s_tricky_text, style=s_style)
def test_atom_escape_roundtrip(text: str, style: LanguageStyle) -> None:
    """Symbol tokens decode back to the symbol text."""
    token = escape_atom(text, style)
    assert unescape_atom(token, style) == text


@given(text=s_tricky_text, style=s_style)
def test_escaped_strings_are_single_line_where_the_dialect_allows(
    text: str, style: LanguageStyle
) -> None:
    """Only Common Lisp keeps raw newlines inside string literals."""
    token = escape_string(text, style)
    if style is not LanguageStyle.COMMON_LISP:
        assert "\n" not in token


@given(text=s_tricky_text)
def test_tree_sitter_strings_escape_every_nonprintable(text: str) -> None:
    token = escape_string(text, LanguageStyle.TREE_SITTER)
    assert not any(is_nonprintable(c) for c in token)
