# topmark:header:start
#
#   project      : sexpr-out
#   file         : test_layout_property.py
#   file_relpath : tests/layout/test_layout_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the layout engine.

Properties:
1) compact output is one line with single spaces between siblings;
2) pretty output only replaces separating spaces by newline + indentation;
3) no line is wider than the line width once the width can hold the widest leaf
   plus one opening and one closing delimiter per nesting level;
4) rendering is deterministic.
"""

from __future__ import annotations

import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sexpr_out.config.options import Options
from sexpr_out.dialect import LanguageStyle, dialect_for
from sexpr_out.layout import render
from sexpr_out.value import List, Value
from tests.strategies_sexpr import leaves_of, nesting, s_leaf, s_list_tree, s_plain_leaf, s_style

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

_BREAK = re.compile(r"\n *")


def reference_flat(value: Value, style: LanguageStyle) -> str:
    """Straightforward single-line rendering used as the oracle."""
    dialect = dialect_for(style)
    if isinstance(value, List):
        return "(" + " ".join(reference_flat(item, style) for item in value.items) + ")"
    return dialect.token(value)


@given(value=s_list_tree(s_leaf), style=s_style)
def test_compact_output_is_the_flat_rendering(value: List, style: LanguageStyle) -> None:
    text = render(value, Options(style=style)).text
    assert text == reference_flat(value, style)
    if style is not LanguageStyle.COMMON_LISP:  # CL strings keep raw newlines
        assert "\n" not in text


@settings(max_examples=200)
@given(
    value=s_list_tree(s_plain_leaf),
    style=s_style,
    width=st.integers(min_value=-2, max_value=60),
    pair=st.booleans(),
)
def test_pretty_output_only_adds_line_breaks(
    value: List, style: LanguageStyle, width: int, pair: bool
) -> None:
    opts = Options(
        pretty_printed=True, line_width=width, style=style, pair_keyword_arguments=pair
    )
    text = render(value, opts).text
    assert _BREAK.sub(" ", text) == reference_flat(value, style)


@settings(max_examples=200)
@given(
    value=s_list_tree(s_plain_leaf),
    style=s_style,
    slack=st.integers(min_value=0, max_value=40),
)
def test_lines_respect_the_width_when_leaves_fit(
    value: List, style: LanguageStyle, slack: int
) -> None:
    dialect = dialect_for(style)
    widest_leaf = max((len(dialect.token(leaf)) for leaf in leaves_of(value)), default=0)
    width = widest_leaf + 2 * nesting(value) + slack
    text = render(value, Options(pretty_printed=True, line_width=width, style=style)).text
    for line in text.split("\n"):
        assert len(line) <= width, (width, text)


@given(value=s_list_tree(s_leaf), width=st.integers(min_value=0, max_value=40))
def test_rendering_is_deterministic(value: List, width: int) -> None:
    opts = Options(pretty_printed=True, line_width=width)
    assert render(value, opts) == render(value, opts)


@given(value=s_list_tree(s_plain_leaf))
def test_unbounded_width_renders_flat(value: List) -> None:
    flat = render(value, Options()).text
    opts = Options(pretty_printed=True, line_width=len(flat))
    assert render(value, opts).text == flat
