# topmark:header:start
#
#   project      : sexpr-out
#   file         : layout.py
#   file_relpath : src/sexpr_out/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Width-aware layout of value trees.

The engine renders a `Value` either flat (one line, siblings separated by a single
space) or, for a list that does not fit in the remaining width, *broken*:

```text
           1         2
 012345678901234567890
 ("hello" "this" "is"
  "a" "lisp" "list")
```

Rules for a broken list:

* the opening delimiter is written and the first child follows it immediately;
  the column where the first child starts is the list's *hanging-indent column*;
* every following child stays on the current line, after one space, if its flat
  rendering still fits there (including any closing delimiters that must follow
  it); otherwise a newline and indentation up to the hanging-indent column are
  written first;
* a child that spans several lines is always followed by a line break, so the
  next sibling lines up with the first child's start column;
* each child is laid out by the same rules from its own start column, so nested
  lists break only as deep as they have to.

Tokens (atoms, strings, ...) are never split; a token wider than the line width
overflows. A line width of zero or less means nothing fits: every list breaks
and every sibling after the first gets its own line.

Columns are tracked exactly. A token that contains a raw newline (Common Lisp
strings keep them verbatim) moves the column to the length of its last line.

The engine writes fragments to any object with a ``write(str)`` method; it does
not catch sink errors (see `sexpr_out.writer` for that).
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from sexpr_out.config.logging import get_logger
from sexpr_out.constants import CHAR_NEWLINE, CHAR_SPACE
from sexpr_out.dialect import dialect_for
from sexpr_out.value import Keyword, List

if TYPE_CHECKING:
    from sexpr_out.config.logging import SexprLogger
    from sexpr_out.config.options import Options
    from sexpr_out.dialect import Dialect
    from sexpr_out.value import Value

logger: SexprLogger = get_logger(__name__)


class TextSink(Protocol):
    """Anything the engine can write text fragments to."""

    def write(self, s: str, /) -> object: ...


@dataclass(frozen=True, slots=True)
class Rendered:
    """Result of `render`.

    Attributes:
        text (str): The rendered text (no trailing newline is added).
        end_column (int): Column just after the last character written.
    """

    text: str
    end_column: int


def advance(column: int, text: str) -> int:
    """Return the column after writing ``text`` starting at ``column``."""
    newline = text.rfind(CHAR_NEWLINE)
    if newline < 0:
        return column + len(text)
    return len(text) - newline - 1


class LayoutEngine:
    """Lays out value trees for one set of `Options`.

    Flat renderings are memoized per node for the lifetime of the engine, keyed by
    object identity. Use a fresh engine per render (as `render` and the writer do)
    so no tree is retained after the call.
    """

    def __init__(self, options: Options) -> None:
        self.options: Options = options
        self.dialect: Dialect = dialect_for(options.style)
        self._flat_cache: dict[int, str] = {}

    # --- measurement ---

    def flat_text(self, value: Value) -> str:
        """Return the single-line rendering of ``value``."""
        if not isinstance(value, List):
            return self.dialect.token(value)
        key = id(value)
        cached = self._flat_cache.get(key)
        if cached is None:
            inner = CHAR_SPACE.join(self.flat_text(item) for item in value.items)
            cached = f"{self.dialect.list_open}{inner}{self.dialect.list_close}"
            self._flat_cache[key] = cached
        return cached

    def flat_width(self, value: Value) -> int:
        """Return the width of ``value`` rendered on one line."""
        return len(self.flat_text(value))

    def fits(self, column: int, width: int, trailing: int = 0) -> bool:
        """Return True if ``width`` columns, plus ``trailing`` ones, fit from ``column``."""
        return column + width + trailing <= self.options.line_width

    # --- rendering ---

    def layout(self, value: Value, sink: TextSink, column: int = 0) -> int:
        """Write ``value`` to ``sink`` starting at ``column``; return the end column."""
        if not self.options.pretty_printed:
            text = self.flat_text(value)
            sink.write(text)
            return advance(column, text)
        end, _ = self._layout(value, sink, column, 0)
        return end

    def _layout(self, value: Value, sink: TextSink, column: int, trailing: int) -> tuple[int, bool]:
        """Lay out ``value``; return (end column, whether a line break was written).

        ``trailing`` is the number of closing delimiters that will follow ``value``
        on the same line because it is the last item of its enclosing lists.
        """
        text = self.flat_text(value)
        if not isinstance(value, List) or not value.items or self.fits(column, len(text), trailing):
            sink.write(text)
            return advance(column, text), False
        logger.trace("break list at column %d (flat width %d)", column, len(text))
        return self._layout_broken(value, sink, column, trailing), True

    def _layout_broken(self, value: List, sink: TextSink, column: int, trailing: int) -> int:
        dialect = self.dialect
        sink.write(dialect.list_open)
        column = advance(column, dialect.list_open)
        indent = column
        groups = self._groups(value.items)
        close_width = len(dialect.list_close)

        multiline = False
        for index, group in enumerate(groups):
            group_trailing = close_width + trailing if index == len(groups) - 1 else 0
            if index > 0:
                width = self._group_width(group)
                if multiline or not self.fits(column + len(CHAR_SPACE), width, group_trailing):
                    logger.trace("new line at column %d, indent %d", column, indent)
                    sink.write(CHAR_NEWLINE + CHAR_SPACE * indent)
                    column = indent
                else:
                    sink.write(CHAR_SPACE)
                    column += len(CHAR_SPACE)
            column, multiline = self._layout_group(group, sink, column, group_trailing)

        sink.write(dialect.list_close)
        return advance(column, dialect.list_close)

    def _layout_group(
        self, group: tuple[Value, ...], sink: TextSink, column: int, trailing: int
    ) -> tuple[int, bool]:
        multiline = False
        for index, item in enumerate(group):
            if index > 0:
                sink.write(CHAR_SPACE)
                column += len(CHAR_SPACE)
            item_trailing = trailing if index == len(group) - 1 else 0
            column, broke = self._layout(item, sink, column, item_trailing)
            multiline = multiline or broke
        return column, multiline

    def _group_width(self, group: tuple[Value, ...]) -> int:
        return sum(self.flat_width(item) for item in group) + len(CHAR_SPACE) * (len(group) - 1)

    def _groups(self, items: tuple[Value, ...]) -> list[tuple[Value, ...]]:
        """Split list items into units that are never separated by a line break.

        Every item is its own unit unless keyword pairing is enabled, in which case
        a keyword is joined with the non-keyword value that follows it.
        """
        if not self.options.pair_keyword_arguments:
            return [(item,) for item in items]
        groups: list[tuple[Value, ...]] = []
        i = 0
        while i < len(items):
            item = items[i]
            if (
                isinstance(item, Keyword)
                and i + 1 < len(items)
                and not isinstance(items[i + 1], Keyword)
            ):
                groups.append((item, items[i + 1]))
                i += 2
            else:
                groups.append((item,))
                i += 1
        return groups


def render(value: Value, options: Options, start_column: int = 0) -> Rendered:
    """Render ``value`` with ``options`` as if the output started at ``start_column``.

    Args:
        value (Value): The tree to render.
        options (Options): Layout and dialect options.
        start_column (int): Column of the first character written; continuation lines
            of broken lists are indented relative to the real columns.

    Returns:
        Rendered: The text and the column just after its last character.
    """
    buffer = io.StringIO()
    end_column = LayoutEngine(options).layout(value, buffer, start_column)
    return Rendered(text=buffer.getvalue(), end_column=end_column)
