# topmark:header:start
#
#   project      : sexpr-out
#   file         : test_writer.py
#   file_relpath : tests/writer/test_writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the writer façade: entry points, sinks and sink failures."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any

import pytest

from sexpr_out import (
    Atom,
    LanguageStyle,
    Options,
    SexprOutError,
    SinkWriteError,
    Writer,
    to_string,
    to_string_for,
)
from sexpr_out.value import Boolean, Keyword, List, list_of
from sexpr_out.writer import is_binary_sink
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

HELLO = list_of("hello", "this", "is", "a", "lisp", "list")


class FailingSink:
    """Text sink that accepts ``budget`` writes and then fails."""

    def __init__(self, budget: int, exc: BaseException) -> None:
        self.budget = budget
        self.exc = exc
        self.parts: list[str] = []

    def write(self, s: str) -> int:
        if self.budget <= 0:
            raise self.exc
        self.budget -= 1
        self.parts.append(s)
        return len(s)


class ShortWriteRawSink(io.RawIOBase):
    """Unbuffered sink that accepts at most ``limit`` bytes per call."""

    def __init__(self, limit: int, result: int | None = None) -> None:
        super().__init__()
        self.limit = limit
        self.result = result
        self.data = bytearray()
        self.calls = 0

    def writable(self) -> bool:
        return True

    def write(self, b: Any) -> int | None:
        self.calls += 1
        if self.limit <= 0:
            return self.result
        chunk = bytes(b[: self.limit])
        self.data.extend(chunk)
        return len(chunk)


def test_default_writer_is_compact_racket() -> None:
    writer = Writer()
    assert writer.options == Options()
    assert writer.write_to_string([Atom("define"), Atom("x"), 42]) == "(define x 42)"


def test_pretty_output_ends_with_a_newline() -> None:
    writer = Writer().pretty_printed().with_line_width(20)
    assert writer.write_to_string(HELLO) == '("hello" "this" "is"\n "a" "lisp" "list")\n'


def test_compact_output_has_no_trailing_newline() -> None:
    assert Writer().write_to_string(HELLO) == '("hello" "this" "is" "a" "lisp" "list")'


def test_builders_return_new_writers() -> None:
    base = Writer()
    styled = base.with_style(LanguageStyle.SCHEME)
    assert base.options.style is LanguageStyle.RACKET
    assert styled.options.style is LanguageStyle.SCHEME
    assert base.pretty_printed().pretty_printed(False).options == base.options
    opts = Options(line_width=5)
    assert base.with_options(opts).options is opts


def test_plain_data_is_converted() -> None:
    assert to_string(["a", [1, 2.5], True]) == '("a" (1 2.5) #t)'


def test_to_string_for_uses_the_style() -> None:
    value = [Atom("f"), Keyword("k"), Boolean(False)]
    assert to_string_for(value, LanguageStyle.COMMON_LISP) == "(f :k nil)"
    assert to_string_for(value, LanguageStyle.TREE_SITTER) == "(f k: false)"


def test_to_string_with_options() -> None:
    opts = Options(pretty_printed=True, line_width=20)
    assert to_string(HELLO, opts).count("\n") == 2


def test_unconvertible_input_raises_type_error() -> None:
    with pytest.raises(TypeError):
        Writer().write_to_string({"a": 1})


def test_write_streams_into_a_text_sink() -> None:
    sink = io.StringIO()
    Writer().write([Atom("a"), "b"], sink)
    assert sink.getvalue() == '(a "b")'


def test_write_encodes_utf8_for_binary_sinks() -> None:
    sink = io.BytesIO()
    Writer().write(["λ"], sink)
    assert sink.getvalue() == '("λ")'.encode()


def test_write_to_a_file_opened_in_binary_mode(tmp_path: Path) -> None:
    path = tmp_path / "out.rkt"
    with path.open("wb") as fh:
        Writer().pretty_printed().write([Atom("a")], fh)
    assert path.read_bytes() == b"(a)\n"


def test_short_writes_to_a_raw_sink_are_completed() -> None:
    sink = ShortWriteRawSink(limit=3)
    Writer().write(List((Atom("define"), Atom("hello"))), sink)
    assert bytes(sink.data) == b"(define hello)"
    assert sink.calls > 1


@parametrize("result", [0, None])
def test_raw_sink_that_accepts_nothing_raises(result: int | None) -> None:
    sink = ShortWriteRawSink(limit=0, result=result)
    with pytest.raises(SinkWriteError) as excinfo:
        Writer().write([Atom("a")], sink)
    assert isinstance(excinfo.value.source, OSError)
    assert sink.data == bytearray()


def test_binary_sink_detection() -> None:
    assert is_binary_sink(io.BytesIO())
    assert not is_binary_sink(io.StringIO())
    assert not is_binary_sink(FailingSink(1, OSError()))


def test_closed_sink_raises_sink_write_error() -> None:
    sink = io.StringIO()
    sink.close()
    with pytest.raises(SinkWriteError) as excinfo:
        Writer().write([Atom("a")], sink)
    err = excinfo.value
    assert isinstance(err.source, ValueError)
    assert err.__cause__ is err.source
    assert "I/O error" in str(err)


def test_sink_oserror_is_wrapped_and_partial_output_is_kept() -> None:
    boom = OSError("disk full")
    sink = FailingSink(budget=3, exc=boom)
    with pytest.raises(SinkWriteError) as excinfo:
        Writer().pretty_printed().with_line_width(0).write(HELLO, sink)
    assert excinfo.value.source is boom
    assert sink.parts == ["(", '"hello"', "\n "]


def test_sink_write_error_is_an_oserror_and_a_package_error() -> None:
    err = SinkWriteError(OSError("x"))
    assert isinstance(err, OSError)
    assert isinstance(err, SexprOutError)


def test_writer_is_reusable_and_stateless() -> None:
    writer = Writer().pretty_printed().with_line_width(20)
    first = writer.write_to_string(HELLO)
    assert writer.write_to_string(HELLO) == first
    assert repr(writer).startswith("Writer(options=Options(")
