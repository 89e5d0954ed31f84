# topmark:header:start
#
#   project      : sexpr-out
#   file         : writer.py
#   file_relpath : src/sexpr_out/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer façade: render values to a string or stream them into a sink.

```python
from sexpr_out import Atom, Writer

writer = Writer().pretty_printed().with_line_width(40)
text = writer.write_to_string([Atom("define"), Atom("x"), 42])
```

A `Writer` only holds an immutable `Options` snapshot, so one instance can be
shared freely; every call builds its own `LayoutEngine`.

Sinks:
    * text sinks: any object with ``write(str)``;
    * binary sinks: `io.RawIOBase` / `io.BufferedIOBase` instances, or objects
      whose ``mode`` contains ``"b"``. Output is encoded as UTF-8.

If the sink raises `OSError` or `ValueError` (e.g. writing to a closed file)
the render stops and `SinkWriteError` is raised from the sink's exception.
Fragments the sink already accepted stay written.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, BinaryIO, TextIO, Union

from sexpr_out.config.logging import get_logger
from sexpr_out.config.options import Options
from sexpr_out.constants import CHAR_NEWLINE
from sexpr_out.errors import SinkWriteError
from sexpr_out.layout import LayoutEngine
from sexpr_out.value import to_value

if TYPE_CHECKING:
    from sexpr_out.config.logging import SexprLogger
    from sexpr_out.dialect import LanguageStyle

logger: SexprLogger = get_logger(__name__)

Sink = Union[TextIO, BinaryIO, io.IOBase]

OUTPUT_ENCODING = "utf-8"


def is_binary_sink(sink: object) -> bool:
    """Return True if ``sink`` expects bytes rather than text."""
    if isinstance(sink, io.TextIOBase):
        return False
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(sink, "mode", None)
    return isinstance(mode, str) and "b" in mode


class _SinkAdapter:
    """Text sink that forwards to the caller's sink and translates its failures.

    Raw binary sinks may accept fewer bytes than offered; the remainder is
    resubmitted until the whole fragment is written.
    """

    def __init__(self, sink: Sink) -> None:
        self._sink = sink
        self._binary = is_binary_sink(sink)
        self._raw = isinstance(sink, io.RawIOBase)

    def write(self, s: str, /) -> None:
        try:
            if self._binary:
                self._write_bytes(s.encode(OUTPUT_ENCODING))
            else:
                self._sink.write(s)  # type: ignore[arg-type]
        except (OSError, ValueError) as e:
            logger.error("Output sink rejected a write: %s", e)
            raise SinkWriteError(e) from e

    def _write_bytes(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = self._sink.write(view)  # type: ignore[arg-type]
            if written is None:
                if self._raw:
                    raise BlockingIOError(f"sink accepted none of {len(view)} bytes")
                return
            if written <= 0:
                raise OSError(f"sink accepted none of {len(view)} bytes")
            view = view[written:]


class Writer:
    """Renders values with a fixed set of `Options`.

    Args:
        options (Options | None): Options to use; `Options()` defaults if None.
    """

    def __init__(self, options: Options | None = None) -> None:
        self._options: Options = options if options is not None else Options()

    def __repr__(self) -> str:
        return f"Writer(options={self._options!r})"

    @property
    def options(self) -> Options:
        return self._options

    def with_options(self, options: Options) -> Writer:
        """Return a writer using ``options``."""
        return Writer(options)

    def pretty_printed(self, flag: bool = True) -> Writer:
        """Return a writer with pretty printing switched on (or off)."""
        return Writer(self._options.with_pretty_printed(flag))

    def with_line_width(self, line_width: int) -> Writer:
        return Writer(self._options.with_line_width(line_width))

    def with_style(self, style: LanguageStyle) -> Writer:
        return Writer(self._options.with_style(style))

    def write(self, value: object, sink: Sink) -> None:
        """Stream the rendering of ``value`` into ``sink``.

        Pretty-printed output is terminated by a newline; compact output is not.

        Args:
            value (object): A `Value`, or plain data accepted by `to_value`.
            sink (Sink): Text or binary output stream.

        Raises:
            SinkWriteError: If the sink rejects a write.
            TypeError: If ``value`` cannot be converted to a `Value`.
        """
        tree = to_value(value)
        out = _SinkAdapter(sink)
        LayoutEngine(self._options).layout(tree, out)
        if self._options.pretty_printed:
            out.write(CHAR_NEWLINE)

    def write_to_string(self, value: object) -> str:
        """Return the rendering of ``value`` as a string (see `write`)."""
        buffer = io.StringIO()
        self.write(value, buffer)
        return buffer.getvalue()


def to_string(value: object, options: Options | None = None) -> str:
    """Render ``value`` with ``options`` (compact Racket by default)."""
    return Writer(options).write_to_string(value)


def to_string_for(value: object, style: LanguageStyle) -> str:
    """Render ``value`` compactly in the given dialect."""
    return Writer(Options(style=style)).write_to_string(value)
