# topmark:header:start
#
#   project      : sexpr-out
#   file         : errors.py
#   file_relpath : src/sexpr_out/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the sexpr-out library.

Building values, measuring them and laying them out cannot fail. The one
failure a render can surface is the output sink refusing a write; it is raised
as `SinkWriteError` chained to the sink's own exception. Nothing is retried and
output already accepted by the sink is left in place.
"""

from __future__ import annotations


class SexprOutError(Exception):
    """Base class for all sexpr-out errors."""


class SinkWriteError(SexprOutError, OSError):
    """The output sink rejected a write (closed stream, full disk, ...).

    Subclasses `OSError` so callers that already guard their I/O with
    ``except OSError`` keep working.

    Attributes:
        source (BaseException): The exception raised by the sink.
    """

    def __init__(self, source: BaseException) -> None:
        super().__init__(f"An I/O error occurred writing output; source: {source}")
        self.source: BaseException = source


class ConfigError(SexprOutError):
    """A configuration file could not be read or is not valid TOML."""
