# topmark:header:start
#
#   project      : sexpr-out
#   file         : value.py
#   file_relpath : src/sexpr_out/value.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The symbolic-expression value model.

A `Value` is one of a small, closed set of immutable node kinds:

* `Atom`: an opaque symbol, quoted by the dialect only when it needs to be.
* `String`: a string literal.
* `List`: an ordered, possibly empty sequence of values.
* `Boolean`, `Number`, `Character`, `Keyword`: scalar literals whose surface
  syntax differs between dialects.

Trees are built bottom-up and children are captured in a tuple at construction
time, so a list can never contain itself and a rendered tree cannot change
under the writer.

Conversions from plain Python data are handled by `to_value`:

```python
from sexpr_out.value import Atom, to_value

to_value([Atom("define"), Atom("x"), 42])
# List(items=(Atom(text='define'), Atom(text='x'), Number(value=42)))
```

Plain ``str`` converts to `String`; use `Atom` (or `atom`) for symbols.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias, Union


class ValueKind(Enum):
    """Type tag of a `Value` node."""

    ATOM = "atom"
    STRING = "string"
    LIST = "list"
    BOOLEAN = "boolean"
    NUMBER = "number"
    CHARACTER = "character"
    KEYWORD = "keyword"


@dataclass(frozen=True, slots=True)
class Atom:
    """An opaque symbolic token such as ``define`` or ``hello world``."""

    text: str

    @property
    def kind(self) -> ValueKind:
        return ValueKind.ATOM


@dataclass(frozen=True, slots=True)
class String:
    """A string literal."""

    text: str

    @property
    def kind(self) -> ValueKind:
        return ValueKind.STRING


@dataclass(frozen=True, slots=True)
class Boolean:
    """A boolean literal (``#t``/``#f``, ``t``/``nil`` or ``true``/``false``)."""

    value: bool

    @property
    def kind(self) -> ValueKind:
        return ValueKind.BOOLEAN


@dataclass(frozen=True, slots=True)
class Number:
    """An integer or floating point literal."""

    value: int | float

    @property
    def kind(self) -> ValueKind:
        return ValueKind.NUMBER

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)

    @property
    def is_flonum(self) -> bool:
        return isinstance(self.value, float)

    @property
    def is_finite(self) -> bool:
        return not isinstance(self.value, float) or math.isfinite(self.value)


@dataclass(frozen=True, slots=True)
class Character:
    """A single-character literal.

    Raises:
        ValueError: If ``char`` is not exactly one code point.
    """

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Character expects exactly one code point, got {self.char!r}")

    @property
    def kind(self) -> ValueKind:
        return ValueKind.CHARACTER

    @property
    def text(self) -> str:
        return self.char


@dataclass(frozen=True, slots=True)
class Keyword:
    """A keyword such as ``#:key`` (Racket) or ``:key`` (Lisp family).

    ``name`` is the bare keyword name; the dialect supplies the prefix or suffix.
    """

    name: str

    @property
    def kind(self) -> ValueKind:
        return ValueKind.KEYWORD

    @property
    def text(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class List:
    """An ordered sequence of values.

    ``items`` is always a tuple; any iterable passed to the constructor is
    converted item by item with `to_value`.
    """

    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple) or not all(
            isinstance(item, _VALUE_TYPES) for item in self.items
        ):
            object.__setattr__(self, "items", tuple(to_value(item) for item in self.items))

    @property
    def kind(self) -> ValueKind:
        return ValueKind.LIST

    @property
    def children(self) -> tuple[Value, ...]:
        return self.items

    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


Value: TypeAlias = Union[Atom, String, List, Boolean, Number, Character, Keyword]

_VALUE_TYPES = (Atom, String, List, Boolean, Number, Character, Keyword)


def is_value(obj: object) -> bool:
    """Return True if ``obj`` is already a `Value` node."""
    return isinstance(obj, _VALUE_TYPES)


def to_value(obj: object) -> Value:
    """Convert plain Python data into a `Value` tree.

    Conversion rules:

    * an existing `Value` is returned unchanged;
    * ``bool`` becomes `Boolean` (checked before ``int``);
    * ``int`` and ``float`` become `Number`;
    * ``str`` becomes `String`;
    * any other iterable (list, tuple, generator, ...) becomes a `List` of
      converted items, in iteration order.

    Args:
        obj (object): The data to convert.

    Returns:
        Value: The converted value tree.

    Raises:
        TypeError: If ``obj`` (or a nested item) has no value representation,
            e.g. ``None`` or a mapping.
    """
    if isinstance(obj, _VALUE_TYPES):
        return obj
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, (int, float)):
        return Number(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, (bytes, bytearray, Mapping)) or not isinstance(obj, Iterable):
        raise TypeError(f"Cannot convert {type(obj).__name__} to a symbolic-expression value")
    return List(tuple(to_value(item) for item in obj))


def atom(text: str) -> Atom:
    """Return an `Atom` for ``text``."""
    return Atom(text)


def string(text: str) -> String:
    """Return a `String` for ``text``."""
    return String(text)


def keyword(name: str) -> Keyword:
    """Return a `Keyword` named ``name``."""
    return Keyword(name)


def char(c: str) -> Character:
    """Return a `Character` for the single code point ``c``."""
    return Character(c)


def list_of(*items: object) -> List:
    """Return a `List` of ``items``, each converted with `to_value`."""
    return List(tuple(to_value(item) for item in items))
