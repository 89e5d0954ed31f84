# topmark:header:start
#
#   project      : sexpr-out
#   file         : test_value.py
#   file_relpath : tests/value/test_value.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the value model and `to_value` conversions."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from sexpr_out.value import (
    Atom,
    Boolean,
    Character,
    Keyword,
    List,
    Number,
    String,
    ValueKind,
    is_value,
    list_of,
    to_value,
)
from tests.conftest import parametrize


def test_plain_data_converts_recursively() -> None:
    """Lists, tuples and generators become `List`s; scalars map by type."""
    value = to_value([Atom("define"), ("x", 1), (b for b in [True, 2.5])])
    assert value == List(
        (
            Atom("define"),
            List((String("x"), Number(1))),
            List((Boolean(True), Number(2.5))),
        )
    )


def test_bool_is_not_a_number() -> None:
    """``True`` is an int subclass but converts to `Boolean`."""
    assert to_value(True) == Boolean(True)
    assert to_value(1) == Number(1)


def test_existing_values_are_returned_unchanged() -> None:
    node = Atom("a")
    assert to_value(node) is node


@parametrize("bad", [None, {"a": 1}, b"bytes", bytearray(b"x"), object()])
def test_unconvertible_data_raises_type_error(bad: Any) -> None:
    with pytest.raises(TypeError):
        to_value(bad)


def test_nested_unconvertible_item_raises_type_error() -> None:
    with pytest.raises(TypeError):
        to_value([1, [2, None]])


def test_list_constructor_converts_items() -> None:
    """`List` accepts plain items and stores converted values in a tuple."""
    lst = List(["a", 1])  # type: ignore[arg-type]
    assert isinstance(lst.items, tuple)
    assert lst.items == (String("a"), Number(1))


def test_list_sequence_protocol() -> None:
    lst = list_of(Atom("a"), "b", 3)
    assert len(lst) == 3
    assert lst[0] == Atom("a")
    assert list(lst) == [Atom("a"), String("b"), Number(3)]
    assert lst.children == lst.items
    assert not lst.is_empty()
    assert List().is_empty()


def test_values_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Atom("a").text = "b"  # type: ignore[misc]


@parametrize("payload", ["", "ab", "a\u0301"])
def test_character_requires_exactly_one_code_point(payload: str) -> None:
    with pytest.raises(ValueError):
        Character(payload)


def test_kinds_and_texts() -> None:
    assert Atom("a").kind is ValueKind.ATOM
    assert String("a").kind is ValueKind.STRING
    assert List().kind is ValueKind.LIST
    assert Boolean(False).kind is ValueKind.BOOLEAN
    assert Number(1).kind is ValueKind.NUMBER
    assert Character("x").kind is ValueKind.CHARACTER
    assert Keyword("k").kind is ValueKind.KEYWORD
    assert Character("x").text == "x"
    assert Keyword("k").text == "k"


def test_number_classification() -> None:
    assert Number(3).is_integer and not Number(3).is_flonum
    assert Number(3.0).is_flonum and not Number(3.0).is_integer
    assert Number(float("inf")).is_finite is False
    assert Number(1.5).is_finite


def test_is_value() -> None:
    assert is_value(Atom("a"))
    assert not is_value("a")
