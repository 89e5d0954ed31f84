# topmark:header:start
#
#   project      : sexpr-out
#   file         : test_enum_mixins.py
#   file_relpath : tests/core/test_enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `KeyedStrEnum`."""

from __future__ import annotations

from sexpr_out.core.enum_mixins import KeyedStrEnum
from tests.conftest import parametrize


class Flavor(KeyedStrEnum):
    SWEET = ("sweet", "Sweet", ("sugary",))
    SOUR_CHERRY = ("sour-cherry", "Sour cherry")


@parametrize(
    "raw, expected",
    [
        ("sweet", Flavor.SWEET),
        ("SUGARY", Flavor.SWEET),
        ("sour_cherry", Flavor.SOUR_CHERRY),
        ("Sour Cherry", Flavor.SOUR_CHERRY),
        ("bitter", None),
        (None, None),
    ],
)
def test_parse(raw: str | None, expected: Flavor | None) -> None:
    assert Flavor.parse(raw) is expected


def test_members_carry_metadata() -> None:
    assert Flavor.SWEET.key == "sweet"
    assert Flavor.SWEET.label == "Sweet"
    assert Flavor.SWEET.aliases == ("sugary",)
    assert Flavor.SOUR_CHERRY.aliases == ()
    assert str(Flavor.SOUR_CHERRY) == "sour-cherry"
    assert Flavor.SWEET == "sweet"


def test_keys_follow_definition_order() -> None:
    assert Flavor.keys() == ("sweet", "sour-cherry")
