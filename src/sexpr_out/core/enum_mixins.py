# topmark:header:start
#
#   project      : sexpr-out
#   file         : enum_mixins.py
#   file_relpath : src/sexpr_out/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed string enums with labels and parse aliases.

``KeyedStrEnum`` keeps a stable, serialization-friendly key in ``.value`` while a
human label and a set of aliases live on attributes. Dialect names
(``LanguageStyle``) are defined this way so configuration files and the CLI can
accept ``"racket"``, ``"RACKET"`` or ``"rkt"`` alike.

Example:
    ```python
    class Flavor(KeyedStrEnum):
        SWEET = ("sweet", "Sweet", ("sugary",))

    assert Flavor.parse("Sugary") is Flavor.SWEET
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string so '-', ' ' and '_' compare equal."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against the stable key, the member name and any configured alias.
        Matching is case-insensitive and treats '-', ' ' and '_' as equivalent.

        Returns:
            _KS | None: The matching member, or ``None`` when nothing matches.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        """Return the machine keys of all members in definition order."""
        return tuple(m.key for m in cls)
