# topmark:header:start
#
#   project      : sexpr-out
#   file         : cli_types.py
#   file_relpath : src/sexpr_out/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the sexpr-out CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, NoReturn, Protocol, TypeVar

import click

from sexpr_out.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

# Type variable bounded to KeyedStrEnum for generic KeyedEnumParam
K = TypeVar("K", bound=KeyedStrEnum)


class KeyedEnumParam(ParamTypeBase, Generic[K]):
    """A Click parameter type that converts a key or alias to a `KeyedStrEnum` member.

    Lookup goes through `KeyedStrEnum.parse`, so it is case-insensitive and treats
    ``-``, ``_`` and spaces alike (``tree_sitter``, ``Tree-Sitter`` and ``ts`` all
    select the tree-sitter dialect).
    """

    enum_cls: type[K]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[K]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = list(enum_cls.keys())

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> K | None:
        """Converts a string (or an existing member) to a member of the enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member = self.enum_cls.parse(str(value))
        if member is not None:
            return member
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_SEXPR_OUT_COMPLETE=bash_source sexpr-out)"`
        """
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]
