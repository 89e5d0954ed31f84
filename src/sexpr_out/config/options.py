# topmark:header:start
#
#   project      : sexpr-out
#   file         : options.py
#   file_relpath : src/sexpr_out/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer options and their merge policy.

This module defines:
    - `Options`: an immutable snapshot handed to the writer and the layout engine.
      It is built with chained ``with_*`` calls, each returning a new snapshot.
    - `MutableOptions`: a tri-state builder used while loading configuration
      (``None`` means "inherit"). Layers are merged last-wins and frozen into
      `Options`.

TOML mapping (``sexpr-out.toml`` or ``[tool.sexpr-out]`` in ``pyproject.toml``):

    pretty_printed = true
    line_width = 100
    style = "scheme"
    pair_keyword_arguments = false
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from sexpr_out.config.logging import get_logger
from sexpr_out.constants import DEFAULT_LINE_WIDTH
from sexpr_out.core.diagnostics import DiagnosticLog
from sexpr_out.dialect import DEFAULT_STYLE, LanguageStyle

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sexpr_out.config.logging import SexprLogger

logger: SexprLogger = get_logger(__name__)

KEY_PRETTY_PRINTED = "pretty_printed"
KEY_LINE_WIDTH = "line_width"
KEY_STYLE = "style"
KEY_PAIR_KEYWORD_ARGUMENTS = "pair_keyword_arguments"

OPTION_KEYS: tuple[str, ...] = (
    KEY_PRETTY_PRINTED,
    KEY_LINE_WIDTH,
    KEY_STYLE,
    KEY_PAIR_KEYWORD_ARGUMENTS,
)


@dataclass(frozen=True, slots=True)
class Options:
    """Immutable writer configuration.

    Attributes:
        pretty_printed (bool): Break lists that do not fit ``line_width``. When False
            (compact mode) everything is written on one line.
        line_width (int): Target maximum column count. Zero or negative means
            nothing fits, so every list breaks.
        style (LanguageStyle): Output dialect.
        pair_keyword_arguments (bool): Keep a keyword and the value after it on the
            same line when a list is broken.
    """

    pretty_printed: bool = False
    line_width: int = DEFAULT_LINE_WIDTH
    style: LanguageStyle = DEFAULT_STYLE
    pair_keyword_arguments: bool = False

    def with_pretty_printed(self, flag: bool = True) -> Options:
        return replace(self, pretty_printed=flag)

    def with_line_width(self, line_width: int) -> Options:
        return replace(self, line_width=line_width)

    def with_style(self, style: LanguageStyle) -> Options:
        return replace(self, style=style)

    def with_pair_keyword_arguments(self, flag: bool = True) -> Options:
        return replace(self, pair_keyword_arguments=flag)

    def thaw(self) -> MutableOptions:
        """Return a mutable builder with every field set from this snapshot."""
        return MutableOptions(
            pretty_printed=self.pretty_printed,
            line_width=self.line_width,
            style=self.style,
            pair_keyword_arguments=self.pair_keyword_arguments,
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Return a TOML-friendly table with every option."""
        return {
            KEY_PRETTY_PRINTED: self.pretty_printed,
            KEY_LINE_WIDTH: self.line_width,
            KEY_STYLE: self.style.key,
            KEY_PAIR_KEYWORD_ARGUMENTS: self.pair_keyword_arguments,
        }


@dataclass
class MutableOptions:
    """Mutable, tri-state builder for `Options`.

    Attributes:
        pretty_printed (bool | None): See `Options`. `None` means "inherit".
        line_width (int | None): See `Options`. `None` means "inherit".
        style (LanguageStyle | None): See `Options`. `None` means "inherit".
        pair_keyword_arguments (bool | None): See `Options`. `None` means "inherit".
        sources (list[str]): Names of the configuration sources merged so far.
        diagnostics (DiagnosticLog): Problems found while reading those sources.
    """

    pretty_printed: bool | None = None
    line_width: int | None = None
    style: LanguageStyle | None = None
    pair_keyword_arguments: bool | None = None
    sources: list[str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def merge_with(self, other: MutableOptions) -> MutableOptions:
        """Return a new builder with ``other`` applied over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.
        Sources and diagnostics of both sides are concatenated.
        """

        def pick(current: Any, override: Any) -> Any:
            return override if override is not None else current

        diagnostics = DiagnosticLog.from_iterable(self.diagnostics)
        diagnostics.extend(other.diagnostics)
        return MutableOptions(
            pretty_printed=pick(self.pretty_printed, other.pretty_printed),
            line_width=pick(self.line_width, other.line_width),
            style=pick(self.style, other.style),
            pair_keyword_arguments=pick(self.pair_keyword_arguments, other.pair_keyword_arguments),
            sources=[*self.sources, *other.sources],
            diagnostics=diagnostics,
        )

    def resolve(self, base: Options) -> Options:
        """Fill unset fields from ``base`` and return an immutable snapshot."""
        return Options(
            pretty_printed=(
                base.pretty_printed if self.pretty_printed is None else self.pretty_printed
            ),
            line_width=base.line_width if self.line_width is None else self.line_width,
            style=base.style if self.style is None else self.style,
            pair_keyword_arguments=(
                base.pair_keyword_arguments
                if self.pair_keyword_arguments is None
                else self.pair_keyword_arguments
            ),
        )

    def freeze(self) -> Options:
        """Freeze using the built-in `Options` defaults for unset fields."""
        return self.resolve(Options())

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any] | None, *, source: str = "<table>") -> MutableOptions:
        """Create a builder from a TOML table.

        Missing keys stay ``None``. Values of the wrong type, unknown dialect names
        and unknown keys are reported as warnings in ``diagnostics`` and ignored.

        Args:
            tbl (Mapping[str, Any] | None): Table with keys matching the attributes.
            source (str): Name of the table's origin, used in diagnostics.

        Returns:
            MutableOptions: Parsed builder.
        """
        result = cls(sources=[source])
        if not tbl:
            return result
        diags = result.diagnostics

        for key in tbl:
            if key not in OPTION_KEYS:
                diags.add_warning(f"{source}: unknown option '{key}' ignored")

        def pick_bool(key: str) -> bool | None:
            if key not in tbl:
                return None
            raw = tbl[key]
            if isinstance(raw, bool):
                return raw
            diags.add_warning(f"{source}: '{key}' must be a boolean, got {raw!r}")
            return None

        result.pretty_printed = pick_bool(KEY_PRETTY_PRINTED)
        result.pair_keyword_arguments = pick_bool(KEY_PAIR_KEYWORD_ARGUMENTS)

        if KEY_LINE_WIDTH in tbl:
            raw_width = tbl[KEY_LINE_WIDTH]
            if isinstance(raw_width, int) and not isinstance(raw_width, bool):
                result.line_width = int(raw_width)
            else:
                diags.add_warning(f"{source}: 'line_width' must be an integer, got {raw_width!r}")

        if KEY_STYLE in tbl:
            raw_style = tbl[KEY_STYLE]
            style = LanguageStyle.parse(raw_style) if isinstance(raw_style, str) else None
            if style is None:
                diags.add_warning(
                    f"{source}: unknown style {raw_style!r} "
                    f"(expected one of: {', '.join(LanguageStyle.keys())})"
                )
            result.style = style

        logger.debug("Options from %s: %r", source, result)
        return result

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize only explicitly set keys to a TOML-friendly dict."""
        out: dict[str, Any] = {}
        if self.pretty_printed is not None:
            out[KEY_PRETTY_PRINTED] = self.pretty_printed
        if self.line_width is not None:
            out[KEY_LINE_WIDTH] = self.line_width
        if self.style is not None:
            out[KEY_STYLE] = self.style.key
        if self.pair_keyword_arguments is not None:
            out[KEY_PAIR_KEYWORD_ARGUMENTS] = self.pair_keyword_arguments
        return out
