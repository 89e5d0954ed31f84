# topmark:header:start
#
#   project      : sexpr-out
#   file         : diagnostics.py
#   file_relpath : src/sexpr_out/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading and merging configuration.

Rendering itself never produces diagnostics (it is total); configuration
sources can, e.g. an unknown dialect name or a non-integer ``line_width`` in
``sexpr-out.toml``. Such problems are recorded here as warnings and the
offending key is ignored, so a bad config file never aborts a render.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from sexpr_out.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from sexpr_out.config.logging import SexprLogger

logger: SexprLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics."""

    WARNING = "warning"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only.
        """
        return cast("Callable[[str], str]", {DiagnosticLevel.WARNING: chalk.yellow}[self])


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return ``"[level] message"``, optionally colored for a terminal."""
        text = f"[{self.level.value}] {self.message}"
        return self.level.color(text) if color else text


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics for one configuration load."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics."""
        return cls(items=list(diagnostics))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic and mirror it to the logger."""
        logger.warning(message)
        self.items.append(Diagnostic(DiagnosticLevel.WARNING, message))

    def extend(self, other: DiagnosticLog) -> None:
        """Append all diagnostics of ``other`` to this log."""
        self.items.extend(other.items)

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)
