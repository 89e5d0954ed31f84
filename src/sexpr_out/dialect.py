# topmark:header:start
#
#   project      : sexpr-out
#   file         : dialect.py
#   file_relpath : src/sexpr_out/dialect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output dialects: delimiters, quoting and escaping per target syntax.

Each `LanguageStyle` maps to a `Dialect`, a frozen bundle of pure functions the
layout engine calls to turn a scalar `Value` into its token text. The engine
never looks at style-specific rules itself.

Supported styles:

| Style | Symbols needing quotes | String escapes | Booleans |
|---|---|---|---|
| ``racket`` | ``|a b|``, ``|a|\\||b|`` | ``\\n \\t \\r \\uXXXX \\UXXXXXXXX`` | ``#t #f`` |
| ``tree-sitter`` | never quoted | ``\\n \\t \\r \\0 \\u{...}`` | ``true false`` |
| ``common-lisp`` | ``|a b|`` with ``\\|`` ``\\\\`` | ``\\"`` and ``\\\\`` only | ``t nil`` |
| ``scheme`` | ``|a b|`` with ``\\xHH;`` | ``\\n \\t \\r \\xHH;`` | ``#t #f`` |
| ``emacs-lisp`` | ``a\\ b`` (backslash per char) | ``\\n \\t \\r \\uXXXX \\U00XXXXXX`` | ``t nil`` |

Every ``escape_*`` function has an ``unescape_*`` inverse so that
``unescape_atom(escape_atom(text)) == text`` and
``unescape_string(escape_string(text)) == text`` hold for any text. The inverses
decode a single token only; reading whole expressions is not supported.
"""

from __future__ import annotations

import math
import re
import unicodedata
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from sexpr_out.constants import CHAR_LIST_CLOSE, CHAR_LIST_OPEN
from sexpr_out.core.enum_mixins import KeyedStrEnum
from sexpr_out.value import Atom, Boolean, Character, Keyword, List, Number, String

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from sexpr_out.value import Value


class LanguageStyle(KeyedStrEnum):
    """Named output conventions."""

    RACKET = ("racket", "Racket", ("rkt",))
    TREE_SITTER = ("tree-sitter", "Tree-sitter query", ("treesitter", "ts"))
    COMMON_LISP = ("common-lisp", "Common Lisp", ("cl", "clisp", "lisp"))
    SCHEME = ("scheme", "Scheme (R7RS)", ("r7rs", "scm"))
    EMACS_LISP = ("emacs-lisp", "Emacs Lisp", ("elisp", "el"))


DEFAULT_STYLE: Final[LanguageStyle] = LanguageStyle.RACKET

# Ranges escaped in addition to what `str.isprintable` rejects.
_EXTRA_ESCAPED_RANGES: Final[tuple[tuple[int, int], ...]] = (
    (0x3000, 0x303F),  # CJK symbols and punctuation
    (0xFE00, 0xFE0F),  # variation selectors
    (0xE0100, 0xE01EF),  # variation selectors supplement
)

_NUMBER_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    [+-]?
    (?:
        \d+(?:\.\d*)?(?:[eEdDfFsSlL][+-]?\d+)?   # 1, 1., 1.5, 1e3, 1d0
      | \.\d+(?:[eEdDfFsSlL][+-]?\d+)?          # .5
      | \d+/\d+                                 # 1/2
      | (?:inf|nan)\.[0ft]                      # +inf.0, -nan.0
    )
    """,
    re.VERBOSE,
)


def is_nonprintable(c: str) -> bool:
    """Return True if ``c`` should be written as an escape rather than verbatim."""
    cp = ord(c)
    if any(lo <= cp <= hi for lo, hi in _EXTRA_ESCAPED_RANGES):
        return True
    return not c.isprintable()


def looks_like_number(text: str) -> bool:
    """Return True if a reader would take ``text`` for a number rather than a symbol."""
    return _NUMBER_RE.fullmatch(text) is not None


def _hex_escape(c: str, short: str, long: str | None, short_digits: int, long_digits: int) -> str:
    cp = ord(c)
    if cp <= 0xFFFF:
        return f"{short}{cp:0{short_digits}X}"
    return f"{long or short}{cp:0{long_digits}X}"


def _escape_each(
    text: str,
    table: Mapping[str, str],
    fallback: Callable[[str], str | None],
) -> str:
    parts: list[str] = []
    for c in text:
        mapped = table.get(c)
        if mapped is None:
            mapped = fallback(c)
        parts.append(c if mapped is None else mapped)
    return "".join(parts)


def _read_hex(token: str, start: int, width: int) -> tuple[str, int]:
    """Decode exactly ``width`` hex digits at ``start``; return (char, next index)."""
    digits = token[start : start + width]
    return chr(int(digits, 16)), start + width


def _read_hex_until(token: str, start: int, terminator: str) -> tuple[str, int]:
    end = token.index(terminator, start)
    return chr(int(token[start:end], 16)), end + 1


def _strip_quotes(token: str, quote: str = '"') -> str:
    if len(token) < 2 or token[0] != quote or token[-1] != quote:
        raise ValueError(f"Not a quoted literal: {token!r}")
    return token[1:-1]


# --- strings ---------------------------------------------------------------------------------

_C_STYLE_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}

_C_STYLE_UNESCAPES: Final[dict[str, str]] = {
    "\\": "\\",
    '"': '"',
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


def _escape_string_unicode(text: str, long_prefix: str) -> str:
    """Racket and Emacs Lisp: ``\\uXXXX`` for the BMP, an 8-digit long escape otherwise."""

    def fallback(c: str) -> str | None:
        if not is_nonprintable(c):
            return None
        return _hex_escape(c, "\\u", long_prefix, 4, 8)

    return '"' + _escape_each(text, _C_STYLE_ESCAPES, fallback) + '"'


def _unescape_string_unicode(token: str) -> str:
    body = _strip_quotes(token)
    out: list[str] = []
    i = 0
    while i < len(body):
        c = body[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue
        n = body[i + 1]
        if n == "u":
            ch, i = _read_hex(body, i + 2, 4)
            out.append(ch)
        elif n == "U":
            ch, i = _read_hex(body, i + 2, 8)
            out.append(ch)
        else:
            out.append(_C_STYLE_UNESCAPES.get(n, n))
            i += 2
    return "".join(out)


def _escape_string_racket(text: str) -> str:
    return _escape_string_unicode(text, "\\U")


def _escape_string_elisp(text: str) -> str:
    return _escape_string_unicode(text, "\\U")


def _escape_string_scheme(text: str) -> str:
    def fallback(c: str) -> str | None:
        return f"\\x{ord(c):X};" if is_nonprintable(c) else None

    return '"' + _escape_each(text, _C_STYLE_ESCAPES, fallback) + '"'


def _unescape_string_scheme(token: str) -> str:
    body = _strip_quotes(token)
    out: list[str] = []
    i = 0
    while i < len(body):
        c = body[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue
        n = body[i + 1]
        if n == "x":
            ch, i = _read_hex_until(body, i + 2, ";")
            out.append(ch)
        else:
            out.append(_C_STYLE_UNESCAPES.get(n, n))
            i += 2
    return "".join(out)


def _escape_string_common_lisp(text: str) -> str:
    # CL strings have a single escape character and no mnemonics.
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _unescape_backslash_any(body: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(body):
        if body[i] == "\\":
            out.append(body[i + 1])
            i += 2
        else:
            out.append(body[i])
            i += 1
    return "".join(out)


def _unescape_string_common_lisp(token: str) -> str:
    return _unescape_backslash_any(_strip_quotes(token))


_TREE_SITTER_ESCAPES: Final[dict[str, str]] = {**_C_STYLE_ESCAPES, "\0": "\\0"}
_TREE_SITTER_UNESCAPES: Final[dict[str, str]] = {**_C_STYLE_UNESCAPES, "0": "\0"}


def _escape_string_tree_sitter(text: str) -> str:
    """Tree-sitter query strings: C-style mnemonics, ``\\0``, and ``\\u{...}`` otherwise."""

    def fallback(c: str) -> str | None:
        if not is_nonprintable(c):
            return None
        return f"\\u{{{ord(c):x}}}"

    return '"' + _escape_each(text, _TREE_SITTER_ESCAPES, fallback) + '"'


def _unescape_string_tree_sitter(token: str) -> str:
    body = _strip_quotes(token)
    out: list[str] = []
    i = 0
    while i < len(body):
        if body[i] != "\\":
            out.append(body[i])
            i += 1
            continue
        n = body[i + 1]
        if n == "u" and body[i + 2 : i + 3] == "{":
            ch, i = _read_hex_until(body, i + 3, "}")
            out.append(ch)
        else:
            out.append(_TREE_SITTER_UNESCAPES.get(n, n))
            i += 2
    return "".join(out)


# --- symbols ---------------------------------------------------------------------------------

_RACKET_SPECIAL: Final[frozenset[str]] = frozenset("()[]{}\",'`;|\\")
_SCHEME_SPECIAL: Final[frozenset[str]] = frozenset("()[]{}\",'`;|\\")
_COMMON_LISP_SPECIAL: Final[frozenset[str]] = frozenset("()\",'`;|\\:")
_ELISP_SPECIAL: Final[frozenset[str]] = frozenset("()[]\",'`;\\")


def _needs_bars(text: str, special: frozenset[str], *, allow_hash_percent: bool) -> bool:
    if not text or text == "." or looks_like_number(text):
        return True
    if text.startswith("#") and not (allow_hash_percent and text.startswith("#%")):
        return True
    return any(c in special or c.isspace() or is_nonprintable(c) for c in text)


def _escape_atom_racket(text: str) -> str:
    if not _needs_bars(text, _RACKET_SPECIAL, allow_hash_percent=True):
        return text
    # Backslash is literal between bars; only the bar itself must step outside.
    return "|" + text.replace("|", "|\\||") + "|"


def _unescape_atom_racket(token: str) -> str:
    out: list[str] = []
    in_bars = False
    i = 0
    while i < len(token):
        c = token[i]
        if c == "|":
            in_bars = not in_bars
            i += 1
        elif c == "\\" and not in_bars:
            out.append(token[i + 1])
            i += 2
        else:
            out.append(c)
            i += 1
    return "".join(out)


def _escape_atom_scheme(text: str) -> str:
    if not _needs_bars(text, _SCHEME_SPECIAL, allow_hash_percent=False):
        return text

    def fallback(c: str) -> str | None:
        return f"\\x{ord(c):X};" if is_nonprintable(c) else None

    return "|" + _escape_each(text, {"\\": "\\\\", "|": "\\|"}, fallback) + "|"


def _unescape_atom_scheme(token: str) -> str:
    if not (len(token) >= 2 and token[0] == "|" and token[-1] == "|"):
        return token
    body = token[1:-1]
    out: list[str] = []
    i = 0
    while i < len(body):
        c = body[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue
        n = body[i + 1]
        if n == "x":
            ch, i = _read_hex_until(body, i + 2, ";")
            out.append(ch)
        else:
            out.append(_C_STYLE_UNESCAPES.get(n, n))
            i += 2
    return "".join(out)


def _escape_atom_common_lisp(text: str) -> str:
    if not _needs_bars(text, _COMMON_LISP_SPECIAL, allow_hash_percent=False):
        return text
    return "|" + text.replace("\\", "\\\\").replace("|", "\\|") + "|"


def _unescape_atom_common_lisp(token: str) -> str:
    if len(token) >= 2 and token[0] == "|" and token[-1] == "|":
        return _unescape_backslash_any(token[1:-1])
    return _unescape_backslash_any(token)


_ELISP_EMPTY_SYMBOL: Final[str] = "##"


def _escape_atom_elisp(text: str) -> str:
    if not text:
        return _ELISP_EMPTY_SYMBOL
    parts: list[str] = []
    for i, c in enumerate(text):
        at_start = i == 0
        if (
            c in _ELISP_SPECIAL
            or c.isspace()
            or is_nonprintable(c)
            or (at_start and c in "#?")
            or (at_start and (text == "." or looks_like_number(text)))
        ):
            parts.append("\\" + c)
        else:
            parts.append(c)
    return "".join(parts)


def _unescape_atom_elisp(token: str) -> str:
    if token == _ELISP_EMPTY_SYMBOL:
        return ""
    return _unescape_backslash_any(token)


def _verbatim(text: str) -> str:
    return text


# --- characters ------------------------------------------------------------------------------

_RACKET_CHAR_NAMES: Final[dict[str, str]] = {
    "\x00": "null",
    "\x08": "backspace",
    "\t": "tab",
    "\n": "newline",
    "\x0b": "vtab",
    "\x0c": "page",
    "\r": "return",
    " ": "space",
    "\x7f": "rubout",
}

_COMMON_LISP_CHAR_NAMES: Final[dict[str, str]] = {
    "\x08": "Backspace",
    "\t": "Tab",
    "\n": "Newline",
    "\x0c": "Page",
    "\r": "Return",
    " ": "Space",
    "\x7f": "Rubout",
}

_SCHEME_CHAR_NAMES: Final[dict[str, str]] = {
    "\x00": "null",
    "\x07": "alarm",
    "\x08": "backspace",
    "\t": "tab",
    "\n": "newline",
    "\r": "return",
    "\x1b": "escape",
    " ": "space",
    "\x7f": "delete",
}

_ELISP_CHAR_ESCAPES: Final[dict[str, str]] = {
    "\x00": "?\\0",
    "\x07": "?\\a",
    "\x08": "?\\b",
    "\t": "?\\t",
    "\n": "?\\n",
    "\x0b": "?\\v",
    "\x0c": "?\\f",
    "\r": "?\\r",
    "\x1b": "?\\e",
    " ": "?\\s",
    "\x7f": "?\\d",
}

_ELISP_CHAR_SPECIAL: Final[frozenset[str]] = frozenset("()[]\\;|'`#.,‘\"")


def _hash_backslash_char(
    names: Mapping[str, str], short: str, long: str | None
) -> Callable[[str], str]:
    def fmt(c: str) -> str:
        name = names.get(c)
        if name is not None:
            return f"#\\{name}"
        if is_nonprintable(c):
            return _hex_escape(c, short, long, 4, 6)
        return f"#\\{c}"

    return fmt


def _format_char_elisp(c: str) -> str:
    named = _ELISP_CHAR_ESCAPES.get(c)
    if named is not None:
        return named
    if c in _ELISP_CHAR_SPECIAL:
        return f"?\\{c}"
    if is_nonprintable(c):
        return _hex_escape(c, "?\\u", "?\\U", 4, 6)
    return f"?{c}"


_TREE_SITTER_CHAR_ESCAPES: Final[dict[str, str]] = {
    "\0": "\\0",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "'": "\\'",
    "\\": "\\\\",
}


def _format_char_tree_sitter(c: str) -> str:
    named = _TREE_SITTER_CHAR_ESCAPES.get(c)
    if named is not None:
        return f"'{named}'"
    if not c.isprintable() or unicodedata.category(c) in ("Mn", "Me"):
        return f"'\\u{{{ord(c):x}}}'"
    return f"'{c}'"


# --- numbers ---------------------------------------------------------------------------------


def _number_formatter(inf: str, neg_inf: str, nan: str) -> Callable[[int | float], str]:
    def fmt(n: int | float) -> str:
        if isinstance(n, float):
            if math.isnan(n):
                return nan
            if math.isinf(n):
                return inf if n > 0 else neg_inf
            return repr(n)
        return str(int(n))

    return fmt


# --- dialect table ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Dialect:
    """Formatting rules for one `LanguageStyle`.

    Attributes:
        style (LanguageStyle): The style these rules implement.
        list_open (str): Opening list delimiter.
        list_close (str): Closing list delimiter.
        true_literal (str): Text for ``True``.
        false_literal (str): Text for ``False``.
        keyword_prefix (str): Text written before a keyword name.
        keyword_suffix (str): Text written after a keyword name.
        escape_atom (Callable[[str], str]): Symbol text to token.
        unescape_atom (Callable[[str], str]): Token back to symbol text.
        escape_string (Callable[[str], str]): String contents to quoted literal.
        unescape_string (Callable[[str], str]): Quoted literal back to contents.
        format_character (Callable[[str], str]): One code point to a character literal.
        format_number (Callable[[int | float], str]): Number to literal.
    """

    style: LanguageStyle
    list_open: str
    list_close: str
    true_literal: str
    false_literal: str
    keyword_prefix: str
    keyword_suffix: str
    escape_atom: Callable[[str], str]
    unescape_atom: Callable[[str], str]
    escape_string: Callable[[str], str]
    unescape_string: Callable[[str], str]
    format_character: Callable[[str], str]
    format_number: Callable[[int | float], str]

    def format_boolean(self, value: bool) -> str:
        return self.true_literal if value else self.false_literal

    def format_keyword(self, name: str) -> str:
        return f"{self.keyword_prefix}{self.escape_atom(name)}{self.keyword_suffix}"

    def token(self, value: Value) -> str:
        """Return the token text for a scalar value.

        Raises:
            TypeError: If ``value`` is a `List`; lists are laid out by the engine.
        """
        if isinstance(value, Atom):
            return self.escape_atom(value.text)
        if isinstance(value, String):
            return self.escape_string(value.text)
        if isinstance(value, Boolean):
            return self.format_boolean(value.value)
        if isinstance(value, Number):
            return self.format_number(value.value)
        if isinstance(value, Character):
            return self.format_character(value.char)
        if isinstance(value, Keyword):
            return self.format_keyword(value.name)
        if isinstance(value, List):
            raise TypeError("Lists have no token form; render them with the layout engine")
        raise TypeError(f"Not a symbolic-expression value: {value!r}")


_SCHEME_NUMBERS = _number_formatter("+inf.0", "-inf.0", "+nan.0")

_DIALECTS: Final[dict[LanguageStyle, Dialect]] = {
    LanguageStyle.RACKET: Dialect(
        style=LanguageStyle.RACKET,
        list_open=CHAR_LIST_OPEN,
        list_close=CHAR_LIST_CLOSE,
        true_literal="#t",
        false_literal="#f",
        keyword_prefix="#:",
        keyword_suffix="",
        escape_atom=_escape_atom_racket,
        unescape_atom=_unescape_atom_racket,
        escape_string=_escape_string_racket,
        unescape_string=_unescape_string_unicode,
        format_character=_hash_backslash_char(_RACKET_CHAR_NAMES, "#\\u", "#\\U"),
        format_number=_SCHEME_NUMBERS,
    ),
    LanguageStyle.TREE_SITTER: Dialect(
        style=LanguageStyle.TREE_SITTER,
        list_open=CHAR_LIST_OPEN,
        list_close=CHAR_LIST_CLOSE,
        true_literal="true",
        false_literal="false",
        keyword_prefix="",
        keyword_suffix=":",
        escape_atom=_verbatim,
        unescape_atom=_verbatim,
        escape_string=_escape_string_tree_sitter,
        unescape_string=_unescape_string_tree_sitter,
        format_character=_format_char_tree_sitter,
        format_number=_number_formatter("inf", "-inf", "nan"),
    ),
    LanguageStyle.COMMON_LISP: Dialect(
        style=LanguageStyle.COMMON_LISP,
        list_open=CHAR_LIST_OPEN,
        list_close=CHAR_LIST_CLOSE,
        true_literal="t",
        false_literal="nil",
        keyword_prefix=":",
        keyword_suffix="",
        escape_atom=_escape_atom_common_lisp,
        unescape_atom=_unescape_atom_common_lisp,
        escape_string=_escape_string_common_lisp,
        unescape_string=_unescape_string_common_lisp,
        format_character=_hash_backslash_char(_COMMON_LISP_CHAR_NAMES, "#\\U", None),
        format_number=_number_formatter("inf", "-inf", "nan"),
    ),
    LanguageStyle.SCHEME: Dialect(
        style=LanguageStyle.SCHEME,
        list_open=CHAR_LIST_OPEN,
        list_close=CHAR_LIST_CLOSE,
        true_literal="#t",
        false_literal="#f",
        keyword_prefix=":",
        keyword_suffix="",
        escape_atom=_escape_atom_scheme,
        unescape_atom=_unescape_atom_scheme,
        escape_string=_escape_string_scheme,
        unescape_string=_unescape_string_scheme,
        format_character=_hash_backslash_char(_SCHEME_CHAR_NAMES, "#\\x", None),
        format_number=_SCHEME_NUMBERS,
    ),
    LanguageStyle.EMACS_LISP: Dialect(
        style=LanguageStyle.EMACS_LISP,
        list_open=CHAR_LIST_OPEN,
        list_close=CHAR_LIST_CLOSE,
        true_literal="t",
        false_literal="nil",
        keyword_prefix=":",
        keyword_suffix="",
        escape_atom=_escape_atom_elisp,
        unescape_atom=_unescape_atom_elisp,
        escape_string=_escape_string_elisp,
        unescape_string=_unescape_string_unicode,
        format_character=_format_char_elisp,
        format_number=_number_formatter("1.0e+INF", "-1.0e+INF", "0.0e+NaN"),
    ),
}


def dialect_for(style: LanguageStyle) -> Dialect:
    """Return the `Dialect` implementing ``style``."""
    return _DIALECTS[style]


def escape_atom(text: str, style: LanguageStyle = DEFAULT_STYLE) -> str:
    """Return the token for a symbol named ``text`` in ``style``."""
    return _DIALECTS[style].escape_atom(text)


def unescape_atom(token: str, style: LanguageStyle = DEFAULT_STYLE) -> str:
    """Return the symbol text encoded by ``token`` in ``style``."""
    return _DIALECTS[style].unescape_atom(token)


def escape_string(text: str, style: LanguageStyle = DEFAULT_STYLE) -> str:
    """Return the quoted string literal for ``text`` in ``style``."""
    return _DIALECTS[style].escape_string(text)


def unescape_string(token: str, style: LanguageStyle = DEFAULT_STYLE) -> str:
    """Return the contents of the quoted string literal ``token`` in ``style``.

    Raises:
        ValueError: If ``token`` is not a double-quoted literal.
    """
    return _DIALECTS[style].unescape_string(token)
