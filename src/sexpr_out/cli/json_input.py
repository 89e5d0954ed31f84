# topmark:header:start
#
#   project      : sexpr-out
#   file         : json_input.py
#   file_relpath : src/sexpr_out/cli/json_input.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn JSON documents into value trees for the ``render`` command.

Mapping:

| JSON                      | Value                                   |
|---------------------------|-----------------------------------------|
| array                     | `List`                                  |
| string                    | `String` (`Atom` with ``symbols=True``) |
| number                    | `Number`                                |
| ``true`` / ``false``      | `Boolean`                               |
| ``{"atom": "x"}``         | `Atom`                                  |
| ``{"string": "x"}``       | `String`                                |
| ``{"keyword": "x"}``      | `Keyword`                               |
| ``{"char": "x"}``         | `Character`                             |

``null`` and any other object shape are rejected with `JsonInputError`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final

from sexpr_out.config.logging import get_logger
from sexpr_out.value import Atom, Boolean, Character, Keyword, List, Number, String

if TYPE_CHECKING:
    from collections.abc import Callable

    from sexpr_out.config.logging import SexprLogger
    from sexpr_out.value import Value

logger: SexprLogger = get_logger(__name__)


class JsonInputError(ValueError):
    """The JSON document has no symbolic-expression form.

    Attributes:
        path (str): JSON-pointer-like location of the offending node (``$[2][0]``).
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path: str = path


_TAGGED: Final[dict[str, Callable[[str], Value]]] = {
    "atom": Atom,
    "string": String,
    "keyword": Keyword,
    "char": Character,
}


def _tagged(obj: dict[str, Any], path: str) -> Value:
    if len(obj) != 1:
        raise JsonInputError(
            f"tagged object must have exactly one key out of {', '.join(_TAGGED)}", path
        )
    ((tag, payload),) = obj.items()
    factory = _TAGGED.get(tag)
    if factory is None:
        raise JsonInputError(f"unknown tag {tag!r} (expected one of: {', '.join(_TAGGED)})", path)
    if not isinstance(payload, str):
        raise JsonInputError(f"payload of {tag!r} must be a string", path)
    try:
        return factory(payload)
    except ValueError as e:
        raise JsonInputError(str(e), path) from e


def json_to_value(obj: Any, *, symbols: bool = False, path: str = "$") -> Value:
    """Convert decoded JSON data into a `Value` tree.

    Args:
        obj (Any): Data as returned by `json.loads`.
        symbols (bool): Read plain JSON strings as atoms instead of strings.
        path (str): Location of ``obj`` in the document, for error messages.

    Returns:
        Value: The converted tree.

    Raises:
        JsonInputError: If ``obj`` (or a nested node) cannot be converted.
    """
    if isinstance(obj, list):
        return List(
            tuple(json_to_value(item, symbols=symbols, path=f"{path}[{i}]") for i, item in enumerate(obj))
        )
    if isinstance(obj, str):
        return Atom(obj) if symbols else String(obj)
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, (int, float)):
        return Number(obj)
    if isinstance(obj, dict):
        return _tagged(obj, path)
    if obj is None:
        raise JsonInputError("null has no symbolic-expression form", path)
    raise JsonInputError(f"unsupported JSON node {type(obj).__name__}", path)


def load_json_value(text: str, *, symbols: bool = False) -> Value:
    """Parse a JSON document and convert it with `json_to_value`.

    Raises:
        JsonInputError: If ``text`` is not valid JSON or cannot be converted.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise JsonInputError(f"invalid JSON: {e}", "$") from e
    value = json_to_value(data, symbols=symbols)
    logger.debug("Loaded %s value from JSON input", value.kind.value)
    return value
