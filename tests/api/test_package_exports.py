# topmark:header:start
#
#   project      : sexpr-out
#   file         : test_package_exports.py
#   file_relpath : tests/api/test_package_exports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Smoke tests for the public package surface and ``__all__``."""

from __future__ import annotations

import inspect

import sexpr_out

# Exports that are neither callables nor classes.
NON_CALLABLE_EXPORTS: frozenset[str] = frozenset({"__version__", "Value"})


def test_all_contains_expected_symbols() -> None:
    """``__all__`` exposes at least the stable entry points."""
    expected: set[str] = {
        "Writer",
        "Options",
        "LanguageStyle",
        "render",
        "to_string",
        "to_string_for",
        "to_value",
        "SinkWriteError",
    }
    missing: set[str] = expected - set(sexpr_out.__all__)
    assert not missing, f"Missing from __all__: {sorted(missing)}"


def test_exported_names_resolve() -> None:
    for name in sexpr_out.__all__:
        obj = getattr(sexpr_out, name)
        if name in NON_CALLABLE_EXPORTS:
            continue
        assert callable(obj) or inspect.isclass(obj), name


def test_version_is_a_string() -> None:
    assert isinstance(sexpr_out.__version__, str)
    assert sexpr_out.__version__


def test_quick_start_example() -> None:
    value = sexpr_out.to_value([sexpr_out.Atom("define"), sexpr_out.Atom("answer"), 42])
    assert sexpr_out.to_string(value) == "(define answer 42)"
