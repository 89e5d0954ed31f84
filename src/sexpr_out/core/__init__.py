# topmark:header:start
#
#   project      : sexpr-out
#   file         : __init__.py
#   file_relpath : src/sexpr_out/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small, UI-agnostic primitives shared across sexpr-out.

- ``diagnostics``: levels, messages and a log used while loading configuration.
- ``enum_mixins``: ``KeyedStrEnum`` for enums with labels and parse aliases.
"""

from __future__ import annotations
