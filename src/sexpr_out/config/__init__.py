# topmark:header:start
#
#   project      : sexpr-out
#   file         : __init__.py
#   file_relpath : src/sexpr_out/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for sexpr-out.

Modules:
    - ``sexpr_out.config.logging``: TRACE-aware logger and colored formatter.
    - ``sexpr_out.config.options``: immutable ``Options`` and the ``MutableOptions`` builder.
    - ``sexpr_out.config.io``: TOML discovery and loading with ``tomlkit``.

This package deliberately re-exports nothing, so ``sexpr_out.config.logging`` can be
imported from anywhere without pulling in the options model.
"""

from __future__ import annotations
