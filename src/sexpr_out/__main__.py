# topmark:header:start
#
#   project      : sexpr-out
#   file         : __main__.py
#   file_relpath : src/sexpr_out/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running sexpr-out via ``python -m sexpr_out``.

Equivalent to the ``sexpr-out`` console script; delegates to
:func:`sexpr_out.cli.main.cli`.

Examples:
    Pretty-print a JSON document as Scheme::

        python -m sexpr_out render --pretty --style scheme data.json
"""

from __future__ import annotations

from sexpr_out.cli.main import cli

if __name__ == "__main__":
    cli()
