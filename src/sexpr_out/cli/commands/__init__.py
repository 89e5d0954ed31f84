# topmark:header:start
#
#   project      : sexpr-out
#   file         : __init__.py
#   file_relpath : src/sexpr_out/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the sexpr-out CLI."""
