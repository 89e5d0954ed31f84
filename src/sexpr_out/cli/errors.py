# topmark:header:start
#
#   project      : sexpr-out
#   file         : errors.py
#   file_relpath : src/sexpr_out/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the sexpr-out CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Click prints the message to stderr and exits with
    the class's ``exit_code``.
"""

from __future__ import annotations

from typing import IO, Any

import click

from sexpr_out.cli.exit_codes import ExitCode


class SexprCliError(click.ClickException):
    """Base class for all sexpr-out CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error in bright red when the context has color enabled."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and ctx.color:
            click.echo(click.style(f"Error: {self.format_message()}", fg="bright_red"), err=True)
            return
        super().show(file)


class SexprUsageError(SexprCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SexprDataError(SexprCliError):
    """Error for input documents that cannot be turned into values."""

    exit_code = ExitCode.DATA_ERROR


class SexprFileNotFoundError(SexprCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SexprIOError(SexprCliError):
    """Error for I/O errors reading input or writing output."""

    exit_code = ExitCode.IO_ERROR


class SexprConfigError(SexprCliError):
    """Error for configuration errors (unreadable or malformed config file)."""

    exit_code = ExitCode.CONFIG_ERROR
