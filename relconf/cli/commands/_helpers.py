"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from relconf.output.errors import RelconfError, error_exit_code, print_error

if TYPE_CHECKING:
    from relconf.cli.context import CLIContext


def exit_with_error(error: RelconfError, ctx: CLIContext) -> NoReturn:
    """Print a domain error and exit with its mapped code."""
    print_error(error, ctx.console)
    raise typer.Exit(code=error_exit_code(error))
