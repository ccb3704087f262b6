"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and build summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import InkwellError
from .pipeline import BuildResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, InkwellError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_build_summary(result: BuildResult) -> None:
    """Print written files and book-level totals."""

    for path in result.written:
        typer.echo(f"Wrote: {path}")
    if not result.written:
        typer.echo("Wrote: (no output files configured)")
    typer.echo(f"Chapters: {len(result.summary.chapters)}")
    typer.echo(f"Words: {result.summary.words}")
    typer.echo(f"Characters: {result.summary.characters}")
