"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer

from inkwell.cli_rendering import echo_build_summary, exit_with_command_error
from inkwell.errors import EmptyCollectionError, SourceReadError
from inkwell.models.summary import BookSummary
from inkwell.pipeline import BuildResult


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = SourceReadError(Path("ch1/a.md"), "No such file or directory")

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("build", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "build failed at stage `read`: Failed to read source file `ch1/a.md`" in captured.err
    assert "Hint: Verify the path in the book config exists and is readable." in captured.err


def test_exit_with_command_error_renders_empty_collection_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(typer.Exit):
        exit_with_command_error("stats", EmptyCollectionError("chapter", "Empty"))

    captured = capsys.readouterr()
    assert "stats failed at stage `summary`" in captured.err
    assert "Configure at least one entry under `scenes` for every chapter." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("build", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "build failed: unexpected failure" in captured.err


def test_echo_build_summary_lists_outputs_and_totals(
    capsys: pytest.CaptureFixture[str],
) -> None:
    summary = BookSummary(characters=40, words=8)
    result = BuildResult(text="", summary=summary, written=(Path("out/book.md"),))

    echo_build_summary(result)

    assert capsys.readouterr().out.splitlines() == [
        "Wrote: out/book.md",
        "Chapters: 0",
        "Words: 8",
        "Characters: 40",
    ]
