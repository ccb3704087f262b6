"""Unit tests for metadata block, title page and dedication builders."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from inkwell.config import BookSpec
from inkwell.errors import SourceReadError
from inkwell.io.storage import FileStore
from inkwell.pipeline.assembler import (
    build_dedication,
    build_metadata_block,
    build_title_page,
)

_NOW = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)


def test_metadata_block_aligns_additional_authors() -> None:
    spec = BookSpec(
        title="Test Book",
        summary="A test summary",
        authors=("Author One", "Author Two"),
    )

    assert build_metadata_block(spec, _NOW) == (
        "---\n"
        "Title: Test Book\n"
        "Summary: A test summary\n"
        "Date: 2024-05-06T07:08:09+00:00\n"
        "Authors: Author One\n"
        "         Author Two\n"
        "---\n"
    )


def test_metadata_block_without_authors_keeps_label_line() -> None:
    block = build_metadata_block(BookSpec(title="Solo"), _NOW)

    assert block.startswith("---\n")
    assert block.endswith("Authors:\n---\n")


@pytest.mark.parametrize(
    ("title", "authors", "expected"),
    [
        ("My Book", ("John Doe",), "# My Book\nBy John Doe\n"),
        (
            "Collaborative Work",
            ("Jane Smith", "Bob Johnson"),
            "# Collaborative Work\nBy Jane Smith, Bob Johnson\n",
        ),
        ("", ("Author",), ""),
        ("   ", ("Author",), ""),
    ],
)
def test_title_page(title: str, authors: tuple[str, ...], expected: str) -> None:
    assert build_title_page(title, authors) == expected


def test_dedication_reads_configured_file(write_source) -> None:
    path = write_source("dedication.txt", "To my family and friends")

    assert build_dedication(path, FileStore()) == (
        "## Dedication\nTo my family and friends\n"
    )


def test_dedication_absent_path_is_not_an_error() -> None:
    assert build_dedication(None, FileStore()) == ""


def test_dedication_unreadable_path_raises(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError):
        build_dedication(tmp_path / "non-existent.txt", FileStore())
