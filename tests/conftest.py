"""Shared pytest fixtures for the full Inkwell test suite."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import pytest

FROZEN_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Provide a helper that writes one UTF-8 source fragment under `tmp_path`."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def frozen_clock() -> Callable[[], datetime]:
    """Provide a clock that always returns the same timezone-aware instant."""

    return lambda: FROZEN_NOW
