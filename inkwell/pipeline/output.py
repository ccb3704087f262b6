"""Uniform per-level output rendering.

Every hierarchy level (book, section, chapter, scene) may carry an
`OutputTarget`. The same two operations serve all of them: `render_level`
prepares the final file text and `LevelWriter.write` persists it.
"""

from __future__ import annotations

from pathlib import Path

from ..config import OutputTarget
from ..io.storage import FileStore
from ..telemetry.logger import RunLogger
from ..text.numbering import DEFAULT_SCENE_SEPARATOR, number_paragraphs


def render_level(
    text: str,
    target: OutputTarget,
    separator: str = DEFAULT_SCENE_SEPARATOR,
) -> str:
    """Return the exact text written for one level's output file."""

    output = text.replace("\r\n", "\n")
    if target.numbered:
        output = number_paragraphs(output, separator)
    return output


class LevelWriter:
    """Write level outputs in document order and remember what was written."""

    def __init__(
        self,
        store: FileStore,
        separator: str = DEFAULT_SCENE_SEPARATOR,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._store = store
        self._separator = separator
        self._run_logger = run_logger
        self.written: list[Path] = []

    def write(self, level: str, text: str, target: OutputTarget) -> Path | None:
        """Write `text` to the target path if one is configured."""

        if target.path is None:
            return None
        path = self._store.write_text(target.path, render_level(text, target, self._separator))
        self.written.append(path)
        if self._run_logger is not None:
            self._run_logger.log_output_written(level, path, target.numbered)
        return path
