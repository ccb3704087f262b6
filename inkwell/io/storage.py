"""Filesystem access for source fragments and rendered outputs.

Responsibilities:
- Read each source file fully before moving on to the next one.
- Write each output file once, in truncate-create mode.
- Map filesystem failures to pipeline errors without retrying.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import OutputWriteError, SourceReadError


class FileStore:
    """Filesystem-backed reader/writer used by the assembler."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the store with the text encoding for all files."""

        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        """Return full file contents, raising `SourceReadError` on failure."""

        try:
            return Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(Path(path), str(exc)) from exc

    def write_text(self, path: Path, content: str) -> Path:
        """Write content and return the final path."""

        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding=self.encoding)
        except OSError as exc:
            raise OutputWriteError(target, str(exc)) from exc
        return target
