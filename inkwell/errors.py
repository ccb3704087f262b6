"""Domain exceptions for assembly pipeline and CLI diagnostics."""

from __future__ import annotations

from pathlib import Path


class InkwellError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ConfigError(InkwellError):
    """Raised when a book configuration cannot be loaded or is invalid."""

    def __init__(self, detail: str, hint: str | None = None) -> None:
        super().__init__(stage="config", detail=detail, hint=hint)


class SourceReadError(InkwellError):
    """Raised when a configured source or dedication file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            stage="read",
            detail=f"Failed to read source file `{path}`: {reason}",
            hint="Verify the path in the book config exists and is readable.",
        )
        self.path = path


class OutputWriteError(InkwellError):
    """Raised when a manuscript or summary output file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            stage="write",
            detail=f"Failed to write output file `{path}`: {reason}",
            hint="Verify the output directory exists and is writable.",
        )
        self.path = path


class EmptyCollectionError(InkwellError):
    """Raised when a summary average would be computed over zero members.

    Every book needs at least one chapter, every chapter at least one scene,
    and every scene at least one file before the summary report can render.
    """

    def __init__(self, level: str, title: str | None = None) -> None:
        members = {"book": "chapters", "chapter": "scenes", "scene": "files"}[level]
        label = f"{level} `{title}`" if title else level
        super().__init__(
            stage="summary",
            detail=f"Cannot compute average for {label}: it has no {members}.",
            hint=f"Configure at least one entry under `{members}` for every {level}.",
        )
        self.level = level
        self.title = title
