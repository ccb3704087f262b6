"""Pipeline orchestration for manuscript assembly.

Responsibilities:
- Walk the configured hierarchy (book, sections, chapters, scenes) in document order.
- Emit the metadata block, title page and dedication ahead of the body.
- Write the book manuscript and the optional summary report.

Key types:
- `BookPipeline`: orchestration facade.
- `BuildResult`: assembled text, statistics and written paths of one run.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..config import BookSpec
from ..io.storage import FileStore
from ..models.summary import BookSummary
from ..telemetry.logger import RunLogger
from .assembler import (
    ContentAssembler,
    build_dedication,
    build_metadata_block,
    build_title_page,
)
from .output import LevelWriter
from .telemetry import PipelineTelemetryMixin


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of one successful pipeline run.

    Attributes:
        text: Assembled book text before numbering.
        summary: Statistics tree; finalized only when a report was rendered.
        written: Output paths in the order they were written.
        summary_report: Rendered YAML report, when one was requested.
    """

    text: str
    summary: BookSummary
    written: tuple[Path, ...]
    summary_report: str | None = None


class BookPipeline(PipelineTelemetryMixin):
    """Coordinate all stages for a single manuscript build."""

    def __init__(
        self,
        store: FileStore | None = None,
        run_logger: RunLogger | None = None,
        stage_progress_callback: Callable[[str, int, int], None] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize file access, optional logging hooks and the metadata clock."""

        self._store = store or FileStore()
        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback
        self._clock = clock or _local_now

    def run(self, spec: BookSpec, render_summary: bool = False) -> BuildResult:
        """Assemble the whole book and write every configured output.

        The summary report is rendered when `spec.summary_path` is set or
        `render_summary` is true; rendering raises `EmptyCollectionError`
        for a book, chapter or scene without members.
        """

        writer = LevelWriter(self._store, spec.scene_separator, self._run_logger)
        assembler = ContentAssembler(
            store=self._store,
            strip_links=spec.strip_wiki_links,
            separator=spec.scene_separator,
            writer=writer,
        )
        summary = BookSummary()

        front_matter = self._run_stage(
            "front-matter", lambda: self._front_matter(spec)
        )
        sections = self._run_stage(
            "sections",
            lambda: [assembler.assemble_section(section) for section in spec.sections],
        )
        chapters = self._run_stage(
            "chapters",
            lambda: [assembler.assemble_chapter(chapter, summary) for chapter in spec.chapters],
        )

        text = front_matter + "".join(f"\n{body}" for body in [*sections, *chapters])
        self._run_stage("write", lambda: writer.write("book", text, spec.target))

        report: str | None = None
        if spec.summary_path is not None or render_summary:
            report = self._run_stage(
                "summary", lambda: self._render_summary(summary, spec.summary_path, writer)
            )

        if self._run_logger is not None:
            self._run_logger.log_stage_complete(
                "book",
                characters=summary.characters,
                words=summary.words,
                outputs=len(writer.written),
            )
        return BuildResult(
            text=text,
            summary=summary,
            written=tuple(writer.written),
            summary_report=report,
        )

    def _front_matter(self, spec: BookSpec) -> str:
        """Return metadata block, title page and dedication in that order."""

        return (
            build_metadata_block(spec, self._clock())
            + build_title_page(spec.title, spec.authors)
            + build_dedication(spec.dedication, self._store)
        )

    def _render_summary(
        self, summary: BookSummary, path: Path | None, writer: LevelWriter
    ) -> str:
        """Render the statistics report and write it, unnumbered, when a path is set."""

        report = summary.render()
        if path is not None:
            written = self._store.write_text(path, report)
            writer.written.append(written)
            if self._run_logger is not None:
                self._run_logger.log_output_written("summary", written, False)
        return report
