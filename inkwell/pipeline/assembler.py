"""Recursive text composition for scenes, sections and chapters.

Responsibilities:
- Read, normalize and join source files in configured order.
- Add headings and scene separators for each hierarchy level.
- Feed scene and chapter statistics into the summary tree.
- Build the metadata block, title page and dedication for the book.

Any unreadable source file raises `SourceReadError` immediately; nothing is
recovered or retried.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from ..config import BookSpec, ChapterSpec, SceneSpec, SectionSpec
from ..io.storage import FileStore
from ..models.summary import BookSummary, ChapterSummary, SceneSummary
from ..text.normalizer import TextNormalizer, count_words
from ..text.numbering import DEFAULT_SCENE_SEPARATOR
from .output import LevelWriter

_AUTHORS_LABEL = "Authors:"


class ContentAssembler:
    """Assemble hierarchy levels into manuscript text."""

    def __init__(
        self,
        store: FileStore | None = None,
        strip_links: bool = False,
        separator: str = DEFAULT_SCENE_SEPARATOR,
        writer: LevelWriter | None = None,
    ) -> None:
        """Initialize file access, normalization policy and level writer."""

        self.store = store or FileStore()
        self.normalizer = TextNormalizer(strip_links=strip_links)
        self.separator = separator
        self.writer = writer or LevelWriter(self.store, separator)

    def assemble_scene(self, scene: SceneSpec, chapter_summary: ChapterSummary) -> str:
        """Assemble one scene and attach its statistics to `chapter_summary`."""

        summary = SceneSummary()
        text = self._assemble_files(scene.files, summary)
        self.writer.write("scene", text, scene.target)
        chapter_summary.add_scene_summary(summary)
        return text

    def assemble_section(self, section: SectionSpec) -> str:
        """Assemble one flat section under a level-1 heading."""

        text = f"# {section.title}\n" + self._assemble_files(section.files, None)
        self.writer.write("section", text, section.target)
        return text

    def assemble_chapter(self, chapter: ChapterSpec, book_summary: BookSummary) -> str:
        """Assemble one chapter's scenes, separated by the scene separator."""

        summary = ChapterSummary(title=chapter.title)
        scene_texts = [self.assemble_scene(scene, summary) for scene in chapter.scenes]
        text = f"## {chapter.title}\n" + f"\n{self.separator}\n".join(scene_texts)
        self.writer.write("chapter", text, chapter.target)
        book_summary.add_chapter_summary(summary)
        return text

    def _assemble_files(
        self, files: Sequence[Path], summary: SceneSummary | None
    ) -> str:
        """Join normalized file bodies with one blank line between them."""

        parts: list[str] = []
        for path in files:
            content = self.normalizer.normalize(self.store.read_text(path))
            if summary is not None:
                summary.add_characters(len(content))
                summary.add_words(count_words(content))
                summary.add_file()
            parts.append(content + "\n")
        return "\n".join(parts)


def build_metadata_block(spec: BookSpec, now: datetime) -> str:
    """Return the `---` delimited metadata header.

    Authors after the first are indented by the width of the `Authors:` label
    so the names line up.
    """

    lines = [
        "---",
        f"Title: {spec.title}",
        f"Summary: {spec.summary}",
        f"Date: {now.isoformat(timespec='seconds')}",
    ]
    if spec.authors:
        indent = " " * len(_AUTHORS_LABEL)
        lines.append(f"{_AUTHORS_LABEL} {spec.authors[0]}")
        lines.extend(f"{indent} {author}" for author in spec.authors[1:])
    else:
        lines.append(_AUTHORS_LABEL)
    lines.append("---")
    return "\n".join(lines) + "\n"


def build_title_page(title: str, authors: Sequence[str]) -> str:
    """Return the title heading and byline, or nothing for a blank title."""

    if not title.strip():
        return ""
    return f"# {title}\nBy {', '.join(authors)}\n"


def build_dedication(path: Path | None, store: FileStore) -> str:
    """Return the dedication section; a missing path means no dedication."""

    if path is None:
        return ""
    return "## Dedication\n" + store.read_text(path) + "\n"
