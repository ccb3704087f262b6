"""Hierarchical manuscript statistics.

Responsibilities:
- Accumulate character, word and file counts bottom-up during assembly.
- Compute per-level averages once, at report time, and render YAML.

Key types:
- `SceneSummary`: counts for one scene plus its file count.
- `ChapterSummary`: counts for one chapter plus its scene summaries.
- `BookSummary`: counts for the book plus its chapter summaries.

Averages stay `None` until `BookSummary.finalize()` runs. A parent's counts
always equal the sum of the children added to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml

from ..errors import EmptyCollectionError


@dataclass(slots=True)
class SceneSummary:
    """Statistics for one scene.

    Attributes:
        characters: Characters of normalized file text.
        words: Whitespace-delimited tokens of normalized file text.
        files: Number of source files read.
        average: Words per file, set by finalization.
    """

    characters: int = 0
    words: int = 0
    files: int = 0
    average: int | None = None

    def add_characters(self, count: int) -> None:
        self.characters += count

    def add_words(self, count: int) -> None:
        self.words += count

    def add_file(self) -> None:
        self.files += 1

    def as_payload(self) -> dict[str, Any]:
        """Return the report mapping in stable key order."""

        return {
            "characters": self.characters,
            "words": self.words,
            "files": self.files,
            "average": self.average,
        }


@dataclass(slots=True)
class ChapterSummary:
    """Statistics for one chapter and its scenes."""

    title: str = ""
    characters: int = 0
    words: int = 0
    average: int | None = None
    scenes: list[SceneSummary] = field(default_factory=list)

    def add_scene_summary(self, scene: SceneSummary) -> None:
        """Fold a finished scene into this chapter."""

        self.characters += scene.characters
        self.words += scene.words
        self.scenes.append(scene)

    def as_payload(self) -> dict[str, Any]:
        """Return the report mapping in stable key order."""

        return {
            "title": self.title,
            "characters": self.characters,
            "words": self.words,
            "average": self.average,
            "scenes": [scene.as_payload() for scene in self.scenes],
        }


@dataclass(slots=True)
class BookSummary:
    """Statistics for the whole book."""

    characters: int = 0
    words: int = 0
    average: int | None = None
    chapters: list[ChapterSummary] = field(default_factory=list)
    finalized: bool = field(default=False, repr=False, compare=False)

    def add_chapter_summary(self, chapter: ChapterSummary) -> None:
        """Fold a finished chapter into the book."""

        if self.finalized:
            raise RuntimeError("BookSummary is finalized and can no longer change.")
        self.characters += chapter.characters
        self.words += chapter.words
        self.chapters.append(chapter)

    def validate(self) -> None:
        """Ensure every average has at least one member to divide by.

        Raises:
            EmptyCollectionError: For the first book, chapter or scene found
                without children, in document order.
        """

        if not self.chapters:
            raise EmptyCollectionError("book")
        for chapter in self.chapters:
            if not chapter.scenes:
                raise EmptyCollectionError("chapter", chapter.title)
            for index, scene in enumerate(chapter.scenes, start=1):
                if scene.files == 0:
                    raise EmptyCollectionError("scene", f"{chapter.title} #{index}")

    def finalize(self) -> None:
        """Compute all averages with truncating integer division, once."""

        if self.finalized:
            return
        self.validate()
        self.average = self.words // len(self.chapters)
        for chapter in self.chapters:
            chapter.average = chapter.words // len(chapter.scenes)
            for scene in chapter.scenes:
                scene.average = scene.words // scene.files
        self.finalized = True

    def as_payload(self) -> dict[str, Any]:
        """Return the report mapping in stable key order."""

        return {
            "characters": self.characters,
            "words": self.words,
            "average": self.average,
            "chapters": [chapter.as_payload() for chapter in self.chapters],
        }

    def render(self) -> str:
        """Finalize averages and serialize the summary tree as YAML."""

        self.finalize()
        return yaml.safe_dump(
            self.as_payload(),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
