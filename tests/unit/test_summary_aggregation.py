"""Unit tests for hierarchical summary accumulation and report rendering."""

from __future__ import annotations

import pytest
import yaml

from inkwell.errors import EmptyCollectionError
from inkwell.models.summary import BookSummary, ChapterSummary, SceneSummary


def _scene(characters: int, words: int, files: int) -> SceneSummary:
    scene = SceneSummary()
    for _ in range(files):
        scene.add_file()
    scene.add_characters(characters)
    scene.add_words(words)
    return scene


def test_chapter_and_book_counts_equal_sum_of_children() -> None:
    """Parent counts should always be the sum of their direct children."""

    scenes = [_scene(10, 2, 1), _scene(25, 5, 2), _scene(7, 1, 1)]
    chapter = ChapterSummary(title="One")
    for scene in scenes:
        chapter.add_scene_summary(scene)

    assert chapter.words == sum(scene.words for scene in scenes)
    assert chapter.characters == sum(scene.characters for scene in scenes)
    assert chapter.scenes == scenes

    other = ChapterSummary(title="Two")
    other.add_scene_summary(_scene(3, 1, 1))
    book = BookSummary()
    book.add_chapter_summary(chapter)
    book.add_chapter_summary(other)

    assert book.words == chapter.words + other.words
    assert book.characters == chapter.characters + other.characters
    assert [item.title for item in book.chapters] == ["One", "Two"]


def test_averages_are_undefined_until_finalized() -> None:
    chapter = ChapterSummary(title="One")
    chapter.add_scene_summary(_scene(12, 2, 1))
    book = BookSummary()
    book.add_chapter_summary(chapter)

    assert book.average is None
    assert chapter.average is None
    assert chapter.scenes[0].average is None

    book.finalize()

    assert book.average == 2
    assert chapter.average == 2
    assert chapter.scenes[0].average == 2


def test_averages_use_truncating_integer_division() -> None:
    chapter = ChapterSummary(title="Odd")
    chapter.add_scene_summary(_scene(30, 5, 2))
    chapter.add_scene_summary(_scene(10, 2, 1))
    book = BookSummary()
    book.add_chapter_summary(chapter)
    tiny = ChapterSummary(title="Tiny")
    tiny.add_scene_summary(_scene(1, 0, 1))
    book.add_chapter_summary(tiny)

    book.finalize()

    assert chapter.average == 3
    assert chapter.scenes[0].average == 2
    assert book.average == 3


def test_render_emits_yaml_tree_in_stable_key_order() -> None:
    chapter = ChapterSummary(title="One")
    chapter.add_scene_summary(_scene(12, 2, 1))
    book = BookSummary()
    book.add_chapter_summary(chapter)

    payload = yaml.safe_load(book.render())

    assert list(payload) == ["characters", "words", "average", "chapters"]
    assert payload["characters"] == 12
    assert payload["words"] == 2
    assert payload["average"] == 2
    chapter_payload = payload["chapters"][0]
    assert list(chapter_payload) == ["title", "characters", "words", "average", "scenes"]
    assert chapter_payload["title"] == "One"
    assert payload["chapters"][0]["scenes"] == [
        {"characters": 12, "words": 2, "files": 1, "average": 2}
    ]
    assert list(chapter_payload["scenes"][0]) == ["characters", "words", "files", "average"]


def test_finalized_summary_rejects_further_chapters() -> None:
    chapter = ChapterSummary(title="One")
    chapter.add_scene_summary(_scene(1, 1, 1))
    book = BookSummary()
    book.add_chapter_summary(chapter)
    book.finalize()

    with pytest.raises(RuntimeError, match="finalized"):
        book.add_chapter_summary(ChapterSummary(title="Late"))


def test_render_rejects_book_without_chapters() -> None:
    with pytest.raises(EmptyCollectionError) as exc_info:
        BookSummary().render()

    assert exc_info.value.level == "book"
    assert exc_info.value.stage == "summary"
    assert "no chapters" in exc_info.value.detail


def test_render_rejects_chapter_without_scenes() -> None:
    book = BookSummary()
    book.add_chapter_summary(ChapterSummary(title="Empty"))

    with pytest.raises(EmptyCollectionError, match="chapter `Empty`.*no scenes") as exc_info:
        book.render()

    assert exc_info.value.level == "chapter"
    assert exc_info.value.title == "Empty"
    assert book.average is None


def test_render_rejects_scene_without_files() -> None:
    chapter = ChapterSummary(title="Hollow")
    chapter.add_scene_summary(SceneSummary())
    book = BookSummary()
    book.add_chapter_summary(chapter)

    with pytest.raises(EmptyCollectionError, match="scene `Hollow #1`: it has no files"):
        book.render()
