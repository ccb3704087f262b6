"""Text normalization and paragraph numbering components."""

from .normalizer import (
    TextNormalizer,
    collapse_whitespace,
    count_words,
    normalize_text,
    strip_wiki_links,
)
from .numbering import DEFAULT_SCENE_SEPARATOR, LineState, ParagraphNumberer, number_paragraphs

__all__ = [
    "DEFAULT_SCENE_SEPARATOR",
    "LineState",
    "ParagraphNumberer",
    "TextNormalizer",
    "collapse_whitespace",
    "count_words",
    "normalize_text",
    "number_paragraphs",
    "strip_wiki_links",
]
