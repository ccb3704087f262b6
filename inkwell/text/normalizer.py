"""Source text normalization.

Responsibilities:
- Trim source fragments and collapse runs of horizontal whitespace.
- Optionally unwrap `[[wiki link]]` markup to its inner text.

All functions are pure; compiled patterns are module constants shared
read-only across calls.
"""

from __future__ import annotations

import re

_HORIZONTAL_WHITESPACE_RE = re.compile(r"[ \t]+")
# One or more non-`]` characters; the first closing bracket ends the match.
_WIKI_LINK_RE = re.compile(r"\[\[([^\]]+)\]\]")


def collapse_whitespace(text: str) -> str:
    """Trim text and collapse spaces/tabs to one space, keeping newlines."""

    return _HORIZONTAL_WHITESPACE_RE.sub(" ", text.strip())


def strip_wiki_links(text: str) -> str:
    """Replace every `[[inner]]` with `inner`.

    Links whose inner text contains `]` and empty links (`[[]]`) are left
    unchanged.
    """

    return _WIKI_LINK_RE.sub(r"\1", text)


def normalize_text(text: str, strip_links: bool = False) -> str:
    """Normalize one source fragment for assembly."""

    if strip_links:
        text = strip_wiki_links(text)
    return collapse_whitespace(text)


def count_words(text: str) -> int:
    """Return the number of whitespace-delimited tokens in `text`."""

    return len(text.split())


class TextNormalizer:
    """Normalize source fragments with a fixed wiki-link policy."""

    def __init__(self, strip_links: bool = False) -> None:
        self.strip_links = strip_links

    def normalize(self, text: str) -> str:
        """Normalize text for deterministic assembly."""

        return normalize_text(text, strip_links=self.strip_links)
