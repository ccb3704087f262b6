"""Paragraph numbering for rendered manuscript files.

Responsibilities:
- Classify each line of an assembled text block with a small state tracker.
- Append a sequential ` <N>` marker to every qualifying paragraph line.

A line qualifies when it is outside a `---` metadata block and outside a
blockquote, is non-blank, does not start with `#` or `-`, and is not the
scene separator. The counter restarts at 1 on every call.
"""

from __future__ import annotations

from enum import Enum

DEFAULT_SCENE_SEPARATOR = "*&#9;*&#9;*"

_METADATA_FENCE = "---"
_BLOCKQUOTE_PREFIX = ">"
_SKIPPED_PREFIXES = ("#", "-")


class LineState(str, Enum):
    """Classification state carried from one line to the next."""

    DEFAULT = "default"
    IN_METADATA_BLOCK = "in_metadata_block"
    IN_BLOCKQUOTE = "in_blockquote"


class ParagraphNumberer:
    """Number qualifying paragraph lines of one output text."""

    def __init__(self, separator: str = DEFAULT_SCENE_SEPARATOR) -> None:
        """Initialize with the scene separator that must stay unnumbered."""

        self.separator = separator.strip()

    def number(self, text: str) -> str:
        """Return `text` with ` <N>` appended to each qualifying line."""

        lines = text.replace("\r\n", "\n").split("\n")
        state = LineState.DEFAULT
        counter = 0
        numbered: list[str] = []

        for line in lines:
            state = self._next_state(state, line)
            if state is LineState.DEFAULT and self._is_paragraph(line):
                counter += 1
                numbered.append(f"{line} <{counter}>")
            else:
                numbered.append(line)

        return "\n".join(numbered).rstrip()

    def _next_state(self, state: LineState, line: str) -> LineState:
        """Return the state that applies to `line` given the previous state."""

        if line.strip() == _METADATA_FENCE:
            # Fence lines start with `-`, so neither fence is ever numbered.
            if state is LineState.IN_METADATA_BLOCK:
                return LineState.DEFAULT
            return LineState.IN_METADATA_BLOCK
        if state is LineState.IN_METADATA_BLOCK:
            return state
        if line.startswith(_BLOCKQUOTE_PREFIX):
            return LineState.IN_BLOCKQUOTE
        return LineState.DEFAULT

    def _is_paragraph(self, line: str) -> bool:
        """Return whether a line outside any block receives a marker."""

        stripped = line.strip()
        if not stripped:
            return False
        if stripped.startswith(_SKIPPED_PREFIXES):
            return False
        return stripped != self.separator


def number_paragraphs(text: str, separator: str = DEFAULT_SCENE_SEPARATOR) -> str:
    """Number qualifying paragraph lines of `text`."""

    return ParagraphNumberer(separator).number(text)
