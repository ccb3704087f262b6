"""Assembly pipeline package.

This package contains the content assembler, per-level output rendering and
the orchestration facade that walks a configured book.
"""

from .assembler import ContentAssembler
from .orchestrator import BookPipeline, BuildResult
from .output import LevelWriter, render_level

__all__ = ["BookPipeline", "BuildResult", "ContentAssembler", "LevelWriter", "render_level"]
