"""Top-level package for Inkwell.

Inkwell assembles a book manuscript from many small source text files arranged
in a configured hierarchy, with optional paragraph numbering and a YAML
statistics report. The main orchestration entry point is `BookPipeline`.
"""

from .config import BookSpec, ChapterSpec, ConfigLoader, OutputTarget, SceneSpec, SectionSpec
from .pipeline import BookPipeline, BuildResult

__all__ = [
    "BookPipeline",
    "BookSpec",
    "BuildResult",
    "ChapterSpec",
    "ConfigLoader",
    "OutputTarget",
    "SceneSpec",
    "SectionSpec",
    "__version__",
]

__version__ = "0.1.0"
