"""Summary statistics models shared by the pipeline and CLI."""

from .summary import BookSummary, ChapterSummary, SceneSummary

__all__ = ["BookSummary", "ChapterSummary", "SceneSummary"]
