"""Run logging for the assembly pipeline."""

from .logger import RunLogger

__all__ = ["RunLogger"]
