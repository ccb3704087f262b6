"""Module entrypoint for running Inkwell as ``python -m inkwell``."""

from __future__ import annotations

from inkwell.cli import main


if __name__ == "__main__":
    main()
