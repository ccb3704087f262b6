"""Command-line interface for Inkwell.

Responsibilities:
- Expose user-facing commands for manuscript builds.
- Convert a YAML config path into a `BookSpec` and run the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_build_summary, exit_with_command_error
from .config import BookSpec, ConfigLoader
from .errors import ConfigError
from .pipeline import BookPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="inkwell",
    no_args_is_help=True,
    help="Inkwell manuscript assembler.",
)

ConfigOption = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to the YAML book config."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Emit phase log lines on stderr."),
]


def _load_book_config(config_path: Path) -> BookSpec:
    """Load a YAML config file and map failures to config errors."""

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ConfigError(
            f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ConfigError(
            f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


class BuildProgressIndicator:
    """Render deterministic per-stage progress lines for a command."""

    def __init__(self, command_name: str) -> None:
        self._command_name = command_name

    def on_stage_start(self, stage_name: str, stage_index: int, stage_total: int) -> None:
        """Print one progress line for a stage start transition."""

        typer.echo(
            f"[progress] command={self._command_name} "
            f"{stage_index}/{stage_total} stage={stage_name}",
            err=True,
        )


def _pipeline(command_name: str, verbose: bool) -> BookPipeline:
    """Create a pipeline, wiring logs and progress only in verbose mode."""

    if not verbose:
        return BookPipeline()
    progress = BuildProgressIndicator(command_name)
    return BookPipeline(
        run_logger=RunLogger(),
        stage_progress_callback=progress.on_stage_start,
    )


@app.command("build")
def build_command(config_file: ConfigOption, verbose: VerboseOption = False) -> None:
    """Assemble the manuscript and every configured per-level output."""

    try:
        spec = _load_book_config(config_file)
        result = _pipeline("build", verbose).run(spec)
    except Exception as exc:
        exit_with_command_error("build", exc)

    echo_build_summary(result)


@app.command("stats")
def stats_command(config_file: ConfigOption, verbose: VerboseOption = False) -> None:
    """Run a full build, then print the YAML summary report."""

    try:
        spec = _load_book_config(config_file)
        result = _pipeline("stats", verbose).run(spec, render_summary=True)
    except Exception as exc:
        exit_with_command_error("stats", exc)

    typer.echo(result.summary_report, nl=False)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
