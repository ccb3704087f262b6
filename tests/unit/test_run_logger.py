"""Unit tests for deterministic phase log lines."""

from __future__ import annotations

import io

from inkwell.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_sanitized_context() -> None:
    sink = io.StringIO()
    logger = RunLogger(sink=sink)

    logger.log_stage_start("chapters")
    logger.log_stage_complete("book", words=12, characters=60)
    logger.log_stage_failure("read", "SourceReadError")
    logger.log_output_written("scene", "out/my scene.md", True)

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=chapters event=start",
        "[phase] level=INFO stage=book event=complete characters=60 words=12",
        "[phase] level=ERROR stage=read event=failure error_type=SourceReadError",
        "[phase] level=INFO stage=scene event=written numbered=True path=out/my_scene.md",
    ]
