"""Run context and logging setup for pipeline execution."""

from __future__ import annotations
import logging
import sys
import time
import uuid
from typing import Dict, Optional

import structlog


def configure_logging(level: int = logging.WARNING) -> None:
    """Send structlog events to stderr, filtered by level."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # sys.stderr is looked up each time a logger is created
        logger_factory=lambda *args: structlog.PrintLogger(sys.stderr),
        cache_logger_on_first_use=False,
    )


def ensure_logging() -> None:
    """Apply the WARNING-level default unless the host already configured structlog."""
    if not structlog.is_configured():
        configure_logging()


class RunContext:
    """Context for one merge invocation with logging and stage timing."""

    def __init__(
        self,
        run_id: Optional[str] = None,
        logger: Optional[structlog.BoundLogger] = None
    ):
        self.run_id = run_id or uuid.uuid4().hex[:8]

        if logger is None:
            self.logger = structlog.get_logger().bind(run_id=self.run_id)
        else:
            self.logger = logger.bind(run_id=self.run_id)

        self._start_time: Optional[float] = None
        self._stage_times: Dict[str, float] = {}

    @property
    def stage_times(self) -> Dict[str, float]:
        """Seconds spent in each stage run so far, keyed by stage name."""
        return dict(self._stage_times)

    def start_run(self) -> None:
        """Mark start of run execution."""
        self._start_time = time.perf_counter()
        self.logger.debug("Merge started")

    def end_run(self) -> float:
        """Mark end of run execution and return total runtime.

        Returns:
            Total runtime in seconds
        """
        if self._start_time is None:
            return 0.0

        runtime = time.perf_counter() - self._start_time
        self.logger.debug("Merge finished", runtime_s=runtime, stage_times=self.stage_times)
        return runtime

    def time_stage(self, stage_name: str):
        """Context manager for timing a stage.

        Args:
            stage_name: Name of the stage being timed

        Returns:
            Context manager that tracks stage execution time
        """
        return _StageTimer(self, stage_name)


class _StageTimer:
    """Context manager for timing stage execution."""

    def __init__(self, context: RunContext, stage_name: str):
        self.context = context
        self.stage_name = stage_name
        self.start_time: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.context.logger.debug("Stage started", stage=self.stage_name)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is not None:
            runtime = time.perf_counter() - self.start_time
            self.context._stage_times[self.stage_name] = runtime

            if exc_type is None:
                self.context.logger.debug(
                    "Stage completed",
                    stage=self.stage_name,
                    runtime_s=runtime
                )
            else:
                self.context.logger.error(
                    "Stage failed",
                    stage=self.stage_name,
                    runtime_s=runtime,
                    error=str(exc_val)
                )
