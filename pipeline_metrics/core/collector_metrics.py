"""
Collection run tracking

One tracker lives for the duration of a CLI run. The fetchers count their
CodePipeline requests on it and the orchestrator counts finished pipelines.
When the run ends a single summary line is logged; nothing is persisted.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from pipeline_metrics.core.logging_config import get_logger

logger = get_logger(__name__)

_current_tracker: "CollectorMetricsTracker | None" = None


@dataclass
class CollectorMetricsTracker:
    """
    Counters and outcome for one collection run.

    Attributes:
        collector_name: Run mode, "single" or "fleet"
        start_time: perf_counter() value at start(), None before
        execution_time_ms: Wall time of the run
        success: True once the run finished without raising
        pipeline_count: Pipelines whose metrics were computed
        api_call_count: CodePipeline list requests issued (one per page)
        error_message: str() of the failure, if any
        error_type: Exception class name of the failure, if any
    """

    collector_name: str
    start_time: float | None = None
    execution_time_ms: float = 0
    success: bool = False
    pipeline_count: int = 0
    api_call_count: int = 0
    error_message: str | None = None
    error_type: str | None = None

    def start(self) -> None:
        self.start_time = time.perf_counter()
        logger.debug(f"Started {self.collector_name} collection")

    def end(self, success: bool, error: Exception | None = None) -> None:
        """
        Stop the clock and record the outcome.

        Args:
            success: Whether the run completed
            error: The exception that ended the run, if any
        """
        if self.start_time is not None:
            self.execution_time_ms = (time.perf_counter() - self.start_time) * 1000
        self.success = success
        if error is not None:
            self.error_message = str(error)
            self.error_type = type(error).__name__

    def record_api_call(self) -> None:
        self.api_call_count += 1

    def record_pipeline(self) -> None:
        self.pipeline_count += 1

    def to_dict(self) -> dict[str, Any]:
        """Summary fields for structured logging (start_time omitted)."""
        return {
            "collector_name": self.collector_name,
            "execution_time_ms": round(self.execution_time_ms, 2),
            "success": self.success,
            "pipeline_count": self.pipeline_count,
            "api_call_count": self.api_call_count,
            "error_message": self.error_message,
            "error_type": self.error_type,
        }


def get_current_tracker() -> CollectorMetricsTracker | None:
    """Tracker of the run in progress, or None outside track_collector_performance()."""
    return _current_tracker


@contextmanager
def track_collector_performance(collector_name: str) -> Iterator[CollectorMetricsTracker]:
    """
    Track one collection run and log its summary.

    The tracker is reachable through get_current_tracker() inside the block.
    Exceptions are recorded, logged and re-raised.

    Example:
        with track_collector_performance("fleet"):
            results = collect_for_all_pipelines(client)
    """
    global _current_tracker

    tracker = CollectorMetricsTracker(collector_name)
    _current_tracker = tracker
    tracker.start()
    try:
        yield tracker
    except Exception as e:
        tracker.end(success=False, error=e)
        logger.error(f"Collection failed after {tracker.api_call_count} API call(s)", extra=tracker.to_dict())
        raise
    else:
        tracker.end(success=True)
        logger.info(
            f"Collection completed successfully: {tracker.pipeline_count} pipeline(s), "
            f"{tracker.api_call_count} API call(s)",
            extra=tracker.to_dict(),
        )
    finally:
        _current_tracker = None
