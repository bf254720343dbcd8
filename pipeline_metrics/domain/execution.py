"""
Execution domain model - one historical pipeline run

Represents a single CodePipeline execution summary as returned by
ListPipelineExecutions. Instances are read-only once created.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pipeline_metrics.domain.constants import execution_statuses
from pipeline_metrics.utils.datetime_utils import minutes_between, parse_api_timestamp


@dataclass(frozen=True)
class ExecutionSummary:
    """
    One pipeline execution with its status and timing.

    Attributes:
        status: Execution status ("Succeeded", "Failed", "InProgress", or any other service value)
        start_time: When the execution started
        last_update_time: When the execution was last updated (completion time for finished runs)
        execution_id: Optional pipelineExecutionId, used for logging only

    Example:
        execution = ExecutionSummary(
            status="Succeeded",
            start_time=datetime(2026, 2, 10, 9, 0, tzinfo=UTC),
            last_update_time=datetime(2026, 2, 10, 9, 15, tzinfo=UTC),
        )
        execution.elapsed_minutes  # 15
    """

    status: str
    start_time: datetime
    last_update_time: datetime
    execution_id: str | None = None

    def __post_init__(self) -> None:
        """
        Validate timestamps are datetime objects.

        Raises:
            TypeError: If start_time or last_update_time is not a datetime instance
        """
        for field_name in ("start_time", "last_update_time"):
            value = getattr(self, field_name)
            if not isinstance(value, datetime):
                raise TypeError(f"{field_name} must be datetime, got {type(value)}")

    @property
    def is_succeeded(self) -> bool:
        return self.status == execution_statuses.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.status == execution_statuses.FAILED

    @property
    def is_in_progress(self) -> bool:
        return self.status == execution_statuses.IN_PROGRESS

    @property
    def elapsed_minutes(self) -> int:
        """
        Whole minutes from start_time to last_update_time.

        Example:
            >>> ExecutionSummary("Failed", start, start + timedelta(minutes=7, seconds=59)).elapsed_minutes
            7
        """
        return minutes_between(self.start_time, self.last_update_time)

    @classmethod
    def from_api(cls, summary: dict[str, Any]) -> "ExecutionSummary":
        """
        Create an ExecutionSummary from a pipelineExecutionSummaries entry.

        boto3 returns timestamps as datetime objects; raw JSON responses carry
        ISO-8601 strings. Both are accepted.

        Args:
            summary: One entry of the ListPipelineExecutions response

        Returns:
            ExecutionSummary instance

        Raises:
            KeyError: If status, startTime or lastUpdateTime is missing
            ValueError: If a timestamp string cannot be parsed
        """
        return cls(
            status=summary["status"],
            start_time=_as_datetime(summary["startTime"]),
            last_update_time=_as_datetime(summary["lastUpdateTime"]),
            execution_id=summary.get("pipelineExecutionId"),
        )


def _as_datetime(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    parsed = parse_api_timestamp(value)
    if parsed is None:
        raise ValueError(f"Missing timestamp value: {value!r}")
    return parsed
