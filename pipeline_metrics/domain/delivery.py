"""
Delivery domain model - per-pipeline delivery performance metrics

Represents the six delivery metrics computed for one pipeline:
    - Total duration of the observed window
    - Cycle time (window per successful run)
    - Lead time (window start to next success)
    - Mean time between failure
    - Mean time to recover
    - Feedback time (mean run duration)

All values are minutes. A metric with an empty denominator (no successes,
no failures, no recovery windows) is None rather than a non-finite number.
"""

from dataclasses import dataclass
from typing import Any

from pipeline_metrics.utils.datetime_utils import humanize_minutes

# Metric attribute -> record key, in output order
METRIC_FIELDS: dict[str, str] = {
    "cycle_time_minutes": "cycleTime",
    "lead_time_minutes": "leadTime",
    "mean_time_between_failure_minutes": "meanTimeBetweenFailure",
    "mean_time_to_recover_minutes": "meanTimeToRecover",
    "total_duration_minutes": "duration",
    "feedback_time_minutes": "feedbackTime",
}


@dataclass(frozen=True)
class DeliveryMetrics:
    """
    Delivery metrics for a single pipeline.

    Attributes:
        pipeline_name: CodePipeline pipeline name
        total_duration_minutes: First start to last update, in whole minutes
        cycle_time_minutes: Total duration / succeeded count
        lead_time_minutes: Mean window from window start to next success
        mean_time_between_failure_minutes: Total duration / failed count
        mean_time_to_recover_minutes: Mean window from first failure to next success
        feedback_time_minutes: Mean per-execution elapsed time
        execution_count: Completed executions analyzed
        succeeded_count: Executions with status Succeeded
        failed_count: Executions with status Failed

    Example:
        metrics = calculate_delivery_metrics("api-deploy", executions)
        print(metrics.to_dict()["cycleTime"])  # "2 hours"
    """

    pipeline_name: str
    total_duration_minutes: int | None
    cycle_time_minutes: float | None
    lead_time_minutes: float | None
    mean_time_between_failure_minutes: float | None
    mean_time_to_recover_minutes: float | None
    feedback_time_minutes: float | None
    execution_count: int = 0
    succeeded_count: int = 0
    failed_count: int = 0

    @property
    def absent_metrics(self) -> list[str]:
        """
        Record keys of metrics that could not be computed.

        Returns:
            List of metric names whose value is None
        """
        return [key for attr, key in METRIC_FIELDS.items() if getattr(self, attr) is None]

    @property
    def is_complete(self) -> bool:
        return not self.absent_metrics

    def to_dict(self) -> dict[str, Any]:
        """
        Human-readable record, e.g. {"pipelineName": "api", "cycleTime": "2 hours", ...}.

        Absent metrics are None.
        """
        record: dict[str, Any] = {"pipelineName": self.pipeline_name}
        for attr, key in METRIC_FIELDS.items():
            record[key] = humanize_minutes(getattr(self, attr))
        return record

    def to_raw_dict(self) -> dict[str, Any]:
        """Numeric record in minutes, including execution counts."""
        record: dict[str, Any] = {"pipelineName": self.pipeline_name}
        for attr, key in METRIC_FIELDS.items():
            value = getattr(self, attr)
            record[key] = round(value, 2) if value is not None else None
        record["executionCount"] = self.execution_count
        record["succeededCount"] = self.succeeded_count
        record["failedCount"] = self.failed_count
        return record

    def __str__(self) -> str:
        rendered = ", ".join(f"{key}={value}" for key, value in self.to_dict().items() if key != "pipelineName")
        return f"DeliveryMetrics({self.pipeline_name}: {rendered})"
