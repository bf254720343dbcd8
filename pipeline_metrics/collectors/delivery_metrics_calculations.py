#!/usr/bin/env python3
"""
Delivery Metrics Calculation Functions

Pure calculation functions for delivery metrics (cycle time, lead time, MTBF,
MTTR, feedback time, total duration). These functions operate on executions in
chronological order (oldest first) and return values in minutes.

A metric whose denominator is empty returns None.
"""

from collections.abc import Sequence

from pipeline_metrics.core import get_logger
from pipeline_metrics.domain.delivery import DeliveryMetrics
from pipeline_metrics.domain.execution import ExecutionSummary
from pipeline_metrics.utils.datetime_utils import minutes_between
from pipeline_metrics.utils.statistics import calculate_mean, safe_divide

logger = get_logger(__name__)


def calculate_total_duration(executions: Sequence[ExecutionSummary]) -> int | None:
    """
    Calculate minutes from the first execution's start to the last execution's last update.

    Returns None for an empty sequence.
    """
    if not executions:
        return None
    return minutes_between(executions[0].start_time, executions[-1].last_update_time)


def calculate_cycle_time(executions: Sequence[ExecutionSummary]) -> float | None:
    """
    Calculate cycle time: total duration divided by the number of successful executions.
    """
    success_count = sum(1 for execution in executions if execution.is_succeeded)
    return safe_divide(calculate_total_duration(executions), success_count)


def calculate_mean_time_between_failure(executions: Sequence[ExecutionSummary]) -> float | None:
    """
    Calculate MTBF: total duration divided by the number of failed executions.
    """
    failure_count = sum(1 for execution in executions if execution.is_failed)
    return safe_divide(calculate_total_duration(executions), failure_count)


def recovery_windows(executions: Sequence[ExecutionSummary]) -> list[int]:
    """
    Find every failure-to-recovery window, in minutes.

    A window opens at the first failed execution seen while no window is open
    and is anchored at that execution's start time. Later failures leave the
    anchor in place. The next successful execution closes the window at its
    last update time.

    Args:
        executions: Executions in chronological order

    Returns:
        Window lengths in minutes, in the order they closed
    """
    windows: list[int] = []
    anchor: ExecutionSummary | None = None

    for execution in executions:
        if anchor is None and execution.is_failed:
            anchor = execution

        if anchor is not None and execution.is_succeeded:
            windows.append(minutes_between(anchor.start_time, execution.last_update_time))
            anchor = None

    return windows


def calculate_mean_time_to_recover(executions: Sequence[ExecutionSummary]) -> float | None:
    """
    Calculate MTTR: mean of all failure-to-recovery windows.
    """
    return calculate_mean(recovery_windows(executions))


def lead_time_windows(executions: Sequence[ExecutionSummary]) -> list[int]:
    """
    Find every work window from its start to the next success, in minutes.

    A window opens at the first execution and at the execution following each
    close, whatever its status. It closes at the next successful execution,
    so exactly one window is recorded per success.

    Args:
        executions: Executions in chronological order

    Returns:
        Window lengths in minutes, in the order they closed
    """
    windows: list[int] = []
    anchor: ExecutionSummary | None = None

    for execution in executions:
        if anchor is None:
            anchor = execution

        if execution.is_succeeded:
            windows.append(minutes_between(anchor.start_time, execution.last_update_time))
            anchor = None

    return windows


def calculate_lead_time(executions: Sequence[ExecutionSummary]) -> float | None:
    """
    Calculate lead time: mean of all work windows.
    """
    return calculate_mean(lead_time_windows(executions))


def calculate_feedback_time(executions: Sequence[ExecutionSummary]) -> float | None:
    """
    Calculate feedback time: mean elapsed minutes per execution, regardless of status.
    """
    return calculate_mean([execution.elapsed_minutes for execution in executions])


def calculate_delivery_metrics(pipeline_name: str, executions: Sequence[ExecutionSummary]) -> DeliveryMetrics:
    """
    Calculate all six delivery metrics for one pipeline.

    Args:
        pipeline_name: Pipeline the executions belong to
        executions: Completed executions in chronological order

    Returns:
        DeliveryMetrics with absent (None) values where a denominator is empty
    """
    metrics = DeliveryMetrics(
        pipeline_name=pipeline_name,
        total_duration_minutes=calculate_total_duration(executions),
        cycle_time_minutes=calculate_cycle_time(executions),
        lead_time_minutes=calculate_lead_time(executions),
        mean_time_between_failure_minutes=calculate_mean_time_between_failure(executions),
        mean_time_to_recover_minutes=calculate_mean_time_to_recover(executions),
        feedback_time_minutes=calculate_feedback_time(executions),
        execution_count=len(executions),
        succeeded_count=sum(1 for execution in executions if execution.is_succeeded),
        failed_count=sum(1 for execution in executions if execution.is_failed),
    )

    if metrics.absent_metrics:
        logger.warning(
            f"{pipeline_name}: metrics not computable from {len(executions)} execution(s): "
            f"{', '.join(metrics.absent_metrics)}",
            extra={"pipeline_name": pipeline_name, "absent_metrics": metrics.absent_metrics},
        )

    return metrics
