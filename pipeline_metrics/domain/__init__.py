"""
Domain Models - Type-safe data structures for delivery metrics

This package contains dataclasses representing business domain concepts:
    - execution: ExecutionSummary (one historical pipeline run)
    - delivery: DeliveryMetrics (six delivery metrics for one pipeline)
    - constants: execution statuses, API settings, duration thresholds

Usage:
    from pipeline_metrics.domain import ExecutionSummary

    execution = ExecutionSummary.from_api(summary)
    if execution.is_failed:
        print(f"Execution {execution.execution_id} failed")
"""

from .delivery import DeliveryMetrics
from .execution import ExecutionSummary

__all__ = [
    "ExecutionSummary",
    "DeliveryMetrics",
]
