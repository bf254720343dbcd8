"""
Statistics Utilities

Shared statistical helpers for the delivery metrics engine.

Usage:
    from pipeline_metrics.utils.statistics import calculate_mean, safe_divide

    mean_recovery = calculate_mean(window_lengths)
    cycle_time = safe_divide(total_minutes, success_count)
"""

import logging
from collections.abc import Sequence

# Set up logger
logger = logging.getLogger(__name__)


def safe_divide(numerator: float | None, denominator: int) -> float | None:
    """
    Divide, returning None instead of raising or producing a non-finite value.

    Args:
        numerator: Value to divide (None propagates)
        denominator: Count to divide by

    Returns:
        numerator / denominator, or None if numerator is None or denominator is zero

    Example:
        safe_divide(120, 4)  # 30.0
        safe_divide(120, 0)  # None
    """
    if numerator is None or denominator == 0:
        return None
    return numerator / denominator


def calculate_mean(data: Sequence[float]) -> float | None:
    """
    Calculate the arithmetic mean of a sequence.

    Args:
        data: Sequence of numeric values

    Returns:
        Mean value, or None if data is empty

    Example:
        recovery_minutes = [30, 90]
        calculate_mean(recovery_minutes)  # 60.0
    """
    if not data:
        logger.debug("Mean of empty data requested")
        return None
    return safe_divide(float(sum(data)), len(data))
