"""
Pytest configuration and shared fixtures

Provides common test fixtures for execution summaries, raw API pages and
mocked CodePipeline clients.
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest

from pipeline_metrics.domain.execution import ExecutionSummary

BASE_TIME = datetime(2026, 2, 10, 9, 0, 0, tzinfo=UTC)


def at(minutes: float) -> datetime:
    """Timestamp a number of minutes after BASE_TIME."""
    return BASE_TIME + timedelta(minutes=minutes)


# ===== Domain Model Fixtures =====


@pytest.fixture
def make_execution():
    """
    Factory for ExecutionSummary instances.

    Times are minutes after BASE_TIME:
        make_execution("Failed", 0, 10)  # Failed from 09:00 to 09:10
    """

    def _make(status: str, start: float, end: float, execution_id: str | None = None) -> ExecutionSummary:
        return ExecutionSummary(
            status=status,
            start_time=at(start),
            last_update_time=at(end),
            execution_id=execution_id,
        )

    return _make


@pytest.fixture
def mixed_executions(make_execution):
    """
    Chronological history: success, two failures, recovery, failure, recovery.
    """
    return [
        make_execution("Succeeded", 0, 10),
        make_execution("Failed", 20, 25),
        make_execution("Failed", 30, 40),
        make_execution("Succeeded", 50, 70),
        make_execution("Failed", 100, 105),
        make_execution("Succeeded", 110, 130),
    ]


# ===== API Response Fixtures =====


@pytest.fixture
def make_api_summary():
    """Factory for raw pipelineExecutionSummaries entries as boto3 returns them."""

    def _make(status: str, start: float, end: float, execution_id: str = "exec-1") -> dict:
        return {
            "pipelineExecutionId": execution_id,
            "status": status,
            "startTime": at(start),
            "lastUpdateTime": at(end),
        }

    return _make


@pytest.fixture
def mock_client():
    """Mock boto3 CodePipeline client with no responses configured."""
    return MagicMock()
