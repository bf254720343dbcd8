#!/usr/bin/env python3
"""
Application Constants

Centralized constants for execution statuses and CodePipeline API calls.
Provides type-safe, immutable values used across collectors and the metrics engine.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionStatuses:
    """
    CodePipeline execution status values.

    Only IN_PROGRESS, SUCCEEDED and FAILED drive metric calculations.
    Every other status is carried through unrecognized.

    Example:
        >>> statuses = execution_statuses
        >>> print(statuses.SUCCEEDED)
        Succeeded
    """

    IN_PROGRESS: str = "InProgress"
    """Execution still running - excluded before any metric is computed"""

    SUCCEEDED: str = "Succeeded"
    """Execution completed successfully"""

    FAILED: str = "Failed"
    """Execution completed with a failure"""

    STOPPED: str = "Stopped"
    STOPPING: str = "Stopping"
    SUPERSEDED: str = "Superseded"
    CANCELLED: str = "Cancelled"


@dataclass(frozen=True)
class APIConfig:
    """
    CodePipeline API configuration constants.

    Attributes:
        DEFAULT_REGION: Region used when AWS_REGION is not set
        EXECUTIONS_PAGE_SIZE: maxResults for ListPipelineExecutions (service maximum is 100)
        SERVICE_NAME: boto3 service name

    Example:
        >>> config = api_config
        >>> print(config.DEFAULT_REGION)
        us-east-2
    """

    DEFAULT_REGION: str = "us-east-2"
    """Region used when AWS_REGION is not set"""

    EXECUTIONS_PAGE_SIZE: int = 100
    """maxResults for ListPipelineExecutions"""

    SERVICE_NAME: str = "codepipeline"


# Singleton instances for easy import
execution_statuses = ExecutionStatuses()
api_config = APIConfig()
