#!/usr/bin/env python3
"""
CodePipeline Execution Collector

Retrieves pipeline execution history and pipeline names from AWS CodePipeline:
- Execution Fetcher: every execution summary of one pipeline, all pages
- Pipeline Enumerator: every pipeline name in the account/region, all pages

Both follow the service's continuation tokens until none is returned.
Read-only operation - does not modify any pipeline.

Remote failures are logged with context and re-raised unchanged (no retry).
"""

from collections.abc import Callable, Iterable
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from pipeline_metrics.core import get_logger
from pipeline_metrics.core.collector_metrics import get_current_tracker
from pipeline_metrics.domain.constants import api_config
from pipeline_metrics.domain.execution import ExecutionSummary
from pipeline_metrics.utils.error_handling import log_and_raise

logger = get_logger(__name__)


def _collect_all_pages(
    list_call: Callable[..., dict[str, Any]],
    result_key: str,
    context: dict[str, Any],
    error_type: str,
    **params: Any,
) -> list[Any]:
    """
    Call a paginated listing operation until no continuation token remains.

    Args:
        list_call: Bound client method, e.g. client.list_pipelines
        result_key: Response key holding the page items
        context: Structured logging context for failures
        error_type: Human-readable operation name for failures
        **params: Request parameters sent with every page

    Returns:
        Items from every page, in service order
    """
    items: list[Any] = []
    next_token: str | None = None
    page = 0

    while True:
        request = dict(params)
        if next_token:
            request["nextToken"] = next_token
        page += 1

        tracker = get_current_tracker()
        if tracker:
            tracker.record_api_call()

        try:
            response = list_call(**request)
        except (BotoCoreError, ClientError) as e:
            log_and_raise(logger, e, context={**context, "page": page}, error_type=error_type)

        items.extend(response.get(result_key, []))
        next_token = response.get("nextToken")
        if not next_token:
            break

    logger.debug(f"{error_type}: {len(items)} item(s) across {page} page(s)", extra=context)
    return items


def query_pipeline_executions(client: Any, pipeline_name: str) -> list[dict[str, Any]]:
    """
    Fetch every execution summary of a pipeline (all pages, service order).

    Args:
        client: boto3 CodePipeline client
        pipeline_name: Pipeline to list executions for

    Returns:
        Raw pipelineExecutionSummaries entries, newest first as the service returns them

    Raises:
        botocore.exceptions.ClientError: On service errors (throttling, access denied, unknown pipeline)
        botocore.exceptions.BotoCoreError: On transport or credential errors
    """
    return _collect_all_pages(
        client.list_pipeline_executions,
        "pipelineExecutionSummaries",
        context={"pipeline_name": pipeline_name},
        error_type="Pipeline execution listing",
        pipelineName=pipeline_name,
        maxResults=api_config.EXECUTIONS_PAGE_SIZE,
    )


def list_pipeline_names(client: Any) -> list[str]:
    """
    Enumerate every pipeline name in the account/region.

    Args:
        client: boto3 CodePipeline client

    Returns:
        Pipeline names in the order the service lists them

    Raises:
        botocore.exceptions.ClientError: On service errors
        botocore.exceptions.BotoCoreError: On transport or credential errors
    """
    pipelines = _collect_all_pages(
        client.list_pipelines,
        "pipelines",
        context={"operation": "list_pipelines"},
        error_type="Pipeline listing",
    )
    names = [pipeline["name"] for pipeline in pipelines]
    logger.info(f"Found {len(names)} pipeline(s)")
    return names


def to_chronological_order(executions: Iterable[ExecutionSummary]) -> list[ExecutionSummary]:
    """
    Order executions oldest first.

    The service lists newest first, so on its output this is a reversal.
    Sorting by (start_time, last_update_time) makes the operation idempotent.

    Args:
        executions: Executions in any order

    Returns:
        New list ordered by start time, then last update time
    """
    return sorted(executions, key=lambda execution: (execution.start_time, execution.last_update_time))


def get_completed_executions(client: Any, pipeline_name: str) -> list[ExecutionSummary]:
    """
    Fetch a pipeline's finished executions in chronological order.

    In-progress executions are excluded. Every other status is kept.

    Args:
        client: boto3 CodePipeline client
        pipeline_name: Pipeline to fetch

    Returns:
        ExecutionSummary list, oldest first
    """
    summaries = query_pipeline_executions(client, pipeline_name)
    executions = [ExecutionSummary.from_api(summary) for summary in summaries]
    completed = [execution for execution in executions if not execution.is_in_progress]

    logger.info(
        f"{pipeline_name}: {len(completed)} completed execution(s) "
        f"({len(executions) - len(completed)} in progress skipped)"
    )
    return to_chronological_order(completed)
