#!/usr/bin/env python3
"""
Delivery Metrics Collector for AWS CodePipeline

Computes delivery performance metrics from pipeline execution history:
- Cycle Time: Observed window per successful execution
- Lead Time: Work window start to next successful execution
- Mean Time Between Failure: Observed window per failed execution
- Mean Time To Recover: First failure to next successful execution
- Feedback Time: Mean execution duration
- Duration: First execution start to last execution update

Two modes:
    pipeline-metrics my-pipeline     # one pipeline
    pipeline-metrics                 # every pipeline in the region, one after another

One JSON record per pipeline is printed to stdout. Logs go to stderr.
Read-only operation - does not modify any pipeline.
"""

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pipeline_metrics.collectors.codepipeline_connection import get_codepipeline_client
from pipeline_metrics.collectors.delivery_metrics_calculations import calculate_delivery_metrics
from pipeline_metrics.collectors.pipeline_executions import get_completed_executions, list_pipeline_names
from pipeline_metrics.core import ConfigurationError, get_config, get_logger, log_with_context, setup_logging
from pipeline_metrics.core.collector_metrics import get_current_tracker, track_collector_performance
from pipeline_metrics.domain.delivery import DeliveryMetrics

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION_ERROR = 2


def collect_for_pipeline(client: Any, pipeline_name: str) -> DeliveryMetrics:
    """
    Fetch one pipeline's completed executions and compute its delivery metrics.

    Args:
        client: boto3 CodePipeline client
        pipeline_name: Pipeline to analyze

    Returns:
        DeliveryMetrics for the pipeline
    """
    executions = get_completed_executions(client, pipeline_name)
    metrics = calculate_delivery_metrics(pipeline_name, executions)

    tracker = get_current_tracker()
    if tracker:
        tracker.record_pipeline()

    log_with_context(
        logger,
        "info",
        f"Computed delivery metrics for {pipeline_name}",
        pipeline_name=pipeline_name,
        execution_count=metrics.execution_count,
        succeeded_count=metrics.succeeded_count,
        failed_count=metrics.failed_count,
    )
    return metrics


def collect_for_all_pipelines(client: Any) -> list[DeliveryMetrics]:
    """
    Compute delivery metrics for every pipeline in the region.

    Pipelines are enumerated first, then processed one at a time in
    enumeration order. Any failure aborts the whole run.

    Args:
        client: boto3 CodePipeline client

    Returns:
        DeliveryMetrics per pipeline, in enumeration order
    """
    pipeline_names = list_pipeline_names(client)
    return [collect_for_pipeline(client, pipeline_name) for pipeline_name in pipeline_names]


def render_metrics(metrics: DeliveryMetrics, raw: bool = False) -> str:
    """
    Render one pipeline's metrics as a JSON record.

    Args:
        metrics: Metrics to render
        raw: If True, emit minute values instead of human-readable durations

    Returns:
        Single-line JSON string
    """
    record = metrics.to_raw_dict() if raw else metrics.to_dict()
    return json.dumps(record, ensure_ascii=False)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="pipeline-metrics",
        description="Compute delivery metrics from AWS CodePipeline execution history",
    )

    parser.add_argument(
        "pipeline_name",
        nargs="?",
        help="Pipeline to analyze (default: every pipeline in the region)",
    )

    parser.add_argument("--region", help="AWS region (default: AWS_REGION or us-east-2)")

    parser.add_argument("--raw", action="store_true", help="Print metric values in minutes instead of prose")

    parser.add_argument("--log-level", help="Log level (default: LOG_LEVEL or INFO)")

    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON on stderr")

    parser.add_argument("--log-file", type=Path, help="Also write JSON logs to this file")

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit status (0 success, 1 run failure, 2 configuration error)
    """
    args = parse_arguments(argv)

    try:
        logging_config = get_config().get_logging_config(level=args.log_level)
    except ConfigurationError as e:
        print(f"[ERROR] Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    setup_logging(level=logging_config.level, log_file=args.log_file, json_output=args.json_logs)

    mode = "single" if args.pipeline_name else "fleet"

    try:
        client = get_codepipeline_client(region=args.region)
        with track_collector_performance(mode):
            if args.pipeline_name:
                results = [collect_for_pipeline(client, args.pipeline_name)]
            else:
                results = collect_for_all_pipelines(client)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIGURATION_ERROR
    except Exception as e:
        logger.error(f"Delivery metrics collection failed: {e}", exc_info=True)
        return EXIT_FAILURE

    for metrics in results:
        print(render_metrics(metrics, raw=args.raw))

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
