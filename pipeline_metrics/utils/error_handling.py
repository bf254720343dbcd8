#!/usr/bin/env python3
"""
Error Handling Utility Module

Failures that must halt a run are logged once, with structured context, at
the point they are caught and then re-raised unchanged. Remote-call failures
(throttling, denied access, unknown pipeline) are never retried or swallowed;
the command-line entry point turns them into a failure exit status.
"""

import logging
from typing import Any, NoReturn


def log_and_raise(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    error_type: str = "Operation",
) -> NoReturn:
    """
    Log an error with context and re-raise it.

    botocore ClientErrors also log the service error code
    (e.g. "ThrottlingException") as aws_error_code.

    Args:
        logger: Logger of the calling module
        error: The caught exception
        context: What was being done, e.g. {"pipeline_name": "api-deploy", "page": 3}
        error_type: Operation label used in the message

    Example:
        try:
            response = client.list_pipelines()
        except ClientError as e:
            log_and_raise(logger, e, context={"operation": "list_pipelines"}, error_type="Pipeline listing")
    """
    extra: dict[str, Any] = {
        "error_type": error_type,
        "exception_class": type(error).__name__,
        "context": context,
    }
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        extra["aws_error_code"] = response.get("Error", {}).get("Code")

    logger.error(f"{error_type} failed: {error}", extra=extra)
    raise error
