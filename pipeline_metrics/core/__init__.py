"""
Core Infrastructure - Configuration, Logging, Run Tracking

This package provides centralized infrastructure utilities that should be used
throughout the application instead of direct library calls.

Usage:
    from pipeline_metrics.core import get_config, get_logger

    config = get_config()
    aws_config = config.get_aws_config()

    logger = get_logger(__name__)
"""

from ..secure_config import (
    AWSConfig,
    ConfigurationError,
    LoggingConfig,
    SecureConfig,
    get_config,
)
from .logging_config import get_logger, log_with_context, setup_logging

__all__ = [
    # Configuration
    "get_config",
    "ConfigurationError",
    "SecureConfig",
    "AWSConfig",
    "LoggingConfig",
    # Logging
    "get_logger",
    "log_with_context",
    "setup_logging",
]
