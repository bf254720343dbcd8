"""
Shared CodePipeline Connection Module

Provides centralized CodePipeline client creation for all collectors.

Functions:
    get_codepipeline_client(region=None) -> CodePipeline client
        Create a boto3 CodePipeline client using the validated AWS configuration.

Usage:
    from pipeline_metrics.collectors.codepipeline_connection import get_codepipeline_client

    client = get_codepipeline_client()
    client = get_codepipeline_client(region="eu-west-1")
"""

from typing import Any

import boto3

from pipeline_metrics.core import get_logger
from pipeline_metrics.domain.constants import api_config
from pipeline_metrics.secure_config import get_config

logger = get_logger(__name__)


def get_codepipeline_client(region: str | None = None) -> Any:
    """
    Get a CodePipeline client using settings from secure_config.

    Credentials are resolved by boto3's standard chain; only the region and
    optional profile come from configuration.

    Args:
        region: Optional region, overrides AWS_REGION

    Returns:
        boto3 CodePipeline client

    Raises:
        ConfigurationError: If the region or profile is invalid
        botocore.exceptions.ProfileNotFound: If AWS_PROFILE names an unknown profile

    Example:
        client = get_codepipeline_client()
        response = client.list_pipelines()
    """
    aws_config = get_config().get_aws_config(region=region)

    session = boto3.Session(profile_name=aws_config.profile, region_name=aws_config.region)
    logger.debug(f"Creating CodePipeline client for region {aws_config.region}")
    return session.client(api_config.SERVICE_NAME)
