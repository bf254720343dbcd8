"""
Data Collectors - Fetch execution history and compute delivery metrics

This package contains:
    - codepipeline_connection: boto3 CodePipeline client factory
    - pipeline_executions: paginated execution and pipeline listing
    - delivery_metrics_calculations: the delivery metrics engine
"""

__all__ = []
