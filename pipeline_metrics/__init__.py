"""
Pipeline Delivery Metrics

Computes delivery performance metrics from AWS CodePipeline execution history.

Package Structure:
    - core: Infrastructure (config, logging, run tracking)
    - domain: Domain models (ExecutionSummary, DeliveryMetrics)
    - collectors: CodePipeline client, paginated listing, metrics engine
    - utils: Datetime, statistics and error handling helpers
"""

__version__ = "1.0.0"
