"""
Secure Configuration Management

Provides centralized, validated configuration for the application.
Replaces ad-hoc os.getenv() calls with strict validation and fail-fast behavior.

Usage:
    from pipeline_metrics.secure_config import get_config

    config = get_config()
    aws_config = config.get_aws_config()
    print(aws_config.region)

Environment variables (a .env file in the working directory is loaded first):
    AWS_REGION   - CodePipeline region (default: us-east-2)
    AWS_PROFILE  - Optional named profile for the boto3 session
    LOG_LEVEL    - Default log level (default: INFO)

Credentials are never read here. boto3 resolves them through its standard
credential chain (environment, shared credentials file, instance role).

Raises:
    ConfigurationError: If configuration is invalid
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from pipeline_metrics.domain.constants import api_config

REGION_PATTERN = r"^[a-z]{2}(-gov|-iso[a-z]?)?-[a-z]+-\d$"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


@dataclass
class AWSConfig:
    """
    Validated AWS configuration for the CodePipeline client.
    """

    region: str
    profile: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """
        Validate AWS configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.region:
            raise ConfigurationError("AWS_REGION is required")

        if not re.match(REGION_PATTERN, self.region):
            raise ConfigurationError(f"AWS_REGION is not a valid region name: {self.region}")

        if self.profile is not None:
            if not self.profile.strip():
                raise ConfigurationError("AWS_PROFILE must not be blank when set")

            placeholders = ["your_profile", "example", "placeholder", "replace_me"]
            if any(placeholder in self.profile.lower() for placeholder in placeholders):
                raise ConfigurationError("AWS_PROFILE contains a placeholder value - please set a real profile name")


@dataclass
class LoggingConfig:
    """
    Validated logging configuration.
    """

    level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            raise ConfigurationError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: {self.level}")

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level)


class SecureConfig:
    """
    Centralized secure configuration manager.

    Loads and validates all application configuration from environment variables.
    Provides fail-fast behavior to catch configuration issues early.
    """

    def __init__(self):
        """Initialize configuration (loads .env file)."""
        load_dotenv()

    def get_aws_config(self, region: Optional[str] = None) -> AWSConfig:
        """
        Get validated AWS configuration.

        Args:
            region: Optional region (overrides AWS_REGION env var)

        Returns:
            AWSConfig: Validated configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        region = region or os.getenv("AWS_REGION") or api_config.DEFAULT_REGION
        profile = os.getenv("AWS_PROFILE") or None

        return AWSConfig(region=region, profile=profile)

    def get_logging_config(self, level: Optional[str] = None) -> LoggingConfig:
        """
        Get validated logging configuration.

        Args:
            level: Optional level (overrides LOG_LEVEL env var)

        Returns:
            LoggingConfig: Validated configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        return LoggingConfig(level=level or os.getenv("LOG_LEVEL") or "INFO")


# Convenience function for getting configuration
_config_instance = None


def get_config() -> SecureConfig:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        SecureConfig: The configuration manager
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = SecureConfig()
    return _config_instance
