"""
Tests for Secure Configuration Management

Tests AWS and logging configuration validation and environment loading.
"""

import logging

import pytest

from pipeline_metrics.secure_config import (
    AWSConfig,
    ConfigurationError,
    LoggingConfig,
    SecureConfig,
    get_config,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables and skip .env loading."""
    for name in ("AWS_REGION", "AWS_PROFILE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("pipeline_metrics.secure_config.load_dotenv", lambda: None)
    return monkeypatch


class TestAWSConfig:
    """Tests for AWSConfig validation"""

    @pytest.mark.parametrize("region", ["us-east-2", "eu-west-1", "ap-southeast-2", "us-gov-west-1"])
    def test_valid_regions(self, region):
        """Test real region names are accepted"""
        assert AWSConfig(region=region).region == region

    @pytest.mark.parametrize("region", ["us-east", "US-EAST-2", "useast2", "us-east-2; rm -rf"])
    def test_invalid_regions(self, region):
        """Test malformed region names are rejected"""
        with pytest.raises(ConfigurationError, match="not a valid region"):
            AWSConfig(region=region)

    def test_empty_region(self):
        """Test region is required"""
        with pytest.raises(ConfigurationError, match="AWS_REGION is required"):
            AWSConfig(region="")

    def test_blank_profile(self):
        """Test whitespace-only profile is rejected"""
        with pytest.raises(ConfigurationError, match="must not be blank"):
            AWSConfig(region="us-east-2", profile="  ")

    def test_placeholder_profile(self):
        """Test placeholder profile values are rejected"""
        with pytest.raises(ConfigurationError, match="placeholder"):
            AWSConfig(region="us-east-2", profile="your_profile_here")


class TestLoggingConfig:
    """Tests for LoggingConfig validation"""

    def test_level_normalized(self):
        """Test level names are case-insensitive"""
        config = LoggingConfig(level="debug")

        assert config.level == "DEBUG"
        assert config.numeric_level == logging.DEBUG

    def test_unknown_level(self):
        """Test unknown levels are rejected"""
        with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
            LoggingConfig(level="VERBOSE")


class TestSecureConfig:
    """Tests for SecureConfig environment loading"""

    def test_default_region(self, clean_env):
        """Test default region when AWS_REGION is unset"""
        config = SecureConfig().get_aws_config()

        assert config.region == "us-east-2"
        assert config.profile is None

    def test_environment_values(self, clean_env):
        """Test AWS_REGION and AWS_PROFILE are read"""
        clean_env.setenv("AWS_REGION", "eu-central-1")
        clean_env.setenv("AWS_PROFILE", "delivery")

        config = SecureConfig().get_aws_config()

        assert config.region == "eu-central-1"
        assert config.profile == "delivery"

    def test_argument_overrides_environment(self, clean_env):
        """Test explicit region wins over AWS_REGION"""
        clean_env.setenv("AWS_REGION", "eu-central-1")

        assert SecureConfig().get_aws_config(region="us-west-2").region == "us-west-2"

    def test_invalid_environment_region(self, clean_env):
        """Test invalid AWS_REGION fails fast"""
        clean_env.setenv("AWS_REGION", "mars-1")

        with pytest.raises(ConfigurationError):
            SecureConfig().get_aws_config()

    def test_log_level_from_environment(self, clean_env):
        """Test LOG_LEVEL is read and argument overrides it"""
        clean_env.setenv("LOG_LEVEL", "warning")

        assert SecureConfig().get_logging_config().level == "WARNING"
        assert SecureConfig().get_logging_config(level="DEBUG").level == "DEBUG"

    def test_get_config_singleton(self):
        """Test get_config returns the same instance"""
        assert get_config() is get_config()
