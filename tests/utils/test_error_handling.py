#!/usr/bin/env python3
"""
Tests for Error Handling Utility Module

Tests log_and_raise(): structured error logging followed by re-raise.
"""

import logging
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from pipeline_metrics.utils.error_handling import log_and_raise


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing log calls."""
    return MagicMock(spec=logging.Logger)


class TestLogAndRaise:
    """Test suite for log_and_raise() function."""

    def test_reraises_original_exception(self, mock_logger):
        """Test that the same exception instance is re-raised."""
        error = ValueError("bad data")

        with pytest.raises(ValueError) as exc_info:
            log_and_raise(mock_logger, error, {"pipeline_name": "api"}, "Parsing")

        assert exc_info.value is error

    def test_logs_at_error_level(self, mock_logger):
        """Test message and structured context are logged at ERROR."""
        error = ClientError({"Error": {"Code": "ThrottlingException", "Message": "Rate exceeded"}}, "ListPipelines")

        with pytest.raises(ClientError):
            log_and_raise(mock_logger, error, {"operation": "list_pipelines", "page": 2}, "Pipeline listing")

        mock_logger.error.assert_called_once()
        message = mock_logger.error.call_args[0][0]
        extra = mock_logger.error.call_args[1]["extra"]

        assert message.startswith("Pipeline listing failed:")
        assert "ThrottlingException" in message
        assert extra["error_type"] == "Pipeline listing"
        assert extra["exception_class"] == "ClientError"
        assert extra["context"] == {"operation": "list_pipelines", "page": 2}
        assert extra["aws_error_code"] == "ThrottlingException"

    def test_non_aws_error_has_no_error_code(self, mock_logger):
        with pytest.raises(KeyError):
            log_and_raise(mock_logger, KeyError("startTime"), {"pipeline_name": "api"}, "Parsing")

        assert "aws_error_code" not in mock_logger.error.call_args[1]["extra"]

    def test_default_error_type(self, mock_logger):
        """Test default operation label."""
        with pytest.raises(RuntimeError):
            log_and_raise(mock_logger, RuntimeError("boom"), {})

        assert mock_logger.error.call_args[0][0] == "Operation failed: boom"
