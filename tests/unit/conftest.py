"""
Unit Test Fixtures.

Fixtures for unit tests. Unit tests never start the HTTP app.
"""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_request() -> MagicMock:
    """
    Mock Starlette request for calling handlers directly.

    Usage:
        async def test_handler(mock_request):
            response = await application_error_handler(mock_request, exc)
    """
    request = MagicMock()
    request.url.path = "/api/v1/board"
    request.method = "POST"
    request.headers = {}
    request.state = MagicMock(spec=[])
    return request


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                ...
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
