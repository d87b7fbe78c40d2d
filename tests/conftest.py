"""Shared pytest fixtures for atlassian-rest tests."""

from unittest.mock import MagicMock, patch

import pytest

from atlassian_rest.common.credentials import AtlassianCredentials
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.tracing import NoopTracer

SITE = "https://test.atlassian.net"


@pytest.fixture
def connector() -> MagicMock:
    """Mock connector that records requests and answers 200 with no body."""
    mock = MagicMock(spec=Connector)
    mock.new_request.return_value = MagicMock(name="request")
    mock.call.return_value = (None, ResponseScheme(code=200, endpoint=SITE))
    return mock


@pytest.fixture
def tracer() -> NoopTracer:
    """Tracer that records nothing."""
    return NoopTracer()


@pytest.fixture
def mock_credentials():
    """Mock get_credentials to return test credentials."""
    with patch("atlassian_rest.common.base.get_credentials") as mock:
        mock.return_value = AtlassianCredentials(
            site=SITE,
            email="test@example.com",
            api_token="test-token",
        )
        yield mock
