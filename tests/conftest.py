"""Shared fixtures for Tradier client tests."""

from unittest import mock

import pytest
import requests

from tradier.config import TradierConfig
from tradier.models import AccountType
from tradier.request_builder import RequestBuilder


def make_response(payload=None, status_code=200):
    """Create a mock requests.Response returning ``payload`` as JSON."""
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload if payload is not None else {}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def mock_session():
    """Mock HTTP session answering every request with {"ok": true}."""
    session = mock.Mock(spec=requests.Session)
    session.request.return_value = make_response({"ok": True})
    return session


@pytest.fixture
def production_builder():
    """Request builder for a production (api) account."""
    return RequestBuilder(TradierConfig("test_token_123", AccountType.API))


@pytest.fixture
def sandbox_builder():
    """Request builder for a sandbox account."""
    return RequestBuilder(TradierConfig("test_token_123", AccountType.SANDBOX))


@pytest.fixture
def response_factory():
    """Factory for mock responses."""
    return make_response
