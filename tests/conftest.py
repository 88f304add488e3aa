"""Shared fixtures for gmaps_geocode tests."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from gmaps_geocode import GeocodeService


@pytest.fixture
def session():
    """Create a mock requests session."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def service(session):
    """Create a geocode service backed by the mock session."""
    return GeocodeService(session, "test-key")


@pytest.fixture
def mock_response():
    """Create a mock HTTP response."""
    def _create(status_code=200, json_data=None, text=None, content=None):
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.text = text if text is not None else json.dumps(json_data or {})
        response.content = content if content is not None else response.text.encode("utf-8")
        return response
    return _create
