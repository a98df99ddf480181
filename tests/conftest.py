from datetime import datetime
from unittest.mock import Mock

import pytest

from search_ui import SearchController, SearchServiceClient, SearchServiceConfig

BASE_URL = "http://search.test"
FIXED_NOW = datetime(2024, 5, 17, 9, 30, 15)


def _build_response(status_code=200, json_data=None, content=b"", json_error=None):
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.text = "" if json_data is None else str(json_data)
    if json_error is not None:
        response.json = Mock(side_effect=json_error)
    else:
        response.json = Mock(return_value=json_data)
    return response


@pytest.fixture
def make_response():
    """Factory for stand-ins of requests.Response."""
    return _build_response


@pytest.fixture
def fake_session():
    session = Mock()
    session.headers = {}
    return session


@pytest.fixture
def client(fake_session):
    return SearchServiceClient(config=SearchServiceConfig(base_url=BASE_URL), session=fake_session)


@pytest.fixture
def mock_client():
    """Client double for controller tests; configure fetch_* per test."""
    return Mock(spec=SearchServiceClient)


@pytest.fixture
def controller(mock_client):
    return SearchController(mock_client, clock=lambda: FIXED_NOW)


@pytest.fixture
def fixed_now():
    return FIXED_NOW
