"""Shared fixtures."""

from typing import Callable, Iterator
from unittest.mock import MagicMock, patch

import json

import pytest

from prom_reader_core import PrometheusClient


@pytest.fixture
def client() -> Iterator[PrometheusClient]:
    """A fresh client per test, closed afterwards."""
    with PrometheusClient(base_url="http://localhost:9090") as c:
        yield c


@pytest.fixture
def mock_session() -> Iterator[MagicMock]:
    """Patch requests.Session in the client module and yield the session mock."""
    with patch("prom_reader_core.client.requests.Session") as mock_session_class:
        session = MagicMock()
        mock_session_class.return_value = session
        yield session


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for mock requests.Response objects."""

    def _make(status_code: int = 200, body: object = None, text: str = "") -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        if body is not None:
            text = json.dumps(body)
        response.content = text.encode()
        response.text = text
        return response

    return _make
