"""Shared fixtures."""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from talkto.main import app


@pytest.fixture
def client():
    """Test client with its own forwarded IP so throttling state never leaks."""
    return TestClient(app, headers={"X-Forwarded-For": f"test-{uuid.uuid4()}"})


def mock_async_client(mock_client_class, json_data=None, status_code=200, error=None):
    """Wire a patched ``httpx.AsyncClient`` class to return one response.

    Returns the mock whose ``get`` coroutine is called by the code under test.
    """
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = json_data
    if error is not None:
        mock_response.raise_for_status = MagicMock(side_effect=error)
    else:
        mock_response.raise_for_status = MagicMock()

    mock_client_instance = MagicMock()
    mock_client_instance.get = AsyncMock(return_value=mock_response)
    mock_client_class.return_value.__aenter__ = AsyncMock(return_value=mock_client_instance)
    mock_client_class.return_value.__aexit__ = AsyncMock(return_value=None)
    return mock_client_instance
