"""Shared fixtures for Kudoly MCP unit tests"""

from unittest.mock import AsyncMock, Mock

import pytest


@pytest.fixture
def make_response():
    """Factory for mock httpx responses.

    body=None makes .json() fail the way a non-JSON body does.
    """

    def _make(status_code=200, body=None, reason_phrase="OK"):
        response = Mock()
        response.status_code = status_code
        response.reason_phrase = reason_phrase
        if body is None:
            response.json.side_effect = ValueError("Expecting value")
        else:
            response.json.return_value = body
        return response

    return _make


@pytest.fixture
def no_manifest(monkeypatch):
    """No project name available from the local manifest"""
    monkeypatch.setattr(
        "kudoly_mcp.services.project_name.get_project_name_from_manifest",
        lambda directory=None: None,
    )


@pytest.fixture
def manifest_project(monkeypatch):
    """Local manifest names the project 'test-project'"""
    monkeypatch.setattr(
        "kudoly_mcp.services.project_name.get_project_name_from_manifest",
        lambda directory=None: "test-project",
    )


@pytest.fixture
def mock_api():
    """Client double exposing the three backend operations"""
    api = Mock()
    api.check_task = AsyncMock()
    api.save_report = AsyncMock()
    api.save_devlog = AsyncMock()
    return api
