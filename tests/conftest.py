"""Shared pytest fixtures for Toggl tools tests."""

import json
from datetime import timedelta
from pathlib import Path

import pytest

from toggl_tools.config import Config

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    """Load a JSON fixture file."""
    return json.loads((FIXTURES_DIR / name).read_text())


@pytest.fixture
def mock_config():
    """Create mock application config (API v9)."""
    return Config(
        api_token="api-key",
        workspace_id=1234,
        timeout=timedelta(seconds=30),
    )


@pytest.fixture
def mock_config_v8():
    """Create mock application config for the legacy v8 API."""
    return Config(
        api_token="api-key",
        workspace_id=1234,
        timeout=timedelta(seconds=30),
        api_version="v8",
    )


@pytest.fixture
def projects_response():
    """Load workspace projects API response fixture."""
    return load_fixture("projects.json")


@pytest.fixture
def clients_response():
    """Load workspace clients API response fixture."""
    return load_fixture("clients.json")


@pytest.fixture
def report_response():
    """Load summary report API response fixture."""
    return load_fixture("report.json")


@pytest.fixture
def rc_file(tmp_path, monkeypatch):
    """Write an rc file and point $TOGGLRC at it; returns a writer."""

    def write(data) -> Path:
        path = tmp_path / "togglrc"
        if isinstance(data, str):
            path.write_text(data)
        else:
            path.write_text(json.dumps(data))
        monkeypatch.setenv("TOGGLRC", str(path))
        return path

    return write
