"""Unit tests for ProjectsAPI module."""

import re

from toggl_tools.api.client import TogglClient
from toggl_tools.api.projects import ProjectsAPI
from toggl_tools.models import Project

PROJECTS_URL = re.compile(r".*/api/v9/workspaces/1234/projects$")
CLIENTS_URL = re.compile(r".*/api/v9/workspaces/1234/clients$")


class TestClients:
    """Tests for ProjectsAPI.clients()."""

    def test_clients_returns_id_to_name(self, httpx_mock, mock_config, clients_response):
        httpx_mock.add_response(url=CLIENTS_URL, json=clients_response)

        with TogglClient(mock_config) as client:
            clients = ProjectsAPI(client).clients()

        assert clients == {101: "Client A", 102: "Client B"}

    def test_clients_null_is_empty(self, httpx_mock, mock_config):
        """Verify a workspace without clients returns an empty mapping."""
        httpx_mock.add_response(url=CLIENTS_URL, text="null")

        with TogglClient(mock_config) as client:
            assert ProjectsAPI(client).clients() == {}


class TestList:
    """Tests for ProjectsAPI.list()."""

    def test_list_merges_client_names(
        self, httpx_mock, mock_config, projects_response, clients_response
    ):
        """Verify only projects with a known client get a qualified name."""
        httpx_mock.add_response(url=PROJECTS_URL, json=projects_response)
        httpx_mock.add_response(url=CLIENTS_URL, json=clients_response)

        with TogglClient(mock_config) as client:
            projects = ProjectsAPI(client).list()

        assert [p.full_name for p in projects] == ["Client A/A", "B", "C"]
        assert projects[0].client_name == "Client A"
        assert projects[1].client_id == 999
        assert projects[1].client_name is None

    def test_list_v8_uses_cid(self, httpx_mock, mock_config_v8, clients_response):
        httpx_mock.add_response(
            url=re.compile(r".*/api/v8/workspaces/1234/projects$"),
            json=[{"id": 7, "name": "Site", "cid": 102}],
        )
        httpx_mock.add_response(
            url=re.compile(r".*/api/v8/workspaces/1234/clients$"),
            json=clients_response,
        )

        with TogglClient(mock_config_v8) as client:
            projects = ProjectsAPI(client).list()

        assert projects == [Project(id=7, name="Site", client_id=102, client_name="Client B")]

    def test_list_survives_client_lookup_failure(
        self, httpx_mock, mock_config, projects_response
    ):
        """Verify projects keep bare names when clients can't be fetched."""
        httpx_mock.add_response(url=PROJECTS_URL, json=projects_response)
        httpx_mock.add_response(url=CLIENTS_URL, status_code=500)

        with TogglClient(mock_config) as client:
            projects = ProjectsAPI(client).list()

        assert [p.full_name for p in projects] == ["A", "B", "C"]

    def test_list_is_cached(self, httpx_mock, mock_config, projects_response, clients_response):
        httpx_mock.add_response(url=PROJECTS_URL, json=projects_response)
        httpx_mock.add_response(url=CLIENTS_URL, json=clients_response)

        with TogglClient(mock_config) as client:
            api = ProjectsAPI(client)
            api.list()
            api.list()

        assert len(httpx_mock.get_requests()) == 2


class TestNameFromId:
    """Tests for ProjectsAPI.name_from_id()."""

    def test_known_and_unknown_ids(
        self, httpx_mock, mock_config, projects_response, clients_response
    ):
        httpx_mock.add_response(url=PROJECTS_URL, json=projects_response)
        httpx_mock.add_response(url=CLIENTS_URL, json=clients_response)

        with TogglClient(mock_config) as client:
            api = ProjectsAPI(client)
            assert api.name_from_id(2) == "B"
            assert api.name_from_id(42) == "<unknown>"
            assert api.name_from_id(None) == "<unknown>"
