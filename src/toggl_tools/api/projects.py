"""Projects and clients API module."""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ..exceptions import DecodeError, TogglError
from ..models import UNKNOWN_PROJECT, Client, Project
from .client import TogglClient

console = Console(stderr=True)


class ProjectsAPI:
    """API for querying workspace projects and their billing clients."""

    def __init__(self, client: TogglClient):
        self.client = client
        self._projects_cache: Optional[list[Project]] = None

    def clients(self) -> dict[int, str]:
        """Map of billing client id to name."""
        url = self.client.workspace_url("clients")
        response = self.client.get(url) or []

        try:
            clients = [Client.model_validate(c) for c in response]
        except (TypeError, ValidationError) as e:
            raise DecodeError(f"unexpected clients payload: {e}") from e

        return {c.id: c.name for c in clients}

    def list(self) -> list[Project]:
        """List workspace projects in server order, annotated with client names.

        If the client lookup fails the projects are returned with bare names.
        """
        if self._projects_cache is not None:
            return self._projects_cache

        url = self.client.workspace_url("projects")
        response = self.client.get(url) or []

        try:
            projects = [Project.model_validate(p) for p in response]
        except (TypeError, ValidationError) as e:
            raise DecodeError(f"unexpected projects payload: {e}") from e

        try:
            clients = self.clients()
        except TogglError as e:
            console.print(f"[dim]Can't get clients, showing bare project names ({escape(e.message)})[/dim]")
            clients = {}

        for project in projects:
            if project.client_id is not None and project.client_id in clients:
                project.client_name = clients[project.client_id]

        self._projects_cache = projects
        return projects

    def get_by_id(self, project_id: Optional[int]) -> Optional[Project]:
        """Get a project by ID from cache."""
        if project_id is None:
            return None
        for p in self.list():
            if p.id == project_id:
                return p
        return None

    def name_from_id(self, project_id: Optional[int]) -> str:
        """Project name for display, or "<unknown>"."""
        project = self.get_by_id(project_id)
        if project is None:
            return UNKNOWN_PROJECT
        return project.name
