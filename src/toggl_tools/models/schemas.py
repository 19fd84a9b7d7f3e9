"""Pydantic models for Toggl API responses."""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

UNKNOWN_PROJECT = "<unknown>"


class Client(BaseModel):
    """A billing client; only used to annotate projects."""

    id: int
    name: str


class Project(BaseModel):
    """A workspace project."""

    id: int
    name: str
    client_id: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("client_id", "cid")
    )
    client_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        """Client-qualified name, e.g. "Acme/Website"."""
        if self.client_name:
            return f"{self.client_name}/{self.name}"
        return self.name


class Timer(BaseModel):
    """The running time entry."""

    id: int
    project_id: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("project_id", "pid")
    )
    workspace_id: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("workspace_id", "wid")
    )
    start: datetime


class StoppedEntry(BaseModel):
    """A time entry as returned by the stop endpoint."""

    id: Optional[int] = None
    project_id: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("project_id", "pid")
    )
    duration: timedelta  # seconds on the wire


class ReportLine(BaseModel):
    """Accumulated time for one project in a summary report."""

    project: str = UNKNOWN_PROJECT
    duration: timedelta

    @property
    def hours(self) -> float:
        """Duration in hours."""
        return self.duration.total_seconds() / 3600
