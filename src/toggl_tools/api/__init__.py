"""Toggl API modules."""

from .client import TogglClient
from .projects import ProjectsAPI
from .reports import ReportsAPI
from .time_entries import TimeEntriesAPI

__all__ = [
    "TogglClient",
    "ProjectsAPI",
    "ReportsAPI",
    "TimeEntriesAPI",
]
