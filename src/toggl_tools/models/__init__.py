"""Data models for Toggl API responses."""

from .schemas import (
    UNKNOWN_PROJECT,
    Client,
    Project,
    ReportLine,
    StoppedEntry,
    Timer,
)

__all__ = [
    "UNKNOWN_PROJECT",
    "Client",
    "Project",
    "ReportLine",
    "StoppedEntry",
    "Timer",
]
