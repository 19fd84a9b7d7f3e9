"""Custom exception hierarchy for the Toggl CLI."""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape


class TogglError(click.ClickException):
    """Base exception for all Toggl CLI errors."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def show(self, file=None) -> None:
        """Display error with Rich formatting."""
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {escape(self.format_message())}")

    def format_message(self) -> str:
        """Override in subclasses for custom formatting."""
        return self.message


class ConfigError(TogglError):
    """Configuration file missing or invalid."""

    def format_message(self) -> str:
        return f"{self.message}\n\nSee togglrc-example for the expected format."


class NetworkError(TogglError):
    """Network connectivity issue or timeout."""

    def format_message(self) -> str:
        return f"{self.message}\n\nCheck your internet connection and try again."


class APIResponseError(TogglError):
    """API returned a non-success status."""

    def __init__(self, status_code: int, reason: str, url: str):
        super().__init__(f"{status_code} {reason} calling {url}")
        self.status_code = status_code
        self.reason = reason
        self.url = url


class DecodeError(TogglError):
    """API returned a body that is not the expected JSON."""

    pass


class ProjectNotFoundError(TogglError):
    """No project matches the name given by the user."""

    def __init__(self, query: str):
        super().__init__(f"no project matches {query!r}")
        self.query = query


class AmbiguousProjectError(TogglError):
    """More than one project matches the name given by the user."""

    def __init__(self, query: str, candidates: list[str]):
        super().__init__(f"too many matches to {query!r}: {', '.join(candidates)}")
        self.query = query
        self.candidates = candidates


class TimerRunningError(TogglError):
    """A timer is already running."""

    def __init__(self, project: Optional[str] = None):
        message = "there's a timer running"
        if project:
            message = f"there's a timer running for {project!r}"
        super().__init__(message)
        self.project = project


class NoTimerError(TogglError):
    """No timer is running."""

    def __init__(self, message: str = "no timer running"):
        super().__init__(message)


class InputError(TogglError):
    """A command argument has an unusable value."""

    pass
