"""Time entries API module: the running timer."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import ValidationError

from ..exceptions import DecodeError
from ..models import StoppedEntry, Timer
from .client import TogglClient

CREATED_WITH = "toggl"
RUNNING_DURATION = -1


def _unwrap(response: Any) -> Any:
    """v8 wraps entries in {"data": ...}; v9 returns them bare."""
    if isinstance(response, dict) and "data" in response:
        return response["data"]
    return response


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp as the API expects it, e.g. 2023-01-01T14:30:45Z."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class TimeEntriesAPI:
    """API for the current, starting and stopping time entries."""

    def __init__(self, client: TogglClient):
        self.client = client

    @property
    def _v8(self) -> bool:
        return self.client.api_version == "v8"

    def current(self) -> Optional[Timer]:
        """The running timer, or None when nothing is running."""
        if self._v8:
            url = self.client.api_url("time_entries/current")
        else:
            url = self.client.api_url("me/time_entries/current")

        entry = _unwrap(self.client.get(url))
        if entry is None:
            return None

        try:
            return Timer.model_validate(entry)
        except ValidationError as e:
            raise DecodeError(f"unexpected timer payload: {e}") from e

    def start(self, project_id: int, start: datetime, description: str = "") -> None:
        """Start a timer for a project."""
        entry = {
            "created_with": CREATED_WITH,
            "description": description,
            "duration": RUNNING_DURATION,
            "start": format_timestamp(start),
        }

        if self._v8:
            entry["pid"] = project_id
            url = self.client.api_url("time_entries/start")
            self.client.post(url, data={"time_entry": entry}, decode=False)
        else:
            entry["project_id"] = project_id
            entry["workspace_id"] = self.client.workspace_id
            url = self.client.workspace_url("time_entries")
            self.client.post(url, data=entry, decode=False)

    def stop(self, timer_id: int, workspace_id: Optional[int] = None) -> StoppedEntry:
        """Stop a running timer, returning its project and duration.

        Pass the timer's workspace_id when it may differ from the configured one.
        """
        if self._v8:
            url = self.client.api_url(f"time_entries/{timer_id}/stop")
            response = self.client.put(url)
        else:
            wid = workspace_id or self.client.workspace_id
            url = self.client.api_url(f"workspaces/{wid}/time_entries/{timer_id}/stop")
            response = self.client.patch(url)

        try:
            return StoppedEntry.model_validate(_unwrap(response))
        except ValidationError as e:
            raise DecodeError(f"unexpected stop payload: {e}") from e
