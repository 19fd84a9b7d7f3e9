"""Reports API module for Toggl summary reports."""

from datetime import timedelta
from typing import Optional

from ..exceptions import DecodeError
from ..models import UNKNOWN_PROJECT, ReportLine
from .client import TogglClient


class ReportsAPI:
    """API for Toggl summary reports."""

    def __init__(self, client: TogglClient):
        """
        Initialize ReportsAPI.

        Args:
            client: TogglClient instance
        """
        self.client = client

    def summary(self, since: str, until: Optional[str] = None) -> list[ReportLine]:
        """
        Get time per project for a date range.

        Args:
            since: First day of the report (YYYY-MM-DD)
            until: Last day of the report (YYYY-MM-DD), server default if omitted

        Returns:
            ReportLine per project, in server order
        """
        params = {
            "since": since,
            "workspace_id": self.client.workspace_id,
            "user_agent": self.client.USER_AGENT,
        }
        if until:
            params["until"] = until

        url = self.client.reports_url("summary")
        response = self.client.get(url, params=params) or {}

        lines = []
        try:
            for item in response.get("data") or []:
                title = item.get("title") or {}
                lines.append(
                    ReportLine(
                        project=title.get("project") or UNKNOWN_PROJECT,
                        duration=timedelta(milliseconds=item.get("time") or 0),
                    )
                )
        except (AttributeError, TypeError) as e:
            raise DecodeError(f"unexpected report payload: {e}") from e

        return lines
