"""Toggl API client with credential injection and uniform error handling."""

from typing import Any, Optional

import httpx
from rich.console import Console

from ..config import Config
from ..exceptions import APIResponseError, DecodeError, NetworkError

console = Console(stderr=True)


class TogglClient:
    """HTTP client for the Toggl Track API."""

    BASE_API_URL = "https://api.track.toggl.com/api"
    BASE_REPORTS_URL = "https://api.track.toggl.com/reports/api/v2"
    USER_AGENT = "toggl"

    def __init__(self, config: Config, verbose: bool = False):
        self.config = config
        self.verbose = verbose
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                auth=(self.config.api_token, "api_token"),
                headers={"Content-Type": "application/json"},
                timeout=self.config.timeout.total_seconds(),
            )
        return self._client

    @property
    def api_version(self) -> str:
        return self.config.api_version

    @property
    def workspace_id(self) -> int:
        return self.config.workspace_id

    def call(
        self,
        method: str,
        url: str,
        data: Optional[Any] = None,
        params: Optional[dict] = None,
        decode: bool = True,
    ) -> Any:
        """Make an authenticated API call.

        Any non-2xx status raises APIResponseError before the body is looked
        at. With decode=False only transport and status errors are reported
        and None is returned.
        """
        try:
            response = self.client.request(method, url, json=data, params=params)
        except httpx.TimeoutException as e:
            raise NetworkError(f"{method} {url} timed out after {self.config.timeout}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"{method} {url} failed: {e}") from e

        if self.verbose:
            console.print(f"[dim]{method} {response.url} -> {response.status_code}[/dim]")

        if not response.is_success:
            raise APIResponseError(response.status_code, response.reason_phrase, str(response.url))

        if not decode:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"bad JSON from {method} {url}: {e}") from e

    def get(self, url: str, params: Optional[dict] = None) -> Any:
        """Make authenticated GET request."""
        return self.call("GET", url, params=params)

    def post(self, url: str, data: Optional[Any] = None, decode: bool = True) -> Any:
        """Make authenticated POST request."""
        return self.call("POST", url, data=data, decode=decode)

    def put(self, url: str, data: Optional[Any] = None) -> Any:
        """Make authenticated PUT request."""
        return self.call("PUT", url, data=data)

    def patch(self, url: str, data: Optional[Any] = None) -> Any:
        """Make authenticated PATCH request."""
        return self.call("PATCH", url, data=data)

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "TogglClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def api_url(self, path: str) -> str:
        """Build versioned REST API URL."""
        return f"{self.BASE_API_URL}/{self.api_version}/{path}"

    def workspace_url(self, path: str) -> str:
        """Build workspace-scoped REST API URL."""
        return self.api_url(f"workspaces/{self.workspace_id}/{path}")

    def reports_url(self, path: str) -> str:
        """Build reports API URL."""
        return f"{self.BASE_REPORTS_URL}/{path}"
