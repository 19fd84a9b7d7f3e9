"""Configuration management for the Toggl CLI."""

import json
import os
import re
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

APP_NAME = "toggl"
RC_ENV_KEY = "TOGGLRC"
DEFAULT_TIMEOUT = timedelta(seconds=5)
API_VERSIONS = ("v8", "v9")
DEFAULT_API_VERSION = "v9"

_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """Parse a duration string such as "5s", "1m30s" or "250ms".

    A leading sign is allowed, as is a bare "0".
    """
    value = text.strip()
    sign = 1
    if value[:1] in ("-", "+"):
        sign = -1 if value[0] == "-" else 1
        value = value[1:]

    if value == "0":
        return timedelta(0)
    if not value:
        raise ValueError(f"invalid duration {text!r}")

    seconds = 0.0
    pos = 0
    while pos < len(value):
        match = _DURATION_PART.match(value, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        number, unit = match.groups()
        seconds += float(number) * _DURATION_UNITS[unit]
        pos = match.end()

    try:
        return timedelta(seconds=seconds * sign)
    except OverflowError as e:
        raise ValueError(f"invalid duration {text!r}: out of range") from e


@dataclass(frozen=True)
class Config:
    """Application configuration, validated on construction."""

    api_token: str
    workspace_id: int
    timeout: timedelta = DEFAULT_TIMEOUT
    api_version: str = DEFAULT_API_VERSION

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError if any field is unusable."""
        if not isinstance(self.api_token, str):
            raise ConfigError("bad API token (must be a string)")
        if not self.api_token.strip():
            raise ConfigError("missing API token")
        if not self.workspace_id or self.workspace_id <= 0:
            raise ConfigError("missing workspace ID")
        if self.timeout <= timedelta(0):
            raise ConfigError(f"bad timeout - {self.timeout}")
        if not isinstance(self.api_version, str) or self.api_version not in API_VERSIONS:
            raise ConfigError(
                f"bad API version {self.api_version!r} (expected one of {', '.join(API_VERSIONS)})"
            )


def config_file() -> Path:
    """Path of the rc file: $TOGGLRC if set, else ~/.togglrc."""
    load_dotenv()

    path = os.getenv(RC_ENV_KEY)
    if path:
        return Path(path)
    return Path.home() / f".{APP_NAME}rc"


def _workspace_id(value: Any) -> int:
    if value is None or value == "":
        raise ConfigError("missing workspace ID")
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ConfigError(f"bad workspace ID: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"bad workspace ID: {value!r}") from e


def _timeout(value: Optional[str]) -> timedelta:
    if value is None or value == "":
        return DEFAULT_TIMEOUT
    if not isinstance(value, str):
        raise ConfigError(f"bad timeout - {value!r} (use a duration such as \"5s\")")
    try:
        return parse_duration(value)
    except ValueError as e:
        raise ConfigError(f"bad timeout - {e}") from e


def config_from_dict(data: dict) -> Config:
    """Build a Config from the decoded rc file."""
    workspace = data.get("workspace_id", data.get("workspace"))

    return Config(
        api_token=data.get("api_token") or "",
        workspace_id=_workspace_id(workspace),
        timeout=_timeout(data.get("timeout")),
        api_version=data.get("api_version") or DEFAULT_API_VERSION,
    )


def load_config(path: Optional[Path] = None) -> Config:
    """Load and validate configuration from the rc file."""
    fname = path or config_file()

    try:
        with open(fname) as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"config file {fname} not found") from e
    except OSError as e:
        raise ConfigError(f"can't read config file {fname}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"bad JSON in config file {fname}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config file {fname} must contain a JSON object")

    return config_from_dict(data)
