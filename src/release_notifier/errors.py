"""Error taxonomy for the update check.

Every failure of the check is one of these types so callers can tell
"no data" apart from "nothing newer". None of them is meant to reach the host
program: the orchestrator turns them into warning log events.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class NotifyError(Exception):
    """Base class for update-check failures."""


class FetchError(NotifyError):
    """Transport, HTTP status, or decoding failure while reading the feed."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Error getting release list from {url}: {reason}")


class NoReleasesError(FetchError):
    """The feed answered with a valid but empty release list."""

    def __init__(self, url: str = "") -> None:
        super().__init__(url, "there were no releases at the url specified")
        if url:
            self.args = (f"There were no releases at the url specified: {url}",)
        else:
            self.args = ("The release list is empty",)


class VersionParseError(NotifyError, ValueError):
    """A string is not a valid semantic version."""

    def __init__(self, text: str, reason: str = "invalid semantic version") -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")


class CheckTimeParseError(NotifyError, ValueError):
    """Persisted check time is not an RFC1123 timestamp."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"cannot parse check time: {text!r}")


class PersistError(NotifyError):
    """Writing the last-check timestamp failed."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error writing current update time to {self.path}: {reason}")


class ConfigError(NotifyError, ValueError):
    """Unknown setting name or a value of the wrong type."""


__all__ = [
    "NotifyError",
    "FetchError",
    "NoReleasesError",
    "VersionParseError",
    "CheckTimeParseError",
    "PersistError",
    "ConfigError",
]
