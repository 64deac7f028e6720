"""Release feed client.

The feed is a JSON array of ``{"Name": "v1.2.3", "Checksums": {...}}``
objects. One GET per call, no retries: any transport, status or decoding
problem becomes a :class:`FetchError`, and an empty array becomes the
distinct :class:`NoReleasesError`.
"""

from __future__ import annotations

from typing import List, Optional

from ..defaults import DEFAULT_TIMEOUT, TOOL_NAME, VERSION_PREFIX
from ..errors import FetchError, NoReleasesError
from ..logging_utils import log_event
from ..utils import get_version, http_get_json, user_agent
from .types import Release, ReleaseList
from .version import SemVer, parse_versions


def fetch_releases(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    agent: Optional[str] = None,
) -> ReleaseList:
    """Download and decode the release list at ``url``.

    ``agent`` is the ``User-Agent`` header; it defaults to this tool's own
    identity.
    """
    log_event("checking_for_updates", msg="Checking for updates...", url=url)
    headers = {"User-Agent": agent or user_agent(TOOL_NAME, get_version())}
    data, error = http_get_json(url, timeout=timeout, headers=headers)
    if error is not None:
        raise FetchError(url, error)
    if not isinstance(data, list):
        raise FetchError(url, "expected a JSON array of releases")
    if not data:
        raise NoReleasesError(url)
    try:
        return [Release.from_json(item) for item in data]
    except ValueError as exc:
        raise FetchError(url, str(exc)) from exc


def get_all_versions(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    agent: Optional[str] = None,
    prefix: str = VERSION_PREFIX,
) -> List[SemVer]:
    """Every valid version published at ``url``, newest first."""
    return parse_versions(fetch_releases(url, timeout=timeout, agent=agent), prefix)


__all__ = ["fetch_releases", "get_all_versions"]
