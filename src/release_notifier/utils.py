"""Utility helpers for release-notifier.

Small, dependency-free helpers used across the tool:
 - Version discovery for the installed/package build
 - Host identification for the ``User-Agent`` header
 - Lightweight HTTP JSON fetch with short timeouts

Helpers return benign values instead of raising; callers decide whether a
failure matters.
"""

from __future__ import annotations
import json
import platform
import re
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from .defaults import DEFAULT_TIMEOUT, TOOL_NAME

try:  # pragma: no cover
    from importlib.metadata import PackageNotFoundError, version as pkg_version
except ImportError:  # pragma: no cover
    PackageNotFoundError = Exception  # type: ignore

    def pkg_version(_: str) -> str:  # type: ignore
        raise PackageNotFoundError


def get_version() -> str:
    """Return the tool version string.

    Lookup order (first match wins):
    1) ``importlib.metadata.version('release-notifier')`` (installed package)
    2) Parse ``pyproject.toml`` for ``project.version`` (source checkout)
    3) Fallback string ``"0.0.0+unknown"``
    """
    try:
        return pkg_version(TOOL_NAME)
    except Exception:
        pass

    pyproj = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproj.exists():
        try:
            text = pyproj.read_text(encoding="utf-8")
        except OSError:
            text = ""
        m = re.search(r"(?ms)^\[project\].*?^version\s*=\s*\"([^\"]+)\"", text)
        if m:
            return m.group(1)

    return "0.0.0+unknown"


def host_os() -> str:
    """Lowercase operating system name (``linux``, ``darwin``, ``windows``)."""
    return (platform.system() or "unknown").lower()


def user_agent(name: str, version: str) -> str:
    """Client identifier sent with feed requests.

    Format is ``<name>/<version> <name>-OS/<os>``; server-side log parsing
    relies on it staying stable.
    """
    return f"{name}/{version} {name}-OS/{host_os()}"


def http_get_json(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    headers: Optional[Mapping[str, str]] = None,
) -> Tuple[Optional[Any], Optional[str]]:
    """Fetch a small JSON document.

    Parameters
    - ``url``: Absolute URL to request.
    - ``timeout``: Socket timeout in seconds.
    - ``headers``: Extra request headers (e.g. ``User-Agent``).

    Returns
    - Tuple ``(data, error)``. On success ``data`` is the decoded document and
      ``error`` is ``None``; on failure ``data`` is ``None`` and ``error`` holds
      a short message (e.g., ``"HTTP 500: Internal Server Error"``).
    """
    try:
        req = urllib.request.Request(url, headers=dict(headers or {}))
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = getattr(resp, "status", 200)
            if not 200 <= status < 300:
                return None, f"HTTP {status}: {getattr(resp, 'reason', '')}"
            body = resp.read()
    except urllib.error.HTTPError as e:
        return None, f"HTTP {e.code}: {e.reason}"
    except Exception as e:
        return None, str(e) or type(e).__name__
    try:
        return json.loads(body.decode("utf-8", errors="ignore")), None
    except ValueError as e:
        return None, f"invalid JSON: {e}"


__all__ = [
    "get_version",
    "host_os",
    "user_agent",
    "http_get_json",
    "pkg_version",
]
