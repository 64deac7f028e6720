"""Throttled "a newer release is available" notices for command-line tools.

Hosts typically call :func:`maybe_print_update_text` once per invocation::

    tool = ToolInfo("mytool", "1.2.0", FEED_URL, "https://example.org/releases/v")
    maybe_print_update_text(tool)

The call never raises and never blocks longer than the network timeout.
"""

from .errors import (
    ConfigError,
    FetchError,
    NoReleasesError,
    NotifyError,
    PersistError,
    VersionParseError,
)
from .notify import (
    CheckOutcome,
    CheckStatus,
    Release,
    SemVer,
    ToolInfo,
    check_for_update,
    fetch_releases,
    maybe_print_update_text,
    record_check_time,
    resolve_latest,
    should_check,
)
from .state import NotifySettings


def main() -> int:
    """Console entrypoint; see :mod:`release_notifier.main_flow`."""
    from .main_flow import main as _main

    return _main()


__all__ = [
    "ConfigError",
    "FetchError",
    "NoReleasesError",
    "NotifyError",
    "PersistError",
    "VersionParseError",
    "CheckOutcome",
    "CheckStatus",
    "Release",
    "SemVer",
    "ToolInfo",
    "check_for_update",
    "fetch_releases",
    "maybe_print_update_text",
    "record_check_time",
    "resolve_latest",
    "should_check",
    "NotifySettings",
    "main",
]
