"""Update-notification gate split into small modules.

 - ``gate``: decides whether a check is due
 - ``fetch``: reads the release feed
 - ``version``: semantic versions and latest-release resolution
 - ``persist``: records when the last check happened
 - ``check``: ties the steps together; ``report`` prints the advisory
"""

from __future__ import annotations

from .types import CheckOutcome, CheckStatus, Release, ReleaseList, ToolInfo
from .gate import NEVER_CHECKED, read_last_check_time, should_check
from .fetch import fetch_releases, get_all_versions
from .version import (
    Comparison,
    SemVer,
    compare,
    parse_versions,
    resolve_latest,
    strip_prefix,
)
from .persist import format_check_time, parse_check_time, record_check_time
from .check import check_for_update, maybe_print_update_text
from .report import log_outcome, print_advisory

__all__ = [
    "CheckOutcome",
    "CheckStatus",
    "Release",
    "ReleaseList",
    "ToolInfo",
    "NEVER_CHECKED",
    "read_last_check_time",
    "should_check",
    "fetch_releases",
    "get_all_versions",
    "Comparison",
    "SemVer",
    "compare",
    "parse_versions",
    "resolve_latest",
    "strip_prefix",
    "format_check_time",
    "parse_check_time",
    "record_check_time",
    "check_for_update",
    "maybe_print_update_text",
    "log_outcome",
    "print_advisory",
]
