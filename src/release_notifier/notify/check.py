"""One pass of the update notifier.

``GATE -> FETCH -> RESOLVE -> COMPARE -> PERSIST -> ADVISE``. Each failure
ends the pass with a warning log event; none of them propagates to the host.
The check time is only recorded when a newer release was found.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ..config_utils import load_settings
from ..defaults import DEFAULT_TIMEOUT
from ..errors import FetchError, PersistError, VersionParseError
from ..io_safe import last_update_check_path
from ..logging_utils import log_event
from ..state import NotifySettings
from ..utils import user_agent
from .fetch import fetch_releases
from .gate import should_check
from .persist import record_check_time
from .report import log_outcome, print_advisory
from .types import CheckOutcome, CheckStatus, ToolInfo
from .version import Comparison, SemVer, compare, resolve_latest, strip_prefix


def check_for_update(
    tool: ToolInfo,
    last_update_path: Path,
    settings: NotifySettings,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    now: Optional[datetime] = None,
    trust_feed_order: bool = False,
    force: bool = False,
) -> CheckOutcome:
    """Run the gate, fetch and compare steps and return what happened.

    ``force`` bypasses the gate entirely, as for an explicit check requested
    by the user. Fetch and version errors are captured in the outcome with
    ``status == FAILED``.
    """
    if not force and not should_check(last_update_path, settings, now=now):
        return CheckOutcome(CheckStatus.SKIPPED)

    try:
        local = SemVer.parse(strip_prefix(tool.version, tool.version_prefix))
        releases = fetch_releases(
            tool.releases_url,
            timeout=timeout,
            agent=user_agent(tool.name, tool.version),
        )
        latest = resolve_latest(
            releases, prefix=tool.version_prefix, trust_order=trust_feed_order
        )
    except (FetchError, VersionParseError) as exc:
        return CheckOutcome(CheckStatus.FAILED, error=exc)

    if compare(local, latest) is not Comparison.NEWER:
        return CheckOutcome(CheckStatus.UP_TO_DATE, latest=str(latest))

    try:
        record_check_time(last_update_path, now)
    except PersistError as exc:
        log_event(
            "update_check_persist_failed",
            logging.WARNING,
            msg=str(exc),
            path=str(last_update_path),
            error=exc.reason,
            error_type=type(exc).__name__,
        )
    return CheckOutcome(
        CheckStatus.UPDATE_AVAILABLE,
        latest=str(latest),
        release_url=tool.release_url(latest),
    )


def maybe_print_update_text(
    tool: ToolInfo,
    last_update_path: Optional[Path] = None,
    settings: Optional[NotifySettings] = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    now: Optional[datetime] = None,
    trust_feed_order: bool = False,
    force: bool = False,
    emit: Callable[[ToolInfo, CheckOutcome], None] = print_advisory,
) -> bool:
    """Print the update advisory when due and return whether we responded.

    Returns ``False`` when the check was skipped or nothing newer exists, and
    ``True`` when an advisory was printed or the check failed (the failure is
    logged as a warning). Never raises.
    """
    try:
        path = last_update_path or last_update_check_path()
        settings = settings or load_settings()
        outcome = check_for_update(
            tool,
            path,
            settings,
            timeout=timeout,
            now=now,
            trust_feed_order=trust_feed_order,
            force=force,
        )
        if outcome.status is CheckStatus.SKIPPED:
            return False
        log_outcome(tool, outcome)
        if outcome.has_newer:
            emit(tool, outcome)
        return outcome.responded
    except Exception as exc:
        log_event(
            "update_check_failed",
            logging.WARNING,
            msg=f"Update check failed: {exc}",
            url=tool.releases_url,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return False


__all__ = ["check_for_update", "maybe_print_update_text"]
