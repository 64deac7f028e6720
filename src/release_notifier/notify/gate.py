"""Throttle for update checks.

The gate opens when notifications are enabled and at least
``ReminderWaitPeriodInHours`` have passed since the recorded check time. A
missing, unreadable or corrupt record means "never checked", which is the
epoch, so the gate opens.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..errors import CheckTimeParseError
from ..logging_utils import log_event
from ..state import NotifySettings
from .persist import parse_check_time

NEVER_CHECKED = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _never_checked(path: Path, reason: str) -> datetime:
    log_event(
        "last_check_time_unavailable",
        logging.DEBUG,
        msg=f"Treating {path} as never checked: {reason}",
        path=str(path),
        error=reason,
    )
    return NEVER_CHECKED


def read_last_check_time(path: Path) -> datetime:
    """Return the recorded check time, or :data:`NEVER_CHECKED`."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return _never_checked(path, "no record")
    except (OSError, UnicodeDecodeError) as exc:
        return _never_checked(path, str(exc))
    try:
        return parse_check_time(text)
    except CheckTimeParseError as exc:
        return _never_checked(path, str(exc))


def should_check(
    path: Path, settings: NotifySettings, now: Optional[datetime] = None
) -> bool:
    """True when an update check is due. Performs no writes."""
    if not settings.want_update_notification:
        return False
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    elapsed = now - read_last_check_time(path)
    return elapsed.total_seconds() / 3600 >= settings.reminder_wait_period_in_hours


__all__ = ["NEVER_CHECKED", "read_last_check_time", "should_check"]
