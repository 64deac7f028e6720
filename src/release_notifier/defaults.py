"""Defaults and well-known names (config keys, timeouts, file layout)."""

from __future__ import annotations
from typing import Dict

TOOL_NAME = "release-notifier"
VERSION_PREFIX = "v"

DEFAULT_TIMEOUT = 3.0  # seconds
DEFAULT_REMINDER_WAIT_HOURS = 24.0

LAST_UPDATE_CHECK_NAME = "last_update_check"
CONFIG_NAME = "config.json"
CHECK_FILE_MODE = 0o600

HOME_ENV = "RELEASE_NOTIFIER_HOME"
ENV_PREFIX = "RELEASE_NOTIFIER_"

WANT_UPDATE_NOTIFICATION = "WantUpdateNotification"
REMINDER_WAIT_PERIOD_IN_HOURS = "ReminderWaitPeriodInHours"

SETTING_DESCRIPTIONS: Dict[str, str] = {
    WANT_UPDATE_NOTIFICATION: "Show a notice when a newer release is published",
    REMINDER_WAIT_PERIOD_IN_HOURS: "Hours to wait between update checks",
}

__all__ = [
    "TOOL_NAME",
    "VERSION_PREFIX",
    "DEFAULT_TIMEOUT",
    "DEFAULT_REMINDER_WAIT_HOURS",
    "LAST_UPDATE_CHECK_NAME",
    "CONFIG_NAME",
    "CHECK_FILE_MODE",
    "HOME_ENV",
    "ENV_PREFIX",
    "WANT_UPDATE_NOTIFICATION",
    "REMINDER_WAIT_PERIOD_IN_HOURS",
    "SETTING_DESCRIPTIONS",
]
