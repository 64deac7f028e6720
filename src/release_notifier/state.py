"""Persisted notifier settings (``config.json``).

:class:`NotifySettings` carries the two inputs of the update gate. The file
uses the setting names shown to users (``WantUpdateNotification``,
``ReminderWaitPeriodInHours``) so ``config set`` and hand edits agree.

Design notes:
 - Loading never raises; unreadable or malformed files yield defaults and a
   warning log event.
 - Saving preserves keys this module does not own.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import json
import logging
from pathlib import Path
from typing import Any, Dict

from .defaults import (
    DEFAULT_REMINDER_WAIT_HOURS,
    REMINDER_WAIT_PERIOD_IN_HOURS,
    WANT_UPDATE_NOTIFICATION,
)
from .errors import ConfigError
from .io_safe import atomic_write
from .logging_utils import log_event

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    key = str(raw).strip().lower()
    if key in _TRUE:
        return True
    if key in _FALSE:
        return False
    raise ConfigError(f"not a boolean: {raw!r}")


def parse_hours(raw: Any) -> float:
    if isinstance(raw, bool):
        raise ConfigError(f"not a number of hours: {raw!r}")
    try:
        hours = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"not a number of hours: {raw!r}") from None
    if hours != hours or hours < 0:
        raise ConfigError(f"hours must be a non-negative number: {raw!r}")
    return hours


_PARSERS = {
    WANT_UPDATE_NOTIFICATION: ("want_update_notification", parse_bool),
    REMINDER_WAIT_PERIOD_IN_HOURS: ("reminder_wait_period_in_hours", parse_hours),
}


@dataclass(frozen=True)
class NotifySettings:
    """Gate configuration: whether to notify, and how often to check."""

    want_update_notification: bool = True
    reminder_wait_period_in_hours: float = DEFAULT_REMINDER_WAIT_HOURS

    @staticmethod
    def keys():
        return list(_PARSERS)

    def get_value(self, key: str) -> Any:
        attr, _ = _lookup(key)
        return getattr(self, attr)

    def with_value(self, key: str, raw: Any) -> "NotifySettings":
        """Return a copy with ``key`` set from ``raw`` (string or native)."""
        attr, parser = _lookup(key)
        return replace(self, **{attr: parser(raw)})

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, attr) for key, (attr, _) in _PARSERS.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NotifySettings":
        settings = cls()
        for key in _PARSERS:
            if key not in data:
                continue
            try:
                settings = settings.with_value(key, data[key])
            except ConfigError as exc:
                log_event(
                    "settings_value_invalid",
                    logging.WARNING,
                    msg=f"Ignoring {key} from config: {exc}",
                    error=str(exc),
                )
        return settings

    def save(self, path: Path) -> None:
        """Write settings to ``path`` as JSON, keeping unrelated keys."""
        try:
            existing = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(existing, dict):
                existing = {}
        except (OSError, ValueError):
            existing = {}
        existing.update(self.to_dict())
        atomic_write(path, json.dumps(existing, indent=2) + "\n")

    @classmethod
    def load(cls, path: Path) -> "NotifySettings":
        """Load settings from ``path``; fallback to defaults on error."""
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log_event(
                "settings_load_failed",
                logging.WARNING,
                msg=f"Could not load settings: {e}",
                path=str(path),
                error=str(e),
            )
            return cls()
        if not isinstance(data, dict):
            log_event(
                "settings_load_failed",
                logging.WARNING,
                msg="Could not load settings: invalid format",
                path=str(path),
            )
            return cls()
        return cls.from_dict(data)


def _canonical(key: str) -> str:
    for name in _PARSERS:
        if name.lower() == str(key).strip().lower():
            return name
    raise ConfigError(
        f"unknown setting {key!r} (valid: {', '.join(_PARSERS)})"
    )


def _lookup(key: str):
    return _PARSERS[_canonical(key)]


def unset_value(path: Path, key: str) -> None:
    """Drop ``key`` from the settings file so its default applies again."""
    canonical = _canonical(key)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return
    except (OSError, ValueError):
        data = {}
    if not isinstance(data, dict):
        data = {}
    data.pop(canonical, None)
    atomic_write(path, json.dumps(data, indent=2) + "\n")


__all__ = ["NotifySettings", "parse_bool", "parse_hours", "unset_value"]
