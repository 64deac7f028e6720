"""Helpers for resolving the effective notifier settings.

Settings come from two layers, later wins:
 - ``config.json`` under the notifier home (see :mod:`.state`)
 - Environment variables ``RELEASE_NOTIFIER_<KEY>`` where ``<KEY>`` is the
   upper-cased setting name, e.g. ``RELEASE_NOTIFIER_WANTUPDATENOTIFICATION``

Invalid environment values are ignored with a warning log event.
"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from .defaults import ENV_PREFIX
from .errors import ConfigError
from .io_safe import config_path
from .logging_utils import log_event
from .state import NotifySettings


def env_name(key: str) -> str:
    return ENV_PREFIX + key.upper()


def apply_env_overrides(
    settings: NotifySettings, environ: Optional[Mapping[str, str]] = None
) -> NotifySettings:
    """Return ``settings`` with any ``RELEASE_NOTIFIER_*`` overrides applied."""
    environ = os.environ if environ is None else environ
    for key in NotifySettings.keys():
        raw = environ.get(env_name(key))
        if raw is None or raw == "":
            continue
        try:
            settings = settings.with_value(key, raw)
        except ConfigError as exc:
            log_event(
                "settings_env_invalid",
                logging.WARNING,
                msg=f"Ignoring {env_name(key)}: {exc}",
                error=str(exc),
            )
    return settings


def load_settings(
    path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None
) -> NotifySettings:
    """Effective settings: file at ``path`` (default config.json) plus env."""
    settings = NotifySettings.load(path or config_path())
    return apply_env_overrides(settings, environ)


__all__ = ["env_name", "apply_env_overrides", "load_settings"]
