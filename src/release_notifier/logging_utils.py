"""Logging configuration helpers (human + JSON + file).

This module centralizes lightweight logging setup for the CLI and for hosts
embedding the update check:
 - Plain human-readable logs to stderr
 - Optional JSON logs to stdout (for piping/collection)
 - Optional file logs

Design goals
 - No third-party dependencies; stdlib logging only
 - Idempotent configuration for tests and repeated calls
 - Logging must never interrupt the host program
"""

from __future__ import annotations
import json
import logging
import sys
from typing import Optional

# Structured fields copied into JSON lines when present on a record.
_STRUCTURED_FIELDS = (
    "event",
    "url",
    "path",
    "version",
    "latest",
    "status",
    "error",
    "error_type",
)

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class JSONFormatter(logging.Formatter):
    """Minimal JSON formatter for structured log collection.

    Emits an object with ``level`` and ``message`` plus the structured fields
    attached through ``log_event``.
    """

    def format(self, record):
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for k in _STRUCTURED_FIELDS:
            if hasattr(record, k):
                payload[k] = getattr(record, k)
        return json.dumps(payload, default=str)


def configure_logging(
    verbose: bool,
    log_file: Optional[str] = None,
    log_json: bool = False,
    log_level: Optional[str] = None,
) -> None:
    """Configure the root logger according to CLI flags.

    Parameters
    - ``verbose``: When ``True``, sets level to ``DEBUG`` (unless ``log_level``
      overrides). Otherwise defaults to ``WARNING``.
    - ``log_file``: Optional path to tee logs to a file (plain text format).
    - ``log_json``: When ``True``, also emit JSON lines to stdout.
    - ``log_level``: Optional explicit level name (debug, info, warning, error).

    Handlers previously added by this function are removed first so repeated
    invocations do not duplicate output.
    """
    if log_level:
        level = _LEVELS.get(log_level.lower(), logging.WARNING)
    else:
        level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(level)

    for h in list(logger.handlers):
        if getattr(h, "_added_by_configure_logging", False):
            logger.removeHandler(h)
            h.close()

    fmt = "%(levelname)s: %(message)s"
    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(fmt))
    setattr(stream, "_added_by_configure_logging", True)
    logger.addHandler(stream)

    if log_json:
        json_handler = logging.StreamHandler(sys.stdout)
        json_handler.setFormatter(JSONFormatter())
        setattr(json_handler, "_added_by_configure_logging", True)
        logger.addHandler(json_handler)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(logging.Formatter(fmt))
        setattr(fh, "_added_by_configure_logging", True)
        logger.addHandler(fh)

    for handler in logger.handlers:
        handler.setLevel(level)


def log_event(
    event: str, level: int = logging.INFO, msg: Optional[str] = None, **fields
) -> None:
    """Emit a structured event log at the given level.

    ``msg`` is the human-readable line and defaults to the event name. Common
    ``fields`` include ``url``, ``path``, ``version``, ``latest``, ``error``
    and ``error_type``. The function never raises.
    """
    try:
        logging.getLogger("release_notifier").log(
            level, msg or event, extra={"event": event, **fields}
        )
    except Exception:
        # Never let logging break the host flow
        pass


__all__ = ["configure_logging", "log_event", "JSONFormatter"]
