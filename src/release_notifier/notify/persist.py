"""Recording when the last update check happened.

The check time is stored as a single RFC1123 timestamp
(``Mon, 02 Jan 2006 15:04:05 GMT``) so the file stays readable and editable
by hand. :func:`parse_check_time` is the inverse of :func:`format_check_time`
at whole-second precision.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from pathlib import Path
from typing import Optional

from ..defaults import CHECK_FILE_MODE
from ..errors import CheckTimeParseError, PersistError
from ..io_safe import atomic_write

_RFC1123_RE = re.compile(
    r"[A-Z][a-z]{2}, \d{2} [A-Z][a-z]{2} \d{4} \d{2}:\d{2}:\d{2} \S+", re.ASCII
)


def _as_utc(when: datetime) -> datetime:
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


def format_check_time(when: datetime) -> str:
    """Render ``when`` (naive values are taken as UTC) in RFC1123 form."""
    return format_datetime(_as_utc(when).replace(microsecond=0), usegmt=True)


def parse_check_time(text: str) -> datetime:
    """Parse an RFC1123 timestamp into an aware UTC datetime.

    The layout must be complete (weekday, four-digit year, seconds, zone).
    Raises :class:`CheckTimeParseError` for anything else, including an empty
    or partially written file.
    """
    text = text.strip()
    if not _RFC1123_RE.fullmatch(text):
        raise CheckTimeParseError(text)
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError) as exc:
        raise CheckTimeParseError(text) from exc
    if parsed is None:
        raise CheckTimeParseError(text)
    return _as_utc(parsed)


def record_check_time(path: Path, when: Optional[datetime] = None) -> None:
    """Write ``when`` (default: now) to ``path``, replacing prior content.

    Raises :class:`PersistError` on any filesystem failure.
    """
    when = when or datetime.now(timezone.utc)
    try:
        atomic_write(Path(path), format_check_time(when), mode=CHECK_FILE_MODE)
    except OSError as exc:
        raise PersistError(path, str(exc)) from exc


__all__ = ["format_check_time", "parse_check_time", "record_check_time"]
