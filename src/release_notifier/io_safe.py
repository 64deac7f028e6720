"""Safe I/O helpers (atomic writes and well-known paths).

 - Well-known paths under ``RELEASE_NOTIFIER_HOME`` (default:
   ``~/.release-notifier``)
 - Atomic text writes with fsync and a fixed permission mode

Writes go to a temporary file in the target directory which is renamed into
place, so a concurrent reader sees either the old or the new content.
"""

from __future__ import annotations
import os
import tempfile
from pathlib import Path
from typing import Optional

from .defaults import CONFIG_NAME, HOME_ENV, LAST_UPDATE_CHECK_NAME

NOTIFY_HOME = Path(
    os.environ.get(HOME_ENV, str(Path.home() / ".release-notifier"))
)


def notify_home() -> Path:
    """Return the state directory, honoring a late ``RELEASE_NOTIFIER_HOME``."""
    return Path(os.environ.get(HOME_ENV, str(NOTIFY_HOME)))


def config_path() -> Path:
    return notify_home() / CONFIG_NAME


def last_update_check_path() -> Path:
    return notify_home() / LAST_UPDATE_CHECK_NAME


def atomic_write(path: Path, text: str, mode: Optional[int] = None) -> None:
    """Atomically write UTF-8 text to ``path`` with fsync.

    Creates the parent directory when missing. When ``mode`` is given the file
    ends up with exactly those permission bits. Propagates write errors after
    cleaning up the temporary file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmppath = tempfile.mkstemp(
        prefix=path.name + ".", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError:  # pragma: no cover
                pass
        if mode is not None:
            os.chmod(tmppath, mode)
        os.replace(tmppath, path)
    except BaseException:
        try:
            os.remove(tmppath)
        except OSError:
            pass
        raise


__all__ = [
    "NOTIFY_HOME",
    "notify_home",
    "config_path",
    "last_update_check_path",
    "atomic_write",
]
