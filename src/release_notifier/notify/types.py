"""Typed containers for the update check.

``Release`` mirrors one entry of the release feed, ``ToolInfo`` describes the
tool being checked and ``CheckOutcome`` is the result of one pass of the
orchestrator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..defaults import VERSION_PREFIX


@dataclass(frozen=True)
class Release:
    """One published version entry from the feed."""

    name: str
    checksums: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: object) -> "Release":
        """Decode a feed object ``{"Name": ..., "Checksums": {...}}``.

        Raises ``ValueError`` when the entry is not an object or has no name.
        """
        if not isinstance(data, dict):
            raise ValueError(f"release entry is not an object: {data!r}")
        name = data.get("Name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"release entry has no name: {data!r}")
        raw_checksums = data.get("Checksums") or {}
        if not isinstance(raw_checksums, dict):
            raise ValueError(f"release {name!r} has malformed checksums")
        checksums = {str(k): str(v) for k, v in raw_checksums.items()}
        return cls(name=name.strip(), checksums=checksums)


ReleaseList = List[Release]


@dataclass(frozen=True)
class ToolInfo:
    """The tool whose releases are being watched."""

    name: str
    version: str
    releases_url: str
    release_url_base: str
    version_prefix: str = VERSION_PREFIX

    def release_url(self, version: object) -> str:
        return f"{self.release_url_base}{version}"


class CheckStatus(str, Enum):
    SKIPPED = "skipped"
    FAILED = "failed"
    UP_TO_DATE = "up_to_date"
    UPDATE_AVAILABLE = "update_available"


@dataclass
class CheckOutcome:
    """Result of one gate/fetch/compare pass."""

    status: CheckStatus
    latest: Optional[str] = None
    release_url: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def has_newer(self) -> bool:
        return self.status is CheckStatus.UPDATE_AVAILABLE

    @property
    def responded(self) -> bool:
        """True when the check ran to a user-relevant end (update or failure).

        Hosts use this to decide whether to print anything else about update
        status.
        """
        return self.status in (CheckStatus.UPDATE_AVAILABLE, CheckStatus.FAILED)


__all__ = [
    "Release",
    "ReleaseList",
    "ToolInfo",
    "CheckStatus",
    "CheckOutcome",
]
