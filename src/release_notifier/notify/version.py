"""Semantic versions and latest-release resolution.

Implements semver 2.0.0 parsing and precedence: major, minor and patch compare
numerically, a version with a prerelease sorts before the same version
without one, prerelease identifiers compare numerically when both are digits
and lexically otherwise (numeric < alphanumeric), and build metadata never
affects ordering or equality.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from ..defaults import VERSION_PREFIX
from ..errors import NoReleasesError, VersionParseError
from ..logging_utils import log_event
from .types import Release

_IDENT = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_SEMVER_RE = re.compile(
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    rf"(?:-({_IDENT}(?:\.{_IDENT})*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class SemVer:
    """A parsed ``major.minor.patch[-prerelease][+build]`` version."""

    major: int
    minor: int
    patch: int
    prerelease: Tuple[str, ...] = ()
    build: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "SemVer":
        """Parse ``text`` strictly; raise :class:`VersionParseError` otherwise."""
        if not isinstance(text, str):
            raise VersionParseError(repr(text), "version is not a string")
        m = _SEMVER_RE.fullmatch(text.strip())
        if not m:
            raise VersionParseError(text)
        major, minor, patch, pre, build = m.groups()
        return cls(
            int(major),
            int(minor),
            int(patch),
            tuple(pre.split(".")) if pre else (),
            tuple(build.split(".")) if build else (),
        )

    def _key(self):
        pre = tuple(
            (0, int(p), "") if p.isdigit() else (1, 0, p) for p in self.prerelease
        )
        # A release outranks any of its prereleases.
        return (self.major, self.minor, self.patch, 0 if pre else 1, pre)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "SemVer") -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


class Comparison(str, Enum):
    """How a remote version relates to the local one."""

    OLDER = "older"
    EQUAL = "equal"
    NEWER = "newer"


def compare(local: SemVer, remote: SemVer) -> Comparison:
    """``NEWER`` iff ``local < remote``; ``OLDER`` iff ``remote < local``."""
    if local < remote:
        return Comparison.NEWER
    if remote < local:
        return Comparison.OLDER
    return Comparison.EQUAL


def strip_prefix(name: str, prefix: str = VERSION_PREFIX) -> str:
    """Remove one leading ``prefix`` from ``name`` when present."""
    if prefix and name.startswith(prefix):
        return name[len(prefix):]
    return name


def parse_versions(
    releases: Iterable[Release], prefix: str = VERSION_PREFIX
) -> List[SemVer]:
    """All parseable release versions, newest first."""
    versions: List[SemVer] = []
    for release in releases:
        try:
            versions.append(SemVer.parse(strip_prefix(release.name, prefix)))
        except VersionParseError as exc:
            log_event(
                "release_version_skipped",
                logging.DEBUG,
                msg=f"Skipping release {release.name!r}: {exc}",
                version=release.name,
            )
    versions.sort(reverse=True)
    return versions


def resolve_latest(
    releases: Sequence[Release],
    prefix: str = VERSION_PREFIX,
    trust_order: bool = False,
) -> SemVer:
    """Return the latest version published in ``releases``.

    With ``trust_order`` the first entry is taken as the latest, as the feed
    promises newest-first ordering. Otherwise the highest parseable version
    wins and malformed names are skipped. Raises :class:`NoReleasesError` for
    an empty list and :class:`VersionParseError` when nothing usable remains.
    """
    if not releases:
        raise NoReleasesError()
    if trust_order:
        return SemVer.parse(strip_prefix(releases[0].name, prefix))
    versions = parse_versions(releases, prefix)
    if not versions:
        raise VersionParseError(
            releases[0].name, "no release carries a valid semantic version"
        )
    return versions[0]


__all__ = [
    "SemVer",
    "Comparison",
    "compare",
    "strip_prefix",
    "parse_versions",
    "resolve_latest",
]
