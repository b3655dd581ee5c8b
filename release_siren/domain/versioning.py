"""Four-component numeric versions and the comparison every decision relies on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from release_siren.domain.model import FRAGMENTS, Fragment

COMPONENT_COUNT = 4


def _to_component(token: str) -> int:
    # Plain ASCII digits only.
    if not (token.isascii() and token.isdigit()):
        return 0
    return int(token)


@dataclass(frozen=True)
class SemanticVersion:
    major: int = 0
    minor: int = 0
    patch: int = 0
    revision: int = 0
    raw: str = field(default="", compare=False)

    @classmethod
    def parse(cls, version: Optional[str]) -> SemanticVersion:
        """Parse a dot-separated version string. Never raises.

        "1.2" -> 1.2.0.0, "1.2.3.4.5" -> 1.2.3.4, "a.b" -> 0.0.0.0.
        Tokens that are not non-negative integers count as 0.
        """
        raw = "" if version is None else str(version)
        parts = [_to_component(token) for token in raw.split(".")] if raw else []
        while len(parts) < COMPONENT_COUNT:
            parts.append(0)
        major, minor, patch, revision = parts[:COMPONENT_COUNT]
        return cls(major, minor, patch, revision, raw=raw)

    @property
    def components(self) -> tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.revision)

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.components)


class DeltaKind(Enum):
    NEWER = "newer"
    SAME = "same"
    OLDER = "older"


@dataclass(frozen=True)
class VersionDelta:
    kind: DeltaKind
    fragment: Optional[Fragment] = None

    @property
    def is_newer(self) -> bool:
        return self.kind is DeltaKind.NEWER

    @classmethod
    def newer(cls, fragment: Fragment) -> VersionDelta:
        return cls(DeltaKind.NEWER, fragment)


SAME = VersionDelta(DeltaKind.SAME)
OLDER = VersionDelta(DeltaKind.OLDER)

VersionLike = Union[SemanticVersion, str, None]


def _coerce(version: VersionLike) -> SemanticVersion:
    if isinstance(version, SemanticVersion):
        return version
    return SemanticVersion.parse(version)


def compare(installed: VersionLike, remote: VersionLike) -> VersionDelta:
    """Compare most significant component first.

    The first component where ``remote`` differs from ``installed`` decides:
    greater means Newer at that fragment, smaller means Older.
    """
    old = _coerce(installed).components
    new = _coerce(remote).components
    for fragment, old_part, new_part in zip(FRAGMENTS, old, new):
        if new_part > old_part:
            return VersionDelta.newer(fragment)
        if new_part < old_part:
            return OLDER
    return SAME
