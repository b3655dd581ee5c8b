"""The single "don't remind me about this version" marker."""

from dataclasses import replace
from typing import Optional

from release_siren.domain.model import CheckState


def is_skipped(remote_version: str, stored: Optional[str]) -> bool:
    # Exact string match against what was stored, no re-parsing.
    return stored is not None and stored == remote_version


def record_skip(state: CheckState, version: str) -> CheckState:
    return replace(state, skipped_version=version)
