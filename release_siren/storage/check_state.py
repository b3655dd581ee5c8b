"""Load and write CheckState through the injected key-value store."""

import logging
from datetime import datetime, timezone
from typing import Optional

from release_siren.domain.model import CheckState
from release_siren.domain.ports import StatePort

logger = logging.getLogger("release_siren.state")

LAST_CHECK_KEY = "last_version_check_at"
LAST_PROMPT_KEY = "last_alert_shown_at"
SKIPPED_VERSION_KEY = "skipped_version"


def _parse_instant(key: str, value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        instant = datetime.fromisoformat(value)
    except ValueError:
        logger.warning("Ignoring unreadable timestamp for %s: %r", key, value)
        return None
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant


def _format_instant(instant: Optional[datetime]) -> Optional[str]:
    return instant.isoformat() if instant is not None else None


class CheckStateRepository:
    """Maps CheckState fields onto the three store keys.

    Every ``save_*`` call writes through immediately.
    """

    def __init__(self, store: StatePort):
        self.store = store

    def load(self) -> CheckState:
        return CheckState(
            last_check_at=_parse_instant(LAST_CHECK_KEY, self.store.get(LAST_CHECK_KEY)),
            last_prompt_at=_parse_instant(LAST_PROMPT_KEY, self.store.get(LAST_PROMPT_KEY)),
            skipped_version=self.store.get(SKIPPED_VERSION_KEY) or None,
        )

    def save_last_check(self, instant: datetime) -> None:
        self.store.set(LAST_CHECK_KEY, _format_instant(instant))

    def save_last_prompt(self, instant: datetime) -> None:
        self.store.set(LAST_PROMPT_KEY, _format_instant(instant))

    def save_skipped_version(self, version: str) -> None:
        self.store.set(SKIPPED_VERSION_KEY, version)
