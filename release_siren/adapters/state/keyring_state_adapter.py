"""Key-value store backed by the OS keychain."""

from __future__ import annotations

import logging
from typing import Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from release_siren.domain.ports import StatePort

logger = logging.getLogger("release_siren.state.keyring")

DEFAULT_SERVICE_NAME = "release-siren"


class KeyringStateStore(StatePort):
    """Store each state key as a keychain entry under one service name.

    A failing backend reads as "absent" and drops writes, so the check
    degrades to re-prompting instead of crashing the host.
    """

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME):
        self.service_name = service_name

    def get(self, key: str) -> Optional[str]:
        try:
            return keyring.get_password(self.service_name, key)
        except KeyringError:
            logger.warning("Keychain read failed for %s/%s", self.service_name, key)
            return None

    def set(self, key: str, value: Optional[str]) -> None:
        try:
            if value:
                keyring.set_password(self.service_name, key, value)
            else:
                self.delete(key)
        except KeyringError:
            logger.warning("Keychain write failed for %s/%s", self.service_name, key)

    def delete(self, key: str) -> bool:
        try:
            keyring.delete_password(self.service_name, key)
            return True
        except PasswordDeleteError:
            return False
