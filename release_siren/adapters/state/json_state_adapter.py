"""JSON file-based key-value store for the update check state."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from release_siren.domain.ports import StatePort

logger = logging.getLogger("release_siren.state.json")

DEFAULT_STATE_FILE = "release_siren_state.json"


def _state_dir() -> str:
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.getcwd()


class JsonStateStore(StatePort):
    """Disk-backed store; every ``set`` rewrites the file atomically."""

    def __init__(self, path: str | None = None):
        self.path = Path(path or os.path.join(_state_dir(), DEFAULT_STATE_FILE))
        self._values: dict[str, str] = {}
        self._load()

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: Optional[str]) -> None:
        if value is None:
            if self._values.pop(key, None) is None:
                return
        elif self._values.get(key) == value:
            return
        else:
            self._values[key] = value
        self._save()

    def _load(self) -> None:
        if not self.path.exists():
            return

        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            if isinstance(payload, dict):
                self._values = {
                    str(key): str(value)
                    for key, value in payload.items()
                    if value is not None
                }
        except Exception:
            logger.exception("Failed to load update check state from %s", self.path)
            self._values = {}

    def _save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            temp_path.write_text(json.dumps(self._values, ensure_ascii=True, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except Exception:
            logger.exception("Failed to save update check state to %s", self.path)
