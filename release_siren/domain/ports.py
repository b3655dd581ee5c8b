"""Ports (interfaces) for the hexagonal architecture."""

from abc import ABC, abstractmethod
from typing import Optional

from release_siren.domain.model import VersionInfo


class VersionLookupPort(ABC):
    @abstractmethod
    def fetch(self, endpoint: str) -> Optional[VersionInfo]:
        """Return the first lookup entry, or None when the result list is empty.

        Raises FetchError on transport or payload problems.
        """


class StatePort(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: Optional[str]) -> None:
        ...


class LocalizerPort(ABC):
    @abstractmethod
    def text(self, key: str, locale: Optional[str] = None) -> str:
        ...


class ConfigPort(ABC):
    @abstractmethod
    def load(self) -> dict:
        ...

    @abstractmethod
    def save(self, cfg: dict) -> None:
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        ...
