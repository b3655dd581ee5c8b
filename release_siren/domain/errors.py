"""Errors raised by the update-check engine and its adapters."""

from enum import Enum


class ConfigurationError(Exception):
    """Settings are missing or invalid; no check can start."""


class FetchErrorKind(Enum):
    TRANSPORT = "transport"
    FORMAT = "format"


class FetchError(Exception):
    """The remote version lookup failed.

    ``TRANSPORT`` covers connectivity problems and timeouts, ``FORMAT`` a
    payload that could not be decoded or lacks the expected fields.
    """

    def __init__(self, kind: FetchErrorKind, endpoint: str, message: str = ""):
        super().__init__(message or f"{kind.value} error fetching {endpoint}")
        self.kind = kind
        self.endpoint = endpoint

    @classmethod
    def transport(cls, endpoint: str, message: str = "") -> "FetchError":
        return cls(FetchErrorKind.TRANSPORT, endpoint, message)

    @classmethod
    def format(cls, endpoint: str, message: str = "") -> "FetchError":
        return cls(FetchErrorKind.FORMAT, endpoint, message)
