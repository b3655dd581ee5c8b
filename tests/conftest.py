"""Shared fixtures for all bounded contexts."""

from datetime import datetime, timezone
from typing import Optional

import pytest

from release_siren.adapters.localization.catalog_localizer import CatalogLocalizer
from release_siren.config import SirenSettings
from release_siren.domain.policy import merge_policy
from release_siren.domain.ports import VersionLookupPort
from release_siren.usecases.check_update import CheckUpdateUseCase

from fakes import FakeClock, InMemoryState


# ── Shared fixtures ─────────────────────────────────────────────────


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def state():
    return InMemoryState()


@pytest.fixture
def localizer():
    return CatalogLocalizer(default_locale="en")


@pytest.fixture
def make_settings():
    def _make(installed_version: str = "1.0.0.0", policy=None, **kwargs) -> SirenSettings:
        return SirenSettings(
            app_id=kwargs.pop("app_id", "376771144"),
            installed_version=installed_version,
            app_name=kwargs.pop("app_name", "Weathervane"),
            policy=policy or merge_policy(),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_use_case(state, localizer, clock, make_settings):
    def _make(lookup: VersionLookupPort, settings: Optional[SirenSettings] = None, **kwargs) -> CheckUpdateUseCase:
        return CheckUpdateUseCase(
            settings=settings or make_settings(),
            lookup=lookup,
            store=kwargs.pop("store", state),
            localizer=localizer,
            clock=clock,
            **kwargs,
        )

    return _make
