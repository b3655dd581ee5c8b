"""Configuration: engine settings, defaults, and how they are read from a dict."""

import os
from dataclasses import dataclass, field
from typing import Optional

from release_siren.domain.endpoints import custom_endpoint
from release_siren.domain.errors import ConfigurationError
from release_siren.domain.model import (
    FRAGMENTS,
    AlertPolicyConfig,
    AlertStrength,
    CheckFrequency,
    FragmentPolicy,
)
from release_siren.domain.policy import PolicyOverride, merge_policy

DEFAULT_TIMEOUT = 5.0
TIMEOUT_ENV_VAR = "RELEASE_SIREN_TIMEOUT"

DEFAULTS = {
    "app_id": "",
    "app_name": "",
    "installed_version": "",
    "region_code": None,
    "custom_endpoint_template": None,
    "forced_locale": None,
    "alert_strength": AlertStrength.OPTION.value,
    "check_frequency_days": 0,
    "fragments": {},
    "debug_logging": False,
}


@dataclass
class SirenSettings:
    app_id: str
    installed_version: str
    app_name: str = ""
    region_code: Optional[str] = None
    custom_endpoint_template: Optional[str] = None
    forced_locale: Optional[str] = None
    policy: AlertPolicyConfig = field(default_factory=AlertPolicyConfig)
    debug_logging: bool = False
    timeout: float = DEFAULT_TIMEOUT


def _strength(value, source: str) -> Optional[AlertStrength]:
    if value is None:
        return None
    try:
        return AlertStrength(str(value).lower())
    except ValueError:
        allowed = ", ".join(s.value for s in AlertStrength)
        raise ConfigurationError(f"{source}: unknown alert strength {value!r} (expected one of {allowed})")


def _frequency(value, source: str) -> Optional[CheckFrequency]:
    if value is None:
        return None
    try:
        return CheckFrequency(int(value))
    except (TypeError, ValueError):
        raise ConfigurationError(f"{source}: check frequency must be a non-negative number of days, got {value!r}")


def _timeout(value) -> float:
    env_value = os.getenv(TIMEOUT_ENV_VAR)
    raw = env_value if env_value else value
    if raw is None:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"timeout must be a number of seconds, got {raw!r}")


def _custom_endpoint_template(value, app_id: str) -> Optional[str]:
    if not value:
        return None
    template = str(value)
    try:
        custom_endpoint(template, app_id)
    except ValueError as exc:
        raise ConfigurationError(f"custom_endpoint_template: {exc}")
    return template


def policy_from_dict(cfg: dict) -> AlertPolicyConfig:
    """Build the per-fragment policy: global default first, fragment overrides on top."""
    default = FragmentPolicy(
        strength=_strength(cfg.get("alert_strength"), "alert_strength") or AlertStrength.OPTION,
        frequency=_frequency(cfg.get("check_frequency_days"), "check_frequency_days") or CheckFrequency(),
    )

    raw_fragments = cfg.get("fragments") or {}
    if not isinstance(raw_fragments, dict):
        raise ConfigurationError("fragments must be a mapping of fragment name to policy")

    known = {fragment.value: fragment for fragment in FRAGMENTS}
    overrides = {}
    for name, raw in raw_fragments.items():
        fragment = known.get(str(name).lower())
        if fragment is None:
            raise ConfigurationError(f"unknown version fragment {name!r} (expected one of {', '.join(known)})")
        raw = raw or {}
        overrides[fragment] = PolicyOverride(
            strength=_strength(raw.get("alert_strength"), f"fragments.{name}.alert_strength"),
            frequency=_frequency(raw.get("check_frequency_days"), f"fragments.{name}.check_frequency_days"),
        )
    return merge_policy(default, overrides)


def settings_from_dict(cfg: dict) -> SirenSettings:
    merged = dict(DEFAULTS)
    merged.update(cfg or {})

    app_id = str(merged.get("app_id") or "").strip()
    if not app_id:
        raise ConfigurationError("app_id is required to look up the latest release")

    installed_version = str(merged.get("installed_version") or "").strip()
    if not installed_version:
        raise ConfigurationError("installed_version is required to compare against the latest release")

    return SirenSettings(
        app_id=app_id,
        installed_version=installed_version,
        app_name=str(merged.get("app_name") or ""),
        region_code=merged.get("region_code") or None,
        custom_endpoint_template=_custom_endpoint_template(merged.get("custom_endpoint_template"), app_id),
        forced_locale=merged.get("forced_locale") or None,
        policy=policy_from_dict(merged),
        debug_logging=bool(merged.get("debug_logging", False)),
        timeout=_timeout(merged.get("timeout")),
    )
