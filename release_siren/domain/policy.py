"""Per-fragment alert policy: how loudly to prompt and how often."""

from dataclasses import dataclass
from typing import Mapping, Optional

from release_siren.domain.model import (
    FRAGMENTS,
    AlertAction,
    AlertPolicyConfig,
    AlertStrength,
    CheckFrequency,
    Fragment,
    FragmentPolicy,
)

_ACTIONS = {
    AlertStrength.FORCE: (AlertAction.UPDATE,),
    AlertStrength.OPTION: (AlertAction.NEXT_TIME, AlertAction.UPDATE),
    AlertStrength.SKIP: (AlertAction.NEXT_TIME, AlertAction.UPDATE, AlertAction.SKIP),
    AlertStrength.SILENT: (),
}


@dataclass(frozen=True)
class PolicyOverride:
    """Partial policy for one fragment; unset fields keep the default."""

    strength: Optional[AlertStrength] = None
    frequency: Optional[CheckFrequency] = None


def merge_policy(
    default: Optional[FragmentPolicy] = None,
    overrides: Optional[Mapping[Fragment, PolicyOverride]] = None,
) -> AlertPolicyConfig:
    """Fan the global default out to every fragment, then layer overrides on top."""
    base = default or FragmentPolicy()
    config = AlertPolicyConfig(major=base, minor=base, patch=base, revision=base)
    for fragment in FRAGMENTS:
        override = (overrides or {}).get(fragment)
        if override is None:
            continue
        config = config.with_fragment(
            fragment,
            FragmentPolicy(
                strength=override.strength if override.strength is not None else base.strength,
                frequency=override.frequency if override.frequency is not None else base.frequency,
            ),
        )
    return config


def resolve_strength(fragment: Fragment, config: AlertPolicyConfig) -> AlertStrength:
    return config.for_fragment(fragment).strength


def resolve_frequency(fragment: Fragment, config: AlertPolicyConfig) -> CheckFrequency:
    return config.for_fragment(fragment).frequency


def actions_for(strength: AlertStrength) -> tuple[AlertAction, ...]:
    return _ACTIONS[strength]
