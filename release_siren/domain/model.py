"""Pure domain objects, free of framework dependencies."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional, Union


class Fragment(Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    REVISION = "revision"


FRAGMENTS = (Fragment.MAJOR, Fragment.MINOR, Fragment.PATCH, Fragment.REVISION)


class AlertStrength(Enum):
    FORCE = "force"      # update only
    OPTION = "option"    # update or next time
    SKIP = "skip"        # update, next time or skip this version
    SILENT = "silent"    # no UI, the host gets the message


@dataclass(frozen=True)
class CheckFrequency:
    """Minimum number of whole days between two runs of a gated action.

    ``days == 0`` means the action runs every time.
    """

    days: int = 0

    def __post_init__(self):
        if self.days < 0:
            raise ValueError(f"check frequency cannot be negative: {self.days}")

    @property
    def every_time(self) -> bool:
        return self.days == 0


IMMEDIATELY = CheckFrequency(0)
DAILY = CheckFrequency(1)
WEEKLY = CheckFrequency(7)


@dataclass(frozen=True)
class FragmentPolicy:
    strength: AlertStrength = AlertStrength.OPTION
    frequency: CheckFrequency = IMMEDIATELY


@dataclass(frozen=True)
class AlertPolicyConfig:
    major: FragmentPolicy = FragmentPolicy()
    minor: FragmentPolicy = FragmentPolicy()
    patch: FragmentPolicy = FragmentPolicy()
    revision: FragmentPolicy = FragmentPolicy()

    def for_fragment(self, fragment: Fragment) -> FragmentPolicy:
        return getattr(self, fragment.value)

    def with_fragment(self, fragment: Fragment, policy: FragmentPolicy) -> "AlertPolicyConfig":
        return replace(self, **{fragment.value: policy})


@dataclass
class CheckState:
    last_check_at: Optional[datetime] = None
    last_prompt_at: Optional[datetime] = None
    skipped_version: Optional[str] = None


@dataclass(frozen=True)
class VersionInfo:
    """First entry of a remote lookup payload."""

    version: Optional[str] = None
    mandatory_version: Optional[str] = None


class AlertAction(Enum):
    UPDATE = "update"
    NEXT_TIME = "next_time"
    SKIP = "skip"


class UserResponse(Enum):
    UPDATED = "updated"
    DEFERRED = "deferred"
    SKIPPED = "skipped"


class SuppressionReason(Enum):
    THROTTLED = "throttled"
    USER_SKIPPED = "user_skipped"
    BELOW_THRESHOLD = "below_threshold"


class CheckPhase(Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    EVALUATING = "evaluating"
    DECIDING = "deciding"
    SUPPRESSED = "suppressed"
    DECIDED = "decided"


@dataclass(frozen=True)
class Show:
    strength: AlertStrength
    message_key: str
    version: str
    title: str = ""
    message: str = ""
    actions: tuple[AlertAction, ...] = field(default_factory=tuple)
    update_url: str = ""
    mandatory: bool = False


@dataclass(frozen=True)
class SilentNotify:
    message_key: str
    version: str
    message: str = ""


@dataclass(frozen=True)
class Suppressed:
    reason: SuppressionReason


AlertDecision = Union[Show, SilentNotify, Suppressed]
