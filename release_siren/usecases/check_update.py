"""Use case: look up the latest release and decide whether and how to prompt."""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

from release_siren.config import SirenSettings
from release_siren.domain import messages
from release_siren.domain.endpoints import custom_endpoint, default_endpoint, store_page_url
from release_siren.domain.errors import ConfigurationError, FetchError, FetchErrorKind
from release_siren.domain.model import (
    IMMEDIATELY,
    AlertAction,
    AlertDecision,
    AlertStrength,
    CheckFrequency,
    CheckPhase,
    Fragment,
    Show,
    SilentNotify,
    Suppressed,
    SuppressionReason,
    UserResponse,
    VersionInfo,
)
from release_siren.domain.policy import actions_for, resolve_frequency, resolve_strength
from release_siren.domain.ports import LocalizerPort, StatePort, VersionLookupPort
from release_siren.domain.skip_version import is_skipped, record_skip
from release_siren.domain.throttle import is_due
from release_siren.domain.versioning import DeltaKind, compare
from release_siren.storage.check_state import CheckStateRepository

logger = logging.getLogger("release_siren.check_update")

_ACTION_LABEL_KEYS = {
    AlertAction.UPDATE: messages.UPDATE_BUTTON,
    AlertAction.NEXT_TIME: messages.NEXT_TIME_BUTTON,
    AlertAction.SKIP: messages.SKIP_BUTTON,
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckUpdateUseCase:
    """Runs one version check at a time and turns the lookup into an AlertDecision.

    The instance owns the persisted CheckState: it is loaded once here and
    written through the store whenever a field changes.
    """

    def __init__(
        self,
        settings: SirenSettings,
        lookup: VersionLookupPort,
        store: StatePort,
        localizer: LocalizerPort,
        clock: Optional[Callable[[], datetime]] = None,
        on_diagnostic: Optional[Callable[[FetchError], None]] = None,
    ):
        if not settings.app_id:
            raise ConfigurationError("app_id must be set before checking for updates")
        self.settings = settings
        self.lookup = lookup
        self.localizer = localizer
        self.clock = clock or _utc_now
        self.on_diagnostic = on_diagnostic
        self.repository = CheckStateRepository(store)
        self.state = self.repository.load()
        self.phase = CheckPhase.IDLE
        self._lock = threading.Lock()
        self._last_shown: Optional[Show] = None

        if settings.debug_logging:
            logging.getLogger("release_siren").setLevel(logging.DEBUG)

    # ── Running a check ─────────────────────────────────────────────

    def check_version(self, frequency: CheckFrequency = IMMEDIATELY) -> Optional[AlertDecision]:
        """Check for a newer release. Returns None when nothing was decided.

        That covers a check that is not due yet, a failed lookup, an empty
        result list and a request made while another check is running.
        """
        if not self._lock.acquire(blocking=False):
            logger.info("Version check already in progress, ignoring request")
            return None
        try:
            return self._run(frequency)
        except Exception:
            logger.exception("Version check failed")
            return None
        finally:
            self._enter(CheckPhase.IDLE)
            self._lock.release()

    def check_version_in_background(
        self,
        frequency: CheckFrequency = IMMEDIATELY,
        on_decision: Optional[Callable[[AlertDecision], None]] = None,
    ) -> threading.Thread:
        def _worker():
            decision = self.check_version(frequency)
            if decision is not None and on_decision is not None:
                on_decision(decision)

        thread = threading.Thread(target=_worker, daemon=True)
        thread.start()
        return thread

    def _now(self) -> datetime:
        now = self.clock()
        if now.tzinfo is None:
            # Stored timestamps read back as UTC.
            now = now.replace(tzinfo=timezone.utc)
        return now

    def _enter(self, phase: CheckPhase) -> None:
        self.phase = phase
        logger.debug("Check phase: %s", phase.value)

    def _run(self, frequency: CheckFrequency) -> Optional[AlertDecision]:
        now = self._now()
        if not frequency.every_time and not is_due(self.state.last_check_at, frequency, now):
            logger.debug(
                "Skipping version check (last=%s, frequency=%s days)",
                self.state.last_check_at,
                frequency.days,
            )
            return None

        endpoints = self._endpoints()
        for attempt, endpoint in enumerate(endpoints, start=1):
            try:
                return self._check_endpoint(endpoint, now)
            except FetchError as exc:
                self._diagnose(exc)
                if exc.kind is FetchErrorKind.FORMAT and attempt < len(endpoints):
                    logger.info("Unusable payload from custom endpoint, retrying against the default lookup")
                    continue
                return None
        return None

    def _endpoints(self) -> list[str]:
        s = self.settings
        endpoints = [default_endpoint(s.app_id, s.region_code)]
        if s.custom_endpoint_template:
            try:
                endpoints.insert(0, custom_endpoint(s.custom_endpoint_template, s.app_id, s.region_code))
            except ValueError as exc:
                self._diagnose(FetchError.format(s.custom_endpoint_template, str(exc)))
                logger.info("Unusable custom endpoint, using the default lookup")
        return endpoints

    def _check_endpoint(self, endpoint: str, now: datetime) -> Optional[AlertDecision]:
        self._enter(CheckPhase.FETCHING)
        logger.debug("Lookup URL: %s", endpoint)
        info = self.lookup.fetch(endpoint)

        self.state.last_check_at = now
        self.repository.save_last_check(now)

        self._enter(CheckPhase.EVALUATING)
        if info is None:
            logger.debug("Lookup returned an empty result list")
            return None
        logger.debug("Lookup result: version=%s mandatory_version=%s", info.version, info.mandatory_version)
        if info.version is None and info.mandatory_version is None:
            raise FetchError.format(endpoint, "lookup result has no 'version' key")
        return self._evaluate(info, now)

    def _evaluate(self, info: VersionInfo, now: datetime) -> AlertDecision:
        installed = self.settings.installed_version

        if info.mandatory_version is not None:
            if compare(installed, info.mandatory_version).is_newer:
                return self._show_mandatory(info, now)
            logger.debug("Mandatory version %s already satisfied by %s", info.mandatory_version, installed)

        if info.version is None:
            # Mandatory floor met and nothing else to compare; no re-fetch.
            return self._suppress(SuppressionReason.BELOW_THRESHOLD)

        delta = compare(installed, info.version)
        if not delta.is_newer:
            logger.debug("Remote version %s is not newer than %s", info.version, installed)
            return self._suppress(SuppressionReason.BELOW_THRESHOLD)
        return self._decide(info.version, delta.fragment, now)

    def _decide(self, version: str, fragment: Fragment, now: datetime) -> AlertDecision:
        self._enter(CheckPhase.DECIDING)
        policy = self.settings.policy
        strength = resolve_strength(fragment, policy)
        logger.debug("New %s version %s, alert strength %s", fragment.value, version, strength.value)

        if strength is AlertStrength.SILENT:
            self._enter(CheckPhase.DECIDED)
            return SilentNotify(
                message_key=messages.NEW_VERSION_MESSAGE,
                version=version,
                message=self._new_version_message(version),
            )

        if is_skipped(version, self.state.skipped_version):
            logger.debug("Version %s was skipped by the user", version)
            return self._suppress(SuppressionReason.USER_SKIPPED)

        if not is_due(self.state.last_prompt_at, resolve_frequency(fragment, policy), now):
            return self._suppress(SuppressionReason.THROTTLED)

        return self._show(strength, version, now)

    def _show_mandatory(self, info: VersionInfo, now: datetime) -> Show:
        target = info.mandatory_version
        if info.version is not None and compare(info.mandatory_version, info.version).kind is not DeltaKind.OLDER:
            target = info.version
        logger.info("Installed version %s is below mandatory %s", self.settings.installed_version, info.mandatory_version)
        self._enter(CheckPhase.DECIDING)
        return self._show(AlertStrength.FORCE, target, now, mandatory=True)

    def _show(self, strength: AlertStrength, version: str, now: datetime, mandatory: bool = False) -> Show:
        self.state.last_prompt_at = now
        self.repository.save_last_prompt(now)

        decision = Show(
            strength=strength,
            message_key=messages.NEW_VERSION_MESSAGE,
            version=version,
            title=self._text(messages.UPDATE_AVAILABLE),
            message=self._new_version_message(version),
            actions=actions_for(strength),
            update_url=store_page_url(self.settings.app_id),
            mandatory=mandatory,
        )
        self._last_shown = decision
        self._enter(CheckPhase.DECIDED)
        logger.info("Update alert for version %s (strength=%s)", version, strength.value)
        return decision

    def _suppress(self, reason: SuppressionReason) -> Suppressed:
        logger.debug("Update alert suppressed (%s)", reason.value)
        self._enter(CheckPhase.SUPPRESSED)
        return Suppressed(reason)

    def _diagnose(self, error: FetchError) -> None:
        logger.warning("Version lookup failed (%s): %s", error.kind.value, error)
        if self.on_diagnostic is not None:
            self.on_diagnostic(error)

    # ── Text ────────────────────────────────────────────────────────

    def _text(self, key: str) -> str:
        return self.localizer.text(key, self.settings.forced_locale)

    def _new_version_message(self, version: str) -> str:
        template = self._text(messages.NEW_VERSION_MESSAGE)
        return messages.format_new_version(template, self.settings.app_name, version)

    def action_label(self, action: AlertAction) -> str:
        return self._text(_ACTION_LABEL_KEYS[action])

    # ── User response ───────────────────────────────────────────────

    def report(self, response: UserResponse) -> None:
        """Record how the user answered the last alert shown."""
        shown = self._last_shown
        if shown is None:
            logger.warning("Ignoring user response %s: no update alert is showing", response.value)
            return

        if response is UserResponse.SKIPPED:
            if AlertAction.SKIP not in shown.actions:
                logger.warning("Ignoring skip for version %s: the alert did not offer it", shown.version)
                return
            with self._lock:
                self.state = record_skip(self.state, shown.version)
                self.repository.save_skipped_version(shown.version)

        logger.info("User response to update alert for %s: %s", shown.version, response.value)
        self._last_shown = None
