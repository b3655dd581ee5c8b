"""User journey: a user launches the app and answers the update alert in the terminal."""

from release_siren.domain.model import (
    AlertStrength,
    FragmentPolicy,
    SuppressionReason,
    Suppressed,
    UserResponse,
    VersionInfo,
)
from release_siren.domain.policy import merge_policy
from release_siren.storage.check_state import SKIPPED_VERSION_KEY
from release_siren.ui.terminal_prompt import present_decision

from fakes import InMemoryLookup


class ScriptedTerminal:
    def __init__(self, answers):
        self.answers = list(answers)
        self.lines: list[str] = []

    def ask(self, prompt: str) -> str:
        return self.answers.pop(0)

    def out(self, line: str) -> None:
        self.lines.append(line)


def test_user_skips_a_release_from_the_terminal(make_use_case, make_settings, state):
    settings = make_settings("1.0.0.0", policy=merge_policy(FragmentPolicy(AlertStrength.SKIP)))
    uc = make_use_case(InMemoryLookup(VersionInfo(version="1.1.0.0")), settings)
    terminal = ScriptedTerminal(["7", "3"])

    decision = uc.check_version()
    response = present_decision(decision, uc.action_label, ask=terminal.ask, out=terminal.out)
    uc.report(response)

    assert response is UserResponse.SKIPPED
    assert "  [3] Skip this version" in terminal.lines
    assert any("between 1 and 3" in line for line in terminal.lines)
    assert state.data[SKIPPED_VERSION_KEY] == "1.1.0.0"


def test_choosing_update_prints_the_store_link(make_use_case):
    uc = make_use_case(InMemoryLookup(VersionInfo(version="2.0")))
    terminal = ScriptedTerminal(["2"])

    response = present_decision(uc.check_version(), uc.action_label, ask=terminal.ask, out=terminal.out)

    assert response is UserResponse.UPDATED
    assert terminal.lines[-1] == "https://itunes.apple.com/app/id376771144"


def test_suppressed_decision_asks_nothing():
    terminal = ScriptedTerminal([])

    response = present_decision(
        Suppressed(SuppressionReason.THROTTLED),
        lambda action: action.value,
        ask=terminal.ask,
        out=terminal.out,
    )

    assert response is None
    assert terminal.lines == ["Update alert suppressed (throttled)."]


def test_no_decision_is_reported_plainly():
    terminal = ScriptedTerminal([])
    assert present_decision(None, lambda action: action.value, ask=terminal.ask, out=terminal.out) is None
    assert terminal.lines == ["No version decision this run."]
