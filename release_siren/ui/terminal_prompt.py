"""Terminal presentation of an AlertDecision."""

from typing import Callable, Optional

from release_siren.domain.model import (
    AlertAction,
    AlertDecision,
    Show,
    SilentNotify,
    Suppressed,
    UserResponse,
)

RESPONSES = {
    AlertAction.UPDATE: UserResponse.UPDATED,
    AlertAction.NEXT_TIME: UserResponse.DEFERRED,
    AlertAction.SKIP: UserResponse.SKIPPED,
}


def present_decision(
    decision: Optional[AlertDecision],
    label_for: Callable[[AlertAction], str],
    ask: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> Optional[UserResponse]:
    """Print the decision and, for an alert, ask which offered action the user picks."""
    if decision is None:
        out("No version decision this run.")
        return None
    if isinstance(decision, Suppressed):
        out(f"Update alert suppressed ({decision.reason.value}).")
        return None
    if isinstance(decision, SilentNotify):
        out(decision.message)
        return None
    if not isinstance(decision, Show):
        return None

    out(decision.title)
    out(decision.message)
    for number, action in enumerate(decision.actions, start=1):
        out(f"  [{number}] {label_for(action)}")

    while True:
        answer = ask("> ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(decision.actions):
            action = decision.actions[int(answer) - 1]
            if action is AlertAction.UPDATE and decision.update_url:
                out(decision.update_url)
            return RESPONSES[action]
        out(f"Please pick a number between 1 and {len(decision.actions)}.")
