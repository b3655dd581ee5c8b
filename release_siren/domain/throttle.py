"""Time gating for the remote check and for the prompt."""

from datetime import datetime
from typing import Optional

from release_siren.domain.model import WEEKLY, CheckFrequency

SECONDS_PER_DAY = 86_400


def days_elapsed(last: datetime, now: datetime, frequency: CheckFrequency = WEEKLY) -> int:
    """Whole days between ``last`` and ``now``, floored.

    A negative span means the clock was set back after ``last`` was stored;
    it is reported as the largest supported interval so the action counts
    as overdue.
    """
    seconds = (now - last).total_seconds()
    if seconds < 0:
        return max(WEEKLY.days, frequency.days)
    return int(seconds // SECONDS_PER_DAY)


def is_due(last: Optional[datetime], frequency: CheckFrequency, now: datetime) -> bool:
    if last is None:
        return True
    if frequency.every_time:
        return True
    return days_elapsed(last, now, frequency) >= frequency.days
