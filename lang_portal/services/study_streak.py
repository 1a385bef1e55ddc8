"""Study streak calculation."""

from collections.abc import Iterable
from datetime import date, timedelta


def calculate_study_streak(study_dates: Iterable[date], today: date) -> int:
    """
    Count consecutive study days ending today.

    Only the calendar date matters: several sessions on the same day count
    as one streak day. A streak whose latest day is not today is broken and
    yields 0, even if it ended yesterday.

    Args:
        study_dates: Dates on which at least one session was created, in any order
        today: The day the streak must end on

    Returns:
        Number of consecutive days, counting back from today, that have a session
    """
    days = set(study_dates)

    streak = 0
    current = today
    while current in days:
        streak += 1
        current -= timedelta(days=1)
    return streak
