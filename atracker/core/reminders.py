# core/reminders.py

"""
Monthly "anything new to add?" reminder.

The reminder fires on the 1st of every month at 09:00 local time. A terminal program cannot
post notifications while it is closed, so the check runs once at start-up instead: if an
occurrence fell between the previous launch and now, the reminder is shown.
The previous launch time is kept in the `last_launch` slot of the key-value store.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass

from atracker.core.storage import KeyValueStore

logger = logging.getLogger(__name__)

LAST_LAUNCH_SLOT = "last_launch"


@dataclass(frozen=True)
class MonthlyReminder:
    title: str = "Reminder"
    body: str = "Anything new to add?"
    day: int = 1
    hour: int = 9
    minute: int = 0

    def occurrence_in(self, year: int, month: int) -> datetime.datetime:
        return datetime.datetime(year, month, self.day, self.hour, self.minute)

    def next_occurrence(self, after: datetime.datetime) -> datetime.datetime:
        """
        Returns the first firing time strictly later than `after`.
        """
        candidate = self.occurrence_in(after.year, after.month)

        if candidate > after:
            return candidate

        if after.month == 12:
            return self.occurrence_in(after.year + 1, 1)

        return self.occurrence_in(after.year, after.month + 1)

    def is_due(
        self, last_seen: datetime.datetime | None, now: datetime.datetime
    ) -> bool:
        # nothing to catch up on during the very first launch
        if last_seen is None:
            return False

        return self.next_occurrence(last_seen) <= now

    def message(self) -> str:
        return f"{self.title}: {self.body}"


MONTHLY_REMINDER = MonthlyReminder()


def check_reminder(
    store: KeyValueStore,
    now: datetime.datetime | None = None,
    reminder: MonthlyReminder = MONTHLY_REMINDER,
) -> str | None:
    """
    Records this launch and reports whether the reminder fired since the previous one.

    Args:
        store (KeyValueStore): The store holding the `last_launch` slot.
        now (datetime.datetime | None): The current local time. Defaults to `datetime.datetime.now()`.
        reminder (MonthlyReminder): The schedule to check against.

    Returns:
        The reminder message if it is due, otherwise None.

    Notes:
        - An unreadable `last_launch` value is treated as a first launch.
        - A timezone-aware `last_launch` value is converted to naive local time.
        - Failing to record the launch time is logged and otherwise ignored.
    """
    now = now or datetime.datetime.now()

    last_seen = None

    try:
        raw = store.read(LAST_LAUNCH_SLOT)

    # UnicodeDecodeError is a ValueError
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s: %s", LAST_LAUNCH_SLOT, e)
        raw = None

    if raw:
        try:
            last_seen = datetime.datetime.fromisoformat(raw.strip())

        except ValueError:
            logger.warning("Ignoring unreadable %s value: %r", LAST_LAUNCH_SLOT, raw)

    # schedule times are naive local times
    if last_seen is not None and last_seen.tzinfo is not None:
        last_seen = last_seen.astimezone().replace(tzinfo=None)

    try:
        store.write(LAST_LAUNCH_SLOT, now.isoformat())

    except OSError as e:
        logger.error("Could not record launch time: %s", e)

    return reminder.message() if reminder.is_due(last_seen, now) else None
