# models/volunteer.py

"""
Represents a block of volunteer service: what was done, for how long, on which day, and who can vouch for it.

Unlike the other entry kinds, volunteer entries are not tagged with grades.
Hours are whole numbers; the form accepts them as text and they must parse to a positive integer.
"""

from __future__ import annotations

import datetime
import re
from typing import Any

_HOURS_PATTERN = re.compile(r"[+-]?[0-9]+")


class VolunteerEntry:

    def __init__(
        self,
        activity: str,
        hours: int | str,
        contact_person: str,
        contact_info: str,
        date: datetime.date,
    ):
        self._activity = VolunteerEntry.validate_text_input(activity, "Activity")
        self._hours = VolunteerEntry.validate_hours_input(hours)
        self._contact_person = VolunteerEntry.validate_text_input(
            contact_person, "Contact person"
        )
        self._contact_info = VolunteerEntry.validate_text_input(
            contact_info, "Contact info"
        )
        self._date = VolunteerEntry.validate_date_input(date)

    # === properties ===

    @property
    def activity(self) -> str:
        return self._activity

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def contact_person(self) -> str:
        return self._contact_person

    @property
    def contact_info(self) -> str:
        return self._contact_info

    @property
    def date(self) -> datetime.date:
        return self._date

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "activity": self._activity,
            "hours": self._hours,
            "contact_person": self._contact_person,
            "contact_info": self._contact_info,
            "date": self._date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> VolunteerEntry:
        return cls(
            activity=data["activity"],
            hours=data["hours"],
            contact_person=data["contact_person"],
            contact_info=data["contact_info"],
            date=datetime.date.fromisoformat(data["date"]),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VolunteerEntry):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(
            (
                self._activity,
                self._hours,
                self._contact_person,
                self._contact_info,
                self._date,
            )
        )

    def __repr__(self) -> str:
        return f"VolunteerEntry({self._activity}, {self._hours}, {self._contact_person}, {self._contact_info}, {self._date.isoformat()})"

    def __str__(self) -> str:
        return f"VOLUNTEER: activity: {self._activity}, hours: {self._hours}, date: {self._date.isoformat()}"

    # === data validators ===

    @staticmethod
    def validate_text_input(value: Any, label: str) -> str:
        if not isinstance(value, str):
            raise TypeError(f"{label} must be text.")

        if value == "":
            raise ValueError(f"{label} is required.")

        return value

    @staticmethod
    def validate_hours_input(hours: Any) -> int:
        """
        Validates and normalizes volunteer hours.

        Accepts an int or a string of ASCII digits with an optional sign, otherwise:
            - Rejects booleans and floats, even whole-valued ones.
            - Ensures the value is strictly greater than zero.

        Args:
            hours (Any): The input value to validate.

        Returns:
            The number of hours as an int.

        Raises:
            ValueError: If the input does not parse as an integer or is not positive.
        """
        if isinstance(hours, bool) or not isinstance(hours, (int, str)):
            raise ValueError("Hours must be a whole number.")

        # stricter than int(), which tolerates padding and underscores
        if isinstance(hours, str) and not _HOURS_PATTERN.fullmatch(hours):
            raise ValueError("Hours must be a whole number.")

        hours = int(hours)

        if hours <= 0:
            raise ValueError("Hours must be greater than zero.")

        return hours

    @staticmethod
    def validate_date_input(date: Any) -> datetime.date:
        # datetime is a date subclass; keep only the calendar day
        if isinstance(date, datetime.datetime):
            return date.date()

        if not isinstance(date, datetime.date):
            raise TypeError("Date must be a calendar date.")

        return date
