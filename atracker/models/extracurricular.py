# models/extracurricular.py

"""
Represents an extracurricular activity (a sport, a club, or something else) and the grades it spanned.

`special_role` records a leadership or other notable role. It is optional for every type
and is stored as None, never as an empty string, when not supplied.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from atracker.models.grades import grades_to_list, validate_grades_input


class ExtracurricularType(str, Enum):
    SPORT = "sport"
    CLUB = "club"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ExtracurricularEntry:

    def __init__(
        self,
        activity: str,
        type: ExtracurricularType | str,
        grades: Iterable[int],
        special_role: str | None = None,
    ):
        self._activity = ExtracurricularEntry.validate_activity_input(activity)
        self._type = ExtracurricularEntry.validate_type_input(type)
        self._grades = validate_grades_input(grades)
        self._special_role = ExtracurricularEntry.validate_special_role_input(
            special_role
        )

    # === properties ===

    @property
    def activity(self) -> str:
        return self._activity

    @property
    def type(self) -> ExtracurricularType:
        return self._type

    @property
    def grades(self) -> frozenset[int]:
        return self._grades

    @property
    def special_role(self) -> str | None:
        return self._special_role

    # === persistence and import ===

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "activity": self._activity,
            "type": self._type.value,
            "grades": grades_to_list(self._grades),
        }

        if self._special_role is not None:
            data["special_role"] = self._special_role

        return data

    @classmethod
    def from_dict(cls, data: dict) -> ExtracurricularEntry:
        return cls(
            activity=data["activity"],
            type=data["type"],
            grades=data["grades"],
            special_role=data.get("special_role"),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtracurricularEntry):
            return NotImplemented
        return (
            self._activity == other._activity
            and self._type == other._type
            and self._grades == other._grades
            and self._special_role == other._special_role
        )

    def __hash__(self) -> int:
        return hash((self._activity, self._type, self._grades, self._special_role))

    def __repr__(self) -> str:
        return f"ExtracurricularEntry({self._activity}, {self._type.value}, {grades_to_list(self._grades)}, {self._special_role})"

    def __str__(self) -> str:
        return f"EXTRACURRICULAR: activity: {self._activity}, type: {self._type.label}, role: {self._special_role}"

    # === data validators ===

    @staticmethod
    def validate_activity_input(activity: Any) -> str:
        if not isinstance(activity, str):
            raise TypeError("Activity must be text.")

        if activity == "":
            raise ValueError("Activity is required.")

        return activity

    @staticmethod
    def validate_type_input(type: Any) -> ExtracurricularType:
        try:
            return ExtracurricularType(type)

        except ValueError:
            raise ValueError(f"Unknown extracurricular type: {type!r}.")

    @staticmethod
    def validate_special_role_input(special_role: Any) -> str | None:
        if special_role is not None and not isinstance(special_role, str):
            raise TypeError("Special role must be text or None.")

        return special_role or None
