# models/achievement.py

"""
Represents an achievement or award, tagged with the grades in which it was earned.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from atracker.models.grades import grades_to_list, validate_grades_input


class AchievementType(str, Enum):
    ACHIEVEMENT = "achievement"
    AWARD = "award"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class AchievementEntry:

    def __init__(
        self,
        name: str,
        type: AchievementType | str,
        grades: Iterable[int],
    ):
        self._name = AchievementEntry.validate_name_input(name)
        self._type = AchievementEntry.validate_type_input(type)
        self._grades = validate_grades_input(grades)

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> AchievementType:
        return self._type

    @property
    def grades(self) -> frozenset[int]:
        return self._grades

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "type": self._type.value,
            "grades": grades_to_list(self._grades),
        }

    @classmethod
    def from_dict(cls, data: dict) -> AchievementEntry:
        return cls(
            name=data["name"],
            type=data["type"],
            grades=data["grades"],
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AchievementEntry):
            return NotImplemented
        return (
            self._name == other._name
            and self._type == other._type
            and self._grades == other._grades
        )

    def __hash__(self) -> int:
        return hash((self._name, self._type, self._grades))

    def __repr__(self) -> str:
        return f"AchievementEntry({self._name}, {self._type.value}, {grades_to_list(self._grades)})"

    def __str__(self) -> str:
        return f"ACHIEVEMENT: name: {self._name}, type: {self._type.label}"

    # === data validators ===

    @staticmethod
    def validate_name_input(name: Any) -> str:
        if not isinstance(name, str):
            raise TypeError("Name must be text.")

        if name == "":
            raise ValueError("Name is required.")

        return name

    @staticmethod
    def validate_type_input(type: Any) -> AchievementType:
        try:
            return AchievementType(type)

        except ValueError:
            raise ValueError(f"Unknown achievement type: {type!r}.")
