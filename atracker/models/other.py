# models/other.py

"""
Represents a miscellaneous entry that fits none of the other kinds.

The entry form labels `category` as "Description".
"""

from __future__ import annotations

from typing import Any, Iterable

from atracker.models.grades import grades_to_list, validate_grades_input


class OtherEntry:

    def __init__(self, name: str, category: str, grades: Iterable[int]):
        self._name = OtherEntry.validate_text_input(name, "Name")
        self._category = OtherEntry.validate_text_input(category, "Description")
        self._grades = validate_grades_input(grades)

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def category(self) -> str:
        return self._category

    @property
    def grades(self) -> frozenset[int]:
        return self._grades

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "category": self._category,
            "grades": grades_to_list(self._grades),
        }

    @classmethod
    def from_dict(cls, data: dict) -> OtherEntry:
        return cls(
            name=data["name"],
            category=data["category"],
            grades=data["grades"],
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OtherEntry):
            return NotImplemented
        return (
            self._name == other._name
            and self._category == other._category
            and self._grades == other._grades
        )

    def __hash__(self) -> int:
        return hash((self._name, self._category, self._grades))

    def __repr__(self) -> str:
        return f"OtherEntry({self._name}, {self._category}, {grades_to_list(self._grades)})"

    def __str__(self) -> str:
        return f"OTHER: name: {self._name}, category: {self._category}"

    # === data validators ===

    @staticmethod
    def validate_text_input(value: Any, label: str) -> str:
        if not isinstance(value, str):
            raise TypeError(f"{label} must be text.")

        if value == "":
            raise ValueError(f"{label} is required.")

        return value
