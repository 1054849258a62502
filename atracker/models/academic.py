# models/academic.py

"""
Represents an academic result: a standardized test score, an AP or dual-credit (DC) class, or anything else academic.

For AP and DC entries `class_name` holds the course title and is required.
For "Other" entries the form reuses `class_name` as a free-text category and `score_or_grade` as the result name.
`class_name` is stored as None, never as an empty string, when not supplied.

Includes functionality for:
- Validating raw form input field by field
- Serializing to and from JSON-compatible dictionaries
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from atracker.models.grades import grades_to_list, validate_grades_input


class AcademicType(str, Enum):
    SAT = "sat"
    ACT = "act"
    AP = "ap"
    DC = "dc"
    OTHER = "other"

    @property
    def label(self) -> str:
        return "Other" if self is AcademicType.OTHER else self.value.upper()


CLASS_NAME_REQUIRED: frozenset[AcademicType] = frozenset(
    {AcademicType.AP, AcademicType.DC}
)


class AcademicEntry:

    def __init__(
        self,
        type: AcademicType | str,
        score_or_grade: str,
        grades: Iterable[int],
        class_name: str | None = None,
    ):
        self._type = AcademicEntry.validate_type_input(type)
        self._score_or_grade = AcademicEntry.validate_score_input(score_or_grade)
        self._class_name = AcademicEntry.validate_class_name_input(
            class_name, self._type
        )
        self._grades = validate_grades_input(grades)

    # === properties ===

    @property
    def type(self) -> AcademicType:
        return self._type

    @property
    def class_name(self) -> str | None:
        return self._class_name

    @property
    def score_or_grade(self) -> str:
        return self._score_or_grade

    @property
    def grades(self) -> frozenset[int]:
        return self._grades

    # === persistence and import ===

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "type": self._type.value,
            "score_or_grade": self._score_or_grade,
            "grades": grades_to_list(self._grades),
        }

        if self._class_name is not None:
            data["class_name"] = self._class_name

        return data

    @classmethod
    def from_dict(cls, data: dict) -> AcademicEntry:
        return cls(
            type=data["type"],
            score_or_grade=data["score_or_grade"],
            grades=data["grades"],
            class_name=data.get("class_name"),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AcademicEntry):
            return NotImplemented
        return (
            self._type == other._type
            and self._class_name == other._class_name
            and self._score_or_grade == other._score_or_grade
            and self._grades == other._grades
        )

    def __hash__(self) -> int:
        return hash((self._type, self._class_name, self._score_or_grade, self._grades))

    def __repr__(self) -> str:
        return f"AcademicEntry({self._type.value}, {self._class_name}, {self._score_or_grade}, {grades_to_list(self._grades)})"

    def __str__(self) -> str:
        return f"ACADEMIC: type: {self._type.label}, class: {self._class_name}, score/grade: {self._score_or_grade}"

    # === data validators ===

    @staticmethod
    def validate_type_input(type: Any) -> AcademicType:
        try:
            return AcademicType(type)

        except ValueError:
            raise ValueError(f"Unknown academic type: {type!r}.")

    @staticmethod
    def validate_score_input(score_or_grade: Any) -> str:
        if not isinstance(score_or_grade, str):
            raise TypeError("Score/grade must be text.")

        if score_or_grade == "":
            raise ValueError("Score/grade is required.")

        return score_or_grade

    @staticmethod
    def validate_class_name_input(
        class_name: str | None, type: AcademicType
    ) -> str | None:
        """
        Validates and normalizes an optional class name.

        Args:
            class_name (str | None): The raw class name; an empty string is treated as absent.
            type (AcademicType): The entry type, which decides whether a class name is required.

        Returns:
            The class name, or None if it was not supplied.

        Raises:
            TypeError: If the class name is neither text nor None.
            ValueError: If the class name is absent and the type is AP or DC.
        """
        if class_name is not None and not isinstance(class_name, str):
            raise TypeError("Class name must be text or None.")

        normalized = class_name or None

        if normalized is None and type in CLASS_NAME_REQUIRED:
            raise ValueError(f"Class name is required for {type.label} entries.")

        return normalized
