# models/grades.py

"""
Shared handling for the `grades` tag carried by Academic, Achievement, Extracurricular, and Other entries.

A grade is a high school year level (9 through 12). An entry may apply to several grades,
so grades are held as a frozenset and serialized as a sorted list of integers.
"""

from __future__ import annotations

from typing import Any, Iterable

VALID_GRADES: tuple[int, ...] = (9, 10, 11, 12)


def validate_grades_input(grades: Iterable[Any]) -> frozenset[int]:
    """
    Validates and normalizes a collection of grade levels.

    Args:
        grades (Iterable[Any]): The grades the entry applies to. Duplicates are collapsed.

    Returns:
        A frozenset of grade levels.

    Raises:
        TypeError: If the input is not iterable or contains non-integer values.
        ValueError: If the input is empty or contains a value outside 9-12.
    """
    if isinstance(grades, (str, bytes)):
        raise TypeError("Grades must be a collection of integers.")

    try:
        normalized = frozenset(grades)

    except TypeError:
        raise TypeError("Grades must be a collection of integers.")

    if not normalized:
        raise ValueError("At least one grade must be selected.")

    for grade in normalized:
        # bool is an int subclass, but True is not a grade
        if isinstance(grade, bool) or not isinstance(grade, int):
            raise TypeError(f"Grade must be an integer, got {grade!r}.")

        if grade not in VALID_GRADES:
            raise ValueError(f"Grade must be between 9 and 12, got {grade}.")

    return normalized


def grades_to_list(grades: frozenset[int]) -> list[int]:
    return sorted(grades)
