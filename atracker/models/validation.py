# models/validation.py

"""
Acceptance rules that gate the construction of a new entry from raw form input.

Each `validate_*_input()` function is pure: it never mutates tracker state and never raises
for well-typed input. Field-level rules live on the entry classes as static validators;
these functions run them all and fold the outcome into a `Response`.

On success, `response.data["record"]` holds the new entry.
"""

from __future__ import annotations

import datetime
from typing import Any, Callable, Iterable

from atracker.core.response import ErrorCode, Response
from atracker.models.academic import AcademicEntry, AcademicType
from atracker.models.achievement import AchievementEntry, AchievementType
from atracker.models.extracurricular import ExtracurricularEntry, ExtracurricularType
from atracker.models.other import OtherEntry
from atracker.models.types import EntryType
from atracker.models.volunteer import VolunteerEntry


def _build(
    entry_class: Callable[..., EntryType], label: str, **fields: Any
) -> Response:
    """
    Helper method to construct an entry and translate validator exceptions into a `Response`.

    Args:
        entry_class (Callable[..., EntryType]): The entry class to instantiate.
        label (str): A human-readable entry name used in the failure detail.
        **fields: The raw field values passed to the constructor.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if every field passed validation.
                - False otherwise.
            - detail (str | None):
                - On failure, the reason the input was rejected.
                - On success, None.
            - error (ErrorCode | str | None):
                - `ErrorCode.VALIDATION_FAILED` if a field value broke an entry rule.
                - `ErrorCode.INVALID_INPUT` if a field had the wrong type.
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "record" (EntryType): The newly constructed entry.
                - On failure:
                    - None
    """
    try:
        record = entry_class(**fields)

    except ValueError as e:
        return Response.fail(
            detail=f"Invalid {label} entry: {e}",
            error=ErrorCode.VALIDATION_FAILED,
        )

    except TypeError as e:
        return Response.fail(
            detail=f"Malformed {label} entry: {e}",
            error=ErrorCode.INVALID_INPUT,
        )

    else:
        return Response.succeed(data={"record": record})


def validate_academic_input(
    type: AcademicType | str,
    class_name: str | None,
    score_or_grade: str,
    grades: Iterable[int],
) -> Response:
    return _build(
        AcademicEntry,
        "academic",
        type=type,
        class_name=class_name,
        score_or_grade=score_or_grade,
        grades=grades,
    )


def validate_volunteer_input(
    activity: str,
    hours: int | str,
    contact_person: str,
    contact_info: str,
    date: datetime.date,
) -> Response:
    return _build(
        VolunteerEntry,
        "volunteer",
        activity=activity,
        hours=hours,
        contact_person=contact_person,
        contact_info=contact_info,
        date=date,
    )


def validate_achievement_input(
    name: str,
    type: AchievementType | str,
    grades: Iterable[int],
) -> Response:
    return _build(AchievementEntry, "achievement", name=name, type=type, grades=grades)


def validate_extracurricular_input(
    activity: str,
    type: ExtracurricularType | str,
    grades: Iterable[int],
    special_role: str | None = None,
) -> Response:
    return _build(
        ExtracurricularEntry,
        "extracurricular",
        activity=activity,
        type=type,
        grades=grades,
        special_role=special_role,
    )


def validate_other_input(name: str, category: str, grades: Iterable[int]) -> Response:
    return _build(OtherEntry, "other", name=name, category=category, grades=grades)
