# models/types.py

"""
Holds the EntryKind enumeration and the EntryType TypeVar for simplifying type checks.
"""

from enum import Enum
from typing import TypeVar

from atracker.models.academic import AcademicEntry
from atracker.models.achievement import AchievementEntry
from atracker.models.extracurricular import ExtracurricularEntry
from atracker.models.other import OtherEntry
from atracker.models.volunteer import VolunteerEntry

EntryType = TypeVar(
    "EntryType",
    AcademicEntry,
    VolunteerEntry,
    AchievementEntry,
    ExtracurricularEntry,
    OtherEntry,
)


class EntryKind(str, Enum):
    ACADEMIC = "academic"
    VOLUNTEER = "volunteer"
    ACHIEVEMENT = "achievement"
    EXTRACURRICULAR = "extracurricular"
    OTHER = "other"

    @property
    def entry_class(self) -> type:
        return ENTRY_CLASSES[self]

    @property
    def label(self) -> str:
        return ENTRY_LABELS[self]

    @classmethod
    def of(cls, entry: object) -> "EntryKind":
        for kind, entry_class in ENTRY_CLASSES.items():
            if type(entry) is entry_class:
                return kind

        raise TypeError(f"Unrecognized entry type: {type(entry)}")


ENTRY_CLASSES: dict[EntryKind, type] = {
    EntryKind.ACADEMIC: AcademicEntry,
    EntryKind.VOLUNTEER: VolunteerEntry,
    EntryKind.ACHIEVEMENT: AchievementEntry,
    EntryKind.EXTRACURRICULAR: ExtracurricularEntry,
    EntryKind.OTHER: OtherEntry,
}

ENTRY_LABELS: dict[EntryKind, str] = {
    EntryKind.ACADEMIC: "Academic",
    EntryKind.VOLUNTEER: "Volunteer",
    EntryKind.ACHIEVEMENT: "Achievements/Awards",
    EntryKind.EXTRACURRICULAR: "Extracurriculars",
    EntryKind.OTHER: "Other",
}
