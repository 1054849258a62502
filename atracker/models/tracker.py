# models/tracker.py

"""
The Tracker model is the central data object of the program and the "source of truth" for all entries.

Entries are held in five insertion-ordered lists, one per `EntryKind`, and written to the
key-value store through an injected `PersistenceAdapter`. Every successful mutation is followed
by an explicit save of all five collections; a failed save is logged and reported, and the
in-memory lists remain authoritative for the rest of the session.

Provides functions for loading a Tracker from storage, validating and adding entries from raw
form input, removing entries by index, and computing read-only aggregates.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Callable, Iterable

from atracker.core.response import ErrorCode, Response
from atracker.models.academic import AcademicEntry, AcademicType
from atracker.models.achievement import AchievementEntry, AchievementType
from atracker.models.extracurricular import ExtracurricularEntry, ExtracurricularType
from atracker.models.other import OtherEntry
from atracker.models.persistence import PersistenceAdapter
from atracker.models.types import EntryKind, EntryType
from atracker.models.validation import (
    validate_academic_input,
    validate_achievement_input,
    validate_extracurricular_input,
    validate_other_input,
    validate_volunteer_input,
)
from atracker.models.volunteer import VolunteerEntry

logger = logging.getLogger(__name__)


class Tracker:

    def __init__(self, adapter: PersistenceAdapter):
        self._adapter = adapter
        self._collections: dict[EntryKind, list[Any]] = {
            kind: [] for kind in EntryKind
        }

    # === properties ===

    # --- core data structures ---

    @property
    def academic_entries(self) -> list[AcademicEntry]:
        return self.entries(EntryKind.ACADEMIC)

    @property
    def volunteer_entries(self) -> list[VolunteerEntry]:
        return self.entries(EntryKind.VOLUNTEER)

    @property
    def achievement_entries(self) -> list[AchievementEntry]:
        return self.entries(EntryKind.ACHIEVEMENT)

    @property
    def extracurricular_entries(self) -> list[ExtracurricularEntry]:
        return self.entries(EntryKind.EXTRACURRICULAR)

    @property
    def other_entries(self) -> list[OtherEntry]:
        return self.entries(EntryKind.OTHER)

    # --- aggregates ---

    @property
    def total_volunteer_hours(self) -> int:
        return sum(entry.hours for entry in self._collections[EntryKind.VOLUNTEER])

    # === public classmethods ===

    @classmethod
    def load(cls, adapter: PersistenceAdapter) -> Tracker:
        """
        Reads all five collections from storage and returns a populated `Tracker`.

        Args:
            adapter (PersistenceAdapter): The persistence adapter to read from and later save to.

        Returns:
            A new `Tracker`. Slots that are missing or unreadable load as empty collections.

        Notes:
            - Meant to be called once at process start, before any save.
        """
        tracker = cls(adapter)

        for kind, entries in adapter.load_all().items():
            tracker._collections[kind] = list(entries)

        logger.info(
            "Loaded %s",
            ", ".join(f"{len(v)} {k.value}" for k, v in tracker._collections.items()),
        )

        return tracker

    # === persistence ===

    def save(self) -> Response:
        response = self._adapter.save_all(self._collections)

        if not response.success:
            logger.error("Save failed, in-memory entries kept: %s", response.detail)

        return response

    # === data accessors ===

    def entries(self, kind: EntryKind) -> list[Any]:
        return list(self._collections[kind])

    def get_records(
        self, kind: EntryKind, predicate: Callable[[Any], bool] = lambda x: True
    ) -> list[Any]:
        return [entry for entry in self._collections[kind] if predicate(entry)]

    def entries_for_grade(self, grade: int) -> dict[EntryKind, list[Any]]:
        """
        Collects every graded entry tagged with a given grade level.

        Args:
            grade (int): The grade level to filter by.

        Returns:
            A dictionary keyed by kind. Volunteer entries carry no grades and are never included.
        """
        return {
            kind: self.get_records(kind, lambda x: grade in x.grades)
            for kind in EntryKind
            if kind is not EntryKind.VOLUNTEER
        }

    # === data manipulators ===

    def add_entry(self, entry: EntryType) -> Response:
        """
        Appends an already-validated entry to the end of its collection and saves.

        Args:
            entry (EntryType): The entry to add.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the entry was appended and all collections were saved.
                    - False if the entry type is unrecognized or the save failed.
                - detail (str | None):
                    - On success, a simple confirmation message.
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the entry type is unrecognized.
                    - `ErrorCode.INTERNAL_ERROR` if the save failed.
                - data (dict | None): Payload with the following keys:
                    - "record" (EntryType): The added entry. Present on success, and on a failed save since the entry stays in memory.

        Notes:
            - No deduplication and no sorting; identical entries may be added repeatedly.
        """
        try:
            kind = EntryKind.of(entry)

        except TypeError as e:
            return Response.fail(detail=str(e), error=ErrorCode.INVALID_INPUT)

        self._collections[kind].append(entry)

        save_response = self.save()

        if not save_response.success:
            return Response.fail(
                detail=f"{kind.label} entry added but not saved: {save_response.detail}",
                error=save_response.error,
                data={"record": entry},
            )

        return Response.succeed(
            detail=f"{kind.label} entry saved!",
            data={"record": entry},
        )

    def _validate_and_add(self, validation_response: Response) -> Response:
        if not validation_response.success:
            return validation_response

        return self.add_entry(validation_response.data["record"])

    def add_academic_entry(
        self,
        type: AcademicType | str,
        class_name: str | None,
        score_or_grade: str,
        grades: Iterable[int],
    ) -> Response:
        return self._validate_and_add(
            validate_academic_input(type, class_name, score_or_grade, grades)
        )

    def add_volunteer_entry(
        self,
        activity: str,
        hours: int | str,
        contact_person: str,
        contact_info: str,
        date: datetime.date,
    ) -> Response:
        return self._validate_and_add(
            validate_volunteer_input(
                activity, hours, contact_person, contact_info, date
            )
        )

    def add_achievement_entry(
        self, name: str, type: AchievementType | str, grades: Iterable[int]
    ) -> Response:
        return self._validate_and_add(validate_achievement_input(name, type, grades))

    def add_extracurricular_entry(
        self,
        activity: str,
        type: ExtracurricularType | str,
        grades: Iterable[int],
        special_role: str | None = None,
    ) -> Response:
        return self._validate_and_add(
            validate_extracurricular_input(activity, type, grades, special_role)
        )

    def add_other_entry(
        self, name: str, category: str, grades: Iterable[int]
    ) -> Response:
        return self._validate_and_add(validate_other_input(name, category, grades))

    def remove_entry_at(self, kind: EntryKind, index: int) -> Response:
        """
        Removes the entry at `index` from the collection for `kind` and saves.

        Args:
            kind (EntryKind): The collection to remove from.
            index (int): A position in that collection, 0 <= index < length.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the entry was removed and all collections were saved.
                    - False if the save failed. The entry is still removed from memory.
                - detail (str | None):
                    - On success, a simple confirmation message.
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INTERNAL_ERROR` if the save failed.
                - data (dict | None): Payload with the following keys:
                    - "record" (EntryType): The removed entry.

        Raises:
            IndexError: If `index` is out of range. Negative indices are out of range.
        """
        collection = self._collections[kind]

        if not 0 <= index < len(collection):
            raise IndexError(
                f"{kind.value} index {index} out of range for {len(collection)} entries"
            )

        removed = collection.pop(index)

        save_response = self.save()

        if not save_response.success:
            return Response.fail(
                detail=f"{kind.label} entry removed but not saved: {save_response.detail}",
                error=save_response.error,
                data={"record": removed},
            )

        return Response.succeed(
            detail=f"{kind.label} entry deleted.",
            data={"record": removed},
        )
