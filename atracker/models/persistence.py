# models/persistence.py

"""
The persistence adapter maps each entry collection to a named slot in a key-value store.

Each slot holds a JSON array of field-tagged objects, one per entry, in collection order.
The adapter keeps no copy of the collections it saves or loads; the `Tracker` owns them.

Loading never fails: a slot that was never written, that holds malformed JSON, or that holds
a record failing validation reads back as an empty collection. Saving reports failures through
a `Response` and logs them, leaving in-memory state untouched.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Iterable

from atracker.core.response import ErrorCode, Response
from atracker.core.storage import KeyValueStore
from atracker.models.types import EntryKind

logger = logging.getLogger(__name__)

SLOT_NAMES: dict[EntryKind, str] = {
    EntryKind.ACADEMIC: "academic_entries",
    EntryKind.VOLUNTEER: "volunteer_entries",
    EntryKind.ACHIEVEMENT: "achievement_entries",
    EntryKind.EXTRACURRICULAR: "extracurricular_entries",
    EntryKind.OTHER: "other_entries",
}


class PersistenceAdapter:

    def __init__(self, store: KeyValueStore):
        self._store = store
        self._save_lock = threading.Lock()

    # === encoding ===

    @staticmethod
    def encode(entries: Iterable[Any]) -> str:
        return json.dumps([entry.to_dict() for entry in entries], indent=2)

    @staticmethod
    def decode(kind: EntryKind, raw: str) -> list[Any]:
        """
        Decodes a slot value into an ordered list of entries.

        Args:
            kind (EntryKind): The entry kind the slot holds.
            raw (str): The JSON text read from the slot.

        Returns:
            The decoded entries, in the order they were saved.

        Raises:
            ValueError: If the text is not valid JSON, is not a list of objects, or any record fails validation.
        """
        try:
            data = json.loads(raw)

        except (json.JSONDecodeError, RecursionError) as e:
            raise ValueError(f"Failed to parse JSON data: {e}")

        if not isinstance(data, list):
            raise ValueError(f"Expected {SLOT_NAMES[kind]} to contain a list.")

        entries = []

        for record_dict in data:
            if not isinstance(record_dict, dict):
                raise ValueError(f"Expected a record object, got {record_dict!r}")

            try:
                entries.append(kind.entry_class.from_dict(record_dict))

            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(
                    f"Failed to deserialize {kind.value} entry: {record_dict} - {e}"
                )

        return entries

    # === persistence and import ===

    def save(self, kind: EntryKind, entries: Iterable[Any]) -> Response:
        """
        Serializes one collection and writes it to the slot named for its kind.

        Args:
            kind (EntryKind): The entry kind being saved.
            entries (Iterable[Any]): The full, ordered collection for that kind.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the slot was written.
                    - False for serialization issues or write failures.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INTERNAL_ERROR` on any failure.
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - This intentionally overwrites existing data.
        """
        slot = SLOT_NAMES[kind]

        try:
            self._store.write(slot, self.encode(entries))

        except (TypeError, ValueError) as e:
            logger.error("Could not encode %s: %s", slot, e)
            return Response.fail(
                detail=f"Object not JSON serializable: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        except OSError as e:
            logger.error("Could not write %s: %s", slot, e)
            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(detail=f"Saved {slot}.")

    def load(self, kind: EntryKind) -> list[Any]:
        slot = SLOT_NAMES[kind]

        try:
            raw = self._store.read(slot)

        # UnicodeDecodeError is a ValueError
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, starting empty: %s", slot, e)
            return []

        if raw is None:
            logger.debug("Slot %s has never been written", slot)
            return []

        try:
            return self.decode(kind, raw)

        except ValueError as e:
            logger.warning("Discarding unreadable slot %s: %s", slot, e)
            return []

    def save_all(self, collections: dict[EntryKind, list[Any]]) -> Response:
        """
        Saves all five collections, one slot each, while holding the save lock.

        Args:
            collections (dict[EntryKind, list[Any]]): The collection for every entry kind.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every slot was written.
                    - False if any slot failed.
                - detail (str | None):
                    - On success, "All entries saved."
                    - On failure, the details of each failed slot.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INTERNAL_ERROR` if any slot failed.
                - data (dict | None): Payload with the following keys:
                    - On failure:
                        - "failed" (list[EntryKind]): The kinds whose slots were not written.

        Notes:
            - A failure in one slot does not stop the remaining slots from being written.
        """
        failures: list[tuple[EntryKind, Response]] = []

        with self._save_lock:
            for kind in EntryKind:
                response = self.save(kind, collections.get(kind, []))

                if not response.success:
                    failures.append((kind, response))

        if failures:
            return Response.fail(
                detail="; ".join(str(r.detail) for _, r in failures),
                error=ErrorCode.INTERNAL_ERROR,
                data={"failed": [kind for kind, _ in failures]},
            )

        return Response.succeed(detail="All entries saved.")

    def load_all(self) -> dict[EntryKind, list[Any]]:
        return {kind: self.load(kind) for kind in EntryKind}
