# core/storage.py

"""
Key-value stores that back the persistence adapter.

A store maps slot names to text values and knows nothing about entries.
`DirectoryStore` keeps one `<slot>.json` file per slot on disk; `MemoryStore` keeps
everything in a dictionary and is used as a test double.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from typing import Protocol

logger = logging.getLogger(__name__)

_SLOT_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class KeyValueStore(Protocol):
    def read(self, slot: str) -> str | None:
        """Returns the value held in `slot`, or None if it was never written."""
        ...

    def write(self, slot: str, value: str) -> None:
        """Replaces the value held in `slot`."""
        ...


class MemoryStore:

    def __init__(self, initial: dict[str, str] | None = None):
        self._slots: dict[str, str] = dict(initial or {})

    @property
    def slots(self) -> dict[str, str]:
        return self._slots.copy()

    def read(self, slot: str) -> str | None:
        return self._slots.get(slot)

    def write(self, slot: str, value: str) -> None:
        self._slots[slot] = value


class DirectoryStore:
    """
    File-backed store holding each slot as `<dir_path>/<slot>.json`.

    Writes land in a temporary file in the same directory and are moved into place with
    `os.replace()`, so a reader never observes a partially written slot.

    Notes:
        - The caller is responsible for ensuring that `dir_path` exists and is writable.
    """

    def __init__(self, dir_path: str):
        self._dir_path = dir_path

    def slot_path(self, slot: str) -> str:
        if not _SLOT_PATTERN.fullmatch(slot):
            raise ValueError(f"Invalid slot name: {slot!r}")

        return os.path.join(self._dir_path, f"{slot}.json")

    def read(self, slot: str) -> str | None:
        try:
            with open(self.slot_path(slot), "r", encoding="utf-8") as f:
                return f.read()

        except FileNotFoundError:
            return None

    def write(self, slot: str, value: str) -> None:
        target = self.slot_path(slot)

        fd, temp_path = tempfile.mkstemp(
            prefix=f".{slot}.", suffix=".tmp", dir=self._dir_path
        )

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())

            os.replace(temp_path, target)

        except BaseException:
            # leave the previous slot value untouched
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

        logger.debug("Wrote slot %s to %s", slot, target)
