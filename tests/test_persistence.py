# tests/test_persistence.py

import datetime
import json
import os

import pytest

from atracker.core.response import ErrorCode
from atracker.core.storage import DirectoryStore, MemoryStore
from atracker.models.extracurricular import ExtracurricularEntry, ExtracurricularType
from atracker.models.persistence import SLOT_NAMES, PersistenceAdapter
from atracker.models.types import EntryKind
from atracker.models.volunteer import VolunteerEntry


def test_load_never_written_slot_is_empty(adapter):
    for kind in EntryKind:
        assert adapter.load(kind) == []


def test_round_trip_preserves_order(adapter, sample_ap_entry, sample_sat_entry):
    entries = [sample_sat_entry, sample_ap_entry, sample_sat_entry]

    assert adapter.save(EntryKind.ACADEMIC, entries).success
    assert adapter.load(EntryKind.ACADEMIC) == entries


def test_round_trip_keeps_absent_optional_fields(adapter):
    entry = ExtracurricularEntry("Chess", ExtracurricularType.CLUB, [10, 9])

    adapter.save(EntryKind.EXTRACURRICULAR, [entry])
    reloaded = adapter.load(EntryKind.EXTRACURRICULAR)[0]

    assert reloaded.special_role is None
    assert reloaded.grades == {9, 10}
    assert reloaded == entry


def test_grade_encoding_is_independent_of_insertion_order(adapter):
    first = ExtracurricularEntry("Chess", ExtracurricularType.CLUB, [9, 10])
    second = ExtracurricularEntry("Chess", ExtracurricularType.CLUB, [10, 9])

    assert adapter.encode([first]) == adapter.encode([second])


def test_dates_round_trip_to_same_day(adapter, sample_volunteer_entry):
    adapter.save(EntryKind.VOLUNTEER, [sample_volunteer_entry])

    assert adapter.load(EntryKind.VOLUNTEER)[0].date == datetime.date(2024, 3, 9)


def test_optional_text_is_omitted_not_empty(memory_store, adapter, sample_sat_entry):
    adapter.save(EntryKind.ACADEMIC, [sample_sat_entry])

    data = json.loads(memory_store.read("academic_entries"))

    assert "class_name" not in data[0]


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        '{"name": "not a list"}',
        '["not an object"]',
        '[{"name": "missing fields"}]',
        '[{"name": "x", "category": "y", "grades": [14]}]',
        pytest.param("[" * 200000, id="deeply-nested"),
    ],
)
def test_corrupt_slot_loads_as_empty(raw):
    adapter = PersistenceAdapter(MemoryStore({"other_entries": raw}))

    assert adapter.load(EntryKind.OTHER) == []


def test_one_bad_record_discards_whole_slot():
    raw = json.dumps(
        [
            {"name": "ok", "category": "fine", "grades": [9]},
            {"name": "", "category": "fine", "grades": [9]},
        ]
    )
    adapter = PersistenceAdapter(MemoryStore({"other_entries": raw}))

    assert adapter.load(EntryKind.OTHER) == []


def test_undecodable_slot_file_loads_as_empty(tmp_path):
    (tmp_path / "other_entries.json").write_bytes(b"\xff\xfe[garbage")

    adapter = PersistenceAdapter(DirectoryStore(str(tmp_path)))

    assert adapter.load(EntryKind.OTHER) == []


def test_corrupt_slot_does_not_affect_other_slots(sample_other_entry):
    store = MemoryStore({"academic_entries": "{{{"})
    adapter = PersistenceAdapter(store)
    adapter.save(EntryKind.OTHER, [sample_other_entry])

    loaded = adapter.load_all()

    assert loaded[EntryKind.ACADEMIC] == []
    assert loaded[EntryKind.OTHER] == [sample_other_entry]


def test_save_all_writes_every_slot(memory_store, adapter, sample_other_entry):
    response = adapter.save_all({EntryKind.OTHER: [sample_other_entry]})

    assert response.success
    assert set(memory_store.slots) == set(SLOT_NAMES.values())
    assert json.loads(memory_store.slots["volunteer_entries"]) == []


def test_save_all_reports_failure(failing_adapter):
    response = failing_adapter.save_all({kind: [] for kind in EntryKind})

    assert not response.success
    assert response.error is ErrorCode.INTERNAL_ERROR
    assert response.data["failed"] == list(EntryKind)


def test_save_overwrites_previous_value(adapter, sample_other_entry):
    adapter.save(EntryKind.OTHER, [sample_other_entry, sample_other_entry])
    adapter.save(EntryKind.OTHER, [sample_other_entry])

    assert adapter.load(EntryKind.OTHER) == [sample_other_entry]


# === directory store ===


def test_directory_store_round_trip(tmp_path, sample_volunteer_entry):
    adapter = PersistenceAdapter(DirectoryStore(str(tmp_path)))
    entries = [
        sample_volunteer_entry,
        VolunteerEntry(
            "Park cleanup", 2, "Lee", "lee@parks.gov", datetime.date(2024, 4, 20)
        ),
    ]

    assert adapter.save(EntryKind.VOLUNTEER, entries).success

    reloaded = PersistenceAdapter(DirectoryStore(str(tmp_path))).load(
        EntryKind.VOLUNTEER
    )

    assert reloaded == entries


def test_directory_store_writes_one_file_per_slot(tmp_path):
    adapter = PersistenceAdapter(DirectoryStore(str(tmp_path)))

    adapter.save_all({kind: [] for kind in EntryKind})

    assert sorted(os.listdir(tmp_path)) == sorted(
        f"{slot}.json" for slot in SLOT_NAMES.values()
    )


def test_directory_store_missing_file_reads_none(tmp_path):
    assert DirectoryStore(str(tmp_path)).read("academic_entries") is None


def test_directory_store_rejects_bad_slot_names(tmp_path):
    with pytest.raises(ValueError):
        DirectoryStore(str(tmp_path)).slot_path("../escape")


def test_directory_store_write_failure_is_reported(tmp_path, sample_other_entry):
    adapter = PersistenceAdapter(DirectoryStore(str(tmp_path / "missing")))

    response = adapter.save(EntryKind.OTHER, [sample_other_entry])

    assert not response.success
    assert response.error is ErrorCode.INTERNAL_ERROR
