# tests/conftest.py

import datetime

import pytest

from atracker.core.storage import MemoryStore
from atracker.models.academic import AcademicEntry, AcademicType
from atracker.models.achievement import AchievementEntry, AchievementType
from atracker.models.extracurricular import ExtracurricularEntry, ExtracurricularType
from atracker.models.other import OtherEntry
from atracker.models.persistence import PersistenceAdapter
from atracker.models.tracker import Tracker
from atracker.models.volunteer import VolunteerEntry


class FailingStore(MemoryStore):
    def write(self, slot: str, value: str) -> None:
        raise OSError("disk full")


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def adapter(memory_store):
    return PersistenceAdapter(memory_store)


@pytest.fixture
def sample_tracker(adapter):
    return Tracker.load(adapter)


@pytest.fixture
def failing_tracker(failing_adapter):
    return Tracker.load(failing_adapter)


@pytest.fixture
def sample_ap_entry():
    return AcademicEntry(
        type=AcademicType.AP,
        class_name="AP Biology",
        score_or_grade="5",
        grades={11},
    )


@pytest.fixture
def sample_sat_entry():
    return AcademicEntry(type=AcademicType.SAT, score_or_grade="1450", grades={11, 12})


@pytest.fixture
def sample_volunteer_entry():
    return VolunteerEntry(
        activity="Food bank",
        hours=3,
        contact_person="Dana Ruiz",
        contact_info="dana@foodbank.org",
        date=datetime.date(2024, 3, 9),
    )


@pytest.fixture
def sample_achievement_entry():
    return AchievementEntry(
        name="National Merit Semifinalist",
        type=AchievementType.AWARD,
        grades={12},
    )


@pytest.fixture
def sample_extracurricular_entry():
    return ExtracurricularEntry(
        activity="Chess",
        type=ExtracurricularType.CLUB,
        grades={9, 10},
    )


@pytest.fixture
def sample_other_entry():
    return OtherEntry(name="Summer job", category="Lifeguard at city pool", grades={10})


@pytest.fixture
def failing_adapter():
    return PersistenceAdapter(FailingStore())
