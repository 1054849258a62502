# tests/test_validation.py

import datetime

import pytest

from atracker.core.response import ErrorCode
from atracker.models.academic import AcademicType
from atracker.models.achievement import AchievementType
from atracker.models.extracurricular import ExtracurricularType
from atracker.models.validation import (
    validate_academic_input,
    validate_achievement_input,
    validate_extracurricular_input,
    validate_other_input,
    validate_volunteer_input,
)

# === accepted input keeps field values verbatim ===


def test_valid_academic_input():
    response = validate_academic_input(AcademicType.AP, "AP Chemistry", "4", {11})

    assert response.success
    record = response.data["record"]
    assert record.type is AcademicType.AP
    assert record.class_name == "AP Chemistry"
    assert record.score_or_grade == "4"
    assert record.grades == {11}


def test_valid_academic_input_keeps_whitespace():
    response = validate_academic_input("other", " Debate ", " State finalist", [10])

    assert response.success
    assert response.data["record"].class_name == " Debate "
    assert response.data["record"].score_or_grade == " State finalist"


def test_valid_volunteer_input():
    response = validate_volunteer_input(
        "Library", "4", "Mr. Ode", "ode@library.org", datetime.date(2024, 6, 1)
    )

    assert response.success
    record = response.data["record"]
    assert record.hours == 4
    assert record.date == datetime.date(2024, 6, 1)


def test_valid_achievement_input():
    response = validate_achievement_input(
        "Honor Roll", AchievementType.ACHIEVEMENT, {9, 10}
    )

    assert response.success
    assert response.data["record"].grades == {9, 10}


def test_valid_extracurricular_input_normalizes_empty_role():
    response = validate_extracurricular_input(
        "Track", ExtracurricularType.SPORT, {9}, ""
    )

    assert response.success
    assert response.data["record"].special_role is None


def test_valid_other_input():
    response = validate_other_input("Research", "Lab assistant", {12})

    assert response.success
    assert response.data["record"].category == "Lab assistant"


# === rejected input ===


def test_ap_without_class_name_is_rejected():
    response = validate_academic_input(AcademicType.AP, "", "4", {11})

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED
    assert "record" not in response.data


@pytest.mark.parametrize(
    "args",
    [
        (AcademicType.SAT, None, "", {11}),
        (AcademicType.DC, "", "A", {12}),
        (AcademicType.ACT, None, "30", set()),
    ],
)
def test_invalid_academic_input(args):
    assert validate_academic_input(*args).error is ErrorCode.VALIDATION_FAILED


@pytest.mark.parametrize(
    "args",
    [
        ("", "2", "A", "B"),
        ("Library", "0", "A", "B"),
        ("Library", "abc", "A", "B"),
        ("Library", "2", "", "B"),
        ("Library", "2", "A", ""),
    ],
)
def test_invalid_volunteer_input(args):
    response = validate_volunteer_input(*args, date=datetime.date(2024, 6, 1))

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED


def test_invalid_achievement_input():
    assert not validate_achievement_input("", AchievementType.AWARD, {9}).success
    assert not validate_achievement_input(
        "Award", AchievementType.AWARD, set()
    ).success


def test_invalid_extracurricular_input():
    assert not validate_extracurricular_input("", ExtracurricularType.CLUB, {9}).success
    assert not validate_extracurricular_input(
        "Chess", ExtracurricularType.CLUB, []
    ).success


def test_invalid_other_input():
    assert not validate_other_input("", "x", {9}).success
    assert not validate_other_input("x", "", {9}).success
    assert not validate_other_input("x", "y", set()).success


def test_wrongly_typed_input_reports_invalid_input():
    response = validate_other_input("Research", None, {12})

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT
