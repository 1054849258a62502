# tests/test_cli.py

import os

import pytest

import atracker.cli.menu_helpers as helpers
from atracker.cli.menus import entry_forms, view_menu
from atracker.cli.path_utils import DATA_DIR_ENV_VAR, get_data_dir, resolve_data_dir
from atracker.models.academic import AcademicType
from atracker.models.types import EntryKind


@pytest.fixture
def feed_input(monkeypatch):
    def feed(*answers):
        answers_iter = iter(answers)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers_iter))

    return feed


# === menu helpers ===


@pytest.mark.parametrize("text", ["9, 10", "10 9", "9,10,10"])
def test_parse_grades_input(text):
    assert helpers.parse_grades_input(text) == {9, 10}


@pytest.mark.parametrize("text", ["8", "9, thirteen", "13"])
def test_parse_grades_input_rejects_bad_grades(text):
    with pytest.raises(ValueError):
        helpers.parse_grades_input(text)


def test_prompt_index_from_list_returns_collection_position(feed_input):
    feed_input("5", "2")

    assert helpers.prompt_index_from_list(["a", "b", "c"], "Other") == 1


def test_prompt_index_from_list_empty_list():
    assert helpers.prompt_index_from_list([], "Other") is None


def test_prompt_choice_or_cancel(feed_input):
    feed_input("0")
    choice = helpers.prompt_choice_or_cancel(AcademicType, "type")
    assert choice is helpers.MenuSignal.CANCEL

    feed_input("3")
    assert helpers.prompt_choice_or_cancel(AcademicType, "type") is AcademicType.AP


# === entry forms ===


def test_academic_form_adds_entry(sample_tracker, feed_input):
    feed_input("3", "AP Physics", "5", "11, 12")

    entry_forms.add_academic_entry(sample_tracker)

    entry = sample_tracker.academic_entries[0]
    assert entry.type is AcademicType.AP
    assert entry.class_name == "AP Physics"
    assert entry.grades == {11, 12}


def test_academic_form_rejection_changes_nothing(sample_tracker, feed_input):
    # AP with no class name, then decline to try again
    feed_input("3", "", "4", "11", "n")

    entry_forms.add_academic_entry(sample_tracker)

    assert sample_tracker.academic_entries == []


def test_volunteer_form_retries_after_bad_hours(sample_tracker, feed_input):
    feed_input(
        "Food bank", "zero", "Dana", "dana@foodbank.org", "03/09/2024", "y",
        "Food bank", "3", "Dana", "dana@foodbank.org", "",
    )

    entry_forms.add_volunteer_entry(sample_tracker)

    assert len(sample_tracker.volunteer_entries) == 1
    assert sample_tracker.total_volunteer_hours == 3


def test_extracurricular_form_other_asks_for_role(sample_tracker, feed_input):
    feed_input("Robotics", "3", "11", "Captain")

    entry_forms.add_extracurricular_entry(sample_tracker)

    assert sample_tracker.extracurricular_entries[0].special_role == "Captain"


def test_other_form_cancel(sample_tracker, feed_input):
    feed_input("")

    entry_forms.add_other_entry(sample_tracker)

    assert sample_tracker.other_entries == []


# === view menu ===


def test_delete_entry(sample_tracker, feed_input):
    sample_tracker.add_other_entry("a", "misc", {9})
    sample_tracker.add_other_entry("b", "misc", {9})
    feed_input("5", "2", "y")

    view_menu.delete_entry(sample_tracker)

    assert [e.name for e in sample_tracker.entries(EntryKind.OTHER)] == ["a"]


def test_view_all_entries_prints_sections(
    sample_tracker, sample_volunteer_entry, capsys
):
    sample_tracker.add_entry(sample_volunteer_entry)

    view_menu.view_all_entries(sample_tracker)

    out = capsys.readouterr().out
    assert "Volunteer (3 hours)" in out
    assert "... Date: 03/09/2024" in out


# === path utils ===


def test_data_dir_prefers_user_input(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_DIR_ENV_VAR, "/should/not/be/used")

    assert get_data_dir(str(tmp_path)) == str(tmp_path)


def test_data_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_DIR_ENV_VAR, str(tmp_path / "env"))

    data_dir = resolve_data_dir(None)

    assert data_dir == str(tmp_path / "env")
    assert os.path.isdir(data_dir)


def test_data_dir_default(monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV_VAR, raising=False)

    assert get_data_dir(None).endswith(os.path.join("Documents", "ATracker"))
