# cli/menus/entry_forms.py

"""
Entry forms for the ATracker CLI.

One form per entry kind. Each form collects raw field values, hands them to the matching
`Tracker.add_*_entry()` method, and reports the outcome. Rejected input leaves the tracker
unchanged and offers the user another attempt; accepted input is appended and saved immediately.
"""

import datetime
from typing import Any, Callable, cast

import atracker.cli.menu_helpers as helpers
from atracker.cli.menu_helpers import MenuSignal
from atracker.core.response import ErrorCode, Response
from atracker.models.academic import AcademicType
from atracker.models.achievement import AchievementType
from atracker.models.extracurricular import ExtracurricularType
from atracker.models.tracker import Tracker


def run_form(
    tracker: Tracker,
    form_name: str,
    prompt_fields: Callable[[], dict[str, Any] | None],
    add_fn: Callable[..., Response],
) -> None:
    """
    Shared loop behind every entry form.

    Args:
        tracker (Tracker): The active `Tracker`.
        form_name (str): The heading shown for the form (e.g. "Academic Form").
        prompt_fields (Callable[[], dict[str, Any] | None]): Collects raw field values, or returns None if the user cancels.
        add_fn (Callable[..., Response]): The `Tracker` method that validates, appends, and saves.

    Notes:
        - A save failure still leaves the new entry in memory; the next successful save writes it.
    """
    while True:
        print(f"\n{form_name}")

        fields = prompt_fields()

        if fields is None:
            helpers.returning_to("Main Menu")
            return

        response = add_fn(**fields)

        if response.success:
            print(f"\n{response.detail}")
            return

        helpers.display_response_failure(response)

        if response.error is ErrorCode.INTERNAL_ERROR:
            return

        if not helpers.confirm_action("Would you like to try again?"):
            helpers.returning_to("Main Menu")
            return


# === academic ===


def prompt_academic_fields() -> dict[str, Any] | None:
    academic_type = helpers.prompt_choice_or_cancel(
        AcademicType, "type", lambda x: x.label
    )

    if academic_type is MenuSignal.CANCEL:
        return None
    academic_type = cast(AcademicType, academic_type)

    if academic_type in (AcademicType.AP, AcademicType.DC):
        class_name = helpers.prompt_user_input("Class Name:")
        score_or_grade = helpers.prompt_user_input("Score/Grade:")

    elif academic_type is AcademicType.SAT:
        class_name = ""
        score_or_grade = helpers.prompt_user_input("Score (0-1600):")

    elif academic_type is AcademicType.ACT:
        class_name = ""
        score_or_grade = helpers.prompt_user_input("Score (0-36):")

    else:
        class_name = helpers.prompt_user_input("Category:")
        score_or_grade = helpers.prompt_user_input("Name:")

    grades = helpers.prompt_grades_input_or_cancel()

    if grades is MenuSignal.CANCEL:
        return None

    return {
        "type": academic_type,
        "class_name": class_name,
        "score_or_grade": score_or_grade,
        "grades": grades,
    }


def add_academic_entry(tracker: Tracker) -> None:
    run_form(
        tracker, "Academic Form", prompt_academic_fields, tracker.add_academic_entry
    )


# === volunteer ===


def prompt_volunteer_fields() -> dict[str, Any] | None:
    activity = helpers.prompt_user_input_or_cancel(
        "Activity (leave blank to cancel):"
    )

    if activity is MenuSignal.CANCEL:
        return None

    return {
        "activity": activity,
        "hours": helpers.prompt_user_input("Hours:"),
        "contact_person": helpers.prompt_user_input("Contact Person:"),
        "contact_info": helpers.prompt_user_input("Contact Info:"),
        "date": helpers.prompt_date_input_or_default(datetime.date.today()),
    }


def add_volunteer_entry(tracker: Tracker) -> None:
    run_form(
        tracker, "Volunteer Form", prompt_volunteer_fields, tracker.add_volunteer_entry
    )


# === achievement ===


def prompt_achievement_fields() -> dict[str, Any] | None:
    name = helpers.prompt_user_input_or_cancel("Name (leave blank to cancel):")

    if name is MenuSignal.CANCEL:
        return None

    achievement_type = helpers.prompt_choice_or_cancel(
        AchievementType, "type", lambda x: x.label
    )

    if achievement_type is MenuSignal.CANCEL:
        return None

    grades = helpers.prompt_grades_input_or_cancel()

    if grades is MenuSignal.CANCEL:
        return None

    return {"name": name, "type": achievement_type, "grades": grades}


def add_achievement_entry(tracker: Tracker) -> None:
    run_form(
        tracker,
        "Achievement Form",
        prompt_achievement_fields,
        tracker.add_achievement_entry,
    )


# === extracurricular ===


def prompt_extracurricular_fields() -> dict[str, Any] | None:
    activity = helpers.prompt_user_input_or_cancel(
        "Activity (leave blank to cancel):"
    )

    if activity is MenuSignal.CANCEL:
        return None

    extracurricular_type = helpers.prompt_choice_or_cancel(
        ExtracurricularType, "type", lambda x: x.label
    )

    if extracurricular_type is MenuSignal.CANCEL:
        return None

    grades = helpers.prompt_grades_input_or_cancel()

    if grades is MenuSignal.CANCEL:
        return None

    special_role = None

    if extracurricular_type is ExtracurricularType.OTHER:
        special_role = helpers.prompt_user_input_or_none(
            "Special Role (leave blank for none):"
        )

    return {
        "activity": activity,
        "type": extracurricular_type,
        "grades": grades,
        "special_role": special_role,
    }


def add_extracurricular_entry(tracker: Tracker) -> None:
    run_form(
        tracker,
        "Extracurricular Form",
        prompt_extracurricular_fields,
        tracker.add_extracurricular_entry,
    )


# === other ===


def prompt_other_fields() -> dict[str, Any] | None:
    name = helpers.prompt_user_input_or_cancel("Name (leave blank to cancel):")

    if name is MenuSignal.CANCEL:
        return None

    description = helpers.prompt_user_input("Description:")

    grades = helpers.prompt_grades_input_or_cancel()

    if grades is MenuSignal.CANCEL:
        return None

    return {"name": name, "category": description, "grades": grades}


def add_other_entry(tracker: Tracker) -> None:
    run_form(tracker, "Other Form", prompt_other_fields, tracker.add_other_entry)
