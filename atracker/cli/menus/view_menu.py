# cli/menus/view_menu.py

"""
View All Entries menu for the ATracker CLI.

Displays every collection in one aggregated view, with the running volunteer-hour total in the
Volunteer heading, and lets the user delete an entry. Deletions are saved immediately.
"""

import atracker.cli.menu_helpers as helpers
import atracker.cli.model_formatters as model_formatters
import atracker.core.formatters as formatters
from atracker.cli.menu_helpers import MenuSignal
from atracker.models.tracker import Tracker
from atracker.models.types import EntryKind


def run(tracker: Tracker) -> None:
    """
    Top-level loop with dispatch for the View All Entries menu.

    Args:
        tracker (Tracker): The active `Tracker`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("View All Entries")
    options = [
        ("Show All Entries", view_all_entries),
        ("Show Entries by Grade", view_entries_by_grade),
        ("Delete an Entry", delete_entry),
    ]
    zero_option = "Return to Main Menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(tracker)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Main Menu")


def view_all_entries(tracker: Tracker) -> None:
    for kind in EntryKind:
        title = model_formatters.format_section_title(kind, tracker)
        print(f"\n{formatters.format_section_header(title)}")

        entries = tracker.entries(kind)

        if not entries:
            print("(none)")
            continue

        formatter = model_formatters.MULTILINE_FORMATTERS[kind]

        for entry in entries:
            print(f"\n{formatter(entry)}")


def view_entries_by_grade(tracker: Tracker) -> None:
    grades = helpers.prompt_grades_input_or_cancel()

    if grades is MenuSignal.CANCEL:
        return

    for grade in sorted(grades):
        print(f"\n{formatters.format_banner_text(f'Grade {grade}')}")

        for kind, entries in tracker.entries_for_grade(grade).items():
            if not entries:
                continue

            print(f"\n{kind.label}:")
            helpers.display_results(
                entries, formatter=model_formatters.ONELINE_FORMATTERS[kind]
            )


def delete_entry(tracker: Tracker) -> None:
    """
    Prompts the user to pick a section and an entry within it, then removes that entry.

    Args:
        tracker (Tracker): The active `Tracker`.

    Notes:
        - The index passed to `Tracker.remove_entry_at()` comes from the same collection it is removed from.
        - The deletion is saved immediately; a failed save is reported but the entry stays removed for this session.
    """
    kind = helpers.prompt_choice_or_cancel(EntryKind, "section", lambda x: x.label)

    if kind is MenuSignal.CANCEL:
        helpers.returning_to("View All Entries menu")
        return

    entries = tracker.entries(kind)

    index = helpers.prompt_index_from_list(
        entries, kind.label, model_formatters.ONELINE_FORMATTERS[kind]
    )

    if index is None:
        helpers.returning_to("View All Entries menu")
        return

    print(f"\n{model_formatters.MULTILINE_FORMATTERS[kind](entries[index])}")

    if not helpers.confirm_action("Delete this entry?"):
        print("\nEntry was not deleted.")
        return

    response = tracker.remove_entry_at(kind, index)

    if not response.success:
        helpers.display_response_failure(response)

    else:
        print(f"\n{response.detail}")
