# cli/main.py

"""
Main Menu for the ATracker CLI.

Loads every entry collection once at start-up, shows the monthly reminder if it fell due since
the previous launch, and dispatches to the entry forms and the View All Entries menu.
"""

import argparse
import logging

import atracker.cli.menu_helpers as helpers
import atracker.core.formatters as formatters
from atracker.cli.menu_helpers import MenuSignal
from atracker.cli.menus import entry_forms, view_menu
from atracker.cli.path_utils import resolve_data_dir
from atracker.core.reminders import check_reminder
from atracker.core.storage import DirectoryStore
from atracker.models.persistence import PersistenceAdapter
from atracker.models.tracker import Tracker

logger = logging.getLogger(__name__)


def run_cli(tracker: Tracker) -> None:
    """
    Top-level loop with dispatch for the Main Menu.

    Args:
        tracker (Tracker): The active `Tracker`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("ATracker")
    options = [
        ("Academic", entry_forms.add_academic_entry),
        ("Volunteer", entry_forms.add_volunteer_entry),
        ("Achievements/Awards", entry_forms.add_achievement_entry),
        ("Extracurriculars", entry_forms.add_extracurricular_entry),
        ("Other", entry_forms.add_other_entry),
        ("View All", view_menu.run),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program(tracker)

        elif callable(menu_response):
            menu_response(tracker)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def exit_program(tracker: Tracker):
    """
    Writes a final save, displays an exit banner, and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - Every mutation already saves; the final save covers a session whose last save failed.
    """
    response = tracker.save()

    if not response.success:
        helpers.display_response_failure(response)

    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Track academics, volunteer hours, achievements, and activities.",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory holding saved entries (default: $ATRACKER_DATA_DIR or ~/Documents/ATracker)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    data_dir = resolve_data_dir(args.data_dir)
    logger.debug("Using data directory %s", data_dir)

    store = DirectoryStore(data_dir)
    tracker = Tracker.load(PersistenceAdapter(store))

    reminder = check_reminder(store)

    if reminder is not None:
        width = max(40, len(reminder) + 4)
        print(f"\n{formatters.format_banner_text(reminder, width=width)}")

    try:
        run_cli(tracker)

    except (KeyboardInterrupt, EOFError):
        print()
        exit_program(tracker)


if __name__ == "__main__":
    main()
