# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the ATracker application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input (text, grades, dates, enumerated types)
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

import datetime
from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

import atracker.core.formatters as formatters
from atracker.core.response import Response
from atracker.models.grades import VALID_GRADES

ChoiceType = TypeVar("ChoiceType", bound=Enum)


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    DEFAULT = "DEFAULT"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)

            # retrieves action from tuple
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


# === prompt user input methods ===


# Prompt Helpers
#
# These functions provide a consistent way to handle user input and confirmation prompts.
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_default()` returns `MenuSignal.DEFAULT`.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_default(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.DEFAULT if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


# === structured input methods ===


def parse_grades_input(grades_str: str) -> set[int]:
    """
    Parses a comma or space separated list of grade levels, e.g. "9, 10" or "11 12".

    Raises:
        ValueError: If any token is not one of 9, 10, 11, or 12.
    """
    tokens = grades_str.replace(",", " ").split()
    grades = set()

    for token in tokens:
        grade = int(token)
        if grade not in VALID_GRADES:
            raise ValueError(f"{grade} is not a grade between 9 and 12.")
        grades.add(grade)

    return grades


def prompt_grades_input_or_cancel() -> set[int] | MenuSignal:
    while True:
        grades_input = prompt_user_input_or_cancel(
            "Enter grade(s) this applies to, e.g. 9, 10 (leave blank to cancel):"
        )

        if isinstance(grades_input, MenuSignal):
            return grades_input

        try:
            return parse_grades_input(grades_input)

        except ValueError as e:
            print(f"\n[ERROR] {e} Please try again.")


def prompt_date_input_or_default(default: datetime.date) -> datetime.date:
    while True:
        date_input = prompt_user_input_or_default(
            f"Enter the date as MM/DD/YYYY (leave blank for {formatters.format_entry_date(default)}):"
        )

        if date_input is MenuSignal.DEFAULT:
            return default

        try:
            return formatters.parse_entry_date(str(date_input))

        except ValueError as e:
            print(f"\n[ERROR] {e}")


def prompt_choice_or_cancel(
    choices: Iterable[ChoiceType],
    description: str,
    label: Callable[[ChoiceType], str] = lambda x: x.value,
) -> ChoiceType | MenuSignal:
    """
    Prompts the user to pick one member of an enumeration.

    Args:
        choices (Iterable[ChoiceType]): The enum members on offer, in display order.
        description (str): What is being chosen, used in the prompt (e.g. "type").
        label (Callable[[ChoiceType], str], optional): Display label for each member. Defaults to the member value.

    Returns:
        The selected member, or `MenuSignal.CANCEL` if the user enters 0.
    """
    options = list(choices)

    while True:
        print(f"\nSelect the {description}:")
        display_results(options, True, label)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return MenuSignal.CANCEL

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return options[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


def prompt_index_from_list(
    list_data: list[Any],
    list_description: str,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> int | None:
    """
    Prompts the user to select an item from a list and returns its position.

    Args:
        list_data (list[Any]): The records to choose from, in collection order.
        list_description (str): A short description used in prompts and headings (e.g. "Volunteer").
        formatter (Callable[[Any], str], optional): Function to convert each record to a display string. Defaults to str().

    Returns:
        int: The zero-based index of the selected record within `list_data`.
        None: If the list is empty or the user cancels with "0".

    Notes:
        - Records are displayed in collection order, so the returned index addresses the same collection.
    """
    if not list_data:
        print(f"\nThere are no {list_description} entries.")
        return None

    while True:
        print(f"\n{formatters.format_banner_text(list_description)}")

        display_results(list_data, True, formatter)

        choice = prompt_user_input("Select an entry (0 to cancel):")

        if choice == "0":
            return None

        try:
            index = int(choice) - 1
            if not 0 <= index < len(list_data):
                raise IndexError(index)
            return index

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


# === often used messages ===


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
