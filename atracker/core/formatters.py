# core/formatters.py

# all pure utilities & date helpers
# must never import from models!

import datetime
from typing import Iterable

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_section_header(title: str) -> str:
    line = "-" * 20
    return f"{line}\n{title}\n{line}"


# === entry field formatters ===


def format_grades(grades: Iterable[int]) -> str:
    return ", ".join(str(grade) for grade in sorted(grades))


def format_entry_date(entry_date: datetime.date) -> str:
    return entry_date.strftime("%m/%d/%Y")


def parse_entry_date(date_str: str) -> datetime.date:
    """
    Parses a date typed as MM/DD/YYYY or YYYY-MM-DD.

    Raises:
        ValueError: If the text matches neither format.
    """
    for pattern in ("%m/%d/%Y", "%Y-%m-%d"):
        try:
            return datetime.datetime.strptime(date_str.strip(), pattern).date()

        except ValueError:
            continue

    raise ValueError(f"Invalid date: {date_str!r}. Use MM/DD/YYYY.")
