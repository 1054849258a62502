# cli/model_formatters.py

# anything that renders entries or performs Tracker read-only operations
from textwrap import dedent

import atracker.core.formatters as formatters
from atracker.models.academic import CLASS_NAME_REQUIRED, AcademicEntry
from atracker.models.achievement import AchievementEntry
from atracker.models.extracurricular import ExtracurricularEntry
from atracker.models.other import OtherEntry
from atracker.models.tracker import Tracker
from atracker.models.types import EntryKind
from atracker.models.volunteer import VolunteerEntry

# === academic formatters ===


def format_academic_oneline(entry: AcademicEntry) -> str:
    subject = f" {entry.class_name}" if entry.class_name else ""
    return f"{entry.type.label}{subject} | {entry.score_or_grade} | Grades: {formatters.format_grades(entry.grades)}"


def format_academic_multiline(entry: AcademicEntry) -> str:
    lines = [
        f"... Type: {entry.type.value.upper()}",
        f"... Grades: {formatters.format_grades(entry.grades)}",
    ]

    if entry.type in CLASS_NAME_REQUIRED and entry.class_name:
        lines.append(f"... Class Name: {entry.class_name}")

    lines.append(f"... Score/Grade: {entry.score_or_grade}")

    return "\n".join(lines)


# === volunteer formatters ===


def format_volunteer_oneline(entry: VolunteerEntry) -> str:
    return f"{entry.activity:<20} | {entry.hours} hrs | {formatters.format_entry_date(entry.date)}"


def format_volunteer_multiline(entry: VolunteerEntry) -> str:
    return dedent(
        f"""\
        ... Activity: {entry.activity}
        ... Hours: {entry.hours}
        ... Contact Person: {entry.contact_person}
        ... Contact Info: {entry.contact_info}
        ... Date: {formatters.format_entry_date(entry.date)}"""
    )


# === achievement formatters ===


def format_achievement_oneline(entry: AchievementEntry) -> str:
    return f"{entry.name:<20} | {entry.type.label} | Grades: {formatters.format_grades(entry.grades)}"


def format_achievement_multiline(entry: AchievementEntry) -> str:
    return dedent(
        f"""\
        ... Name: {entry.name}
        ... Type: {entry.type.label}
        ... Grades: {formatters.format_grades(entry.grades)}"""
    )


# === extracurricular formatters ===


def format_extracurricular_oneline(entry: ExtracurricularEntry) -> str:
    role = f" ({entry.special_role})" if entry.special_role else ""
    return f"{entry.activity:<20} | {entry.type.label}{role} | Grades: {formatters.format_grades(entry.grades)}"


def format_extracurricular_multiline(entry: ExtracurricularEntry) -> str:
    lines = [
        f"... Activity: {entry.activity}",
        f"... Type: {entry.type.label}",
        f"... Grades: {formatters.format_grades(entry.grades)}",
    ]

    if entry.special_role is not None:
        lines.append(f"... Special Role: {entry.special_role}")

    return "\n".join(lines)


# === other formatters ===


def format_other_oneline(entry: OtherEntry) -> str:
    return f"{entry.name:<20} | {entry.category} | Grades: {formatters.format_grades(entry.grades)}"


def format_other_multiline(entry: OtherEntry) -> str:
    return dedent(
        f"""\
        ... Name: {entry.name}
        ... Category: {entry.category}
        ... Grades: {formatters.format_grades(entry.grades)}"""
    )


# === dispatch ===

ONELINE_FORMATTERS = {
    EntryKind.ACADEMIC: format_academic_oneline,
    EntryKind.VOLUNTEER: format_volunteer_oneline,
    EntryKind.ACHIEVEMENT: format_achievement_oneline,
    EntryKind.EXTRACURRICULAR: format_extracurricular_oneline,
    EntryKind.OTHER: format_other_oneline,
}

MULTILINE_FORMATTERS = {
    EntryKind.ACADEMIC: format_academic_multiline,
    EntryKind.VOLUNTEER: format_volunteer_multiline,
    EntryKind.ACHIEVEMENT: format_achievement_multiline,
    EntryKind.EXTRACURRICULAR: format_extracurricular_multiline,
    EntryKind.OTHER: format_other_multiline,
}


def format_section_title(kind: EntryKind, tracker: Tracker) -> str:
    if kind is EntryKind.VOLUNTEER:
        return f"{kind.label} ({tracker.total_volunteer_hours} hours)"

    return kind.label
