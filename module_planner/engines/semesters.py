"""
Semester Sequence Generator.

This module produces the chronological skeleton of a plan: the
(academic year, semester) pairs a student has left in their candidature.
"""

from typing import NamedTuple

from ..config import SEMESTERS_PER_YEAR
from ..exceptions import InvalidFormatError, InvalidSemesterError
from ..models import Student


class SemesterSlot(NamedTuple):
    academic_year: str    # "2024/2025"
    semester_number: int  # 1 or 2


def parse_academic_year(academic_year: str) -> tuple:
    """
    Split "YYYY/YYYY" into its two integer years.

    Raises:
        InvalidFormatError: Not exactly two '/'-separated integer parts.
    """
    parts = academic_year.split("/") if isinstance(academic_year, str) else []
    if len(parts) != 2 or not all(p.strip().isascii() and p.strip().isdigit() for p in parts):
        raise InvalidFormatError(f"Invalid academic year format: {academic_year!r} (expected YYYY/YYYY)")
    return int(parts[0]), int(parts[1])


def generate_semester_sequence(matriculation_year: str, current_semester: int,
                               remaining_semesters: int) -> list:
    """
    Generate the remaining semesters, starting with the current one.

    ALGORITHM:
    ----------
    current_semester is 1-based over the whole candidature (Semester 1 of
    year 1 is index 1, Semester 2 of year 3 is index 6). From it:
        year offset      = (current_semester - 1) // 2
        semester in year = (current_semester - 1) % 2 + 1
    Then step forward remaining_semesters times: 1 -> 2 in the same year,
    2 -> 1 in the next year.

    Example:
        generate_semester_sequence("2022/2023", 5, 3)
        -> [("2024/2025", 1), ("2024/2025", 2), ("2025/2026", 1)]

    Raises:
        InvalidFormatError: matriculation_year is not "YYYY/YYYY".
        InvalidSemesterError: current_semester < 1 or remaining_semesters < 0.
    """
    start_year, _ = parse_academic_year(matriculation_year)

    if current_semester < 1:
        raise InvalidSemesterError(f"Current semester must be 1 or later, got {current_semester}")
    if remaining_semesters < 0:
        raise InvalidSemesterError(f"Remaining semesters cannot be negative, got {remaining_semesters}")

    year = start_year + (current_semester - 1) // SEMESTERS_PER_YEAR
    semester = (current_semester - 1) % SEMESTERS_PER_YEAR + 1

    sequence = []
    for _ in range(remaining_semesters):
        sequence.append(SemesterSlot(f"{year}/{year + 1}", semester))
        if semester == SEMESTERS_PER_YEAR:
            semester = 1
            year += 1
        else:
            semester += 1
    return sequence


def semester_sequence_for(student: Student) -> list:
    """Semester sequence for a student's remaining candidature."""
    return generate_semester_sequence(
        student.matriculation_year,
        student.current_semester,
        student.remaining_semesters(),
    )
