"""
Student data models.

Contains the Student dataclass and CandidatureType enum that describe
where a student stands in their candidature.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..config import CANDIDATURE_TOTAL_SEMESTERS
from ..exceptions import InvalidSemesterError


class CandidatureType(Enum):
    """
    Degree programme structure, which fixes the nominal candidature length.

    STANDARD: Single honours degree (8 semesters)
    DOUBLE_HONOURS: Two honours majors (10 semesters)
    DOUBLE_DEGREE_PROGRAMME: Two degrees awarded (10 semesters)
    CONCURRENT_DEGREE: Bachelor's + Master's concurrently (10 semesters)
    ENGINEERING_SCHOLARS: Engineering Scholars Programme (8 semesters)
    """
    STANDARD = "standard"
    DOUBLE_HONOURS = "double_honours"
    DOUBLE_DEGREE_PROGRAMME = "double_degree_programme"
    CONCURRENT_DEGREE = "concurrent_degree"
    ENGINEERING_SCHOLARS = "engineering_scholars"

    @property
    def total_semesters(self) -> int:
        return CANDIDATURE_TOTAL_SEMESTERS[self.value]


@dataclass
class Student:
    """
    A student profile.

    Attributes:
        name: Student name (also the student_id plans refer to)
        matriculation_year: Academic year of matriculation, "YYYY/YYYY"
        major: Major name, used as the curriculum lookup key
        completed_modules: Module codes passed before the plan starts
        exempted_modules: Module codes waived (count as satisfied, no grade)
        current_semester: 1-based index; Semester 1 of year 1 is 1
    """
    name: str
    matriculation_year: str
    faculty: str = ""
    major: str = ""
    second_major: Optional[str] = None
    minors: list = field(default_factory=list)
    completed_modules: set = field(default_factory=set)
    exempted_modules: set = field(default_factory=set)
    advanced_placement_credits: int = 0
    current_semester: int = 1
    candidature_type: CandidatureType = CandidatureType.STANDARD

    @property
    def total_semesters(self) -> int:
        return self.candidature_type.total_semesters

    def remaining_semesters(self) -> int:
        """
        Semesters left until the nominal end of candidature.

        Raises:
            InvalidSemesterError: current_semester is below 1 or beyond the
                candidature total. The value is never clamped.
        """
        total = self.total_semesters
        if self.current_semester < 1 or self.current_semester > total:
            raise InvalidSemesterError(
                f"Current semester {self.current_semester} is outside the "
                f"{total}-semester {self.candidature_type.value} candidature"
            )
        return total - self.current_semester

    def satisfied_modules(self) -> set:
        """Modules satisfied before any plan is considered."""
        return set(self.completed_modules) | set(self.exempted_modules)
