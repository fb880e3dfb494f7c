"""
Academic plan data models.

A Plan is an ordered list of SemesterPlans. Insertion order IS chronological
order: the semester skeleton comes from the sequence generator and is never
re-sorted afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ModuleStatus(Enum):
    """
    State of a module within a plan.

    PLANNED: Intended for a future semester
    CURRENT: Being taken this semester
    COMPLETED: Passed; counts toward prerequisites of later semesters
    FAILED: Attempted and not passed
    """
    PLANNED = "planned"
    CURRENT = "current"
    COMPLETED = "completed"
    FAILED = "failed"


class ActivityType(Enum):
    INDUSTRIAL_ATTACHMENT = "industrial_attachment"
    INTERNATIONAL_EXCHANGE = "international_exchange"
    RESEARCH = "research"
    COMMUNITY_SERVICE = "community_service"
    OTHER = "other"


@dataclass
class PlannedModule:
    code: str
    status: ModuleStatus = ModuleStatus.PLANNED
    grade: Optional[str] = None
    s_u_flag: bool = False  # S/U option exercised


@dataclass
class SpecialActivity:
    """
    Non-module activity occupying a semester (e.g. a 6-month internship).

    `label` names the activity when activity_type is OTHER.
    """
    activity_type: ActivityType
    description: str = ""
    credits: Optional[int] = None
    label: Optional[str] = None

    @property
    def display_type(self) -> str:
        if self.activity_type == ActivityType.OTHER and self.label:
            return self.label
        return self.activity_type.value.replace("_", " ").title()


@dataclass
class SemesterPlan:
    """
    One semester of a plan.

    total_credits is a denormalized cache: it must equal the catalog credits of
    all modules plus the credits of all special activities. The editing helpers
    below keep it in step; compute_credits() recomputes it from scratch.
    """
    academic_year: str    # "2024/2025"
    semester_number: int  # 1 or 2
    modules: list = field(default_factory=list)
    total_credits: int = 0
    special_activities: list = field(default_factory=list)

    @property
    def label(self) -> str:
        return f"{self.academic_year} Semester {self.semester_number}"

    @property
    def module_codes(self) -> list:
        return [m.code for m in self.modules]

    def activity_credits(self) -> int:
        return sum(a.credits or 0 for a in self.special_activities)

    def compute_credits(self, catalog) -> int:
        """Recompute the semester credit total from the catalog."""
        return sum(catalog.credit_value(m.code) for m in self.modules) + self.activity_credits()

    def add_module(self, code: str, catalog, status: ModuleStatus = ModuleStatus.PLANNED,
                   grade: Optional[str] = None, s_u_flag: bool = False) -> PlannedModule:
        planned = PlannedModule(code=code, status=status, grade=grade, s_u_flag=s_u_flag)
        self.modules.append(planned)
        self.total_credits += catalog.credit_value(code)
        return planned

    def remove_module(self, code: str, catalog) -> Optional[PlannedModule]:
        """Remove the first module with this code. Returns it, or None if absent."""
        for i, planned in enumerate(self.modules):
            if planned.code == code:
                del self.modules[i]
                self.total_credits = max(0, self.total_credits - catalog.credit_value(code))
                return planned
        return None

    def add_activity(self, activity: SpecialActivity) -> None:
        self.special_activities.append(activity)
        self.total_credits += activity.credits or 0


@dataclass
class Plan:
    """
    A student's multi-semester academic plan.

    Attributes:
        plan_id: Unique identifier (uuid4 string when created by PlanAdvisor)
        student_id: Name of the owning Student
        target_graduation: e.g. "2026/2027 Semester 2"
        semesters: SemesterPlans in chronological order
    """
    plan_id: str
    name: str
    student_id: str
    target_graduation: str = ""
    semesters: list = field(default_factory=list)
    notes: Optional[str] = None

    def total_credits(self) -> int:
        """Sum of the cached semester totals."""
        return sum(s.total_credits for s in self.semesters)

    def all_module_codes(self) -> set:
        return {m.code for s in self.semesters for m in s.modules}

    def planned_modules(self):
        """Yield (semester_index, SemesterPlan, PlannedModule) in plan order."""
        for index, semester in enumerate(self.semesters):
            for planned in semester.modules:
                yield index, semester, planned

    def find_module(self, code: str) -> Optional[int]:
        """Index of the first semester containing `code`, or None."""
        for index, semester in enumerate(self.semesters):
            if code in semester.module_codes:
                return index
        return None

    def add_module(self, semester_index: int, code: str, catalog, **kwargs) -> PlannedModule:
        return self.semesters[semester_index].add_module(code, catalog, **kwargs)

    def remove_module(self, semester_index: int, code: str, catalog) -> Optional[PlannedModule]:
        return self.semesters[semester_index].remove_module(code, catalog)

    def move_module(self, code: str, from_index: int, to_index: int, catalog) -> bool:
        """
        Move a module between semesters, keeping status, grade and S/U flag.

        Returns False (and changes nothing) if the module is not in the
        source semester.
        """
        target = self.semesters[to_index]
        planned = self.semesters[from_index].remove_module(code, catalog)
        if planned is None:
            return False
        target.modules.append(planned)
        target.total_credits += catalog.credit_value(code)
        return True
