"""
Validation and audit result data models.

Contains the findings produced by the PlanValidator and the credit
breakdown produced by the requirement calculator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ValidationLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class CheckCategory(Enum):
    """Which validator sub-check produced a finding (also its run order)."""
    PREREQUISITES = "prerequisites"
    WORKLOAD = "workload"
    AVAILABILITY = "availability"
    GRADUATION = "graduation"


@dataclass(frozen=True)
class ValidationIssue:
    level: ValidationLevel
    message: str
    module_code: Optional[str] = None
    semester_index: Optional[int] = None  # position in plan.semesters
    category: Optional[CheckCategory] = None


@dataclass
class ValidationResult:
    """
    Ordered findings for one plan.

    An empty issue list means the plan is clean. It is distinct from
    "validation could not run", which surfaces as an exception instead.
    """
    issues: list = field(default_factory=list)

    def add(self, level: ValidationLevel, message: str, module_code: Optional[str] = None,
            semester_index: Optional[int] = None,
            category: Optional[CheckCategory] = None) -> ValidationIssue:
        issue = ValidationIssue(level, message, module_code, semester_index, category)
        self.issues.append(issue)
        return issue

    def add_error(self, message: str, module_code: Optional[str] = None,
                  semester_index: Optional[int] = None, category: Optional[CheckCategory] = None):
        return self.add(ValidationLevel.ERROR, message, module_code, semester_index, category)

    def add_warning(self, message: str, module_code: Optional[str] = None,
                    semester_index: Optional[int] = None, category: Optional[CheckCategory] = None):
        return self.add(ValidationLevel.WARNING, message, module_code, semester_index, category)

    def add_info(self, message: str, module_code: Optional[str] = None,
                 semester_index: Optional[int] = None, category: Optional[CheckCategory] = None):
        return self.add(ValidationLevel.INFO, message, module_code, semester_index, category)

    @property
    def errors(self) -> list:
        return [i for i in self.issues if i.level == ValidationLevel.ERROR]

    @property
    def warnings(self) -> list:
        return [i for i in self.issues if i.level == ValidationLevel.WARNING]

    @property
    def infos(self) -> list:
        return [i for i in self.issues if i.level == ValidationLevel.INFO]

    @property
    def is_valid(self) -> bool:
        """True when there are no errors (warnings and info are allowed)."""
        return not self.errors

    def by_semester(self) -> dict:
        """Group issues by semester_index (None = plan-wide), keeping order."""
        grouped = {}
        for issue in self.issues:
            grouped.setdefault(issue.semester_index, []).append(issue)
        return grouped

    def for_category(self, category: CheckCategory) -> list:
        return [i for i in self.issues if i.category == category]


@dataclass
class RequirementProgress:
    """
    Credit progress for a single curriculum requirement.

    informational is True for Elective requirements: they always report their
    required credits and are never marked met automatically.
    """
    requirement: object          # FixedModule | ModuleGroup | Elective
    display_name: str
    satisfied_credits: int
    required_credits: int
    matched_codes: list          # module codes that contributed credit
    is_met: bool
    informational: bool = False


@dataclass
class ComponentProgress:
    display_name: str
    satisfied_credits: int
    min_credits: int
    requirements: list           # List of RequirementProgress

    @property
    def is_met(self) -> bool:
        return self.satisfied_credits >= self.min_credits


@dataclass
class CurriculumProgress:
    display_name: str
    components: list             # List of ComponentProgress
    total_credits: int           # credits earned toward the degree overall
    total_credits_required: int
    level1000_credits: int
    max_level1000_credits: int

    @property
    def total_met(self) -> bool:
        return self.total_credits >= self.total_credits_required

    @property
    def level1000_within_limit(self) -> bool:
        return self.level1000_credits <= self.max_level1000_credits

    @property
    def overall_satisfied(self) -> bool:
        return (self.total_met and self.level1000_within_limit
                and all(c.is_met for c in self.components))
