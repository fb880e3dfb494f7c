"""
Curriculum data models.

A curriculum is read-only configuration: a list of components, each holding
an ordered list of requirements. Requirements come in three flavors:

- FixedModule: one specific module (e.g. "Complete GEA1000")
- ModuleGroup: choose modules from a candidate list until min_credits is reached
- Elective: any module matching loose constraints (informational only)
"""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class FixedModule:
    code: str
    display_name: str
    credits: int


@dataclass(frozen=True)
class ModuleGroup:
    display_name: str
    min_credits: int
    candidate_codes: tuple = ()
    description: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "candidate_codes", tuple(self.candidate_codes))


@dataclass(frozen=True)
class Elective:
    """
    Free elective with optional level/department constraints.

    Never auto-fulfilled: judging "any module matching constraint X" needs a
    catalog-wide scan, so the engine only reports the required credits.
    """
    display_name: str
    min_credits: int
    description: str = ""
    level_constraint: Optional[tuple] = None       # e.g. (3000, 4000)
    department_constraint: Optional[tuple] = None  # e.g. ("Mathematics",)

    def __post_init__(self):
        if self.level_constraint is not None:
            object.__setattr__(self, "level_constraint", tuple(self.level_constraint))
        if self.department_constraint is not None:
            object.__setattr__(self, "department_constraint", tuple(self.department_constraint))


Requirement = Union[FixedModule, ModuleGroup, Elective]


@dataclass(frozen=True)
class CurriculumComponent:
    display_name: str
    min_credits: int
    requirements: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "requirements", tuple(self.requirements))


@dataclass(frozen=True)
class Curriculum:
    """
    Degree requirements for one major.

    Example:
        display_name: "Industrial & Systems Engineering"
        total_credits_required: 160
        max_level1000_credits: 60
        components: [Common Curriculum, Major Core, Unrestricted Electives]
    """
    display_name: str
    total_credits_required: int
    max_level1000_credits: int
    components: tuple = field(default_factory=tuple)
    academic_year: str = ""

    def __post_init__(self):
        object.__setattr__(self, "components", tuple(self.components))

    @property
    def requirements(self) -> list:
        """All requirements across components, in curriculum order."""
        return [req for comp in self.components for req in comp.requirements]
