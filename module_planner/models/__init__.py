"""
Data models for the module planner.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .module import (
    Module,
    SemesterData,
    Leaf,
    And,
    Or,
    FreeText,
    PrerequisiteExpression,
    parse_credit,
    numeric_part,
    module_level,
)
from .curriculum import (
    FixedModule,
    ModuleGroup,
    Elective,
    Requirement,
    CurriculumComponent,
    Curriculum,
)
from .student import Student, CandidatureType
from .plan import (
    Plan,
    SemesterPlan,
    PlannedModule,
    ModuleStatus,
    SpecialActivity,
    ActivityType,
)
from .validation import (
    ValidationLevel,
    CheckCategory,
    ValidationIssue,
    ValidationResult,
    RequirementProgress,
    ComponentProgress,
    CurriculumProgress,
)

__all__ = [
    # Catalog models
    "Module",
    "SemesterData",
    "Leaf",
    "And",
    "Or",
    "FreeText",
    "PrerequisiteExpression",
    "parse_credit",
    "numeric_part",
    "module_level",
    # Curriculum models
    "FixedModule",
    "ModuleGroup",
    "Elective",
    "Requirement",
    "CurriculumComponent",
    "Curriculum",
    # Student models
    "Student",
    "CandidatureType",
    # Plan models
    "Plan",
    "SemesterPlan",
    "PlannedModule",
    "ModuleStatus",
    "SpecialActivity",
    "ActivityType",
    # Validation results
    "ValidationLevel",
    "CheckCategory",
    "ValidationIssue",
    "ValidationResult",
    "RequirementProgress",
    "ComponentProgress",
    "CurriculumProgress",
]
