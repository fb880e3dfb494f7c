"""
Academic Module Planner Package
===============================

Builds and validates multi-semester academic plans against a degree
curriculum.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           ENGINE LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────┐  ┌────────────────────┐  ┌─────────────────────┐  │
│  │ Semester         │  │ Prerequisite       │  │ Requirement         │  │
│  │ Sequence         │  │ Evaluator          │  │ Satisfaction        │  │
│  │ (plan skeleton)  │  │ (AND/OR trees)     │  │ (credit accounting) │  │
│  └──────────────────┘  └────────────────────┘  └─────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐    │
│  │                      PlanValidator                              │    │
│  │   prerequisites → workload → availability → graduation          │    │
│  └─────────────────────────────────────────────────────────────────┘    │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                 │
│                      TerminalDisplay (only place that prints)           │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                         PlanAdvisor                                     │
│          (Orchestrator - connects engines, data and presentation)       │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

module_planner/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── exceptions.py        # PlannerError hierarchy
├── logging_utils.py     # setup_logging / get_logger
├── advisor.py           # PlanAdvisor orchestrator
│
├── models/              # Data classes and enums
│   ├── module.py        # Module, prerequisite tree (Leaf/And/Or/FreeText)
│   ├── curriculum.py    # Curriculum, components, requirements
│   ├── student.py       # Student, CandidatureType
│   ├── plan.py          # Plan, SemesterPlan, PlannedModule, activities
│   └── validation.py    # ValidationResult, curriculum progress
│
├── data/                # Catalog, parsing and loading
│   ├── catalog.py       # ModuleCatalog
│   ├── parser.py        # JSON -> models
│   └── loader.py        # DataLoader
│
├── engines/
│   ├── semesters.py     # generate_semester_sequence
│   ├── prerequisites.py # is_satisfied (tri-state)
│   ├── requirements.py  # satisfied_credits, level_credits, audit_curriculum
│   └── validator.py     # PlanValidator, validate_plan
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

Engine only (no files, no printing):

    from module_planner import validate_plan

    result = validate_plan(plan, student, curriculum, catalog)
    for issue in result.issues:
        ...

With the data directory and terminal output:

    from module_planner import PlanAdvisor, Student

    advisor = PlanAdvisor()
    student = Student(name="Alex", matriculation_year="2022/2023",
                      major="Industrial & Systems Engineering", current_semester=5)
    plan = advisor.create_plan(student, "Main plan")
    advisor.validate(plan, student)

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import PlanAdvisor

# Model exports (for programmatic use)
from .models import (
    Module,
    SemesterData,
    Leaf,
    And,
    Or,
    FreeText,
    FixedModule,
    ModuleGroup,
    Elective,
    CurriculumComponent,
    Curriculum,
    Student,
    CandidatureType,
    Plan,
    SemesterPlan,
    PlannedModule,
    ModuleStatus,
    SpecialActivity,
    ActivityType,
    ValidationLevel,
    CheckCategory,
    ValidationIssue,
    ValidationResult,
    RequirementProgress,
    ComponentProgress,
    CurriculumProgress,
)

# Engine exports
from .engines import (
    SemesterSlot,
    generate_semester_sequence,
    semester_sequence_for,
    TriState,
    is_satisfied,
    CreditCountingPolicy,
    satisfied_credits,
    level_credits,
    audit_curriculum,
    PlanValidator,
    ValidatorSettings,
    validate_plan,
)

# Data exports
from .data import ModuleCatalog, DataLoader

# UI exports
from .ui import TerminalDisplay

# Errors
from .exceptions import (
    PlannerError,
    InvalidFormatError,
    InvalidSemesterError,
    NotFoundError,
    CurriculumNotFoundError,
)

from .logging_utils import setup_logging

__all__ = [
    # Version
    "__version__",
    # Main entry point
    "PlanAdvisor",
    # Models
    "Module",
    "SemesterData",
    "Leaf",
    "And",
    "Or",
    "FreeText",
    "FixedModule",
    "ModuleGroup",
    "Elective",
    "CurriculumComponent",
    "Curriculum",
    "Student",
    "CandidatureType",
    "Plan",
    "SemesterPlan",
    "PlannedModule",
    "ModuleStatus",
    "SpecialActivity",
    "ActivityType",
    "ValidationLevel",
    "CheckCategory",
    "ValidationIssue",
    "ValidationResult",
    "RequirementProgress",
    "ComponentProgress",
    "CurriculumProgress",
    # Engines
    "SemesterSlot",
    "generate_semester_sequence",
    "semester_sequence_for",
    "TriState",
    "is_satisfied",
    "CreditCountingPolicy",
    "satisfied_credits",
    "level_credits",
    "audit_curriculum",
    "PlanValidator",
    "ValidatorSettings",
    "validate_plan",
    # Data
    "ModuleCatalog",
    "DataLoader",
    # UI
    "TerminalDisplay",
    # Errors
    "PlannerError",
    "InvalidFormatError",
    "InvalidSemesterError",
    "NotFoundError",
    "CurriculumNotFoundError",
    # Logging
    "setup_logging",
]
