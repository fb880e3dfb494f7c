"""
Planning engines.

This package contains the pure-logic engines: semester sequencing,
prerequisite evaluation, requirement satisfaction and plan validation.
"""

from .semesters import SemesterSlot, generate_semester_sequence, semester_sequence_for, parse_academic_year
from .prerequisites import TriState, is_satisfied, missing_modules, describe
from .requirements import (
    CreditCountingPolicy,
    satisfied_credits,
    requirement_progress,
    component_progress,
    component_credits,
    level_credits,
    earned_credits,
    audit_curriculum,
)
from .validator import PlanValidator, ValidatorSettings, validate_plan

__all__ = [
    # Semester sequence
    "SemesterSlot",
    "generate_semester_sequence",
    "semester_sequence_for",
    "parse_academic_year",
    # Prerequisites
    "TriState",
    "is_satisfied",
    "missing_modules",
    "describe",
    # Requirements
    "CreditCountingPolicy",
    "satisfied_credits",
    "requirement_progress",
    "component_progress",
    "component_credits",
    "level_credits",
    "earned_credits",
    "audit_curriculum",
    # Validation
    "PlanValidator",
    "ValidatorSettings",
    "validate_plan",
]
