"""
Plan Advisor - Main Orchestrator.

This module contains the PlanAdvisor class that connects the
engine layer to the presentation layer.
"""

import uuid
from typing import Optional

from .data import DataLoader
from .engines import (
    PlanValidator,
    ValidatorSettings,
    audit_curriculum,
    semester_sequence_for,
)
from .logging_utils import get_logger
from .models import Plan, SemesterPlan, Student, ValidationResult, CurriculumProgress
from .ui import TerminalDisplay

logger = get_logger(__name__)


class PlanAdvisor:
    """
    Main interface for the module planner.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the engine layer to the presentation layer:

    1. Receives records (student, plan) from the caller
    2. Looks up the catalog and curriculum through the DataLoader
    3. Calls the engines to get results (pure data)
    4. Optionally passes that data to the display

    TO CHANGE THE UI:
    -----------------
    Pass a different display object, or call with show=False and render the
    returned dataclasses yourself.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        advisor = PlanAdvisor()
        plan = advisor.create_plan(student, "Main plan")
        result = advisor.validate(plan, student)
    """

    def __init__(self, loader: Optional[DataLoader] = None,
                 settings: Optional[ValidatorSettings] = None, display=None):
        self.loader = loader or DataLoader()
        self.settings = settings or ValidatorSettings()
        self.display = display or TerminalDisplay()

    def create_plan(self, student: Student, name: str, plan_id: Optional[str] = None) -> Plan:
        """
        Create a plan whose semester skeleton covers the student's remaining
        candidature.

        Raises:
            InvalidFormatError: Malformed matriculation year.
            InvalidSemesterError: current_semester outside the candidature.
        """
        slots = semester_sequence_for(student)
        plan = Plan(
            plan_id=plan_id or str(uuid.uuid4()),
            name=name,
            student_id=student.name,
            semesters=[SemesterPlan(slot.academic_year, slot.semester_number) for slot in slots],
        )
        if slots:
            last = slots[-1]
            plan.target_graduation = f"{last.academic_year} Semester {last.semester_number}"
        logger.info("Created plan %s with %d semesters for %s", plan.plan_id, len(slots), student.name)
        return plan

    def validate(self, plan: Plan, student: Student, show: bool = True) -> ValidationResult:
        """
        Validate a plan against the curriculum of the student's major.

        Raises:
            CurriculumNotFoundError: No curriculum for student.major.
        """
        curriculum = self.loader.require_curriculum(student.major)
        validator = PlanValidator(self.loader.catalog, self.settings)
        result = validator.validate(plan, student, curriculum)
        if show:
            self.display.print_validation_result(result, plan)
        return result

    def curriculum_progress(self, plan: Plan, student: Student, show: bool = True) -> CurriculumProgress:
        """
        Credit breakdown of the plan against the student's curriculum.

        Raises:
            CurriculumNotFoundError: No curriculum for student.major.
        """
        curriculum = self.loader.require_curriculum(student.major)
        progress = audit_curriculum(curriculum, plan, student, self.loader.catalog,
                                    self.settings.credit_policy)
        if show:
            self.display.print_curriculum_progress(progress)
        return progress

    def show_plan(self, plan: Plan, detailed: bool = False):
        """Print the plan. The detailed view groups modules by level using the catalog."""
        if detailed:
            self.display.print_plan_detailed(plan, self.loader.catalog)
        else:
            self.display.print_plan(plan)

    def show_module_list(self, plan: Plan):
        self.display.print_module_list(plan, self.loader.catalog)
