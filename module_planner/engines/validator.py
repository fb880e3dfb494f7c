"""
Plan Validator.

This module runs every plan check and collects the findings into a single
ValidationResult.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import DEFAULT_MAX_SEMESTER_CREDITS, DEFAULT_MAX_WEEKLY_HOURS
from ..logging_utils import get_logger
from ..models import CheckCategory, ModuleStatus, ValidationResult
from .prerequisites import TriState, is_satisfied, missing_modules, describe
from .requirements import CreditCountingPolicy, audit_curriculum

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidatorSettings:
    """
    Tunable validation policy.

    Attributes:
        max_semester_credits: Workload warning threshold per semester
        max_weekly_hours: Workload-hours warning threshold (None = off)
        report_unknown_prerequisites: Emit INFO for prerequisites that cannot
            be decided (free-text trees). Off by default.
        count_pending_as_satisfied: Let PLANNED/CURRENT modules of earlier
            semesters satisfy later prerequisites. Off by default: only
            COMPLETED plan modules (plus completed/exempted) count.
        credit_policy: Double-counting policy for the graduation check
    """
    max_semester_credits: int = DEFAULT_MAX_SEMESTER_CREDITS
    max_weekly_hours: Optional[float] = DEFAULT_MAX_WEEKLY_HOURS
    report_unknown_prerequisites: bool = False
    count_pending_as_satisfied: bool = False
    credit_policy: CreditCountingPolicy = CreditCountingPolicy.PER_REQUIREMENT


class PlanValidator:
    """
    Validates an academic plan against prerequisites, workload, availability
    and graduation requirements.

    ═══════════════════════════════════════════════════════════════════════════
    CHECK ORDER
    ═══════════════════════════════════════════════════════════════════════════

    1. PREREQUISITES  ERROR per module whose prerequisite tree is unsatisfied
                      by the modules satisfied BEFORE its semester
    2. WORKLOAD       WARNING per semester above the credit/hour thresholds,
                      or whose cached total_credits is stale
    3. AVAILABILITY   WARNING per module not offered in its semester
    4. GRADUATION     ERROR per component below its minimum, for a total
                      below the degree requirement, and for too many
                      level-1000 credits

    All four checks always run. The order only affects how findings are
    grouped for display.

    ═══════════════════════════════════════════════════════════════════════════

    The validator holds only the catalog and settings, so one instance can be
    shared between threads.
    """

    def __init__(self, catalog, settings: Optional[ValidatorSettings] = None):
        self.catalog = catalog
        self.settings = settings or ValidatorSettings()

    def validate(self, plan, student, curriculum) -> ValidationResult:
        result = ValidationResult()

        self._check_prerequisites(plan, student, result)
        self._check_workload(plan, result)
        self._check_availability(plan, result)
        self._check_graduation(plan, student, curriculum, result)

        logger.debug(
            "Validated plan %s: %d errors, %d warnings, %d info",
            plan.plan_id, len(result.errors), len(result.warnings), len(result.infos),
        )
        return result

    # -------------------------------------------------------------------------
    # 1. Prerequisites
    # -------------------------------------------------------------------------

    def _check_prerequisites(self, plan, student, result: ValidationResult):
        """
        ORDERING RULE:
        --------------
        A module in semester i may only rely on modules satisfied in
        semesters 0..i-1. Modules in the same semester never satisfy each
        other's prerequisites, so the satisfied set is extended only after
        the whole semester has been checked.
        """
        satisfied = student.satisfied_modules()
        counted_statuses = {ModuleStatus.COMPLETED}
        if self.settings.count_pending_as_satisfied:
            counted_statuses.update({ModuleStatus.PLANNED, ModuleStatus.CURRENT})

        for index, semester in enumerate(plan.semesters):
            for planned in semester.modules:
                module = self.catalog.get(planned.code)
                if module is None:
                    continue
                expression = module.prerequisite_expression
                outcome = is_satisfied(expression, satisfied)

                if outcome == TriState.UNSATISFIED:
                    missing = missing_modules(expression, satisfied)
                    message = f"Prerequisites not met for {planned.code}: requires {describe(expression)}"
                    if missing:
                        message += f" (missing {', '.join(missing)})"
                    result.add_error(message, planned.code, index, CheckCategory.PREREQUISITES)
                elif outcome == TriState.UNKNOWN:
                    logger.debug("Prerequisites of %s cannot be decided: %s",
                                 planned.code, describe(expression))
                    if self.settings.report_unknown_prerequisites:
                        result.add_info(
                            f"Prerequisites for {planned.code} could not be verified: {describe(expression)}",
                            planned.code, index, CheckCategory.PREREQUISITES,
                        )

            for planned in semester.modules:
                if planned.status in counted_statuses:
                    satisfied.add(planned.code)

    # -------------------------------------------------------------------------
    # 2. Workload
    # -------------------------------------------------------------------------

    def _check_workload(self, plan, result: ValidationResult):
        max_credits = self.settings.max_semester_credits
        max_hours = self.settings.max_weekly_hours

        for index, semester in enumerate(plan.semesters):
            credits = semester.compute_credits(self.catalog)

            if credits > max_credits:
                result.add_warning(
                    f"{semester.label} has {credits} credits, above the "
                    f"{max_credits}-credit workload limit",
                    None, index, CheckCategory.WORKLOAD,
                )

            if max_hours is not None:
                hours = 0.0
                for planned in semester.modules:
                    module = self.catalog.get(planned.code)
                    if module is not None:
                        hours += module.weekly_hours
                if hours > max_hours:
                    result.add_warning(
                        f"{semester.label} needs about {hours:g} hours per week, above "
                        f"the {max_hours:g}-hour limit",
                        None, index, CheckCategory.WORKLOAD,
                    )

            if semester.total_credits != credits:
                result.add_warning(
                    f"{semester.label} records {semester.total_credits} credits but its "
                    f"modules and activities add up to {credits}",
                    None, index, CheckCategory.WORKLOAD,
                )

    # -------------------------------------------------------------------------
    # 3. Availability
    # -------------------------------------------------------------------------

    def _check_availability(self, plan, result: ValidationResult):
        """Not offered = WARNING, not ERROR: students may appeal."""
        for index, semester, planned in plan.planned_modules():
            module = self.catalog.get(planned.code)
            if module is None:
                result.add_info(
                    f"{planned.code} is not in the module catalog; availability not checked",
                    planned.code, index, CheckCategory.AVAILABILITY,
                )
                continue

            offered = module.offered_semesters
            if semester.semester_number not in offered:
                message = f"{planned.code} is not offered in Semester {semester.semester_number}"
                if offered:
                    listed = ", ".join(str(s) for s in sorted(offered))
                    message += f" (offered in Semester {listed})"
                result.add_warning(message, planned.code, index, CheckCategory.AVAILABILITY)

    # -------------------------------------------------------------------------
    # 4. Graduation requirements
    # -------------------------------------------------------------------------

    def _check_graduation(self, plan, student, curriculum, result: ValidationResult):
        progress = audit_curriculum(curriculum, plan, student, self.catalog, self.settings.credit_policy)

        for component in progress.components:
            if not component.is_met:
                result.add_error(
                    f"{component.display_name}: {component.satisfied_credits}/"
                    f"{component.min_credits} credits",
                    category=CheckCategory.GRADUATION,
                )

        if not progress.total_met:
            shortfall = progress.total_credits_required - progress.total_credits
            result.add_error(
                f"Total credits {progress.total_credits}/{progress.total_credits_required}: "
                f"need {shortfall} more",
                category=CheckCategory.GRADUATION,
            )

        if not progress.level1000_within_limit:
            excess = progress.level1000_credits - progress.max_level1000_credits
            result.add_error(
                f"Level 1000 credits {progress.level1000_credits} exceed the maximum of "
                f"{progress.max_level1000_credits} by {excess}",
                category=CheckCategory.GRADUATION,
            )


def validate_plan(plan, student, curriculum, catalog,
                  settings: Optional[ValidatorSettings] = None) -> ValidationResult:
    """Validate a plan with a one-off PlanValidator."""
    return PlanValidator(catalog, settings).validate(plan, student, curriculum)
