"""
Requirement Satisfaction Calculator.

This module computes how many credits of a plan count toward each
curriculum requirement, component and the degree as a whole.
"""

from enum import Enum
from typing import Optional

from ..config import LEVEL_MODULE_CREDITS
from ..models import (
    FixedModule,
    ModuleGroup,
    Elective,
    ModuleStatus,
    RequirementProgress,
    ComponentProgress,
    CurriculumProgress,
    numeric_part,
)


class CreditCountingPolicy(Enum):
    """
    Whether one module may count toward several requirements.

    PER_REQUIREMENT: Every requirement looks at the full module set. A module
                     listed in two groups counts for both (observed behaviour
                     of the degree audit, and the default).
    PER_COMPONENT:   Within a component a module counts toward the first
                     requirement (in curriculum order) that uses it.
    PER_CURRICULUM:  As PER_COMPONENT, but across the whole curriculum.
    """
    PER_REQUIREMENT = "per_requirement"
    PER_COMPONENT = "per_component"
    PER_CURRICULUM = "per_curriculum"


# =============================================================================
# SINGLE REQUIREMENT
# =============================================================================

def matched_codes(requirement, plan_module_codes) -> list:
    """Module codes from the plan that a requirement would draw credit from."""
    if isinstance(requirement, FixedModule):
        return [requirement.code] if requirement.code in plan_module_codes else []
    if isinstance(requirement, ModuleGroup):
        matched = []
        for code in requirement.candidate_codes:
            if code in plan_module_codes and code not in matched:
                matched.append(code)
        return matched
    if isinstance(requirement, Elective):
        return []
    raise TypeError(f"Unknown requirement type: {requirement!r}")


def satisfied_credits(requirement, plan_module_codes, catalog) -> int:
    """
    Credits of the plan that satisfy one requirement.

    FixedModule: requirement.credits if the module is present, else 0
    ModuleGroup: catalog credits of every candidate present (unknown codes = 0)
    Elective:    always 0, never fulfilled mechanically
    """
    if isinstance(requirement, FixedModule):
        return requirement.credits if requirement.code in plan_module_codes else 0
    if isinstance(requirement, ModuleGroup):
        return sum(catalog.credit_value(code) for code in matched_codes(requirement, plan_module_codes))
    if isinstance(requirement, Elective):
        return 0
    raise TypeError(f"Unknown requirement type: {requirement!r}")


def required_credits(requirement) -> int:
    if isinstance(requirement, FixedModule):
        return requirement.credits
    if isinstance(requirement, (ModuleGroup, Elective)):
        return requirement.min_credits
    raise TypeError(f"Unknown requirement type: {requirement!r}")


def requirement_progress(requirement, plan_module_codes, catalog) -> RequirementProgress:
    credits = satisfied_credits(requirement, plan_module_codes, catalog)
    needed = required_credits(requirement)
    informational = isinstance(requirement, Elective)

    if isinstance(requirement, FixedModule):
        is_met = requirement.code in plan_module_codes
    elif informational:
        is_met = False
    else:
        is_met = credits >= needed

    return RequirementProgress(
        requirement=requirement,
        display_name=requirement.display_name,
        satisfied_credits=credits,
        required_credits=needed,
        matched_codes=matched_codes(requirement, plan_module_codes),
        is_met=is_met,
        informational=informational,
    )


# =============================================================================
# COMPONENTS AND CURRICULA
# =============================================================================

def component_progress(component, plan_module_codes, catalog,
                       policy: CreditCountingPolicy = CreditCountingPolicy.PER_REQUIREMENT,
                       consumed: Optional[set] = None) -> ComponentProgress:
    """
    Progress for every requirement of a component.

    `consumed` carries modules already credited to earlier requirements.
    It is only used for the exclusive policies and is updated in place, so
    PER_CURRICULUM can thread one set through all components.
    """
    codes = set(plan_module_codes)
    if policy != CreditCountingPolicy.PER_REQUIREMENT and consumed is None:
        consumed = set()

    results = []
    for requirement in component.requirements:
        if policy == CreditCountingPolicy.PER_REQUIREMENT:
            available = codes
        else:
            available = codes - consumed
        progress = requirement_progress(requirement, available, catalog)
        if policy != CreditCountingPolicy.PER_REQUIREMENT:
            consumed.update(progress.matched_codes)
        results.append(progress)

    return ComponentProgress(
        display_name=component.display_name,
        satisfied_credits=sum(r.satisfied_credits for r in results),
        min_credits=component.min_credits,
        requirements=results,
    )


def component_credits(component, plan_module_codes, catalog,
                      policy: CreditCountingPolicy = CreditCountingPolicy.PER_REQUIREMENT) -> int:
    """Sum of satisfied_credits across a component's requirements."""
    return component_progress(component, plan_module_codes, catalog, policy).satisfied_credits


def level_credits(plan, level: int) -> int:
    """
    Credits a plan holds at a module level (1000, 2000, ...).

    Every module counts as LEVEL_MODULE_CREDITS regardless of its catalog
    credit value. Level is read from the leading digit of the code's
    numeric part, so "IE1111R" is level 1000.
    """
    level_digit = str(level // 1000)
    total = 0
    for _, _, planned in plan.planned_modules():
        if numeric_part(planned.code).startswith(level_digit):
            total += LEVEL_MODULE_CREDITS
    return total


def earned_module_codes(plan, student) -> set:
    """
    Modules that count toward graduation: everything in the plan that was
    not failed, plus the student's completed and exempted modules.
    """
    codes = student.satisfied_modules()
    for _, _, planned in plan.planned_modules():
        if planned.status != ModuleStatus.FAILED:
            codes.add(planned.code)
    return codes


def earned_credits(plan, student, catalog) -> int:
    """
    Overall degree credits.

    Catalog credits of each distinct non-failed plan module and each
    completed module, plus special activity credits and advanced placement
    credits. Exempted modules satisfy requirements but carry no credit.
    """
    codes = set(student.completed_modules)
    for _, _, planned in plan.planned_modules():
        if planned.status != ModuleStatus.FAILED:
            codes.add(planned.code)
    total = sum(catalog.credit_value(code) for code in codes)
    total += sum(s.activity_credits() for s in plan.semesters)
    return total + student.advanced_placement_credits


def audit_curriculum(curriculum, plan, student, catalog,
                     policy: CreditCountingPolicy = CreditCountingPolicy.PER_REQUIREMENT) -> CurriculumProgress:
    """
    Full credit breakdown of a plan against a curriculum.

    Returns:
        CurriculumProgress with one ComponentProgress per component (in
        curriculum order), the overall credit total and level-1000 credits.
    """
    codes = earned_module_codes(plan, student)
    shared = set() if policy == CreditCountingPolicy.PER_CURRICULUM else None

    components = []
    for component in curriculum.components:
        components.append(component_progress(component, codes, catalog, policy, shared))

    return CurriculumProgress(
        display_name=curriculum.display_name,
        components=components,
        total_credits=earned_credits(plan, student, catalog),
        total_credits_required=curriculum.total_credits_required,
        level1000_credits=level_credits(plan, 1000),
        max_level1000_credits=curriculum.max_level1000_credits,
    )
