"""
Catalog and curriculum parsing.

This module converts raw JSON (as published by the NUSMods module API and as
stored in the curriculum files) into the planner's immutable models.
"""

import json
import re

from ..config import MODULE_CODE_PATTERN
from ..exceptions import InvalidFormatError
from ..logging_utils import get_logger
from ..models import (
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
)

logger = get_logger(__name__)

_MODULE_CODE_RE = re.compile(MODULE_CODE_PATTERN)


def _get(data: dict, *keys, default=None):
    """First present key wins. Lets us accept camelCase and snake_case records."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _get_int(data: dict, *keys) -> int:
    """Integer field of a curriculum record (0 when absent)."""
    value = _get(data, *keys, default=0)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidFormatError(f"Expected an integer for {keys[0]!r}, got {value!r}") from None


# =============================================================================
# PREREQUISITE TREES
# =============================================================================

def parse_prereq_tree(raw):
    """
    Parse a prereqTree value into a PrerequisiteExpression.

    FORMAT (NUSMods):
    -----------------
    "MA1301"                      -> Leaf("MA1301")
    "MA1301:D"                    -> Leaf("MA1301")   (minimum grade dropped)
    {"and": [...]} / {"or": [...]} -> And / Or
    "CS1010%:D"                   -> FreeText         (wildcard, not checkable)
    {"nOf": [2, [...]]}           -> FreeText         (no N-of variant)
    "Completed 80 MCs"            -> FreeText

    Returns None for a missing tree (= no prerequisite).
    """
    if raw is None:
        return None

    if isinstance(raw, str):
        text = raw.strip()
        code = text.split(":", 1)[0].strip()
        if "%" not in code and _MODULE_CODE_RE.match(code):
            return Leaf(code)
        return FreeText(text)

    if isinstance(raw, dict) and len(raw) == 1:
        key, value = next(iter(raw.items()))
        if key.lower() == "and" and isinstance(value, list):
            return And([parse_prereq_tree(child) for child in value])
        if key.lower() == "or" and isinstance(value, list):
            return Or([parse_prereq_tree(child) for child in value])

    # Anything else is kept as text so a human can still read it
    logger.debug("Unrecognised prereqTree node kept as free text: %r", raw)
    return FreeText(json.dumps(raw, sort_keys=True))


# =============================================================================
# MODULES
# =============================================================================

def parse_workload(raw):
    """Workload is a list of weekly hours; some records carry free text instead."""
    if isinstance(raw, (list, tuple)):
        try:
            return tuple(float(h) for h in raw)
        except (TypeError, ValueError):
            return None
    return None


def parse_module(record: dict) -> Module:
    """
    Parse one catalog record.

    Raises:
        InvalidFormatError: The record is not an object or has no module code.
    """
    if not isinstance(record, dict):
        raise InvalidFormatError(f"Module record is not an object: {record!r}")

    code = _get(record, "moduleCode", "module_code", "code")
    if not code or not isinstance(code, str):
        raise InvalidFormatError(f"Module record without a module code: {record!r}")

    raw_semesters = _get(record, "semesterData", "semester_data", default=[])
    if not isinstance(raw_semesters, list):
        raw_semesters = []

    semester_data = []
    for sem in raw_semesters:
        if not isinstance(sem, dict):
            logger.debug("Ignoring semesterData entry of %s: %r", code, sem)
            continue
        try:
            semester = int(sem.get("semester"))
        except (TypeError, ValueError):
            continue
        semester_data.append(SemesterData(
            semester=semester,
            exam_date=_get(sem, "examDate", "exam_date"),
            exam_duration=_get(sem, "examDuration", "exam_duration"),
        ))

    credit = _get(record, "moduleCredit", "module_credit", default="0")
    fulfills = _get(record, "fulfillRequirements", "fulfill_requirements", default=[])
    title = record.get("title")

    return Module(
        code=code,
        title=title if isinstance(title, str) else "",
        module_credit=str(credit) if credit is not None else "0",
        description=record.get("description"),
        department=record.get("department"),
        faculty=record.get("faculty"),
        workload=parse_workload(record.get("workload")),
        prerequisite=record.get("prerequisite"),
        preclusion=record.get("preclusion"),
        corequisite=record.get("corequisite"),
        semester_data=semester_data,
        prereq_tree=parse_prereq_tree(_get(record, "prereqTree", "prereq_tree")),
        fulfill_requirements=fulfills if isinstance(fulfills, list) else [],
    )


# =============================================================================
# CURRICULA
# =============================================================================
# Requirements are accepted in two shapes:
#   {"type": "module_group", "name": ..., ...}        (flat, tagged)
#   {"ModuleGroup": {"name": ..., ...}}               (externally tagged)

_REQUIREMENT_TAGS = {
    "fixed_module": "fixed_module",
    "fixedmodule": "fixed_module",
    "module_group": "module_group",
    "modulegroup": "module_group",
    "elective": "elective",
}


def _requirement_tag(data: dict):
    if "type" in data:
        tag = _REQUIREMENT_TAGS.get(str(data["type"]).lower())
        return tag, data
    if len(data) == 1:
        key, body = next(iter(data.items()))
        tag = _REQUIREMENT_TAGS.get(key.lower())
        if tag and isinstance(body, dict):
            return tag, body
    return None, data


def parse_requirement(data: dict):
    """
    Parse one curriculum requirement.

    Raises:
        InvalidFormatError: Unknown requirement type.
    """
    tag, body = _requirement_tag(data)

    if tag == "fixed_module":
        code = _get(body, "module_code", "code")
        if not code:
            raise InvalidFormatError(f"Fixed module requirement without a module code: {data!r}")
        return FixedModule(
            code=code,
            display_name=_get(body, "name", "display_name", default=""),
            credits=_get_int(body, "units", "credits"),
        )
    if tag == "module_group":
        return ModuleGroup(
            display_name=_get(body, "name", "display_name", default=""),
            min_credits=_get_int(body, "min_units", "min_credits"),
            candidate_codes=_get(body, "possible_modules", "candidate_codes", default=[]),
            description=body.get("description"),
        )
    if tag == "elective":
        return Elective(
            display_name=_get(body, "name", "display_name", default=""),
            min_credits=_get_int(body, "min_units", "min_credits"),
            description=body.get("description") or "",
            level_constraint=body.get("level_constraint"),
            department_constraint=body.get("department_constraint"),
        )
    raise InvalidFormatError(f"Unknown requirement type: {data!r}")


def parse_curriculum(data: dict) -> Curriculum:
    components = []
    for comp in data.get("components", []):
        components.append(CurriculumComponent(
            display_name=_get(comp, "name", "display_name", default=""),
            min_credits=_get_int(comp, "min_units", "min_credits"),
            requirements=[parse_requirement(r) for r in comp.get("requirements", [])],
        ))

    return Curriculum(
        display_name=_get(data, "name", "display_name", default=""),
        total_credits_required=_get_int(data, "total_units_required", "total_credits_required"),
        max_level1000_credits=_get_int(data, "max_level1000_units", "max_level1000_credits"),
        components=components,
        academic_year=data.get("academic_year", ""),
    )
