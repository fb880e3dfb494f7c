"""
Module catalog data models.

Contains the Module dataclass and the prerequisite expression tree that
describe a single catalog entry. Catalog entries are immutable once loaded.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from ..config import REGULAR_SEMESTERS
from ..logging_utils import get_logger

logger = get_logger(__name__)


# =============================================================================
# PREREQUISITE EXPRESSION TREE
# =============================================================================
# Four closed variants. Every consumer dispatches with isinstance() and raises
# TypeError on anything else.

@dataclass(frozen=True)
class Leaf:
    """A single module that must already be satisfied."""
    module_code: str


@dataclass(frozen=True)
class And:
    """All children must be satisfied."""
    children: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class Or:
    """At least one child must be satisfied."""
    children: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class FreeText:
    """
    A human-readable prerequisite the engine cannot verify mechanically,
    e.g. "Completed 80 MCs or more". Always evaluates to UNKNOWN.
    """
    text: str


PrerequisiteExpression = Union[Leaf, And, Or, FreeText]


# =============================================================================
# MODULE
# =============================================================================

def parse_credit(raw) -> int:
    """
    Parse a textual credit value ("4") into a non-negative integer.

    Anything that is not a plain non-negative integer degrades to 0 so that
    validation can proceed on partial catalog data.
    """
    if raw is None:
        return 0
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw if raw >= 0 else 0
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        logger.debug("Unparseable module credit %r, counting as 0", raw)
        return 0
    return int(text)


def numeric_part(module_code: str) -> str:
    """
    Maximal digit run starting at the first digit of a module code.

    "IE1111R" -> "1111", "GEA1000" -> "1000", "XYZ" -> ""
    """
    start = None
    for i, ch in enumerate(module_code):
        if "0" <= ch <= "9":
            start = i
            break
    if start is None:
        return ""
    end = start
    while end < len(module_code) and "0" <= module_code[end] <= "9":
        end += 1
    return module_code[start:end]


def module_level(module_code: str) -> Optional[int]:
    """Level bucket of a module code: "IE1111R" -> 1000, "XYZ" -> None."""
    digits = numeric_part(module_code)
    if not digits:
        return None
    return int(digits[0]) * 1000


@dataclass(frozen=True)
class SemesterData:
    """One semester in which a module is offered."""
    semester: int
    exam_date: Optional[str] = None
    exam_duration: Optional[int] = None  # minutes


@dataclass(frozen=True)
class Module:
    """
    A single module from the catalog.

    Attributes:
        code: Module code (e.g., "IE2130")
        title: Human-readable module title
        module_credit: Credit value as text, exactly as the catalog publishes it
        workload: Weekly hours [lecture, tutorial, lab, project, preparation]
        prerequisite: Free-text prerequisite as printed in the catalog
        prereq_tree: Machine-readable prerequisite expression (None = no prerequisite)
        semester_data: Semesters in which the module is offered
    """
    code: str
    title: str = ""
    module_credit: str = "0"
    description: Optional[str] = None
    department: Optional[str] = None
    faculty: Optional[str] = None
    workload: Optional[tuple] = None
    prerequisite: Optional[str] = None
    preclusion: Optional[str] = None
    corequisite: Optional[str] = None
    semester_data: tuple = field(default_factory=tuple)
    prereq_tree: Optional[PrerequisiteExpression] = None
    fulfill_requirements: tuple = field(default_factory=tuple)

    def __post_init__(self):
        # Callers (and the JSON parser) hand in lists; store tuples so the
        # record stays hashable and cannot be edited in place.
        object.__setattr__(self, "semester_data", tuple(self.semester_data))
        object.__setattr__(self, "fulfill_requirements", tuple(self.fulfill_requirements))
        if self.workload is not None:
            object.__setattr__(self, "workload", tuple(self.workload))

    @property
    def credit_value(self) -> int:
        return parse_credit(self.module_credit)

    @property
    def offered_semesters(self) -> frozenset:
        return frozenset(
            s.semester for s in self.semester_data if s.semester in REGULAR_SEMESTERS
        )

    @property
    def prerequisite_expression(self) -> Optional[PrerequisiteExpression]:
        return self.prereq_tree

    @property
    def weekly_hours(self) -> float:
        if not self.workload:
            return 0.0
        return float(sum(self.workload))
