"""
Prerequisite Evaluator.

This module evaluates AND/OR prerequisite trees against the set of modules a
student has satisfied so far.
"""

from enum import Enum
from typing import Optional

from ..models import Leaf, And, Or, FreeText, PrerequisiteExpression


class TriState(Enum):
    """
    Three-valued prerequisite outcome.

    UNKNOWN means the data cannot decide (free-text prerequisites such as
    "80 MCs completed"). It is never treated as a failure.
    """
    SATISFIED = "satisfied"
    UNSATISFIED = "unsatisfied"
    UNKNOWN = "unknown"


def is_satisfied(expression: Optional[PrerequisiteExpression], satisfied_set) -> TriState:
    """
    Evaluate a prerequisite expression.

    LOGIC:
    ------
    None          -> SATISFIED (module has no prerequisite)
    Leaf(code)    -> SATISFIED iff code in satisfied_set
    And(children) -> UNSATISFIED on the first unsatisfied child, SATISFIED if
                     every child is satisfied, otherwise UNKNOWN.
                     And([]) is vacuously SATISFIED.
    Or(children)  -> SATISFIED on the first satisfied child, UNSATISFIED if
                     every child is unsatisfied, otherwise UNKNOWN.
                     Or([]) is vacuously UNSATISFIED.
    FreeText      -> UNKNOWN
    """
    if expression is None:
        return TriState.SATISFIED

    if isinstance(expression, Leaf):
        if expression.module_code in satisfied_set:
            return TriState.SATISFIED
        return TriState.UNSATISFIED

    if isinstance(expression, And):
        seen_unknown = False
        for child in expression.children:
            outcome = is_satisfied(child, satisfied_set)
            if outcome == TriState.UNSATISFIED:
                return TriState.UNSATISFIED
            if outcome == TriState.UNKNOWN:
                seen_unknown = True
        return TriState.UNKNOWN if seen_unknown else TriState.SATISFIED

    if isinstance(expression, Or):
        seen_unknown = False
        for child in expression.children:
            outcome = is_satisfied(child, satisfied_set)
            if outcome == TriState.SATISFIED:
                return TriState.SATISFIED
            if outcome == TriState.UNKNOWN:
                seen_unknown = True
        return TriState.UNKNOWN if seen_unknown else TriState.UNSATISFIED

    if isinstance(expression, FreeText):
        return TriState.UNKNOWN

    raise TypeError(f"Unknown prerequisite expression: {expression!r}")


def missing_modules(expression: Optional[PrerequisiteExpression], satisfied_set) -> list:
    """
    Leaf codes that are not yet satisfied, in tree order, without duplicates.

    Only branches that are themselves unsatisfied contribute: an Or that is
    already satisfied through one child reports nothing.
    """
    missing = []

    def walk(node):
        if is_satisfied(node, satisfied_set) != TriState.UNSATISFIED:
            return
        if isinstance(node, Leaf):
            if node.module_code not in missing:
                missing.append(node.module_code)
        elif isinstance(node, (And, Or)):
            for child in node.children:
                walk(child)

    walk(expression)
    return missing


def describe(expression: Optional[PrerequisiteExpression]) -> str:
    """
    Render an expression for humans.

    And(MA1301, Or(IE1111R, IE1113)) -> "MA1301 and (IE1111R or IE1113)"
    """
    if expression is None:
        return "none"
    if isinstance(expression, Leaf):
        return expression.module_code
    if isinstance(expression, FreeText):
        return expression.text
    if isinstance(expression, (And, Or)):
        joiner = " and " if isinstance(expression, And) else " or "
        parts = []
        for child in expression.children:
            text = describe(child)
            if isinstance(child, (And, Or)) and len(child.children) > 1:
                text = f"({text})"
            parts.append(text)
        return joiner.join(parts)
    raise TypeError(f"Unknown prerequisite expression: {expression!r}")

