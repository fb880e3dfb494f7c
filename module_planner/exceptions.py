"""
Error types raised by the module planner.

Validation findings are NOT errors: they are collected in a ValidationResult.
Exceptions here are reserved for inputs the engine cannot work with at all.
"""


class PlannerError(Exception):
    """Base class for all module planner errors."""


class InvalidFormatError(PlannerError, ValueError):
    """A value does not have the expected textual format (e.g. "2022/2023")."""


class InvalidSemesterError(PlannerError, ValueError):
    """The student's current semester lies outside their candidature."""


class NotFoundError(PlannerError, LookupError):
    """A plan, student or curriculum record could not be found."""


class CurriculumNotFoundError(NotFoundError):
    def __init__(self, name: str):
        super().__init__(f"Curriculum '{name}' not found")
        self.name = name
