"""Shared fixtures: a small ISE-style catalog, curriculum, student and plan."""

import pytest

from module_planner.data import ModuleCatalog
from module_planner.models import (
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
    Plan,
    SemesterPlan,
)


def offered(*semesters):
    return [SemesterData(s) for s in semesters]


@pytest.fixture
def catalog():
    return ModuleCatalog([
        Module("MA1301", title="Introductory Mathematics", module_credit="4",
               workload=[4, 1, 0, 0, 5], semester_data=offered(1, 2)),
        Module("MA1511", title="Engineering Calculus", module_credit="2",
               semester_data=offered(1, 2)),
        Module("MA1512", title="Differential Equations for Engineering", module_credit="2",
               semester_data=offered(1, 2)),
        Module("GEA1000", title="Quantitative Reasoning with Data", module_credit="4",
               workload=[0, 2, 0, 3, 5], semester_data=offered(1, 2)),
        Module("IE1111R", title="ISE Principles and Practice I", module_credit="4",
               workload=[2, 1, 0, 3, 4], semester_data=offered(1)),
        Module("IE2100", title="Probability Models with Applications", module_credit="4",
               semester_data=offered(1),
               prereq_tree=Or([Leaf("MA1511"), Leaf("MA1312")])),
        Module("IE2111", title="ISE Principles and Practice II", module_credit="4",
               semester_data=offered(2),
               prereq_tree=And([Leaf("IE1111R"), Leaf("MA1511")])),
        Module("IE2130", title="Quality Engineering I", module_credit="4",
               semester_data=offered(1, 2), prereq_tree=Leaf("IE2100")),
        Module("IE4100", title="BTech Dissertation", module_credit="12",
               semester_data=offered(1, 2), prereq_tree=FreeText("Completed 80 Units")),
        Module("IE4299", title="Special Topics", module_credit="four",
               semester_data=offered(3)),
    ])


@pytest.fixture
def curriculum():
    return Curriculum(
        display_name="Industrial & Systems Engineering",
        total_credits_required=160,
        max_level1000_credits=60,
        components=[
            CurriculumComponent("Common Curriculum", 8, [
                FixedModule("GEA1000", "Quantitative Reasoning with Data", 4),
                ModuleGroup("Engineering Mathematics", 4, ["MA1511", "MA1512"]),
            ]),
            CurriculumComponent("Major Core", 12, [
                FixedModule("IE1111R", "ISE Principles and Practice I", 4),
                FixedModule("IE2111", "ISE Principles and Practice II", 4),
                FixedModule("IE2100", "Probability Models with Applications", 4),
            ]),
            CurriculumComponent("Unrestricted Electives", 0, [
                Elective("Unrestricted Electives", 40, description="Any modules"),
            ]),
        ],
    )


@pytest.fixture
def student():
    return Student(
        name="Alex Tan",
        matriculation_year="2022/2023",
        faculty="College of Design and Engineering",
        major="Industrial & Systems Engineering",
        current_semester=5,
    )


@pytest.fixture
def empty_plan():
    return Plan(
        plan_id="plan-1",
        name="Main plan",
        student_id="Alex Tan",
        semesters=[
            SemesterPlan("2024/2025", 1),
            SemesterPlan("2024/2025", 2),
            SemesterPlan("2025/2026", 1),
            SemesterPlan("2025/2026", 2),
        ],
    )
