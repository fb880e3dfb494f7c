"""Tests for PlanAdvisor and the terminal display."""

import json
import uuid

import pytest

from module_planner import PlanAdvisor, setup_logging
from module_planner.data import DataLoader
from module_planner.engines import ValidatorSettings, CreditCountingPolicy
from module_planner.exceptions import CurriculumNotFoundError, InvalidSemesterError
from module_planner.models import Student, ModuleStatus, SpecialActivity, ActivityType, ValidationResult
from module_planner.ui import TerminalDisplay


@pytest.fixture
def advisor():
    return PlanAdvisor(loader=DataLoader())


@pytest.fixture
def ise_student():
    return Student(
        name="Alex Tan",
        matriculation_year="2022/2023",
        major="Industrial & Systems Engineering",
        completed_modules={"MA1511", "IE1111R"},
        current_semester=5,
    )


class TestCreatePlan:

    def test_skeleton_covers_remaining_candidature(self, advisor, ise_student):
        plan = advisor.create_plan(ise_student, "Main plan")
        assert [s.label for s in plan.semesters] == [
            "2024/2025 Semester 1",
            "2024/2025 Semester 2",
            "2025/2026 Semester 1",
        ]
        assert plan.student_id == "Alex Tan"
        assert plan.target_graduation == "2025/2026 Semester 1"
        assert uuid.UUID(plan.plan_id)

    def test_explicit_plan_id(self, advisor, ise_student):
        assert advisor.create_plan(ise_student, "Main plan", plan_id="p-1").plan_id == "p-1"

    def test_last_semester_has_no_slots(self, advisor, ise_student):
        ise_student.current_semester = 8
        plan = advisor.create_plan(ise_student, "Final")
        assert plan.semesters == []
        assert plan.target_graduation == ""

    def test_invalid_semester(self, advisor, ise_student):
        ise_student.current_semester = 12
        with pytest.raises(InvalidSemesterError):
            advisor.create_plan(ise_student, "Main plan")


class TestValidate:

    def test_prints_findings(self, advisor, ise_student, capsys):
        plan = advisor.create_plan(ise_student, "Main plan")
        plan.add_module(0, "IE2130", advisor.loader.catalog)

        result = advisor.validate(plan, ise_student)

        output = capsys.readouterr().out
        assert "VALIDATION: MAIN PLAN" in output
        assert "General Issues" in output
        assert "Issues for 2024/2025 Semester 1" in output
        assert "Prerequisites not met for IE2130" in output
        assert "critical issues" in output
        assert not result.is_valid

    def test_quiet_mode(self, advisor, ise_student, capsys):
        plan = advisor.create_plan(ise_student, "Main plan")
        advisor.validate(plan, ise_student, show=False)
        assert capsys.readouterr().out == ""

    def test_unknown_major(self, advisor, ise_student):
        ise_student.major = "Mechanical Engineering"
        plan = advisor.create_plan(ise_student, "Main plan")
        with pytest.raises(CurriculumNotFoundError):
            advisor.validate(plan, ise_student)

    def test_settings_are_passed_through(self, ise_student, tmp_path):
        (tmp_path / "modules.json").write_text(json.dumps([
            {"moduleCode": "IE4100", "moduleCredit": "12", "prereqTree": "Completed 80 Units",
             "semesterData": [{"semester": 1}]},
        ]), encoding="utf-8")
        (tmp_path / "curricula.json").write_text(json.dumps([
            {"name": "Industrial & Systems Engineering", "total_units_required": 0,
             "max_level1000_units": 60, "components": []},
        ]), encoding="utf-8")
        advisor = PlanAdvisor(loader=DataLoader(tmp_path),
                              settings=ValidatorSettings(report_unknown_prerequisites=True))
        plan = advisor.create_plan(ise_student, "Main plan")
        plan.add_module(0, "IE4100", advisor.loader.catalog)

        result = advisor.validate(plan, ise_student, show=False)

        assert [i.module_code for i in result.infos] == ["IE4100"]
        assert result.is_valid


class TestCurriculumProgress:

    def test_progress_output(self, advisor, ise_student, capsys):
        plan = advisor.create_plan(ise_student, "Main plan")
        catalog = advisor.loader.catalog
        plan.add_module(0, "IE2100", catalog, status=ModuleStatus.COMPLETED)
        plan.add_module(1, "IE2111", catalog)

        progress = advisor.curriculum_progress(plan, ise_student)

        output = capsys.readouterr().out
        assert "CURRICULUM PROGRESS: INDUSTRIAL & SYSTEMS ENGINEERING" in output
        assert "Need 146 more units" in output
        assert "Unrestricted Electives - Need 40 units" in output
        assert "Modules: IE1111R" in output
        # MA1511 (2) + IE1111R (4) completed, IE2100 and IE2111 planned
        assert progress.total_credits == 14
        assert not progress.overall_satisfied

    def test_policy_from_settings(self, ise_student):
        advisor = PlanAdvisor(loader=DataLoader(),
                              settings=ValidatorSettings(credit_policy=CreditCountingPolicy.PER_CURRICULUM))
        plan = advisor.create_plan(ise_student, "Main plan")
        progress = advisor.curriculum_progress(plan, ise_student, show=False)
        assert [c.display_name for c in progress.components] == [
            "Common Curriculum", "Major Core", "Unrestricted Electives",
        ]


class TestTerminalDisplay:

    def test_clean_result(self, advisor, ise_student, capsys):
        plan = advisor.create_plan(ise_student, "Main plan")
        TerminalDisplay.print_validation_result(ValidationResult(), plan)
        assert "No issues found! Your plan is valid." in capsys.readouterr().out

    def test_warnings_only(self, advisor, ise_student, capsys):
        plan = advisor.create_plan(ise_student, "Main plan")
        result = ValidationResult()
        result.add_warning("IE2111 is not offered in Semester 1", "IE2111", 0)
        TerminalDisplay.print_validation_result(result, plan)
        output = capsys.readouterr().out
        assert "0 errors" in output
        assert "1 warnings" in output
        assert "IE2111 is not offered in Semester 1 (IE2111)" in output
        assert "potential issues to review" in output

    def test_plan_overview(self, advisor, ise_student, capsys):
        plan = advisor.create_plan(ise_student, "Main plan")
        plan.add_module(0, "IE2100", advisor.loader.catalog, grade="A-", s_u_flag=True)
        plan.semesters[1].add_activity(
            SpecialActivity(ActivityType.INDUSTRIAL_ATTACHMENT, "Six-month internship", credits=12)
        )
        advisor.show_plan(plan)
        output = capsys.readouterr().out
        assert "ACADEMIC PLAN: MAIN PLAN" in output
        assert "2025/2026 Semester 1" in output
        assert "A- S/U" in output
        assert "Industrial Attachment (12 credits)" in output
        assert "(empty)" in output

    def test_detailed_view_groups_by_level(self, advisor, ise_student, capsys):
        plan = advisor.create_plan(ise_student, "Main plan")
        catalog = advisor.loader.catalog
        plan.add_module(0, "IE2100", catalog, status=ModuleStatus.COMPLETED)
        plan.add_module(0, "GEA1000", catalog, s_u_flag=True)
        plan.add_module(0, "XX9999", catalog)
        plan.add_module(1, "IE4100", catalog)

        advisor.show_plan(plan, detailed=True)

        output = capsys.readouterr().out
        assert "(DETAILED)" in output
        first, rest = output.split("[2]", 1)
        assert first.index("Level 1000 Modules:") < first.index("Level 2000 Modules:") < first.index("Other Modules:")
        assert "Quantitative Reasoning with Data (4 credits)" in first
        assert "(S/U option)" in first
        assert "Unknown Module (? credits)" in first
        assert "Level 4000 Modules:" in rest
        assert "Level 2000 Modules:" not in rest
        assert "No modules planned for this semester" in rest

    def test_module_list(self, advisor, ise_student, capsys):
        plan = advisor.create_plan(ise_student, "Main plan")
        catalog = advisor.loader.catalog
        plan.add_module(0, "IE1111R", catalog)
        plan.add_module(1, "GEA1000", catalog)
        plan.add_module(1, "XX9999", catalog)

        advisor.show_module_list(plan)

        output = capsys.readouterr().out
        assert "Total modules: 2" in output
        assert output.index("GEA1000") < output.index("IE1111R")
        assert "Industrial & Systems Engi..." in output
        assert "XX9999" not in output

def test_setup_logging_is_idempotent():
    import logging

    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    setup_logging("DEBUG")
    after_first = list(root.handlers)
    setup_logging("WARNING")
    assert list(root.handlers) == after_first
    assert root.level == logging.WARNING
    for handler in after_first:
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
