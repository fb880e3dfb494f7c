"""Tests for requirement satisfaction and level accounting."""

from module_planner.engines import (
    CreditCountingPolicy,
    satisfied_credits,
    requirement_progress,
    component_progress,
    component_credits,
    level_credits,
    earned_credits,
    audit_curriculum,
)
from module_planner.models import (
    FixedModule,
    ModuleGroup,
    Elective,
    CurriculumComponent,
    ModuleStatus,
    SpecialActivity,
    ActivityType,
)


class TestSatisfiedCredits:

    def test_fixed_module_absent(self, catalog):
        req = FixedModule("GER1000", "Quantitative Reasoning", 4)
        assert satisfied_credits(req, set(), catalog) == 0

    def test_fixed_module_present_uses_requirement_credits(self, catalog):
        req = FixedModule("GER1000", "Quantitative Reasoning", 4)
        # Not in the catalog at all, still credited by the requirement
        assert satisfied_credits(req, {"GER1000"}, catalog) == 4

    def test_module_group_uses_catalog_credits(self, catalog):
        req = ModuleGroup("Mathematics", 4, ["MA1301", "MA1511"])
        assert satisfied_credits(req, {"MA1301"}, catalog) == 4
        assert satisfied_credits(req, {"MA1301", "MA1511"}, catalog) == 6

    def test_module_group_unknown_code_counts_zero(self, catalog):
        req = ModuleGroup("Mathematics", 4, ["XX9999"])
        assert satisfied_credits(req, {"XX9999"}, catalog) == 0

    def test_elective_is_never_credited(self, catalog):
        req = Elective("Unrestricted Electives", 40)
        assert satisfied_credits(req, {"MA1301", "IE2100"}, catalog) == 0


class TestRequirementProgress:

    def test_group_met(self, catalog):
        progress = requirement_progress(ModuleGroup("Mathematics", 4, ["MA1301"]), {"MA1301"}, catalog)
        assert progress.is_met
        assert progress.matched_codes == ["MA1301"]

    def test_group_short(self, catalog):
        progress = requirement_progress(
            ModuleGroup("Engineering Mathematics", 4, ["MA1511", "MA1512"]), {"MA1511"}, catalog
        )
        assert not progress.is_met
        assert progress.satisfied_credits == 2
        assert progress.required_credits == 4

    def test_elective_is_informational(self, catalog):
        progress = requirement_progress(Elective("UE", 40), {"MA1301"}, catalog)
        assert progress.informational
        assert not progress.is_met
        assert progress.required_credits == 40


class TestCountingPolicies:

    def setup_method(self):
        self.component = CurriculumComponent("Overlap", 8, [
            ModuleGroup("First", 4, ["MA1301", "GEA1000"]),
            ModuleGroup("Second", 4, ["MA1301"]),
        ])

    def test_per_requirement_double_counts(self, catalog):
        assert component_credits(self.component, {"MA1301"}, catalog) == 8

    def test_per_component_counts_once(self, catalog):
        progress = component_progress(self.component, {"MA1301"}, catalog,
                                      CreditCountingPolicy.PER_COMPONENT)
        assert progress.satisfied_credits == 4
        assert [r.satisfied_credits for r in progress.requirements] == [4, 0]
        assert not progress.is_met

    def test_per_curriculum_counts_once_across_components(self, catalog, empty_plan, student):
        from module_planner.models import Curriculum

        curriculum = Curriculum("Overlap", 0, 60, components=[
            CurriculumComponent("A", 4, [ModuleGroup("First", 4, ["MA1301"])]),
            CurriculumComponent("B", 4, [ModuleGroup("Second", 4, ["MA1301"])]),
        ])
        empty_plan.add_module(0, "MA1301", catalog)

        shared = audit_curriculum(curriculum, empty_plan, student, catalog,
                                  CreditCountingPolicy.PER_CURRICULUM)
        assert [c.satisfied_credits for c in shared.components] == [4, 0]

        per_component = audit_curriculum(curriculum, empty_plan, student, catalog,
                                         CreditCountingPolicy.PER_COMPONENT)
        assert [c.satisfied_credits for c in per_component.components] == [4, 4]


class TestLevelCredits:

    def test_suffixed_code_counts_as_four(self, catalog, empty_plan):
        empty_plan.add_module(0, "IE1111R", catalog)
        assert level_credits(empty_plan, 1000) == 4

    def test_catalog_credit_value_is_ignored(self, catalog, empty_plan):
        empty_plan.add_module(0, "MA1511", catalog)  # 2 credits in the catalog
        empty_plan.add_module(1, "IE4100", catalog)  # 12 credits in the catalog
        assert level_credits(empty_plan, 1000) == 4
        assert level_credits(empty_plan, 4000) == 4
        assert level_credits(empty_plan, 2000) == 0

    def test_prefix_length_does_not_matter(self, catalog, empty_plan):
        empty_plan.add_module(0, "GEA1000", catalog)
        empty_plan.add_module(0, "MA1301", catalog)
        empty_plan.add_module(1, "IE2100", catalog)
        assert level_credits(empty_plan, 1000) == 8


class TestEarnedCredits:

    def test_failed_modules_and_exemptions_carry_no_credit(self, catalog, empty_plan, student):
        student.completed_modules = {"MA1301"}
        student.exempted_modules = {"GEA1000"}
        student.advanced_placement_credits = 8
        empty_plan.add_module(0, "IE1111R", catalog)
        empty_plan.add_module(0, "IE2100", catalog, status=ModuleStatus.FAILED)
        empty_plan.semesters[1].add_activity(
            SpecialActivity(ActivityType.INDUSTRIAL_ATTACHMENT, "Internship", credits=12)
        )
        # MA1301 (4) + IE1111R (4) + attachment (12) + AP (8)
        assert earned_credits(empty_plan, student, catalog) == 28

    def test_repeated_module_counts_once(self, catalog, empty_plan, student):
        student.completed_modules = {"MA1301"}
        empty_plan.add_module(0, "MA1301", catalog)
        assert earned_credits(empty_plan, student, catalog) == 4


def test_audit_curriculum(catalog, curriculum, empty_plan, student):
    student.exempted_modules = {"GEA1000"}
    empty_plan.add_module(0, "IE1111R", catalog, status=ModuleStatus.COMPLETED)
    empty_plan.add_module(0, "MA1511", catalog, status=ModuleStatus.COMPLETED)
    empty_plan.add_module(1, "IE2111", catalog)

    progress = audit_curriculum(curriculum, empty_plan, student, catalog)

    common, core, electives = progress.components
    # GEA1000 is exempted: the fixed requirement is met without catalog credit
    assert common.satisfied_credits == 6
    assert not common.is_met
    assert core.satisfied_credits == 8
    assert electives.is_met
    assert electives.requirements[0].informational
    assert progress.total_credits == 10
    assert progress.level1000_credits == 8
    assert not progress.overall_satisfied
