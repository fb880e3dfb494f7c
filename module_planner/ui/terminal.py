"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the module_planner package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import DISPLAY_LEVELS, MODULE_LIST_TITLE_WIDTH
from ..models import (
    ModuleStatus,
    module_level,
    ValidationLevel,
    ValidationResult,
    CurriculumProgress,
    RequirementProgress,
    Plan,
)


class TerminalDisplay:
    """
    Pretty terminal output for plans, validation findings and curriculum
    progress.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Convert the result dataclasses with dataclasses.asdict() instead.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, satisfied: bool) -> str:
        if satisfied:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ MET {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ✗ NOT MET {cls.RESET}"

    @classmethod
    def level_prefix(cls, level: ValidationLevel) -> str:
        if level == ValidationLevel.ERROR:
            return f"{cls.RED}{cls.BOLD}❌ ERROR:{cls.RESET}"
        if level == ValidationLevel.WARNING:
            return f"{cls.YELLOW}{cls.BOLD}⚠️  WARNING:{cls.RESET}"
        return f"{cls.BLUE}{cls.BOLD}ℹ️  INFO:{cls.RESET}"

    # -------------------------------------------------------------------------
    # Plan overview
    # -------------------------------------------------------------------------

    @classmethod
    def print_plan(cls, plan: Plan):
        """Print every semester with its modules and special activities."""
        cls.print_header(f"ACADEMIC PLAN: {plan.name.upper()}")
        print(f"  {cls.BOLD}Student:{cls.RESET} {plan.student_id}")
        if plan.target_graduation:
            print(f"  {cls.BOLD}Target graduation:{cls.RESET} {plan.target_graduation}")
        print(f"  {cls.BOLD}Total credits:{cls.RESET} {plan.total_credits()}")

        for index, semester in enumerate(plan.semesters, 1):
            cls.print_subheader(f"[{index}] {semester.label} ({semester.total_credits} credits)")
            if not semester.modules and not semester.special_activities:
                print(f"  {cls.DIM}(empty){cls.RESET}")
            for planned in semester.modules:
                flags = " S/U" if planned.s_u_flag else ""
                grade = f" {planned.grade}" if planned.grade else ""
                print(f"  • {planned.code:<10} {cls.DIM}{planned.status.value}{grade}{flags}{cls.RESET}")
            for activity in semester.special_activities:
                credits = f" ({activity.credits} credits)" if activity.credits is not None else ""
                print(f"  ★ {activity.display_type}{credits} {cls.DIM}{activity.description}{cls.RESET}")

    @classmethod
    def print_plan_detailed(cls, plan: Plan, catalog):
        """
        Print every semester with its modules grouped by level.

        Titles and credits come from the catalog; modules it does not know are
        shown as "Unknown Module" with "?" credits.
        """
        cls.print_header(f"ACADEMIC PLAN: {plan.name.upper()} (DETAILED)")
        if plan.target_graduation:
            print(f"  {cls.BOLD}Target graduation:{cls.RESET} {plan.target_graduation}")

        for index, semester in enumerate(plan.semesters, 1):
            cls.print_subheader(f"[{index}] {semester.label} ({semester.total_credits} credits)")
            if not semester.modules:
                print(f"  {cls.DIM}No modules planned for this semester{cls.RESET}")

            groups = {level: [] for level in DISPLAY_LEVELS}
            other = []
            for planned in semester.modules:
                level = module_level(planned.code)
                groups.get(level, other).append(planned)

            for level in DISPLAY_LEVELS:
                cls._print_level_group(f"Level {level}", groups[level], catalog)
            cls._print_level_group("Other", other, catalog)

            if semester.special_activities:
                print(f"  {cls.BOLD}Special Activities:{cls.RESET}")
                for activity in semester.special_activities:
                    credits = f" ({activity.credits} credits)" if activity.credits is not None else ""
                    print(f"    • {cls.BOLD}{activity.display_type}{cls.RESET}: {activity.description}{credits}")

    @classmethod
    def _print_level_group(cls, heading: str, modules: list, catalog):
        if not modules:
            return
        print(f"  {cls.BOLD}{heading} Modules:{cls.RESET}")
        for planned in modules:
            module = catalog.get(planned.code)
            title = module.title if module else "Unknown Module"
            credits = module.module_credit if module else "?"
            su = f" {cls.DIM}(S/U option){cls.RESET}" if planned.s_u_flag else ""
            print(f"    • {cls.BOLD}{planned.code}{cls.RESET} - {title} ({credits} credits) "
                  f"{cls.status_label(planned.status)}{su}")

    @classmethod
    def status_label(cls, status: ModuleStatus) -> str:
        if status == ModuleStatus.COMPLETED:
            return f"{cls.GREEN}Completed{cls.RESET}"
        if status == ModuleStatus.CURRENT:
            return f"{cls.BLUE}Current{cls.RESET}"
        if status == ModuleStatus.FAILED:
            return f"{cls.RED}Failed{cls.RESET}"
        return "Planned"

    @classmethod
    def print_module_list(cls, plan: Plan, catalog):
        """Print one row per distinct catalog module in the plan, sorted by code."""
        cls.print_header(f"MODULE LIST: {plan.name.upper()}")
        modules = [catalog.get(code) for code in sorted(plan.all_module_codes())]
        modules = [m for m in modules if m is not None]
        print(f"\n  Total modules: {len(modules)}\n")

        width = MODULE_LIST_TITLE_WIDTH + 2
        print(f"  {cls.BOLD}{'Code':<10} {'Title':<{width}} {'Credits':<8} Department{cls.RESET}")
        print(f"  {'-' * 70}")
        for module in modules:
            title = module.title
            if len(title) > MODULE_LIST_TITLE_WIDTH:
                title = title[:MODULE_LIST_TITLE_WIDTH - 3] + "..."
            print(f"  {module.code:<10} {title:<{width}} {module.module_credit:<8} {module.department or ''}")

    # -------------------------------------------------------------------------
    # Validation findings
    # -------------------------------------------------------------------------

    @classmethod
    def print_validation_result(cls, result: ValidationResult, plan: Plan):
        """
        Print findings grouped as the validator orders them: plan-wide issues
        first, then one block per semester in chronological order.
        """
        cls.print_header(f"VALIDATION: {plan.name.upper()}")

        if not result.issues:
            print(f"\n  {cls.GREEN}{cls.BOLD}✅ No issues found! Your plan is valid.{cls.RESET}")
            return

        print(
            f"\n  Validation complete: {cls.RED}{len(result.errors)} errors{cls.RESET}, "
            f"{cls.YELLOW}{len(result.warnings)} warnings{cls.RESET}, "
            f"{cls.BLUE}{len(result.infos)} info items{cls.RESET}"
        )

        grouped = result.by_semester()

        if None in grouped:
            cls.print_subheader("General Issues")
            for issue in grouped[None]:
                cls._print_issue(issue)

        for index, semester in enumerate(plan.semesters):
            if grouped.get(index):
                cls.print_subheader(f"Issues for {semester.label}")
                for issue in grouped[index]:
                    cls._print_issue(issue)

        print()
        if result.errors:
            print(f"  {cls.RED}{cls.BOLD}This plan has critical issues that need to be resolved.{cls.RESET}")
        elif result.warnings:
            print(f"  {cls.YELLOW}This plan has some potential issues to review.{cls.RESET}")
        else:
            print(f"  {cls.GREEN}This plan is valid but has some informational notes.{cls.RESET}")

    @classmethod
    def _print_issue(cls, issue):
        module_info = f" ({issue.module_code})" if issue.module_code else ""
        print(f"  {cls.level_prefix(issue.level)} {issue.message}{module_info}")

    # -------------------------------------------------------------------------
    # Curriculum progress
    # -------------------------------------------------------------------------

    @classmethod
    def print_curriculum_progress(cls, progress: CurriculumProgress):
        """Print the credit breakdown of each component and requirement."""
        cls.print_header(f"CURRICULUM PROGRESS: {progress.display_name.upper()}")

        print(f"\n  {cls.BOLD}Overall Status:{cls.RESET} {cls.status_badge(progress.overall_satisfied)}")
        print(f"  {cls.BOLD}Total credits:{cls.RESET} "
              f"{progress.total_credits}/{progress.total_credits_required}")
        if progress.total_met:
            print(f"    {cls.GREEN}✓ Unit requirement met{cls.RESET}")
        else:
            need = progress.total_credits_required - progress.total_credits
            print(f"    {cls.RED}✗ Need {need} more units{cls.RESET}")

        print(f"  {cls.BOLD}Level 1000 credits:{cls.RESET} "
              f"{progress.level1000_credits}/{progress.max_level1000_credits} maximum")
        if not progress.level1000_within_limit:
            excess = progress.level1000_credits - progress.max_level1000_credits
            print(f"    {cls.RED}✗ Exceeded Level 1000 limit by {excess} units{cls.RESET}")

        for component in progress.components:
            color = cls.GREEN if component.is_met else cls.RED
            cls.print_subheader(
                f"{component.display_name} "
                f"({color}{component.satisfied_credits}/{component.min_credits}{cls.RESET}{cls.BOLD} units)"
            )
            for req in component.requirements:
                cls._print_requirement(req)

    @classmethod
    def _print_requirement(cls, req: RequirementProgress):
        if req.informational:
            print(f"  {cls.BLUE}ℹ{cls.RESET}  {req.display_name} - Need {req.required_credits} units")
            description = getattr(req.requirement, "description", "")
            if description:
                print(f"     {cls.DIM}{description}{cls.RESET}")
            return

        mark = f"{cls.GREEN}✓{cls.RESET}" if req.is_met else f"{cls.DIM}☐{cls.RESET}"
        print(f"  {mark}  {req.display_name} - {req.satisfied_credits}/{req.required_credits} units")
        if req.matched_codes:
            print(f"     {cls.DIM}Modules: {', '.join(req.matched_codes)}{cls.RESET}")
