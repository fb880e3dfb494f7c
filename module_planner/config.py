"""
Configuration constants for the module planner.

This module contains all configuration values and constants used throughout
the planning engine. Centralizing these makes it easy to adjust
behavior as faculty policies change.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
CATALOG_FILE = "modules.json"
CURRICULA_FILE = "curricula.json"


# =============================================================================
# CANDIDATURE
# =============================================================================
# Nominal number of regular semesters for each candidature type. Keys are the
# CandidatureType enum values.
#   - Standard honours degree: 4 years
#   - Double honours / double degree / concurrent degree: 5 years
#   - Engineering Scholars Programme: 4 years (accelerated content, same length)

CANDIDATURE_TOTAL_SEMESTERS = {
    "standard": 8,
    "double_honours": 10,
    "double_degree_programme": 10,
    "concurrent_degree": 10,
    "engineering_scholars": 8,
}

SEMESTERS_PER_YEAR = 2

# Regular semesters a module can be offered in. Special terms (3 and 4 in the
# catalog data) are not part of the plan skeleton.
REGULAR_SEMESTERS = frozenset({1, 2})


# =============================================================================
# MODULE CODES AND LEVELS
# =============================================================================

# Level bucketing counts every module as a standard 4-unit module,
# independent of the catalog credit value.
LEVEL_MODULE_CREDITS = 4

# e.g. "IE1111R", "MA1301", "GEA1000", "CS2040S"
MODULE_CODE_PATTERN = r"^[A-Z]{2,4}\d{4}[A-Z]{0,2}$"


# =============================================================================
# WORKLOAD
# =============================================================================

# Units above this in one semester need an overload approval
DEFAULT_MAX_SEMESTER_CREDITS = 23

# Weekly contact + preparation hours (sum of catalog workload figures).
# None disables the hours check.
DEFAULT_MAX_WEEKLY_HOURS = None


# =============================================================================
# DISPLAY
# =============================================================================

# Levels the detailed plan view groups modules under. Anything else is "Other".
DISPLAY_LEVELS = (1000, 2000, 3000, 4000, 5000)

# Title column width of the module list view
MODULE_LIST_TITLE_WIDTH = 28
