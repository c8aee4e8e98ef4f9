"""
Configuration constants for the registrar engine.

This module contains all configuration values and constants used throughout
the progress and eligibility engines. Centralizing these makes it easy to
adjust behavior as registrar policies change.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Quality points per letter grade.
# A+ and A both cap at 4.0; every other step is 0.3 or 0.4 apart.
# This is only the DEFAULT scale - engines take a GradeScale instance so an
# older catalog era can swap its own table in without touching this module.
DEFAULT_GRADE_POINTS = {
    "A+": 4.0, "A": 4.0, "A-": 3.7,
    "B+": 3.3, "B": 3.0, "B-": 2.7,
    "C+": 2.3, "C": 2.0, "C-": 1.7,
    "D+": 1.3, "D": 1.0, "D-": 0.7,
    "F": 0.0,
}

# Pass/fail marks that award credit but never touch GPA
PASS_MARKS = {"P", "CR", "S"}

# Pass/fail marks that award neither credit nor GPA
FAIL_MARKS = {"NP", "NC", "U"}

# Administrative marks: accepted by the records system, treated as neither
# passing nor counted. I = Incomplete, W* = Withdrawn variants,
# IP = In Progress, NR = Not Reported
INDETERMINATE_MARKS = {"I", "W", "WP", "WF", "WU", "IP", "NR", "MG", "DFR"}

# Every mark the records system accepts on a transcript row
RECOGNIZED_MARKS = set(DEFAULT_GRADE_POINTS) | PASS_MARKS | FAIL_MARKS | INDETERMINATE_MARKS


# =============================================================================
# ENROLLMENT STATUS
# =============================================================================

# Statuses that mean "currently taking it, no grade yet"
IN_PROGRESS_STATUSES = {"registered", "enrolled", "waitlisted"}


# =============================================================================
# UNIVERSITY GRADUATION REQUIREMENTS
# =============================================================================

MINIMUM_GRADUATION_CREDITS = 120

# SBC (general education) categories, in display order
UNIVERSITY_SBC_CODES = [
    "ARTS", "GLO", "HUM", "LANG", "QPS", "SBS", "SNW", "TECH", "USA", "WRT",
    "STAS", "EXP+", "HFA+", "SBS+", "STEM+", "CER", "DIV", "ESI", "SPK", "WRTD",
]


# =============================================================================
# CLASS STANDING & REGISTRATION WINDOWS
# =============================================================================

# Minimum earned credits for each standing, checked top-down
CLASS_STANDING_CUTOFFS = [
    ("U4", 85),
    ("U3", 57),
    ("U2", 24),
    ("U1", 0),
]

# Registration priority: earlier in the list registers first
STANDING_PRIORITY = ["U4", "U3", "U2", "U1"]

# Seniors are split into two cohorts around this many earned credits
SENIOR_CREDIT_SPLIT = 100

# Registration schedule rows store "below 100 credits" as threshold 0
BELOW_SPLIT_SENTINEL = 0


def compute_class_standing(credits) -> str:
    """Map earned credits to a class standing code (U1-U4)."""
    for standing, minimum in CLASS_STANDING_CUTOFFS:
        if credits >= minimum:
            return standing
    return "U1"
