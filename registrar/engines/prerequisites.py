"""
Prerequisite Evaluation Engine.

This module parses catalog prerequisite text and checks it against a
student's transcript.
"""

import re
from typing import Optional

from ..models import PrerequisiteGroup, PrerequisiteResult
from .grades import GradeClassifier

COURSE_CODE_RE = re.compile(r"\b([A-Z]{2,4})\s*(\d{3})\b")
MIN_GRADE_RE = re.compile(r"^([A-Z][+-]?)\s+or\s+(higher|better):\s*", re.IGNORECASE)
OR_BETWEEN_RE = re.compile(
    r"\b([A-Z]{2,4}\s*\d{3})\s+or\s+(?!higher|better)([A-Z]{2,4}\s*\d{3})", re.IGNORECASE
)


def parse_course_codes(text: str) -> list:
    """Extract "CSE 114"-style codes, normalized to one space."""
    if not text:
        return []
    return [f"{m.group(1)} {m.group(2)}" for m in COURSE_CODE_RE.finditer(text.upper())]


def parse_prerequisite_groups(text: str) -> list:
    """
    Parse prerequisite text into AND-groups of OR-alternatives.

    Semicolons separate groups that must ALL be met. Within a group, "or"
    between course codes makes them alternatives; codes listed without
    "or" each become their own group. A leading "C or higher:" (or
    "or better:") sets the minimum grade for that group.

    Example:
        "C or higher: CSE 114 or CSE 160; AMS 151"
        -> [PrerequisiteGroup(("CSE 114", "CSE 160"), "C"),
            PrerequisiteGroup(("AMS 151",), None)]
    """
    if not text or not text.strip():
        return []

    groups = []
    for chunk in (c.strip() for c in text.split(";")):
        if not chunk:
            continue
        min_grade = None
        grade_match = MIN_GRADE_RE.match(chunk)
        if grade_match:
            min_grade = grade_match.group(1).upper()
            chunk = chunk[grade_match.end():].strip()

        codes = parse_course_codes(chunk)
        if not codes:
            continue

        if len(codes) == 1 or OR_BETWEEN_RE.search(chunk):
            groups.append(PrerequisiteGroup(tuple(codes), min_grade))
        else:
            for code in codes:
                groups.append(PrerequisiteGroup((code,), min_grade))
    return groups


class PrerequisiteChecker:
    """
    Checks a course's prerequisites against a transcript.

    A course code in a group is met when the transcript has a passing row
    for it that meets the group's minimum grade (pass marks always do), or
    when the code appears in `waived_codes` (an approved prerequisite
    waiver). Text mentioning "permission of department" additionally needs
    department permission.
    """

    def __init__(self, classifier: Optional[GradeClassifier] = None):
        self.classifier = classifier or GradeClassifier()

    def has_completed(self, records: list, course_code: str,
                      min_grade: Optional[str] = None) -> bool:
        subject, _, number = course_code.partition(" ")
        for r in records:
            if r.subject.upper() != subject or r.course_num != number:
                continue
            if r.grade is not None and self.classifier.meets_minimum(r.grade, min_grade):
                return True
        return False

    def check(self, prerequisites_text: str, records: list,
              waived_codes=(), department_permission: bool = False) -> PrerequisiteResult:
        if not prerequisites_text or not prerequisites_text.strip():
            return PrerequisiteResult(satisfied=True)

        if "permission of department" in prerequisites_text.lower() and not department_permission:
            return PrerequisiteResult(False, "Department permission required")

        waived = {str(c).strip().upper() for c in waived_codes}
        for group in parse_prerequisite_groups(prerequisites_text):
            met = any(
                code in waived or self.has_completed(records, code, group.min_grade)
                for code in group.course_codes
            )
            if not met:
                return PrerequisiteResult(False, f"Prerequisite not satisfied: {group.describe()}")

        return PrerequisiteResult(satisfied=True)
