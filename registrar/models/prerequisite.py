"""
Prerequisite data models.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PrerequisiteGroup:
    """
    One AND-group of a prerequisite rule.

    The group is satisfied when ANY of its course codes is satisfied
    (OR logic). Example for "C or higher: CSE 114 or CSE 160":
        min_grade: "C"
        course_codes: ("CSE 114", "CSE 160")
    """
    course_codes: tuple
    min_grade: Optional[str] = None

    def describe(self) -> str:
        grade_text = f"{self.min_grade} or higher: " if self.min_grade else ""
        return f"{grade_text}{' or '.join(self.course_codes)}"


@dataclass(frozen=True)
class PrerequisiteResult:
    satisfied: bool
    reason: str = ""
