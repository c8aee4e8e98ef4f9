"""
Audit result data models.

Contains dataclasses for representing the results of transcript, SBC and
degree requirement audits.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class TranscriptSummary:
    """
    GPA and credit totals folded from a transcript.

    gpa is None when no credit-bearing letter grade exists yet - a brand new
    student has "no GPA", not a GPA of zero.
    """
    total_credits_completed: Decimal
    attempted_credits: Decimal
    gpa: Optional[Decimal]


@dataclass
class RequirementCategory:
    """
    Result of tracking a single SBC category.

    Example for WRT:
        code: "WRT"
        completed_courses: [WRT 102]
        in_progress_courses: []
        completed: True
        in_progress: False

    A category can be completed AND in progress at the same time, e.g. when
    a second course carrying the same SBC is on the current schedule.
    """
    code: str
    completed_courses: list = field(default_factory=list)    # CourseSummary
    in_progress_courses: list = field(default_factory=list)  # CourseSummary

    @property
    def completed(self) -> bool:
        return len(self.completed_courses) > 0

    @property
    def in_progress(self) -> bool:
        return len(self.in_progress_courses) > 0


@dataclass
class RequiredCourseStatus:
    """Where one required course stands on the transcript."""
    subject: str
    course_num: str
    min_grade: Optional[str]
    completed: bool
    in_progress: bool
    grade: Optional[str] = None            # Only set when completed

    @property
    def code(self) -> str:
        return f"{self.subject} {self.course_num}"


@dataclass
class SequenceStatus:
    """
    Progress through an ordered course chain.

    next_course is the first course in the chain not yet completed, or None
    when the whole chain is done.
    """
    name: str
    courses: list                          # RequiredCourseStatus, chain order
    next_course: Optional[str]
    is_satisfied: bool


@dataclass
class CreditThresholdStatus:
    description: str
    subject: Optional[str]
    required_credits: Decimal
    completed_credits: Decimal
    is_satisfied: bool


@dataclass
class ProgramRequirementStatus:
    """
    Per-program output of the degree requirement matcher.

    electives holds the catalog's elective constraints untouched; they are
    displayed, not evaluated.
    """
    name: str
    program_type: str
    required_courses: list                 # RequiredCourseStatus
    electives: list = field(default_factory=list)          # dict
    sequences: list = field(default_factory=list)          # SequenceStatus
    credit_thresholds: list = field(default_factory=list)  # CreditThresholdStatus

    @property
    def completed_count(self) -> int:
        return sum(1 for r in self.required_courses if r.completed)

    @property
    def in_progress_count(self) -> int:
        return sum(1 for r in self.required_courses if r.in_progress and not r.completed)
