"""
Course data models.

Contains the EnrollmentRecord dataclass that represents one row of a
student's academic record, and the small CourseSummary used in reports.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class EnrollmentRecord:
    """
    Represents a single enrollment from the student's transcript.

    This is the core data unit that flows through the system. Records are
    immutable snapshots of what the records system returned for a query;
    the engines only ever read them.

    Attributes:
        subject: Subject prefix (e.g., "CSE")
        course_num: Course number AS A STRING so "101H" survives intact
        title: Human-readable course title
        credits: Credits carried by the enrollment (Decimal, >= 0)
        grade: Normalized mark (e.g., "B+", "P") or None if not graded yet
        status: Lower-cased enrollment status ("registered", "completed", ...)
        sbc: Free-text SBC designation from the catalog
             (e.g., "partially fulfills: WRT, SPK")
        term: Term label (e.g., "Fall 2025"), informational only
    """
    subject: str
    course_num: str
    title: str
    credits: Decimal
    grade: Optional[str]
    status: str
    sbc: str = ""
    term: str = ""

    @property
    def code(self) -> str:
        """Display code, e.g. "CSE 214"."""
        return f"{self.subject} {self.course_num}"


@dataclass(frozen=True)
class CourseSummary:
    """
    Compact view of a course used inside category and requirement results.
    """
    subject: str
    course_num: str
    title: str
    credits: Decimal
    grade: Optional[str] = None

    @classmethod
    def from_record(cls, record: EnrollmentRecord) -> "CourseSummary":
        return cls(
            subject=record.subject,
            course_num=record.course_num,
            title=record.title,
            credits=record.credits,
            grade=record.grade,
        )

    @property
    def code(self) -> str:
        return f"{self.subject} {self.course_num}"
