"""
Time-conflict waiver data models.

A time-conflict waiver lets a student enroll in two sections whose meeting
times overlap. It needs sign-off from BOTH section instructors and from an
advisor. Each approval is recorded independently.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class ApprovalParty(Enum):
    """
    The three parties who must sign off.

    INSTRUCTOR_1: Instructor of the first class in the waiver
    INSTRUCTOR_2: Instructor of the second class in the waiver
    ADVISOR: The student's academic advisor
    """
    INSTRUCTOR_1 = "instructor_1"
    INSTRUCTOR_2 = "instructor_2"
    ADVISOR = "advisor"


class WaiverState(Enum):
    PENDING = "pending"
    FULLY_APPROVED = "approved"
    DENIED = "denied"


class DenialPolicy(Enum):
    """
    What a denial means.

    FINAL: Any denial closes the waiver; the student files a new one.
    RESUBMITTABLE: A denial resets that party's flag; the same party may
                   approve later and the waiver reopens.
    """
    FINAL = "final"
    RESUBMITTABLE = "resubmittable"


class WaiverClosedError(ValueError):
    """Raised in strict mode when a closed waiver receives a decision."""


@dataclass(frozen=True)
class ClassReference:
    """One of the two conflicting sections."""
    class_id: int
    course: str = ""                       # e.g. "CSE 214"
    section: str = ""                      # e.g. "01"
    term: str = ""                         # e.g. "Spring 2026"


@dataclass(frozen=True)
class ApprovalEvent:
    """A single approve/deny decision by one party."""
    party: ApprovalParty
    approved: bool
    decided_by: Optional[int] = None       # user id of the approver


@dataclass(frozen=True)
class TimeConflictWaiver:
    """
    A waiver record.

    The aggregate state is NEVER stored: it is derived from the three
    flags plus the recorded denial (see `state`). Decisions produce a new
    TimeConflictWaiver rather than mutating this one.
    """
    waiver_id: int
    student_id: int
    class_1: ClassReference
    class_2: ClassReference
    instructor_1_approved: bool = False
    instructor_2_approved: bool = False
    advisor_approved: bool = False
    created_at: Optional[datetime] = None
    denied_by: Optional[ApprovalParty] = None

    @property
    def is_fully_approved(self) -> bool:
        return (self.instructor_1_approved
                and self.instructor_2_approved
                and self.advisor_approved)

    @property
    def state(self) -> WaiverState:
        if self.denied_by is not None:
            return WaiverState.DENIED
        if self.is_fully_approved:
            return WaiverState.FULLY_APPROVED
        return WaiverState.PENDING

    def flag(self, party: ApprovalParty) -> bool:
        return getattr(self, f"{party.value}_approved")

    def covers(self, class_id_1: int, class_id_2: int) -> bool:
        """True if this waiver is for the given pair, in either order."""
        pair = {self.class_1.class_id, self.class_2.class_id}
        return pair == {class_id_1, class_id_2}
