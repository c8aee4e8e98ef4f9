"""
Data models for the registrar engine.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import EnrollmentRecord, CourseSummary
from .grade import MarkKind, GradeClassification
from .audit import (
    TranscriptSummary,
    RequirementCategory,
    RequiredCourseStatus,
    SequenceStatus,
    CreditThresholdStatus,
    ProgramRequirementStatus,
)
from .requirements import (
    RequirementVisitor,
    RequiredCourse,
    RequiredCourses,
    ElectiveConstraint,
    SequenceConstraint,
    CreditThreshold,
    RequirementDocument,
    ProgramMeta,
)
from .registration import RegistrationWindow, WindowCheck, ScheduleGap
from .waiver import (
    ApprovalParty,
    WaiverState,
    DenialPolicy,
    WaiverClosedError,
    ClassReference,
    ApprovalEvent,
    TimeConflictWaiver,
)
from .prerequisite import PrerequisiteGroup, PrerequisiteResult

__all__ = [
    # Transcript models
    "EnrollmentRecord",
    "CourseSummary",
    "MarkKind",
    "GradeClassification",
    # Audit results
    "TranscriptSummary",
    "RequirementCategory",
    "RequiredCourseStatus",
    "SequenceStatus",
    "CreditThresholdStatus",
    "ProgramRequirementStatus",
    # Requirement documents
    "RequirementVisitor",
    "RequiredCourse",
    "RequiredCourses",
    "ElectiveConstraint",
    "SequenceConstraint",
    "CreditThreshold",
    "RequirementDocument",
    "ProgramMeta",
    # Registration
    "RegistrationWindow",
    "WindowCheck",
    "ScheduleGap",
    # Waivers
    "ApprovalParty",
    "WaiverState",
    "DenialPolicy",
    "WaiverClosedError",
    "ClassReference",
    "ApprovalEvent",
    "TimeConflictWaiver",
    # Prerequisites
    "PrerequisiteGroup",
    "PrerequisiteResult",
]
