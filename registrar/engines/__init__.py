"""
Progress and eligibility engines.

This package contains all the engines that perform the core business logic
of the registrar system. Engines take already-fetched data and return
dataclasses; none of them call each other or touch storage.
"""

from .grades import GradeScale, GradeClassifier
from .transcript import TranscriptAggregator
from .sbc import RequirementCategoryTracker, parse_sbc_codes
from .degree import DegreeRequirementMatcher, MatchPolicy
from .registration import RegistrationWindowResolver, order_windows
from .waiver import WaiverApprovalStateMachine
from .prerequisites import PrerequisiteChecker, parse_prerequisite_groups

__all__ = [
    "GradeScale",
    "GradeClassifier",
    "TranscriptAggregator",
    "RequirementCategoryTracker",
    "parse_sbc_codes",
    "DegreeRequirementMatcher",
    "MatchPolicy",
    "RegistrationWindowResolver",
    "order_windows",
    "WaiverApprovalStateMachine",
    "PrerequisiteChecker",
    "parse_prerequisite_groups",
]
