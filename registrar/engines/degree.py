"""
Degree Requirements Matching Engine.

This module evaluates a program's requirement document (major or minor)
against a student's transcript.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from ..config import IN_PROGRESS_STATUSES
from ..data.requirements import RequirementDocumentParser
from ..models import (
    RequirementVisitor,
    RequirementDocument,
    ProgramMeta,
    RequiredCourseStatus,
    SequenceStatus,
    CreditThresholdStatus,
    ProgramRequirementStatus,
)
from .grades import GradeClassifier


class MatchPolicy(Enum):
    """
    Which transcript row wins when a required course was taken more than
    once and more than one attempt qualifies.

    LAST_PASSING: The last qualifying row in transcript order (default)
    FIRST_PASSING: The first qualifying row in transcript order
    BEST_GRADE: The qualifying row with the highest grade
    """
    LAST_PASSING = "last_passing"
    FIRST_PASSING = "first_passing"
    BEST_GRADE = "best_grade"


class DegreeRequirementMatcher:
    """
    Matches a transcript against a degree requirement document.

    REQUIRED COURSE LOGIC:
    ----------------------
    Transcript rows match a required course when subject and course number
    are equal. The course number compares as a STRING ("101H" is not "101").

    - Any matching row with a passing mark that meets the course's minimum
      grade -> completed, grade reported from the winning row (MatchPolicy)
    - Otherwise, any matching row with no mark and an in-progress status
      -> in progress
    - Otherwise (including zero matches) -> neither

    A failed attempt never hides a later passing one, so an F retaken for a
    B+ reports completed with B+ whatever order the rows arrive in.

    ELECTIVES:
    ----------
    Elective constraints are echoed for display, not evaluated.
    """

    def __init__(self, classifier: Optional[GradeClassifier] = None,
                 policy: MatchPolicy = MatchPolicy.LAST_PASSING):
        self.classifier = classifier or GradeClassifier()
        self.policy = policy
        self.parser = RequirementDocumentParser()

    def match(self, document, records: list,
              program: ProgramMeta) -> Optional[ProgramRequirementStatus]:
        """
        Evaluate one program.

        Args:
            document: RequirementDocument, or the raw catalog dict/JSON text
            records: EnrollmentRecord list for the student
            program: The declared program the document belongs to

        Returns:
            ProgramRequirementStatus, or None when there is no document
        """
        if document is None:
            return None
        if not isinstance(document, RequirementDocument):
            document = self.parser.parse(document)
            if document is None:
                return None

        evaluator = _ProgramEvaluator(self, records)
        for node in document.nodes:
            node.accept(evaluator)

        return ProgramRequirementStatus(
            name=program.display_name,
            program_type=program.program_type,
            required_courses=evaluator.required_courses,
            electives=evaluator.electives,
            sequences=evaluator.sequences,
            credit_thresholds=evaluator.credit_thresholds,
        )

    def course_status(self, required, records: list) -> RequiredCourseStatus:
        """Status of a single RequiredCourse against the transcript."""
        subject = required.subject.upper()
        matches = [
            r for r in records
            if r.subject.upper() == subject and r.course_num.upper() == required.course_num.upper()
        ]
        qualifying = [
            r for r in matches
            if r.grade is not None and self.classifier.meets_minimum(r.grade, required.min_grade)
        ]

        if qualifying:
            winner = self._pick(qualifying)
            return RequiredCourseStatus(
                subject=required.subject,
                course_num=required.course_num,
                min_grade=required.min_grade,
                completed=True,
                in_progress=False,
                grade=winner.grade,
            )

        in_progress = any(
            r.grade is None and (r.status or "").lower() in IN_PROGRESS_STATUSES
            for r in matches
        )
        return RequiredCourseStatus(
            subject=required.subject,
            course_num=required.course_num,
            min_grade=required.min_grade,
            completed=False,
            in_progress=in_progress,
        )

    def _pick(self, qualifying: list):
        if self.policy is MatchPolicy.FIRST_PASSING:
            return qualifying[0]
        if self.policy is MatchPolicy.BEST_GRADE:
            return max(qualifying, key=lambda r: self.classifier.rank(r.grade))
        return qualifying[-1]


class _ProgramEvaluator(RequirementVisitor):
    """Collects node results for one program while visiting its document."""

    def __init__(self, matcher: DegreeRequirementMatcher, records: list):
        self.matcher = matcher
        self.records = records
        self.required_courses = []
        self.electives = []
        self.sequences = []
        self.credit_thresholds = []

    def visit_required_courses(self, node):
        for course in node.courses:
            self.required_courses.append(self.matcher.course_status(course, self.records))

    def visit_elective_constraint(self, node):
        self.electives.append(node.constraint)

    def visit_sequence_constraint(self, node):
        statuses = [self.matcher.course_status(c, self.records) for c in node.courses]
        next_course = next((s.code for s in statuses if not s.completed), None)
        self.sequences.append(SequenceStatus(
            name=node.name,
            courses=statuses,
            next_course=next_course,
            is_satisfied=next_course is None,
        ))

    def visit_credit_threshold(self, node):
        classifier = self.matcher.classifier
        subject = node.subject.upper() if node.subject else None
        earned = Decimal("0")
        for r in self.records:
            if subject and r.subject.upper() != subject:
                continue
            if r.credits and r.credits > 0 and r.grade is not None and classifier.is_passing(r.grade):
                earned += Decimal(str(r.credits))
        self.credit_thresholds.append(CreditThresholdStatus(
            description=node.description,
            subject=node.subject,
            required_credits=node.min_credits,
            completed_credits=earned,
            is_satisfied=earned >= node.min_credits,
        ))
