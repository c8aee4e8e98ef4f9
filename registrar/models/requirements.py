"""
Degree requirement document models.

A degree requirement document arrives from the catalog as loosely shaped
JSON. RequirementDocumentParser turns it into a CLOSED set of node types:

    RequiredCourses     - every listed course must be completed
    ElectiveConstraint  - elective rules, echoed for display only
    SequenceConstraint  - an ordered chain of courses (e.g. calculus I -> II)
    CreditThreshold     - minimum completed credits, optionally in a subject

Evaluation walks the nodes with a RequirementVisitor. Adding a node type
means adding a visit_* method, so an evaluator that forgets one fails
loudly instead of silently skipping it.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


class RequirementVisitor:
    """Base visitor. Subclasses must handle every node type."""

    def visit_required_courses(self, node: "RequiredCourses"):
        raise NotImplementedError

    def visit_elective_constraint(self, node: "ElectiveConstraint"):
        raise NotImplementedError

    def visit_sequence_constraint(self, node: "SequenceConstraint"):
        raise NotImplementedError

    def visit_credit_threshold(self, node: "CreditThreshold"):
        raise NotImplementedError


@dataclass(frozen=True)
class RequiredCourse:
    """A single course reference inside a requirement node."""
    subject: str
    course_num: str                        # String compare: "101H" != "101"
    min_grade: Optional[str] = None        # e.g. "C"; None = any passing mark

    @property
    def code(self) -> str:
        return f"{self.subject} {self.course_num}"


@dataclass(frozen=True)
class RequiredCourses:
    courses: tuple

    def accept(self, visitor: RequirementVisitor):
        return visitor.visit_required_courses(self)


@dataclass(frozen=True)
class ElectiveConstraint:
    """
    Elective rules exactly as the catalog wrote them.

    The matcher does not evaluate these; they are passed through so the
    presentation layer can show "Choose 9 credits from approved electives".
    """
    constraint: dict

    def accept(self, visitor: RequirementVisitor):
        return visitor.visit_elective_constraint(self)


@dataclass(frozen=True)
class SequenceConstraint:
    name: str
    courses: tuple                         # Ordered RequiredCourse entries

    def accept(self, visitor: RequirementVisitor):
        return visitor.visit_sequence_constraint(self)


@dataclass(frozen=True)
class CreditThreshold:
    min_credits: Decimal
    subject: Optional[str] = None          # None = credits in any subject
    description: str = ""

    def accept(self, visitor: RequirementVisitor):
        return visitor.visit_credit_threshold(self)


@dataclass
class RequirementDocument:
    """
    A parsed degree requirement document.

    Attributes:
        nodes: Requirement nodes in document order
        raw: The original document, kept read-only for display
    """
    nodes: list = field(default_factory=list)
    raw: dict = field(default_factory=dict)

    def nodes_of(self, node_type) -> list:
        return [n for n in self.nodes if isinstance(n, node_type)]


@dataclass(frozen=True)
class ProgramMeta:
    """
    Declared-program row describing which program a document belongs to.

    Example:
        ProgramMeta(subject="CSE", degree_type="BS", program_type="major")
    """
    subject: str
    degree_type: str
    program_type: str                      # "major" or "minor"

    @property
    def display_name(self) -> str:
        suffix = "Minor" if self.program_type == "minor" else "Major"
        return f"{self.subject} {self.degree_type} {suffix}"
