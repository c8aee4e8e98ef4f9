"""
Grade data models.

Contains the MarkKind enum and the GradeClassification result returned by
the grade classifier.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class MarkKind(Enum):
    """
    The three disjoint families every mark falls into.

    QUALITY_POINT: Letter grades A+ through F, counted in GPA
    PASS_FAIL: P/CR/S (passing) and NP/NC/U (failing), never in GPA
    INDETERMINATE: I, W, blank and anything unrecognized
    """
    QUALITY_POINT = "quality_point"
    PASS_FAIL = "pass_fail"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True)
class GradeClassification:
    """
    Verdict for a single mark.

    Example for "B+":
        mark: "B+"
        kind: MarkKind.QUALITY_POINT
        quality_value: Decimal("3.3")
        is_passing: True
    """
    mark: Optional[str]
    kind: MarkKind
    quality_value: Optional[Decimal]
    is_passing: bool

    @property
    def is_quality_point(self) -> bool:
        return self.kind is MarkKind.QUALITY_POINT


def normalize_mark(mark) -> Optional[str]:
    """Upper-case and trim a mark; blank becomes None."""
    if mark is None:
        return None
    text = str(mark).strip().upper()
    return text or None
