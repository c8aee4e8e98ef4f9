"""
Grade Classification Engine.

This module maps a mark (letter or pass/fail) to a quality-point value and
a pass/fail verdict.
"""

from decimal import Decimal
from typing import Optional

from ..config import DEFAULT_GRADE_POINTS, PASS_MARKS, FAIL_MARKS
from ..models import MarkKind, GradeClassification
from ..models.grade import normalize_mark


class GradeScale:
    """
    Explicit mark -> quality value table.

    Engines receive a GradeScale instead of reading a module constant, so a
    different catalog era (say, one without A+) can pass its own table:

        legacy = GradeScale({"A": 4.0, "B": 3.0, "C": 2.0, "D": 1.0, "F": 0.0})
        classifier = GradeClassifier(legacy)

    Passing rule for letter grades: anything with a value above zero.
    """

    def __init__(self, points: Optional[dict] = None,
                 pass_marks: Optional[set] = None,
                 fail_marks: Optional[set] = None):
        points = DEFAULT_GRADE_POINTS if points is None else points
        self._points = {normalize_mark(k): Decimal(str(v)) for k, v in points.items()}
        self.pass_marks = frozenset(PASS_MARKS if pass_marks is None else pass_marks)
        self.fail_marks = frozenset(FAIL_MARKS if fail_marks is None else fail_marks)

    def quality_value(self, mark) -> Optional[Decimal]:
        return self._points.get(normalize_mark(mark))

    def is_quality_point(self, mark) -> bool:
        return normalize_mark(mark) in self._points

    @property
    def marks(self) -> list:
        """Letter marks, best first."""
        return sorted(self._points, key=lambda m: self._points[m], reverse=True)


class GradeClassifier:
    """
    Classifies marks into quality-point, pass/fail or indeterminate.

    CLASSIFICATION RULES:
    ---------------------
    - Letter grades (A+ .. F): quality value from the scale; passing unless
      the value is 0 (F)
    - P, CR, S: passing, no quality value
    - NP, NC, U: failing, no quality value
    - Anything else (I, W, IP, blank, typos): indeterminate - neither
      passing nor counted. Unknown marks never raise.
    """

    def __init__(self, scale: Optional[GradeScale] = None):
        self.scale = scale or GradeScale()

    def classify(self, mark) -> GradeClassification:
        norm = normalize_mark(mark)
        value = self.scale.quality_value(norm) if norm else None

        if value is not None:
            return GradeClassification(norm, MarkKind.QUALITY_POINT, value, value > 0)
        if norm in self.scale.pass_marks:
            return GradeClassification(norm, MarkKind.PASS_FAIL, None, True)
        if norm in self.scale.fail_marks:
            return GradeClassification(norm, MarkKind.PASS_FAIL, None, False)
        return GradeClassification(norm, MarkKind.INDETERMINATE, None, False)

    def is_passing(self, mark) -> bool:
        return self.classify(mark).is_passing

    def meets_minimum(self, mark, min_grade: Optional[str]) -> bool:
        """
        True if `mark` is passing and at least `min_grade`.

        Pass marks (P/CR/S) satisfy any minimum since there is no letter to
        compare. An unknown min_grade means "any passing".
        """
        verdict = self.classify(mark)
        if not verdict.is_passing:
            return False
        minimum = self.scale.quality_value(min_grade) if min_grade else None
        if minimum is None or verdict.quality_value is None:
            return True
        return verdict.quality_value >= minimum

    def rank(self, mark) -> Decimal:
        """
        Sort key for "best grade" comparisons.

        Letter grades rank by value; pass marks rank above F but below
        every passing letter grade.
        """
        verdict = self.classify(mark)
        if verdict.quality_value is not None:
            return verdict.quality_value
        if verdict.is_passing:
            return Decimal("0.1")
        return Decimal("-1")
