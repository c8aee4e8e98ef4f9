"""
Transcript Aggregation Engine.

This module folds a student's enrollment rows into GPA and credit totals.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from ..models import TranscriptSummary
from .grades import GradeClassifier

logger = logging.getLogger(__name__)

GPA_PRECISION = Decimal("0.001")


class TranscriptAggregator:
    """
    Computes GPA, attempted credits and completed credits.

    FOLDING RULES:
    --------------
    For each record:
    1. Credits missing or <= 0 -> skip the record entirely
    2. No mark yet -> skip (in-progress work counts nowhere)
    3. Passing mark (letter or P/CR/S) -> credits count as COMPLETED
    4. Letter mark (including F) -> credits x value goes into the GPA
       numerator, credits go into ATTEMPTED (the GPA denominator)

    So P adds to completed but not attempted, F adds to attempted but not
    completed, and I/W add to neither.

    Example: A, B, F, P, NP, I on 3-credit courses
        attempted = 9 (A, B, F), completed = 9 (A, B, P)
        gpa = (12 + 9 + 0) / 9 = 2.333

    The fold is a plain sum, so the result never depends on row order.
    """

    def __init__(self, classifier: Optional[GradeClassifier] = None):
        self.classifier = classifier or GradeClassifier()

    def aggregate(self, records: list) -> TranscriptSummary:
        numerator = Decimal("0")
        attempted = Decimal("0")
        completed = Decimal("0")

        for record in records:
            credits = record.credits
            if credits is None or credits <= 0:
                logger.debug("Skipping %s: no credit value", record.code)
                continue
            if record.grade is None:
                continue
            # Records built outside TranscriptParser may carry int/float credits
            credits = Decimal(str(credits))

            verdict = self.classifier.classify(record.grade)
            if verdict.is_passing:
                completed += credits
            if verdict.is_quality_point:
                numerator += credits * verdict.quality_value
                attempted += credits

        gpa = None
        if attempted > 0:
            gpa = (numerator / attempted).quantize(GPA_PRECISION, rounding=ROUND_HALF_UP)

        return TranscriptSummary(
            total_credits_completed=completed,
            attempted_credits=attempted,
            gpa=gpa,
        )
