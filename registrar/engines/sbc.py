"""
SBC (general education) Category Tracking Engine.

This module groups a student's enrollments by the SBC categories each
course declares and marks every category completed and/or in progress.
"""

import re
from typing import Optional

from ..config import IN_PROGRESS_STATUSES, UNIVERSITY_SBC_CODES
from ..models import CourseSummary, RequirementCategory
from .grades import GradeClassifier

PARTIAL_PREFIX_RE = re.compile(r"partially\s+fulfills\s*:", re.IGNORECASE)
TOKEN_SPLIT_RE = re.compile(r"[,\s]+")


def parse_sbc_codes(sbc_text) -> list:
    """
    Parse a catalog SBC field into category codes.

    The catalog writes these several ways; all of them parse the same:
        "WRT"                              -> ["WRT"]
        "partially fulfills: WRT, SPK"     -> ["WRT", "SPK"]
        "SBS+ HFA+"                        -> ["SBS+", "HFA+"]

    Codes come back upper-cased, de-duplicated, in the order written.
    """
    if not sbc_text:
        return []
    text = PARTIAL_PREFIX_RE.sub(" ", str(sbc_text))
    codes = []
    for token in TOKEN_SPLIT_RE.split(text):
        token = token.strip().upper()
        if token and token not in codes:
            codes.append(token)
    return codes


class RequirementCategoryTracker:
    """
    Tracks SBC category progress.

    MATCHING LOGIC:
    ---------------
    A record is PASSED if its mark is passing, IN PROGRESS if it has no mark
    and its status is registered/enrolled/waitlisted. For every category
    code the record declares:
    - passed      -> course goes into that category's completed list
    - in progress -> course goes into that category's in-progress list
    - otherwise   -> ignored for that category

    Codes a course declares that are not in the tracked list are ignored.
    """

    def __init__(self, classifier: Optional[GradeClassifier] = None):
        self.classifier = classifier or GradeClassifier()

    def summarize(self, records: list, category_codes: Optional[list] = None) -> list:
        codes = UNIVERSITY_SBC_CODES if category_codes is None else category_codes
        categories = {}
        for code in codes:
            key = code.strip().upper()
            if key not in categories:
                categories[key] = RequirementCategory(code=code)

        for record in records:
            passed = record.grade is not None and self.classifier.is_passing(record.grade)
            in_progress = (record.grade is None
                           and (record.status or "").lower() in IN_PROGRESS_STATUSES)
            if not passed and not in_progress:
                continue

            summary = CourseSummary.from_record(record)
            for code in parse_sbc_codes(record.sbc):
                category = categories.get(code)
                if category is None:
                    continue
                if passed:
                    category.completed_courses.append(summary)
                else:
                    category.in_progress_courses.append(summary)

        return list(categories.values())
