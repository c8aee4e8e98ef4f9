"""
Degree requirement document parsing.

This module turns the catalog's loosely shaped requirement JSON into the
closed set of requirement nodes defined in models/requirements.py.
"""

import json
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..models import (
    RequiredCourse,
    RequiredCourses,
    ElectiveConstraint,
    SequenceConstraint,
    CreditThreshold,
    RequirementDocument,
)

logger = logging.getLogger(__name__)

COURSE_CODE_RE = re.compile(r"^([A-Z]{2,6})\s*(\d{2,4}[A-Z]?)$")


def split_course_code(raw) -> Optional[tuple]:
    """
    Split "CSE 214" / "cse214" / "AMS 161H" into (subject, course_num).

    Returns None when the text is not a course code.
    """
    if raw is None:
        return None
    match = COURSE_CODE_RE.match(str(raw).strip().upper())
    if not match:
        return None
    return match.group(1), match.group(2)


def _first(entry: dict, *keys):
    for key in keys:
        if entry.get(key) is not None:
            return entry[key]
    return None


class RequirementDocumentParser:
    """
    Parses degree requirement documents.

    DOCUMENT SHAPE:
    ---------------
    The catalog has used both camelCase and snake_case over the years, so
    each key has a few accepted spellings:

        {
          "requiredCourses": ["CSE 114", {"subject": "CSE", "courseNumber": "214",
                                          "minGrade": "C"}],
          "electives": {"minCredits": 9, "from": ["CSE 3xx"]},
          "sequences": [{"name": "Calculus", "courses": ["MAT 125", "MAT 126"]}],
          "minimumCredits": 60,
          "creditThresholds": [{"subject": "CSE", "minCredits": 30}]
        }

    MALFORMED INPUT:
    ----------------
    One bad entry never sinks the document - it is logged and skipped.
    A document that is not an object at all parses to None.
    """

    def parse(self, document) -> Optional[RequirementDocument]:
        if isinstance(document, (str, bytes)):
            try:
                document = json.loads(document)
            except ValueError:
                logger.debug("Requirement document is not valid JSON")
                return None
        if not isinstance(document, dict):
            return None

        nodes = []

        required = _first(document, "requiredCourses", "required_courses", "required")
        if isinstance(required, list):
            courses = tuple(c for c in (self._course(e) for e in required) if c)
            nodes.append(RequiredCourses(courses=courses))

        electives = document.get("electives")
        if isinstance(electives, dict):
            nodes.append(ElectiveConstraint(constraint=electives))
        elif isinstance(electives, list):
            for entry in electives:
                if isinstance(entry, dict):
                    nodes.append(ElectiveConstraint(constraint=entry))

        for entry in self._entries(document, "sequences"):
            node = self._sequence(entry)
            if node:
                nodes.append(node)

        minimum = _first(document, "minimumCredits", "minimum_credits", "totalCredits")
        if minimum is not None:
            value = self._decimal(minimum)
            if value is not None:
                nodes.append(CreditThreshold(min_credits=value, description="Total credits"))

        for entry in self._entries(document, "creditThresholds", "credit_thresholds"):
            node = self._threshold(entry)
            if node:
                nodes.append(node)

        return RequirementDocument(nodes=nodes, raw=document)

    @staticmethod
    def _entries(document: dict, *keys) -> list:
        """The list stored under the first present key; anything else is skipped."""
        value = _first(document, *keys)
        if value is None:
            return []
        if not isinstance(value, list):
            logger.debug("Skipping %s: expected a list, got %r", keys[0], value)
            return []
        return value

    def _course(self, entry) -> Optional[RequiredCourse]:
        if isinstance(entry, str):
            parts = split_course_code(entry)
            if parts is None:
                logger.debug("Skipping unrecognized course code %r", entry)
                return None
            return RequiredCourse(subject=parts[0], course_num=parts[1])

        if isinstance(entry, dict):
            subject = _first(entry, "subject")
            number = _first(entry, "courseNumber", "courseNum", "course_num", "number")
            min_grade = _first(entry, "minGrade", "min_grade", "minimumGrade")
            if subject is None and number is None:
                code = _first(entry, "code", "course")
                parts = split_course_code(code)
                if parts:
                    subject, number = parts
            if not subject or number is None:
                logger.debug("Skipping required course without subject/number: %r", entry)
                return None
            return RequiredCourse(
                subject=str(subject).strip().upper(),
                course_num=str(number).strip().upper(),
                min_grade=str(min_grade).strip().upper() if min_grade else None,
            )

        logger.debug("Skipping required course entry of type %s", type(entry).__name__)
        return None

    def _sequence(self, entry) -> Optional[SequenceConstraint]:
        if not isinstance(entry, dict) or not isinstance(entry.get("courses"), list):
            logger.debug("Skipping malformed sequence %r", entry)
            return None
        courses = tuple(c for c in (self._course(e) for e in entry["courses"]) if c)
        if not courses:
            return None
        return SequenceConstraint(name=str(entry.get("name", "")), courses=courses)

    def _threshold(self, entry) -> Optional[CreditThreshold]:
        if not isinstance(entry, dict):
            return None
        value = self._decimal(_first(entry, "minCredits", "min_credits", "credits"))
        if value is None:
            logger.debug("Skipping credit threshold without minCredits: %r", entry)
            return None
        subject = entry.get("subject")
        return CreditThreshold(
            min_credits=value,
            subject=str(subject).strip().upper() if subject else None,
            description=str(entry.get("description", "")),
        )

    @staticmethod
    def _decimal(value) -> Optional[Decimal]:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return None
        if not result.is_finite() or result < 0:
            return None
        return result
