"""
Row parsing.

This module converts already-fetched rows (dicts straight from the records
database or a JSON export) into the engine's dataclasses. It is the only
place that knows about column spellings.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..config import BELOW_SPLIT_SENTINEL, RECOGNIZED_MARKS
from ..models import (
    EnrollmentRecord,
    ProgramMeta,
    RegistrationWindow,
    ClassReference,
    TimeConflictWaiver,
)
from ..models.grade import normalize_mark

logger = logging.getLogger(__name__)


def _pick(row: dict, *keys):
    for key in keys:
        if row.get(key) not in (None, ""):
            return row[key]
    return None


def _to_decimal(value) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return result if result.is_finite() else None


def _to_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


TRUE_FLAGS = {"true", "t", "1", "yes", "y"}
FALSE_FLAGS = {"false", "f", "0", "no", "n", ""}


def _to_flag(value) -> bool:
    """Read a boolean column; exports write flags as bools, 0/1 or text."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_FLAGS:
            return True
        if text not in FALSE_FLAGS:
            logger.debug("Unreadable approval flag %r, treating as not approved", value)
        return False
    return bool(value)


class TranscriptParser:
    """
    Parses transcript rows into EnrollmentRecord objects.

    KEY RESPONSIBILITY: one bad row must never block a whole progress
    report. Rows without a subject or course number are dropped; a row
    whose credits are not a number keeps its place with credits=None so it
    still counts for SBC tracking but never for credit totals.

    Accepted spellings per field:
        subject       subject
        course number course_num, courseNumber, courseNum
        grade         grade (blank -> None, otherwise upper-cased)
        status        status (lower-cased)
        sbc           sbc, sbc_codes
    """

    def parse(self, rows: list) -> list:
        records = []
        for row in rows or []:
            record = self.parse_row(row)
            if record is not None:
                records.append(record)
        return records

    def parse_row(self, row) -> Optional[EnrollmentRecord]:
        if not isinstance(row, dict):
            logger.debug("Skipping transcript row of type %s", type(row).__name__)
            return None

        subject = _pick(row, "subject")
        course_num = _pick(row, "course_num", "courseNumber", "courseNum")
        if not subject or course_num is None or str(course_num).strip() == "":
            logger.debug("Skipping transcript row without course identity: %r", row)
            return None

        raw_credits = _pick(row, "credits")
        credits = _to_decimal(raw_credits)
        if credits is None and raw_credits not in (None, ""):
            logger.debug("Non-numeric credits %r for %s %s", raw_credits, subject, course_num)

        grade = normalize_mark(_pick(row, "grade"))
        if grade is not None and grade not in RECOGNIZED_MARKS:
            logger.debug("Unrecognized mark %r for %s %s", grade, subject, course_num)

        return EnrollmentRecord(
            subject=str(subject).strip().upper(),
            course_num=str(course_num).strip().upper(),
            title=str(_pick(row, "title") or ""),
            credits=credits,
            grade=grade,
            status=str(_pick(row, "status") or "").strip().lower(),
            sbc=str(_pick(row, "sbc", "sbc_codes") or ""),
            term=str(_pick(row, "term") or ""),
        )


def normalize_program_type(value) -> Optional[str]:
    """Map the many spellings of major/minor to "major" / "minor"."""
    text = str(value or "").strip().lower()
    if not text:
        return None
    if text in ("major", "maj", "ma", "majors"):
        return "major"
    if text in ("minor", "min", "mi", "minors"):
        return "minor"
    return text


def parse_program_row(row: dict) -> Optional[tuple]:
    """
    Parse a declared-program row.

    Returns:
        (ProgramMeta, requirement document or None), or None when the row
        does not identify a program
    """
    if not isinstance(row, dict):
        return None
    subject = _pick(row, "subject")
    program_type = normalize_program_type(_pick(row, "programType", "program_type", "kind", "type"))
    if not subject or program_type is None:
        logger.debug("Skipping program row without subject/type: %r", row)
        return None
    degree_type = _pick(row, "degreeType", "degree_type")
    if not degree_type:
        degree_type = "MIN" if program_type == "minor" else "BS"
    meta = ProgramMeta(
        subject=str(subject).strip().upper(),
        degree_type=str(degree_type).strip().upper(),
        program_type=program_type,
    )
    document = _pick(row, "requirementDocument", "requirement_document", "degree_requirements")
    return meta, document


def parse_window_row(row: dict) -> Optional[RegistrationWindow]:
    """
    Parse a registration schedule row.

    The threshold column stores "100+" as 100 and "< 100" as 0; the text
    forms "100+" and "<100" are accepted as well.
    """
    if not isinstance(row, dict):
        return None
    standing = str(_pick(row, "classStanding", "class_standing") or "").strip().upper()
    start = _to_date(_pick(row, "registrationStartDate", "registration_start_date", "startDate"))
    if not standing or start is None:
        logger.debug("Skipping registration window row: %r", row)
        return None

    raw = _pick(row, "creditThreshold", "credit_threshold")
    threshold = None
    if isinstance(raw, str):
        text = raw.strip().replace(" ", "")
        if text.startswith("<"):
            threshold = BELOW_SPLIT_SENTINEL
        elif text:
            try:
                threshold = int(text.rstrip("+"))
            except ValueError:
                logger.debug("Unreadable credit threshold %r", raw)
                return None
    elif raw is not None:
        value = None
        if isinstance(raw, (int, float, Decimal)) and not isinstance(raw, bool):
            value = _to_decimal(raw)
        if value is None or value != value.to_integral_value():
            logger.debug("Unreadable credit threshold %r", raw)
            return None
        threshold = int(value)
    if threshold is not None and threshold < 0:
        logger.debug("Negative credit threshold %r", raw)
        return None

    return RegistrationWindow(standing, threshold, start)


def parse_waiver_row(row: dict) -> Optional[TimeConflictWaiver]:
    """Parse a time_conflict_waivers row into a TimeConflictWaiver."""
    if not isinstance(row, dict):
        return None
    try:
        waiver_id = int(_pick(row, "waiver_id", "waiverId"))
        class_id_1 = int(_pick(row, "class_id_1", "classId1"))
        class_id_2 = int(_pick(row, "class_id_2", "classId2"))
        student_id = int(_pick(row, "student_user_id", "student_id", "studentId") or 0)
    except (TypeError, ValueError):
        logger.debug("Skipping waiver row: %r", row)
        return None

    created = _pick(row, "created_at", "requested_at", "createdAt")
    if isinstance(created, str):
        try:
            created = datetime.fromisoformat(created)
        except ValueError:
            created = None

    return TimeConflictWaiver(
        waiver_id=waiver_id,
        student_id=student_id,
        class_1=ClassReference(class_id_1, str(_pick(row, "course_1") or "")),
        class_2=ClassReference(class_id_2, str(_pick(row, "course_2") or "")),
        instructor_1_approved=_to_flag(row.get("instructor_1_approved")),
        instructor_2_approved=_to_flag(row.get("instructor_2_approved")),
        advisor_approved=_to_flag(row.get("advisor_approved")),
        created_at=created if isinstance(created, datetime) else None,
    )
