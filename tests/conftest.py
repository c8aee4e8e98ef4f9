import json
from datetime import date

import pytest

from registrar.data import TranscriptParser
from registrar.engines import GradeClassifier
from registrar.models import ClassReference, TimeConflictWaiver


def enrollment(subject, course_num, grade=None, credits=3, status="completed", sbc="", title=""):
    return {
        "subject": subject,
        "course_num": course_num,
        "title": title or f"{subject} {course_num}",
        "credits": credits,
        "grade": grade,
        "status": status,
        "sbc": sbc,
    }


@pytest.fixture
def row():
    """Builder for raw transcript rows."""
    return enrollment


@pytest.fixture
def records():
    """Builder that parses raw rows into EnrollmentRecord objects."""
    parser = TranscriptParser()

    def build(*rows):
        return parser.parse(list(rows))
    return build


@pytest.fixture
def classifier():
    return GradeClassifier()


@pytest.fixture
def spring_windows():
    """Spring 2026 schedule rows: seniors split at 100 credits."""
    return [
        {"class_standing": "U4", "credit_threshold": 100, "registration_start_date": "2025-11-03"},
        {"class_standing": "U4", "credit_threshold": 0, "registration_start_date": "2025-11-10"},
        {"class_standing": "U3", "credit_threshold": None, "registration_start_date": "2025-11-17"},
        {"class_standing": "U2", "credit_threshold": None, "registration_start_date": "2025-11-24"},
        {"class_standing": "U1", "credit_threshold": None, "registration_start_date": "2025-12-01"},
    ]


@pytest.fixture
def waiver():
    return TimeConflictWaiver(
        waiver_id=7,
        student_id=1042,
        class_1=ClassReference(501, "CSE 214"),
        class_2=ClassReference(502, "AMS 210"),
    )


@pytest.fixture
def cse_minor_document():
    return {
        "requiredCourses": [
            "CSE 114",
            {"subject": "CSE", "courseNumber": "214", "minGrade": "C"},
            "CSE 216",
        ],
        "electives": {"minCredits": 6, "from": ["CSE 3xx"]},
        "sequences": [{"name": "Intro", "courses": ["CSE 114", "CSE 214", "CSE 216"]}],
        "creditThresholds": [{"subject": "CSE", "minCredits": 20, "description": "CSE credits"}],
    }


@pytest.fixture
def data_dir(tmp_path, spring_windows, cse_minor_document):
    """An exported data directory with one student, one term and one program."""
    (tmp_path / "transcripts").mkdir()
    (tmp_path / "registration_schedules").mkdir()
    (tmp_path / "degree_requirements").mkdir()

    transcript = {
        "enrollments": [
            enrollment("CSE", "114", "A", 4, sbc="TECH"),
            enrollment("CSE", "214", "B", 3),
            enrollment("WRT", "102", "A-", 3, sbc="partially fulfills: WRT, SPK"),
            enrollment("CSE", "216", None, 3, status="registered"),
        ],
        "programs": [{"subject": "CSE", "programType": "minor"}],
    }
    (tmp_path / "transcripts" / "1042.json").write_text(json.dumps(transcript))
    (tmp_path / "registration_schedules" / "spring_2026.json").write_text(json.dumps(spring_windows))
    (tmp_path / "degree_requirements" / "CSE_MIN.json").write_text(json.dumps(cse_minor_document))
    (tmp_path / "waivers.json").write_text(json.dumps([
        {"waiver_id": 7, "student_user_id": 1042, "class_id_1": 501, "class_id_2": 502,
         "instructor_1_approved": True, "instructor_2_approved": False,
         "advisor_approved": False, "created_at": "2025-11-01T09:30:00"},
    ]))
    return tmp_path


@pytest.fixture
def today():
    return date(2025, 11, 12)
