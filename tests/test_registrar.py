from datetime import date
from decimal import Decimal

from registrar import Registrar
from registrar.data import DataLoader
from registrar.engines import MatchPolicy
from registrar.models import ApprovalEvent, ApprovalParty, ProgramRequirementStatus, WaiverState


def test_progress_report(row, cse_minor_document):
    enrollments = [
        row("CSE", "114", "A", 4, sbc="TECH"),
        row("CSE", "214", "F", 3),
        row("CSE", "214", "B+", 3),
        row("WRT", "102", "A", 3, sbc="partially fulfills: WRT, SPK"),
        row("CSE", "216", None, 3, status="registered"),
    ]
    programs = [
        {"subject": "CSE", "programType": "minor", "requirementDocument": cse_minor_document},
        {"subject": "AMS", "programType": "major"},
    ]
    report = Registrar().progress_report(enrollments, programs)

    transcript = report["transcript"]
    assert transcript.total_credits_completed == Decimal("10")
    assert transcript.attempted_credits == Decimal("13")
    # (16 + 0 + 9.9 + 12) / 13
    assert transcript.gpa == Decimal("2.915")
    assert report["class_standing"] == "U1"
    assert report["credits_remaining"] == Decimal("110")

    assert "WRT" not in report["missing_sbc"]
    assert "SPK" not in report["missing_sbc"]
    assert "ARTS" in report["missing_sbc"]

    minor, major = report["programs"]
    assert isinstance(minor, ProgramRequirementStatus)
    assert minor.completed_count == 2
    assert minor.in_progress_count == 1
    assert major == {
        "program": "AMS BS Major",
        "error": "Degree requirements not found for this program",
    }


def test_credits_remaining_never_negative(row):
    enrollments = [row("GEN", str(100 + i), "P", 4) for i in range(35)]
    report = Registrar().progress_report(enrollments)
    assert report["credits_remaining"] == 0
    assert report["class_standing"] == "U4"


def test_match_policy_flows_to_matcher(row):
    enrollments = [row("CSE", "114", "A"), row("CSE", "114", "C")]
    programs = [{"subject": "CSE", "programType": "major",
                 "requirementDocument": {"required": ["CSE 114"]}}]
    report = Registrar(match_policy=MatchPolicy.BEST_GRADE).progress_report(enrollments, programs)
    assert report["programs"][0].required_courses[0].grade == "A"


def test_registration_status_derives_standing(spring_windows):
    registrar = Registrar()
    result = registrar.registration_status(spring_windows, 110, date(2025, 11, 5))
    assert result.allowed
    assert result.window.registration_start_date == date(2025, 11, 3)

    result = registrar.registration_status(spring_windows, 60, date(2025, 11, 5))
    assert result.reason == "Registration opens on 11/17/2025"


def test_registration_status_with_explicit_standing(spring_windows):
    result = Registrar().registration_status(spring_windows, 60, date(2025, 11, 12), class_standing="U4")
    assert result.allowed
    assert result.window.registration_start_date == date(2025, 11, 10)


def test_schedule_gaps(spring_windows):
    assert Registrar().schedule_gaps(spring_windows) == []
    assert [g.class_standing for g in Registrar().schedule_gaps(spring_windows[:2])] == ["U3", "U2", "U1"]


def test_waiver_decision_from_row():
    row = {"waiver_id": 3, "class_id_1": 1, "class_id_2": 2, "instructor_1_approved": True}
    events = [ApprovalEvent(ApprovalParty.INSTRUCTOR_2, True), ApprovalEvent(ApprovalParty.ADVISOR, True)]
    assert Registrar().waiver_decision(row, events).state is WaiverState.FULLY_APPROVED
    assert Registrar().waiver_decision({"waiver_id": 3}, events) is None


class TestFileBackedRuns:
    def test_run_progress_loads_missing_documents(self, data_dir, capsys):
        report = Registrar(DataLoader(data_dir)).run_progress(1042)
        minor = report["programs"][0]
        assert minor.name == "CSE MIN Minor"
        assert minor.completed_count == 2
        assert "ACADEMIC PROGRESS" in capsys.readouterr().out

    def test_run_window_check(self, data_dir, capsys):
        result = Registrar(DataLoader(data_dir)).run_window_check("Spring 2026", 60, date(2025, 11, 12))
        assert not result.allowed
        assert "Registration opens on 11/17/2025" in capsys.readouterr().out

    def test_run_waiver(self, data_dir, capsys):
        updated = Registrar(DataLoader(data_dir)).run_waiver(7, [
            ApprovalEvent(ApprovalParty.INSTRUCTOR_2, True),
            ApprovalEvent(ApprovalParty.ADVISOR, True),
        ])
        assert updated.state is WaiverState.FULLY_APPROVED
        assert "TIME CONFLICT WAIVER #7" in capsys.readouterr().out

    def test_run_waiver_unknown_id(self, data_dir, caplog):
        assert Registrar(DataLoader(data_dir)).run_waiver(99, []) is None
        assert "Waiver 99 not found" in caplog.text
