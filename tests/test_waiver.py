import itertools
import json
import logging

import pytest

from registrar import Registrar
from registrar.data import DataLoader, parse_waiver_row
from registrar.engines import WaiverApprovalStateMachine
from registrar.models import (
    ApprovalEvent,
    ApprovalParty,
    DenialPolicy,
    WaiverClosedError,
    WaiverState,
)

PARTIES = list(ApprovalParty)


def test_new_waiver_is_pending(waiver):
    assert waiver.state is WaiverState.PENDING


@pytest.mark.parametrize("order", list(itertools.permutations(PARTIES)))
def test_fully_approved_only_after_all_three_in_any_order(waiver, order):
    machine = WaiverApprovalStateMachine()
    for i, party in enumerate(order):
        waiver = machine.approve(waiver, party)
        expected = WaiverState.FULLY_APPROVED if i == 2 else WaiverState.PENDING
        assert waiver.state is expected


def test_approve_accepts_party_strings(waiver):
    updated = WaiverApprovalStateMachine().approve(waiver, "Advisor")
    assert updated.advisor_approved


def test_unknown_party_raises(waiver):
    with pytest.raises(ValueError, match="Unknown approval party"):
        WaiverApprovalStateMachine().approve(waiver, "dean")


def test_reapproval_is_idempotent(waiver):
    machine = WaiverApprovalStateMachine()
    once = machine.approve(waiver, ApprovalParty.INSTRUCTOR_1)
    assert machine.approve(once, ApprovalParty.INSTRUCTOR_1) == once


def test_decisions_do_not_mutate_the_input(waiver):
    WaiverApprovalStateMachine().approve(waiver, ApprovalParty.ADVISOR)
    assert not waiver.advisor_approved


def test_deny_removes_full_approval(waiver):
    machine = WaiverApprovalStateMachine()
    approved = machine.apply_all(waiver, [ApprovalEvent(p, True) for p in PARTIES])
    assert approved.state is WaiverState.FULLY_APPROVED

    denied = machine.deny(approved, ApprovalParty.INSTRUCTOR_2)
    assert denied.state is WaiverState.DENIED
    assert not denied.instructor_2_approved
    assert denied.denied_by is ApprovalParty.INSTRUCTOR_2


def test_final_denial_ignores_later_decisions(waiver, caplog):
    machine = WaiverApprovalStateMachine(DenialPolicy.FINAL)
    denied = machine.deny(waiver, ApprovalParty.ADVISOR)

    with caplog.at_level(logging.INFO, logger="registrar.engines.waiver"):
        after = machine.approve(denied, ApprovalParty.ADVISOR)
    assert after == denied
    assert after.state is WaiverState.DENIED
    assert "closed waiver 7" in caplog.text


def test_strict_mode_raises_on_closed_waiver(waiver):
    machine = WaiverApprovalStateMachine(DenialPolicy.FINAL, strict=True)
    denied = machine.deny(waiver, ApprovalParty.INSTRUCTOR_1)
    with pytest.raises(WaiverClosedError):
        machine.approve(denied, ApprovalParty.INSTRUCTOR_1)
    with pytest.raises(WaiverClosedError):
        machine.deny(denied, ApprovalParty.ADVISOR)


def test_resubmittable_denial_reopens_when_same_party_approves(waiver):
    machine = WaiverApprovalStateMachine(DenialPolicy.RESUBMITTABLE)
    waiver = machine.apply_all(waiver, [
        ApprovalEvent(ApprovalParty.INSTRUCTOR_1, True),
        ApprovalEvent(ApprovalParty.INSTRUCTOR_2, True),
        ApprovalEvent(ApprovalParty.ADVISOR, False),
    ])
    assert waiver.state is WaiverState.DENIED

    # Another party's approval does not lift the advisor's denial
    assert machine.approve(waiver, ApprovalParty.INSTRUCTOR_1).state is WaiverState.DENIED

    reopened = machine.approve(waiver, ApprovalParty.ADVISOR)
    assert reopened.denied_by is None
    assert reopened.state is WaiverState.FULLY_APPROVED


def test_covers_either_order(waiver):
    assert waiver.covers(501, 502)
    assert waiver.covers(502, 501)
    assert not waiver.covers(501, 503)


def test_parse_waiver_row():
    waiver = parse_waiver_row({
        "waiver_id": "12", "student_user_id": 1042, "class_id_1": 501, "class_id_2": 502,
        "instructor_1_approved": 1, "instructor_2_approved": 0, "advisor_approved": None,
        "created_at": "2025-11-01T09:30:00",
    })
    assert waiver.waiver_id == 12
    assert waiver.instructor_1_approved
    assert not waiver.advisor_approved
    assert waiver.created_at.year == 2025
    assert waiver.state is WaiverState.PENDING


def test_parse_waiver_row_without_classes():
    assert parse_waiver_row({"waiver_id": 1, "class_id_1": 501}) is None


@pytest.mark.parametrize("field", [
    {"waiver_id": "W-7"},
    {"class_id_1": "CSE214-01"},
    {"class_id_2": [502]},
    {"student_user_id": "abc"},
])
def test_parse_waiver_row_with_unreadable_ids(field):
    row = dict({"waiver_id": 7, "class_id_1": 501, "class_id_2": 502, "student_user_id": 1042}, **field)
    assert parse_waiver_row(row) is None


@pytest.mark.parametrize("value, expected", [
    ("false", False), ("FALSE", False), ("0", False), ("f", False), ("no", False), ("", False),
    ("maybe", False), (0, False), (None, False),
    ("true", True), (" True ", True), ("1", True), ("t", True), ("yes", True), (1, True), (True, True),
])
def test_parse_waiver_row_flag_spellings(value, expected):
    waiver = parse_waiver_row({"waiver_id": 7, "class_id_1": 501, "class_id_2": 502,
                               "advisor_approved": value})
    assert waiver.advisor_approved is expected


def test_string_false_flags_stay_pending():
    waiver = parse_waiver_row({
        "waiver_id": 7, "class_id_1": 501, "class_id_2": 502,
        "instructor_1_approved": "false", "instructor_2_approved": "false", "advisor_approved": "false",
    })
    assert waiver.state is WaiverState.PENDING


def test_bad_waiver_row_does_not_hide_the_others(data_dir):
    path = data_dir / "waivers.json"
    rows = json.loads(path.read_text())
    path.write_text(json.dumps([{"waiver_id": "W-1", "class_id_1": 1, "class_id_2": 2}] + rows))
    updated = Registrar(DataLoader(data_dir)).run_waiver(7, [ApprovalEvent(ApprovalParty.ADVISOR, True)])
    assert updated.advisor_approved
