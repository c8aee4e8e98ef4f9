from datetime import date

import pytest

from registrar import Registrar
from registrar.config import compute_class_standing
from registrar.data import parse_window_row
from registrar.engines import RegistrationWindowResolver, order_windows
from registrar.models import RegistrationWindow


@pytest.fixture
def windows(spring_windows):
    return [parse_window_row(r) for r in spring_windows]


@pytest.mark.parametrize("credits, standing", [
    (0, "U1"), (23.5, "U1"), (24, "U2"), (56, "U2"), (57, "U3"), (84, "U3"), (85, "U4"), (130, "U4"),
])
def test_class_standing(credits, standing):
    assert compute_class_standing(credits) == standing


@pytest.mark.parametrize("standing, credits, start", [
    ("U4", 110, date(2025, 11, 3)),
    ("U4", 100, date(2025, 11, 3)),
    ("U4", 99, date(2025, 11, 10)),
    ("U4", 60, date(2025, 11, 10)),
    ("U3", 60, date(2025, 11, 17)),
    ("U1", 10, date(2025, 12, 1)),
])
def test_resolve(windows, standing, credits, start):
    window = RegistrationWindowResolver().resolve(windows, standing, credits)
    assert window.registration_start_date == start


def test_resolve_for_credits(windows):
    window = RegistrationWindowResolver().resolve_for_credits(windows, 90)
    assert window.class_standing == "U4"
    assert window.registration_start_date == date(2025, 11, 10)


def test_unconditional_window_is_the_fallback():
    windows = [
        RegistrationWindow("U4", None, date(2025, 11, 12)),
        RegistrationWindow("U4", 100, date(2025, 11, 3)),
    ]
    resolver = RegistrationWindowResolver()
    assert resolver.resolve(windows, "U4", 120).registration_start_date == date(2025, 11, 3)
    assert resolver.resolve(windows, "U4", 90).registration_start_date == date(2025, 11, 12)


def test_highest_threshold_tried_first():
    windows = [
        RegistrationWindow("U4", 100, date(2025, 11, 4)),
        RegistrationWindow("U4", 110, date(2025, 11, 3)),
    ]
    resolver = RegistrationWindowResolver()
    assert resolver.resolve(windows, "U4", 115).credit_threshold == 110
    assert resolver.resolve(windows, "U4", 105).credit_threshold == 100


def test_missing_standing_resolves_to_none(windows):
    only_seniors = [w for w in windows if w.class_standing == "U4"]
    assert RegistrationWindowResolver().resolve(only_seniors, "U2", 30) is None


def test_order_windows(windows):
    ordered = order_windows(list(reversed(windows)))
    assert [(w.class_standing, w.credit_threshold) for w in ordered] == [
        ("U4", 100), ("U4", 0), ("U3", None), ("U2", None), ("U1", None),
    ]


class TestCheck:
    def test_before_window_opens(self, windows):
        result = RegistrationWindowResolver().check(windows, "U3", 60, date(2025, 11, 12))
        assert not result.allowed
        assert result.reason == "Registration opens on 11/17/2025"

    def test_window_open(self, windows):
        result = RegistrationWindowResolver().check(windows, "U4", 110, date(2025, 11, 3))
        assert result.allowed
        assert result.window.credit_threshold == 100

    def test_after_late_registration(self, windows):
        result = RegistrationWindowResolver().check(
            windows, "U4", 110, date(2026, 2, 10), late_registration_ends=date(2026, 2, 3)
        )
        assert not result.allowed
        assert result.reason == "Registration period has ended"

    def test_no_window_for_standing(self, windows):
        result = RegistrationWindowResolver().check(windows[:2], "U1", 10, date(2025, 12, 5))
        assert not result.allowed
        assert result.reason == "No registration window found for your class standing"

    def test_unscheduled_term_is_open(self):
        result = RegistrationWindowResolver().check([], "U1", 0, date(2025, 12, 5))
        assert result.allowed
        assert result.window is None


def test_complete_schedule_has_no_gaps(windows):
    assert RegistrationWindowResolver().gaps(windows) == []


def test_gaps_report_missing_standings_and_credit_ranges():
    windows = [
        RegistrationWindow("U4", 100, date(2025, 11, 3)),
        RegistrationWindow("U3", None, date(2025, 11, 17)),
        RegistrationWindow("U2", None, date(2025, 11, 24)),
    ]
    gaps = RegistrationWindowResolver().gaps(windows)
    assert [g.class_standing for g in gaps] == ["U4", "U1"]
    assert gaps[0].description == "no window for 85 credits"
    assert gaps[1].description == "no window configured"


@pytest.mark.parametrize("raw, threshold", [
    (100, 100), ("100+", 100), (0, 0), ("<100", 0), ("< 100", 0), (None, None), ("", None),
])
def test_window_row_thresholds(raw, threshold):
    window = parse_window_row({"class_standing": "u4", "credit_threshold": raw,
                               "registration_start_date": "2025-11-03T00:00:00"})
    assert window.class_standing == "U4"
    assert window.credit_threshold == threshold
    assert window.registration_start_date == date(2025, 11, 3)


@pytest.mark.parametrize("row", [
    {"class_standing": "U4", "credit_threshold": -5, "registration_start_date": "2025-11-03"},
    {"class_standing": "U4", "credit_threshold": "lots", "registration_start_date": "2025-11-03"},
    {"class_standing": "U4", "registration_start_date": "soon"},
    {"credit_threshold": 100, "registration_start_date": "2025-11-03"},
    {"class_standing": "U4", "credit_threshold": [100], "registration_start_date": "2025-11-03"},
    {"class_standing": "U4", "credit_threshold": {"min": 100}, "registration_start_date": "2025-11-03"},
    {"class_standing": "U4", "credit_threshold": float("nan"), "registration_start_date": "2025-11-03"},
    {"class_standing": "U4", "credit_threshold": float("inf"), "registration_start_date": "2025-11-03"},
    {"class_standing": "U4", "credit_threshold": 99.5, "registration_start_date": "2025-11-03"},
    {"class_standing": "U4", "credit_threshold": True, "registration_start_date": "2025-11-03"},
])
def test_unusable_window_rows(row):
    assert parse_window_row(row) is None


def test_integral_float_threshold():
    window = parse_window_row({"class_standing": "U4", "credit_threshold": 100.0,
                               "registration_start_date": "2025-11-03"})
    assert window.credit_threshold == 100


def test_one_bad_row_does_not_block_window_checks(spring_windows):
    rows = spring_windows + [{"class_standing": "U2", "credit_threshold": [100],
                              "registration_start_date": "2025-11-24"}]
    registrar = Registrar()
    result = registrar.registration_status(rows, 110, date(2025, 11, 5), "U4")
    assert result.allowed
    assert result.window.registration_start_date == date(2025, 11, 3)
    assert registrar.schedule_gaps(rows) == []


def test_threshold_labels():
    assert RegistrationWindow("U4", None, date(2025, 11, 3)).threshold_label == "all"
    assert RegistrationWindow("U4", 0, date(2025, 11, 3)).threshold_label == "< 100"
    assert RegistrationWindow("U4", 100, date(2025, 11, 3)).threshold_label == "100+"
