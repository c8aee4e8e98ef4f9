from decimal import Decimal

import pytest

from registrar.engines import GradeClassifier, GradeScale
from registrar.models import MarkKind


@pytest.mark.parametrize("mark, value", [
    ("A+", "4.0"), ("A", "4.0"), ("A-", "3.7"), ("B+", "3.3"),
    ("C", "2.0"), ("D-", "0.7"), ("F", "0.0"),
])
def test_letter_grades_have_quality_values(classifier, mark, value):
    verdict = classifier.classify(mark)
    assert verdict.kind is MarkKind.QUALITY_POINT
    assert verdict.quality_value == Decimal(value)


def test_f_counts_in_gpa_but_does_not_pass(classifier):
    verdict = classifier.classify("F")
    assert verdict.is_quality_point
    assert not verdict.is_passing


@pytest.mark.parametrize("mark", ["P", "CR", "S"])
def test_pass_marks_pass_without_quality_value(classifier, mark):
    verdict = classifier.classify(mark)
    assert verdict.kind is MarkKind.PASS_FAIL
    assert verdict.is_passing
    assert verdict.quality_value is None


@pytest.mark.parametrize("mark", ["NP", "NC", "U"])
def test_fail_marks(classifier, mark):
    verdict = classifier.classify(mark)
    assert verdict.kind is MarkKind.PASS_FAIL
    assert not verdict.is_passing


@pytest.mark.parametrize("mark", ["I", "W", "", None, "Q?", "AA"])
def test_unknown_marks_are_indeterminate_and_never_raise(classifier, mark):
    verdict = classifier.classify(mark)
    assert verdict.kind is MarkKind.INDETERMINATE
    assert not verdict.is_passing


def test_marks_are_normalized(classifier):
    assert classifier.classify(" b+ ").mark == "B+"
    assert classifier.is_passing("p")


def test_meets_minimum(classifier):
    assert classifier.meets_minimum("B", "C")
    assert classifier.meets_minimum("C", "C")
    assert not classifier.meets_minimum("C-", "C")
    assert not classifier.meets_minimum("F", None)
    assert classifier.meets_minimum("D", None)


def test_pass_marks_meet_any_minimum(classifier):
    assert classifier.meets_minimum("P", "B")


def test_rank_orders_pass_between_f_and_passing_letters(classifier):
    assert classifier.rank("A") > classifier.rank("D-") > classifier.rank("P") > classifier.rank("F")
    assert classifier.rank("NP") < classifier.rank("F")


def test_custom_scale():
    scale = GradeScale({"A": 4, "B": 3, "C": 2, "D": 1, "F": 0})
    classifier = GradeClassifier(scale)
    assert classifier.classify("A+").kind is MarkKind.INDETERMINATE
    assert classifier.classify("b").quality_value == Decimal("3")
    assert scale.marks == ["A", "B", "C", "D", "F"]
