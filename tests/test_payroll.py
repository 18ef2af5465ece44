# tests/test_payroll.py
import pytest

from services.accounting.payroll import (
    compute_instructor_balance,
    compute_instructor_costs,
    compute_instructor_debts,
    compute_instructor_earned,
    compute_instructor_paid,
    find_instructor,
    get_base_rate,
    get_lesson_rate,
    instructor_lesson_lines,
    payroll_rows,
    total_to_pay,
)


def test_base_rate_per_type(data):
    lucas = find_instructor("i1", data)
    assert get_base_rate("private", lucas) == 50.0
    assert get_base_rate("group", lucas) == 35.0
    assert get_base_rate("supervision", lucas) == 25.0


def test_override_takes_precedence(data):
    lucas = find_instructor("i1", data)
    l8 = next(x for x in data.lessons if x.id == "l8")
    l1 = next(x for x in data.lessons if x.id == "l1")
    assert get_lesson_rate(l8, lucas, data.lesson_rate_overrides) == 30.0
    assert get_lesson_rate(l1, lucas, data.lesson_rate_overrides) == 50.0


@pytest.mark.parametrize(
    "instructor_id, earned, debts, paid, balance",
    [
        ("i1", 360.0, 25.0, 200.0, 135.0),
        ("i2", 230.0, 0.0, 0.0, 230.0),
        ("i3", 380.0, 60.0, 150.0, 170.0),
    ],
)
def test_instructor_figures(data, instructor_id, earned, debts, paid, balance):
    assert compute_instructor_earned(instructor_id, data) == earned
    assert compute_instructor_debts(instructor_id, data) == debts
    assert compute_instructor_paid(instructor_id, data) == paid
    assert compute_instructor_balance(instructor_id, data) == balance


def test_balance_identity_for_every_instructor(data):
    for i in data.instructors:
        assert compute_instructor_balance(i.id, data) == pytest.approx(
            compute_instructor_earned(i.id, data)
            - compute_instructor_debts(i.id, data)
            - compute_instructor_paid(i.id, data)
        )


def test_unknown_instructor_earns_nothing(data):
    assert compute_instructor_earned("nobody", data) == 0.0


def test_instructor_costs_skip_unknown_instructors(data, tiny):
    assert compute_instructor_costs(data) == 970.0
    assert compute_instructor_costs(tiny) == 70.0


def test_total_to_pay_ignores_negative_balances(data):
    rows = payroll_rows(data)
    assert [r.instructor.id for r in rows] == ["i1", "i2", "i3"]
    assert total_to_pay(rows) == 535.0

    rows[0].balance = -100.0
    assert total_to_pay(rows) == 400.0


def test_lesson_lines_sorted_with_override(data):
    lines = instructor_lesson_lines(find_instructor("i1", data), data)
    assert [ln.lesson.id for ln in lines] == ["l9", "l1", "l2", "l8"]
    l8 = lines[-1]
    assert (l8.base_rate, l8.effective_rate, l8.total) == (35.0, 30.0, 60.0)
    assert l8.override is not None and l8.override.note
    assert all(ln.override is None for ln in lines[:-1])
