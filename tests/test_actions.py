# tests/test_actions.py
"""Form actions: validation, mutation of the repository and result messages."""

import pytest

from kitedash_pages.bookings.actions_bookings import delete_payment, record_payment
from kitedash_pages.expenses.actions_expenses import add_expense, delete_expense
from kitedash_pages.instructors.actions_instructors import (
    add_debt,
    delete_debt,
    pay_instructor,
    remove_override,
    set_override,
    suggested_payment,
)
from kitedash_pages.palmeiras.actions_palmeiras import parse_month, save_rent, save_reversal
from services.accounting.dashboard import compute_dashboard_kpis
from services.accounting.palmeiras import palmeiras_totals
from services.accounting.payroll import compute_instructor_balance, compute_instructor_earned
from services.accounting.revenue import compute_booking_paid, compute_lessons_revenue


# ===================== bookings =====================

def test_record_payment(repo):
    res = record_payment(repo, "bk2", "2026-02-10", "300", method="transfer", is_deposit=True, usuario="Ana")
    assert res["ok"] is True
    assert res["amount"] == 300.0
    assert "#002" in res["msg"] and "Deposit" in res["msg"] and "Ana" in res["msg"]

    assert compute_booking_paid("bk2", repo.data.payments) == 300.0
    added = next(p for p in repo.data.payments if p.id == res["payment_id"])
    assert added.is_deposit and added.date == "2026-02-10"


def test_payment_updates_dashboard(repo):
    record_payment(repo, "bk6", "2026-02-28", 200)
    k = compute_dashboard_kpis(repo.data)
    assert k.total_paid == 2675.0
    assert k.total_due == 2170.0


@pytest.mark.parametrize(
    "booking_id, amount, method",
    [("bk2", 0, "transfer"), ("bk2", "-10", "transfer"), ("bk2", 50, "bitcoin"), ("nope", 50, "transfer")],
)
def test_record_payment_rejects_invalid_input(repo, booking_id, amount, method):
    before = repo.data
    with pytest.raises(ValueError):
        record_payment(repo, booking_id, "2026-02-10", amount, method=method)
    assert repo.data is before


def test_delete_payment(repo):
    res = delete_payment(repo, "pay2")
    assert res["amount"] == 745.0
    assert compute_booking_paid("bk1", repo.data.payments) == 300.0
    with pytest.raises(ValueError, match="Payment not found"):
        delete_payment(repo, "pay2")


# ===================== instructors =====================

def test_suggested_payment_never_negative(repo):
    assert suggested_payment(repo, "i1") == 135
    pay_instructor(repo, "i1", "2026-02-28", 500)
    assert suggested_payment(repo, "i1") == 0


def test_pay_instructor_settles_balance(repo):
    res = pay_instructor(repo, "i1", "2026-02-28", suggested_payment(repo, "i1"), usuario={"name": "Tom"})
    assert "Lucas Ferreira" in res["msg"] and "Tom" in res["msg"]
    assert compute_instructor_balance("i1", repo.data) == 0.0


def test_add_and_delete_debt(repo):
    res = add_debt(repo, "i2", "2026-02-12", "40", "  Dinner  ")
    assert compute_instructor_balance("i2", repo.data) == 190.0
    assert repo.data.instructor_debts[-1].description == "Dinner"

    delete_debt(repo, res["record_id"])
    assert compute_instructor_balance("i2", repo.data) == 230.0


@pytest.mark.parametrize(
    "instructor_id, amount, description, message",
    [
        ("i2", 0, "Dinner", "greater than zero"),
        ("i2", 40, "   ", "Description is required"),
        ("nobody", 40, "Dinner", "not found"),
    ],
)
def test_add_debt_rejects_invalid_input(repo, instructor_id, amount, description, message):
    with pytest.raises(ValueError, match=message):
        add_debt(repo, instructor_id, "2026-02-12", amount, description)
    assert len(repo.data.instructor_debts) == 2


def test_delete_unknown_records(repo):
    with pytest.raises(ValueError):
        delete_debt(repo, "nope")
    with pytest.raises(ValueError):
        remove_override(repo, "l1")


def test_override_changes_payroll_not_billing(repo):
    booking = next(b for b in repo.data.bookings if b.id == "bk1")
    set_override(repo, "l1", 60, "Long session")
    assert compute_instructor_earned("i1", repo.data) == 380.0
    assert compute_lessons_revenue(booking, repo.data) == 230.0

    remove_override(repo, "l1")
    assert compute_instructor_earned("i1", repo.data) == 360.0


def test_override_keeps_existing_id(repo):
    res = set_override(repo, "l8", 32, "Renegotiated")
    assert res["record_id"] == "lro1"
    assert repo.data.lesson_rate_overrides[0].rate == 32.0


@pytest.mark.parametrize(
    "lesson_id, rate, note",
    [("l1", 0, "Long session"), ("l1", 60, " "), ("nope", 60, "Long session")],
)
def test_set_override_rejects_invalid_input(repo, lesson_id, rate, note):
    with pytest.raises(ValueError):
        set_override(repo, lesson_id, rate, note)
    assert len(repo.data.lesson_rate_overrides) == 1


# ===================== palmeiras =====================

def test_parse_month():
    from datetime import date

    assert parse_month("2026-03") == "2026-03"
    assert parse_month("2026-03-15") == "2026-03"
    assert parse_month(date(2026, 3, 15)) == "2026-03"
    with pytest.raises(ValueError):
        parse_month("2026-13")
    with pytest.raises(ValueError):
        parse_month("march")


def test_save_rent_new_month(repo):
    save_rent(repo, "2026-03", "850")
    assert palmeiras_totals(repo.data)["rent"] == 3400.0


def test_save_rent_refuses_duplicate_month(repo):
    with pytest.raises(ValueError, match="already exists"):
        save_rent(repo, "2026-02", 850)


def test_edit_rent_same_month(repo):
    res = save_rent(repo, "2026-02", 900, rent_id="pr3")
    assert "updated" in res["msg"]
    assert palmeiras_totals(repo.data)["rent"] == 2600.0
    with pytest.raises(ValueError, match="Rent not found"):
        save_rent(repo, "2026-04", 900, rent_id="nope")


def test_save_reversal_computes_net(repo):
    res = save_reversal(repo, "2026-02", 6000, 15)
    added = next(r for r in repo.data.palmeiras_reversals if r.id == res["record_id"])
    assert added.net_amount == 900.0
    assert palmeiras_totals(repo.data)["net"] == -150.0


def test_edit_reversal_recomputes_net(repo):
    save_reversal(repo, "2026-01", 5800, 20, reversal_id="prev2")
    prev2 = next(r for r in repo.data.palmeiras_reversals if r.id == "prev2")
    assert prev2.net_amount == 1160.0


@pytest.mark.parametrize(
    "month, gross, percent",
    [("2026-03", 0, 15), ("2026-03", 6000, 0), ("2026-01", 6000, 15), ("bad", 6000, 15)],
)
def test_save_reversal_rejects_invalid_input(repo, month, gross, percent):
    with pytest.raises(ValueError):
        save_reversal(repo, month, gross, percent)
    assert len(repo.data.palmeiras_reversals) == 2


# ===================== expenses =====================

def test_add_expense(repo):
    res = add_expense(repo, "2026-02-25", "equipment", "350", "Harness", palmeiras_related=True)
    assert res["amount"] == 350.0
    added = repo.data.expenses[-1]
    assert (added.date, added.category, added.palmeiras_related) == ("2026-02-25", "equipment", True)
    assert compute_dashboard_kpis(repo.data).total_expenses == 1895.0


@pytest.mark.parametrize(
    "date, category, amount, description, message",
    [
        ("", "other", 10, "Tape", "Date is required"),
        ("2026-02-25", "other", 10, "", "Description is required"),
        ("2026-02-25", "other", -5, "Tape", "greater than zero"),
        ("2026-02-25", "food", 10, "Tape", "Unknown category"),
    ],
)
def test_add_expense_rejects_invalid_input(repo, date, category, amount, description, message):
    with pytest.raises(ValueError, match=message):
        add_expense(repo, date, category, amount, description)
    assert len(repo.data.expenses) == 6


def test_delete_expense(repo):
    res = delete_expense(repo, "e5")
    assert res["amount"] == 30.0
    assert len(repo.data.expenses) == 5
    with pytest.raises(ValueError, match="Expense not found"):
        delete_expense(repo, "e5")


# ===================== non-finite amounts =====================

@pytest.mark.parametrize("amount", [float("inf"), float("nan"), "1e400"])
def test_non_finite_amounts_leave_repository_unchanged(repo, amount):
    before = repo.data
    with pytest.raises(ValueError):
        record_payment(repo, "bk2", "2026-02-10", amount)
    with pytest.raises(ValueError):
        pay_instructor(repo, "i1", "2026-02-28", amount)
    with pytest.raises(ValueError):
        add_debt(repo, "i1", "2026-02-28", amount, "Dinner")
    with pytest.raises(ValueError):
        set_override(repo, "l1", amount, "Long session")
    with pytest.raises(ValueError):
        add_expense(repo, "2026-02-25", "other", amount, "Tape")
    with pytest.raises(ValueError):
        save_rent(repo, "2026-03", amount)
    with pytest.raises(ValueError):
        save_reversal(repo, "2026-03", amount, 15)
    with pytest.raises(ValueError):
        save_reversal(repo, "2026-03", 6000, amount)
    assert repo.data is before
    assert len(repo.data.payments) == 7
