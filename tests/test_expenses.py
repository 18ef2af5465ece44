# tests/test_expenses.py
import pytest

from services.accounting.expenses import (
    expense_months,
    expenses_total,
    filter_expenses,
    totals_by_category,
)


def _ids(items):
    return [e.id for e in items]


def test_no_filter_sorted_newest_first(data):
    assert _ids(filter_expenses(data.expenses)) == ["e6", "e5", "e4", "e3", "e2", "e1"]


def test_filters(data):
    assert _ids(filter_expenses(data.expenses, category="maintenance")) == ["e6", "e2"]
    assert _ids(filter_expenses(data.expenses, palmeiras="yes")) == ["e4"]
    assert len(filter_expenses(data.expenses, palmeiras="no")) == 5
    assert _ids(filter_expenses(data.expenses, month="2026-02")) == ["e6", "e5", "e4"]


def test_search_is_case_insensitive(data):
    assert _ids(filter_expenses(data.expenses, search="KIT")) == ["e6", "e1"]
    assert filter_expenses(data.expenses, search="nothing like this") == []


def test_filters_combine(data):
    found = filter_expenses(data.expenses, category="maintenance", month="2026-02", search="patch")
    assert _ids(found) == ["e6"]


def test_total_follows_filter(data):
    assert expenses_total(data.expenses) == 1545.0
    assert expenses_total(filter_expenses(data.expenses, month="2026-01")) == 130.0


def test_totals_by_category(data):
    totals = totals_by_category(data.expenses)
    assert [(t.category, t.amount) for t in totals] == [
        ("equipment", 1200.0),
        ("maintenance", 150.0),
        ("accommodation", 120.0),
        ("transport", 45.0),
        ("other", 30.0),
    ]
    assert totals[0].share == pytest.approx(1200 / 1545 * 100)
    assert sum(t.share for t in totals) == pytest.approx(100.0)


def test_totals_by_category_empty():
    assert all(t.amount == 0 and t.share == 0 for t in totals_by_category([]))


def test_expense_months(data):
    assert expense_months(data.expenses) == ["2026-02", "2026-01", "2025-12"]
