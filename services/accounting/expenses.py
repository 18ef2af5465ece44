# services/accounting/expenses.py
"""
Service: expense tracker

Filters (all combinable):
- category   → 'all' or one expense category.
- palmeiras  → 'all' | 'yes' | 'no' (palmeiras_related flag).
- month      → `YYYY-MM` prefix of the date ('' = any month).
- search     → case-insensitive substring of the description.

The category breakdown is computed over ALL expenses, independently of the
filters; the list total follows the filters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Literal

from repository.types import CATEGORY_LABELS, Expense

PalmeirasFilter = Literal["all", "yes", "no"]


def filter_expenses(
    expenses: Iterable[Expense],
    category: str = "all",
    palmeiras: PalmeirasFilter = "all",
    month: str = "",
    search: str = "",
) -> List[Expense]:
    """Filtered expenses, newest first."""
    needle = (search or "").strip().lower()
    out = []
    for e in expenses:
        if category != "all" and e.category != category:
            continue
        if palmeiras == "yes" and not e.palmeiras_related:
            continue
        if palmeiras == "no" and e.palmeiras_related:
            continue
        if month and not e.date.startswith(month):
            continue
        if needle and needle not in (e.description or "").lower():
            continue
        out.append(e)
    out.sort(key=lambda e: e.date, reverse=True)
    return out


def expenses_total(expenses: Iterable[Expense]) -> float:
    return sum(e.amount for e in expenses)


@dataclass
class CategoryTotal:
    category: str
    label: str
    amount: float
    share: float  # 0..100


def totals_by_category(expenses: Iterable[Expense]) -> List[CategoryTotal]:
    """One entry per known category (in label order), shares over the grand total."""
    items = list(expenses)
    grand = expenses_total(items)
    out = []
    for cat, label in CATEGORY_LABELS.items():
        amount = sum(e.amount for e in items if e.category == cat)
        out.append(CategoryTotal(cat, label, amount, amount / grand * 100 if grand else 0.0))
    return out


def expense_months(expenses: Iterable[Expense]) -> List[str]:
    """Distinct `YYYY-MM` of the expenses, newest first (month filter options)."""
    return sorted({e.date[:7] for e in expenses if e.date}, reverse=True)


__all__ = [
    "PalmeirasFilter",
    "filter_expenses",
    "expenses_total",
    "CategoryTotal",
    "totals_by_category",
    "expense_months",
]
