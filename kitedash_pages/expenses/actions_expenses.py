# ===================== Actions: Expenses =====================
"""
Summary
-------
Adds and deletes expenses.

Rules
-----
- date present and readable.
- non-empty description.
- amount > 0.
- category in equipment / maintenance / accommodation / transport / other.
Invalid input raises `ValueError`; nothing is written.

Return
------
TypedDict ExpenseResult:
    ok, msg, expense_id, amount
"""

from __future__ import annotations

import logging
from typing import Any, TypedDict

from repository.accounting_repository import AccountingRepository
from repository.types import ALLOWED_CATEGORIES, CATEGORY_LABELS, Expense
from shared.ids import new_id, sanitize
from utils.utils import fmt_eur, parse_amount, to_iso

__all__ = ["ExpenseResult", "add_expense", "delete_expense"]

logger = logging.getLogger(__name__)


# ===================== Types =====================
class ExpenseResult(TypedDict):
    ok: bool
    msg: str
    expense_id: str
    amount: float


# ===================== API =====================
def add_expense(
    repo: AccountingRepository,
    date: Any,
    category: str,
    amount: Any,
    description: str,
    palmeiras_related: bool = False,
) -> ExpenseResult:
    """
    Records an expense.

    Raises:
        ValueError: Missing date, empty description, non-positive amount or
            unknown category.
    """
    if date is None or (isinstance(date, str) and not date.strip()):
        raise ValueError("Date is required.")
    iso = to_iso(date)
    desc = sanitize(description)
    if not desc:
        raise ValueError("Description is required.")
    valor = parse_amount(amount)
    if valor <= 0:
        raise ValueError("Amount must be greater than zero.")
    if category not in ALLOWED_CATEGORIES:
        raise ValueError(f"Unknown category: {category!r}.")

    expense = Expense(
        id=new_id("exp"),
        date=iso,
        category=category,
        amount=valor,
        description=desc,
        palmeiras_related=bool(palmeiras_related),
    )
    repo.add_expense(expense)
    return {
        "ok": True,
        "msg": f"✅ Expense of {fmt_eur(valor)} added ({CATEGORY_LABELS[category]}): {desc}.",
        "expense_id": expense.id,
        "amount": valor,
    }


def delete_expense(repo: AccountingRepository, expense_id: str) -> ExpenseResult:
    """
    Removes an expense.

    Raises:
        ValueError: Unknown expense id.
    """
    expense = next((e for e in repo.data.expenses if e.id == expense_id), None)
    if expense is None or not repo.delete_expense(expense_id):
        raise ValueError("Expense not found.")
    logger.info("expense %s deleted", expense_id)
    return {
        "ok": True,
        "msg": f"🗑️ Expense deleted: {expense.description} ({fmt_eur(expense.amount)}).",
        "expense_id": expense_id,
        "amount": expense.amount,
    }
