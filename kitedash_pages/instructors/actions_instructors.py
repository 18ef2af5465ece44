# ===================== Actions: Instructors =====================
"""
Summary
-------
Mutations of the payroll ledger:
- advances (debts) the instructor owes back,
- payments made to the instructor,
- accounting overrides of a lesson rate.

Rules
-----
- debt: amount > 0 and a description.
- payment: amount > 0, method in the allowed list.
- override: rate > 0 and a justification note; one override per lesson
  (a new one replaces the previous).
Invalid input raises `ValueError`; nothing is written.

Return
------
TypedDict InstructorResult:
    ok, msg, record_id
"""

from __future__ import annotations

import logging
from typing import Any, Optional, TypedDict

from repository.accounting_repository import AccountingRepository
from repository.types import (
    ALLOWED_METHODS,
    METHOD_LABELS,
    Instructor,
    InstructorDebt,
    InstructorPayment,
    LessonRateOverride,
)
from services.accounting.payroll import compute_instructor_balance, find_instructor, find_override
from shared.ids import new_id, resolve_user, sanitize
from utils.utils import fmt_eur, parse_amount, round_eur, to_iso

__all__ = [
    "InstructorResult",
    "suggested_payment",
    "add_debt",
    "delete_debt",
    "pay_instructor",
    "delete_instructor_payment",
    "set_override",
    "remove_override",
]

logger = logging.getLogger(__name__)


# ===================== Types =====================
class InstructorResult(TypedDict):
    ok: bool
    msg: str
    record_id: str


# ===================== Helpers =====================
def _require_instructor(repo: AccountingRepository, instructor_id: str) -> Instructor:
    instructor = find_instructor(instructor_id, repo.data)
    if instructor is None:
        raise ValueError(f"Instructor {instructor_id!r} not found.")
    return instructor


def _positive(value: Any, what: str) -> float:
    v = parse_amount(value)
    if v <= 0:
        raise ValueError(f"{what} must be greater than zero.")
    return v


def suggested_payment(repo: AccountingRepository, instructor_id: str) -> int:
    """Default amount of the payment form: the balance, rounded, never negative."""
    return max(0, round_eur(compute_instructor_balance(instructor_id, repo.data)))


# ===================== Debts =====================
def add_debt(
    repo: AccountingRepository,
    instructor_id: str,
    date: Any,
    amount: Any,
    description: str,
) -> InstructorResult:
    """
    Records an advance given to an instructor.

    Raises:
        ValueError: Non-positive amount, empty description or unknown instructor.
    """
    valor = _positive(amount, "Amount")
    desc = sanitize(description)
    if not desc:
        raise ValueError("Description is required.")
    instructor = _require_instructor(repo, instructor_id)

    debt = InstructorDebt(
        id=new_id("debt"),
        instructor_id=instructor_id,
        date=to_iso(date),
        amount=valor,
        description=desc,
    )
    repo.add_instructor_debt(debt)
    return {
        "ok": True,
        "msg": f"✅ Debt of {fmt_eur(valor)} added for {instructor.first_name}: {desc}.",
        "record_id": debt.id,
    }


def delete_debt(repo: AccountingRepository, debt_id: str) -> InstructorResult:
    if not repo.delete_instructor_debt(debt_id):
        raise ValueError("Debt not found.")
    return {"ok": True, "msg": "🗑️ Debt deleted.", "record_id": debt_id}


# ===================== Payments =====================
def pay_instructor(
    repo: AccountingRepository,
    instructor_id: str,
    date: Any,
    amount: Any,
    method: str = "cash_eur",
    notes: Optional[str] = None,
    usuario: Optional[Any] = None,
) -> InstructorResult:
    """
    Records a payment made to an instructor.

    Raises:
        ValueError: Non-positive amount, unknown method or unknown instructor.
    """
    valor = _positive(amount, "Amount")
    if method not in ALLOWED_METHODS:
        raise ValueError(f"Unknown payment method: {method!r}.")
    instructor = _require_instructor(repo, instructor_id)

    payment = InstructorPayment(
        id=new_id("ipay"),
        instructor_id=instructor_id,
        date=to_iso(date),
        amount=valor,
        method=method,
        notes=sanitize(notes) or None,
    )
    repo.add_instructor_payment(payment)
    user = resolve_user(usuario)
    logger.info("instructor payment %s to %s by %s", payment.id, instructor_id, user)
    return {
        "ok": True,
        "msg": (
            f"✅ {fmt_eur(valor)} paid to {instructor.full_name} "
            f"({METHOD_LABELS[method]}) by {user}."
        ),
        "record_id": payment.id,
    }


def delete_instructor_payment(repo: AccountingRepository, payment_id: str) -> InstructorResult:
    if not repo.delete_instructor_payment(payment_id):
        raise ValueError("Payment not found.")
    return {"ok": True, "msg": "🗑️ Instructor payment deleted.", "record_id": payment_id}


# ===================== Overrides =====================
def set_override(
    repo: AccountingRepository,
    lesson_id: str,
    rate: Any,
    note: str,
) -> InstructorResult:
    """
    Sets (or replaces) the accounting rate of one lesson.

    Raises:
        ValueError: Non-positive rate, empty note or unknown lesson.
    """
    valor = _positive(rate, "Rate")
    justification = sanitize(note)
    if not justification:
        raise ValueError("A justification note is required.")
    if not any(lesson.id == lesson_id for lesson in repo.data.lessons):
        raise ValueError(f"Lesson {lesson_id!r} not found.")

    existing = find_override(lesson_id, repo.data.lesson_rate_overrides)
    override = LessonRateOverride(
        id=existing.id if existing else new_id("lro"),
        lesson_id=lesson_id,
        rate=valor,
        note=justification,
    )
    repo.set_lesson_override(override)
    return {
        "ok": True,
        "msg": f"✅ Lesson rate set to {fmt_eur(valor)}/h ({justification}).",
        "record_id": override.id,
    }


def remove_override(repo: AccountingRepository, lesson_id: str) -> InstructorResult:
    if not repo.remove_lesson_override(lesson_id):
        raise ValueError("This lesson has no override.")
    return {"ok": True, "msg": "↩️ Lesson back to the base rate.", "record_id": lesson_id}
