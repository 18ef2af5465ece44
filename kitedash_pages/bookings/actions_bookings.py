# ===================== Actions: Bookings =====================
"""
Summary
-------
Records and deletes client payments of a booking.

Rules
-----
- amount > 0 (typed amounts accept `1 234,50`, `1,234.50`, `€ 80`).
- method ∈ cash_eur / cash_mzn / transfer / card_palmeiras.
- the booking must exist.
Invalid input raises `ValueError`; nothing is written.

Return
------
TypedDict PaymentResult:
    ok, msg, payment_id, amount
"""

from __future__ import annotations

import logging
from typing import Any, Optional, TypedDict

from repository.accounting_repository import AccountingRepository
from repository.types import ALLOWED_METHODS, METHOD_LABELS, Payment
from shared.ids import new_id, resolve_user, sanitize
from utils.utils import fmt_booking_number, fmt_eur, parse_amount, to_iso

__all__ = ["PaymentResult", "record_payment", "delete_payment"]

logger = logging.getLogger(__name__)


# ===================== Types =====================
class PaymentResult(TypedDict):
    ok: bool
    msg: str
    payment_id: str
    amount: float


# ===================== API =====================
def record_payment(
    repo: AccountingRepository,
    booking_id: str,
    date: Any,
    amount: Any,
    method: str = "transfer",
    is_deposit: bool = False,
    notes: Optional[str] = None,
    usuario: Optional[Any] = None,
) -> PaymentResult:
    """
    Adds a client payment to a booking.

    Raises:
        ValueError: Non-positive amount, unknown method or unknown booking.
    """
    valor = parse_amount(amount)
    if valor <= 0:
        raise ValueError("Amount must be greater than zero.")
    if method not in ALLOWED_METHODS:
        raise ValueError(f"Unknown payment method: {method!r}.")
    booking = next((b for b in repo.data.bookings if b.id == booking_id), None)
    if booking is None:
        raise ValueError(f"Booking {booking_id!r} not found.")

    payment = Payment(
        id=new_id("pay"),
        booking_id=booking_id,
        date=to_iso(date),
        amount=valor,
        method=method,
        is_deposit=bool(is_deposit),
        notes=sanitize(notes) or None,
    )
    repo.add_payment(payment)
    user = resolve_user(usuario)
    logger.info("payment %s on %s by %s", payment.id, booking_id, user)

    kind = "Deposit" if payment.is_deposit else "Payment"
    return {
        "ok": True,
        "msg": (
            f"✅ {kind} of {fmt_eur(valor)} ({METHOD_LABELS[method]}) recorded on booking "
            f"{fmt_booking_number(booking.booking_number)} by {user}."
        ),
        "payment_id": payment.id,
        "amount": valor,
    }


def delete_payment(repo: AccountingRepository, payment_id: str) -> PaymentResult:
    """
    Removes a client payment.

    Raises:
        ValueError: Unknown payment id.
    """
    payment = next((p for p in repo.data.payments if p.id == payment_id), None)
    if payment is None or not repo.delete_payment(payment_id):
        raise ValueError("Payment not found.")
    return {
        "ok": True,
        "msg": f"🗑️ Payment of {fmt_eur(payment.amount)} deleted.",
        "payment_id": payment_id,
        "amount": payment.amount,
    }
