# ===================== Actions: Palmeiras =====================
"""
Summary
-------
Adds or edits the monthly rent and the monthly reversal.

Rules
-----
- month: `YYYY-MM` (a date is reduced to its month).
- rent: amount > 0.
- reversal: gross > 0 and percent > 0; net = gross × percent / 100 (cents).
- one record per month and series: adding a month that already exists is
  refused (edit it instead).
Invalid input raises `ValueError`; nothing is written.

Return
------
TypedDict PalmeirasResult:
    ok, msg, record_id
"""

from __future__ import annotations

import re
from datetime import date as _date
from typing import Any, Optional, TypedDict

from repository.accounting_repository import AccountingRepository
from repository.types import PalmeirasRent, PalmeirasReversal
from services.accounting.palmeiras import compute_reversal_net
from shared.ids import new_id, sanitize
from utils.utils import fmt_eur, fmt_month, parse_amount, to_month

__all__ = ["PalmeirasResult", "parse_month", "save_rent", "save_reversal"]

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


# ===================== Types =====================
class PalmeirasResult(TypedDict):
    ok: bool
    msg: str
    record_id: str


# ===================== Helpers =====================
def parse_month(value: Any) -> str:
    """Normalizes a month input to `YYYY-MM`.

    Raises:
        ValueError: Unreadable month.
    """
    m = to_month(value) if isinstance(value, _date) else sanitize(value)[:7]
    if not _MONTH_RE.match(m):
        raise ValueError(f"Invalid month: {value!r} (expected YYYY-MM).")
    return m


def _check_unique_month(records, month: str, record_id: Optional[str], what: str) -> None:
    if any(r.month == month and r.id != record_id for r in records):
        raise ValueError(f"{what} for {fmt_month(month)} already exists, edit it instead.")


# ===================== API =====================
def save_rent(
    repo: AccountingRepository,
    month: Any,
    amount: Any,
    notes: Optional[str] = None,
    rent_id: Optional[str] = None,
) -> PalmeirasResult:
    """
    Adds the rent of a month (or edits `rent_id`).

    Raises:
        ValueError: Invalid month, non-positive amount, duplicated month or
            unknown `rent_id`.
    """
    m = parse_month(month)
    valor = parse_amount(amount)
    if valor <= 0:
        raise ValueError("Rent must be greater than zero.")
    _check_unique_month(repo.data.palmeiras_rents, m, rent_id, "A rent")

    rent = PalmeirasRent(id=rent_id or new_id("pr"), month=m, amount=valor, notes=sanitize(notes) or None)
    if rent_id is None:
        repo.add_palmeiras_rent(rent)
        verb = "added"
    elif repo.update_palmeiras_rent(rent):
        verb = "updated"
    else:
        raise ValueError("Rent not found.")

    return {"ok": True, "msg": f"✅ Rent {fmt_month(m)} {verb}: {fmt_eur(valor)}.", "record_id": rent.id}


def save_reversal(
    repo: AccountingRepository,
    month: Any,
    gross_amount: Any,
    percent: Any,
    notes: Optional[str] = None,
    reversal_id: Optional[str] = None,
) -> PalmeirasResult:
    """
    Adds the reversal of a month (or edits `reversal_id`); the net amount is
    always recomputed from gross and percent.

    Raises:
        ValueError: Invalid month, non-positive gross / percent, duplicated
            month or unknown `reversal_id`.
    """
    m = parse_month(month)
    gross = parse_amount(gross_amount)
    pct = parse_amount(percent)
    if gross <= 0:
        raise ValueError("Gross amount must be greater than zero.")
    if pct <= 0:
        raise ValueError("Percent must be greater than zero.")
    _check_unique_month(repo.data.palmeiras_reversals, m, reversal_id, "A reversal")

    reversal = PalmeirasReversal(
        id=reversal_id or new_id("prev"),
        month=m,
        gross_amount=gross,
        percent=pct,
        net_amount=compute_reversal_net(gross, pct),
        notes=sanitize(notes) or None,
    )
    if reversal_id is None:
        repo.add_palmeiras_reversal(reversal)
        verb = "added"
    elif repo.update_palmeiras_reversal(reversal):
        verb = "updated"
    else:
        raise ValueError("Reversal not found.")

    return {
        "ok": True,
        "msg": (
            f"✅ Reversal {fmt_month(m)} {verb}: {pct:g}% of {fmt_eur(gross)} "
            f"= {fmt_eur(reversal.net_amount)}."
        ),
        "record_id": reversal.id,
    }
