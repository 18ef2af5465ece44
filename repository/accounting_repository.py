"""
Module Accounting (Repository)
==============================

Defines `AccountingRepository`, the in-memory holder of the accounting arrays
and the handlers the tabs call to mutate them.

Main features
-------------
- Keeps one `AccountingData` snapshot; every mutation builds a new list and
  swaps it in (the previous snapshot is never modified in place).
- add / update / delete per mutable entity type.
- `set_lesson_override` replaces the override of the same lesson or appends
  a new one (at most one override per lesson).

Technical details
-----------------
- No durability: the repository lives in `st.session_state` for the duration
  of the browser session and is rebuilt from the mock fixtures on reload.
- Updates and deletes of unknown ids are no-ops (logged at DEBUG).

Dependencies
------------
- repository.types
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, List, Optional

from repository.types import (
    AccountingData,
    Expense,
    InstructorDebt,
    InstructorPayment,
    LessonRateOverride,
    PalmeirasRent,
    PalmeirasReversal,
    Payment,
)

logger = logging.getLogger(__name__)


class AccountingRepository:
    """
    In-memory repository of the accounting module.

    Parameters:
        data (AccountingData | None): Initial snapshot (usually the mock fixtures).
    """

    def __init__(self, data: Optional[AccountingData] = None):
        self._data = data if data is not None else AccountingData()

    @property
    def data(self) -> AccountingData:
        """Current read-only snapshot handed to the tabs."""
        return self._data

    # ------------- internals -------------

    def _swap(self, attr: str, new_list: List[Any]) -> None:
        self._data = replace(self._data, **{attr: new_list})

    def _append(self, attr: str, item: Any) -> None:
        self._swap(attr, [*getattr(self._data, attr), item])
        logger.info("%s: added id=%s", attr, getattr(item, "id", None))

    def _update(self, attr: str, item: Any) -> bool:
        current = getattr(self._data, attr)
        if not any(x.id == item.id for x in current):
            logger.debug("%s: update ignored, unknown id=%s", attr, item.id)
            return False
        self._swap(attr, [item if x.id == item.id else x for x in current])
        logger.info("%s: updated id=%s", attr, item.id)
        return True

    def _delete(self, attr: str, match: Callable[[Any], bool], ref: str) -> bool:
        current = getattr(self._data, attr)
        kept = [x for x in current if not match(x)]
        if len(kept) == len(current):
            logger.debug("%s: delete ignored, unknown ref=%s", attr, ref)
            return False
        self._swap(attr, kept)
        logger.info("%s: deleted ref=%s", attr, ref)
        return True

    # ------------- client payments -------------

    def add_payment(self, payment: Payment) -> None:
        self._append("payments", payment)

    def update_payment(self, payment: Payment) -> bool:
        return self._update("payments", payment)

    def delete_payment(self, payment_id: str) -> bool:
        return self._delete("payments", lambda x: x.id == payment_id, payment_id)

    # ------------- instructors -------------

    def add_instructor_debt(self, debt: InstructorDebt) -> None:
        self._append("instructor_debts", debt)

    def delete_instructor_debt(self, debt_id: str) -> bool:
        return self._delete("instructor_debts", lambda x: x.id == debt_id, debt_id)

    def add_instructor_payment(self, payment: InstructorPayment) -> None:
        self._append("instructor_payments", payment)

    def delete_instructor_payment(self, payment_id: str) -> bool:
        return self._delete("instructor_payments", lambda x: x.id == payment_id, payment_id)

    def set_lesson_override(self, override: LessonRateOverride) -> None:
        """Replaces the override of the same lesson, or appends it."""
        current = self._data.lesson_rate_overrides
        if any(x.lesson_id == override.lesson_id for x in current):
            self._swap(
                "lesson_rate_overrides",
                [override if x.lesson_id == override.lesson_id else x for x in current],
            )
            logger.info("lesson_rate_overrides: replaced lesson_id=%s", override.lesson_id)
        else:
            self._append("lesson_rate_overrides", override)

    def remove_lesson_override(self, lesson_id: str) -> bool:
        return self._delete("lesson_rate_overrides", lambda x: x.lesson_id == lesson_id, lesson_id)

    # ------------- expenses -------------

    def add_expense(self, expense: Expense) -> None:
        self._append("expenses", expense)

    def delete_expense(self, expense_id: str) -> bool:
        return self._delete("expenses", lambda x: x.id == expense_id, expense_id)

    # ------------- Palmeiras -------------

    def add_palmeiras_rent(self, rent: PalmeirasRent) -> None:
        self._append("palmeiras_rents", rent)

    def update_palmeiras_rent(self, rent: PalmeirasRent) -> bool:
        return self._update("palmeiras_rents", rent)

    def add_palmeiras_reversal(self, reversal: PalmeirasReversal) -> None:
        self._append("palmeiras_reversals", reversal)

    def update_palmeiras_reversal(self, reversal: PalmeirasReversal) -> bool:
        return self._update("palmeiras_reversals", reversal)


# Explicit public API
__all__ = ["AccountingRepository"]
