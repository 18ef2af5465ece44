# services/accounting/cashflow.py
"""
Service: monthly cash flow

Every amount is bucketed by month (`YYYY-MM`):
- billed     → booking totals of non-cancelled bookings, by check-in month
               (informative, not part of the net).
- collected  → client payments, by payment date.
- palm_in    → Palmeiras reversal net, by reversal month.
- expenses   → expenses, by date.
- rent       → Palmeiras rent, by rent month.
- instr_paid → instructor payments, by date.

net = collected + palm_in − expenses − rent − instr_paid

Rows come newest first. The running balance is the cumulative net from the
oldest to the newest row of the selected period.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional

import pandas as pd

from repository.types import AccountingData, Season
from services.accounting.revenue import compute_booking_total
from utils.utils import to_month

logger = logging.getLogger(__name__)

PeriodMode = Literal["all", "season", "custom"]
ChartType = Literal["bars", "diverging", "line"]

COLUMNS = ("billed", "collected", "palm_in", "expenses", "rent", "instr_paid")


@dataclass
class MonthRow:
    month: str
    billed: float = 0.0
    collected: float = 0.0
    palm_in: float = 0.0
    expenses: float = 0.0
    rent: float = 0.0
    instr_paid: float = 0.0
    net: float = 0.0

    @property
    def total_out(self) -> float:
        return self.expenses + self.rent + self.instr_paid


def _entries(data: AccountingData) -> List[dict]:
    """Flat (month, column, amount) entries of every cash movement."""
    out = []
    for b in data.bookings:
        if b.status != "cancelled":
            out.append({"month": to_month(b.check_in), "col": "billed", "amount": compute_booking_total(b, data)})
    out += [{"month": to_month(p.date), "col": "collected", "amount": p.amount} for p in data.payments]
    out += [{"month": r.month, "col": "palm_in", "amount": r.net_amount} for r in data.palmeiras_reversals]
    out += [{"month": to_month(e.date), "col": "expenses", "amount": e.amount} for e in data.expenses]
    out += [{"month": r.month, "col": "rent", "amount": r.amount} for r in data.palmeiras_rents]
    out += [{"month": to_month(p.date), "col": "instr_paid", "amount": p.amount} for p in data.instructor_payments]
    return out


def build_month_rows(data: AccountingData) -> List[MonthRow]:
    """Monthly cash-flow rows, newest first."""
    entries = _entries(data)
    if not entries:
        return []

    df = pd.DataFrame(entries)
    pivot = (
        df.pivot_table(index="month", columns="col", values="amount", aggfunc="sum", fill_value=0.0)
        .reindex(columns=list(COLUMNS), fill_value=0.0)
        .sort_index(ascending=False)
    )

    rows = []
    for month, r in pivot.iterrows():
        row = MonthRow(month=str(month), **{c: float(r[c]) for c in COLUMNS})
        row.net = row.collected + row.palm_in - row.expenses - row.rent - row.instr_paid
        rows.append(row)
    logger.debug("cashflow: %d months", len(rows))
    return rows


def current_season(data: AccountingData) -> Optional[Season]:
    """The last declared season is the current one."""
    return data.seasons[-1] if data.seasons else None


def filter_period(
    rows: List[MonthRow],
    mode: PeriodMode = "all",
    *,
    season: Optional[Season] = None,
    month_from: Optional[str] = None,
    month_to: Optional[str] = None,
) -> List[MonthRow]:
    """
    Keeps the rows of the selected period (bounds inclusive).

    - `season`: months between the season start and end months.
    - `custom`: months between `month_from` and `month_to`.
    Without the needed bounds the rows are returned unfiltered.
    """
    if mode == "season" and season is not None:
        lo, hi = to_month(season.start_date), to_month(season.end_date)
    elif mode == "custom" and month_from and month_to:
        lo, hi = to_month(month_from), to_month(month_to)
    else:
        return list(rows)
    return [r for r in rows if lo <= r.month <= hi]


def period_totals(rows: List[MonthRow]) -> Dict[str, float]:
    totals = {c: sum(getattr(r, c) for r in rows) for c in COLUMNS}
    totals["net"] = sum(r.net for r in rows)
    totals["total_out"] = totals["expenses"] + totals["rent"] + totals["instr_paid"]
    return totals


def running_balance(rows: List[MonthRow]) -> Dict[str, float]:
    """Cumulative net per month, accumulated from the oldest month."""
    out: Dict[str, float] = {}
    cumul = 0.0
    for r in sorted(rows, key=lambda x: x.month):
        cumul += r.net
        out[r.month] = cumul
    return out


def chart_frame(rows: List[MonthRow], chart: ChartType = "bars") -> pd.DataFrame:
    """
    DataFrame indexed by month (oldest first) ready for `st.bar_chart` /
    `st.line_chart`.

    - bars: |net| split into "Positive" / "Negative" columns.
    - diverging: signed net split into "Positive" / "Negative".
    - line: single "Net" column.
    """
    asc = sorted(rows, key=lambda x: x.month)
    index = pd.Index([r.month for r in asc], name="month")
    nets = pd.Series([r.net for r in asc], index=index, dtype="float64")

    if chart == "line":
        return pd.DataFrame({"Net": nets})

    positive = nets.clip(lower=0)
    negative = nets.clip(upper=0)
    if chart == "bars":
        negative = negative.abs()
    return pd.DataFrame({"Positive": positive, "Negative": negative})


def rows_to_frame(rows: List[MonthRow]) -> pd.DataFrame:
    """Table view of the rows (same order) with the running balance column."""
    balance = running_balance(rows)
    return pd.DataFrame(
        [
            {
                "month": r.month,
                "billed": r.billed,
                "collected": r.collected,
                "palm_in": r.palm_in,
                "expenses": r.expenses,
                "rent": r.rent,
                "instr_paid": r.instr_paid,
                "net": r.net,
                "balance": balance.get(r.month, 0.0),
            }
            for r in rows
        ],
        columns=[
            "month", "billed", "collected", "palm_in", "expenses", "rent", "instr_paid", "net", "balance",
        ],
    )


__all__ = [
    "PeriodMode",
    "ChartType",
    "MonthRow",
    "build_month_rows",
    "current_season",
    "filter_period",
    "period_totals",
    "running_balance",
    "chart_frame",
    "rows_to_frame",
]
