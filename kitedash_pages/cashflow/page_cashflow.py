# ===================== Page: Cash Flow =====================
"""
Cash-flow page.

- Period: current season (default), all time, or a custom month range.
- Chart: bars (|net| coloured by sign), diverging (signed) or line.
- Table: one row per month, newest first, with the running balance.
"""

from __future__ import annotations

import streamlit as st

from repository.types import AccountingData
from services.accounting.cashflow import (
    build_month_rows,
    chart_frame,
    current_season,
    filter_period,
    period_totals,
    rows_to_frame,
)
from utils.utils import fmt_eur, fmt_month, to_month

from ..common import get_data
from ..shared_ui import render_card_row

__all__ = ["render_cashflow"]

_PERIODS = {"season": "Current season", "all": "All time", "custom": "Custom"}
_CHARTS = {"bars": "Bars", "diverging": "Diverging", "line": "Line"}
_COLORS = ["#00FFA3", "#FF5C70"]


def render_cashflow(data: AccountingData | None = None) -> None:
    """Renders the cash-flow tab."""
    data = data if data is not None else get_data()
    st.subheader("💧 Cash flow")

    season = current_season(data)
    c1, c2 = st.columns(2)
    mode = c1.radio(
        "Period", options=list(_PERIODS), format_func=_PERIODS.get, horizontal=True, key="cf_mode"
    )
    chart = c2.radio(
        "Chart", options=list(_CHARTS), format_func=_CHARTS.get, horizontal=True, key="cf_chart"
    )

    month_from = month_to = None
    if mode == "custom":
        f1, f2 = st.columns(2)
        month_from = f1.text_input("From (YYYY-MM)", value=to_month(season.start_date) if season else "", key="cf_from")
        month_to = f2.text_input("To (YYYY-MM)", value=to_month(season.end_date) if season else "", key="cf_to")
    elif mode == "season" and season is not None:
        st.caption(f"Season {season.label}: {fmt_month(to_month(season.start_date))} → {fmt_month(to_month(season.end_date))}")

    rows = filter_period(build_month_rows(data), mode, season=season, month_from=month_from, month_to=month_to)
    totals = period_totals(rows)

    render_card_row(
        "Period",
        [
            ("Billed", totals["billed"], "by check-in month"),
            ("Collected", totals["collected"], None),
            ("Palmeiras in", totals["palm_in"], None),
            ("Total out", -totals["total_out"], "expenses + rent + instructors"),
            ("Net cash", totals["net"], None),
        ],
    )

    if not rows:
        st.info("No movement in this period.")
        return

    frame = chart_frame(rows, chart)
    if chart == "line":
        st.line_chart(frame, color=_COLORS[0])
    else:
        st.bar_chart(frame, color=_COLORS, stack=False)

    table = rows_to_frame(rows)
    table["month"] = table["month"].map(fmt_month)
    money_cols = [c for c in table.columns if c != "month"]
    for col in money_cols:
        table[col] = table[col].map(fmt_eur)
    table = table.rename(
        columns={
            "month": "Month",
            "billed": "Billed",
            "collected": "Collected",
            "palm_in": "Palmeiras in",
            "expenses": "Expenses",
            "rent": "Rent",
            "instr_paid": "Instructors",
            "net": "Net cash",
            "balance": "Running",
        }
    )
    st.dataframe(table, use_container_width=True, hide_index=True)
