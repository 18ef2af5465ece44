# ===================== Page: Dashboard =====================
"""
Accounting dashboard — KPI cards, revenue split and bookings at a glance.
"""

from __future__ import annotations

import streamlit as st

from repository.types import AccountingData
from services.accounting.dashboard import (
    booking_status_counts,
    compute_dashboard_kpis,
    revenue_by_category,
)
from utils.utils import fmt_eur

from ..common import get_data
from ..shared_ui import render_card_row, render_share_bars

__all__ = ["render_dashboard"]


def render_dashboard(data: AccountingData | None = None) -> None:
    """Renders the dashboard tab (reads the session snapshot when `data` is None)."""
    data = data if data is not None else get_data()
    st.subheader("📊 Dashboard")

    kpis = compute_dashboard_kpis(data)
    cards = kpis.as_cards()
    render_card_row("💶 Revenue", [(label, value, None) for label, value in cards[:4]])
    render_card_row("📈 Result", [(label, value, None) for label, value in cards[4:]])

    categories = revenue_by_category(data)
    render_share_bars(
        "Revenue by category",
        [(c.label, c.value, c.share) for c in categories],
    )
    st.caption(f"Total {fmt_eur(sum(c.value for c in categories))}")

    st.markdown("#### Bookings at a glance")
    counts = booking_status_counts(data)
    for col, (status, count) in zip(st.columns(len(counts)), counts.items()):
        col.metric(status.capitalize(), count)
