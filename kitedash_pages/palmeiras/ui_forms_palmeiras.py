# kitedash_pages/palmeiras/ui_forms_palmeiras.py
"""
UI: Palmeiras

Rent and reversal forms, used both to add a month and to edit an existing
one (`existing` pre-fills the fields).
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import streamlit as st

from repository.types import DEFAULT_RENT, DEFAULT_REVERSAL_PERCENT, PalmeirasRent, PalmeirasReversal
from services.accounting.palmeiras import compute_reversal_net
from utils.utils import fmt_eur, to_month

__all__ = ["render_rent_form", "render_reversal_form"]


def render_rent_form(existing: Optional[PalmeirasRent] = None) -> dict:
    key = existing.id if existing else "new"
    st.markdown("##### 🏠 " + ("Edit rent" if existing else "Add rent"))
    with st.form(f"rent_form_{key}"):
        c1, c2 = st.columns(2)
        month = c1.text_input("Month (YYYY-MM)", value=existing.month if existing else to_month(date.today()))
        amount = c2.number_input(
            "Amount (€)", min_value=0.0, step=10.0,
            value=float(existing.amount if existing else DEFAULT_RENT), format="%.2f",
        )
        notes = st.text_input("Notes", value=(existing.notes or "") if existing else "", placeholder="Optional")
        submitted = st.form_submit_button("💾 Save rent", use_container_width=True)
    return {"month": month, "amount": float(amount or 0.0), "notes": notes, "submit": bool(submitted)}


def render_reversal_form(existing: Optional[PalmeirasReversal] = None) -> dict:
    key = existing.id if existing else "new"
    st.markdown("##### 💸 " + ("Edit reversal" if existing else "Add reversal"))

    c1, c2, c3 = st.columns(3)
    month = c1.text_input(
        "Month (YYYY-MM)", value=existing.month if existing else to_month(date.today()), key=f"rev_month_{key}"
    )
    gross = c2.number_input(
        "Gross collected by Palmeiras (€)", min_value=0.0, step=50.0,
        value=float(existing.gross_amount if existing else 0.0), format="%.2f", key=f"rev_gross_{key}",
    )
    percent = c3.number_input(
        "Percent (%)", min_value=0.0, max_value=100.0, step=0.5,
        value=float(existing.percent if existing else DEFAULT_REVERSAL_PERCENT), format="%.2f",
        key=f"rev_pct_{key}",
    )
    # live preview: widgets outside a form rerun on change
    st.caption(f"We receive: **{fmt_eur(compute_reversal_net(gross, percent))}**")
    notes = st.text_input(
        "Notes", value=(existing.notes or "") if existing else "", placeholder="Optional", key=f"rev_notes_{key}"
    )
    submitted = st.button("💾 Save reversal", use_container_width=True, key=f"rev_save_{key}")
    return {
        "month": month,
        "gross": float(gross or 0.0),
        "percent": float(percent or 0.0),
        "notes": notes,
        "submit": bool(submitted),
    }
