# kitedash_pages/bookings/ui_forms_bookings.py
"""
UI: Bookings

Summary:
    Payment form of a booking:
    - Date (default today)
    - Amount (default = suggested deposit)
    - Method (default transfer)
    - Notes (optional)
    - "Deposit" checkbox

Output:
    dict:
        date, amount, method, is_deposit, notes
        submit (bool): True only when "Save payment" was clicked
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from repository.types import METHOD_LABELS
from utils.utils import fmt_eur

__all__ = ["render_payment_form"]


def render_payment_form(booking_id: str, suggested_deposit: int) -> dict:
    """Draws the payment form of a booking and returns the submission."""
    st.markdown("##### ➕ Record payment")
    st.caption(f"Suggested deposit: **{fmt_eur(suggested_deposit)}** (30 %, min. 120 €)")

    with st.form(f"payment_form_{booking_id}", clear_on_submit=True):
        c1, c2, c3 = st.columns(3)
        with c1:
            dt = st.date_input("Date", value=date.today())
        with c2:
            amount = st.number_input(
                "Amount (€)", min_value=0.0, step=10.0, value=float(suggested_deposit), format="%.2f"
            )
        with c3:
            method = st.selectbox(
                "Method",
                options=list(METHOD_LABELS),
                index=list(METHOD_LABELS).index("transfer"),
                format_func=METHOD_LABELS.get,
            )
        notes = st.text_input("Notes", placeholder="Optional")
        is_deposit = st.checkbox("Deposit")
        submitted = st.form_submit_button("💾 Save payment", use_container_width=True)

    return {
        "date": dt,
        "amount": float(amount or 0.0),
        "method": method,
        "is_deposit": bool(is_deposit),
        "notes": notes,
        "submit": bool(submitted),
    }
