# kitedash_pages/instructors/ui_forms_instructors.py
"""
UI: Instructors

Forms of the payroll panel. Each returns a dict with the typed values and
`submit` (True only when its save button was clicked); the override form
also returns `remove`.
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from repository.types import METHOD_LABELS

__all__ = ["render_debt_form", "render_payment_form", "render_override_form"]


def render_debt_form(instructor_id: str) -> dict:
    """Advance given to the instructor (dinner, outing...)."""
    with st.form(f"debt_form_{instructor_id}", clear_on_submit=True):
        c1, c2 = st.columns(2)
        dt = c1.date_input("Date", value=date.today())
        amount = c2.number_input("Amount (€)", min_value=0.0, step=5.0, format="%.2f")
        description = st.text_input("Description", placeholder="e.g. Dinner, boat trip advance...")
        submitted = st.form_submit_button("💾 Add debt", use_container_width=True)
    return {"date": dt, "amount": float(amount or 0.0), "description": description, "submit": bool(submitted)}


def render_payment_form(instructor_id: str, suggested: int) -> dict:
    """Payment to the instructor; the amount defaults to the current balance."""
    with st.form(f"ipay_form_{instructor_id}", clear_on_submit=True):
        c1, c2, c3 = st.columns(3)
        dt = c1.date_input("Date", value=date.today())
        amount = c2.number_input("Amount (€)", min_value=0.0, step=10.0, value=float(suggested), format="%.2f")
        method = c3.selectbox(
            "Method",
            options=list(METHOD_LABELS),
            index=list(METHOD_LABELS).index("cash_eur"),
            format_func=METHOD_LABELS.get,
        )
        notes = st.text_input("Notes", placeholder="Optional")
        submitted = st.form_submit_button("💾 Record payment", use_container_width=True)
    return {
        "date": dt,
        "amount": float(amount or 0.0),
        "method": method,
        "notes": notes,
        "submit": bool(submitted),
    }


def render_override_form(lesson_id: str, current_rate: float, has_override: bool) -> dict:
    """Accounting rate of one lesson (€/h) with a required justification."""
    with st.form(f"override_form_{lesson_id}"):
        c1, c2 = st.columns([1, 2])
        rate = c1.number_input("Rate (€/h)", min_value=0.0, step=1.0, value=float(current_rate), format="%.2f")
        note = c2.text_input("Justification", placeholder="Required")
        b1, b2 = st.columns(2)
        submitted = b1.form_submit_button("💾 Save rate", use_container_width=True)
        remove = b2.form_submit_button(
            "↩️ Back to base rate", use_container_width=True, disabled=not has_override
        )
    return {"rate": float(rate or 0.0), "note": note, "submit": bool(submitted), "remove": bool(remove)}
